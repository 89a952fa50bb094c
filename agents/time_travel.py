from __future__ import annotations
import base64
import binascii
import logging
import re
import time
from typing import Any, Callable, Dict, Optional, Protocol
from shared.eras import find_time_period
from shared.errors import ConfigurationError, InvalidInput
from shared.models import TimePeriod, image_url
from shared.s3 import ImageStore

logger = logging.getLogger(__name__)

_DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,")

class Editor(Protocol):
    def edit(self, image: bytes, prompt: str) -> str: ...

def build_prompt(period: TimePeriod) -> str:
    return (
        f"Transform the provided image into a photorealistic scene taking place in the {period.prompt}. "
        "**It is essential to retain the original subjects' identity, features, and the overall "
        "composition of the scene.** Modify the setting, clothing, and surrounding elements to "
        f"accurately reflect the style and atmosphere of the {period.prompt}. The final image should "
        "clearly show the original subject transported to this different time period."
    )

def decode_image_data(image_data: str) -> bytes:
    b64 = "".join(_DATA_URI_PREFIX.sub("", image_data.strip(), count=1).split())
    try:
        raw = base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInput("Invalid image data", details=str(e)) from e
    if not raw:
        raise InvalidInput("Invalid image data", details="Image payload is empty")
    return raw

def make_filename(period: TimePeriod, now_ms: Optional[int] = None) -> str:
    ts = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"timetravel-{period.id}-{ts}.png"

def _inline(b64: str, period: TimePeriod, storage_error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "success": True,
        "image": f"data:image/png;base64,{b64}",
        "stored": False,
        "timeperiod": period.to_dict(),
    }
    if storage_error is not None:
        out["storageError"] = storage_error
    return out

def time_travel(
    payload: Any,
    *,
    api_key: Optional[str],
    store: Optional[ImageStore],
    make_editor: Callable[[str], Editor],
    now_ms: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Pipeline completo de una petición:
      1) valida credencial, forma del cuerpo, parámetros y periodo.
         payload puede ser cualquier JSON (o None si no se pudo parsear).
      2) decodifica la imagen (acepta data URI o base64 plano).
      3) llama a images.edit con el prompt del periodo.
      4) guarda el resultado en el bucket si existe; si no, o si falla, data URI.
    """
    if not api_key:
        logger.warning("OpenAI API key not configured")
        raise ConfigurationError(
            "OpenAI API key not configured",
            details="Please add OPENAI_API_KEY to your environment variables",
        )

    if not isinstance(payload, dict):
        logger.info("Request body is not a JSON object")
        raise InvalidInput("Invalid JSON body")

    timeperiod = payload.get("timeperiod")
    image_data = payload.get("imageData")
    logger.info("Received time travel request for period: %s", timeperiod)

    if not timeperiod or not image_data:
        logger.info("Missing required parameters")
        raise InvalidInput("Missing required parameters")
    if not isinstance(timeperiod, str) or not isinstance(image_data, str):
        raise InvalidInput("Invalid request parameters", details="timeperiod and imageData must be strings")

    period = find_time_period(timeperiod)
    if period is None:
        logger.info("Invalid time period: %s", timeperiod)
        raise InvalidInput("Invalid time period")

    source = decode_image_data(image_data)
    prompt = build_prompt(period)
    logger.info("Generating image for period: %s", period.name)
    logger.debug("Using prompt: %s", prompt)

    b64 = make_editor(api_key).edit(source, prompt)

    if store is None:
        logger.info("No image bucket available, returning data URI")
        return _inline(b64, period)

    filename = make_filename(period, now_ms)
    try:
        logger.info("Storing image in bucket with key: %s", filename)
        store.put(filename, base64.b64decode(b64), "image/png")
    except Exception as e:
        # se degrada a data URI en vez de fallar la petición
        logger.exception("Error storing image %s", filename)
        return _inline(b64, period, storage_error=str(e) or type(e).__name__)

    return {
        "success": True,
        "image": image_url(filename),
        "stored": True,
        "filename": filename,
        "timeperiod": period.to_dict(),
    }
