from __future__ import annotations
import base64
import json
import logging
from typing import Any, Callable, Dict, Optional
from shared.config import settings
from shared.errors import ApiError
from shared.log import configure_logging
from shared.s3 import ImageStore, store_from_settings
from agents.image_edit import make_image_editor
from agents.time_travel import Editor, time_travel

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

_store = store_from_settings(settings)

def _ok(body, code=200):
    return {"statusCode": code, "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body, ensure_ascii=False)}

def handle(
    event: Dict[str, Any],
    *,
    api_key: Optional[str],
    store: Optional[ImageStore],
    make_editor: Callable[[str], Editor],
):
    body = event.get("body") or "{}"
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body)
    except ValueError:
        # time_travel responde 400 tras comprobar la credencial
        payload = None

    try:
        return _ok(time_travel(payload, api_key=api_key, store=store, make_editor=make_editor))
    except ApiError as e:
        return _ok(e.to_body(), e.status_code)
    except Exception:
        logger.exception("Error processing request")
        return _ok({"error": "Failed to process request"}, 500)

def handler(event, _ctx):
    return handle(
        event,
        api_key=settings.openai_api_key,
        store=_store,
        make_editor=lambda key: make_image_editor(key, settings),
    )
