from __future__ import annotations
import logging
from typing import Any, Optional
from openai import OpenAI, OpenAIError
from shared.config import Settings
from shared.errors import UpstreamError

logger = logging.getLogger(__name__)

UPSTREAM_FAILED = "Failed to generate image with OpenAI"

class ImageEditor:
    """Envía una imagen + instrucción al endpoint images.edit de OpenAI."""

    def __init__(self, api_key: str, model: str = "gpt-image-1",
                 moderation: str = "low", client: Optional[Any] = None):
        self.model = model
        self.moderation = moderation
        self._client = client or OpenAI(api_key=api_key)

    def edit(self, image: bytes, prompt: str) -> str:
        """Devuelve la imagen generada en base64 (b64_json)."""
        logger.info("Calling OpenAI images.edit model=%s", self.model)
        try:
            result = self._client.images.edit(
                model=self.model,
                image=("image.png", image, "image/png"),
                prompt=prompt,
                moderation=self.moderation,
            )
        except OpenAIError as e:
            logger.error("OpenAI API error: %s", e)
            raise UpstreamError(UPSTREAM_FAILED, details=str(e) or "Unknown OpenAI error") from e

        data = getattr(result, "data", None)
        if not data or data[0] is None:
            logger.error("Unexpected OpenAI response format")
            raise UpstreamError(UPSTREAM_FAILED, details="OpenAI returned invalid response format")

        b64 = getattr(data[0], "b64_json", None)
        if not b64:
            logger.error("No image data in OpenAI response")
            raise UpstreamError(
                "No image returned from OpenAI",
                details="The API response did not include image data",
            )
        logger.info("Successfully generated image")
        return b64

def make_image_editor(api_key: str, cfg: Settings) -> ImageEditor:
    return ImageEditor(
        api_key=api_key,
        model=cfg.openai_image_model,
        moderation=cfg.openai_image_moderation,
    )
