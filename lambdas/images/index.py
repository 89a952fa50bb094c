from __future__ import annotations
import base64
import json
import logging
from typing import Any, Dict, Optional
from shared.config import settings
from shared.errors import ApiError
from shared.log import configure_logging
from shared.s3 import ImageStore, store_from_settings
from agents.media import fetch_image, image_headers, list_images

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

_store = store_from_settings(settings)

def _ok(body, code=200):
    return {"statusCode": code, "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body, ensure_ascii=False)}

def _binary(data: bytes, headers: Dict[str, str]):
    return {"statusCode": 200, "headers": headers, "isBase64Encoded": True,
            "body": base64.b64encode(data).decode("ascii")}

def handle(event: Dict[str, Any], *, store: Optional[ImageStore]):
    """
    GET /api/images            -> listado {images, count}
    GET /api/images/{filename} -> imagen binaria (base64 para API Gateway)
    """
    params = event.get("pathParameters") or {}
    filename = params.get("filename")
    try:
        if filename:
            obj = fetch_image(filename, store)
            return _binary(obj.body, image_headers(obj, settings.image_cache_max_age))
        return _ok(list_images(store))
    except ApiError as e:
        return _ok(e.to_body(), e.status_code)
    except Exception:
        logger.exception("Error handling images request")
        return _ok({"error": "Failed to process request"}, 500)

def handler(event, _ctx):
    return handle(event, store=_store)
