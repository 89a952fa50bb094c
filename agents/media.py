from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from shared.errors import NotConfigured, NotFound, StorageError
from shared.models import StoredImage
from shared.s3 import ImageStore

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "image/png"

def _require(store: Optional[ImageStore]) -> ImageStore:
    if store is None:
        raise NotConfigured("Image bucket not configured")
    return store

def fetch_image(filename: str, store: Optional[ImageStore]) -> StoredImage:
    logger.info("Retrieving image from bucket: %s", filename)
    bucket = _require(store)
    try:
        obj = bucket.get(filename)
    except Exception as e:
        logger.exception("Error serving image %s", filename)
        raise StorageError("Failed to retrieve image", details=str(e)) from e
    if obj is None:
        logger.info("Image not found: %s", filename)
        raise NotFound("Image not found")
    return obj

def image_headers(obj: StoredImage, max_age: int = 31536000) -> Dict[str, str]:
    headers = {
        "Content-Type": obj.content_type or DEFAULT_CONTENT_TYPE,
        "Cache-Control": f"public, max-age={max_age}",
    }
    if obj.etag:
        headers["ETag"] = obj.etag
    return headers

def list_images(store: Optional[ImageStore]) -> Dict[str, Any]:
    logger.info("Listing all images in bucket")
    bucket = _require(store)
    try:
        items = bucket.list()
    except Exception as e:
        logger.exception("Error listing images")
        raise StorageError("Failed to list images", details=str(e)) from e
    images = [it.to_dict() for it in items]
    return {"images": images, "count": len(images)}
