from __future__ import annotations
import logging
import mimetypes
from typing import List, Optional, Protocol
from botocore.exceptions import ClientError
from .aws import s3_client
from .config import Settings
from .models import ImageInfo, StoredImage

logger = logging.getLogger(__name__)

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}

class ImageStore(Protocol):
    def put(self, key: str, data: bytes, content_type: Optional[str] = None) -> None: ...
    def get(self, key: str) -> Optional[StoredImage]: ...
    def list(self) -> List[ImageInfo]: ...

class S3ImageStore:
    """Bucket S3 donde se guardan las imágenes generadas."""

    def __init__(self, bucket: str, client=None):
        self.bucket = bucket
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = s3_client()
        return self._client

    def put(self, key: str, data: bytes, content_type: Optional[str] = None) -> None:
        ct = content_type or (mimetypes.guess_type(key)[0] or "application/octet-stream")
        self.client.put_object(Bucket=self.bucket, Key=key, Body=data, ContentType=ct)

    def get(self, key: str) -> Optional[StoredImage]:
        try:
            res = self.client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in _MISSING_CODES:
                return None
            raise
        body = res["Body"]
        try:
            data = body.read()
        finally:
            body.close()
        return StoredImage(
            key=key,
            body=data,
            content_type=res.get("ContentType"),
            etag=res.get("ETag"),
        )

    def list(self) -> List[ImageInfo]:
        out: List[ImageInfo] = []
        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket):
            for obj in page.get("Contents") or []:
                out.append(ImageInfo(
                    key=obj["Key"],
                    size=obj.get("Size", 0),
                    uploaded=obj.get("LastModified"),
                ))
        return out

def store_from_settings(cfg: Settings) -> Optional[S3ImageStore]:
    if not cfg.s3_bucket_images:
        logger.info("S3_BUCKET_IMAGES not set; images will be returned inline")
        return None
    return S3ImageStore(cfg.s3_bucket_images)
