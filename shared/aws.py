from __future__ import annotations
import boto3
from botocore.config import Config
from .config import settings

_s3 = None

def s3_client():
    """Cliente S3 compartido; respeta S3_ENDPOINT_URL para buckets R2/MinIO."""
    global _s3
    if _s3 is None:
        _s3 = boto3.client(
            "s3",
            region_name=settings.aws_region,
            endpoint_url=settings.s3_endpoint_url or None,
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": "path" if settings.s3_endpoint_url else "virtual"},
            ),
        )
    return _s3
