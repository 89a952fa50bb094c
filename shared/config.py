from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    aws_region: str = os.getenv("AWS_REGION", "us-west-2")
    stage: str = os.getenv("STAGE", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # OpenAI
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_image_model: str = os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1")
    openai_image_moderation: str = os.getenv("OPENAI_IMAGE_MODERATION", "low")

    # S3 (vacío = sin bucket, se devuelven data URIs)
    s3_bucket_images: str = os.getenv("S3_BUCKET_IMAGES", "")
    # endpoint opcional para stores compatibles con S3 (R2, MinIO)
    s3_endpoint_url: str = os.getenv("S3_ENDPOINT_URL", "")
    image_cache_max_age: int = int(os.getenv("IMAGE_CACHE_MAX_AGE", "31536000"))

settings = Settings()
