from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

IMAGES_ROUTE = "/api/images"

@dataclass(frozen=True)
class TimePeriod:
    id: str
    name: str
    prompt: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

@dataclass(frozen=True)
class StoredImage:
    key: str
    body: bytes
    content_type: Optional[str] = None
    etag: Optional[str] = None

@dataclass(frozen=True)
class ImageInfo:
    key: str
    size: int
    uploaded: Optional[datetime] = None

    @property
    def url(self) -> str:
        return image_url(self.key)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "url": self.url,
            "size": self.size,
            "uploaded": self.uploaded.isoformat() if self.uploaded else None,
        }

def image_url(key: str) -> str:
    return f"{IMAGES_ROUTE}/{key}"
