from __future__ import annotations
import base64
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from shared.models import ImageInfo, StoredImage

# firma PNG + algo de relleno; el editor falso no inspecciona el contenido
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + bytes(range(32))
PNG_B64 = base64.b64encode(PNG_BYTES).decode()
GENERATED_BYTES = b"\x89PNG\r\n\x1a\n" + b"generated-image"
GENERATED_B64 = base64.b64encode(GENERATED_BYTES).decode()


class MemoryStore:
    def __init__(self):
        self.objects: Dict[str, StoredImage] = {}
        self.uploaded = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def put(self, key: str, data: bytes, content_type: Optional[str] = None) -> None:
        self.objects[key] = StoredImage(key=key, body=data, content_type=content_type,
                                        etag=f'"etag-{len(self.objects)}"')

    def get(self, key: str) -> Optional[StoredImage]:
        return self.objects.get(key)

    def list(self) -> List[ImageInfo]:
        return [ImageInfo(key=k, size=len(o.body), uploaded=self.uploaded)
                for k, o in self.objects.items()]


class BrokenStore(MemoryStore):
    def put(self, key, data, content_type=None):
        raise RuntimeError("bucket unavailable")

    def get(self, key):
        raise RuntimeError("bucket unavailable")

    def list(self):
        raise RuntimeError("bucket unavailable")


class FakeEditor:
    def __init__(self, result: str = GENERATED_B64, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls = []

    def edit(self, image: bytes, prompt: str) -> str:
        self.calls.append((image, prompt))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def editor():
    return FakeEditor()
