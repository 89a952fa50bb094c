from __future__ import annotations
from typing import Any, Dict, Optional

class ApiError(Exception):
    """Error con código HTTP y cuerpo JSON {error, details?}."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body

class InvalidInput(ApiError):
    status_code = 400

class ConfigurationError(ApiError):
    status_code = 500

class NotConfigured(ApiError):
    status_code = 500

class NotFound(ApiError):
    status_code = 404

class UpstreamError(ApiError):
    status_code = 500

class StorageError(ApiError):
    status_code = 500
