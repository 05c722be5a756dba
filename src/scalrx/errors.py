from __future__ import annotations
from typing import Any, Optional

class ScalrError(Exception):
    """Base error for scalrx."""

class ConfigurationError(ScalrError):
    pass

class HttpError(ScalrError):
    def __init__(
        self, status_code: Optional[int], message: str, *, details: Optional[Any] = None
    ) -> None:
        super().__init__(f"HTTP {status_code}: {message}" if status_code else message)
        self.status_code = status_code
        self.message = message
        self.details = details

class RequestError(HttpError):
    """Transport failure, or a call context that was cancelled or expired."""

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(None, message, details=details)

class UnauthorizedError(HttpError):
    pass

class NotFoundError(HttpError):
    pass

class ValidationError(HttpError):
    """Rejected input, either by the service or by a local id check."""

    @classmethod
    def local(cls, message: str) -> ValidationError:
        return cls(None, message)

class DecodeError(RequestError):
    """A successful response whose body is not the expected JSON:API document."""
