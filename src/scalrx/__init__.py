"""Python client and example workflows for the Scalr IaC platform API."""

from __future__ import annotations

from .client import ScalrClient
from .config import ClientConfig, default_config
from .context import CallContext
from .errors import (
    ConfigurationError,
    DecodeError,
    HttpError,
    NotFoundError,
    RequestError,
    ScalrError,
    UnauthorizedError,
    ValidationError,
)
from .pagination import ListOptions, Page, Pagination

__all__ = [
    "CallContext",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "HttpError",
    "ListOptions",
    "NotFoundError",
    "Page",
    "Pagination",
    "RequestError",
    "ScalrClient",
    "ScalrError",
    "UnauthorizedError",
    "ValidationError",
    "default_config",
]
