"""Base classes shared by the typed resource models and option values."""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

_STRING_ID = re.compile(r"[a-zA-Z0-9\-._]+")


def valid_string_id(value: str | None) -> bool:
    """Return ``True`` when ``value`` is safe to use as a path segment."""

    return value is not None and _STRING_ID.fullmatch(value) is not None


class Resource(BaseModel):
    """A remote record identified by an opaque, prefixed id."""

    id: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ResourceRef(Resource):
    """Reference to a related resource this package does not model in full."""


class WriteOptions(BaseModel):
    """Create/update payload; only fields explicitly set are sent.

    ``relationships`` maps field names to the related JSON:API type.
    """

    relationships: ClassVar[dict[str, str]] = {}

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


__all__ = ["Resource", "ResourceRef", "WriteOptions", "valid_string_id"]
