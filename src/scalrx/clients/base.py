"""Shared request plumbing for the per-resource services."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar, cast
from urllib.parse import quote

import httpx

from ..context import CallContext
from ..errors import DecodeError, ValidationError
from ..http_client import HttpClient
from ..jsonapi import dump_document, load_one, load_page
from ..models.common import Resource, WriteOptions, valid_string_id
from ..pagination import ListOptions, Page, iter_items, iter_pages

ResourceT = TypeVar("ResourceT", bound=Resource)
OptionsT = TypeVar("OptionsT", bound=ListOptions)


class ResourceService(Generic[ResourceT]):
    """CRUD helpers bound to one JSON:API collection.

    Subclasses set ``collection`` (URL segment and JSON:API type),
    ``model`` and ``noun`` (used in id validation messages).
    """

    collection: str
    model: type[ResourceT]
    noun: str

    def __init__(self, http: HttpClient) -> None:
        self.http = http

    @staticmethod
    def _parse_response_dict(resp: httpx.Response) -> dict[str, Any]:
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(f"invalid JSON in response body: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError("expected a JSON object in response body")
        return cast(dict[str, Any], data)

    def _member_path(self, resource_id: str, suffix: str = "") -> str:
        if not valid_string_id(resource_id):
            raise ValidationError.local(f"invalid value for {self.noun} ID")
        path = f"{self.collection}/{quote(resource_id, safe='')}"
        return f"{path}/{suffix}" if suffix else path

    def _list(self, options: ListOptions, *, ctx: CallContext | None) -> Page[ResourceT]:
        resp = self.http.get(self.collection, params=options.to_params(), ctx=ctx)
        return load_page(self._parse_response_dict(resp), self.model)

    def _create(self, options: WriteOptions, *, ctx: CallContext | None) -> ResourceT:
        body = dump_document(self.collection, options, options.relationships)
        resp = self.http.post(self.collection, json=body, ctx=ctx)
        return load_one(self._parse_response_dict(resp), self.model)

    def _read(
        self,
        resource_id: str,
        *,
        params: dict[str, Any] | None = None,
        ctx: CallContext | None,
    ) -> ResourceT:
        resp = self.http.get(self._member_path(resource_id), params=params, ctx=ctx)
        return load_one(self._parse_response_dict(resp), self.model)

    def _update(
        self, resource_id: str, options: WriteOptions, *, ctx: CallContext | None
    ) -> ResourceT:
        path = self._member_path(resource_id)
        body = dump_document(self.collection, options, options.relationships)
        resp = self.http.patch(path, json=body, ctx=ctx)
        return load_one(self._parse_response_dict(resp), self.model)

    def _delete(self, resource_id: str, *, ctx: CallContext | None) -> None:
        self.http.delete(self._member_path(resource_id), ctx=ctx)


class ListableService(ResourceService[ResourceT], Generic[ResourceT, OptionsT]):
    """Service whose collection supports paged listing."""

    options_type: type[OptionsT]

    def list(
        self, options: OptionsT | None = None, *, ctx: CallContext | None = None
    ) -> Page[ResourceT]:
        """Fetch exactly one page for ``options``."""

        return self._list(options or self.options_type(), ctx=ctx)

    def iter_pages(
        self, options: OptionsT | None = None, *, ctx: CallContext | None = None
    ) -> Iterator[Page[ResourceT]]:
        """Yield pages from ``options.page_number`` onward."""

        return iter_pages(lambda opts: self.list(opts, ctx=ctx), options or self.options_type())

    def iter_all(
        self, options: OptionsT | None = None, *, ctx: CallContext | None = None
    ) -> Iterator[ResourceT]:
        """Yield every matching item across pages."""

        return iter_items(lambda opts: self.list(opts, ctx=ctx), options or self.options_type())


__all__ = ["ListableService", "ResourceService"]
