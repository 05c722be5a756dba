from __future__ import annotations

import json as jsonlib
import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any

import httpx

from .context import CallContext
from .errors import (
    HttpError,
    NotFoundError,
    RequestError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

_VALIDATION_STATUSES = {400, 409, 422}


def _error_messages(resp: httpx.Response) -> tuple[list[str], Any]:
    try:
        payload = resp.json()
    except ValueError:
        return [], resp.text or None
    errors = payload.get("errors") if isinstance(payload, dict) else None
    if not isinstance(errors, list):
        return [], payload
    messages: list[str] = []
    for item in errors:
        if not isinstance(item, dict):
            continue
        title = item.get("title") or ""
        detail = item.get("detail") or ""
        messages.append(f"{title}\n\n{detail}" if detail else title)
    return [m for m in messages if m], payload


def check_response(resp: httpx.Response) -> None:
    """Raise the error matching a non-2xx ``resp``."""

    if 200 <= resp.status_code <= 299:
        return
    if resp.status_code == 401:
        raise UnauthorizedError(401, "unauthorized")

    messages, details = _error_messages(resp)
    message = "\n".join(messages)
    if resp.status_code == 404:
        raise NotFoundError(404, message or "resource not found", details=details)
    if resp.status_code in _VALIDATION_STATUSES:
        raise ValidationError(resp.status_code, message or resp.reason_phrase, details=details)
    raise HttpError(resp.status_code, message or resp.reason_phrase, details=details)


class HttpClient:
    """Thin httpx wrapper that injects Authorization and JSON:API headers and maps errors.

    Every call is a single attempt; there is no retry loop.
    """

    def __init__(
        self,
        base_url: str,
        token_getter: Callable[[], str] | None = None,
        default_headers: dict[str, str] | None = None,
        timeout: float | None = 60.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token_getter = token_getter
        self._client = httpx.Client(timeout=timeout)
        self._default_headers = default_headers or {}
        self._timeout = timeout

    def _auth_header(self) -> dict[str, str]:
        if not self._token_getter:
            return {}
        token = self._token_getter()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _merge_headers(self, *layers: dict[str, str]) -> dict[str, str]:
        merged: dict[str, tuple[str, str]] = {}
        for layer in layers:
            for key, value in layer.items():
                merged[key.lower()] = (key, value)
        return dict(merged.values())

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        ctx: CallContext | None = None,
    ) -> httpx.Response:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}/{path.lstrip('/')}"

        negotiated = {"Accept": JSONAPI_MEDIA_TYPE}
        request_kwargs: dict[str, Any] = {"params": params}
        if method in {"POST", "PATCH", "DELETE"}:
            negotiated["Content-Type"] = JSONAPI_MEDIA_TYPE
            if json is not None:
                request_kwargs["content"] = jsonlib.dumps(json)
        request_kwargs["headers"] = self._merge_headers(
            self._default_headers, negotiated, headers or {}, self._auth_header()
        )

        timeout = self._timeout
        if ctx is not None:
            ctx.check()
            remaining = ctx.remaining()
            if remaining is not None:
                timeout = remaining if timeout is None else min(timeout, remaining)
        request_kwargs["timeout"] = timeout

        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = self._client.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            raise RequestError(f"Transport error: {e}") from e
        except httpx.InvalidURL as e:
            raise RequestError(f"Invalid URL: {e}") from e

        check_response(resp)
        return resp

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client`."""

        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
