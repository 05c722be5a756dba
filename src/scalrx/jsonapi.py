"""Encode option values into JSON:API documents and decode responses into models."""

from __future__ import annotations

from typing import Any, TypeVar, cast

import pydantic
from pydantic import BaseModel

from .errors import DecodeError
from .pagination import Page, Pagination

ModelT = TypeVar("ModelT", bound=BaseModel)

ResourceKey = tuple[str, str]


def _index_included(payload: dict[str, Any]) -> dict[ResourceKey, dict[str, Any]]:
    index: dict[ResourceKey, dict[str, Any]] = {}
    for obj in payload.get("included") or []:
        if isinstance(obj, dict) and "type" in obj and "id" in obj:
            index[(obj["type"], obj["id"])] = obj
    return index


def _resolve_linkage(
    linkage: dict[str, Any], included: dict[ResourceKey, dict[str, Any]]
) -> dict[str, Any]:
    ref: dict[str, Any] = {"id": linkage.get("id")}
    full = included.get((linkage.get("type", ""), linkage.get("id", "")))
    if full:
        ref.update(full.get("attributes") or {})
        for name, rel in (full.get("relationships") or {}).items():
            data = rel.get("data") if isinstance(rel, dict) else None
            if isinstance(data, dict):
                ref[name] = {"id": data.get("id")}
            elif isinstance(data, list):
                ref[name] = [{"id": item.get("id")} for item in data]
    return ref


def flatten_resource(
    obj: dict[str, Any], included: dict[ResourceKey, dict[str, Any]] | None = None
) -> dict[str, Any]:
    """Merge a resource object's id, attributes and relationships into one dict.

    Relationship linkage is replaced by ``{"id": ...}`` or, when the document
    carries the related resource in ``included``, by its attributes as well.
    """

    included = included or {}
    flat: dict[str, Any] = {"id": obj.get("id")}
    flat.update(obj.get("attributes") or {})
    for name, rel in (obj.get("relationships") or {}).items():
        if not isinstance(rel, dict) or "data" not in rel:
            continue
        data = rel["data"]
        if data is None:
            flat[name] = None
        elif isinstance(data, list):
            flat[name] = [_resolve_linkage(item, included) for item in data]
        else:
            flat[name] = _resolve_linkage(data, included)
    return flat


def _validate(model: type[ModelT], flat: dict[str, Any]) -> ModelT:
    # A cleared to-many relationship arrives as ``None``.
    for name, field in model.model_fields.items():
        if field.default_factory is not list:
            continue
        for key in {name, field.alias or name}:
            if key in flat and flat[key] is None:
                flat[key] = []
    try:
        return model.model_validate(flat)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"unexpected {model.__name__} record: {exc}") from exc


def load_one(payload: dict[str, Any], model: type[ModelT]) -> ModelT:
    data = payload.get("data")
    if not isinstance(data, dict):
        raise DecodeError("expected a single resource object in 'data'")
    return _validate(model, flatten_resource(data, _index_included(payload)))


def load_many(payload: dict[str, Any], model: type[ModelT]) -> list[ModelT]:
    data = payload.get("data") or []
    if not isinstance(data, list) or not all(isinstance(obj, dict) for obj in data):
        raise DecodeError("expected a list of resource objects in 'data'")
    included = _index_included(payload)
    return [_validate(model, flatten_resource(obj, included)) for obj in data]


def parse_pagination(payload: dict[str, Any], item_count: int) -> Pagination:
    """Read ``meta.pagination``; a document without it is a single full page."""

    meta = payload.get("meta")
    raw = meta.get("pagination") if isinstance(meta, dict) else None
    if isinstance(raw, dict):
        try:
            return Pagination.model_validate(raw)
        except pydantic.ValidationError as exc:
            raise DecodeError(f"unexpected pagination metadata: {exc}") from exc
    return Pagination(current_page=1, total_pages=1, total_count=item_count)


def load_page(payload: dict[str, Any], model: type[ModelT]) -> Page[ModelT]:
    items = load_many(payload, model)
    return Page(items=items, pagination=parse_pagination(payload, len(items)))


def _linkage(resource_type: str, value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [{"type": resource_type, "id": str(item)} for item in value]
    return {"type": resource_type, "id": str(value)}


def dump_document(
    resource_type: str,
    options: BaseModel,
    relationships: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a JSON:API document holding only the fields set on ``options``.

    ``relationships`` maps option field names to the related resource type.
    Relationship fields take resource ids; an explicit ``None`` clears the
    relationship.
    """

    relationships = relationships or {}
    fields_set = options.model_fields_set
    attributes = cast(
        dict[str, Any],
        options.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude=set(relationships),
            mode="json",
        ),
    )
    data: dict[str, Any] = {"type": resource_type, "attributes": attributes}
    rels: dict[str, Any] = {}
    model_fields = type(options).model_fields
    for name, related_type in relationships.items():
        if name not in fields_set:
            continue
        key = model_fields[name].alias or name
        rels[key] = {"data": _linkage(related_type, getattr(options, name))}
    if rels:
        data["relationships"] = rels
    return {"data": data}


__all__ = [
    "dump_document",
    "flatten_resource",
    "load_many",
    "load_one",
    "load_page",
    "parse_pagination",
]
