"""Validate front-matter mappings into `ContentMeta` instances."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from .errors import InvalidFieldType, MissingRequiredField
from .models import ContentMeta

REQUIRED_FIELDS = ("title", "date")
KNOWN_FIELDS = frozenset(ContentMeta.model_fields) - {"params"}
EXPECTED_TYPES = {
    "title": "string",
    "date": "timestamp",
    "draft": "boolean",
    "summary": "string",
    "slug": "string",
    "tags": "list of strings",
}


def validate_metadata(
    data: Mapping[str, Any],
    *,
    source_path: str | Path | None = None,
) -> ContentMeta:
    """Check required keys and types, returning the validated metadata.

    ``draft`` defaults to false and is coerced from boolean-like values,
    ``summary`` passes through unchanged, and keys the model does not know
    are collected under ``params``. When ``slug`` is absent it is derived
    from the stem of ``source_path``.
    """
    for key in REQUIRED_FIELDS:
        if data.get(key) is None:
            raise MissingRequiredField(key)

    payload: dict[str, Any] = {}
    params: dict[str, Any] = {}
    for key, value in data.items():
        if key in KNOWN_FIELDS:
            if value is not None:
                payload[key] = value
        else:
            params[key] = value
    payload["params"] = params

    if not isinstance(payload["date"], (datetime, str)):
        raise InvalidFieldType("date", EXPECTED_TYPES["date"])
    if "slug" not in payload and source_path is not None:
        payload["slug"] = _slug_from_path(Path(source_path))

    try:
        return ContentMeta(**payload)
    except ValidationError as exc:
        key, detail = _first_error(exc)
        raise InvalidFieldType(key, EXPECTED_TYPES.get(key, "valid value"), detail=detail) from exc


def _first_error(exc: ValidationError) -> tuple[str, str]:
    first = exc.errors()[0]
    location = first.get("loc") or ("metadata",)
    return str(location[0]), first.get("msg", "")


def _slug_from_path(path: Path) -> str:
    stem = path.stem
    # Leaf bundles keep their content in index.md; the directory names the item.
    if stem in {"index", "_index"} and path.parent.name:
        stem = path.parent.name
    return stem.replace(" ", "-").lower()
