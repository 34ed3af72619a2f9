"""Parse source files into `ContentItem` instances."""

from __future__ import annotations

import io
import tomllib
from pathlib import Path
from typing import Any

import yaml

from .errors import ContentError, MalformedFrontMatter, MissingFrontMatter
from .metadata import validate_metadata
from .models import ContentItem

TOML_FENCE = "+++"
YAML_FENCE = "---"
BYTE_ORDER_MARK = "\ufeff"
FENCE_PADDING = " \t\r\n"


def load_content_item(path: str | Path) -> ContentItem:
    """Load a content file with TOML or YAML front matter into a content item."""
    source_path = Path(path)
    try:
        return parse_content_item(source_path.read_bytes(), source_path=source_path)
    except ContentError as exc:
        exc.source_path = str(source_path)
        raise


def parse_content_item(source: bytes | str, *, source_path: str | Path | None = None) -> ContentItem:
    """Split, validate and assemble a content item from raw source text."""
    front_matter, body = split_front_matter(source)
    meta = validate_metadata(front_matter, source_path=source_path)
    return ContentItem(
        meta=meta,
        body=body,
        source_path=str(source_path) if source_path is not None else None,
    )


def split_front_matter(source: bytes | str) -> tuple[dict[str, Any], str]:
    """Return the parsed front-matter mapping and the verbatim body that follows it."""
    text = _decode(source)
    lines = io.StringIO(text, newline="").readlines()
    if not lines:
        raise MissingFrontMatter("Source is empty; expected an opening '+++' fence.")

    fence = lines[0].rstrip(FENCE_PADDING)
    if fence not in (TOML_FENCE, YAML_FENCE):
        raise MissingFrontMatter("Front matter must start with a '+++' or '---' fence on the first line.")

    for idx, line in enumerate(lines[1:], start=1):
        if line.rstrip(FENCE_PADDING) == fence:
            raw_front_matter = "".join(lines[1:idx])
            body = "".join(lines[idx + 1 :])
            if fence == TOML_FENCE:
                return _load_toml(raw_front_matter), body
            return _load_yaml(raw_front_matter), body
    raise MalformedFrontMatter(f"Closing front matter delimiter '{fence}' missing.")


def _decode(source: bytes | str) -> str:
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedFrontMatter(f"Source is not valid UTF-8: {exc}") from exc
    return source.removeprefix(BYTE_ORDER_MARK)


def _load_toml(raw: str) -> dict[str, Any]:
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise MalformedFrontMatter(f"Invalid TOML front matter: {exc}") from exc


def _load_yaml(raw: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise MalformedFrontMatter(f"Invalid YAML front matter: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatter(
            f"YAML front matter must define a mapping, got {type(data).__name__}."
        )
    return data
