"""Utilities for scaffolding new content items."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .config import Config

SLUG_PATTERN = re.compile(r"[^a-z0-9\-]+")
WHITESPACE_PATTERN = re.compile(r"\s+")


class ScaffoldError(RuntimeError):
    """Raised when scaffolding cannot continue."""


@dataclass(slots=True)
class ScaffoldResult:
    """Details about filesystem writes performed during scaffolding."""

    created: list[Path] = field(default_factory=list)
    updated: list[Path] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    def record(self, path: Path, existed: bool) -> None:
        if existed:
            self.updated.append(path)
        else:
            self.created.append(path)


def slugify(value: str) -> str:
    """Convert arbitrary text into a filesystem-safe slug."""
    text = value.strip().lower()
    text = WHITESPACE_PATTERN.sub("-", text)
    text = re.sub(r"_+", "-", text)
    text = SLUG_PATTERN.sub("-", text)
    text = re.sub(r"-{2,}", "-", text)
    return text.strip("-")


def normalize_slug(raw: str) -> str:
    """Convert arbitrary user input into a slug, rejecting unusable input."""
    slug = slugify(raw)
    if not slug:
        raise ScaffoldError("Unable to derive a valid slug. Provide letters, numbers, or hyphens.")
    return slug


def default_title(slug: str) -> str:
    """Generate a human-friendly title from a slug."""
    words = [word.capitalize() for word in slug.split("-") if word]
    return " ".join(words) or "Untitled"


def scaffold_post(
    config: Config,
    slug: str,
    title: str | None = None,
    *,
    force: bool = False,
    now: datetime | None = None,
) -> ScaffoldResult:
    """Create a draft post with TOML front matter under ``content/posts``."""
    slug = normalize_slug(slug)
    title = title.strip() if title else ""
    if not title:
        title = default_title(slug)

    moment = now or datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    moment = moment.replace(microsecond=0)
    post_path = config.content_dir / "posts" / f"{slug}.md"
    existed = _write_text(post_path, render_front_matter(title, moment), force=force)

    result = ScaffoldResult()
    result.record(post_path, existed)
    result.notes.append("Set draft = false once the post is ready to publish.")
    return result


def render_front_matter(title: str, moment: datetime) -> str:
    """Render a draft front-matter block followed by a placeholder body."""
    return (
        "+++\n"
        f"title = {_toml_string(title)}\n"
        f"date = {moment.isoformat()}\n"
        "draft = true\n"
        "summary = ''\n"
        "+++\n"
        "Markdown body starts here.\n"
    )


def _toml_string(value: str) -> str:
    # Literal strings cannot hold a single quote or newlines; fall back to a basic string.
    if "'" not in value and "\n" not in value:
        return f"'{value}'"
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _write_text(path: Path, content: str, *, force: bool) -> bool:
    path.parent.mkdir(parents=True, exist_ok=True)
    existed = path.exists()
    if existed and not force:
        raise ScaffoldError(f"Path already exists: {path}")
    path.write_text(content, encoding="utf-8")
    return existed
