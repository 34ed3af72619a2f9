"""High-level ingestion helpers to load content items from the workspace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .config import Config, ErrorPolicy
from .content import ContentError, ContentItem, load_content_item

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadFailure:
    """A content file that could not be turned into an item."""

    path: Path
    error: ContentError

    @property
    def kind(self) -> str:
        return self.error.kind


@dataclass(slots=True)
class IngestResult:
    """Items loaded from a workspace plus any files skipped along the way."""

    items: list[ContentItem] = field(default_factory=list)
    failures: list[LoadFailure] = field(default_factory=list)


def load_items(config: Config, *, on_error: ErrorPolicy | None = None) -> IngestResult:
    """Load every content file under the configured content directory.

    ``on_error`` overrides the configured policy. With ``HALT`` the first
    ``ContentError`` propagates; with ``SKIP`` it is logged and recorded.
    """
    policy = on_error or config.on_error
    result = IngestResult()
    root = config.content_dir
    if not root.exists():
        logger.debug("Content directory %s does not exist; nothing to load.", root)
        return result

    for path in iter_content_files(root, config.suffixes):
        logger.debug("Loading content file %s", path)
        try:
            item = load_content_item(path)
        except ContentError as exc:
            if policy is ErrorPolicy.HALT:
                raise
            logger.warning("Skipping %s (%s): %s", path, exc.kind, exc.args[0])
            result.failures.append(LoadFailure(path=path, error=exc))
            continue
        result.items.append(item)

    return result


def iter_content_files(root: Path, suffixes: Iterable[str]) -> Iterator[Path]:
    """Yield content files beneath ``root`` in a stable, directory-first order."""
    accepted = {suffix.lower() for suffix in suffixes}
    directories = sorted(p for p in root.rglob("*") if p.is_dir())
    directories.insert(0, root)

    for directory in directories:
        for path in sorted(directory.iterdir()):
            if path.is_file() and path.suffix.lower() in accepted:
                yield path
