"""Select and order the content items eligible for publication."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Iterator, Sequence

from .content import ContentItem


class PublishedListing:
    """Restartable view over the publishable subset of a collection.

    Nothing is filtered or sorted until the listing is iterated, and every
    iteration recomputes the result from the original items.
    """

    def __init__(self, items: Iterable[ContentItem], *, as_of: datetime | None = None) -> None:
        if as_of is not None and as_of.utcoffset() is None:
            raise ValueError("as_of must be a timezone-aware datetime")
        self._items: Sequence[ContentItem] = tuple(items)
        self._as_of = as_of

    def __iter__(self) -> Iterator[ContentItem]:
        eligible = [item for item in self._items if self._is_eligible(item)]
        # sorted() is stable, so items sharing a date keep their input order.
        eligible = sorted(eligible, key=lambda item: item.date, reverse=True)
        return iter(eligible)

    def __repr__(self) -> str:
        return f"PublishedListing(items={len(self._items)}, as_of={self._as_of!r})"

    def _is_eligible(self, item: ContentItem) -> bool:
        if item.draft:
            return False
        if self._as_of is not None and item.date > self._as_of:
            return False
        return True


def publishable(items: Iterable[ContentItem], *, as_of: datetime | None = None) -> PublishedListing:
    """Return non-draft items newest first, optionally hiding items dated after ``as_of``."""
    return PublishedListing(items, as_of=as_of)
