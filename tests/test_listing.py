from datetime import datetime, timedelta, timezone

import pytest

from frontpress.content import ContentItem, ContentMeta
from frontpress.listing import PublishedListing, publishable


def _item(slug: str, when: datetime, *, draft: bool = False) -> ContentItem:
    return ContentItem(
        meta=ContentMeta(title=slug.title(), date=when, draft=draft, slug=slug),
        body=f"Body of {slug}",
    )


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def test_orders_newest_first() -> None:
    items = [
        _item("march", _utc(2024, 3, 22)),
        _item("old", _utc(2023, 1, 1)),
        _item("june", _utc(2024, 6, 1)),
    ]

    assert [item.slug for item in publishable(items)] == ["june", "march", "old"]


def test_excludes_drafts() -> None:
    items = [
        _item("published", _utc(2024, 1, 1)),
        _item("draft", _utc(2024, 2, 1), draft=True),
    ]

    result = list(publishable(items))

    assert [item.slug for item in result] == ["published"]
    assert all(not item.draft for item in result)


def test_empty_input_yields_nothing() -> None:
    assert list(publishable([])) == []


def test_listing_is_restartable() -> None:
    items = (item for item in [_item("a", _utc(2024, 1, 1)), _item("b", _utc(2024, 1, 2))])
    listing = publishable(items)

    first = [item.slug for item in listing]
    second = [item.slug for item in listing]

    assert isinstance(listing, PublishedListing)
    assert first == second == ["b", "a"]


def test_equal_dates_keep_input_order() -> None:
    moment = _utc(2024, 1, 1)
    items = [_item("first", moment), _item("second", moment), _item("third", moment)]

    assert [item.slug for item in publishable(items)] == ["first", "second", "third"]


def test_as_of_hides_scheduled_items() -> None:
    items = [
        _item("past", _utc(2024, 1, 1)),
        _item("future", _utc(2030, 1, 1)),
    ]

    result = publishable(items, as_of=_utc(2025, 1, 1))

    assert [item.slug for item in result] == ["past"]


def test_compares_instants_across_offsets() -> None:
    plus_two = timezone(timedelta(hours=2))
    items = [
        _item("earlier", datetime(2024, 1, 1, 11, 0, tzinfo=plus_two)),  # 09:00 UTC
        _item("later", datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)),
    ]

    assert [item.slug for item in publishable(items)] == ["later", "earlier"]


def test_naive_as_of_is_rejected() -> None:
    with pytest.raises(ValueError):
        publishable([_item("a", _utc(2024, 1, 1))], as_of=datetime(2025, 1, 1))
