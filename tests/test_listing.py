# -*- coding: utf-8 -*-
"""
tests.test_listing

Unit tests for pagination windows, sort parsing and list composition.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from recordadmin.core.capabilities import SortOrder
from recordadmin.core.exceptions import ListingError
from recordadmin.core.listing import (
    ListComposer,
    page_window,
    parse_sort,
    row_cells,
    sort_directions,
    total_pages,
)
from recordadmin.core.model import ModelAdmin
from tests.sample_records import (
    AsyncAccessor,
    RecordingAccessor,
    StubSearcher,
    Widget,
    widgets,
)


def _admin(accessor=None, **options) -> ModelAdmin:
    options.setdefault("list_fields", {"id": True, "name": True, "price": False})
    return ModelAdmin(
        name="Widget",
        accessor=accessor if accessor is not None else RecordingAccessor(widgets(25)),
        **options,
    )


def test_total_pages() -> None:
    assert total_pages(0, 100) == 0
    assert total_pages(250, 100) == 3
    assert total_pages(100, 100) == 1
    assert total_pages(1, 100) == 1


def test_window_centres_on_current_page() -> None:
    assert page_window(1000, 10, 50, 8).pages == tuple(range(46, 54))
    assert page_window(1000, 10, 0, 8).pages == tuple(range(0, 8))
    assert page_window(1000, 10, 99, 8).pages == tuple(range(92, 100))


def test_window_is_narrow_when_pages_are_few() -> None:
    window = page_window(250, 100, 1, 8)

    assert window.pages == (0, 1, 2)
    assert window.total_pages == 3
    assert window.last_page == 2


def test_window_is_empty_without_records() -> None:
    window = page_window(0, 100, 0, 8)

    assert window.pages == ()
    assert window.last_page == -1


def test_window_stays_within_bounds_and_contiguous() -> None:
    for count in (1, 7, 80, 99, 100, 101, 1234):
        pages_total = total_pages(count, 10)
        for page in range(pages_total):
            for show in (1, 2, 5, 8):
                pages = page_window(count, 10, page, show).pages
                assert len(pages) == min(show, pages_total)
                assert pages[0] >= 0
                assert pages[-1] <= pages_total - 1
                assert page in pages
                assert list(pages) == list(range(pages[0], pages[-1] + 1))


def test_parse_sort() -> None:
    assert parse_sort("Name") == SortOrder("Name", ascending=True)
    assert parse_sort("-Name") == SortOrder("Name", ascending=False)
    assert parse_sort("") is None
    assert parse_sort(None) is None
    assert parse_sort("-") is None
    assert parse_sort("-Name").token == "-Name"


def test_sort_directions_mark_only_the_active_field() -> None:
    admin = _admin()

    assert sort_directions(admin, None) == {"id": 0, "name": 0, "price": 0}
    assert sort_directions(admin, SortOrder("name", ascending=False)) == {
        "id": 0,
        "name": -1,
        "price": 0,
    }


@pytest.mark.asyncio
async def test_compose_pages_through_accessor() -> None:
    accessor = RecordingAccessor(widgets(25))
    composer = ListComposer(page_size=10, show_page_count=8)

    listing = await composer.compose(_admin(accessor), page=2)

    assert listing.total == 25
    assert listing.pks == ["21", "22", "23", "24", "25"]
    assert listing.window.pages == (0, 1, 2)
    assert ("list", 10, 2, None) in accessor.calls
    assert [node.identifier for node in listing.rows[0]] == [
        "id",
        "name",
        "price",
        "active",
        "tags",
    ]


@pytest.mark.asyncio
async def test_compose_applies_sortable_fields_only() -> None:
    accessor = RecordingAccessor(widgets(3))
    composer = ListComposer(page_size=10, show_page_count=8)

    listing = await composer.compose(_admin(accessor), sort_token="-id")
    assert listing.pks == ["3", "2", "1"]
    assert listing.sort == SortOrder("id", ascending=False)
    assert listing.sort_directions["id"] == -1

    listing = await composer.compose(_admin(accessor), sort_token="price")
    assert listing.sort is None
    assert accessor.calls[-1] == ("list", 10, 0, None)


@pytest.mark.asyncio
async def test_compose_uses_searcher_for_non_empty_query() -> None:
    accessor = RecordingAccessor(widgets(25))
    searcher = StubSearcher([Widget(id=7, name="seven")], total=1)
    composer = ListComposer(page_size=10, show_page_count=8)
    admin = _admin(accessor, searcher=searcher)

    listing = await composer.compose(admin, query="  seven ", sort_token="name")

    assert listing.total == 1
    assert listing.pks == ["7"]
    assert listing.query == "seven"
    assert searcher.calls == [(10, 0, "seven", SortOrder("name"))]
    assert not any(call[0] == "list" for call in accessor.calls)

    await composer.compose(admin, query="   ")
    assert len(searcher.calls) == 1


@pytest.mark.asyncio
async def test_compose_ignores_query_without_searcher() -> None:
    composer = ListComposer(page_size=10, show_page_count=8)

    listing = await composer.compose(_admin(), query="anything")

    assert listing.total == 25
    assert len(listing.rows) == 10


@pytest.mark.asyncio
async def test_compose_with_async_accessor() -> None:
    composer = ListComposer(page_size=2, show_page_count=8)

    listing = await composer.compose(_admin(AsyncAccessor(widgets(5))), page=1)

    assert listing.total == 5
    assert listing.pks == ["3", "4"]
    assert listing.window.pages == (0, 1, 2)


@pytest.mark.asyncio
async def test_compose_failure_raises_listing_error() -> None:
    accessor = RecordingAccessor(widgets(3))
    accessor.fail_with = RuntimeError("backend down")
    composer = ListComposer(page_size=10, show_page_count=8)

    with pytest.raises(ListingError) as excinfo:
        await composer.compose(_admin(accessor))

    assert excinfo.value.status_code == 500
    assert "backend down" in str(excinfo.value.detail)


@pytest.mark.asyncio
async def test_compose_orders_cells_by_list_fields() -> None:
    composer = ListComposer(page_size=10, show_page_count=8)
    admin = _admin(
        RecordingAccessor(widgets(2)),
        list_fields={"price": False, "name": True, "address": False},
    )

    listing = await composer.compose(admin)

    assert listing.columns == ["price", "name", "address"]
    first = listing.cells[0]
    assert [node.identifier for node in first[:2]] == ["price", "name"]
    assert [node.value for node in first[:2]] == ["1.5", "widget-1"]
    assert first[2] is None


def test_row_cells_without_columns() -> None:
    assert row_cells([], ["id"]) == [None]
    assert row_cells([], []) == []


# The End
