# -*- coding: utf-8 -*-
"""
listing

Pagination, sorting and search composition for list views.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from .capabilities import SortOrder, invoke
from .exceptions import ListingError
from .marshal import FieldMarshaler, FieldNode
from .model import ModelAdmin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageWindow:
    """Page numbers shown by the pagination controls."""

    current_page: int
    total_pages: int
    pages: tuple[int, ...] = ()

    @property
    def last_page(self) -> int:
        """Return the index of the last page, ``-1`` when there are none."""
        return self.total_pages - 1


@dataclass
class Listing:
    """Display-ready rows and pagination state of one list view request."""

    rows: list[list[FieldNode]]
    pks: list[str]
    window: PageWindow
    total: int
    sort: SortOrder | None = None
    sort_directions: dict[str, int] = field(default_factory=dict)
    query: str = ""
    columns: list[str] = field(default_factory=list)
    cells: list[list[FieldNode | None]] = field(default_factory=list)


def total_pages(count: int, page_size: int) -> int:
    """Return the number of pages needed for ``count`` records."""
    if count <= 0:
        return 0
    return -(-count // page_size)


def page_window(count: int, page_size: int, page: int, show_page_count: int) -> PageWindow:
    """Return the window of page numbers centred on ``page``.

    The window is ``min(show_page_count, total_pages)`` wide and is shifted
    to stay full width when it would cross either end of the page range.
    """

    pages_total = total_pages(count, page_size)
    width = min(show_page_count, pages_total)
    start = max(0, page - width // 2)
    end = min(pages_total - 1, start + width - 1)
    start = max(0, end - (width - 1))
    return PageWindow(
        current_page=page,
        total_pages=pages_total,
        pages=tuple(range(start, start + width)),
    )


def parse_sort(token: str | None) -> SortOrder | None:
    """Parse ``Name`` or ``-Name`` into a :class:`SortOrder`."""

    if not token:
        return None
    token = token.strip()
    if token.startswith("-"):
        name = token[1:].strip()
        return SortOrder(name, ascending=False) if name else None
    return SortOrder(token, ascending=True) if token else None


def sort_directions(admin: ModelAdmin, sort: SortOrder | None) -> dict[str, int]:
    """Map every list field to ``1``, ``-1`` or ``0`` for the active sort."""

    directions = {name: 0 for name in admin.list_fields}
    if sort is not None:
        directions[sort.field] = 1 if sort.ascending else -1
    return directions


def row_cells(
    row: Sequence[FieldNode], columns: Sequence[str]
) -> list[FieldNode | None]:
    """Return the top-level nodes of ``row`` in ``columns`` order.

    A column naming no top-level field yields ``None``.
    """

    by_name = {node.identifier: node for node in row}
    return [by_name.get(name) for name in columns]


class ListComposer:
    """Combine counts, paging, sorting and search into a :class:`Listing`."""

    def __init__(self, *, page_size: int, show_page_count: int) -> None:
        self.page_size = page_size
        self.show_page_count = show_page_count

    def effective_sort(self, admin: ModelAdmin, token: str | None) -> SortOrder | None:
        """Return the parsed sort when it names a sortable list field."""
        sort = parse_sort(token)
        if sort is None or not admin.is_sortable(sort.field):
            return None
        return sort

    async def compose(
        self,
        admin: ModelAdmin,
        page: int = 0,
        sort_token: str | None = None,
        query: str = "",
    ) -> Listing:
        """Fetch and marshal one page of ``admin``'s records."""

        page = max(0, page)
        query = (query or "").strip()
        sort = self.effective_sort(admin, sort_token)
        try:
            if admin.searcher is None or not query:
                count = int(await invoke(admin.accessor.count))
                records = await invoke(admin.accessor.list, self.page_size, page, sort)
            else:
                records, count = await invoke(
                    admin.searcher.search, self.page_size, page, query, sort
                )
                count = int(count)
        except Exception as exc:
            logger.exception("Listing %s records failed", admin.name)
            raise ListingError(str(exc) or "Listing failed") from exc
        return self._build(admin, list(records or ()), count, page, sort, query)

    def _build(
        self,
        admin: ModelAdmin,
        records: Sequence[Any],
        count: int,
        page: int,
        sort: SortOrder | None,
        query: str,
    ) -> Listing:
        marshaler = FieldMarshaler(admin)
        rows = [marshaler.marshal(record) for record in records]
        columns = list(admin.list_fields)
        return Listing(
            rows=rows,
            pks=[admin.pk_string(record) for record in records],
            window=page_window(count, self.page_size, page, self.show_page_count),
            total=count,
            sort=sort,
            sort_directions=sort_directions(admin, sort),
            query=query,
            columns=columns,
            cells=[row_cells(row, columns) for row in rows],
        )


__all__ = [
    "ListComposer",
    "Listing",
    "PageWindow",
    "page_window",
    "parse_sort",
    "row_cells",
    "sort_directions",
    "total_pages",
]


# The End
