# -*- coding: utf-8 -*-
"""
sample_records

Record types and fake collaborators shared by the test-suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from recordadmin.core.capabilities import OperationKind, SortOrder
from recordadmin.core.exceptions import InvalidID, RecordNotFound


@dataclass
class Widget:
    """Flat record with one field of every scalar kind."""

    id: int = 0
    name: str = ""
    price: float = 0.0
    active: bool = False
    tags: list[str] = field(default_factory=list)


@dataclass
class Node:
    """Self-referencing record with optional and sequence fields."""

    Name: str = ""
    Location: Optional[str] = None
    Subs: list["Node"] = field(default_factory=list)
    Sub: Optional["Node"] = None


class RecordingAccessor:
    """Synchronous in-memory accessor that records every call."""

    def __init__(self, records: list[Widget] | None = None) -> None:
        self.records: dict[int, Widget] = {w.id: w for w in records or []}
        self.calls: list[tuple[Any, ...]] = []
        self.fail_with: Exception | None = None

    def prototype(self) -> Widget:
        return Widget()

    def _key(self, pk: str) -> int:
        if not pk.isdigit():
            raise InvalidID(pk)
        return int(pk)

    def get(self, pk: str) -> Widget:
        self.calls.append(("get", pk))
        key = self._key(pk)
        if key not in self.records:
            raise RecordNotFound(pk)
        return self.records[key]

    def list(self, page_size: int, page: int, sort: SortOrder | None) -> list[Widget]:
        self.calls.append(("list", page_size, page, sort))
        if self.fail_with is not None:
            raise self.fail_with
        rows = list(self.records.values())
        if sort is not None:
            rows.sort(key=lambda w: getattr(w, sort.field), reverse=not sort.ascending)
        return rows[page * page_size : (page + 1) * page_size]

    def count(self) -> int:
        self.calls.append(("count",))
        if self.fail_with is not None:
            raise self.fail_with
        return len(self.records)

    def upsert(self, pk: str, values: Mapping[str, list[str]]) -> str:
        self.calls.append(("upsert", pk, dict(values)))
        if self.fail_with is not None:
            raise self.fail_with
        if pk:
            widget = self.get(pk)
        else:
            widget = Widget(id=max(self.records, default=0) + 1)
            self.records[widget.id] = widget
        if "name" in values:
            widget.name = values["name"][0]
        return str(widget.id)

    def delete(self, pk: str) -> None:
        self.calls.append(("delete", pk))
        key = self._key(pk)
        if self.records.pop(key, None) is None:
            raise RecordNotFound(pk)


class AsyncAccessor(RecordingAccessor):
    """Coroutine flavour of :class:`RecordingAccessor`."""

    async def count(self) -> int:  # type: ignore[override]
        return super().count()

    async def list(self, page_size: int, page: int, sort: SortOrder | None) -> list[Widget]:  # type: ignore[override]
        return super().list(page_size, page, sort)


class StubSearcher:
    """Searcher returning a fixed page and total."""

    placeholder = "Find widgets"

    def __init__(self, rows: list[Widget], total: int) -> None:
        self.rows = rows
        self.total = total
        self.calls: list[tuple[Any, ...]] = []

    def search(
        self, page_size: int, page: int, query: str, sort: SortOrder | None
    ) -> tuple[list[Widget], int]:
        self.calls.append((page_size, page, query, sort))
        return self.rows, self.total


class StubAuthenticator:
    """Authenticator allowing a configurable set of operations."""

    def __init__(
        self,
        *,
        admin: bool = True,
        allowed: set[OperationKind] | None = None,
    ) -> None:
        self.admin = admin
        self.allowed = set(OperationKind) if allowed is None else allowed
        self.checks: list[tuple[str, OperationKind, list[str]]] = []

    def is_logged_in_as_admin(self, request: Any) -> bool:
        return self.admin

    def has_privilege(
        self, request: Any, model_name: str, operation: OperationKind, ids: list[str]
    ) -> bool:
        self.checks.append((model_name, operation, list(ids)))
        return operation in self.allowed


def widgets(count: int) -> list[Widget]:
    """Return ``count`` widgets with ids starting at 1."""

    return [Widget(id=i, name=f"widget-{i}", price=i * 1.5) for i in range(1, count + 1)]


# The End
