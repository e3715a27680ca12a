# -*- coding: utf-8 -*-
"""
store

In-memory accessor used by the demonstration project.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import dataclasses
from threading import RLock
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from recordadmin.core.capabilities import SortOrder
from recordadmin.core.exceptions import InvalidID, RecordNotFound
from recordadmin.core.fields import INT, FLOAT, BOOL, describe_fields

T = TypeVar("T")


class MemoryAccessor(Generic[T]):
    """Keep dataclass records in a dict keyed by their integer ``id``."""

    def __init__(self, factory: Callable[[], T], records: Sequence[T] = ()) -> None:
        self._factory = factory
        self._lock = RLock()
        self._records: dict[int, T] = {}
        for record in records:
            self._records[getattr(record, "id")] = record

    def prototype(self) -> T:
        return self._factory()

    def _key(self, pk: str) -> int:
        try:
            return int(pk)
        except (TypeError, ValueError) as exc:
            raise InvalidID(pk) from exc

    def get(self, pk: str) -> T:
        key = self._key(pk)
        with self._lock:
            if key not in self._records:
                raise RecordNotFound(pk)
            return self._records[key]

    def _ordered(self, sort: SortOrder | None) -> list[T]:
        records = list(self._records.values())
        if sort is not None:
            records.sort(
                key=lambda record: (getattr(record, sort.field) is None, getattr(record, sort.field)),
                reverse=not sort.ascending,
            )
        return records

    def list(self, page_size: int, page: int, sort: SortOrder | None) -> list[T]:
        with self._lock:
            records = self._ordered(sort)
        start = page * page_size
        return records[start : start + page_size]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def search(
        self, page_size: int, page: int, query: str, sort: SortOrder | None
    ) -> tuple[list[T], int]:
        needle = query.lower()
        with self._lock:
            matches = [
                record for record in self._ordered(sort)
                if any(needle in str(value).lower() for value in dataclasses.astuple(record))
            ]
        start = page * page_size
        return matches[start : start + page_size], len(matches)

    def upsert(self, pk: str, values: Mapping[str, list[str]]) -> str:
        with self._lock:
            if pk:
                record = self.get(pk)
            else:
                record = self._factory()
                setattr(record, "id", max(self._records, default=0) + 1)
            changes = self._coerce(record, values)
            record = dataclasses.replace(record, **changes)
            self._records[getattr(record, "id")] = record
            return str(getattr(record, "id"))

    def delete(self, pk: str) -> None:
        key = self._key(pk)
        with self._lock:
            if self._records.pop(key, None) is None:
                raise RecordNotFound(pk)

    @staticmethod
    def _coerce(record: T, values: Mapping[str, list[str]]) -> dict[str, Any]:
        # Only top-level scalar fields are editable in the demo.
        converters: dict[str, Callable[[str], Any]] = {
            INT: int,
            FLOAT: float,
            BOOL: lambda raw: raw.lower() in {"1", "true", "on", "yes"},
        }
        changes: dict[str, Any] = {}
        for spec in describe_fields(record):
            submitted = values.get(spec.name)
            if not submitted or spec.name == "id":
                continue
            convert = converters.get(spec.kind)
            if convert is not None:
                try:
                    changes[spec.name] = convert(submitted[0])
                except ValueError as exc:
                    raise ValueError(f"{spec.name}: {exc}") from exc
            elif spec.kind == "string":
                changes[spec.name] = submitted[0]
        return changes


class DemoSearch:
    """Search capability delegating to a :class:`MemoryAccessor`."""

    def __init__(self, accessor: MemoryAccessor[Any], placeholder: str) -> None:
        self.accessor = accessor
        self.placeholder = placeholder

    def search(
        self, page_size: int, page: int, query: str, sort: SortOrder | None
    ) -> tuple[list[Any], int]:
        return self.accessor.search(page_size, page, query, sort)


__all__ = ["DemoSearch", "MemoryAccessor"]


# The End
