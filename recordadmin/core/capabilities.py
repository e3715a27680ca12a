# -*- coding: utf-8 -*-
"""
capabilities

Protocols implemented by the host application's storage, search and
authentication layers, plus the helper used to call them.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Protocol, Sequence, runtime_checkable

from starlette.concurrency import run_in_threadpool


class OperationKind(str, Enum):
    """Kinds of operations passed to the authenticator."""

    READ = "read"
    WRITE = "write"
    CREATE = "create"


@dataclass(frozen=True)
class SortOrder:
    """Single active sort field of a list view."""

    field: str
    ascending: bool = True

    @property
    def token(self) -> str:
        """Return the query-string form, ``-`` prefixed when descending."""
        return self.field if self.ascending else f"-{self.field}"


@runtime_checkable
class Accessor(Protocol):
    """CRUD capability for one administered record type.

    Methods may be plain functions or coroutines; blocking ones are moved to
    a worker thread. ``prototype`` must be synchronous.
    """

    def prototype(self) -> Any:
        """Return an empty record instance."""

    def get(self, pk: str) -> Any:
        """Return one record or raise ``RecordNotFound``/``InvalidID``."""

    def list(self, page_size: int, page: int, sort: SortOrder | None) -> Sequence[Any]:
        """Return one page of records."""

    def count(self) -> int:
        """Return the total number of records."""

    def upsert(self, pk: str, values: Mapping[str, list[str]]) -> str:
        """Create (``pk == ""``) or update a record and return its primary key."""

    def delete(self, pk: str) -> None:
        """Remove the record identified by ``pk``."""


@runtime_checkable
class Searcher(Protocol):
    """Optional search capability with its own pagination."""

    placeholder: str

    def search(
        self, page_size: int, page: int, query: str, sort: SortOrder | None
    ) -> tuple[Sequence[Any], int]:
        """Return a page of matching records and the total match count."""


@runtime_checkable
class PKStringer(Protocol):
    """Convert a non-string primary key into its URL form."""

    def pk_string(self, pk: Any) -> str:
        """Return ``pk`` as a string."""


@runtime_checkable
class Authenticator(Protocol):
    """Optional permission collaborator consulted before data access."""

    def is_logged_in_as_admin(self, request: Any) -> bool:
        """Return whether the request belongs to an admin user."""

    def has_privilege(
        self,
        request: Any,
        model_name: str,
        operation: OperationKind,
        ids: Sequence[str],
    ) -> bool:
        """Return whether ``operation`` on ``ids`` of ``model_name`` is allowed."""


async def invoke(func: Callable[..., Any], *args: Any) -> Any:
    """Call a collaborator method that may be synchronous or asynchronous."""

    if inspect.iscoroutinefunction(func):
        return await func(*args)
    result = await run_in_threadpool(func, *args)
    if inspect.isawaitable(result):
        return await result
    return result


__all__ = [
    "Accessor",
    "Authenticator",
    "OperationKind",
    "PKStringer",
    "Searcher",
    "SortOrder",
    "invoke",
]


# The End
