# -*- coding: utf-8 -*-
"""
dispatch

Route resolution and action execution for admin requests.

A request is identified by its HTTP method and the ``model``/``pk`` path
segments. :func:`resolve_state` turns those into a :class:`RouteState` and
:class:`AdminDispatcher` runs it against the registry, returning either a
:class:`Render` or a :class:`Redirect` for the web layer to materialise.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from ..conf import RecordAdminSettings, current_settings
from .capabilities import Authenticator, OperationKind, invoke
from .exceptions import (
    ActionFailed,
    BadRequestError,
    HTTPError,
    InvalidID,
    ListingError,
    NotFoundError,
    PermissionDenied,
    RecordNotFound,
)
from .forms import unmarshal
from .listing import ListComposer
from .marshal import FieldMarshaler, values_map
from .model import FormData, ModelAdmin
from .registry import ModelRegistry

logger = logging.getLogger(__name__)

ADD_PK = "add"
ACTION_FIELD = "action"
IDS_FIELD = "ids"


class RouteState(str, Enum):
    """States an admin request can resolve to."""

    INDEX = "index"
    LIST = "list"
    LIST_UPDATE = "list_update"
    CHANGE_VIEW = "change_view"
    CREATE = "create"
    SAVE = "save"
    SAVE_AND_CONTINUE = "save_and_continue"
    DELETE = "delete"


_CHANGE_ACTIONS = {
    "save": RouteState.SAVE,
    "save-continue": RouteState.SAVE_AND_CONTINUE,
    "delete": RouteState.DELETE,
}


@dataclass(frozen=True)
class Render:
    """Render ``template`` with ``context``."""

    template: str
    context: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass(frozen=True)
class Redirect:
    """Redirect to the named admin route."""

    route_name: str
    path_params: dict[str, str] = field(default_factory=dict)
    status_code: int = 302


Outcome = Render | Redirect


def resolve_state(
    method: str, model: str | None, pk: str | None, action: str | None = None
) -> RouteState:
    """Return the state for a request's method and path segments."""

    method = method.upper()
    if not model:
        return RouteState.INDEX
    if pk is None:
        return RouteState.LIST_UPDATE if method == "POST" else RouteState.LIST
    if method != "POST":
        return RouteState.CREATE if pk == ADD_PK else RouteState.CHANGE_VIEW
    state = _CHANGE_ACTIONS.get(action or "save")
    if state is None:
        raise BadRequestError(f"Unknown action: {action}")
    return state


def _first(values: FormData | Mapping[str, str], key: str, default: str = "") -> str:
    value = values.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return value[0] if value else default


def _to_page(value: str) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


class AdminDispatcher:
    """Execute admin route states against a :class:`ModelRegistry`."""

    def __init__(
        self,
        registry: ModelRegistry,
        *,
        settings: RecordAdminSettings | None = None,
        authenticator: Authenticator | None = None,
    ) -> None:
        self.registry = registry
        self.settings = settings or current_settings()
        self.authenticator = authenticator
        self.composer = ListComposer(
            page_size=self.settings.page_size,
            show_page_count=self.settings.show_page_count,
        )

    async def dispatch(
        self,
        request: Any,
        method: str,
        model: str | None = None,
        pk: str | None = None,
        *,
        params: Mapping[str, str] | None = None,
        form: FormData | None = None,
    ) -> Outcome:
        """Resolve and execute one request.

        Raises :class:`HTTPError` subclasses for not-found, client and
        listing failures. Permission failures render the error page.
        """

        params = params or {}
        form = form or {}
        try:
            if not model:
                return await self.index(request)
            admin = self.registry.lookup(model)
            if admin is None:
                raise NotFoundError("Not found.")
            state = resolve_state(method, model, pk, _first(form, ACTION_FIELD, "save"))
            if state is RouteState.LIST:
                return await self.list_view(request, admin, params)
            if state is RouteState.LIST_UPDATE:
                return await self.list_update(request, admin, params, form)
            if state is RouteState.CREATE:
                return await self.create_view(request, admin)
            if state is RouteState.CHANGE_VIEW:
                return await self.change_view(request, admin, pk)
            if state is RouteState.DELETE:
                return await self.delete(request, admin, pk)
            return await self.save(
                request, admin, pk, form,
                continue_editing=state is RouteState.SAVE_AND_CONTINUE,
            )
        except PermissionDenied as exc:
            return Render("admin/error.html", self._context(error=str(exc)))

    # Context ----------------------------------------------------------
    def _context(self, **extra: Any) -> dict[str, Any]:
        ctx: dict[str, Any] = {
            "brand": self.settings.brand,
            "admins": list(self.registry),
        }
        ctx.update(extra)
        return ctx

    # Permissions ------------------------------------------------------
    async def _ensure_admin(self, request: Any) -> None:
        if self.authenticator is None:
            return
        if not await invoke(self.authenticator.is_logged_in_as_admin, request):
            logger.warning("Rejected admin request from a non-admin user")
            raise PermissionDenied("You must be logged in as an administrator.")

    async def _allowed(
        self, request: Any, admin: ModelAdmin, operation: OperationKind, ids: Iterable[str]
    ) -> bool:
        if self.authenticator is None:
            return True
        return bool(
            await invoke(
                self.authenticator.has_privilege, request, admin.name, operation, list(ids)
            )
        )

    async def _require(
        self, request: Any, admin: ModelAdmin, operation: OperationKind, ids: Iterable[str] = ()
    ) -> None:
        await self._ensure_admin(request)
        ids = list(ids)
        if not await self._allowed(request, admin, operation, ids):
            logger.warning("Denied %s access to %s %s", operation.value, admin.name, ids)
            raise PermissionDenied(
                f"You do not have {operation.value} permission on {admin.name}."
            )

    # States -----------------------------------------------------------
    async def index(self, request: Any) -> Render:
        """Render per-model record counts."""

        await self._ensure_admin(request)
        readable = [
            admin for admin in self.registry
            if await self._allowed(request, admin, OperationKind.READ, [])
        ]
        try:
            counts = await self.registry.counts(readable)
        except Exception as exc:
            logger.exception("Counting records failed")
            raise ListingError(str(exc) or "Counting records failed") from exc
        return Render("admin/index.html", self._context(counts=counts, readable=readable))

    async def list_view(
        self,
        request: Any,
        admin: ModelAdmin,
        params: Mapping[str, str],
        *,
        error: str | None = None,
        status_code: int = 200,
    ) -> Render:
        """Render one page of ``admin``'s records."""

        await self._require(request, admin, OperationKind.READ)
        listing = await self.composer.compose(
            admin,
            page=_to_page(params.get("page", "0")),
            sort_token=params.get("o"),
            query=params.get("q", ""),
        )
        ctx = self._context(
            model_admin=admin,
            listing=listing,
            results=listing.rows,
            columns=listing.columns,
            cells=listing.cells,
            pks=listing.pks,
            page=listing.window.current_page,
            pages=listing.window.pages,
            last_page=listing.window.last_page,
            sort=listing.sort,
            sort_directions=listing.sort_directions,
            query=listing.query,
            error=error,
        )
        return Render("admin/list.html", ctx, status_code)

    async def list_update(
        self,
        request: Any,
        admin: ModelAdmin,
        params: Mapping[str, str],
        form: FormData,
    ) -> Render:
        """Run a bulk list action and re-render the list."""

        ids = list(form.get(IDS_FIELD, []))
        await self._require(request, admin, OperationKind.WRITE, ids)
        action = admin.list_actions.get(_first(form, ACTION_FIELD))
        if action is None:
            return await self.list_view(request, admin, params)
        try:
            await invoke(action.handler, form)
        except ActionFailed as exc:
            logger.warning("List action %s on %s failed: %s", action.identifier, admin.name, exc)
            error = exc
        except Exception as exc:
            logger.exception("List action %s on %s raised", action.identifier, admin.name)
            error = exc
        else:
            return await self.list_view(request, admin, params)
        message = str(error) or f"{action.display_name} failed."
        return await self.list_view(request, admin, params, error=message, status_code=400)

    async def change_view(self, request: Any, admin: ModelAdmin, pk: str) -> Render:
        """Render the edit form of one record."""

        await self._require(request, admin, OperationKind.READ, [pk])
        record = await self._get(admin, pk)
        return self._change_form(admin, record, pk)

    async def create_view(self, request: Any, admin: ModelAdmin) -> Render:
        """Render an empty form built from the accessor's prototype."""

        await self._require(request, admin, OperationKind.CREATE)
        return self._change_form(admin, admin.accessor.prototype(), ADD_PK)

    def _change_form(self, admin: ModelAdmin, record: Any, pk: str) -> Render:
        ctx = self._context(
            model_admin=admin,
            fields=FieldMarshaler(admin).marshal(record),
            values=values_map(record),
            pk=pk,
        )
        return Render("admin/change.html", ctx)

    async def save(
        self,
        request: Any,
        admin: ModelAdmin,
        pk: str,
        form: FormData,
        *,
        continue_editing: bool = False,
    ) -> Outcome:
        """Upsert a record from submitted form values."""

        creating = pk == ADD_PK
        if creating:
            await self._require(request, admin, OperationKind.CREATE)
        else:
            await self._require(request, admin, OperationKind.WRITE, [pk])
        payload = {key: value for key, value in form.items() if key != ACTION_FIELD}
        values = unmarshal(payload, admin)
        saved_pk = pk
        if values:
            result = await self._write(admin.accessor.upsert, "" if creating else pk, values)
            if result:
                saved_pk = str(result)
        if not continue_editing:
            return self._to_list(admin)
        if saved_pk == ADD_PK:
            return await self.create_view(request, admin)
        return await self.change_view(request, admin, saved_pk)

    async def delete(self, request: Any, admin: ModelAdmin, pk: str) -> Redirect:
        """Delete one record and return to the list view."""

        await self._require(request, admin, OperationKind.WRITE, [pk])
        await self._write(admin.accessor.delete, pk)
        return self._to_list(admin)

    # Helpers ----------------------------------------------------------
    async def _get(self, admin: ModelAdmin, pk: str) -> Any:
        try:
            return await invoke(admin.accessor.get, pk)
        except RecordNotFound as exc:
            raise NotFoundError("Not found.") from exc
        except InvalidID as exc:
            raise NotFoundError("Invalid ID.") from exc
        except HTTPError:
            raise
        except Exception as exc:
            logger.exception("Loading %s %s failed", admin.name, pk)
            raise HTTPError(str(exc)) from exc

    async def _write(self, func: Any, *args: Any) -> Any:
        try:
            return await invoke(func, *args)
        except RecordNotFound as exc:
            raise NotFoundError("Not found.") from exc
        except InvalidID as exc:
            raise NotFoundError("Invalid ID.") from exc
        except HTTPError:
            raise
        except Exception as exc:
            logger.warning("Store rejected the change: %s", exc)
            raise BadRequestError(str(exc)) from exc

    @staticmethod
    def _to_list(admin: ModelAdmin) -> Redirect:
        return Redirect("recordadmin-list", {"model": admin.slug})


__all__ = [
    "AdminDispatcher",
    "Outcome",
    "Redirect",
    "Render",
    "RouteState",
    "resolve_state",
]


# The End
