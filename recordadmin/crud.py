# -*- coding: utf-8 -*-
"""
crud

Mount the admin list, change and index routes on a FastAPI router.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from .core.dispatch import Outcome, Redirect
from .core.exceptions import HTTPError
from .core.forms import form_to_lists
from .provider import TemplateProvider

if TYPE_CHECKING:
    from .core.site import AdminSite


class AdminRouteBuilder:
    """Build the admin routes for an :class:`AdminSite`."""

    def __init__(self, site: AdminSite) -> None:
        self.site = site
        if site.templates is None:
            site.templates = TemplateProvider(settings=site.settings).get_templates()
        self.templates = site.templates

    def respond(self, request: Request, outcome: Outcome) -> Response:
        """Turn a dispatcher outcome into an HTTP response."""

        if isinstance(outcome, Redirect):
            url = request.url_for(outcome.route_name, **outcome.path_params)
            return RedirectResponse(str(url), status_code=outcome.status_code)
        return self.templates.TemplateResponse(
            request,
            outcome.template,
            outcome.context,
            status_code=outcome.status_code,
        )

    async def handle(
        self,
        request: Request,
        model: str | None = None,
        pk: str | None = None,
    ) -> Response:
        """Dispatch ``request`` and translate admin errors to HTTP errors."""

        form = None
        if request.method == "POST":
            submitted = await request.form()
            form = form_to_lists(submitted.multi_items())
        try:
            outcome = await self.site.dispatcher.dispatch(
                request,
                request.method,
                model,
                pk,
                params=dict(request.query_params),
                form=form,
            )
        except HTTPError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        return self.respond(request, outcome)

    def build(self) -> APIRouter:
        """Return a router with the index, list and change routes."""

        router = APIRouter()

        @router.get("/", response_class=HTMLResponse, name="recordadmin-index")
        async def index(request: Request) -> Response:
            return await self.handle(request)

        @router.get("/{model}/", response_class=HTMLResponse, name="recordadmin-list")
        async def list_page(request: Request, model: str) -> Response:
            return await self.handle(request, model)

        @router.post("/{model}/", response_class=HTMLResponse, name="recordadmin-list-action")
        async def list_action(request: Request, model: str) -> Response:
            return await self.handle(request, model)

        @router.get("/{model}/{pk}", response_class=HTMLResponse, name="recordadmin-change")
        async def change_page(request: Request, model: str, pk: str) -> Response:
            return await self.handle(request, model, pk)

        @router.post("/{model}/{pk}", response_class=HTMLResponse, name="recordadmin-change-action")
        async def change_action(request: Request, model: str, pk: str) -> Response:
            return await self.handle(request, model, pk)

        return router


__all__ = ["AdminRouteBuilder"]


# The End
