# -*- coding: utf-8 -*-
"""
router

Admin router utilities for mounting the admin site.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI

from .core.site import AdminSite

logger = logging.getLogger(__name__)


class AdminRouter:
    """Encapsulates mounting the admin interface onto an application."""

    def __init__(self, site: AdminSite, prefix: str | None = None) -> None:
        """Remember the site and the mount point, defaulting to settings."""

        self.site = site
        self.prefix = site.settings.admin_path if prefix is None else prefix.rstrip("/")
        self._router: APIRouter | None = None
        self._mounted: set[int] = set()

    def get_admin_router(self) -> APIRouter:
        """Return the admin router, building it on first use."""

        if self._router is None:
            self._router = self.site.build_router()
        return self._router

    def mount(self, app: FastAPI) -> None:
        """Seal the registry and mount the admin routes onto ``app``."""

        if id(app) in self._mounted:
            return
        self.site.seal()
        app.include_router(self.get_admin_router(), prefix=self.prefix)
        app.state.admin_site = self.site
        self._mounted.add(id(app))
        logger.info(
            "Mounted admin at %s with %d models", self.prefix or "/", len(self.site.registry)
        )


__all__ = ["AdminRouter"]


# The End
