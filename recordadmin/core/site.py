# -*- coding: utf-8 -*-
"""
site

Admin site holding the model registry and its collaborators.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.templating import Jinja2Templates

from ..conf import RecordAdminSettings, current_settings
from .capabilities import Authenticator
from .dispatch import AdminDispatcher
from .model import AdminAction, ModelAdmin
from .registry import ModelRegistry

if TYPE_CHECKING:  # pragma: no cover - for type checking only
    from fastapi import APIRouter

logger = logging.getLogger(__name__)


class AdminSite:
    """Admin registry and entry point for building the web routes."""

    def __init__(
        self,
        *,
        settings: RecordAdminSettings | None = None,
        authenticator: Authenticator | None = None,
        registry: ModelRegistry | None = None,
        templates: Jinja2Templates | None = None,
    ) -> None:
        """Initialize the site; without an authenticator the admin is open."""
        self._settings = settings or current_settings()
        self.registry = registry or ModelRegistry(strict=self._settings.strict_registration)
        self.authenticator = authenticator
        self.templates = templates
        self._dispatcher: AdminDispatcher | None = None
        if authenticator is None:
            logger.warning("No authenticator configured; the admin is open to everyone")

    @property
    def settings(self) -> RecordAdminSettings:
        """Return the settings used by this site."""
        return self._settings

    def register(self, admin: ModelAdmin) -> ModelAdmin:
        """Register a model admin with the site."""
        return self.registry.register(admin)

    def add_list_action(self, model_name: str, action: AdminAction) -> None:
        """Attach a list action to an already registered model admin."""
        self.registry.get(model_name).add_list_action(action)

    def seal(self) -> None:
        """Stop accepting registrations."""
        self.registry.seal()

    @property
    def dispatcher(self) -> AdminDispatcher:
        """Return the dispatcher executing admin requests."""
        if self._dispatcher is None:
            self._dispatcher = AdminDispatcher(
                self.registry,
                settings=self._settings,
                authenticator=self.authenticator,
            )
        return self._dispatcher

    def build_router(self) -> "APIRouter":
        """Return a FastAPI router exposing the admin routes."""
        from ..crud import AdminRouteBuilder

        return AdminRouteBuilder(self).build()


__all__ = ["AdminSite"]


# The End
