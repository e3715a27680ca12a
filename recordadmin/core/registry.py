# -*- coding: utf-8 -*-
"""
registry

In-memory registry of model admins keyed by lowercase model name.

Registration is expected to finish before requests are served. Mounting the
admin router seals the registry; after that point reads need no locking and
further registrations are rejected.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .capabilities import invoke
from .exceptions import AdminModelNotFound, DuplicateModelAdmin, RegistrySealedError
from .marshal import default_widgets
from .model import ModelAdmin

logger = logging.getLogger(__name__)


class ModelRegistry:
    """Store registered model admins."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._admins: dict[str, ModelAdmin] = {}
        self._sealed = False

    @staticmethod
    def normalize(name: str) -> str:
        """Return the registry key for ``name``."""
        return name.lower()

    @property
    def sealed(self) -> bool:
        """Return ``True`` once the registry stopped accepting registrations."""
        return self._sealed

    def seal(self) -> None:
        """Freeze the registry before the dispatcher starts serving."""
        self._sealed = True

    def register(self, admin: ModelAdmin) -> ModelAdmin:
        """Register ``admin``; a duplicate name replaces the earlier entry.

        Strict registries raise :class:`DuplicateModelAdmin` instead. Missing
        widget maps are inferred from the accessor's prototype record.
        """

        if self._sealed:
            raise RegistrySealedError(
                f"Cannot register {admin.name!r}: the admin registry is sealed"
            )
        key = self.normalize(admin.name)
        if key in self._admins:
            if self.strict:
                raise DuplicateModelAdmin(f"{admin.name} model admin already registered")
            logger.warning("%s model admin already registered; replacing", admin.name)
        logger.info("Registering %s admin", admin.name)
        if admin.field_widgets is None:
            admin.field_widgets = default_widgets(admin.accessor.prototype())
        self._admins[key] = admin
        return admin

    def lookup(self, name: str) -> ModelAdmin | None:
        """Return the admin registered under ``name`` or ``None``."""
        return self._admins.get(self.normalize(name))

    def get(self, name: str) -> ModelAdmin:
        """Return the admin registered under ``name`` or raise."""
        admin = self.lookup(name)
        if admin is None:
            raise AdminModelNotFound(name)
        return admin

    async def count(self, name: str) -> int:
        """Return the number of records stored for model ``name``."""
        admin = self.get(name)
        return int(await invoke(admin.accessor.count))

    async def counts(self, admins: Iterable[ModelAdmin] | None = None) -> dict[str, int]:
        """Return record counts keyed by model slug."""
        result: dict[str, int] = {}
        for admin in admins if admins is not None else self:
            result[admin.slug] = int(await invoke(admin.accessor.count))
        return result

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.normalize(name) in self._admins

    def __iter__(self) -> Iterator[ModelAdmin]:
        return iter(list(self._admins.values()))

    def __len__(self) -> int:
        return len(self._admins)


__all__ = ["ModelRegistry"]


# The End
