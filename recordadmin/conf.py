# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the RecordAdmin package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Mapping


@dataclass
class RecordAdminSettings:
    """Container for admin configuration derived from environment variables."""

    admin_path: str = "/admin"
    brand: str = "Record Admin"
    page_size: int = 100
    show_page_count: int = 8
    strict_registration: bool = False

    def __post_init__(self) -> None:
        """Normalise the mount point and keep paging values positive."""
        self.admin_path = self._normalize_prefix(self.admin_path)
        self.page_size = max(1, int(self.page_size))
        self.show_page_count = max(1, int(self.show_page_count))

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "RECORDADMIN_",
    ) -> "RecordAdminSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            admin_path=data.get("ADMIN_PATH") or "/admin",
            brand=data.get("BRAND") or "Record Admin",
            page_size=cls._to_int(data.get("PAGE_SIZE"), default=100),
            show_page_count=cls._to_int(data.get("SHOW_PAGE_COUNT"), default=8),
            strict_registration=cls._to_bool(data.get("STRICT_REGISTRATION")),
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Return ``value`` with one leading slash and no trailing slash."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``RecordAdminSettings`` instance."""

    def __init__(self, initial: RecordAdminSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial

    def configure(self, settings: RecordAdminSettings) -> None:
        """Install a new settings instance."""
        with self._lock:
            self._settings = settings

    def current(self) -> RecordAdminSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = RecordAdminSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next read reloads the environment."""
        with self._lock:
            self._settings = None


_settings_manager = SettingsManager()


def configure(settings: RecordAdminSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> RecordAdminSettings:
    """Return the active settings instance used by RecordAdmin components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop configured settings; mainly useful for tests."""
    _settings_manager.reset()


__all__ = [
    "RecordAdminSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
]


# The End
