# -*- coding: utf-8 -*-
"""
provider

Utility class for providing templates for the admin.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from fastapi.templating import Jinja2Templates

from .conf import RecordAdminSettings, current_settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class TemplateProvider:
    """Encapsulates template directory handling."""

    def __init__(
        self,
        *,
        templates_dir: str | Path | Iterable[str | Path] = TEMPLATES_DIR,
        settings: RecordAdminSettings | None = None,
    ) -> None:
        """Store template paths together with active settings."""

        self._template_dirs = self._coerce_template_dirs(templates_dir)
        self._settings = settings or current_settings()

    def get_templates(self) -> Jinja2Templates:
        """Return a configured ``Jinja2Templates`` instance."""
        templates = Jinja2Templates(directory=list(self._template_dirs))
        templates.env.globals["settings"] = self._settings
        templates.env.globals["brand"] = self._settings.brand
        return templates

    @staticmethod
    def _coerce_template_dirs(
        templates_dir: str | Path | Iterable[str | Path]
    ) -> list[str]:
        """Normalise ``templates_dir`` into a mutable list of strings."""

        if isinstance(templates_dir, (str, Path)):
            return [str(templates_dir)]
        return [str(path) for path in templates_dir]


__all__ = ["TemplateProvider"]


# The End
