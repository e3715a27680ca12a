# -*- coding: utf-8 -*-
"""
forms

Convert submitted form data back into a flat update mapping.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Iterable

from .model import FormData, ModelAdmin


def unmarshal(values: FormData, admin: ModelAdmin) -> dict[str, list[str]]:
    """Return submitted values minus read-only and omitted keys.

    Dotted identifiers of nested fields are passed through unchanged; the
    accessor's ``upsert`` rebuilds the record shape.
    """

    out: dict[str, list[str]] = {}
    for key, submitted in values.items():
        if key in admin.read_only_fields:
            continue
        if key in admin.omit_fields:
            continue
        out[key] = list(submitted)
    return out


def form_to_lists(items: Iterable[tuple[str, Any]]) -> dict[str, list[str]]:
    """Group multi-valued ``(key, value)`` pairs into lists of strings.

    Non-string values such as uploaded files are dropped.
    """

    grouped: dict[str, list[str]] = {}
    for key, value in items:
        if isinstance(value, str):
            grouped.setdefault(key, []).append(value)
    return grouped


__all__ = ["form_to_lists", "unmarshal"]


# The End
