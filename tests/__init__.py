# -*- coding: utf-8 -*-
"""
Tests package exports.

Expose the shared sample records for external imports.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .sample_records import RecordingAccessor, Widget, widgets

__all__ = ["RecordingAccessor", "Widget", "widgets"]


# The End
