# -*- coding: utf-8 -*-
"""
main

Example application bootstrap for RecordAdmin.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from recordadmin import AdminRouter

from .admin import build_site


def create_app() -> FastAPI:
    """Assemble a runnable RecordAdmin demonstration project."""

    logging.basicConfig(level=logging.INFO)
    app = FastAPI(title="RecordAdmin demo")
    AdminRouter(build_site()).mount(app)
    return app


app = create_app()

__all__ = ["app", "create_app"]


# The End
