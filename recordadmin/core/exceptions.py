# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the admin core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class AdminError(Exception):
    """Base class for admin-specific exceptions."""


class AdminModelNotFound(AdminError):
    """Raised when an admin model is not registered."""


class DuplicateModelAdmin(AdminError):
    """Raised by strict registries when a model name is registered twice."""


class RegistrySealedError(AdminError):
    """Raised when registering after the registry started serving requests."""


class PermissionDenied(AdminError):
    """Raised when the authenticator rejects an operation."""


class ActionFailed(AdminError):
    """Raised when a list action handler reports a failure."""


# --- Errors raised by host accessors -----------------------------------------

class RecordNotFound(AdminError):
    """Raised by an accessor when no record matches the primary key."""


class InvalidID(AdminError):
    """Raised by an accessor when the primary key is malformed."""


# --- HTTP-like domain errors -------------------------------------------------

class HTTPError(AdminError):
    """Base class for exceptions carrying an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class BadRequestError(HTTPError):
    """Raised when a request fails validation or the store rejects it."""

    status_code = 400


class NotFoundError(HTTPError):
    """Raised when a requested model or record is not found."""

    status_code = 404


class ListingError(HTTPError):
    """Raised when listing, counting or searching records fails."""

    status_code = 500


# The End
