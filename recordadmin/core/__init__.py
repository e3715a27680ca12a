# -*- coding: utf-8 -*-
"""
core

Core admin primitives: field marshaling, registry, listing and dispatch.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .capabilities import Accessor, Authenticator, OperationKind, PKStringer, Searcher, SortOrder
from .dispatch import AdminDispatcher, Redirect, Render, RouteState, resolve_state
from .exceptions import (
    ActionFailed,
    AdminError,
    AdminModelNotFound,
    BadRequestError,
    DuplicateModelAdmin,
    HTTPError,
    InvalidID,
    ListingError,
    NotFoundError,
    PermissionDenied,
    RecordNotFound,
    RegistrySealedError,
)
from .fields import FieldSpec, describe_fields
from .forms import unmarshal
from .listing import ListComposer, Listing, PageWindow, page_window, parse_sort
from .marshal import FieldMarshaler, FieldNode, default_widgets, marshal, values_map
from .model import AdminAction, ModelAdmin
from .registry import ModelRegistry

__all__ = [
    "Accessor",
    "ActionFailed",
    "AdminAction",
    "AdminDispatcher",
    "AdminError",
    "AdminModelNotFound",
    "Authenticator",
    "BadRequestError",
    "DuplicateModelAdmin",
    "FieldMarshaler",
    "FieldNode",
    "FieldSpec",
    "HTTPError",
    "InvalidID",
    "ListComposer",
    "Listing",
    "ListingError",
    "ModelAdmin",
    "ModelRegistry",
    "NotFoundError",
    "OperationKind",
    "PKStringer",
    "PageWindow",
    "PermissionDenied",
    "RecordNotFound",
    "Redirect",
    "RegistrySealedError",
    "Render",
    "RouteState",
    "Searcher",
    "SortOrder",
    "default_widgets",
    "describe_fields",
    "marshal",
    "page_window",
    "parse_sort",
    "resolve_state",
    "unmarshal",
    "values_map",
]


# The End
