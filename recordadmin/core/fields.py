# -*- coding: utf-8 -*-
"""
fields

Ordered field descriptions for arbitrary record instances.

Records describe themselves in one of three ways, checked in order: an
explicit ``__admin_fields__()`` method returning :class:`FieldSpec` items,
a dataclass, or a pydantic model. Everything else has no fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import dataclasses
import math
import sys
import types
import typing
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, Any, Callable, Union, get_args, get_origin

from pydantic import BaseModel

STRING = "string"
INT = "int"
FLOAT = "float"
BOOL = "bool"
STRUCT = "struct"
SLICE = "slice"
MAP = "map"
OBJECT = "object"
INVALID = "invalid"

SCALAR_KINDS = frozenset({STRING, INT, FLOAT, BOOL})

_PLAIN_STR = frozenset({object.__str__, str.__str__, BaseModel.__str__})
_SEQUENCE_ORIGINS = (list, tuple, set, frozenset, Sequence, Set)


@dataclass(frozen=True)
class FieldSpec:
    """Describe one declared field of a record type."""

    name: str
    kind: str
    annotation: Any = None
    getter: Callable[[Any], Any] | None = None

    def value_of(self, record: Any) -> Any:
        """Return the value of this field on ``record``."""
        if self.getter is not None:
            return self.getter(record)
        return getattr(record, self.name, None)


def is_record(value: Any) -> bool:
    """Return ``True`` when ``value`` is a record instance with fields."""

    if value is None or isinstance(value, type):
        return False
    if callable(getattr(value, "__admin_fields__", None)):
        return True
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def describe_fields(record: Any) -> list[FieldSpec]:
    """Return the fields of ``record`` in declaration order."""

    if not is_record(record):
        return []
    explicit = getattr(record, "__admin_fields__", None)
    if callable(explicit):
        return list(explicit())
    if dataclasses.is_dataclass(record):
        hints = _type_hints(type(record))
        return [
            _spec(f.name, hints.get(f.name, f.type))
            for f in dataclasses.fields(record)
        ]
    return [
        _spec(name, info.annotation)
        for name, info in type(record).model_fields.items()
    ]


def _spec(name: str, annotation: Any) -> FieldSpec:
    return FieldSpec(name=name, kind=kind_of_annotation(annotation), annotation=annotation)


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        pass
    # Unresolvable annotations keep their string form.
    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {cls.__name__: cls}
    return {
        f.name: _resolve_annotation(f.type, globalns, localns)
        for f in dataclasses.fields(cls)
    }


def _resolve_annotation(
    annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, localns)
    except (NameError, AttributeError, SyntaxError, TypeError):
        return annotation


def unwrap_optional(annotation: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers from ``annotation``."""

    origin = get_origin(annotation)
    if origin is Annotated:
        return unwrap_optional(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return unwrap_optional(args[0])
    return annotation


def kind_of_annotation(annotation: Any) -> str:
    """Return the display kind declared by a type annotation."""

    annotation = unwrap_optional(annotation)
    origin = get_origin(annotation)
    if origin is not None:
        if isinstance(origin, type) and issubclass(origin, Mapping):
            return MAP
        if isinstance(origin, type) and issubclass(origin, _SEQUENCE_ORIGINS):
            return SLICE
        return OBJECT
    if not isinstance(annotation, type):
        return OBJECT
    if issubclass(annotation, bool):
        return BOOL
    if issubclass(annotation, int):
        return INT
    if issubclass(annotation, float):
        return FLOAT
    if issubclass(annotation, str):
        return STRING
    if issubclass(annotation, Mapping):
        return MAP
    if issubclass(annotation, _SEQUENCE_ORIGINS) and not issubclass(annotation, (bytes, bytearray)):
        return SLICE
    if (
        dataclasses.is_dataclass(annotation)
        or issubclass(annotation, BaseModel)
        or callable(getattr(annotation, "__admin_fields__", None))
    ):
        return STRUCT
    return OBJECT


def kind_of_value(value: Any) -> str:
    """Return the display kind of a runtime value."""

    if value is None:
        return INVALID
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    if isinstance(value, Mapping):
        return MAP
    if isinstance(value, (list, tuple, set, frozenset)):
        return SLICE
    if is_record(value):
        return STRUCT
    return OBJECT


def has_custom_str(value: Any) -> bool:
    """Return ``True`` when the value's type defines its own ``__str__``."""

    return type(value).__str__ not in _PLAIN_STR


def format_float(value: float) -> str:
    """Return the shortest round-trippable fixed-point form of ``value``."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_scalar(value: Any, kind: str) -> str:
    """Render a scalar value of ``kind`` in its canonical string form."""

    if kind == BOOL:
        return "true" if value else "false"
    if kind == INT:
        return str(int(value))
    if kind == FLOAT:
        return format_float(value)
    return str(value)


__all__ = [
    "FieldSpec",
    "describe_fields",
    "format_float",
    "format_scalar",
    "has_custom_str",
    "is_record",
    "kind_of_annotation",
    "kind_of_value",
    "unwrap_optional",
]


# The End
