# -*- coding: utf-8 -*-
"""
marshal

Turn record instances into ordered trees of editable field nodes.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable

from pydantic import BaseModel

from .fields import (
    BOOL,
    FLOAT,
    INT,
    SCALAR_KINDS,
    SLICE,
    STRING,
    STRUCT,
    describe_fields,
    format_scalar,
    has_custom_str,
    is_record,
    kind_of_value,
)

if TYPE_CHECKING:  # pragma: no cover - for type checking only
    from .model import ModelAdmin

logger = logging.getLogger(__name__)


@dataclass
class FieldNode:
    """One node of the marshaled display/edit tree of a record.

    A node is either a leaf carrying ``value`` or a container carrying
    ``children``.
    """

    identifier: str
    kind: str
    value: str = ""
    children: list["FieldNode"] = field(default_factory=list)
    list_visible: bool = False
    omitted: bool = False
    read_only: bool = False

    @property
    def name(self) -> str:
        """Return the last segment of the dotted identifier."""
        return self.identifier.rsplit(".", 1)[-1]

    @property
    def is_leaf(self) -> bool:
        """Return ``True`` when the node carries a value instead of children."""
        return not self.children


class FieldMarshaler:
    """Walk record instances using the field sets of one model admin."""

    def __init__(self, admin: "ModelAdmin") -> None:
        self.admin = admin

    def marshal(self, record: Any, prefix: str = "") -> list[FieldNode]:
        """Return one node per declared field of ``record``."""

        if prefix:
            prefix += "."
        nodes: list[FieldNode] = []
        for spec in describe_fields(record):
            node = self._flagged(FieldNode(identifier=prefix + spec.name, kind=spec.kind), spec.name)
            value = spec.value_of(record)
            if value is not None:
                node.kind = kind_of_value(value)
                self._fill(node, value)
            nodes.append(node)
        return nodes

    def _flagged(self, node: FieldNode, name: str) -> FieldNode:
        # Flags use the bare field name at every depth.
        node.list_visible = name in self.admin.list_fields
        node.omitted = name in self.admin.omit_fields
        node.read_only = name in self.admin.read_only_fields
        return node

    def _fill(self, node: FieldNode, value: Any) -> None:
        kind = node.kind
        if kind == STRING or kind == STRUCT:
            if has_custom_str(value):
                node.value = str(value)
            elif kind == STRING:
                node.value = format_scalar(value, kind)
            else:
                node.children = self.marshal(value, node.identifier)
        elif kind in SCALAR_KINDS:
            node.value = format_scalar(value, kind)
        elif kind == SLICE:
            node.children = list(self._elements(node.identifier, value))
        elif has_custom_str(value):
            node.value = str(value)

    def _elements(self, identifier: str, items: Iterable[Any]) -> Iterable[FieldNode]:
        # Elements that are not records are skipped.
        for index, item in enumerate(items):
            if not is_record(item):
                continue
            child_id = f"{identifier}.{index}"
            yield FieldNode(
                identifier=child_id,
                kind=STRUCT,
                children=self.marshal(item, child_id),
            )


def marshal(record: Any, admin: "ModelAdmin", prefix: str = "") -> list[FieldNode]:
    """Marshal ``record`` into field nodes flagged by ``admin``'s field sets."""

    return FieldMarshaler(admin).marshal(record, prefix)


def default_widgets(prototype: Any) -> dict[str, str]:
    """Infer a widget name for every field of ``prototype``."""

    widgets: dict[str, str] = {}
    for spec in describe_fields(prototype):
        widgets[spec.name] = "text"
        if spec.kind == BOOL:
            widgets[spec.name] = "radio"
        elif spec.kind in (STRUCT, SLICE):
            widgets[spec.name] = "textarea"
    return widgets


def values_map(record: Any) -> dict[str, str]:
    """Map each field of ``record`` to a flat string used by edit forms.

    Nested records and sequences are rendered as indented JSON.
    """

    out: dict[str, str] = {}
    for spec in describe_fields(record):
        value = spec.value_of(record)
        if value is None:
            out[spec.name] = ""
            continue
        kind = kind_of_value(value)
        if kind in (BOOL, INT, FLOAT):
            out[spec.name] = format_scalar(value, kind)
        elif kind != SLICE and has_custom_str(value):
            out[spec.name] = str(value)
        elif kind in (STRUCT, SLICE):
            try:
                out[spec.name] = json.dumps(_jsonable(value), indent=2, default=str)
            except (TypeError, ValueError):
                logger.exception("Unable to serialise field %s", spec.name)
        else:
            out[spec.name] = str(value)
    return out


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if is_record(value):
        return {spec.name: _jsonable(spec.value_of(value)) for spec in describe_fields(value)}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(item) for item in value]
    return value


__all__ = ["FieldMarshaler", "FieldNode", "default_widgets", "marshal", "values_map"]


# The End
