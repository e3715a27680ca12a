# -*- coding: utf-8 -*-
"""
model

Model admin descriptors and list actions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from .capabilities import Accessor, PKStringer, Searcher
from .fields import describe_fields

FormData = Mapping[str, list[str]]


@dataclass
class AdminAction:
    """Action executed on a set of records from a model's list view.

    The handler receives the raw submitted form. It reports an expected
    failure by raising :class:`ActionFailed` with a message for the user.
    """

    identifier: str
    display_name: str
    handler: Callable[[FormData], Any]
    confirm: bool = False
    confirm_title: str = ""
    confirm_message: str = ""


@dataclass
class ModelAdmin:
    """Registration metadata for one administered record type."""

    name: str
    accessor: Accessor
    pk_field: str = "id"
    list_fields: Mapping[str, bool] | Iterable[str] = field(default_factory=dict)
    omit_fields: Iterable[str] = field(default_factory=frozenset)
    read_only_fields: Iterable[str] = field(default_factory=frozenset)
    field_notes: dict[str, str] = field(default_factory=dict)
    field_widgets: dict[str, str] | None = None
    list_actions: dict[str, AdminAction] = field(default_factory=dict)
    searcher: Searcher | None = None
    pk_stringer: PKStringer | None = None

    def __post_init__(self) -> None:
        # ``list_fields`` maps field name to its sortable flag.
        if isinstance(self.list_fields, Mapping):
            self.list_fields = {name: bool(flag) for name, flag in self.list_fields.items()}
        else:
            self.list_fields = {name: True for name in self.list_fields}
        self.omit_fields = frozenset(self.omit_fields)
        self.read_only_fields = frozenset(self.read_only_fields)

    @property
    def slug(self) -> str:
        """Return the lowercase name used as registry key and route segment."""
        return self.name.lower()

    @property
    def search_placeholder(self) -> str:
        """Return the hint shown in the search box, empty without a searcher."""
        if self.searcher is None:
            return ""
        return getattr(self.searcher, "placeholder", "") or ""

    def add_list_action(self, action: AdminAction) -> None:
        """Register ``action`` for use in the list view."""
        self.list_actions[action.identifier] = action

    def is_sortable(self, name: str) -> bool:
        """Return ``True`` when ``name`` is a sortable list field."""
        return bool(self.list_fields.get(name, False))

    def pk_value(self, record: Any) -> Any:
        """Return the raw primary key value of ``record``."""
        for spec in describe_fields(record):
            if spec.name == self.pk_field:
                return spec.value_of(record)
        return getattr(record, self.pk_field, None)

    def pk_string(self, record: Any) -> str:
        """Return the primary key of ``record`` in its URL form."""
        value = self.pk_value(record)
        if self.pk_stringer is not None:
            return self.pk_stringer.pk_string(value)
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


__all__ = ["AdminAction", "FormData", "ModelAdmin"]


# The End
