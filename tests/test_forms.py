# -*- coding: utf-8 -*-
"""
tests.test_forms

Unit tests for converting submitted forms into update mappings.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from recordadmin.core.forms import form_to_lists, unmarshal
from recordadmin.core.model import ModelAdmin
from tests.sample_records import RecordingAccessor


def _admin() -> ModelAdmin:
    return ModelAdmin(
        name="widget",
        accessor=RecordingAccessor(),
        read_only_fields={"B"},
        omit_fields={"C"},
    )


def test_read_only_and_omitted_keys_are_dropped() -> None:
    form = {"A": ["1"], "B": ["2"], "C": ["3"]}

    assert unmarshal(form, _admin()) == {"A": ["1"]}


def test_multi_values_and_dotted_keys_pass_through() -> None:
    form = {"Languages": ["en", "fr"], "Parent.0.Child": ["x"]}

    assert unmarshal(form, _admin()) == form


def test_form_without_admissible_keys_yields_empty_mapping() -> None:
    assert unmarshal({"B": ["2"], "C": ["3"]}, _admin()) == {}
    assert unmarshal({}, _admin()) == {}


def test_form_to_lists_groups_repeated_keys() -> None:
    items = [("ids", "1"), ("ids", "2"), ("action", "mark"), ("file", object())]

    assert form_to_lists(items) == {"ids": ["1", "2"], "action": ["mark"]}


# The End
