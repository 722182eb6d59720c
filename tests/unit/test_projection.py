"""
Tests for per-field projection into Notion property fragments.
"""
from __future__ import annotations

import math

import pytest

from app.errors import FieldProjectionError
from app.relay import projection
from app.relay.models import ColumnType, TableSchema
from app.relay.projection import coerce_number, project_properties, project_value, text_property


def _text(content: str) -> dict:
    return {"rich_text": [{"type": "text", "text": {"content": content}}]}


@pytest.mark.parametrize("value", [0, 42, -7, 3.25, 1e21])
def test_number_column_keeps_numeric_values(value) -> None:
    assert project_value(value, ColumnType.NUMBER) == {"number": value}


@pytest.mark.parametrize(("value", "expected"), [("42", 42), (" 2.5 ", 2.5), ("1e3", 1000.0), (True, 1), (False, 0)])
def test_number_column_coerces_numeric_like_values(value, expected) -> None:
    assert project_value(value, ColumnType.NUMBER) == {"number": expected}


@pytest.mark.parametrize("value", ["abc", "", "   ", "nan", "inf", None, [1], {"a": 1}, math.nan])
def test_number_column_omits_non_numeric_values(value) -> None:
    assert project_value(value, ColumnType.NUMBER) is None


@pytest.mark.parametrize(("value", "expected"), [(True, True), (False, False), (1, True), (0, False), ("", False), ("no", True), (None, False)])
def test_boolean_column_uses_truthiness(value, expected: bool) -> None:
    assert project_value(value, ColumnType.BOOLEAN) == {"checkbox": expected}


@pytest.mark.parametrize("value", ["2024-01-15", "2024-01-15T09:30:00.000Z"])
def test_date_column_keeps_dated_strings(value: str) -> None:
    assert project_value(value, ColumnType.DATE) == {"date": {"start": value}}


@pytest.mark.parametrize("value", ["15/01/2024", "yesterday", 20240115, None])
def test_date_column_omits_other_values(value) -> None:
    assert project_value(value, ColumnType.DATE) is None


@pytest.mark.parametrize("column_type", [ColumnType.TEXT, ColumnType.SELECT, ColumnType.MULTI_SELECT, ColumnType.OTHER])
def test_text_like_columns_write_rich_text(column_type: ColumnType) -> None:
    assert project_value("hello", column_type) == _text("hello")


def test_text_is_truncated_to_2000_characters() -> None:
    fragment = project_value("x" * 2500, ColumnType.TEXT)
    assert fragment == _text("x" * 2000)


@pytest.mark.parametrize(("value", "expected"), [(42, "42"), (True, "true"), (None, "null"), ({"a": [1, 2]}, '{"a": [1, 2]}')])
def test_text_stringifies_non_strings_as_json(value, expected: str) -> None:
    assert text_property(value) == _text(expected)


def test_unexpected_failure_raises_field_projection_error(monkeypatch) -> None:
    def boom(value):
        raise RuntimeError("boom")

    monkeypatch.setattr(projection, "coerce_number", boom)

    with pytest.raises(FieldProjectionError):
        project_value(5, ColumnType.NUMBER)


def test_project_properties_falls_back_to_text_per_field(monkeypatch) -> None:
    def boom(value):
        raise RuntimeError("boom")

    monkeypatch.setattr(projection, "coerce_number", boom)
    schema = TableSchema(
        columns={"Name": ColumnType.TITLE, "score": ColumnType.NUMBER, "note": ColumnType.TEXT},
        title_column="Name",
    )

    properties, dropped = project_properties(schema, {"score": 5, "note": "ok"})

    assert properties == {"score": _text("5"), "note": _text("ok")}
    assert dropped == []


def test_project_properties_drops_unknown_and_omitted_fields() -> None:
    schema = TableSchema(
        columns={"Name": ColumnType.TITLE, "score": ColumnType.NUMBER, "seen": ColumnType.DATE},
        title_column="Name",
    )
    payload = {"callerName": "Bob", "score": "n/a", "seen": "2024-01-15", "unknown": 1, "Name": "shadow"}

    properties, dropped = project_properties(schema, payload)

    assert properties == {"seen": {"date": {"start": "2024-01-15"}}}
    assert dropped == ["score", "unknown", "Name"]


def test_coerce_number_prefers_int_for_integral_text() -> None:
    assert coerce_number("7") == 7
    assert isinstance(coerce_number("7"), int)
