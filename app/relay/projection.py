"""Projection of payload values into Notion typed-property fragments."""

import json
import logging
import math
from typing import Any

from app.errors import FieldProjectionError
from .models import CALLER_NAME_FIELD, TEXT_LIMIT, ColumnType, TableSchema, is_date_string


logger = logging.getLogger(__name__)


def stringify(value: Any) -> str:
    """Strings pass through; other JSON values use their JSON spelling."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def text_property(value: Any) -> dict:
    return {
        "rich_text": [{
            "type": "text",
            "text": {"content": stringify(value)[:TEXT_LIMIT]},
        }]
    }


def title_property(content: str) -> dict:
    return {"title": [{"text": {"content": content}}]}


def coerce_number(value: Any) -> int | float | None:
    """Numeric value of ``value``, or None when it is not a finite number."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _project_strict(value: Any, column_type: ColumnType) -> dict | None:
    if column_type is ColumnType.NUMBER:
        number = coerce_number(value)
        return {"number": number} if number is not None else None
    if column_type is ColumnType.BOOLEAN:
        return {"checkbox": bool(value)}
    if column_type is ColumnType.DATE:
        return {"date": {"start": value}} if is_date_string(value) else None
    # select and multi_select are written as text; managing their option
    # vocabulary is out of scope
    return text_property(value)


def project_value(value: Any, column_type: ColumnType) -> dict | None:
    """Wire fragment for ``value`` under ``column_type``; None omits the field.

    Raises FieldProjectionError if the strict rule fails unexpectedly.
    """
    try:
        return _project_strict(value, column_type)
    except Exception as e:
        raise FieldProjectionError(
            f"cannot project {type(value).__name__} as {column_type.value}: {e}"
        ) from e


def project_properties(schema: TableSchema, payload: dict[str, Any]) -> tuple[dict[str, dict], list[str]]:
    """Project every payload field that has a column.

    Returns the properties and the names of the fields left out, either
    because no column exists or because the strict rule omitted them.
    """
    properties: dict[str, dict] = {}
    dropped: list[str] = []

    for key, value in payload.items():
        if key == CALLER_NAME_FIELD:
            continue
        if key == schema.title_column:
            # the title is owned by callerName
            dropped.append(key)
            continue
        column_type = schema.column_type(key)
        if column_type is None:
            dropped.append(key)
            continue

        try:
            fragment = project_value(value, column_type)
        except FieldProjectionError as e:
            logger.warning(f"Error mapping property {key}, falling back to text: {e.message}")
            fragment = text_property(value)

        if fragment is None:
            dropped.append(key)
        else:
            properties[key] = fragment

    return properties, dropped
