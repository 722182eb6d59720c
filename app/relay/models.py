"""Schema and payload types shared by the relay core."""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


CALLER_NAME_FIELD = "callerName"
TEXT_LIMIT = 2000

# Leading calendar date, e.g. "2024-01-15" or "2024-01-15T09:30:00Z"
DATE_PREFIX = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}")


class ColumnType(str, Enum):
    TITLE = "title"
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    OTHER = "other"

    @property
    def wire_type(self) -> str:
        """Notion property type name used in schema patches."""
        return _WIRE_NAMES.get(self, self.value)

    @classmethod
    def from_wire(cls, wire_type: str | None) -> "ColumnType":
        return _FROM_WIRE.get(wire_type or "", cls.OTHER)


_WIRE_NAMES = {
    ColumnType.TEXT: "rich_text",
    ColumnType.BOOLEAN: "checkbox",
}

_FROM_WIRE = {
    "title": ColumnType.TITLE,
    "rich_text": ColumnType.TEXT,
    "number": ColumnType.NUMBER,
    "checkbox": ColumnType.BOOLEAN,
    "date": ColumnType.DATE,
    "select": ColumnType.SELECT,
    "multi_select": ColumnType.MULTI_SELECT,
}


class ValueKind(str, Enum):
    """Runtime tag of a decoded JSON value."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OTHER = "other"


def value_kind(value: Any) -> ValueKind:
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def is_date_string(value: Any) -> bool:
    return isinstance(value, str) and DATE_PREFIX.match(value) is not None


class TableSchema(BaseModel):
    """Column definitions of the target database for one request."""
    columns: dict[str, ColumnType]
    title_column: str

    def __contains__(self, name: str) -> bool:
        return name in self.columns

    def column_type(self, name: str) -> ColumnType | None:
        return self.columns.get(name)


class RelayResult(BaseModel):
    notion_status: int
    page_id: str | None = None
    columns_added: list[str] = Field(default_factory=list)
    dropped_fields: list[str] = Field(default_factory=list)
