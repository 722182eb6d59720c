"""Schema fetch and additive reconciliation against the target database."""

import json
import logging
from typing import Any

from app.errors import (
    RemoteUnavailableError,
    SchemaPatchError,
    SchemaReadError,
    parse_notion_error,
)
from app.providers.base import RemoteTableClient
from .models import CALLER_NAME_FIELD, ColumnType, TableSchema, ValueKind, is_date_string, value_kind


logger = logging.getLogger(__name__)


async def fetch_schema(client: RemoteTableClient, table_id: str) -> TableSchema:
    """Read the database's columns and locate its title column."""
    res = await client.retrieve_schema(table_id)
    if not res.ok:
        logger.error(f"Database schema fetch error ({res.status_code}): {parse_notion_error(res.body)}")
        raise SchemaReadError(
            f"Database access error ({res.status_code}): {res.body}",
            status_code=res.status_code,
            body=res.body,
        )

    try:
        properties = res.json_body().get("properties") or {}
    except (json.JSONDecodeError, AttributeError):
        raise SchemaReadError(f"Database schema response is not a JSON object: {res.body[:200]}")
    if not isinstance(properties, dict):
        raise SchemaReadError(f"Database schema properties is not an object: {res.body[:200]}")

    columns = {
        name: ColumnType.from_wire(prop.get("type") if isinstance(prop, dict) else None)
        for name, prop in properties.items()
    }
    logger.info(f"Database schema properties: {list(columns)}")

    title_column = next((name for name, kind in columns.items() if kind is ColumnType.TITLE), None)
    if title_column is None:
        raise SchemaReadError("No title property found in database schema")

    logger.info(f"Found title property: {title_column}")
    return TableSchema(columns=columns, title_column=title_column)


def infer_column_type(value: Any) -> ColumnType:
    """Best-effort column type for a value whose key has no column yet."""
    kind = value_kind(value)
    if kind is ValueKind.BOOLEAN:
        return ColumnType.BOOLEAN
    if kind is ValueKind.NUMBER:
        return ColumnType.NUMBER
    if kind is ValueKind.STRING:
        return ColumnType.DATE if is_date_string(value) else ColumnType.TEXT
    if kind is ValueKind.OTHER:
        return ColumnType.TEXT
    raise AssertionError(f"unhandled value kind: {kind}")


def missing_columns(schema: TableSchema, payload: dict[str, Any]) -> list[str]:
    """Payload keys with no column, in payload order. ``callerName`` never counts."""
    return [key for key in payload if key != CALLER_NAME_FIELD and key not in schema]


def build_schema_patch(payload: dict[str, Any], names: list[str]) -> dict[str, dict]:
    return {name: {infer_column_type(payload[name]).wire_type: {}} for name in names}


async def _apply_patch(client: RemoteTableClient, table_id: str, patch: dict[str, dict]) -> None:
    try:
        res = await client.update_schema(table_id, patch)
    except RemoteUnavailableError as e:
        raise SchemaPatchError(e.message, status_code=e.status_code)
    if not res.ok:
        raise SchemaPatchError(
            f"Database update error ({res.status_code}): {parse_notion_error(res.body)}",
            status_code=res.status_code,
            body=res.body,
        )


async def reconcile_schema(
    client: RemoteTableClient,
    table_id: str,
    schema: TableSchema,
    payload: dict[str, Any],
) -> TableSchema:
    """Add columns for unknown payload keys and return the working schema.

    Patch and re-read failures are logged and absorbed: the pre-patch schema
    is returned, so rows still land with the already-known fields.
    """
    missing = missing_columns(schema, payload)
    if not missing:
        return schema

    patch = build_schema_patch(payload, missing)
    logger.info(f"Adding missing properties to database: {patch}")

    try:
        await _apply_patch(client, table_id, patch)
    except SchemaPatchError as e:
        logger.warning(f"Schema patch failed, continuing with known columns: {e.message}")
        return schema
    logger.info("Successfully added new properties to database")

    try:
        refreshed = await fetch_schema(client, table_id)
    except (SchemaReadError, RemoteUnavailableError) as e:
        logger.warning(f"Schema re-read after patch failed, continuing with known columns: {e.message}")
        return schema

    return TableSchema(
        columns={**schema.columns, **refreshed.columns},
        title_column=schema.title_column,
    )
