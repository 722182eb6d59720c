"""Relay chain: normalize id, read schema, reconcile, project, submit."""

import logging
from typing import Any

from app.providers.base import RemoteTableClient
from .identifier import normalize_table_id
from .models import RelayResult
from .projection import project_properties
from .schema import fetch_schema, reconcile_schema
from .submit import submit_row, title_for


logger = logging.getLogger(__name__)


async def relay_payload(client: RemoteTableClient, raw_table_id: str, payload: dict[str, Any]) -> RelayResult:
    """Insert ``payload`` as one row of the target database.

    Remote calls run strictly in sequence and are each attempted once.
    Raises SchemaReadError or RowSubmissionError on fatal upstream failures.
    """
    table_id = normalize_table_id(raw_table_id)
    logger.info(f"Relaying to {client.provider_name} database {table_id}")

    schema = await fetch_schema(client, table_id)
    working = await reconcile_schema(client, table_id, schema, payload)

    properties, dropped = project_properties(working, payload)
    if dropped:
        logger.info(f"Fields not written: {dropped}")

    res = await submit_row(client, table_id, working.title_column, title_for(payload), properties)

    page_id = None
    try:
        body = res.json_body()
        if isinstance(body, dict):
            page_id = body.get("id")
    except ValueError:
        logger.warning("Notion page create response is not JSON")

    return RelayResult(
        notion_status=res.status_code,
        page_id=page_id,
        columns_added=[name for name in working.columns if name not in schema],
        dropped_fields=dropped,
    )
