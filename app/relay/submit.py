"""Row assembly and submission."""

import logging
from datetime import datetime, timezone
from typing import Any

from app.errors import RowSubmissionError, parse_notion_error
from app.providers.base import RemoteResponse, RemoteTableClient
from .models import CALLER_NAME_FIELD
from .projection import stringify, title_property


logger = logging.getLogger(__name__)


def title_for(payload: dict[str, Any], now: datetime | None = None) -> str:
    caller_name = payload.get(CALLER_NAME_FIELD)
    if caller_name:
        return stringify(caller_name)
    now = now or datetime.now(timezone.utc)
    return f"Request from {now.isoformat()}"


def build_row(title_column: str, title: str, properties: dict[str, dict]) -> dict[str, dict]:
    return {title_column: title_property(title), **properties}


async def submit_row(
    client: RemoteTableClient,
    table_id: str,
    title_column: str,
    title: str,
    properties: dict[str, dict],
) -> RemoteResponse:
    row = build_row(title_column, title, properties)
    logger.info(f"Sending to Notion: {len(row)} properties ({', '.join(row)})")

    res = await client.create_row(table_id, row)
    logger.info(f"Notion response status: {res.status_code}")

    if not res.ok:
        logger.error(f"Notion page create error: {parse_notion_error(res.body)}")
        raise RowSubmissionError(
            f"Notion API error ({res.status_code}): {res.body}",
            status_code=res.status_code,
            body=res.body,
        )
    return res
