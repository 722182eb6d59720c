"""Webhook relay endpoint - inserts inbound JSON as a Notion database row."""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.dependencies import get_table_client
from app.errors import ConfigurationError, MalformedRequestError
from app.providers.base import RemoteTableClient
from app.relay import relay_payload


logger = logging.getLogger(__name__)
router = APIRouter()

limiter = Limiter(key_func=get_remote_address)


class RelayResponse(BaseModel):
    status: str = "ok"
    notion_status: int
    page_id: str | None = None
    columns_added: list[str] = Field(default_factory=list)
    dropped_fields: list[str] = Field(default_factory=list)


def _require_config() -> str:
    if not settings.notion_token:
        raise ConfigurationError("Missing NOTION_TOKEN environment variable")
    if not settings.notion_db_id:
        raise ConfigurationError("Missing NOTION_DB_ID environment variable")
    return settings.notion_db_id


async def _read_payload(request: Request) -> dict:
    try:
        payload = await request.json()
    except (ValueError, RecursionError) as e:
        raise MalformedRequestError(f"Invalid JSON in request body: {e}")
    if not isinstance(payload, dict):
        raise MalformedRequestError(
            f"Invalid JSON in request body: expected an object, got {type(payload).__name__}"
        )
    return payload


@router.post("", response_model=RelayResponse)
@limiter.limit(settings.relay_rate_limit)
async def relay_webhook(request: Request, client: RemoteTableClient = Depends(get_table_client)):
    """Relay a JSON object into the configured Notion database as a new row."""
    db_id = _require_config()
    payload = await _read_payload(request)
    logger.info(f"Received payload with fields: {list(payload)}")

    result = await relay_payload(client, db_id, payload)

    return RelayResponse(**result.model_dump())
