"""Shared FastAPI dependencies."""

from typing import AsyncIterator

import httpx
from fastapi import Header, HTTPException

from app.config import settings
from app.providers import NotionClient, RemoteTableClient


async def verify_api_key(x_api_key: str | None = Header(None)) -> None:
    """Require X-API-Key when API_KEY is configured."""
    if settings.api_key and x_api_key != settings.api_key:
        raise HTTPException(401, "Invalid or missing API key")


async def get_table_client() -> AsyncIterator[RemoteTableClient]:
    """Notion client bound to a per-request HTTP connection pool."""
    async with httpx.AsyncClient(timeout=settings.notion_timeout) as http:
        yield NotionClient(http)
