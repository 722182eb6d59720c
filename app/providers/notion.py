"""Notion API client for database schema and page operations."""

import logging

import httpx

from app.config import settings
from app.errors import RemoteUnavailableError
from .base import RemoteResponse, RemoteTableClient


logger = logging.getLogger(__name__)


class NotionClient(RemoteTableClient):
    """Notion databases/pages client.

    Wraps a caller-owned ``httpx.AsyncClient`` so one connection pool is
    shared by the sequential calls of a single relay request.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        token: str | None = None,
        base_url: str | None = None,
        version: str | None = None,
    ):
        self._http = http
        self._token = token if token is not None else settings.notion_token
        self._base_url = (base_url or settings.notion_api_url).rstrip("/")
        self._version = version or settings.notion_version

    @property
    def provider_name(self) -> str:
        return "notion"

    def _get_headers(self, write: bool = False) -> dict:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Notion-Version": self._version,
        }
        if write:
            headers["Content-Type"] = "application/json"
        return headers

    async def _send(self, method: str, path: str, json: dict | None = None) -> RemoteResponse:
        url = f"{self._base_url}{path}"
        try:
            r = await self._http.request(
                method,
                url,
                json=json,
                headers=self._get_headers(write=json is not None),
            )
        except httpx.TimeoutException:
            raise RemoteUnavailableError(f"Notion timed out ({method} {path})", 504)
        except httpx.TransportError as e:
            raise RemoteUnavailableError(f"Notion unreachable ({method} {path}): {e}", 503)

        logger.debug(f"Notion {method} {path} -> {r.status_code}")
        return RemoteResponse(status_code=r.status_code, body=r.text)

    async def retrieve_schema(self, table_id: str) -> RemoteResponse:
        return await self._send("GET", f"/databases/{table_id}")

    async def update_schema(self, table_id: str, properties: dict[str, dict]) -> RemoteResponse:
        return await self._send("PATCH", f"/databases/{table_id}", json={"properties": properties})

    async def create_row(self, table_id: str, properties: dict[str, dict]) -> RemoteResponse:
        payload = {
            "parent": {"database_id": table_id},
            "properties": properties,
        }
        return await self._send("POST", "/pages", json=payload)
