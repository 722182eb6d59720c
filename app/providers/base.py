"""Base interface for remote table clients."""

import json
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class RemoteResponse(BaseModel):
    """Status and raw body of one remote call, passed through unmodified."""
    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json_body(self) -> Any:
        return json.loads(self.body) if self.body else {}


class RemoteTableClient(ABC):
    """Abstract capability over the external tabular datastore.

    Implementations perform exactly one network call per method and never
    interpret the status; the relay core decides what a failure means.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider identifier."""
        pass

    @abstractmethod
    async def retrieve_schema(self, table_id: str) -> RemoteResponse:
        """Read the table's column definitions."""
        pass

    @abstractmethod
    async def update_schema(self, table_id: str, properties: dict[str, dict]) -> RemoteResponse:
        """Add columns to the table. ``properties`` maps name to wire type spec."""
        pass

    @abstractmethod
    async def create_row(self, table_id: str, properties: dict[str, dict]) -> RemoteResponse:
        """Insert one row with already-projected properties."""
        pass
