"""
Fixtures for the relay test suite.

FakeTableClient stands in for Notion: it records every call and replays
scripted responses, so tests can assert on exactly which remote calls a
request makes.
"""
from __future__ import annotations

import json

import pytest

from app.providers.base import RemoteResponse, RemoteTableClient


def _schema_response(columns: dict[str, str], status_code: int = 200) -> RemoteResponse:
    body = {
        "object": "database",
        "properties": {name: {"id": f"p{i}", "name": name, "type": wire} for i, (name, wire) in enumerate(columns.items())},
    }
    return RemoteResponse(status_code=status_code, body=json.dumps(body))


class FakeTableClient(RemoteTableClient):
    def __init__(
        self,
        schemas: list[RemoteResponse | Exception],
        patch: RemoteResponse | Exception | None = None,
        create: RemoteResponse | Exception | None = None,
    ) -> None:
        self._schemas = list(schemas)
        self._patch = patch or RemoteResponse(status_code=200, body="{}")
        self._create = create or RemoteResponse(status_code=200, body='{"object": "page", "id": "page-1"}')
        self.calls: list[tuple[str, str, dict | None]] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def methods(self) -> list[str]:
        return [method for method, _, _ in self.calls]

    def sent(self, method: str) -> dict | None:
        """Properties sent by the last call of ``method``."""
        for name, _, properties in reversed(self.calls):
            if name == method:
                return properties
        return None

    @staticmethod
    def _reply(res):
        if isinstance(res, Exception):
            raise res
        return res

    async def retrieve_schema(self, table_id: str) -> RemoteResponse:
        self.calls.append(("retrieve_schema", table_id, None))
        res = self._schemas.pop(0) if len(self._schemas) > 1 else self._schemas[0]
        return self._reply(res)

    async def update_schema(self, table_id: str, properties: dict[str, dict]) -> RemoteResponse:
        self.calls.append(("update_schema", table_id, properties))
        return self._reply(self._patch)

    async def create_row(self, table_id: str, properties: dict[str, dict]) -> RemoteResponse:
        self.calls.append(("create_row", table_id, properties))
        return self._reply(self._create)


@pytest.fixture
def schema_response():
    """Build a Notion database response from ``{name: wire_type}``."""
    return _schema_response


@pytest.fixture
def fake_client():
    """The FakeTableClient class, to be constructed with scripted responses."""
    return FakeTableClient
