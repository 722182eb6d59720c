"""
Remote Table Clients

External datastore adapters for the webhook relay.
"""

from .base import RemoteResponse, RemoteTableClient
from .notion import NotionClient

__all__ = ["RemoteResponse", "RemoteTableClient", "NotionClient"]
