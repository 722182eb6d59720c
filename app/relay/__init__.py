"""
Webhook Relay Core

Schema reconciliation and payload projection for the target database.
"""

from .identifier import normalize_table_id
from .models import ColumnType, RelayResult, TableSchema
from .service import relay_payload

__all__ = ["ColumnType", "RelayResult", "TableSchema", "normalize_table_id", "relay_payload"]
