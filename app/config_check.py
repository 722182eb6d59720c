"""Validation of the Notion credential and database id settings."""

import re

from pydantic import BaseModel

TOKEN_PLACEHOLDER = "your_notion_integration_token_here"
DB_ID_PLACEHOLDER = "your_notion_database_id_here"
TOKEN_PREFIXES = ("secret_", "ntn_")

_DB_ID_FORMAT = re.compile(r"^[a-f0-9-]{32,36}$", re.IGNORECASE)


class ConfigReport(BaseModel):
    errors: list[str] = []
    warnings: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def check_notion_config(token: str, db_id: str) -> ConfigReport:
    report = ConfigReport()

    if not token:
        report.errors.append("NOTION_TOKEN is required")
    elif token == TOKEN_PLACEHOLDER:
        report.errors.append("NOTION_TOKEN is still set to placeholder value")
    elif not token.startswith(TOKEN_PREFIXES):
        report.warnings.append('NOTION_TOKEN should start with "secret_" or "ntn_"')

    if not db_id:
        report.errors.append("NOTION_DB_ID is required")
    elif db_id == DB_ID_PLACEHOLDER:
        report.errors.append("NOTION_DB_ID is still set to placeholder value")
    elif not _DB_ID_FORMAT.match(db_id):
        report.warnings.append(
            "NOTION_DB_ID format looks unusual (should be 32 hex characters, optionally with hyphens)"
        )

    return report
