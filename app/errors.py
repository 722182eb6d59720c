"""Relay failure taxonomy and Notion error-parsing utilities."""

import json


class RelayError(Exception):
    """Base class for failures rendered to the webhook caller."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(RelayError):
    """Credential or target database id is not configured."""

    status_code = 400


class MalformedRequestError(RelayError):
    """Request body is not a JSON object."""

    status_code = 400


class RemoteUnavailableError(RelayError):
    """Notion could not be reached (connect failure or timeout)."""

    status_code = 503


class SchemaReadError(RelayError):
    """Database schema could not be read, or has no title column."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message, status_code)
        self.body = body


class SchemaPatchError(RelayError):
    """Additive column creation failed. Absorbed by the reconciler."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message, status_code)
        self.body = body


class FieldProjectionError(RelayError):
    """A single value could not be projected under its column's strict rule."""

    pass


class RowSubmissionError(RelayError):
    """Page creation was rejected by Notion."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message, status_code)
        self.body = body


def parse_notion_error(response_text: str) -> str:
    """Extract a readable message from a Notion API error response.

    Notion returns JSON like {"object": "error", "status": 400, "code": "validation_error", "message": "..."}.
    Returns "code: message" when parseable, raw text otherwise.
    """
    try:
        body = json.loads(response_text)
        msg = body.get("message", "")
        code = body.get("code", "")
        if msg:
            return f"{code}: {msg}" if code else msg
    except Exception:
        pass
    return response_text
