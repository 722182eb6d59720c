from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.config_check import check_notion_config


router = APIRouter(tags=["health"])

_startup_time = datetime.now(timezone.utc)


class EndpointInfo(BaseModel):
    path: str
    description: str
    provider: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    endpoints: list[EndpointInfo]


class IntegrationStatus(BaseModel):
    connected: bool
    status: str
    warnings: list[str] = []
    last_check: str | None = None


class IntegrationsResponse(BaseModel):
    notion: IntegrationStatus


ENDPOINTS = [
    EndpointInfo(path="/health", description="Relay status and API directory"),
    EndpointInfo(path="/health/integrations", description="Integration configuration status"),
    EndpointInfo(path="/relay", description="Webhook to database row relay", provider="Notion"),
]


def _check_notion() -> IntegrationStatus:
    report = check_notion_config(settings.notion_token, settings.notion_db_id)
    if not report.ok:
        return IntegrationStatus(
            connected=False,
            status="; ".join(report.errors),
            warnings=report.warnings,
        )
    return IntegrationStatus(
        connected=True,
        status="ok",
        warnings=report.warnings,
        last_check=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    uptime = (datetime.now(timezone.utc) - _startup_time).total_seconds()

    return HealthResponse(
        status="ok",
        version="0.1.0",
        uptime_seconds=round(uptime, 2),
        endpoints=ENDPOINTS,
    )


@router.get("/health/integrations", response_model=IntegrationsResponse)
async def get_integrations():
    return IntegrationsResponse(notion=_check_notion())
