"""Notion Relay - FastAPI application entry point."""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.dependencies import verify_api_key
from app.errors import RelayError
from app.routers import health, relay

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Notion Relay",
    description="Webhook relay that appends JSON payloads as rows of a Notion database",
    version="0.1.0",
)

# Rate limiting
app.state.limiter = relay.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    logger.info(f"Relay request failed ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Relay failed unexpectedly: {exc}")
    return JSONResponse(status_code=500, content={"detail": f"Relay error: {exc}"})


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (health is public; relay requires API key when API_KEY is set)
app.include_router(health.router)
app.include_router(
    relay.router, prefix="/relay", tags=["relay"], dependencies=[Depends(verify_api_key)]
)
