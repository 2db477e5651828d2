#!/usr/bin/env python3
"""
Token Relay - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Wires the relay into the FastAPI app
3. Runs the HTTP server

All relay logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from tokenrelay import __version__
from tokenrelay.config.provider import ConfigProvider, EnvConfigProvider
from tokenrelay.logging_config import get_logging_config
from tokenrelay.modules.api import to_response
from tokenrelay.modules.relay import TokenRelay, TokenRequest

logger = logging.getLogger(__name__)

HEALTH_TEXT = "RumbleTalk token server OK"

router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warn about missing configuration and log start and stop."""
    relay_config = app.state.relay.config
    if not relay_config.is_configured:
        logger.warning(
            f"Missing environment variables: {', '.join(relay_config.missing_required)} "
            "(and possibly RT_API_SECRET, RT_ROOM_ID). Token requests will fail."
        )
    logger.info("Token relay started")
    yield
    logger.info("Token relay shut down")


def get_relay(request: Request) -> TokenRelay:
    """Relay instance wired at startup."""
    return request.app.state.relay


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness check. Makes no outbound calls."""
    return HEALTH_TEXT


@router.get("/token")
async def issue_token(
    username: Optional[str] = Query(None, description="Chat display name"),
    role: str = Query("user", description="Chat role, e.g. user or moderator"),
    uid: Optional[str] = Query(None, description="Caller's own user id"),
    relay: TokenRelay = Depends(get_relay),
) -> JSONResponse:
    """
    Issue a chat token for the caller.

    Responses:
        200: Provider's JSON body, unchanged
        400: username missing
        4xx/5xx: Provider's status with its raw body as details
        500: Unexpected failure
    """
    result = await relay.issue_token(TokenRequest(username=username, role=role, uid=uid))
    return to_response(result)


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config_provider: Configuration source (environment if omitted)
        http_client: Shared outbound HTTP client; owned by the caller

    Returns:
        Configured FastAPI app
    """
    provider = config_provider or EnvConfigProvider()
    relay_config = provider.get_relay_config()
    api_config = provider.get_api_config()

    app = FastAPI(
        title="Token Relay",
        description="Issues chat-room tokens without exposing the provider API key",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.api_config = api_config
    app.state.relay = TokenRelay(relay_config, client=http_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    """Run the relay server."""
    api_config = app.state.api_config
    uvicorn.run(
        app,
        host=api_config.host,
        port=api_config.port,
        log_config=get_logging_config(api_config.log_level),
    )


if __name__ == "__main__":
    main()
