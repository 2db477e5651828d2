"""
Shared pytest fixtures for token relay tests.

This module provides common fixtures including:
- ProviderStub: fake chat provider endpoint on an httpx.MockTransport
- Relay configuration fixtures
- FastAPI test client wired to the stub
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from tokenrelay.config.provider import APIConfig, RelayConfig
from tokenrelay.main import create_app
from tokenrelay.modules.relay import TokenRelay

PROVIDER_URL = "https://provider.example.com/api/1/token"


# =============================================================================
# Provider Stub Infrastructure
# =============================================================================

@dataclass
class ProviderCall:
    """Record of an outbound request made during testing."""
    method: str
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]


@dataclass
class ProviderStub:
    """
    Fake provider token endpoint.

    Usage:
        def test_something(provider_stub):
            provider_stub.status_code = 403
            provider_stub.text = "forbidden"
    """
    status_code: int = 201
    json_body: Optional[Any] = field(default_factory=lambda: {"token": "abc123"})
    text: Optional[str] = None
    error: Optional[Exception] = None
    redirect_location: Optional[str] = None
    calls: List[ProviderCall] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(
            ProviderCall(
                method=request.method,
                url=str(request.url),
                headers=dict(request.headers),
                body=json.loads(request.content) if request.content else {},
            )
        )
        if self.error is not None:
            raise self.error
        if self.redirect_location and str(request.url) != self.redirect_location:
            return httpx.Response(307, headers={"Location": self.redirect_location}, text="moved")
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_body(self) -> Dict[str, Any]:
        return self.calls[-1].body


class StaticConfigProvider:
    """Config provider returning fixed values."""

    def __init__(self, relay_config: RelayConfig, api_config: Optional[APIConfig] = None):
        self.relay_config = relay_config
        self.api_config = api_config or APIConfig(
            port=3000, host="127.0.0.1", log_level="INFO", cors_origins=["*"]
        )

    def get_relay_config(self) -> RelayConfig:
        return self.relay_config

    def get_api_config(self) -> APIConfig:
        return self.api_config


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def relay_config():
    """Fully configured relay."""
    return RelayConfig(
        api_key="test-api-key",
        api_secret="test-api-secret",
        room_id="room-42",
        api_base=PROVIDER_URL,
    )


@pytest.fixture
def provider_stub():
    return ProviderStub()


@pytest.fixture
def http_client(provider_stub):
    """AsyncClient whose requests are answered by the provider stub."""
    return httpx.AsyncClient(transport=httpx.MockTransport(provider_stub.handler))


@pytest.fixture
def relay(relay_config, http_client):
    return TokenRelay(relay_config, client=http_client)


@pytest.fixture
def client(relay_config, http_client):
    """FastAPI test client with the relay pointed at the provider stub."""
    app = create_app(StaticConfigProvider(relay_config), http_client=http_client)
    return TestClient(app)
