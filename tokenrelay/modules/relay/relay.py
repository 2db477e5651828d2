"""
Token relay.

Forwards a token-issuance request to the chat provider's token-login
endpoint with the server-side API key and hands back the provider's
answer as a RelayResult. Nothing here knows about HTTP status mapping
on the inbound side; that lives in the api module.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ...config.provider import RelayConfig
from .result import ErrorKind, RelayError, RelayResult

logger = logging.getLogger(__name__)

USERNAME_REQUIRED = "username ist erforderlich"
UPSTREAM_ERROR = "RT API Fehler"
SERVER_ERROR = "Serverfehler"


@dataclass(frozen=True)
class TokenRequest:
    """Inbound token request, built from query parameters."""
    username: Optional[str] = None
    role: str = "user"
    uid: Optional[str] = None


class TokenRelay:
    """
    Relays token requests to the provider.

    One POST per call. No retries, no caching.
    """

    def __init__(self, config: RelayConfig, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize token relay.

        Args:
            config: Provider credentials and endpoint
            client: Shared HTTP client; a short-lived one is opened per call if omitted
        """
        self.config = config
        self._client = client

    def build_payload(self, request: TokenRequest) -> Dict[str, Any]:
        """
        Build the outbound request body.

        uid and room are left out when unset. The API secret is never sent.
        """
        payload: Dict[str, Any] = {
            "username": request.username,
            "role": request.role,
        }
        if request.uid is not None:
            payload["uid"] = request.uid
        if self.config.room_id:
            payload["room"] = self.config.room_id
        return payload

    def build_headers(self) -> Dict[str, str]:
        """Headers for the outbound call, API key as bearer credential."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key or ''}",
        }

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        # Follow provider redirects
        if self._client is not None:
            return await self._client.post(
                self.config.api_base,
                json=payload,
                headers=self.build_headers(),
                follow_redirects=True,
            )
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await client.post(
                self.config.api_base, json=payload, headers=self.build_headers()
            )

    async def issue_token(self, request: TokenRequest) -> RelayResult:
        """
        Request a token from the provider.

        Args:
            request: Inbound token request

        Returns:
            RelayResult with the provider's JSON body, or a tagged error
        """
        if not request.username:
            return RelayResult.failure(
                RelayError(kind=ErrorKind.VALIDATION, message=USERNAME_REQUIRED)
            )

        try:
            response = await self._post(self.build_payload(request))

            if not response.is_success:
                logger.warning(f"Provider rejected token request: HTTP {response.status_code}")
                return RelayResult.failure(
                    RelayError(
                        kind=ErrorKind.UPSTREAM,
                        message=UPSTREAM_ERROR,
                        details=response.text,
                        status_code=response.status_code,
                    )
                )

            return RelayResult.success(response.json())

        except Exception as e:
            logger.exception(f"Token relay failed: {e}")
            return RelayResult.failure(
                RelayError(kind=ErrorKind.UNEXPECTED, message=SERVER_ERROR, details=str(e))
            )
