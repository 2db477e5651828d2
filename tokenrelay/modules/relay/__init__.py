"""
Relay Module - Black Box Interface

Purpose: Obtain chat tokens from the provider without exposing the API key
Interface: TokenRelay.issue_token() -> RelayResult
Hidden: Outbound request shape, HTTP client handling, error classification

The relay knows nothing about the inbound transport. Callers translate
RelayResult into whatever response format they speak.
"""

from .relay import TokenRelay, TokenRequest
from .result import ErrorKind, RelayError, RelayResult

__all__ = ["TokenRelay", "TokenRequest", "ErrorKind", "RelayError", "RelayResult"]
