"""
Token Relay - Chat Token Issuing Proxy

Issues chat-room access tokens for browser clients by calling the
provider's token-login endpoint server-side, so the provider API key
never reaches client code.

Architecture:
- config: environment configuration, read once at startup
- relay: outbound provider call, returns tagged results
- api: maps relay results onto HTTP responses
- main: FastAPI application and process entry point
"""

__version__ = "1.0.0"
