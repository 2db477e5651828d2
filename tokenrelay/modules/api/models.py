"""
Token relay API models.

Response bodies for the HTTP boundary. Successful token responses are
passed through from the provider untouched and have no model here.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned to the browser client."""

    error: str = Field(..., description="Human readable error message")
    details: Optional[str] = Field(
        None, description="Diagnostic detail (raw provider body or exception text)"
    )
