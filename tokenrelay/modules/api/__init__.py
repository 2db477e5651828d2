"""
API Module - Black Box Interface

Purpose: HTTP boundary for the relay
Interface: to_response(), error_status(), ErrorResponse
Hidden: Status code mapping, error body layout

The API module only translates - it contains no relay logic.
"""

from .models import ErrorResponse
from .responses import error_status, to_response

__all__ = ["ErrorResponse", "error_status", "to_response"]
