"""
Relay result types.

The relay never raises to its caller. Every outcome is one of:
- a success carrying the provider's decoded JSON body
- a failure carrying a tagged RelayError
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Category of relay failure."""

    VALIDATION = "validation"
    UPSTREAM = "upstream"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class RelayError:
    """Tagged relay failure."""
    kind: ErrorKind
    message: str
    details: Optional[str] = None
    status_code: Optional[int] = None  # provider status, UPSTREAM only


@dataclass(frozen=True)
class RelayResult:
    """Standardized relay result."""
    ok: bool
    payload: Any = None
    error: Optional[RelayError] = None

    @classmethod
    def success(cls, payload: Any) -> "RelayResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, error: RelayError) -> "RelayResult":
        return cls(ok=False, error=error)
