"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol

DEFAULT_PORT = 3000

REQUIRED_RELAY_VARS = ("RT_API_KEY", "RT_API_BASE")


@dataclass(frozen=True)
class RelayConfig:
    """Chat provider credentials and endpoint."""
    api_key: Optional[str]
    api_secret: Optional[str]
    room_id: Optional[str]
    api_base: Optional[str]

    @property
    def missing_required(self) -> List[str]:
        """Names of required environment variables that are not set."""
        values = {"RT_API_KEY": self.api_key, "RT_API_BASE": self.api_base}
        return [name for name in REQUIRED_RELAY_VARS if not values[name]]

    @property
    def is_configured(self) -> bool:
        """Check if every required value is present."""
        return not self.missing_required


@dataclass(frozen=True)
class APIConfig:
    """API configuration."""
    port: int
    host: str
    log_level: str
    cors_origins: List[str]


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_relay_config(self) -> RelayConfig:
        """Get relay configuration."""
        ...

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def _get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        # Empty strings count as unset
        value = self._environ.get(name)
        return value if value else default

    def get_relay_config(self) -> RelayConfig:
        """Get relay configuration from environment variables."""
        return RelayConfig(
            api_key=self._get("RT_API_KEY"),
            api_secret=self._get("RT_API_SECRET"),
            room_id=self._get("RT_ROOM_ID"),
            api_base=self._get("RT_API_BASE"),
        )

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        origins = self._get("CORS_ORIGINS", "*").split(",")
        return APIConfig(
            port=int(self._get("PORT", str(DEFAULT_PORT))),
            host=self._get("HOST", "0.0.0.0"),
            log_level=self._get("LOG_LEVEL", "INFO").upper(),
            cors_origins=[origin.strip() for origin in origins if origin.strip()],
        )
