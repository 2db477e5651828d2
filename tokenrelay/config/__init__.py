"""
Config Module - Black Box Interface

Purpose: Process-wide configuration, read once at startup
Interface: EnvConfigProvider.get_relay_config(), EnvConfigProvider.get_api_config()
Hidden: Environment parsing, defaults
"""

from .provider import APIConfig, ConfigProvider, EnvConfigProvider, RelayConfig

__all__ = ["APIConfig", "ConfigProvider", "EnvConfigProvider", "RelayConfig"]
