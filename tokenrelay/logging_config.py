"""
Custom logging configuration to suppress liveness probe logs
"""

import logging
from typing import Any, Dict


class HealthCheckFilter(logging.Filter):
    """Filter to suppress liveness probe logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out GET / requests from uvicorn access logs."""
        if record.name == "uvicorn.access":
            # uvicorn passes (client, method, path, http_version, status)
            args = record.args
            if isinstance(args, tuple) and len(args) >= 3:
                if args[1] == "GET" and args[2] == "/":
                    return False
            elif '"GET / HTTP' in record.getMessage():
                return False
        return True


def get_logging_config(log_level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with liveness probe suppression."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "health_check_filter": {
                "()": HealthCheckFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "access": {
                "format": "%(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["health_check_filter"]
            }
        },
        "loggers": {
            "uvicorn": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False
            },
            "uvicorn.error": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False
            },
            "uvicorn.access": {
                "handlers": ["access"],
                "level": log_level,
                "propagate": False
            },
            "tokenrelay": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False
            }
        },
        "root": {
            "level": log_level,
            "handlers": ["default"]
        }
    }
