"""
Server configuration, overridable through environment variables.
"""

import logging
import os
from typing import Final


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Central configuration for the color conversion server"""

    # Application metadata
    APP_NAME: Final[str] = "Color Convert MCP Server"
    APP_VERSION: Final[str] = "1.1.0"

    # Network
    HOST: Final[str] = os.getenv("COLOR_CONVERT_HOST", "0.0.0.0")
    PORT: Final[int] = int(os.getenv("COLOR_CONVERT_PORT", "8973"))

    # Logging; debug mode surfaces per-line conversion failures
    DEBUG: Final[bool] = _env_flag("COLOR_CONVERT_DEBUG")
    LOG_LEVEL: Final[str] = "DEBUG" if DEBUG else os.getenv("COLOR_CONVERT_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: Final[str] = "%(asctime)s [%(name)s][%(levelname)s] %(message)s"

    @classmethod
    def configure_logging(cls) -> None:
        logging.basicConfig(level=cls.LOG_LEVEL, format=cls.LOG_FORMAT)
