"""
Configuration package: environment-driven settings and logging setup.
"""
from .settings import (
    DEFAULT_CATALOG_FILE,
    SEARCH_DEPTH,
    THEME,
    FRAME,
    NO_COLOR,
    LOG_LEVEL,
    WEB_HOST,
    WEB_PORT,
    configure_logging,
)

__all__ = [
    "DEFAULT_CATALOG_FILE",
    "SEARCH_DEPTH",
    "THEME",
    "FRAME",
    "NO_COLOR",
    "LOG_LEVEL",
    "WEB_HOST",
    "WEB_PORT",
    "configure_logging",
]
