"""Configuration module for simplehttp."""

from .http import HTTPSettings
from .logging import LoggingSettings
from .pagination import PaginationSettings
from .settings import Settings, get_settings


__all__ = [
    "HTTPSettings",
    "LoggingSettings",
    "PaginationSettings",
    "Settings",
    "get_settings",
]
