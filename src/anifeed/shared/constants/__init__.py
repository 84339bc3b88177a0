"""
AniFeed Constants Module

This module provides centralized constants for the AniFeed application.
All magic values and configuration constants are defined here to ensure
consistency across the data layer, the CLI and the tests.
"""

from .api import APIConfig, JikanConfig, JikanFields
from .cache import CacheConfig, CacheColumns
from .http_codes import HTTPStatusCodes
from .logging import Logging, LogContextKeys
from .messages import ErrorMessages
from .network import ConnectivityConfig
from .system import Application, FileSystem

__all__ = [
    "APIConfig",
    "Application",
    "CacheColumns",
    "CacheConfig",
    "ConnectivityConfig",
    "ErrorMessages",
    "FileSystem",
    "HTTPStatusCodes",
    "JikanConfig",
    "JikanFields",
    "LogContextKeys",
    "Logging",
]
