"""
Logging Configuration Constants

This module contains all constants related to logging configuration
and the keys used in structured log context.
"""


class Logging:
    """Log configuration constants."""

    DEFAULT_LEVEL = "INFO"
    DEFAULT_ENCODING = "utf-8"
    ROOT_LOGGER_NAME = "anifeed"
    TIME_FORMAT = "[%H:%M:%S]"


class LogContextKeys:
    """Keys used in the ``extra`` payload of structured log records."""

    OPERATION = "operation"
    CONTEXT = "context"
    ERROR_CODE = "error_code"
    DURATION_MS = "duration_ms"
    RESULT_INFO = "result_info"

    STRUCTURED = (ERROR_CODE, CONTEXT, OPERATION, DURATION_MS, RESULT_INFO)
