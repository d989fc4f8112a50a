"""
Telemetry module for subgraph-manifest.

Provides structured logging with a validation-scoped context.
"""

from subgraph_manifest.telemetry.logger import (
    JsonFormatter,
    LogContext,
    LogLevel,
    SubgraphLogger,
    TextFormatter,
    clear_log_context,
    configure_from_env,
    get_log_context,
    get_logger,
    log_context,
    set_log_context,
)

__all__ = [
    "JsonFormatter",
    "LogContext",
    "LogLevel",
    "SubgraphLogger",
    "TextFormatter",
    "clear_log_context",
    "configure_from_env",
    "get_log_context",
    "get_logger",
    "log_context",
    "set_log_context",
]
