"""Observability module: structured logging with build-context correlation."""

from little_search.observability.context import build_context, get_build_context, set_build_context
from little_search.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "build_context",
    "configure_logging",
    "get_build_context",
    "set_build_context",
]
