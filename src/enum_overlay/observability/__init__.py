"""
Observability — Logging for enum_overlay.

Provides:
- Structured logging with model scope
- JSON and human-readable formatters
"""

from enum_overlay.observability.logging import (
    set_model_scope,
    get_model_scope,
    configure_logging,
    get_logger,
    ModelScope,
    ModelScopeFilter,
    JSONFormatter,
    ReadableFormatter,
)

__all__ = [
    "set_model_scope",
    "get_model_scope",
    "configure_logging",
    "get_logger",
    "ModelScope",
    "ModelScopeFilter",
    "JSONFormatter",
    "ReadableFormatter",
]
