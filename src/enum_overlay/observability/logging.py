"""
Logging — Structured logging with model scope propagation.

Provides consistent logging across all enum_overlay components. While a
model class is being declared, the binder sets a model scope so every
record emitted during setup names the model it belongs to.
"""

import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any


# Context variable for the model currently being declared
_model_scope: ContextVar[str | None] = ContextVar("model_scope", default=None)


def set_model_scope(scope: type | str | None) -> None:
    """Set model scope for current context."""
    _model_scope.set(_scope_name(scope))


def get_model_scope() -> str | None:
    """Get model scope from current context."""
    return _model_scope.get()


def _scope_name(scope: type | str | None) -> str | None:
    if scope is None:
        return None
    if isinstance(scope, type):
        return scope.__qualname__
    return str(scope)


class ModelScopeFilter(logging.Filter):
    """Adds model_scope to log records."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        record.model_scope = get_model_scope() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "model_scope": getattr(record, "model_scope", None),
        }
        
        # Add extra fields
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, default=str)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        scope = getattr(record, "model_scope", "-") or "-"
        
        base = f"{record.levelname:<7} [{scope}] {record.name}: {record.getMessage()}"
        
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        
        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure enum_overlay logging.
    
    Args:
        level: Logging level
        json_format: Use JSON format (for production)
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(ModelScopeFilter())
    
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())
    
    package_logger = logging.getLogger("enum_overlay")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an enum_overlay component."""
    return logging.getLogger(f"enum_overlay.{name}")


class ModelScope:
    """
    Context manager for logging within a model declaration.
    
    Usage:
        with ModelScope(User):
            logger.debug("Declaring...")  # Includes model_scope
    """
    
    def __init__(self, scope: type | str | None):
        self.scope = scope
        self._token = None
    
    def __enter__(self):
        self._token = _model_scope.set(_scope_name(self.scope))
        return self
    
    def __exit__(self, *args):
        if self._token is not None:
            _model_scope.reset(self._token)
