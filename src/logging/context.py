# src/logging/context.py — v1
"""Contextual logging support: attach operation and tag to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per cache operation.
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_tag: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "tag", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    operation: str | None = None
    tag: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(operation=_operation.get(), tag=_tag.get())


def set_operation_context(operation: str, tag: str | None = None) -> None:
    """Set operation-level context (e.g. "invalidate", "orders")."""
    _operation.set(operation)
    _tag.set(tag)


def clear_context() -> None:
    """Reset all context variables."""
    _operation.set(None)
    _tag.set(None)
