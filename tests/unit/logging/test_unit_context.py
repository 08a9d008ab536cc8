# tests/unit/logging/test_context.py — v1
"""Tests for logging/context.py — contextual logging variables."""

from __future__ import annotations

from tagcache.logging.context import (
    LogContext,
    clear_context,
    get_context,
    set_operation_context,
)


class TestLogContext:
    def test_initial_state(self):
        ctx = get_context()
        assert ctx.operation is None
        assert ctx.tag is None

    def test_set_operation_context(self):
        set_operation_context("invalidate", "orders")
        ctx = get_context()
        assert ctx.operation == "invalidate"
        assert ctx.tag == "orders"

    def test_clear(self):
        set_operation_context("invalidate", "orders")
        clear_context()
        assert get_context() == LogContext()

    def test_as_dict_skips_none(self):
        assert LogContext(operation="write").as_dict() == {"operation": "write"}
