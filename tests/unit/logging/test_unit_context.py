# tests/unit/logging/test_unit_context.py — v1
"""Tests for logging/context.py — contextual logging variables."""

from __future__ import annotations

from blockverify.logging.context import clear_context, get_context, set_artifact_context


class TestLogContext:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_initial_state(self):
        ctx = get_context()
        assert ctx.artifact is None
        assert ctx.command is None

    def test_set_artifact_context(self):
        set_artifact_context("app.exe", "verify")
        ctx = get_context()
        assert ctx.artifact == "app.exe"
        assert ctx.command == "verify"

    def test_as_dict_filters_none(self):
        set_artifact_context("app.exe")
        d = get_context().as_dict()
        assert d == {"artifact": "app.exe"}

    def test_clear(self):
        set_artifact_context("app.exe", "compare")
        clear_context()
        assert get_context().as_dict() == {}
