"""Tests for session binding on structlog contextvars."""

from __future__ import annotations

import pytest
import structlog

from renderscan.observability.logging import bind_session


@pytest.fixture(autouse=True)
def _clean_contextvars():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


class TestBindSession:
    def test_binds_session_id(self) -> None:
        bind_session("abc")
        assert structlog.contextvars.get_contextvars()["session_id"] == "abc"

    def test_rebinding_replaces_only_the_session_id(self) -> None:
        structlog.contextvars.bind_contextvars(request_id="r-1")
        bind_session("first")
        bind_session("second")
        bound = structlog.contextvars.get_contextvars()
        assert bound == {"request_id": "r-1", "session_id": "second"}
