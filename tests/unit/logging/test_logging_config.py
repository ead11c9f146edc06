"""Tests for aura/logging_config.py"""

import pytest
import structlog

from aura.logging_config import bind_voice_session


class TestBindVoiceSession:
    def test_binds_session_id(self):
        with bind_voice_session("abc"):
            assert structlog.contextvars.get_contextvars()["session_id"] == "abc"

    def test_extra_fields(self):
        with bind_voice_session("abc", transcript_id="t1"):
            context = structlog.contextvars.get_contextvars()
            assert context == {"session_id": "abc", "transcript_id": "t1"}

    def test_cleared_after_block(self):
        with bind_voice_session("abc"):
            pass
        assert "session_id" not in structlog.contextvars.get_contextvars()

    def test_cleared_after_error(self):
        with pytest.raises(RuntimeError):
            with bind_voice_session("abc"):
                raise RuntimeError("boom")
        assert "session_id" not in structlog.contextvars.get_contextvars()
