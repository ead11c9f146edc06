"""Shared test fixtures for Aura tests.

This module provides common fixtures used across all test modules:
- Detectors built from default and custom configuration
- Fresh voice sessions and routers
- Isolation of the cached default detector

Usage:
    def test_something(detector):
        assert detector.classify("stop") is VoiceCommand.STOP
"""

from collections.abc import Generator

import pytest

from aura.logging_config import setup_logging
from aura.voice.config_models import CommandDetectionConfig
from aura.voice.models import VoiceSession
from aura.voice.parser import command_detector
from aura.voice.parser.command_detector import CommandDetector
from aura.voice.parser.command_router import create_default_router


# ─────────────────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    """Send structlog events through stdlib logging so stdout stays clean."""
    setup_logging(level="WARNING")


# ─────────────────────────────────────────────────────────────────────────────
# Detector Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_default_detector() -> Generator[None, None, None]:
    """Make every test start without a cached default detector."""
    command_detector.reset_default_detector()
    yield
    command_detector.reset_default_detector()


@pytest.fixture
def detector() -> CommandDetector:
    """Detector with built-in defaults, independent of args/voice.yaml."""
    return CommandDetector(CommandDetectionConfig())


# ─────────────────────────────────────────────────────────────────────────────
# Session Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def session() -> VoiceSession:
    return VoiceSession(session_id="test-session")


@pytest.fixture
def router(detector, session):
    """Default router with an assistant that echoes the transcript."""
    router = create_default_router(session=session, detector=detector)

    async def echo(transcript, session):
        return f"echo: {transcript}"

    router.set_message_handler(echo)
    return router
