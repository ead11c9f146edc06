"""Voice interface data models.

Defines commands, session state, and result types for the voice pipeline:
    Transcript → Detection → CommandResult
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class VoiceCommand(str, Enum):
    """Control intents recognized in a transcript."""

    STOP = "stop"
    CLOSE = "close"
    MUTE = "mute"
    UNMUTE = "unmute"
    PAUSE = "pause"
    RESTART = "restart"


# Short status strings shown as transient feedback in the widget
COMMAND_LABELS: dict[VoiceCommand, str] = {
    VoiceCommand.STOP: "Stopped",
    VoiceCommand.CLOSE: "Session ended",
    VoiceCommand.MUTE: "Mic muted",
    VoiceCommand.UNMUTE: "Mic active",
    VoiceCommand.PAUSE: "Paused",
    VoiceCommand.RESTART: "Restarting...",
}


class VoiceState(str, Enum):
    """What the assistant is doing right now."""

    IDLE = "idle"
    LISTENING = "listening"
    THINKING = "thinking"
    SPEAKING = "speaking"

    @property
    def status_text(self) -> str:
        return _STATUS_TEXT[self]

    @property
    def is_busy(self) -> bool:
        return self in (VoiceState.THINKING, VoiceState.SPEAKING)


_STATUS_TEXT: dict[VoiceState, str] = {
    VoiceState.IDLE: "Tap to speak",
    VoiceState.LISTENING: "Listening...",
    VoiceState.THINKING: "Thinking...",
    VoiceState.SPEAKING: "Speaking...",
}


@dataclass(frozen=True)
class CommandRule:
    """One row of the rule table: a command and the patterns that trigger it."""

    command: VoiceCommand
    patterns: tuple[re.Pattern, ...]

    def match(self, text: str) -> re.Pattern | None:
        """Return the first pattern found in text, if any."""
        for pattern in self.patterns:
            if pattern.search(text):
                return pattern
        return None


@dataclass
class Detection:
    """Outcome of classifying one transcript.

    reason is one of: empty, too_long, no_match, matched.
    """

    raw_transcript: str
    cleaned: str = ""
    word_count: int = 0
    command: VoiceCommand | None = None
    matched_pattern: str | None = None
    reason: str = "empty"

    @property
    def label(self) -> str | None:
        return COMMAND_LABELS[self.command] if self.command else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw_transcript": self.raw_transcript,
            "cleaned": self.cleaned,
            "word_count": self.word_count,
            "command": self.command.value if self.command else None,
            "label": self.label,
            "matched_pattern": self.matched_pattern,
            "reason": self.reason,
        }


@dataclass
class VoiceSession:
    """In-memory state of one voice conversation."""

    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    voice_state: VoiceState = VoiceState.IDLE
    muted: bool = False
    active: bool = True
    turns: list[str] = field(default_factory=list)
    last_label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "voice_state": self.voice_state.value,
            "status_text": self.voice_state.status_text,
            "muted": self.muted,
            "active": self.active,
            "turns": list(self.turns),
            "last_label": self.last_label,
        }


@dataclass
class CommandResult:
    """Result from routing one transcript."""

    success: bool
    message: str
    command: VoiceCommand | None = None
    forwarded: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "command": self.command.value if self.command else None,
            "forwarded": self.forwarded,
            "data": self.data,
            "error": self.error,
        }
