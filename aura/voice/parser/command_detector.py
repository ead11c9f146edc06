"""Control command detection for voice transcripts.

Classifies a finished speech-to-text transcript as one of the fixed
VoiceCommands, or None when it should go to the assistant as conversation.
Only short utterances are considered: after filler words are removed, a
transcript longer than max_command_words is never a command.
"""

from __future__ import annotations

import logging
from typing import Any

from aura.voice.config_models import CommandDetectionConfig, load_voice_config
from aura.voice.models import COMMAND_LABELS, CommandRule, Detection, VoiceCommand
from aura.voice.parser.command_rules import COMMAND_RULES
from aura.voice.parser.normalizer import collapse_whitespace, count_words, strip_filler_words

logger = logging.getLogger(__name__)


def _as_text(transcript: Any) -> str:
    if transcript is None:
        return ""
    if isinstance(transcript, str):
        return transcript
    if isinstance(transcript, (bytes, bytearray)):
        return bytes(transcript).decode("utf-8", errors="replace")
    return str(transcript)


class CommandDetector:
    """Applies normalization and the rule table with one configuration."""

    def __init__(
        self,
        config: CommandDetectionConfig | None = None,
        rules: tuple[CommandRule, ...] = COMMAND_RULES,
    ):
        self.config = config or CommandDetectionConfig()
        self.rules = rules
        self._stripped_words = self.config.stripped_words

    def detect(self, transcript: Any) -> Detection:
        """Classify a transcript and report how the decision was reached."""
        raw = _as_text(transcript)
        if not raw.strip():
            return Detection(raw_transcript=raw, reason="empty")

        cleaned = collapse_whitespace(strip_filler_words(raw, self._stripped_words))
        word_count = count_words(cleaned)
        detection = Detection(raw_transcript=raw, cleaned=cleaned, word_count=word_count)

        if word_count > self.config.max_command_words:
            detection.reason = "too_long"
            return detection

        for rule in self.rules:
            pattern = rule.match(cleaned)
            if pattern is not None:
                detection.command = rule.command
                detection.matched_pattern = pattern.pattern
                detection.reason = "matched"
                logger.debug(f"Voice command {rule.command.value} from {cleaned!r}")
                return detection

        detection.reason = "no_match"
        return detection

    def classify(self, transcript: Any) -> VoiceCommand | None:
        return self.detect(transcript).command


# Default detector, built from args/voice.yaml on first use
_default_detector: CommandDetector | None = None


def get_default_detector() -> CommandDetector:
    global _default_detector
    if _default_detector is None:
        _default_detector = CommandDetector(load_voice_config().detection)
    return _default_detector


def reset_default_detector() -> None:
    """Drop the cached default detector so the next call reloads config."""
    global _default_detector
    _default_detector = None


def classify(transcript: Any) -> VoiceCommand | None:
    """Return the control command spoken in transcript, or None.

    This is the main entry point for the voice pipeline.
    """
    return get_default_detector().classify(transcript)


def detect(transcript: Any) -> Detection:
    return get_default_detector().detect(transcript)


def get_command_label(command: VoiceCommand) -> str:
    return COMMAND_LABELS[command]
