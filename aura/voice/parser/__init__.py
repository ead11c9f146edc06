"""Voice transcript parsing: normalization, command detection, routing."""

from aura.voice.parser.command_detector import CommandDetector, classify, detect, get_command_label
from aura.voice.parser.command_router import CommandRouter, create_default_router
from aura.voice.parser.normalizer import collapse_whitespace, normalize_transcript, strip_filler_words

__all__ = [
    "CommandDetector",
    "CommandRouter",
    "classify",
    "collapse_whitespace",
    "create_default_router",
    "detect",
    "get_command_label",
    "normalize_transcript",
    "strip_filler_words",
]
