"""Voice Interface - control commands spoken to the Aura widget

Philosophy:
    Most of what a user says is conversation and belongs to the AI backend.
    A handful of short utterances ("stop", "mute the mic", "goodbye") are
    instead meant for the widget itself and must never reach the model.

Components:
    models.py: Data models (VoiceCommand, VoiceState, dataclasses)
    config_models.py: args/voice.yaml validation
    parser/: Transcript normalization, rule table, detection, routing
    commands/: Control command handlers

Usage:
    from aura.voice.parser.command_detector import classify
    from aura.voice.parser.command_router import create_default_router

    classify("please stop talking")      # VoiceCommand.STOP
    router = create_default_router()
    result = await router.route_transcript("goodbye")
"""

from aura import ARGS_DIR

# Only present in a source checkout or editable install. A regular install
# has no args/ directory, so the built-in defaults (identical to the shipped
# file) apply unless `aura --config PATH` points at a YAML file.
CONFIG_PATH = ARGS_DIR / "voice.yaml"

__all__ = [
    "CONFIG_PATH",
]
