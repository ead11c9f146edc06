"""Route voice transcripts to control handlers or the assistant.

The router classifies each finished transcript. Control commands are applied
to the voice session by their registered handler; everything else is handed
to the message handler (the AI backend) as an ordinary conversation turn.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable

from aura.logging_config import bind_voice_session, get_logger
from aura.voice.models import COMMAND_LABELS, CommandResult, VoiceCommand, VoiceSession, VoiceState
from aura.voice.parser.command_detector import CommandDetector, get_default_detector

logger = logging.getLogger(__name__)
events = get_logger("aura.voice.events")

# Handler type: async function(session) -> CommandResult
HandlerFn = Callable[[VoiceSession], Awaitable[CommandResult]]

# Message handler type: async function(transcript, session) -> reply
MessageHandlerFn = Callable[[str, VoiceSession], Awaitable[Any]]


class CommandRouter:
    """Routes transcripts for a single voice session."""

    def __init__(
        self,
        detector: CommandDetector | None = None,
        session: VoiceSession | None = None,
    ):
        self.detector = detector or get_default_detector()
        self.session = session or VoiceSession()
        self._handlers: dict[VoiceCommand, HandlerFn] = {}
        self._message_handler: MessageHandlerFn | None = None

    def register(self, command: VoiceCommand, handler: HandlerFn) -> None:
        """Register a handler for a command."""
        self._handlers[command] = handler

    def set_message_handler(self, handler: MessageHandlerFn) -> None:
        """Set the handler that receives non-command transcripts."""
        self._message_handler = handler

    async def route_transcript(self, transcript: str) -> CommandResult:
        """Classify a transcript and act on it."""
        with bind_voice_session(self.session.session_id):
            start = time.monotonic()
            detection = self.detector.detect(transcript)

            if detection.command is not None:
                result = await self._run_command(detection.command)
            else:
                result = await self._forward(detection.raw_transcript)

            elapsed_ms = int((time.monotonic() - start) * 1000)
            events.info(
                "voice_transcript_routed",
                command=detection.command.value if detection.command else None,
                reason=detection.reason,
                success=result.success,
                error=result.error,
                elapsed_ms=elapsed_ms,
            )
        return result

    async def _run_command(self, command: VoiceCommand) -> CommandResult:
        handler = self._handlers.get(command)
        if not handler:
            return CommandResult(
                success=False,
                message=f"No handler for {command.value}",
                command=command,
                error="no_handler",
            )

        try:
            result = await handler(self.session)
        except Exception as e:
            logger.exception(f"Voice command handler failed: {e}")
            return CommandResult(
                success=False,
                message="Something went wrong. Try again?",
                command=command,
                error=str(e),
            )

        result.command = command
        result.message = COMMAND_LABELS[command]
        self.session.last_label = result.message
        return result

    async def _forward(self, transcript: str) -> CommandResult:
        if not transcript.strip():
            return CommandResult(success=False, message="Nothing heard", error="empty")

        if not self.session.active:
            return CommandResult(
                success=False,
                message="Session ended",
                error="session_closed",
            )

        if self.session.muted:
            return CommandResult(success=False, message="Mic muted", error="muted")

        if self._message_handler is None:
            return CommandResult(
                success=False,
                message="No assistant connected",
                error="no_message_handler",
            )

        self.session.turns.append(transcript)
        self.session.voice_state = VoiceState.THINKING
        try:
            reply = await self._message_handler(transcript, self.session)
        except Exception as e:
            logger.exception(f"Message handler failed: {e}")
            self.session.voice_state = VoiceState.IDLE
            return CommandResult(
                success=False,
                message="Something went wrong. Try again?",
                forwarded=transcript,
                error=str(e),
            )

        self.session.voice_state = VoiceState.IDLE
        return CommandResult(
            success=True,
            message="Sent",
            forwarded=transcript,
            data={"reply": reply} if reply is not None else {},
        )


def create_default_router(
    session: VoiceSession | None = None,
    detector: CommandDetector | None = None,
) -> CommandRouter:
    """Create a router with all control handlers registered."""
    from aura.voice.commands.control_commands import (
        handle_close,
        handle_mute,
        handle_pause,
        handle_restart,
        handle_stop,
        handle_unmute,
    )

    router = CommandRouter(detector=detector, session=session)

    router.register(VoiceCommand.CLOSE, handle_close)
    router.register(VoiceCommand.STOP, handle_stop)
    router.register(VoiceCommand.PAUSE, handle_pause)
    router.register(VoiceCommand.MUTE, handle_mute)
    router.register(VoiceCommand.UNMUTE, handle_unmute)
    router.register(VoiceCommand.RESTART, handle_restart)

    return router
