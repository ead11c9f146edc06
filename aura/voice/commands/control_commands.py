"""Control voice command handlers.

Each handler applies one command to the voice session, the way the chat
widget reacts to it: close ends the session, stop and pause cut off the
current reply, mute and unmute toggle the microphone, restart clears the
conversation.
"""

from __future__ import annotations

import logging

from aura.voice.models import CommandResult, VoiceSession, VoiceState

logger = logging.getLogger(__name__)


async def handle_close(session: VoiceSession) -> CommandResult:
    """End the conversation."""
    session.active = False
    session.voice_state = VoiceState.IDLE
    return CommandResult(
        success=True,
        message="Session ended",
        data={"active": False, "turns": len(session.turns)},
    )


async def handle_stop(session: VoiceSession) -> CommandResult:
    """Interrupt the current reply."""
    interrupted = session.voice_state.is_busy
    session.voice_state = VoiceState.IDLE
    return CommandResult(
        success=True,
        message="Stopped",
        data={"interrupted": interrupted},
    )


async def handle_pause(session: VoiceSession) -> CommandResult:
    # Same effect as stop; only the feedback label differs
    result = await handle_stop(session)
    result.message = "Paused"
    return result


async def handle_mute(session: VoiceSession) -> CommandResult:
    """Turn the microphone off."""
    session.muted = True
    session.voice_state = VoiceState.IDLE
    return CommandResult(success=True, message="Mic muted", data={"muted": True})


async def handle_unmute(session: VoiceSession) -> CommandResult:
    session.muted = False
    return CommandResult(success=True, message="Mic active", data={"muted": False})


async def handle_restart(session: VoiceSession) -> CommandResult:
    """Drop the conversation so far and start again."""
    cleared = len(session.turns)
    session.turns.clear()
    session.active = True
    session.voice_state = VoiceState.IDLE
    logger.info(f"Voice session {session.session_id} restarted, {cleared} turns cleared")
    return CommandResult(
        success=True,
        message="Restarting...",
        data={"cleared_turns": cleared},
    )
