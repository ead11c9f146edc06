"""Rule table for voice control commands.

Rules are checked top to bottom and the first rule with a matching pattern
wins, so the order below is the priority order. Close sits above Stop so
that "end this chat" ends the session instead of only interrupting speech.
Patterns run against normalized text (lowercase, filler words removed).
"""

from __future__ import annotations

import re

from aura.voice.models import COMMAND_LABELS, CommandRule, VoiceCommand

# (command, patterns) in priority order.
# "wait" is matched by Pause only and "stop listening" by Mute only; the Stop
# patterns must not claim either phrase, even though Stop is checked first.
RULE_DEFINITIONS: list[tuple[VoiceCommand, list[str]]] = [
    # Close: end the session entirely
    (VoiceCommand.CLOSE, [
        r"\b(close|exit|quit|goodbye|bye|good\s*bye|end|finish|done|terminate|shut.?down|get.?out|leave|dismiss|see\s+you|talk\s+later|later|ciao)\b",
        r"\b(end.?(the.?)?(chat|session|call|conversation|this))\b",
        r"\b(close.?(the.?)?(chat|app|window|this))\b",
        r"\b(that.?'?s.?(all|it))\b",
        r"\b(i.?'?m?.?(done|finished|leaving|going))\b",
    ]),

    # Stop: interrupt current speech, session stays open
    (VoiceCommand.STOP, [
        # "stop listening" belongs to Mute
        r"\b(stop(?!\s*listening)|halt|cancel|abort|silence|quiet|shush|hush|enough|no.?more|cut.?it|whoa)\b",
        r"\b(shut.?up|be.?quiet|zip.?it)\b",
    ]),

    # Pause: hold the interaction for a moment
    (VoiceCommand.PAUSE, [
        r"\b(pause|hold.?on|hold.?up|wait|one.?sec(ond)?|(a|one)\s+moment)\b",
        r"\b(give\s+me\s+a\s+(sec|second|minute))\b",
    ]),

    # Mute: stop the microphone
    (VoiceCommand.MUTE, [
        r"\b(mute|mute.?(the.?)?mic(rophone)?|turn.?off.?(the.?)?mic(rophone)?|disable.?(the.?)?mic(rophone)?|mic(rophone)?.?off)\b",
        r"\b(stop.?listening|don.?t.?listen)\b",
    ]),

    # Unmute: re-enable the microphone
    (VoiceCommand.UNMUTE, [
        r"\b(unmute|turn.?on.?(the.?)?mic(rophone)?|enable.?(the.?)?mic(rophone)?|mic(rophone)?.?on|start.?listening)\b",
    ]),

    # Restart: reset the conversation
    (VoiceCommand.RESTART, [
        r"\b(restart|reset|start.?over|start.?again|begin.?again|try.?again|fresh.?start)\b",
    ]),
]


def compile_rules(
    definitions: list[tuple[VoiceCommand, list[str]]],
) -> tuple[CommandRule, ...]:
    """Compile rule definitions, checking every command has a rule and a label."""
    rules = tuple(
        CommandRule(
            command=command,
            patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
        )
        for command, patterns in definitions
    )

    commands = [rule.command for rule in rules]
    if len(set(commands)) != len(commands):
        raise ValueError(f"Duplicate commands in rule table: {commands}")
    missing_rules = set(VoiceCommand) - set(commands)
    if missing_rules:
        raise ValueError(f"No rule for commands: {sorted(c.value for c in missing_rules)}")
    missing_labels = set(VoiceCommand) - set(COMMAND_LABELS)
    if missing_labels:
        raise ValueError(f"No label for commands: {sorted(c.value for c in missing_labels)}")

    return rules


COMMAND_RULES: tuple[CommandRule, ...] = compile_rules(RULE_DEFINITIONS)
