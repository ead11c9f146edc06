#!/usr/bin/env python3
"""
Aura Command Line Interface

Main entry point for the `aura` command.

Usage:
    aura classify "please stop talking"    # Print the command label
    aura classify "goodbye" --json         # Print the full detection
    aura labels                            # List commands and labels
    aura listen                            # Route transcripts read from stdin
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from aura import __version__


def _build_detector(args):
    from aura.voice.config_models import load_voice_config
    from aura.voice.parser.command_detector import CommandDetector

    config_path = Path(args.config) if args.config else None
    return CommandDetector(load_voice_config(config_path).detection)


def cmd_classify(args):
    """Handle classify subcommand."""
    detection = _build_detector(args).detect(" ".join(args.text))

    if args.json:
        print(json.dumps(detection.to_dict(), indent=2))
        return 0

    if detection.command is None:
        print("none")
    else:
        print(f"{detection.command.value}: {detection.label}")
    return 0


def cmd_labels(args):
    """Handle labels subcommand."""
    from aura.voice.parser.command_rules import COMMAND_RULES
    from aura.voice.parser.command_detector import get_command_label

    for priority, rule in enumerate(COMMAND_RULES, start=1):
        print(f"  {priority}. {rule.command.value:<8} {get_command_label(rule.command)}")
    return 0


def cmd_listen(args):
    """Handle listen subcommand.

    Reads one finished transcript per line and routes it the way the chat
    widget would. Non-command lines are echoed back as the assistant reply.
    """
    from aura.voice.parser.command_router import create_default_router

    router = create_default_router(detector=_build_detector(args))

    async def echo(transcript, session):
        return transcript

    router.set_message_handler(echo)

    async def run():
        for line in sys.stdin:
            line = line.strip()
            if not line:
                continue
            result = await router.route_transcript(line)
            if result.command is not None:
                print(f"[{result.message}]")
            elif result.success:
                print(f"> {result.data.get('reply', '')}")
            else:
                print(f"({result.message})")
            if not router.session.active:
                break

    asyncio.run(run())
    return 0


def cmd_version(args):
    """Show version information."""
    print(f"aura {__version__}")


def main():
    """Main CLI entry point."""
    from aura.logging_config import setup_logging

    parser = argparse.ArgumentParser(
        prog="aura",
        description="Aura - voice control commands for the Aura assistant",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: AURA_LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--config", default=None, help="Path to a voice.yaml file (default: args/voice.yaml)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Classify subcommand
    classify_parser = subparsers.add_parser(
        "classify", help="Classify a transcript"
    )
    classify_parser.add_argument("text", nargs="+", help="Transcript text")
    classify_parser.add_argument(
        "--json", action="store_true", help="Print the full detection as JSON"
    )
    classify_parser.set_defaults(func=cmd_classify)

    # Labels subcommand
    labels_parser = subparsers.add_parser(
        "labels", help="List commands in priority order with their labels"
    )
    labels_parser.set_defaults(func=cmd_labels)

    # Listen subcommand
    listen_parser = subparsers.add_parser(
        "listen", help="Route transcripts read from stdin, one per line"
    )
    listen_parser.set_defaults(func=cmd_listen)

    args = parser.parse_args()

    # Handle --version at top level
    if args.version:
        cmd_version(args)
        return

    # If no command given, show help
    if not args.command:
        parser.print_help()
        return

    setup_logging(level=args.log_level)

    # Execute command
    result = args.func(args)

    # Commands may return an exit code
    if isinstance(result, int) and result != 0:
        sys.exit(result)


if __name__ == "__main__":
    main()
