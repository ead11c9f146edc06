"""Tests for the `aura` command line interface."""

import io
import json
import sys
from unittest.mock import patch

import pytest

from aura import cli


def run_cli(*argv, stdin=None):
    with patch.object(sys, "argv", ["aura", *argv]), \
            patch("aura.logging_config.setup_logging"):
        if stdin is not None:
            with patch.object(sys, "stdin", io.StringIO(stdin)):
                return cli.main()
        return cli.main()


class TestClassify:
    @pytest.mark.parametrize("argv,expected", [
        (["stop"], "stop: Stopped"),
        (["please", "stop", "talking", "now"], "stop: Stopped"),
        (["goodbye, that's all"], "close: Session ended"),
        (["turn on the mic"], "unmute: Mic active"),
        (["tell", "me", "about", "your", "work"], "none"),
    ])
    def test_classify_prints_label(self, capsys, argv, expected):
        run_cli("classify", *argv)
        assert capsys.readouterr().out.strip() == expected

    def test_classify_json(self, capsys):
        run_cli("classify", "can you mute the mic", "--json")
        data = json.loads(capsys.readouterr().out)
        assert data["command"] == "mute"
        assert data["cleaned"] == "mute the mic"
        assert data["reason"] == "matched"

    def test_custom_config(self, capsys, tmp_path):
        config = tmp_path / "voice.yaml"
        config.write_text("detection:\n  max_command_words: 1\n")
        run_cli("--config", str(config), "classify", "stop talking")
        assert capsys.readouterr().out.strip() == "none"


class TestLabels:
    def test_labels_in_priority_order(self, capsys):
        run_cli("labels")
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 6
        assert "close" in lines[0]
        assert "Session ended" in lines[0]
        assert "restart" in lines[-1]


class TestListen:
    def test_routes_lines_until_close(self, capsys):
        run_cli("listen", stdin="hello there\nmute\n\nunmute\nbye\nnot reached\n")
        out = capsys.readouterr().out.strip().splitlines()
        assert out == [
            "> hello there",
            "[Mic muted]",
            "[Mic active]",
            "[Session ended]",
        ]

    def test_muted_lines_dropped(self, capsys):
        run_cli("listen", stdin="mute\nhello there\n")
        out = capsys.readouterr().out.strip().splitlines()
        assert out == ["[Mic muted]", "(Mic muted)"]


class TestMain:
    def test_no_command_prints_help(self, capsys):
        run_cli()
        assert "usage: aura" in capsys.readouterr().out

    def test_version(self, capsys):
        run_cli("--version")
        assert capsys.readouterr().out.startswith("aura ")
