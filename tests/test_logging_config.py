# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for recap.logging_config: structlog + stdlib bridge."""

from __future__ import annotations

import json
import logging
import sys

from recap.logging_config import configure


class TestConsoleRenderer:
    """Default mode: ConsoleRenderer (human-readable)."""

    def test_single_stderr_handler(self):
        configure(json_output=False)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_output_is_human_readable(self, capsys):
        configure(json_output=False)
        logging.getLogger("test.console").info("hello world")
        captured = capsys.readouterr()
        assert "hello world" in captured.err
        assert not captured.err.strip().startswith("{")


class TestJSONRenderer:
    """--log-json mode: JSONRenderer (machine-parseable)."""

    def test_output_is_valid_json(self, capsys):
        configure(json_output=True)
        logging.getLogger("recap.test").info("json test")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["event"] == "json test"
        assert data["level"] == "info"
        assert data["logger"] == "recap.test"
        assert "timestamp" in data


class TestLevel:
    def test_level_applied(self):
        configure(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_repeat_configure_replaces_handler(self):
        configure()
        configure(json_output=True)
        assert len(logging.getLogger().handlers) == 1
