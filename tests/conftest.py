# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import recap  # noqa: F401
except ImportError:
    raise ImportError("recap is not installed. Run: pip install -e '.[dev]'") from None

import logging
from dataclasses import dataclass, field

import pytest
import structlog


@dataclass
class FakeInput:
    value: str | None = None


@dataclass
class FakeDocument:
    """Minimal PageDocument: just an ordered list of input values."""

    values: list[str | None] = field(default_factory=list)

    def inputs(self) -> list[FakeInput]:
        return [FakeInput(v) for v in self.values]


@pytest.fixture
def make_document():
    """Build a FakeDocument from input values, in document order."""

    def _make(*values: str | None) -> FakeDocument:
        return FakeDocument(list(values))

    return _make


@pytest.fixture(autouse=True)
def _reset_logging():
    """CLI tests call logging_config.configure(); restore root logging after."""
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    yield
    root.handlers = old_handlers
    root.setLevel(old_level)
    structlog.reset_defaults()
