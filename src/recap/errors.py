# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""RECAP exception hierarchy.

The PACER classifier functions never raise; these errors belong to the I/O
edges (options files, HTML documents, the CLI).  Callers can catch
RecapError for any of them.
"""

from __future__ import annotations


class RecapError(Exception):
    """Base exception for all RECAP errors."""


class ConfigError(RecapError):
    """Options file missing, unreadable, or not a valid options object."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class DocumentLoadError(RecapError):
    """HTML document could not be read or parsed."""

    def __init__(self, message: str, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source
