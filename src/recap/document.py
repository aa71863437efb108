# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Page document capability used by the doc1 page checks.

The classifier needs exactly one thing from a loaded page: its ``<input>``
elements in document order, each exposing a ``value``.  ``PageDocument``
captures that; ``HtmlDocument`` provides it from raw markup via lxml.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

import lxml.html
from lxml import etree

from .errors import DocumentLoadError


class InputElement(Protocol):
    """An ``<input>`` element; only its value is read."""

    @property
    def value(self) -> str | None: ...


@runtime_checkable
class PageDocument(Protocol):
    """Ordered access to a page's ``<input>`` elements."""

    def inputs(self) -> Sequence[InputElement]: ...


@dataclass(frozen=True, slots=True)
class HtmlInput:
    """An ``<input>`` as a DOM would report it.

    ``value`` is the value attribute (empty when absent), even for unchecked
    checkboxes, where lxml's form-aware ``InputElement.value`` gives None.
    """

    value: str
    name: str = ""
    type: str = "text"


class HtmlDocument:
    """PageDocument backed by an lxml HTML tree."""

    __slots__ = ("_root",)

    def __init__(self, root: lxml.html.HtmlElement | None) -> None:
        self._root = root

    @classmethod
    def from_html(cls, html: str | bytes) -> HtmlDocument:
        """Parse markup.  Blank markup yields a document with no inputs."""
        if not html or not html.strip():
            return cls(None)
        try:
            root = lxml.html.document_fromstring(html)
        except (etree.ParserError, ValueError) as e:
            raise DocumentLoadError(f"Cannot parse HTML: {e}") from e
        return cls(root)

    @classmethod
    def from_path(cls, path: str | Path) -> HtmlDocument:
        p = Path(path)
        try:
            raw = p.read_bytes()
        except OSError as e:
            raise DocumentLoadError(f"Cannot read {p}: {e.strerror or e}", source=str(p)) from e
        try:
            return cls.from_html(raw)
        except DocumentLoadError as e:
            raise DocumentLoadError(str(e), source=str(p)) from e

    def inputs(self) -> list[HtmlInput]:
        if self._root is None:
            return []
        return [
            HtmlInput(
                value=el.get("value", ""),
                name=el.get("name", ""),
                type=(el.get("type") or "text").lower(),
            )
            for el in self._root.iter("input")
        ]
