# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""RECAP: recognize PACER pages and track PACER login state.

- pacer: pure URL / DOM / cookie checks (court id, docket pages, doc1 pages)
- courts: court abbreviation, appellate, and canonical-id tables
- page_classifier: one-call classification of a page into a PacerPage
- toolbar / notifier: browser-action state and login status notifications
"""

from __future__ import annotations

from .courts import (
    APPELLATE_COURTS,
    COURT_ABBREVS,
    PACER_TO_CL_IDS,
    canonical_court,
    court_abbreviation,
    is_appellate_court,
)
from .document import HtmlDocument, PageDocument
from .page_classifier import PacerPage, PacerPageType, classify_pacer_page

__version__ = "0.1.0"

__all__ = [
    "APPELLATE_COURTS",
    "COURT_ABBREVS",
    "PACER_TO_CL_IDS",
    "HtmlDocument",
    "PacerPage",
    "PacerPageType",
    "PageDocument",
    "canonical_court",
    "classify_pacer_page",
    "court_abbreviation",
    "is_appellate_court",
]
