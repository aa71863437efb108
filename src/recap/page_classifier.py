# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Whole-page PACER classifier.

Runs the individual checks from :mod:`recap.pacer` against one page and folds
them into a single immutable ``PacerPage``.  Types are decided first-match in
the order of the PACER page flow:

  1. not_pacer        – host is not a PACER court site
  2. docket_query     – DktRpt/HistDocQry form, numeric query string
  3. docket_display   – DktRpt/HistDocQry report, hyphenated query string
  4. attachment_menu  – doc1 page whose last input is "Download All"
  5. single_document  – doc1 page whose last input is "View Document"
  6. document         – doc1 or show_doc link with no DOM evidence
  7. other            – any other page on a PACER site

Identifiers (case number, doc id, base name) are extracted independently of
the winning type, so a docket_display page can still carry a case number
taken from its referrer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .courts import canonical_court, court_abbreviation, is_appellate_court
from .document import PageDocument
from .pacer import (
    get_base_name_from_url,
    get_case_number_from_urls,
    get_court_from_url,
    get_document_id_from_url,
    is_attachment_menu_page,
    is_docket_display_url,
    is_docket_query_url,
    is_document_url,
    is_single_document_page,
)

logger = logging.getLogger(__name__)


class PacerPageType(StrEnum):
    """Kind of PACER page being viewed."""

    NOT_PACER = "not_pacer"
    DOCKET_QUERY = "docket_query"
    DOCKET_DISPLAY = "docket_display"
    ATTACHMENT_MENU = "attachment_menu"
    SINGLE_DOCUMENT = "single_document"
    DOCUMENT = "document"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PacerPage:
    """Result of PACER page classification."""

    url: str
    page_type: PacerPageType
    court: str | None  # PACER court id as it appears in the host
    canonical_court: str | None
    court_abbreviation: str | None  # None for unsupported courts
    appellate: bool
    case_number: str | None
    document_id: str | None  # fourth digit normalized to 0
    base_name: str
    signals: tuple[str, ...]  # names of checks that fired

    @property
    def is_pacer(self) -> bool:
        return self.page_type is not PacerPageType.NOT_PACER

    def to_dict(self) -> dict[str, object]:
        return {
            "url": self.url,
            "page_type": self.page_type.value,
            "court": self.court,
            "canonical_court": self.canonical_court,
            "court_abbreviation": self.court_abbreviation,
            "appellate": self.appellate,
            "case_number": self.case_number,
            "document_id": self.document_id,
            "base_name": self.base_name,
            "signals": list(self.signals),
        }


def classify_pacer_page(
    url: str,
    document: PageDocument | None = None,
    *,
    referrer: str | None = None,
) -> PacerPage:
    """Classify a PACER page.

    Args:
        url: page URL (always available)
        document: loaded page (optional, enables the doc1 DOM checks)
        referrer: referring URL, consulted after ``url`` for the case number

    Returns:
        PacerPage with page_type, court identifiers, and extracted ids
    """
    url = url or ""
    fired: list[str] = []

    court = get_court_from_url(url)
    if court is not None:
        fired.append("pacer_host")
    appellate = is_appellate_court(court)
    if appellate:
        fired.append("appellate_court")

    docket_query = is_docket_query_url(url)
    docket_display = is_docket_display_url(url)
    attachment_menu = is_attachment_menu_page(url, document)
    single_document = is_single_document_page(url, document)
    document_url = is_document_url(url)
    for name, hit in (
        ("docket_query_url", docket_query),
        ("docket_display_url", docket_display),
        ("attachment_menu_dom", attachment_menu),
        ("single_document_dom", single_document),
        ("document_url", document_url),
    ):
        if hit:
            fired.append(name)

    if court is None:
        page_type = PacerPageType.NOT_PACER
    elif docket_query:
        page_type = PacerPageType.DOCKET_QUERY
    elif docket_display:
        page_type = PacerPageType.DOCKET_DISPLAY
    elif attachment_menu:
        page_type = PacerPageType.ATTACHMENT_MENU
    elif single_document:
        page_type = PacerPageType.SINGLE_DOCUMENT
    elif document_url:
        page_type = PacerPageType.DOCUMENT
    else:
        page_type = PacerPageType.OTHER

    result = PacerPage(
        url=url,
        page_type=page_type,
        court=court,
        canonical_court=canonical_court(court),
        court_abbreviation=court_abbreviation(court),
        appellate=appellate,
        case_number=get_case_number_from_urls([url, referrer]),
        document_id=get_document_id_from_url(url),
        base_name=get_base_name_from_url(url),
        signals=tuple(fired),
    )
    logger.debug("Classified %s as %s (signals=%s)", url[:80], page_type.value, ",".join(fired))
    return result
