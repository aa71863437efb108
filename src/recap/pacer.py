# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""PACER site abstraction: pure URL, DOM, and cookie checks.

PACER sites are structured like this::

    Case query form
     |
     `--> Main menu for a particular case
           |
           |--> Docket query form ---.
           |                         |
           `--> History query form --|
                                     |
                                     '--> Docket, i.e. list of documents or
                                          History Report (*)
                                           |
                                           |--> Attachment menu page for a
                                           |    particular document (aka doc1
                                           |    page)
                                           |     |
                                           `-----'--> Single document page
                                                       |
                                                       '--> PDF view page (*)

Pages marked (*) cost money.  The single document page tells you how much a
document will cost before you get to view the PDF.

Every function here is total: malformed or missing input yields ``None`` or
``False``, never an exception.  Classification is advisory, so a false
negative is always the safe answer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import urlparse

from .courts import canonical_court, court_abbreviation, is_appellate_court
from .document import PageDocument

__all__ = [
    "canonical_court",
    "court_abbreviation",
    "get_base_name_from_url",
    "get_case_number_from_urls",
    "get_court_from_url",
    "get_document_id_from_url",
    "has_pacer_cookie",
    "is_appellate_court",
    "is_attachment_menu_page",
    "is_docket_display_url",
    "is_docket_query_url",
    "is_document_url",
    "is_single_document_page",
]

# ---------------------------------------------------------------------------
# Patterns (ASCII: PACER URLs and cookies are plain ASCII)
# ---------------------------------------------------------------------------

_COURT_HOST_RE = re.compile(r"^\w+://(ecf|ecf-train|pacer)\.([\w-]+)\.uscourts\.gov/", re.ASCII)
_DOC1_RE = re.compile(r"/doc1/\d+", re.ASCII)
_DOC1_ID_RE = re.compile(r"/doc1/(\d+)\Z", re.ASCII)
_SHOW_DOC_RE = re.compile(r"/cgi-bin/show_doc")
_DOCKET_QUERY_RE = re.compile(r"/(DktRpt|HistDocQry)\.pl\?\d+\Z", re.ASCII)
_DOCKET_DISPLAY_RE = re.compile(r"/(DktRpt|HistDocQry)\.pl\?\w+-[\w-]+\Z", re.ASCII)
_CASE_NUMBER_RE = re.compile(r"\?(\d+)\Z", re.ASCII)
_QUERY_RE = re.compile(r"\?.*")
_DIRNAME_RE = re.compile(r".*/")
_COOKIE_RE = re.compile(r"\s*([^=;]+)=([^;]*)")

_ATTACHMENT_MENU_BUTTON = "Download All"
_SINGLE_DOCUMENT_BUTTON = "View Document"


# ---------------------------------------------------------------------------
# URL checks
# ---------------------------------------------------------------------------


def get_court_from_url(url: str | None) -> str | None:
    """Return the court id for a PACER URL, or None if not a PACER site."""
    m = _COURT_HOST_RE.search((url or "").lower())
    return m.group(2) if m else None


def is_document_url(url: str | None) -> bool:
    """True if the URL looks like a link to a PACER document."""
    if not url:
        return False
    if _DOC1_RE.search(url) or _SHOW_DOC_RE.search(url):
        return get_court_from_url(url) is not None
    return False


def is_docket_query_url(url: str | None) -> bool:
    """True for the "Docket Sheet" / "History/Documents" query form.

    The part after the "?" is all digits: a case number, no report yet.
    """
    return bool(url and _DOCKET_QUERY_RE.search(url))


def is_docket_display_url(url: str | None) -> bool:
    """True for the page shown after submitting a docket or history query.

    The part after the "?" has hyphens in it.
    """
    return bool(url and _DOCKET_DISPLAY_RE.search(url))


def _hostname(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def get_case_number_from_urls(urls: Iterable[str | None]) -> str | None:
    """Return the case number from the first qualifying URL.

    URLs are tried in the order given, so callers pick the precedence (for
    example the page URL before its referrer).  A URL qualifies when its host
    is under uscourts.gov and its query string is all digits.
    """
    for url in urls:
        if not url:
            continue
        if not _hostname(url).endswith("uscourts.gov"):
            continue
        m = _CASE_NUMBER_RE.search(url)
        if m:
            return m.group(1)
    return None


def get_document_id_from_url(url: str | None) -> str | None:
    """Return the doc id for a document view or single-document page URL.

    PACER uses the fourth digit of the doc id to flag whether the user has
    been shown a receipt page.  Both states are the same document, so the
    fourth digit is always forced to 0.
    """
    m = _DOC1_ID_RE.search(url or "")
    if not m:
        return None
    digits = m.group(1)
    return digits[:3] + "0" + digits[4:]


def get_base_name_from_url(url: str | None) -> str:
    """Return the last path component of a URL, ignoring the query string."""
    path = _QUERY_RE.sub("", url or "", count=1)
    return _DIRNAME_RE.sub("", path, count=1)


# ---------------------------------------------------------------------------
# DOM checks (doc1 pages)
# ---------------------------------------------------------------------------


def _last_input_value(document: PageDocument | None) -> str | None:
    if document is None:
        return None
    inputs = document.inputs()
    if not inputs:
        return None
    return getattr(inputs[-1], "value", None)


def is_attachment_menu_page(url: str | None, document: PageDocument | None) -> bool:
    """True for a "Document Selection Menu" page (a document's attachments)."""
    if not url or not _DOC1_RE.search(url):
        return False
    return _last_input_value(document) == _ATTACHMENT_MENU_BUTTON


def is_single_document_page(url: str | None, document: PageDocument | None) -> bool:
    """True for the page offering a single document for download."""
    if not url or not _DOC1_RE.search(url):
        return False
    return _last_input_value(document) == _SINGLE_DOCUMENT_BUTTON


# ---------------------------------------------------------------------------
# Login state
# ---------------------------------------------------------------------------


def _parse_cookies(cookie_string: str) -> dict[str, str]:
    return {m.group(1).strip(): m.group(2).strip() for m in _COOKIE_RE.finditer(cookie_string)}


def has_pacer_cookie(cookie_string: str | None) -> bool:
    """Given a raw Cookie header, return True if the user is logged in to PACER."""
    if not cookie_string:
        return False
    cookies = _parse_cookies(cookie_string)
    pacer_cookie = cookies.get("PacerUser") or cookies.get("PacerSession")
    return bool(pacer_cookie) and "unvalidated" not in pacer_cookie
