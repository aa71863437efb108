# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for recap.courts: static court tables."""

from __future__ import annotations

import re

import pytest

from recap.courts import (
    APPELLATE_COURTS,
    COURT_ABBREVS,
    PACER_TO_CL_IDS,
    court_abbreviation,
)

_CODE_RE = re.compile(r"^[a-z0-9-]+$")


class TestTableShape:
    def test_abbreviation_table_size(self):
        assert len(COURT_ABBREVS) == 190

    def test_appellate_set(self):
        assert len(APPELLATE_COURTS) == 13
        assert {"ca1", "ca11", "cadc", "cafc"} <= APPELLATE_COURTS

    def test_alias_table(self):
        assert dict(PACER_TO_CL_IDS) == {
            "azb": "arb",
            "cofc": "uscfc",
            "neb": "nebraskab",
            "nysb-mega": "nysb",
        }

    @pytest.mark.parametrize(
        "table",
        [COURT_ABBREVS, APPELLATE_COURTS, PACER_TO_CL_IDS],
        ids=["abbrevs", "appellate", "aliases"],
    )
    def test_keys_are_court_codes(self, table):
        bad = [k for k in table if not _CODE_RE.match(k)]
        assert bad == []

    def test_appellate_courts_have_no_abbreviation(self):
        assert not APPELLATE_COURTS & set(COURT_ABBREVS)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            COURT_ABBREVS["xxx"] = "X"  # type: ignore[index]
        with pytest.raises(TypeError):
            PACER_TO_CL_IDS["azb"] = "azb"  # type: ignore[index]
        with pytest.raises(AttributeError):
            APPELLATE_COURTS.add("ca12")  # type: ignore[attr-defined]


class TestCourtAbbreviation:
    @pytest.mark.parametrize(
        "code,expected",
        [
            ("nysb", "Bankr.S.D.N.Y."),
            ("nysb-mega", "Bankr.S.D.N.Y."),
            ("cand", "N.D.Cal."),
            ("cit", "CIT"),
            ("cofc", "Fed.Cl."),
            ("nmid", "N.MarianaIslands"),
            ("wyd", "D.Wyo."),
        ],
    )
    def test_known(self, code: str, expected: str):
        assert court_abbreviation(code) == expected

    @pytest.mark.parametrize("code", ["zzz", "ca9", "NYSB", "", None])
    def test_unknown_is_none(self, code):
        assert court_abbreviation(code) is None
