# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for recap.toolbar: button state and login tracking."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from recap.notifier import Notifier
from recap.options import Options, static_options
from recap.toolbar import (
    ACTIVE_ICONS,
    DISABLED_ICONS,
    GREY_ICONS,
    WARNING_ICONS,
    ToolbarButton,
    toolbar_state,
)

DISTRICT = "https://ecf.cand.uscourts.gov/cgi-bin/iquery.pl"
APPELLATE = "https://ecf.ca9.uscourts.gov/n/beam/servlet/TransportRoom"


class TestToolbarState:
    @pytest.mark.parametrize(
        "url,options,logged_in,title,icons",
        [
            (DISTRICT, Options(recap_disabled=True), True, "RECAP is temporarily disabled", DISABLED_ICONS),
            ("https://example.com/", Options(), True, "Not at a PACER site", GREY_ICONS),
            (None, Options(), False, "Not at a PACER site", GREY_ICONS),
            (APPELLATE, Options(), True, "Appellate courts are not supported", WARNING_ICONS),
            (DISTRICT, Options(), True, "Logged in to PACER", ACTIVE_ICONS),
            (DISTRICT, Options(), False, "Not logged in to PACER", GREY_ICONS),
        ],
        ids=["disabled", "not-pacer", "no-url", "appellate", "logged-in", "logged-out"],
    )
    def test_states(self, url, options, logged_in, title, icons):
        state = toolbar_state(url, options=options, logged_in=logged_in)
        assert state.title == "RECAP: " + title
        assert state.icons == icons

    def test_icon_sets_keyed_by_pixel_size(self):
        assert dict(ACTIVE_ICONS) == {"19": "assets/images/icon-19.png", "38": "assets/images/icon-38.png"}
        assert set(DISABLED_ICONS) == set(GREY_ICONS) == set(WARNING_ICONS) == {"19", "38"}


def _button(**opts) -> tuple[ToolbarButton, MagicMock, MagicMock]:
    set_title_icon = MagicMock()
    sink = MagicMock()
    provider = static_options(Options(**opts))
    button = ToolbarButton(set_title_icon, Notifier(sink=sink, options=provider), provider)
    return button, set_title_icon, sink


class TestToolbarButton:
    def test_update_pushes_state(self):
        button, set_title_icon, _ = _button()
        state = button.update(DISTRICT)
        set_title_icon.assert_called_once_with("RECAP: Not logged in to PACER", GREY_ICONS)
        assert state.icons == GREY_ICONS

    def test_login_notifies_and_refreshes_tabs(self):
        button, set_title_icon, sink = _button()
        tabs = [DISTRICT, "https://example.com/"]
        result = button.update_cookie_status("cand", "PacerSession=abc", tab_urls=tabs)
        assert result is True
        assert button.pacer_login is True
        sink.assert_called_once_with("RECAP is active", "Logged into PACER", None)
        titles = [c.args[0] for c in set_title_icon.call_args_list]
        assert titles == ["RECAP: Logged in to PACER", "RECAP: Not at a PACER site"]

    def test_no_change_no_notification(self):
        button, set_title_icon, sink = _button()
        button.update_cookie_status("cand", "PacerSession=abc")
        sink.reset_mock()
        set_title_icon.reset_mock()
        button.update_cookie_status("cand", "PacerSession=other", tab_urls=[DISTRICT])
        sink.assert_not_called()
        set_title_icon.assert_not_called()

    def test_logout(self):
        button, _, sink = _button()
        button.update_cookie_status("cand", "PacerSession=abc")
        assert button.update_cookie_status("cand", "PacerSession=unvalidated") is False
        assert sink.call_args.args[:2] == ("RECAP is inactive", "Logged out of PACER")

    def test_ignored_without_court(self):
        button, _, sink = _button()
        assert button.update_cookie_status(None, "PacerSession=abc") is False
        sink.assert_not_called()

    def test_ignored_when_disabled(self):
        button, _, sink = _button(recap_disabled=True)
        assert button.update_cookie_status("cand", "PacerSession=abc") is False
        assert button.pacer_login is False
        sink.assert_not_called()

    def test_status_notifications_off_still_tracks_login(self):
        button, _, sink = _button(status_notifications=False)
        assert button.update_cookie_status("cand", "PacerUser=jdoe") is True
        sink.assert_not_called()

    def test_default_collaborators(self):
        set_title_icon = MagicMock()
        button = ToolbarButton(set_title_icon)
        assert button.update_cookie_status("cand", "PacerSession=abc", tab_urls=[DISTRICT]) is True
        set_title_icon.assert_called_once_with("RECAP: Logged in to PACER", ACTIVE_ICONS)
