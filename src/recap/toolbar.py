# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Toolbar button (browser action) state for RECAP.

``toolbar_state`` is pure: URL + options + login flag in, title/icons out.
``ToolbarButton`` holds the one piece of mutable state, whether the user is
logged in to PACER, and pushes updates through an injected callable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .courts import is_appellate_court
from .notifier import Notifier
from .options import Options, OptionsProvider, static_options
from .pacer import get_court_from_url, has_pacer_cookie

logger = logging.getLogger(__name__)

TITLE_PREFIX = "RECAP: "
ICON_SIZES: tuple[str, ...] = ("19", "38")


def _icon_set(name: str) -> Mapping[str, str]:
    return MappingProxyType({size: f"assets/images/{name}-{size}.png" for size in ICON_SIZES})


DISABLED_ICONS = _icon_set("disabled")
GREY_ICONS = _icon_set("grey")
WARNING_ICONS = _icon_set("warning")
ACTIVE_ICONS = _icon_set("icon")


@dataclass(frozen=True, slots=True)
class ToolbarState:
    """Title and icon set for the toolbar button."""

    title: str
    icons: Mapping[str, str]  # pixel size ("19", "38") -> asset path


def _state(title: str, icons: Mapping[str, str]) -> ToolbarState:
    return ToolbarState(title=TITLE_PREFIX + title, icons=icons)


def toolbar_state(url: str | None, *, options: Options, logged_in: bool) -> ToolbarState:
    """Compute the toolbar button state for a tab showing *url*."""
    if options.recap_disabled:
        return _state("RECAP is temporarily disabled", DISABLED_ICONS)
    court = get_court_from_url(url)
    if not court:
        return _state("Not at a PACER site", GREY_ICONS)
    if is_appellate_court(court):
        return _state("Appellate courts are not supported", WARNING_ICONS)
    if logged_in:
        return _state("Logged in to PACER", ACTIVE_ICONS)
    return _state("Not logged in to PACER", GREY_ICONS)


SetTitleIcon = Callable[[str, Mapping[str, str]], None]


class ToolbarButton:
    """Tracks PACER login status and keeps the toolbar button in sync."""

    def __init__(
        self,
        set_title_icon: SetTitleIcon,
        notifier: Notifier | None = None,
        options: OptionsProvider | None = None,
    ) -> None:
        self._set_title_icon = set_title_icon
        self._options = options or static_options()
        self._notifier = notifier or Notifier(options=self._options)
        self.pacer_login = False

    def update(self, url: str | None) -> ToolbarState:
        """Recompute and push the button state for a tab showing *url*."""
        state = toolbar_state(url, options=self._options(), logged_in=self.pacer_login)
        self._set_title_icon(state.title, state.icons)
        return state

    def update_cookie_status(
        self,
        court: str | None,
        cookies: str | None,
        tab_urls: Iterable[str] = (),
    ) -> bool:
        """Update login status from the current cookies.

        On a change, sends a status notification and refreshes every tab in
        *tab_urls*.  Returns the (possibly unchanged) login status.
        """
        if self._options().recap_disabled or not court:
            return self.pacer_login
        logged_in = has_pacer_cookie(cookies)
        if logged_in != self.pacer_login:
            self._notifier.show_status(
                logged_in,
                "Logged into PACER" if logged_in else "Logged out of PACER",
            )
            self.pacer_login = logged_in
            logger.info("PACER login status changed: %s (court=%s)", logged_in, court)
            for url in tab_urls:
                self.update(url)
        return self.pacer_login
