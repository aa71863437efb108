# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Desktop notification boundary.

Presentation belongs to the host; this module only decides *whether* and
*what* to show, then hands ``(title, message, callback)`` to a sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .options import OptionsProvider, static_options

logger = logging.getLogger(__name__)

NotificationCallback = Callable[[], None]
NotificationSink = Callable[[str, str, NotificationCallback | None], None]

NOTIFICATION_ID = "recap_notification"


def log_sink(title: str, message: str, cb: NotificationCallback | None) -> None:
    """Default sink: log the notification, then report it as created."""
    logger.info("[%s] %s: %s", NOTIFICATION_ID, title, message)
    if cb is not None:
        cb()


class Notifier:
    """Shows notifications, honouring the upload/status option gates."""

    def __init__(
        self,
        sink: NotificationSink | None = None,
        options: OptionsProvider | None = None,
    ) -> None:
        self._sink = sink or log_sink
        self._options = options or static_options()

    def show(self, title: str, message: str, cb: NotificationCallback | None = None) -> None:
        self._sink(title, message, cb)

    def show_upload(self, message: str, cb: NotificationCallback | None = None) -> bool:
        """Show an upload message if upload notifications are enabled."""
        if not self._options().upload_notifications:
            logger.debug("Upload notification suppressed: %s", message)
            return False
        self.show("RECAP upload", message, cb)
        return True

    def show_status(self, active: bool, message: str, cb: NotificationCallback | None = None) -> bool:
        """Show a login status message if status notifications are enabled."""
        if not self._options().status_notifications:
            logger.debug("Status notification suppressed: %s", message)
            return False
        self.show("RECAP is active" if active else "RECAP is inactive", message, cb)
        return True
