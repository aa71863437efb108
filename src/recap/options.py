# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Persisted RECAP options.

The extension stores one ``options`` object with three booleans.  Here it is
an ``Options`` model loaded once, up front, from an optional JSON file and
``RECAP_*`` environment variables.  Everything downstream reads it through a
synchronous ``OptionsProvider``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

_TRUE = ("1", "true", "yes")
_FALSE = ("0", "false", "no")

_ENV_VARS: dict[str, str] = {
    "recap_disabled": "RECAP_DISABLED",
    "upload_notifications": "RECAP_UPLOAD_NOTIFICATIONS",
    "status_notifications": "RECAP_STATUS_NOTIFICATIONS",
}


class Options(BaseModel):
    """User options that gate the toolbar and notifications."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    recap_disabled: bool = Field(False, description="Temporarily turn RECAP off")
    upload_notifications: bool = Field(True, description="Notify after uploads")
    status_notifications: bool = Field(True, description="Notify on PACER login/logout")


OptionsProvider = Callable[[], Options]


def _read_file(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read options file {path}: {e.strerror or e}", path=str(path)) from e
    try:
        return Options.model_validate_json(text).model_dump()
    except ValidationError as e:
        raise ConfigError(f"Invalid options file {path}: {e.error_count()} error(s)", path=str(path)) from e


def load_options(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Options:
    """Build Options from defaults, then the options file, then env vars.

    Args:
        path: JSON file holding the stored ``options`` object (optional).
        environ: Environment mapping (defaults to ``os.environ``).

    Raises:
        ConfigError: the options file is missing or not a valid options object.
    """
    values = Options().model_dump()
    if path is not None:
        values.update(_read_file(Path(path)))

    env = os.environ if environ is None else environ
    for field, var in _ENV_VARS.items():
        raw = env.get(var, "").strip().lower()
        if not raw:
            continue
        if raw in _TRUE:
            values[field] = True
        elif raw in _FALSE:
            values[field] = False
        else:
            logger.warning("Ignoring %s=%r (expected one of %s)", var, raw, "/".join(_TRUE + _FALSE))

    return Options(**values)


def static_options(options: Options | None = None) -> OptionsProvider:
    """Return a provider that always yields *options* (defaults if None)."""
    resolved = options if options is not None else Options()
    return lambda: resolved
