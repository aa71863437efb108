# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""RECAP CLI: classify, court, cookie commands.

Usage:
    recap classify URL [--html FILE] [--referrer URL] [--cookies STRING] [--options FILE] [--json]
    recap court CODE [--json]
    recap cookie COOKIE_STRING
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .courts import canonical_court, court_abbreviation, is_appellate_court
from .document import HtmlDocument
from .errors import RecapError
from .logging_config import configure
from .options import load_options
from .pacer import has_pacer_cookie
from .page_classifier import classify_pacer_page
from .toolbar import toolbar_state

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_LOGGED_IN = 2


def _print_fields(fields: dict[str, object]) -> None:
    width = max(len(k) for k in fields)
    for key, value in fields.items():
        if isinstance(value, list | tuple):
            value = ", ".join(str(v) for v in value) or "-"
        elif value is None:
            value = "-"
        print(f"{key.ljust(width)}  {value}")


def cmd_classify(args: argparse.Namespace) -> int:
    """Classify a PACER page from its URL and, optionally, saved HTML."""
    document = HtmlDocument.from_path(args.html) if args.html else None
    page = classify_pacer_page(args.url, document, referrer=args.referrer)
    options = load_options(args.options)
    state = toolbar_state(args.url, options=options, logged_in=has_pacer_cookie(args.cookies))

    fields = page.to_dict()
    fields["toolbar"] = state.title
    if args.json:
        print(json.dumps(fields, ensure_ascii=False, indent=2))
    else:
        _print_fields(fields)
    return EXIT_OK


def cmd_court(args: argparse.Namespace) -> int:
    """Show canonical id, abbreviation, and appellate flag for a court id."""
    code = args.code.strip().lower()
    fields: dict[str, object] = {
        "court": code,
        "canonical_court": canonical_court(code),
        "abbreviation": court_abbreviation(code),
        "appellate": is_appellate_court(code),
    }
    if args.json:
        print(json.dumps(fields, ensure_ascii=False, indent=2))
    else:
        if fields["abbreviation"] is None:
            fields["abbreviation"] = "unknown"
        _print_fields(fields)
    return EXIT_OK


def cmd_cookie(args: argparse.Namespace) -> int:
    """Report whether a Cookie header carries a validated PACER login."""
    if has_pacer_cookie(args.cookies):
        print("logged in")
        return EXIT_OK
    print("not logged in")
    return EXIT_NOT_LOGGED_IN


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="RECAP PACER page tools",
        prog="recap",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log lines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    _classify_epilog = """\
examples:
  %(prog)s https://ecf.cand.uscourts.gov/cgi-bin/DktRpt.pl?123456
  %(prog)s https://ecf.nysb.uscourts.gov/doc1/126012345678 --html page.html
  %(prog)s https://ecf.dcd.uscourts.gov/x --cookies "PacerSession=abc" --json
"""
    p_classify = subparsers.add_parser(
        "classify",
        help="Classify a PACER page",
        epilog=_classify_epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_classify.add_argument("url", metavar="URL", help="Page URL")
    p_classify.add_argument("--html", metavar="FILE", help="Saved page HTML (enables doc1 page checks)")
    p_classify.add_argument("--referrer", metavar="URL", help="Referring URL (fallback for case number)")
    p_classify.add_argument("--cookies", metavar="STRING", default="", help="Cookie header for login status")
    p_classify.add_argument("--options", metavar="FILE", help="JSON options file")
    p_classify.add_argument("--json", action="store_true", help="Output JSON")

    p_court = subparsers.add_parser("court", help="Look up a PACER court id")
    p_court.add_argument("code", metavar="CODE", help="PACER court id (e.g. nysb)")
    p_court.add_argument("--json", action="store_true", help="Output JSON")

    p_cookie = subparsers.add_parser("cookie", help="Check a Cookie header for a PACER login")
    p_cookie.add_argument("cookies", metavar="COOKIE_STRING", help="Raw Cookie header value")

    return parser


_COMMANDS = {
    "classify": cmd_classify,
    "court": cmd_court,
    "cookie": cmd_cookie,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure(json_output=args.log_json, level=args.log_level)

    try:
        code = _COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except RecapError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
