"""
Command line entry point for linksmith.
"""

from __future__ import annotations

import argparse
import contextlib
import json
import os
import sys
from importlib.metadata import PackageNotFoundError, version

from loguru import logger as loguru_logger
from pydantic import ValidationError

from linksmith import ProcessorConfig, WebLinkProcessor
from linksmith.logging import configure_logging
from linksmith.validation import PROFILES


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linksmith",
        description="linksmith CLI: parse and validate HTTP Link header values (RFC 8288).",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed linksmith version and exit.",
    )
    parser.add_argument(
        "--log-level",
        help="Log level for diagnostics on stderr (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v: INFO, -vv: DEBUG). Ignored when --log-level is set.",
    )
    subparsers = parser.add_subparsers(dest="command")
    parse = subparsers.add_parser(
        "parse",
        help="Parse one Link header value and print links and issues as JSON.",
    )
    parse.add_argument(
        "header",
        nargs="?",
        help="Link header field value (without 'Link:'). Read from stdin when omitted.",
    )
    parse.add_argument(
        "--profile",
        action="append",
        default=[],
        choices=sorted(PROFILES),
        help="Enable an additional rule profile (repeatable).",
    )
    parse.add_argument(
        "--allow-parameter",
        action="append",
        default=None,
        metavar="NAME",
        help="Allow an extension parameter name; enables strict mode (repeatable).",
    )
    return parser


def _resolve_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return None


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    log_level = _resolve_log_level(args)
    if log_level or os.getenv("LINKSMITH_LOG_LEVEL"):
        # loguru's default stderr sink would print every record a second time.
        with contextlib.suppress(ValueError):
            loguru_logger.remove(0)
    configure_logging(log_level)

    if args.version:
        try:
            print(version("linksmith"))
        except PackageNotFoundError:
            print("linksmith (not installed)")
        return 0

    if args.command == "parse":
        header = args.header if args.header is not None else sys.stdin.read().strip()
        try:
            config = ProcessorConfig(
                profiles=tuple(args.profile),
                allowed_parameters=args.allow_parameter,
            )
        except ValidationError as exc:
            parser.error(f"Invalid configuration: {exc}")

        result = WebLinkProcessor.from_config(config).process(header)
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 1 if result.contains_issues() else 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
