# src/main.py — v1
"""CLI entry point — verify and compare commands.

Usage:
    blockverify verify <artifact> [options]
    blockverify compare <old.blockmap> <new.blockmap> [options]

Exit status: 0 on success (or nothing to do), 1 on verification failure
or unreadable input, 2 on malformed metadata.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from blockverify.version import __version__

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_FAILED

    from blockverify.config.settings import ConfigurationError, load_settings

    try:
        settings = load_settings()
    except (ConfigurationError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILED

    _setup_logging(args, settings)

    from blockverify.storage.reader import BlockmapFormatError

    try:
        return args.func(args, settings)
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename or exc)
        return EXIT_FAILED
    except BlockmapFormatError as exc:
        logger.error("Unreadable blockmap: %s", exc)
        return EXIT_FAILED
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="blockverify",
        description=f"blockverify v{__version__} — Verify artifacts against blockmaps",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-format", choices=["json", "text"], default=None,
        help="Log format (default: from settings)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON instead of a status line",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- verify ---
    p_verify = subparsers.add_parser(
        "verify", help="Verify an artifact against its sibling blockmap",
    )
    p_verify.add_argument("artifact", type=Path, help="Path to executable")
    p_verify.set_defaults(func=_cmd_verify)

    # --- compare ---
    p_compare = subparsers.add_parser(
        "compare", help="Estimate unchanged bytes between two blockmaps",
    )
    p_compare.add_argument("old", type=Path, help="Blockmap of the old version")
    p_compare.add_argument("new", type=Path, help="Blockmap of the new version")
    p_compare.set_defaults(func=_cmd_compare)

    return parser


def _cmd_verify(args: argparse.Namespace, settings) -> int:
    """Verify one artifact and print its status line."""
    from blockverify.api.facade import verify_artifact

    outcome = verify_artifact(args.artifact, settings=settings)
    if outcome is None:
        return EXIT_OK

    if args.json:
        print(outcome.model_dump_json())
    elif outcome.status == "ok":
        print(f"Succeed to verify {outcome.blocks_verified} blocks")
    elif outcome.status == "invalid":
        print(f"Invalid metadata: {outcome.reason}")
    else:
        print(f"Verification failed: {outcome.reason}")

    return {
        "ok": EXIT_OK,
        "invalid": EXIT_INVALID,
        "failed": EXIT_FAILED,
    }[outcome.status]


def _cmd_compare(args: argparse.Namespace, settings) -> int:
    """Compare two blockmaps and print the skip summary."""
    from blockverify.api.facade import compare_blockmaps
    from blockverify.core.models import Invalid

    result = compare_blockmaps(args.old, args.new, settings=settings)
    if result is None:
        return EXIT_OK

    if isinstance(result, Invalid):
        if args.json:
            print(result.model_dump_json())
        else:
            print(f"Invalid metadata: {result.reason}")
        return EXIT_INVALID

    if args.json:
        print(result.model_dump_json())
    else:
        print(result.format())
    return EXIT_OK


def _setup_logging(args: argparse.Namespace, settings) -> None:
    """Configure logging from settings, with CLI flags taking precedence."""
    from blockverify.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_format=args.log_format or settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
