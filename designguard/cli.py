"""
Main CLI for designguard.

Validates a website's CSS and markup against a Design System DNA file.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .errors import DesignGuardError
from .utils import log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""

    parser = argparse.ArgumentParser(
        prog="designguard",
        description="Validate a website against a design system specification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  analyze     Validate a URL or HTML/CSS files against a specification
  sample      Write the sample design system specification
  check-spec  Validate a specification file without analyzing anything

Examples:
  designguard sample -o design-system.json
  designguard analyze https://example.com --spec design-system.json
  designguard analyze --html page.html --css page.css --spec design-system.json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- analyze ---
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Validate a URL or HTML/CSS files against a specification",
        description="Fetch a page (or read local HTML/CSS), evaluate every rule, and report findings.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  designguard analyze https://example.com --spec ds.json
  designguard analyze https://example.com --spec ds.json --output report.json
  designguard analyze --html index.html --css site.css --spec ds.json
  designguard analyze https://example.com --spec ds.json --status error
        """,
    )
    analyze_parser.add_argument(
        "target",
        nargs="?",
        help="URL, data URL, or raw markup to analyze",
    )
    analyze_parser.add_argument(
        "--spec",
        required=True,
        help="Design System DNA JSON file",
    )
    analyze_parser.add_argument(
        "--html",
        help="Local HTML file to analyze instead of a URL",
    )
    analyze_parser.add_argument(
        "--css",
        help="Local CSS file to combine with --html",
    )
    analyze_parser.add_argument(
        "--config",
        help="YAML config file (default: ./designguard.yaml if present)",
    )
    analyze_parser.add_argument(
        "--timeout",
        type=float,
        help="Fetch timeout in seconds (overrides config)",
    )
    analyze_parser.add_argument(
        "--no-proxy",
        action="store_true",
        help="Fetch the URL directly instead of through the proxy",
    )
    analyze_parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Fail instead of analyzing the sample document when fetching fails",
    )
    analyze_parser.add_argument(
        "--output", "-o",
        help="Write the report as JSON to this path",
    )
    analyze_parser.add_argument(
        "--status",
        choices=["correct", "warning", "error"],
        help="Only list findings with this status",
    )
    analyze_parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print progress",
    )
    analyze_parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 when the report contains errors",
    )

    # --- sample ---
    sample_parser = subparsers.add_parser(
        "sample",
        help="Write the sample design system specification",
        description="Print or save a starter Design System DNA file.",
    )
    sample_parser.add_argument(
        "--output", "-o",
        help="File to write (default: print to stdout)",
    )

    # --- check-spec ---
    check_parser = subparsers.add_parser(
        "check-spec",
        help="Validate a specification file",
        description="Check that a Design System DNA file is well-formed and list its rules.",
    )
    check_parser.add_argument(
        "spec",
        help="Design System DNA JSON file",
    )

    return parser


# =============================================================================
# Command Dispatch
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        log.set_color(False)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "analyze":
            from .commands import cmd_analyze
            return cmd_analyze(args)

        elif args.command == "sample":
            from .commands import cmd_sample
            return cmd_sample(args)

        elif args.command == "check-spec":
            from .commands import cmd_check_spec
            return cmd_check_spec(args)

        else:
            log.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        log.warning("\nInterrupted")
        return 130
    except DesignGuardError as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
