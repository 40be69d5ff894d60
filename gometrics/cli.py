"""
Command-line interface for gometrics.

    gometrics analyze ./cmd ./internal --format json
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from gometrics import __version__
from gometrics.core.config import REPORT_FORMATS, Config
from gometrics.core.engine import AnalysisEngine, AnalysisReport
from gometrics.logging_config import setup_logging
from gometrics.reporting import format_json, format_text


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gometrics",
        description="Per-function complexity metrics for Go source files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze Go files or directories")
    analyze_parser.add_argument("paths", nargs="+", help="Go files or directories to analyze")
    analyze_parser.add_argument("-c", "--config", dest="config_path", help="Path to YAML/JSON config file")
    analyze_parser.add_argument(
        "-f",
        "--format",
        choices=REPORT_FORMATS,
        help="Output format (overrides config)",
    )
    analyze_parser.add_argument("-o", "--output", help="Write output to file instead of stdout")
    analyze_parser.add_argument(
        "--fail-on-violation",
        action="store_true",
        default=None,
        help="Exit with status 1 when a function exceeds a threshold",
    )
    tests_group = analyze_parser.add_mutually_exclusive_group()
    tests_group.add_argument(
        "--include-tests",
        dest="include_tests",
        action="store_true",
        default=None,
        help="Analyze *_test.go files (default)",
    )
    tests_group.add_argument(
        "--no-tests",
        dest="include_tests",
        action="store_false",
        default=None,
        help="Skip *_test.go files",
    )
    verbosity = analyze_parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def cmd_analyze(args: argparse.Namespace) -> int:
    config = Config.load(args.config_path).override(_cli_overrides(args))
    report = AnalysisEngine(config).analyze(args.paths)

    fmt = args.format or config.reporting().get("format", "text")
    output = format_json(report) + "\n" if fmt == "json" else format_text(report)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Report written to %s", args.output)
    else:
        print(output, end="")
    return _exit_code(report, bool(config.reporting().get("fail_on_violation", False)))


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    try:
        if args.command == "analyze":
            return cmd_analyze(args)
        parser.print_help()
        return EXIT_OK
    except KeyboardInterrupt:
        print("\nAnalysis interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("GOMETRICS_DEBUG"):
            raise
        return 1


def _cli_overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.include_tests is not None:
        overrides["files"] = {"include_tests": args.include_tests}
    if args.fail_on_violation:
        overrides["reporting"] = {"fail_on_violation": True}
    return overrides


def _exit_code(report: AnalysisReport, fail_on_violation: bool) -> int:
    if report.has_errors:
        return EXIT_ERROR
    if fail_on_violation and report.violation_count > 0:
        return EXIT_VIOLATIONS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
