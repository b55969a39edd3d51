"""Command-line entry point for the compliance scanner."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .category import Category, parse_categories
from .config import ConfigError, ScannerConfig, load_config
from .fixes import apply_fixes, get_fixable_issues
from .log import configure_logging
from .result import ScanResult, format_fix_list, format_report
from .scanner import scan

OUTPUT_FORMATS = ("terminal", "json")


def _category_list(value: str) -> List[Category]:
    try:
        return parse_categories(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compliance-scanner",
        description="Static compliance heuristics scanner (GDPR, AI Act, NIS2, PIPA, APPI, PDPA, LGPD, JIS)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("path", nargs="?", default=".", help="Project directory to scan (default: .).")
    common.add_argument(
        "--sovereign",
        action="store_true",
        default=None,
        help="Sovereign mode: checks must not assume cloud services are acceptable.",
    )
    common.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="YAML configuration file (default: <path>/.compliance-scanner.yaml if present).",
    )

    scan_parser = subparsers.add_parser("scan", parents=[common], help="Scan for compliance issues.")
    scan_parser.add_argument(
        "--categories",
        "-c",
        type=_category_list,
        default=None,
        help="Comma-separated categories to check, e.g. gdpr,ai_act.",
    )
    scan_parser.add_argument(
        "--output",
        "-o",
        choices=OUTPUT_FORMATS,
        default="terminal",
        help="Report format (defaults to terminal).",
    )
    scan_parser.add_argument(
        "--out",
        dest="output_path",
        default=None,
        help="Write the JSON report to this file instead of stdout.",
    )
    scan_parser.add_argument("--quiet", "-q", action="store_true", help="Only print the score line.")
    scan_parser.add_argument(
        "--verbose",
        "-v",
        "--cry",
        dest="verbose",
        action="store_true",
        help="Show every check and its message.",
    )

    fix_parser = subparsers.add_parser("fix", parents=[common], help="Fix compliance issues automatically.")
    fix_parser.add_argument("--auto", "-a", action="store_true", help="Apply every available fix.")
    fix_parser.add_argument(
        "--dry-run",
        "-n",
        "--wet-wipe",
        "-w",
        dest="dry_run",
        action="store_true",
        help="Preview what would be fixed without writing anything.",
    )

    subparsers.add_parser("version", help="Print the version.")
    return parser


def resolve_config(args: argparse.Namespace) -> ScannerConfig:
    return load_config(args.config_path, scan_root=args.path)


def run_scan(args: argparse.Namespace, config: ScannerConfig) -> int:
    categories = args.categories if args.categories else list(config.categories)
    sovereign = config.sovereign_mode if args.sovereign is None else args.sovereign
    result = asyncio.run(
        scan(
            args.path,
            categories=categories,
            sovereign_mode=sovereign,
            max_depth=config.max_depth,
            exclude=config.exclude,
        )
    )
    write_output(result, args.output, args.output_path, quiet=args.quiet, verbose=args.verbose)
    return result.exit_code()


def write_output(
    result: ScanResult,
    output_format: str,
    output_path: Optional[str] = None,
    quiet: bool = False,
    verbose: bool = False,
) -> None:
    if output_format == "json":
        payload = json.dumps(result.to_dict(), indent=2)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            if not quiet:
                print(f"Report written to {output_path}")
        else:
            print(payload)
        return

    if quiet:
        print(f"{result.score}/100 ({result.grade.value})")
        return
    print(format_report(result, verbose=verbose))


def run_fix(args: argparse.Namespace, config: ScannerConfig) -> int:
    sovereign = config.sovereign_mode if args.sovereign is None else args.sovereign
    print("Scanning for fixable issues...")
    result = asyncio.run(
        scan(args.path, sovereign_mode=sovereign, max_depth=config.max_depth, exclude=config.exclude)
    )
    fixable = get_fixable_issues(result.results)
    if not fixable:
        print("No fixable issues found.")
        return 0

    print("")
    print(format_fix_list(fixable))

    if args.dry_run:
        report = asyncio.run(apply_fixes(fixable, dry_run=True))
        print("")
        print(f"Dry run: {report.fixed} fix(es) would be applied. No changes made.")
        return 0

    if not args.auto:
        print("")
        print("Run with --auto to apply fixes automatically.")
        return 0

    print("")
    print("Applying all fixes...")
    report = asyncio.run(apply_fixes(fixable))
    print(f"Done. Fixed: {report.fixed}, Failed: {report.failed}")
    print("Run 'compliance-scanner scan' to verify improvements.")
    return 1 if report.failed else 0


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0
    if args.command == "version":
        print(f"compliance-scanner {__version__}")
        return 0

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2
    configure_logging(config.log_level, config.log_format)

    if args.command == "scan":
        return run_scan(args, config)
    return run_fix(args, config)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
