"""Command-line requisite checks.

Usage:
    python -m src.cli validate inn 7707083893
    python -m src.cli check analysis.json --json

Exit codes: 0 when everything is valid, 1 when a value is invalid, 2 when the input payload or the
environment configuration cannot be read.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from src.config.logging import configure_logging
from src.config.settings import OutputFormat, load_settings
from src.documents.metrics import MetricsError, metrics_from_content
from src.documents.requisites import RequisiteReport, validate_document
from src.requisites.dictionaries import label_for, requisite_type_from_field
from src.requisites.schema import RequisiteType, ValidationResult
from src.requisites.validator import validate_requisite

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False))


def _format_result(result: ValidationResult) -> str:
    return "ok" if result.is_valid else f"invalid: {result.error}"


def _read_content(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _print_report(report: RequisiteReport, output_format: OutputFormat) -> None:
    if output_format == "json":
        _print_json(report.to_payload())
        return

    if not report.results:
        print("no requisites found")
        return

    for name, result in report.results.items():
        requisite_type = requisite_type_from_field(name)
        label = label_for(requisite_type, russian=True) if requisite_type is not None else name
        print(f"{label} ({name}): {_format_result(result)}")


def run_validate(requisite_type: str, value: str, *, output_format: OutputFormat) -> int:
    """Validate a single value and print the result."""

    result = validate_requisite(requisite_type, value)
    if output_format == "json":
        _print_json(result.to_payload())
    else:
        print(_format_result(result))
    return EXIT_OK if result.is_valid else EXIT_INVALID


def run_check(path: str, *, output_format: OutputFormat) -> int:
    """Validate the requisites of an analysis payload read from a file (or `-` for stdin)."""

    try:
        content = _read_content(path)
        metrics = metrics_from_content(content)
    except (OSError, UnicodeDecodeError, MetricsError) as exc:
        logger.info("unreadable payload path=%s reason=%s", path, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    report = validate_document(metrics)
    _print_report(report, output_format)
    return EXIT_OK if report.is_valid else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate document requisites (INN, KPP, BIK, ...).")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level regardless of LOG_LEVEL.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a single requisite value.")
    validate.add_argument(
        "type",
        help=f"Requisite type: {', '.join(t.value for t in RequisiteType)}.",
    )
    validate.add_argument("value", help="Candidate value (digits only).")
    validate.add_argument("--json", action="store_true", help="Print the result as JSON.")

    check = subparsers.add_parser("check", help="Validate requisites of an analysis result.")
    check.add_argument("path", help="Path to a metrics JSON file, or '-' to read stdin.")
    check.add_argument("--json", action="store_true", help="Print the report as JSON.")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""

    args = build_parser().parse_args(argv)

    load_dotenv(".env")
    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    configure_logging(settings.log_level, verbose=args.verbose)

    output_format: OutputFormat = "json" if args.json else settings.output_format

    if args.command == "validate":
        return run_validate(args.type, args.value, output_format=output_format)
    return run_check(args.path, output_format=output_format)


if __name__ == "__main__":
    raise SystemExit(main())
