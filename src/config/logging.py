"""Logging configuration for the command-line tools.

Command output is written to stdout; diagnostics go to stderr so that `--json` output stays
machine-readable. Requisite values themselves are never logged.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_log_level(level: str, *, verbose: bool = False) -> int:
    """Map a level name to its numeric value; `verbose` always means DEBUG."""

    if verbose:
        return logging.DEBUG
    return logging.getLevelNamesMapping()[level.upper()]


def configure_logging(level: str, *, verbose: bool = False) -> None:
    """Configure process-wide logging to stderr."""

    logging.basicConfig(
        level=resolve_log_level(level, verbose=verbose),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
