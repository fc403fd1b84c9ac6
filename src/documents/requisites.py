"""Per-document requisite checks.

The edit form validates every filled-in requisite field and refuses to save while any of them is
invalid. Empty fields are optional and are not reported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.documents.metrics import DocumentMetrics
from src.requisites.dictionaries import requisite_type_from_field
from src.requisites.schema import ValidationResult
from src.requisites.validator import validate_requisite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequisiteReport:
    """Validation results for the requisite fields of one document."""

    results: dict[str, ValidationResult] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return all(r.is_valid for r in self.results.values())

    @property
    def errors(self) -> dict[str, str]:
        return {name: r.error for name, r in self.results.items() if r.error is not None}

    def to_payload(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "fields": {name: r.to_payload() for name, r in self.results.items()},
        }


def validate_requisites(values: Mapping[str, Any]) -> RequisiteReport:
    """Validate requisite fields by name.

    Keys may be payload names (`accountNumber`) or type tags (`account`). Keys that are not
    requisites are ignored; `None` and empty-string values are skipped.
    """

    results: dict[str, ValidationResult] = {}
    for name, value in values.items():
        requisite_type = requisite_type_from_field(name)
        if requisite_type is None:
            logger.debug("skipping non-requisite field=%s", name)
            continue
        if value is None or value == "":
            continue
        results[name] = validate_requisite(requisite_type, value)

    report = RequisiteReport(results=results)
    if not report.is_valid:
        logger.info("requisite check failed fields=%s", ",".join(sorted(report.errors)))
    return report


def validate_document(metrics: DocumentMetrics) -> RequisiteReport:
    """Validate the requisites extracted for a document, keyed by type tag."""

    return validate_requisites({t.value: v for t, v in metrics.requisites().items()})
