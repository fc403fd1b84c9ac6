"""Document analysis payload (Pydantic model).

The hosted analysis endpoint answers with `{"metrics": {...}}`, where the metrics object uses
camelCase keys and every field may be missing or `null`. Model output is not trusted: it may be
wrapped in Markdown code fences, contain numbers where strings are expected, or use `"null"` as a
string. Requisite values are kept verbatim otherwise; validating them is the validator's job.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from src.requisites.dictionaries import METRICS_FIELD_TO_TYPE
from src.requisites.schema import RequisiteType

logger = logging.getLogger(__name__)

_NULL_STRINGS = {"", "null"}


class MetricsError(ValueError):
    """Raised when an analysis payload cannot be turned into `DocumentMetrics`."""


class DocumentMetrics(BaseModel):
    """Structured fields extracted from a single document."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    document_type: str | None = None
    counterparties: list[str] = Field(default_factory=list)
    amount_with_vat: float | None = Field(default=None, alias="amountWithVAT")
    amount_without_vat: float | None = Field(default=None, alias="amountWithoutVAT")
    vat_amount: float | None = None
    currency: str | None = None
    contract_number: str | None = None
    date: str | None = None
    full_names: list[str] = Field(default_factory=list)
    addresses: list[str] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list)
    amounts: list[str] = Field(default_factory=list)
    organization_name: str | None = None
    legal_form: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    bik: str | None = None
    kbk: str | None = None
    inn: str | None = None
    oktmo: str | None = None
    kpp: str | None = None

    @field_validator(
        "document_type",
        "currency",
        "contract_number",
        "date",
        "organization_name",
        "legal_form",
        "bank_name",
        "account_number",
        "bik",
        "kbk",
        "inn",
        "oktmo",
        "kpp",
        mode="before",
    )
    @classmethod
    def null_string_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in _NULL_STRINGS:
            return None
        return value

    @field_validator("counterparties", "full_names", "addresses", "dates", "amounts", mode="before")
    @classmethod
    def coerce_display_list(cls, value: Any) -> list[str]:
        """Display-only lists never reject a payload: items of any shape become text."""

        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]
        return [_display_text(item) for item in value if item is not None]

    @field_validator("amount_with_vat", "amount_without_vat", "vat_amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Any:
        """Accept amounts written as text (`"1 200,50"`); unparseable text becomes `None`."""

        if not isinstance(value, str):
            return value

        cleaned = "".join(value.split()).replace(",", ".")
        if cleaned.lower() in _NULL_STRINGS:
            return None
        try:
            return float(cleaned)
        except ValueError:
            logger.debug("dropping unparseable amount")
            return None

    def requisites(self) -> dict[RequisiteType, str]:
        """Requisite values present in the payload, keyed by requisite type."""

        values = self.model_dump(by_alias=True)
        return {
            requisite_type: values[field]
            for field, requisite_type in METRICS_FIELD_TO_TYPE.items()
            if values.get(field) is not None
        }


def _display_text(item: Any) -> str:
    # {"value": 1200, "currency": "RUB"} -> "1200 RUB"
    if isinstance(item, dict):
        return " ".join(str(v) for v in item.values() if v is not None)
    return item if isinstance(item, str) else str(item)


def _strip_code_fences(text: str) -> str:
    value = (text or "").strip()
    value = value.removeprefix("```json").removeprefix("```")
    value = value.removesuffix("```")
    return value.strip()


def metrics_from_obj(obj: Any) -> DocumentMetrics:
    """Validate a decoded payload: either the metrics object or the `{"metrics": ...}` envelope."""

    if isinstance(obj, dict):
        if obj.get("error") and "metrics" not in obj:
            raise MetricsError(f"analysis failed: {obj['error']}")
        if "metrics" in obj:
            obj = obj["metrics"]

    if not isinstance(obj, dict):
        raise MetricsError("metrics payload must be a JSON object")

    try:
        return DocumentMetrics.model_validate(obj)
    except ValidationError as exc:
        raise MetricsError(f"invalid metrics payload ({exc.error_count()} errors)") from exc


def metrics_from_content(content: str) -> DocumentMetrics:
    """Parse raw model output text (optionally fenced as Markdown) into `DocumentMetrics`."""

    try:
        decoded = json.loads(_strip_code_fences(content))
    except json.JSONDecodeError as exc:
        raise MetricsError("analysis result is not valid JSON") from exc
    return metrics_from_obj(decoded)
