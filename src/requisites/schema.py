"""Requisite validation schema (Pydantic models).

`ValidationResult` is the contract between the validator and the form layer that renders inline
field errors. It serializes to the camelCase wire shape `{"isValid": ..., "error": ...}`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class RequisiteType(StrEnum):
    """Supported requisite kinds."""

    inn = "inn"
    kpp = "kpp"
    bik = "bik"
    account = "account"
    kbk = "kbk"
    oktmo = "oktmo"


class RequisiteErrorCode(StrEnum):
    """Why a value failed validation."""

    pattern_mismatch = "pattern_mismatch"
    checksum_mismatch = "checksum_mismatch"
    invalid_input = "invalid_input"


class ValidationResult(BaseModel):
    """Outcome of a single validation call."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    is_valid: bool
    error: str | None = None
    error_code: RequisiteErrorCode | None = None

    @model_validator(mode="after")
    def validate_consistency(self) -> ValidationResult:
        """A valid result carries no error; an invalid one always carries a message."""

        if self.is_valid:
            if self.error is not None or self.error_code is not None:
                raise ValueError("valid result must not carry an error")
        elif not (self.error or "").strip():
            raise ValueError("invalid result requires a non-empty error")
        return self

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def fail(cls, code: RequisiteErrorCode, message: str) -> ValidationResult:
        return cls(is_valid=False, error=message, error_code=code)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape, omitting empty fields."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
