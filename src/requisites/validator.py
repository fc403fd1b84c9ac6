"""Requisite validator.

Each requisite type is declared as an `Annotated` string type: an exact-length digit pattern
followed, for INN, by the checksum refinement. Validation never raises; the first reported problem
is returned inside a `ValidationResult` so form code can render it inline.
"""

from __future__ import annotations

import logging
import re
from typing import Annotated, Any

from pydantic import AfterValidator, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from src.requisites.checksum import is_valid_inn_checksum
from src.requisites.dictionaries import label_for
from src.requisites.schema import RequisiteErrorCode, RequisiteType, ValidationResult

logger = logging.getLogger(__name__)


def _digits(requisite_type: RequisiteType, *lengths: int) -> AfterValidator:
    """Build an exact-length ASCII digit check for one or more allowed lengths."""

    # `[0-9]` rather than `\d`: Unicode digits are not valid requisites.
    pattern = re.compile("|".join(f"[0-9]{{{n}}}" for n in lengths))
    label = label_for(requisite_type)
    counts = " or ".join(str(n) for n in lengths)

    def check(value: str) -> str:
        if pattern.fullmatch(value) is None:
            raise PydanticCustomError(
                RequisiteErrorCode.pattern_mismatch.value,
                "{label} must contain {counts} digits",
                {"label": label, "counts": counts},
            )
        return value

    return AfterValidator(check)


def _inn_checksum(value: str) -> str:
    if not is_valid_inn_checksum(value):
        raise PydanticCustomError(
            RequisiteErrorCode.checksum_mismatch.value,
            "invalid INN checksum",
        )
    return value


InnValue = Annotated[StrictStr, _digits(RequisiteType.inn, 10, 12), AfterValidator(_inn_checksum)]
KppValue = Annotated[StrictStr, _digits(RequisiteType.kpp, 9)]
BikValue = Annotated[StrictStr, _digits(RequisiteType.bik, 9)]
# Account control key (which depends on the BIK) is not checked; pattern only.
AccountValue = Annotated[StrictStr, _digits(RequisiteType.account, 20)]
KbkValue = Annotated[StrictStr, _digits(RequisiteType.kbk, 20)]
OktmoValue = Annotated[StrictStr, _digits(RequisiteType.oktmo, 8, 11)]

_ADAPTERS: dict[RequisiteType, TypeAdapter[str]] = {
    RequisiteType.inn: TypeAdapter(InnValue),
    RequisiteType.kpp: TypeAdapter(KppValue),
    RequisiteType.bik: TypeAdapter(BikValue),
    RequisiteType.account: TypeAdapter(AccountValue),
    RequisiteType.kbk: TypeAdapter(KbkValue),
    RequisiteType.oktmo: TypeAdapter(OktmoValue),
}


def _result_from_error(requisite_type: RequisiteType, exc: ValidationError) -> ValidationResult:
    first = exc.errors(include_url=False)[0]
    try:
        code = RequisiteErrorCode(first["type"])
    except ValueError:
        # Built-in pydantic errors (e.g. `string_type`) mean the value was not a string at all.
        code = RequisiteErrorCode.invalid_input
        message = f"{label_for(requisite_type)} must be a string"
    else:
        message = first["msg"]

    logger.debug("requisite invalid type=%s code=%s", requisite_type, code)
    return ValidationResult.fail(code, message)


def validate_requisite(requisite_type: RequisiteType | str, value: Any) -> ValidationResult:
    """Validate a candidate requisite value.

    Unknown type tags pass through as valid: callers must not rely on validation for types this
    module does not recognize.

    Returns:
        A fresh `ValidationResult`; this function never raises.
    """

    try:
        kind = RequisiteType(requisite_type)
    except ValueError:
        logger.debug("unknown requisite type=%r, passing through", requisite_type)
        return ValidationResult.ok()

    try:
        _ADAPTERS[kind].validate_python(value)
    except ValidationError as exc:
        return _result_from_error(kind, exc)
    return ValidationResult.ok()


def is_valid_requisite(requisite_type: RequisiteType | str, value: Any) -> bool:
    """Whether the value is valid for its type (convenience wrapper)."""

    return validate_requisite(requisite_type, value).is_valid
