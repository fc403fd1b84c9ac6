"""INN checksum arithmetic.

Both forms of the taxpayer number use the same control digit rule: a weighted digit sum taken
modulo 11, then modulo 10. Inputs must already be digit-only strings of the right length.
"""

from __future__ import annotations

from collections.abc import Sequence

INN10_COEFFICIENTS: tuple[int, ...] = (2, 4, 10, 3, 5, 9, 4, 6, 8)
INN12_FIRST_COEFFICIENTS: tuple[int, ...] = (7, 2, 4, 10, 3, 5, 9, 4, 6, 8)
INN12_SECOND_COEFFICIENTS: tuple[int, ...] = (3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8)


def inn_check_digit(digits: str, coefficients: Sequence[int]) -> int:
    """Return the control digit for the leading `len(coefficients)` digits."""

    total = sum(int(digit) * weight for digit, weight in zip(digits, coefficients))
    return (total % 11) % 10


def is_valid_inn10(value: str) -> bool:
    """Check the control digit of a 10-digit (organization) INN."""

    return inn_check_digit(value, INN10_COEFFICIENTS) == int(value[9])


def is_valid_inn12(value: str) -> bool:
    """Check both control digits of a 12-digit (individual) INN."""

    first = inn_check_digit(value, INN12_FIRST_COEFFICIENTS)
    second = inn_check_digit(value, INN12_SECOND_COEFFICIENTS)
    return first == int(value[10]) and second == int(value[11])


def is_valid_inn_checksum(value: str) -> bool:
    """Dispatch on length; any length other than 10 or 12 is rejected."""

    if len(value) == 10:
        return is_valid_inn10(value)
    if len(value) == 12:
        return is_valid_inn12(value)
    return False
