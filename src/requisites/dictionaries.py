"""Requisite labels and payload field mappings.

Extraction payloads use camelCase keys (`accountNumber`) while the validator works with short type
tags (`account`). These mappings should remain small and explicit.
"""

from __future__ import annotations

from src.requisites.schema import RequisiteType

REQUISITE_LABELS: dict[RequisiteType, str] = {
    RequisiteType.inn: "INN",
    RequisiteType.kpp: "KPP",
    RequisiteType.bik: "BIK",
    RequisiteType.account: "Account number",
    RequisiteType.kbk: "KBK",
    RequisiteType.oktmo: "OKTMO",
}

# Display labels used by the document view.
REQUISITE_LABELS_RU: dict[RequisiteType, str] = {
    RequisiteType.inn: "ИНН",
    RequisiteType.kpp: "КПП",
    RequisiteType.bik: "БИК",
    RequisiteType.account: "Расчетный счет",
    RequisiteType.kbk: "КБК",
    RequisiteType.oktmo: "ОКТМО",
}

METRICS_FIELD_TO_TYPE: dict[str, RequisiteType] = {
    "inn": RequisiteType.inn,
    "kpp": RequisiteType.kpp,
    "bik": RequisiteType.bik,
    "accountNumber": RequisiteType.account,
    "kbk": RequisiteType.kbk,
    "oktmo": RequisiteType.oktmo,
}


def requisite_type_from_field(name: str) -> RequisiteType | None:
    """Resolve a payload key or a plain type tag to a `RequisiteType`.

    Returns:
        The matching type, or `None` when the name is not a known requisite field.
    """

    if name in METRICS_FIELD_TO_TYPE:
        return METRICS_FIELD_TO_TYPE[name]
    try:
        return RequisiteType(name)
    except ValueError:
        return None


def label_for(requisite_type: RequisiteType, *, russian: bool = False) -> str:
    """Human-readable label for a requisite type."""

    labels = REQUISITE_LABELS_RU if russian else REQUISITE_LABELS
    return labels[requisite_type]
