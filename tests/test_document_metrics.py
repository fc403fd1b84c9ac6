"""Tests for parsing analysis payloads into `DocumentMetrics`."""

from __future__ import annotations

import json

import pytest

from src.documents.metrics import MetricsError, metrics_from_content, metrics_from_obj
from src.requisites.schema import RequisiteType

_PAYLOAD = {
    "documentType": "счёт",
    "counterparties": ["ООО Ромашка", "АО Лютик"],
    "amountWithVAT": 120000,
    "amountWithoutVAT": 100000,
    "vatAmount": 20000,
    "currency": "₽",
    "contractNumber": "17/2024",
    "date": "01.02.2024",
    "organizationName": "Ромашка",
    "legalForm": "ООО",
    "bankName": "ПАО Сбербанк",
    "accountNumber": "40702810000000000001",
    "bik": "044525225",
    "kbk": None,
    "inn": "7707083893",
    "oktmo": "null",
    "kpp": "770701001",
}


def test_parses_fenced_model_output() -> None:
    content = "```json\n" + json.dumps(_PAYLOAD, ensure_ascii=False) + "\n```"

    metrics = metrics_from_content(content)

    assert metrics.document_type == "счёт"
    assert metrics.amount_with_vat == 120000.0
    assert metrics.amount_without_vat == 100000.0
    assert metrics.counterparties == ["ООО Ромашка", "АО Лютик"]
    assert metrics.account_number == "40702810000000000001"
    assert metrics.oktmo is None
    assert metrics.full_names == []


def test_parses_plain_fenced_and_unfenced_output() -> None:
    body = json.dumps({"inn": "7707083893"})
    assert metrics_from_content(body).inn == "7707083893"
    assert metrics_from_content(f"```\n{body}\n```").inn == "7707083893"


def test_accepts_response_envelope() -> None:
    metrics = metrics_from_obj({"metrics": {"kpp": "770701001"}})
    assert metrics.kpp == "770701001"


def test_error_envelope_is_reported() -> None:
    with pytest.raises(MetricsError, match="Rate limit exceeded"):
        metrics_from_obj({"error": "Rate limit exceeded. Please try again later."})


def test_numeric_requisites_become_strings() -> None:
    metrics = metrics_from_obj({"inn": 7707083893, "bik": 44525225})
    assert metrics.inn == "7707083893"
    # Leading zeros are already lost in the payload; the validator will reject this value.
    assert metrics.bik == "44525225"


def test_requisite_strings_are_kept_verbatim() -> None:
    metrics = metrics_from_obj({"inn": " 7707083893 "})
    assert metrics.inn == " 7707083893 "


def test_text_amounts_are_parsed_leniently() -> None:
    metrics = metrics_from_obj(
        {"amountWithVAT": "1 200,50", "amountWithoutVAT": "около тысячи", "vatAmount": "null"}
    )
    assert metrics.amount_with_vat == 1200.5
    assert metrics.amount_without_vat is None
    assert metrics.vat_amount is None


def test_null_lists_become_empty() -> None:
    metrics = metrics_from_obj({"counterparties": None, "dates": None})
    assert metrics.counterparties == []
    assert metrics.dates == []


def test_unknown_keys_are_ignored() -> None:
    metrics = metrics_from_obj({"inn": "7707083893", "confidence": 0.9})
    assert metrics.inn == "7707083893"


def test_requisites_are_keyed_by_type() -> None:
    metrics = metrics_from_obj(_PAYLOAD)
    assert metrics.requisites() == {
        RequisiteType.account: "40702810000000000001",
        RequisiteType.bik: "044525225",
        RequisiteType.inn: "7707083893",
        RequisiteType.kpp: "770701001",
    }


@pytest.mark.parametrize("content", ["", "not json", "```json\n{\"inn\": \n```"])
def test_invalid_json_raises(content: str) -> None:
    with pytest.raises(MetricsError):
        metrics_from_content(content)


@pytest.mark.parametrize("obj", [[], "text", 5, {"metrics": ["inn"]}])
def test_non_object_payload_raises(obj: object) -> None:
    with pytest.raises(MetricsError):
        metrics_from_obj(obj)


def test_object_valued_lists_do_not_block_requisites() -> None:
    metrics = metrics_from_obj(
        {
            "inn": "7707083893",
            "amounts": [{"value": 1200, "currency": "RUB"}, "500 ₽", 300],
            "counterparties": [{"name": "ООО Ромашка", "inn": "7707083893"}, None],
            "dates": "01.02.2024",
        }
    )

    assert metrics.amounts == ["1200 RUB", "500 ₽", "300"]
    assert metrics.counterparties == ["ООО Ромашка 7707083893"]
    assert metrics.dates == ["01.02.2024"]
    assert metrics.requisites() == {RequisiteType.inn: "7707083893"}


def test_wrongly_typed_amount_raises() -> None:
    with pytest.raises(MetricsError):
        metrics_from_obj({"amountWithVAT": [1200]})
