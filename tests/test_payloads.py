"""Tests for charge payload construction."""

import pytest

from gupay.models import (
    ChargeFlow,
    ChargePayload,
    ChargeType,
    InternetBankingChargeRequest,
    InternetBankingType,
    PromptpayChargeRequest,
    TrueMoneyCashcardChargeRequest,
    TrueMoneyWalletChargeRequest,
)


class TestChargePayload:
    def test_adds_type_and_service_id(self, charge_fields):
        request = TrueMoneyWalletChargeRequest(**charge_fields)
        body = ChargePayload.build(ChargeType.TRUEMONEY_WALLET, "svc_1", request).to_dict()
        assert body == {"type": "truemoneywallet", "service_id": "svc_1", **charge_fields}

    def test_discriminator_leads_the_body(self, charge_fields):
        request = PromptpayChargeRequest(**charge_fields)
        body = ChargePayload.build(ChargeType.PROMPTPAY, "svc_1", request).to_dict()
        assert list(body)[:2] == ["type", "service_id"]

    def test_accepts_plain_string_discriminator(self, charge_fields):
        request = InternetBankingChargeRequest(**charge_fields)
        payload = ChargePayload.build("kbank", "svc_1", request)
        assert payload.type is ChargeType.KBANK

    def test_unknown_discriminator_rejected(self, charge_fields):
        request = PromptpayChargeRequest(**charge_fields)
        with pytest.raises(ValueError):
            ChargePayload.build("bitcoin", "svc_1", request)

    def test_all_discriminators(self, charge_fields):
        expected = {"truemoneywallet", "truemoneycashcard", "scb", "ktb", "kbank", "bbl", "promptpay"}
        assert {t.value for t in ChargeType} == expected
        for charge_type in ChargeType:
            request = PromptpayChargeRequest(**charge_fields)
            body = ChargePayload.build(charge_type, "svc_1", request).to_dict()
            assert body["type"] == charge_type.value
            assert body["service_id"] == "svc_1"


class TestOptionalFields:
    def test_return_url_omitted_when_unset(self, charge_fields):
        charge_fields.pop("return_url")
        request = TrueMoneyWalletChargeRequest(**charge_fields)
        body = ChargePayload.build(ChargeType.TRUEMONEY_WALLET, "svc_1", request).to_dict()
        assert "return_url" not in body
        assert set(body) == {"type", "service_id", *charge_fields}

    def test_cashcard_pin_sent_when_set(self, charge_fields):
        request = TrueMoneyCashcardChargeRequest(**charge_fields, pin_no="12345678901234")
        body = ChargePayload.build(ChargeType.TRUEMONEY_CASHCARD, "svc_1", request).to_dict()
        assert body["pin_no"] == "12345678901234"

    def test_cashcard_pin_omitted_when_unset(self, charge_fields):
        request = TrueMoneyCashcardChargeRequest(**charge_fields)
        body = ChargePayload.build(ChargeType.TRUEMONEY_CASHCARD, "svc_1", request).to_dict()
        assert "pin_no" not in body

    def test_flow_defaults_to_redirect(self):
        request = PromptpayChargeRequest(
            amount=10.0,
            currency="THB",
            description="Coffee",
            reference_id="r-1",
            customer_id="c-1",
        )
        body = ChargePayload.build(ChargeType.PROMPTPAY, "svc_1", request).to_dict()
        assert body["flow"] == "redirect"
        assert request.flow is ChargeFlow.REDIRECT


class TestPassThrough:
    def test_no_local_amount_validation(self, charge_fields):
        """Amount and currency are left for the provider to validate."""
        charge_fields.update(amount=-5, currency="bahts")
        request = PromptpayChargeRequest(**charge_fields)
        body = ChargePayload.build(ChargeType.PROMPTPAY, "svc_1", request).to_dict()
        assert body["amount"] == -5
        assert body["currency"] == "bahts"


class TestInternetBankingType:
    def test_bank_codes(self):
        assert {b.value for b in InternetBankingType} == {"scb", "ktb", "kbank", "bbl"}

    def test_bank_code_maps_to_charge_type(self):
        for bank in InternetBankingType:
            assert bank.charge_type.value == bank.value
