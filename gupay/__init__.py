"""
GUPay client: create TrueMoney, internet banking and PromptPay charges.

    from gupay import GUPayClient, GUPayConfig, PromptpayChargeRequest

    async with GUPayClient(GUPayConfig(api_key="sk_...", service_id="svc_...")) as client:
        charge = await client.create_promptpay_charge(
            PromptpayChargeRequest(
                amount=100.0,
                currency="THB",
                description="Top-up",
                reference_id="order-1001",
                customer_id="user@example.com",
            )
        )
"""

import logging

from gupay.client import GUPayClient
from gupay.config import DEFAULT_BASE_URL, GUPayConfig
from gupay.errors import GUPayAPIError, GUPayError, GUPayUnexpectedError
from gupay.models import (
    ChargeFlow,
    ChargePayload,
    ChargeRequest,
    ChargeResponse,
    ChargeStatus,
    ChargeType,
    InternetBankingChargeRequest,
    InternetBankingType,
    PromptpayChargeRequest,
    TrueMoneyCashcardChargeRequest,
    TrueMoneyWalletChargeRequest,
)

logging.getLogger("gupay").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "GUPayClient",
    "GUPayConfig",
    "DEFAULT_BASE_URL",
    "GUPayError",
    "GUPayAPIError",
    "GUPayUnexpectedError",
    "ChargeRequest",
    "TrueMoneyWalletChargeRequest",
    "TrueMoneyCashcardChargeRequest",
    "InternetBankingChargeRequest",
    "PromptpayChargeRequest",
    "ChargePayload",
    "ChargeResponse",
    "ChargeType",
    "InternetBankingType",
    "ChargeFlow",
    "ChargeStatus",
]
