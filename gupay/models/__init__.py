from gupay.models.charge import (
    ChargePayload,
    ChargeRequest,
    ChargeResponse,
    InternetBankingChargeRequest,
    PromptpayChargeRequest,
    TrueMoneyCashcardChargeRequest,
    TrueMoneyWalletChargeRequest,
)
from gupay.models.enums import ChargeFlow, ChargeStatus, ChargeType, InternetBankingType

__all__ = [
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
