"""Enumerations for the GUPay charge API."""

from enum import Enum


class ChargeType(str, Enum):
    """Wire discriminators accepted in the ``type`` field of a charge."""

    TRUEMONEY_WALLET = "truemoneywallet"
    TRUEMONEY_CASHCARD = "truemoneycashcard"
    SCB = "scb"
    KTB = "ktb"
    KBANK = "kbank"
    BBL = "bbl"
    PROMPTPAY = "promptpay"


class InternetBankingType(str, Enum):
    """Bank codes supported for internet banking charges."""

    SCB = "scb"
    KTB = "ktb"
    KBANK = "kbank"
    BBL = "bbl"

    @property
    def charge_type(self) -> ChargeType:
        return ChargeType(self.value)


class ChargeFlow(str, Enum):
    """How the end user completes the payment."""

    REDIRECT = "redirect"


class ChargeStatus(str, Enum):
    """Lifecycle states reported by the provider for a charge."""

    PENDING = "pending"
    SUCCESSFUL = "successful"
    FAILED = "failed"
