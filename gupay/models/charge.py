"""
Charge request, payload and response shapes.

Every payment method shares the same request fields. The wire payload adds
two things on top of the caller's request: the ``type`` discriminator naming
the payment method, and the merchant's ``service_id``.

The response is kept as the provider's parsed JSON. ``ChargeResponse`` only
describes it for type checkers; nothing is validated or reshaped.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Optional, TypedDict, Union

from gupay.models.enums import ChargeFlow, ChargeType

# Optional request fields are left out of the wire payload when unset.
OPTIONAL_FIELDS = frozenset({"return_url", "pin_no"})


@dataclass
class ChargeRequest:
    """Fields common to every charge request."""

    amount: float  # Positive amount in the currency's major unit
    currency: str  # ISO 4217, e.g. "THB"
    description: str
    reference_id: str  # Merchant-side unique id for this charge
    customer_id: str  # Merchant-side customer id (email, user id, ...)
    flow: Union[ChargeFlow, str] = ChargeFlow.REDIRECT
    return_url: Optional[str] = None


@dataclass
class TrueMoneyWalletChargeRequest(ChargeRequest):
    """Charge paid from a TrueMoney wallet."""


@dataclass
class TrueMoneyCashcardChargeRequest(ChargeRequest):
    """Charge paid with a TrueMoney cashcard."""

    pin_no: Optional[Union[str, int]] = None  # Only for integrations that collect the PIN


@dataclass
class InternetBankingChargeRequest(ChargeRequest):
    """Charge paid through a bank's internet banking redirect."""


@dataclass
class PromptpayChargeRequest(ChargeRequest):
    """Charge paid by scanning a PromptPay QR code."""


@dataclass(frozen=True)
class ChargePayload:
    """Body sent to ``POST /v1/charges``."""

    type: ChargeType
    service_id: str
    amount: float
    currency: str
    description: str
    reference_id: str
    customer_id: str
    flow: Union[ChargeFlow, str]
    return_url: Optional[str] = None
    pin_no: Optional[Union[str, int]] = None

    @classmethod
    def build(
        cls,
        charge_type: Union[ChargeType, str],
        service_id: str,
        request: ChargeRequest,
    ) -> "ChargePayload":
        """Tag a caller's request with its discriminator and the service id."""
        return cls(type=ChargeType(charge_type), service_id=service_id, **asdict(request))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON body, dropping unset optional fields."""
        body: dict[str, Any] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None and field.name in OPTIONAL_FIELDS:
                continue
            body[field.name] = value.value if isinstance(value, Enum) else value
        return body


class _ChargeResponseFields(TypedDict):
    id: str
    object: str
    merchant_id: str
    service_id: str
    status: str  # "pending", "successful", "failed"
    created_at: str  # ISO 8601
    updated_at: str  # ISO 8601
    paid: bool
    amount: float
    currency: str
    description: str
    failure_code: Optional[str]
    failure_message: Optional[str]
    livemode: bool
    merchant_reference_id: str
    merchant_customer_id: str
    redirect_url: str
    return_url: str
    paid_at: Optional[str]
    flow: str
    type: str


class ChargeResponse(_ChargeResponseFields, total=False):
    """A created charge as returned by the provider."""

    payment_transaction_id: str
    payment_reference_id: str
    mobile_number: str
    serial_no: str
    pin_no: Union[str, int]
