"""
Async client for the GUPay charge API.

Every payment method is a variation of one call: tag the caller's request
with the method's discriminator and the configured service id, then
``POST /v1/charges``. The flow for each charge:

  1. Build the payload (discriminator + service id + request fields)
  2. Submit it once, with no retries
  3. Return the parsed JSON as-is, or translate the failure

Failure translation:
  - Non-2xx whose "error" object has code, message and type -> GUPayAPIError
  - Anything else (transport error, non-JSON body, other shapes) -> GUPayUnexpectedError

The client holds no mutable state after construction, so one instance can
serve concurrent calls.
"""

import logging
from typing import Any, Optional, Union

import httpx

from gupay.config import DEFAULT_BASE_URL, GUPayConfig
from gupay.errors import GUPayAPIError, GUPayUnexpectedError
from gupay.models.charge import (
    ChargePayload,
    ChargeResponse,
    InternetBankingChargeRequest,
    PromptpayChargeRequest,
    TrueMoneyCashcardChargeRequest,
    TrueMoneyWalletChargeRequest,
)
from gupay.models.enums import ChargeType, InternetBankingType

logger = logging.getLogger("gupay.client")

CHARGES_PATH = "/v1/charges"

# A provider error body must carry all of these under "error".
ERROR_FIELDS = frozenset({"code", "message", "type"})


class GUPayClient:
    """Creates charges for each payment method GUPay supports."""

    def __init__(
        self,
        config: GUPayConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config
        self._http = httpx.AsyncClient(
            base_url=config.base_url or DEFAULT_BASE_URL,
            headers={
                # GUPay uses Basic auth with the API key as the credential.
                "Authorization": f"Basic {config.api_key.get_secret_value()}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    @classmethod
    def from_env(cls, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GUPayClient":
        """Build a client from ``GUPAY_API_KEY``, ``GUPAY_SERVICE_ID`` and ``GUPAY_BASE_URL``."""
        return cls(GUPayConfig(), transport=transport)

    @property
    def service_id(self) -> str:
        return self._config.service_id

    @property
    def base_url(self) -> str:
        return str(self._http.base_url).rstrip("/")

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "GUPayClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def create_truemoney_wallet_charge(
        self, request: TrueMoneyWalletChargeRequest
    ) -> ChargeResponse:
        """Create a charge paid from a TrueMoney wallet."""
        payload = ChargePayload.build(ChargeType.TRUEMONEY_WALLET, self.service_id, request)
        return await self._create_charge(payload)

    async def create_truemoney_cashcard_charge(
        self, request: TrueMoneyCashcardChargeRequest
    ) -> ChargeResponse:
        """Create a charge paid with a TrueMoney cashcard."""
        payload = ChargePayload.build(ChargeType.TRUEMONEY_CASHCARD, self.service_id, request)
        return await self._create_charge(payload)

    async def create_internet_banking_charge(
        self,
        bank_type: Union[InternetBankingType, str],
        request: InternetBankingChargeRequest,
    ) -> ChargeResponse:
        """
        Create a charge paid through internet banking.

        Args:
            bank_type: Bank code ("scb", "ktb", "kbank" or "bbl"). Sent
                verbatim as the charge's ``type``.
            request: The charge details.

        Raises:
            ValueError: If ``bank_type`` is not a supported bank code.
        """
        bank = InternetBankingType(bank_type)
        payload = ChargePayload.build(bank.charge_type, self.service_id, request)
        return await self._create_charge(payload)

    async def create_promptpay_charge(self, request: PromptpayChargeRequest) -> ChargeResponse:
        """Create a charge paid by PromptPay QR code."""
        payload = ChargePayload.build(ChargeType.PROMPTPAY, self.service_id, request)
        return await self._create_charge(payload)

    async def _create_charge(self, payload: ChargePayload) -> ChargeResponse:
        logger.debug(
            "Submitting %s charge ref=%s",
            payload.type.value,
            payload.reference_id,
        )
        try:
            response = await self._http.post(CHARGES_PATH, json=payload.to_dict())
        except httpx.HTTPError as e:
            logger.warning("Charge request ref=%s failed: %s", payload.reference_id, e)
            raise GUPayUnexpectedError() from e

        if not response.is_success:
            raise _translate_error(response)

        try:
            charge = response.json()
        except ValueError as e:
            logger.warning(
                "Charge ref=%s returned an unreadable body (HTTP %d)",
                payload.reference_id,
                response.status_code,
            )
            raise GUPayUnexpectedError(status_code=response.status_code) from e

        if isinstance(charge, dict):
            logger.info(
                "Charge created: id=%s status=%s ref=%s",
                charge.get("id"),
                charge.get("status"),
                payload.reference_id,
            )
        return charge


def _translate_error(response: httpx.Response) -> Union[GUPayAPIError, GUPayUnexpectedError]:
    """Map a non-2xx response onto the client's error types."""
    try:
        body = response.json()
    except ValueError:
        body = None

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and ERROR_FIELDS <= error.keys():
        logger.warning(
            "GUPay rejected charge (HTTP %d): code=%s type=%s",
            response.status_code,
            error["code"],
            error["type"],
        )
        return GUPayAPIError(
            code=error["code"],
            message=error["message"],
            type=error["type"],
            status_code=response.status_code,
        )

    logger.warning("GUPay returned HTTP %d without an error body", response.status_code)
    return GUPayUnexpectedError(status_code=response.status_code)
