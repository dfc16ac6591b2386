"""
Mock GUPay provider for demos and tests.

Simulates the charge endpoint behind an ``httpx.MockTransport``:
  - Configurable latency (default 0ms)
  - Configurable failure rate (default 0%)
  - Structured 401 when the Basic authorization header is missing
  - Realistic charge ids and redirect URLs

Plug it into a client with::

    provider = MockGUPayProvider()
    client = GUPayClient(config, transport=provider.transport())
"""

import asyncio
import json
import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from gupay.client import CHARGES_PATH
from gupay.models.enums import ChargeStatus

logger = logging.getLogger("gupay.mock")


def _error(status_code: int, code: str, message: str, type: str = "api_error") -> httpx.Response:
    return httpx.Response(
        status_code,
        json={"error": {"code": code, "message": message, "type": type}},
    )


class MockGUPayProvider:
    """
    Fake GUPay API that accepts charges and echoes them back as pending.

    Every accepted payload is appended to ``charges`` so tests can inspect
    exactly what went over the wire.
    """

    def __init__(
        self,
        failure_rate: float = 0.0,
        latency_ms: int = 0,
        merchant_id: str = "mrch_mock",
        rng: Optional[random.Random] = None,
    ):
        self._failure_rate = failure_rate
        self._latency_ms = latency_ms
        self._merchant_id = merchant_id
        self._rng = rng or random.Random()
        self.charges: list[dict[str, Any]] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        # Simulate network latency
        if self._latency_ms > 0:
            jitter = self._rng.uniform(0.5, 1.5)
            await asyncio.sleep(self._latency_ms * jitter / 1000)

        if request.method != "POST" or request.url.path != CHARGES_PATH:
            return _error(404, "not_found", f"No route for {request.method} {request.url.path}",
                          type="invalid_request_error")

        if not request.headers.get("Authorization", "").startswith("Basic "):
            return _error(401, "authentication_failure", "Missing API key",
                          type="authentication_error")

        # Simulate random failures
        roll = self._rng.random()

        if roll < self._failure_rate * 0.5:
            return _error(402, "insufficient_fund", "Insufficient funds in the account")

        if roll < self._failure_rate:
            return httpx.Response(503, text="Service Unavailable")

        try:
            payload = json.loads(request.content)
        except ValueError:
            return _error(400, "invalid_request", "Request body is not valid JSON",
                          type="invalid_request_error")

        self.charges.append(payload)
        charge = self._charge_from(payload)
        logger.debug("Mock charge %s created for ref=%s", charge["id"], payload.get("reference_id"))
        return httpx.Response(200, json=charge)

    def _charge_from(self, payload: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        charge_id = f"chrg_{uuid.uuid4().hex[:24]}"
        charge = {
            "id": charge_id,
            "object": "charge",
            "merchant_id": self._merchant_id,
            "service_id": payload.get("service_id"),
            "status": ChargeStatus.PENDING.value,
            "created_at": now,
            "updated_at": now,
            "paid": False,
            "amount": payload.get("amount"),
            "currency": payload.get("currency"),
            "description": payload.get("description"),
            "failure_code": None,
            "failure_message": None,
            "livemode": False,
            "merchant_reference_id": payload.get("reference_id"),
            "merchant_customer_id": payload.get("customer_id"),
            "redirect_url": f"https://pay.gupay.co/redirect/{charge_id}",
            "return_url": payload.get("return_url", ""),
            "paid_at": None,
            "flow": payload.get("flow"),
            "type": payload.get("type"),
        }
        if "pin_no" in payload:
            charge["pin_no"] = payload["pin_no"]
        return charge
