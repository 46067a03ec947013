import json
import logging
import math
import time
from decimal import Decimal, InvalidOperation
from typing import Any, Dict
from urllib.parse import urlencode

from marketmind.config import Settings
from marketmind.constants.order_status import PAYMENT_LINK_FIELDS
from marketmind.exceptions import GatewayError, PaymentError
from marketmind.schemas.payment_schemas import CreatePaymentRequest
from marketmind.services.cashfree_client import CashfreeClient
from marketmind.utils.response_fields import resolve_field

logger = logging.getLogger(__name__)

ORDER_CURRENCY = "INR"
# Cashfree substitutes its own order id for this token on return
ORDER_ID_TOKEN = "{order_id}"


def parse_amount(amount: Any) -> float:
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise PaymentError(400, "Missing amount")

    if isinstance(amount, bool):
        raise PaymentError(400, "Invalid amount")

    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise PaymentError(400, "Invalid amount")

    if not value.is_finite() or value <= 0:
        raise PaymentError(400, "Amount must be a positive number")

    # order_amount is sent as a float and must stay positive and finite
    as_float = float(value)
    if not (math.isfinite(as_float) and as_float > 0):
        raise PaymentError(400, "Amount must be a positive number")

    return as_float


def build_return_url(backend_base: str, product_id: str | None) -> str:
    query = urlencode({"product_id": product_id or ""})
    return f"{backend_base.rstrip('/')}/verify-cashfree?{query}&order_id={ORDER_ID_TOKEN}"


def build_order_payload(
    payload: CreatePaymentRequest,
    amount: float,
    *,
    order_note: str,
    return_url: str,
) -> Dict[str, Any]:
    customer = {
        "customer_id": f"{payload.phone or 'CUST'}_{time.time_ns()}",
        "customer_email": payload.email or "",
        "customer_phone": payload.phone or "",
    }
    if payload.name:
        customer["customer_name"] = payload.name

    order = {
        "order_amount": amount,
        "order_currency": ORDER_CURRENCY,
        "order_note": payload.purpose or order_note,
        "customer_details": customer,
        "order_meta": {"return_url": return_url},
    }
    if payload.product_id:
        order["order_tags"] = {"product_id": payload.product_id}

    return order


def create_payment_link(
    payload: CreatePaymentRequest,
    settings: Settings,
    backend_base: str,
) -> str:
    """
    Create a Cashfree order and return its hosted payment link.

    Raises PaymentError for bad input, missing credentials, gateway
    failures, and gateway responses that carry no link.
    """
    amount = parse_amount(payload.amount)

    if not settings.credentials_configured:
        raise PaymentError(500, "Server misconfigured (missing Cashfree keys)")

    order = build_order_payload(
        payload,
        amount,
        order_note=settings.order_note,
        return_url=build_return_url(settings.backend_url or backend_base, payload.product_id),
    )

    try:
        data = CashfreeClient(settings).create_order(order)
    except GatewayError as e:
        raise PaymentError(500, e.body or e.message or "Unknown error")

    logger.info(f"Cashfree create order response: {json.dumps(data, default=str)[:1000]}")

    payment_link = resolve_field(data, PAYMENT_LINK_FIELDS)
    if not payment_link:
        raise PaymentError(500, "No payment link returned", raw=data)

    return payment_link
