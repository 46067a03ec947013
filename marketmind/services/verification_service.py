import logging
from typing import Optional
from urllib.parse import urlencode

from marketmind.config import Settings
from marketmind.constants.order_status import (
    ORDER_STATUS_FIELDS,
    SUCCESS_STATUSES,
    VerificationOutcome,
)
from marketmind.exceptions import GatewayError
from marketmind.services.cashfree_client import CashfreeClient
from marketmind.utils.response_fields import resolve_field

logger = logging.getLogger(__name__)


def outcome_for_status(status) -> VerificationOutcome:
    if status is not None and str(status).strip().upper() in SUCCESS_STATUSES:
        return VerificationOutcome.SUCCESS
    return VerificationOutcome.FAILED


def verify_order(order_id: Optional[str], settings: Settings) -> VerificationOutcome:
    """Ask Cashfree for the order's status. Every failure is FAILED."""
    if not order_id:
        logger.warning("Verification requested without an order id")
        return VerificationOutcome.FAILED

    if not settings.credentials_configured:
        logger.error(f"Cannot verify order {order_id}: missing Cashfree keys")
        return VerificationOutcome.FAILED

    try:
        data = CashfreeClient(settings).fetch_order(order_id)
    except GatewayError as e:
        logger.error(f"Order lookup failed for {order_id}: {e.body or e.message}")
        return VerificationOutcome.FAILED

    status = resolve_field(data, ORDER_STATUS_FIELDS)
    outcome = outcome_for_status(status)
    logger.info(f"Order {order_id} status {status!r} -> {outcome.value}")
    return outcome


def confirmation_url(
    settings: Settings,
    outcome: VerificationOutcome,
    product_id: Optional[str],
    order_id: Optional[str],
) -> str:
    params = {"product_id": product_id or "", "order_status": outcome.value}
    if order_id:
        params["order_id"] = order_id
    return f"{settings.frontend_base}/success.html?{urlencode(params)}"
