import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from marketmind.config import Settings, get_settings
from marketmind.constants.order_status import (
    ORDER_ID_PARAMS,
    PRODUCT_ID_PARAMS,
    VerificationOutcome,
)
from marketmind.schemas.payment_schemas import CreatePaymentRequest, CreatePaymentResponse
from marketmind.services.order_service import create_payment_link
from marketmind.services.verification_service import confirmation_url, verify_order
from marketmind.utils.response_fields import first_param

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create-cashfree-payment", response_model=CreatePaymentResponse)
def create_cashfree_payment(
    payload: CreatePaymentRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    payment_link = create_payment_link(payload, settings, str(request.base_url))
    return CreatePaymentResponse(payment_link=payment_link)


@router.get("/verify-cashfree")
@router.get("/verify")
def verify_cashfree(request: Request, settings: Settings = Depends(get_settings)):
    order_id = first_param(request.query_params, ORDER_ID_PARAMS)
    product_id = first_param(request.query_params, PRODUCT_ID_PARAMS)

    try:
        outcome = verify_order(order_id, settings)
    except Exception:
        logger.exception(f"Unexpected error verifying order {order_id}")
        outcome = VerificationOutcome.FAILED

    return RedirectResponse(
        confirmation_url(settings, outcome, product_id, order_id),
        status_code=302,
    )
