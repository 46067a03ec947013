from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from marketmind.config import Settings, get_settings
from marketmind.schemas.payment_schemas import DebugStatus

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def root():
    return "MarketMind Hub backend (Cashfree) is running"


@router.get("/debug", response_model=DebugStatus)
def debug(settings: Settings = Depends(get_settings)):
    # Presence flags only, never the values
    explicit = settings.model_fields_set
    return DebugStatus(
        cashfree_app_id_set=bool(settings.cashfree_app_id),
        cashfree_secret_key_set=bool(settings.cashfree_secret_key),
        cashfree_api_base_set="cashfree_api_base" in explicit,
        frontend_url_set="frontend_url" in explicit,
        backend_url_set=bool(settings.backend_url),
    )
