from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class CreatePaymentRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    amount: Any = None    # validated in order_service so errors keep our JSON shape
    purpose: Optional[str] = None
    product_id: Optional[str] = Field(default=None, alias="productId")

    @field_validator("name", "email", "phone", "purpose", "product_id", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    class Config:
        populate_by_name = True


class CreatePaymentResponse(BaseModel):
    success: bool = True
    payment_link: str


class DebugStatus(BaseModel):
    cashfree_app_id_set: bool
    cashfree_secret_key_set: bool
    cashfree_api_base_set: bool
    frontend_url_set: bool
    backend_url_set: bool
