from typing import Optional

from fastapi import Request
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cashfree_app_id: Optional[str] = None
    cashfree_secret_key: Optional[str] = None
    cashfree_api_base: str = "https://api.cashfree.com"
    cashfree_api_version: str = "2023-08-01"

    frontend_url: str = "https://market-mind-hub.netlify.app"
    # Public address of this service, used for the gateway return_url
    backend_url: Optional[str] = None

    order_note: str = "MarketMind Hub Order"
    gateway_timeout: float = 15
    port: int = 3000

    @property
    def credentials_configured(self) -> bool:
        return bool(self.cashfree_app_id and self.cashfree_secret_key)

    @property
    def api_base(self) -> str:
        return self.cashfree_api_base.rstrip("/")

    @property
    def frontend_base(self) -> str:
        return self.frontend_url.rstrip("/")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
