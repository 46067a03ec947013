from typing import Any, Optional


class PaymentError(Exception):
    """Error returned to the storefront as ``{"success": false, "error": ...}``."""

    def __init__(self, status_code: int, error: Any, raw: Optional[Any] = None):
        super().__init__(str(error))
        self.status_code = status_code
        self.error = error
        self.raw = raw


class GatewayError(Exception):
    """The gateway could not be reached or answered with an error."""

    def __init__(self, message: str, body: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.body = body
