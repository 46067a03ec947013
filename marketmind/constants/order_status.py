from enum import Enum


class VerificationOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


# Gateway order statuses that count as a settled payment
SUCCESS_STATUSES = {"PAID", "COMPLETED"}

# Where the gateway may put the fields we care about, in priority order
PAYMENT_LINK_FIELDS = [
    ("payment_link",),
    ("redirect_url",),
    ("data", "payment_link"),
    ("data", "redirect_url"),
]

ORDER_STATUS_FIELDS = [
    ("order_status",),
    ("data", "order_status"),
    ("status",),
    ("data", "status"),
]

# Query parameter names the gateway redirect may use
ORDER_ID_PARAMS = ["order_id", "orderId", "cf_order_id", "orderid"]
PRODUCT_ID_PARAMS = ["product_id", "productId"]
