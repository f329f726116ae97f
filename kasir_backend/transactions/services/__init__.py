# transactions/services/__init__.py

from .checkout_orchestrator import CheckoutLineRequest, checkout
from .exceptions import (
    CheckoutError,
    CheckoutErrorCode,
    EmptyCheckoutRequest,
    InsufficientStock,
    InvalidCheckoutRequest,
    ProductNotFound,
    StockEmpty,
    StorageFailure,
)
from .transaction_store import CheckoutReceipt, ReceiptLine

__all__ = [
    "CheckoutLineRequest",
    "CheckoutReceipt",
    "ReceiptLine",
    "checkout",
    "CheckoutError",
    "CheckoutErrorCode",
    "EmptyCheckoutRequest",
    "InsufficientStock",
    "InvalidCheckoutRequest",
    "ProductNotFound",
    "StockEmpty",
    "StorageFailure",
]
