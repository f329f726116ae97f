# transactions/services/exceptions.py

"""
CHECKOUT SERVICE ERRORS

Centralized domain errors for the checkout workflow.

Every failure carries:
- code: one CheckoutErrorCode (closed set, one kind per attempt)
- a short human message (the API's detail text)
- structured context: product_id, requested, available, line_index
"""

from __future__ import annotations

import enum


class CheckoutErrorCode(str, enum.Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    STOCK_EMPTY = "STOCK_EMPTY"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class CheckoutError(Exception):
    """Base exception for all checkout failures."""

    code: CheckoutErrorCode = CheckoutErrorCode.INVALID_REQUEST
    default_message = "checkout failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        product_id: int | None = None,
        requested: int | None = None,
        available: int | None = None,
        line_index: int | None = None,
    ):
        self.message = message or self.default_message
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.line_index = line_index
        super().__init__(self.message)

    def as_context(self) -> dict:
        """Logging / debugging view: code plus whatever context is set."""
        context = {"code": self.code.value}
        for key in ("product_id", "requested", "available", "line_index"):
            value = getattr(self, key)
            if value is not None:
                context[key] = value
        return context


class InvalidCheckoutRequest(CheckoutError):
    """Raised when the request shape or a line's values are unusable."""

    code = CheckoutErrorCode.INVALID_REQUEST
    default_message = "invalid checkout request"


class EmptyCheckoutRequest(InvalidCheckoutRequest):
    """Raised when a checkout carries no lines."""

    default_message = "checkouts is empty"


class ProductNotFound(CheckoutError):
    code = CheckoutErrorCode.PRODUCT_NOT_FOUND
    default_message = "product not found"


class InsufficientStock(CheckoutError):
    code = CheckoutErrorCode.INSUFFICIENT_STOCK
    default_message = "stock not enough"


class StockEmpty(InsufficientStock):
    """Stock is zero. A special case of InsufficientStock, reported on its own."""

    code = CheckoutErrorCode.STOCK_EMPTY
    default_message = "stock is empty"


class StorageFailure(CheckoutError):
    """Raised when the database fails mid-checkout; the unit of work was rolled back."""

    code = CheckoutErrorCode.STORAGE_FAILURE
    default_message = "storage failure"
