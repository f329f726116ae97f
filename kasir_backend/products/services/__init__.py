from .inventory import (
    CheckoutLineDetail,
    InsufficientStockError,
    ProductNotFoundError,
    decrement_stock,
    get_line_detail,
)

__all__ = [
    "CheckoutLineDetail",
    "InsufficientStockError",
    "ProductNotFoundError",
    "decrement_stock",
    "get_line_detail",
]
