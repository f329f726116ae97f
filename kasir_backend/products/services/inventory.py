# products/services/inventory.py

"""
======================================================
PATH: products/services/inventory.py
======================================================
INVENTORY STORE

Purpose:
- Resolve a checkout line to a product snapshot (joined with its category).
- Decrement stock for a sold line.

Rules:
- Quantities are whole units.
- Stock only moves down through decrement_stock(), a conditional UPDATE:
    stock = stock - qty  WHERE id = ? AND stock >= qty
  Zero rows touched means someone else took the stock first.
- Callers own the transaction; lock=True only holds inside an atomic block.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.db.models import F
from django.utils import timezone

from products.models import Product


# ============================================================
# DOMAIN ERRORS
# ============================================================

class ProductNotFoundError(Exception):
    def __init__(self, product_id):
        super().__init__(f"product {product_id} not found")
        self.product_id = product_id


class InsufficientStockError(Exception):
    def __init__(self, product_id, *, requested: int, available: int | None):
        super().__init__(
            f"Insufficient stock for product {product_id}. "
            f"Requested: {requested}, Available: {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


# ============================================================
# SNAPSHOT
# ============================================================

@dataclass(frozen=True)
class CheckoutLineDetail:
    """
    One checkout line resolved against the catalog at read time.
    """

    product_id: int
    name: str
    price: int
    stock: int
    category_id: int
    category_name: str
    quantity: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


# ============================================================
# READS
# ============================================================

def get_line_detail(product_id: int, *, quantity: int, lock: bool = False) -> CheckoutLineDetail:
    qs = Product.objects.select_related("category")
    if lock:
        # Lock the product row only; categories stay readable.
        qs = qs.select_for_update(of=("self",))

    product = qs.filter(id=product_id).first()
    if product is None:
        raise ProductNotFoundError(product_id)

    return CheckoutLineDetail(
        product_id=product.id,
        name=product.name,
        price=int(product.price),
        stock=int(product.stock),
        category_id=product.category_id,
        category_name=product.category.name,
        quantity=quantity,
    )


# ============================================================
# WRITES
# ============================================================

def decrement_stock(product_id: int, quantity: int) -> None:
    if quantity <= 0:
        raise ValueError("quantity must be a positive whole unit")

    updated = Product.objects.filter(id=product_id, stock__gte=quantity).update(
        stock=F("stock") - quantity,
        updated_at=timezone.now(),
    )
    if updated:
        return

    available = Product.objects.filter(id=product_id).values_list("stock", flat=True).first()
    if available is None:
        raise ProductNotFoundError(product_id)

    raise InsufficientStockError(product_id, requested=quantity, available=available)
