# products/models/product.py

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from .category import Category


class Product(models.Model):
    """
    Represents a sellable product.

    STOCK MODEL (IMPORTANT):
    - stock is a plain counter on the row, in whole units
    - checkout decrements it with a conditional UPDATE (see services/inventory.py)
    - it can never go negative: unsigned column + CHECK constraint + conditional decrement

    PRICING:
    - price is an integer amount in the smallest currency unit (no decimals)
    - the price at sale time is frozen into TransactionDetail.subtotal
    """

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
    )

    name = models.CharField(max_length=255, db_index=True)
    price = models.PositiveBigIntegerField()
    stock = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(condition=Q(stock__gte=0), name="product_stock_non_negative"),
            models.CheckConstraint(condition=Q(price__gte=0), name="product_price_non_negative"),
        ]

    def __str__(self):
        return f"{self.name} (stock {self.stock})"

    def clean(self):
        if self.price is None or self.price < 0:
            raise ValidationError("price cannot be negative")
        if self.stock is None or self.stock < 0:
            raise ValidationError("stock cannot be negative")
