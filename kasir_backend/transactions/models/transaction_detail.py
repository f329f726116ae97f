# transactions/models/transaction_detail.py

"""
TRANSACTION DETAIL (IMMUTABLE LINE SNAPSHOT)

- One row per checkout line, in request order (ordering by id).
- subtotal = product price x quantity at the time of sale; later price
  changes never touch it.
- product is PROTECTed: a product that has been sold cannot be deleted.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone

from products.models import Product

from .transaction import Transaction


class TransactionDetail(models.Model):
    transaction = models.ForeignKey(
        Transaction,
        on_delete=models.CASCADE,
        related_name="details",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="transaction_details",
    )

    quantity = models.PositiveIntegerField()
    subtotal = models.PositiveBigIntegerField()

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=Q(quantity__gt=0), name="transaction_detail_quantity_positive"),
        ]
        indexes = [
            models.Index(fields=["product", "created_at"], name="txn_detail_product_created"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("TransactionDetail records are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("TransactionDetail records cannot be deleted")

    def __str__(self):
        return f"{self.product_id} x {self.quantity}"
