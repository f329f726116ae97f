# transactions/models/transaction.py

"""
TRANSACTION (IMMUTABLE HEADER)

One row per successful checkout.

Notes:
- Rows are append-only: created inside the checkout unit of work, never
  edited or deleted afterwards (save() on an existing row and delete() raise).
- total_amount is the sum of its details' subtotals, computed server-side.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone


class Transaction(models.Model):
    total_amount = models.PositiveBigIntegerField()

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("Transaction records are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("Transaction records cannot be deleted")

    def __str__(self):
        return f"Transaction #{self.pk} ({self.total_amount})"
