# transactions/services/transaction_store.py

"""
TRANSACTION STORE

Writes:
- insert_transaction_header(): one Transaction row per checkout
- insert_transaction_detail(): one TransactionDetail row per line

Reads:
- get_receipt_lines(): detail rows joined with product + category, in insertion order
- load_receipt(): header + lines, used by checkout and by GET /transactions/<id>/

Callers own the transaction (checkout wraps all writes in one atomic block).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from transactions.models import Transaction, TransactionDetail


@dataclass(frozen=True)
class ReceiptLine:
    transaction_detail_id: int
    transaction_id: int
    product_id: int
    product_name: str
    quantity: int
    subtotal: int
    category_id: int
    category_name: str


@dataclass(frozen=True)
class CheckoutReceipt:
    transaction_id: int
    total_amount: int
    created_at: datetime
    updated_at: datetime
    lines: tuple[ReceiptLine, ...]


def insert_transaction_header(total_amount: int) -> int:
    txn = Transaction.objects.create(total_amount=total_amount)
    return txn.id


def insert_transaction_detail(transaction_id: int, product_id: int, quantity: int, subtotal: int) -> int:
    detail = TransactionDetail.objects.create(
        transaction_id=transaction_id,
        product_id=product_id,
        quantity=quantity,
        subtotal=subtotal,
    )
    return detail.id


def get_receipt_lines(transaction_id: int) -> list[ReceiptLine]:
    rows = (
        TransactionDetail.objects.filter(transaction_id=transaction_id)
        .select_related("product__category")
        .order_by("id")
    )
    return [
        ReceiptLine(
            transaction_detail_id=row.id,
            transaction_id=row.transaction_id,
            product_id=row.product_id,
            product_name=row.product.name,
            quantity=row.quantity,
            subtotal=row.subtotal,
            category_id=row.product.category_id,
            category_name=row.product.category.name,
        )
        for row in rows
    ]


def load_receipt(transaction_id: int) -> CheckoutReceipt:
    """
    Raises Transaction.DoesNotExist for unknown ids.
    """
    txn = Transaction.objects.get(id=transaction_id)
    return CheckoutReceipt(
        transaction_id=txn.id,
        total_amount=txn.total_amount,
        created_at=txn.created_at,
        updated_at=txn.updated_at,
        lines=tuple(get_receipt_lines(txn.id)),
    )
