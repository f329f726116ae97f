# transactions/services/checkout_orchestrator.py

"""
CHECKOUT ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Turn a list of {product_id, quantity} lines into one Transaction, its
  TransactionDetails and the matching stock decrements, all-or-nothing.

Flow (one atomic block):
1. Resolve every line through the inventory store, locking product rows
   (ascending product id, so concurrent checkouts lock in the same order).
2. Validate lines in request order; first failure wins:
   unknown product -> ProductNotFound, zero stock -> StockEmpty,
   not enough stock -> InsufficientStock. Repeated lines for the same
   product are checked against their running total.
3. subtotal = price x quantity, total = sum of subtotals.
4. Insert header, insert details in request order, decrement stock
   (conditional UPDATE; losing a race surfaces as InsufficientStock).
5. Read the receipt back.

Hard rules:
- Quantities and prices are integers; bools are not integers.
- Validation failures happen before any write.
- DatabaseError is reported as StorageFailure after rollback. No retries.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass

from django.conf import settings
from django.db import DatabaseError, connection, transaction

from products.services import inventory as inventory_store
from products.services.inventory import (
    CheckoutLineDetail,
    InsufficientStockError,
    ProductNotFoundError,
)
from transactions.services import transaction_store
from transactions.services.exceptions import (
    CheckoutError,
    EmptyCheckoutRequest,
    InsufficientStock,
    InvalidCheckoutRequest,
    ProductNotFound,
    StockEmpty,
    StorageFailure,
)
from transactions.services.transaction_store import CheckoutReceipt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutLineRequest:
    product_id: int
    quantity: int


# ============================================================
# INPUT NORMALIZATION
# ============================================================

def _positive_int(value) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def normalize_lines(lines) -> list[CheckoutLineRequest]:
    if lines is None or isinstance(lines, (str, bytes, Mapping)):
        raise InvalidCheckoutRequest("checkout must be a list of lines")

    try:
        lines = list(lines)
    except TypeError as exc:
        raise InvalidCheckoutRequest("checkout must be a list of lines") from exc

    if not lines:
        raise EmptyCheckoutRequest()

    out = []
    for index, line in enumerate(lines):
        if isinstance(line, CheckoutLineRequest):
            raw_product_id, raw_quantity = line.product_id, line.quantity
        elif isinstance(line, Mapping):
            raw_product_id, raw_quantity = line.get("product_id"), line.get("quantity")
        else:
            raise InvalidCheckoutRequest("checkout line must be an object", line_index=index)

        product_id = _positive_int(raw_product_id)
        if product_id is None:
            raise InvalidCheckoutRequest("invalid product id", line_index=index)

        quantity = _positive_int(raw_quantity)
        if quantity is None:
            raise InvalidCheckoutRequest(
                "quantity must be a positive whole number",
                product_id=product_id,
                line_index=index,
            )

        out.append(CheckoutLineRequest(product_id=product_id, quantity=quantity))

    return out


# ============================================================
# STEPS
# ============================================================

def _apply_statement_timeout() -> None:
    """
    Bound the unit of work on PostgreSQL. SET LOCAL ends with the transaction.
    """
    timeout_ms = int(getattr(settings, "CHECKOUT_STATEMENT_TIMEOUT_MS", 0) or 0)
    if timeout_ms <= 0 or connection.vendor != "postgresql":
        return

    with connection.cursor() as cursor:
        cursor.execute(f"SET LOCAL statement_timeout = {timeout_ms}")


def _resolve_lines(requests: list[CheckoutLineRequest], inventory) -> list[CheckoutLineDetail]:
    resolved: list[CheckoutLineDetail | None] = [None] * len(requests)
    missing: list[int] = []

    lock_order = sorted(range(len(requests)), key=lambda i: requests[i].product_id)
    for index in lock_order:
        line = requests[index]
        try:
            resolved[index] = inventory.get_line_detail(line.product_id, quantity=line.quantity, lock=True)
        except ProductNotFoundError:
            missing.append(index)

    if missing:
        index = min(missing)
        raise ProductNotFound(
            product_id=requests[index].product_id,
            requested=requests[index].quantity,
            line_index=index,
        )

    return resolved


def _validate_lines(details: list[CheckoutLineDetail]) -> None:
    demanded = defaultdict(int)

    for index, detail in enumerate(details):
        if detail is None or detail.product_id <= 0:
            raise ProductNotFound(line_index=index)

        if detail.stock <= 0:
            raise StockEmpty(
                product_id=detail.product_id,
                requested=detail.quantity,
                available=detail.stock,
                line_index=index,
            )

        demanded[detail.product_id] += detail.quantity
        if detail.stock < demanded[detail.product_id]:
            raise InsufficientStock(
                product_id=detail.product_id,
                requested=demanded[detail.product_id],
                available=detail.stock,
                line_index=index,
            )


def _write(details: list[CheckoutLineDetail], *, total: int, inventory, ledger) -> int:
    transaction_id = ledger.insert_transaction_header(total)

    for detail in details:
        ledger.insert_transaction_detail(
            transaction_id,
            detail.product_id,
            detail.quantity,
            detail.subtotal,
        )

    for index, detail in enumerate(details):
        try:
            inventory.decrement_stock(detail.product_id, detail.quantity)
        except InsufficientStockError as exc:
            raise InsufficientStock(
                product_id=detail.product_id,
                requested=detail.quantity,
                available=exc.available,
                line_index=index,
            ) from exc
        except ProductNotFoundError as exc:
            raise ProductNotFound(product_id=detail.product_id, line_index=index) from exc

    return transaction_id


# ============================================================
# ENTRYPOINT
# ============================================================

def checkout(*, lines, inventory=inventory_store, ledger=transaction_store) -> CheckoutReceipt:
    """
    Run one checkout. Returns the receipt or raises a CheckoutError subclass.

    inventory / ledger default to the Django-backed stores; anything exposing
    the same functions can be passed instead.
    """
    requests: list[CheckoutLineRequest] = []

    try:
        requests = normalize_lines(lines)

        with transaction.atomic():
            _apply_statement_timeout()

            details = _resolve_lines(requests, inventory)
            _validate_lines(details)

            total = sum(detail.subtotal for detail in details)
            transaction_id = _write(details, total=total, inventory=inventory, ledger=ledger)

            receipt = ledger.load_receipt(transaction_id)

    except CheckoutError as exc:
        logger.warning("Checkout rejected: %s", exc.message, extra=exc.as_context())
        raise
    except DatabaseError as exc:
        logger.exception("Checkout storage failure", extra={"lines": len(requests)})
        raise StorageFailure() from exc

    logger.info(
        "Checkout completed",
        extra={
            "transaction_id": receipt.transaction_id,
            "total_amount": receipt.total_amount,
            "lines": len(receipt.lines),
        },
    )
    return receipt
