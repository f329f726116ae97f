# reports/services/sales_report.py

"""
SALES REPORT SERVICE

Read-only aggregation over completed transactions.

Window:
- Half-open [start, end) on Transaction.created_at.
- report_window() turns inclusive calendar dates (in settings.TIME_ZONE)
  into that window: [start_date 00:00, (end_date + 1 day) 00:00).

Figures:
- total_revenue: SUM(total_amount), 0 when nothing was sold
- total_transactions: COUNT of transactions
- most_sold_product: every product tied at the highest summed quantity
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from django.db.models import Count, Sum
from django.utils import timezone

from transactions.models import Transaction, TransactionDetail


# ============================================================
# DOMAIN ERRORS
# ============================================================

class ReportRequestError(Exception):
    pass


# ============================================================
# RESULT TYPES
# ============================================================

@dataclass(frozen=True)
class MostSoldProduct:
    id: int
    name: str
    quantity_sold: int


@dataclass(frozen=True)
class SalesReport:
    start: datetime
    end: datetime
    total_revenue: int = 0
    total_transactions: int = 0
    most_sold_product: list[MostSoldProduct] = field(default_factory=list)


# ============================================================
# WINDOW
# ============================================================

def _start_of_day(day: date) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min), timezone.get_current_timezone())


def report_window(start_date: date | None = None, end_date: date | None = None) -> tuple[datetime, datetime]:
    if start_date is None and end_date is None:
        today = timezone.localdate()
        return _start_of_day(today), _start_of_day(today + timedelta(days=1))

    if start_date is None or end_date is None:
        raise ReportRequestError("start date and end date are required")

    if start_date > end_date:
        raise ReportRequestError("start date cannot be greater than end date")

    return _start_of_day(start_date), _start_of_day(end_date + timedelta(days=1))


# ============================================================
# AGGREGATION
# ============================================================

def _most_sold(start: datetime, end: datetime) -> list[MostSoldProduct]:
    rows = (
        TransactionDetail.objects.filter(
            transaction__created_at__gte=start,
            transaction__created_at__lt=end,
        )
        .values("product_id", "product__name")
        .annotate(quantity_sold=Sum("quantity"))
        .order_by("-quantity_sold", "product_id")
    )

    rows = list(rows)
    if not rows:
        return []

    top = max(int(r["quantity_sold"] or 0) for r in rows)
    return [
        MostSoldProduct(
            id=r["product_id"],
            name=r["product__name"],
            quantity_sold=int(r["quantity_sold"]),
        )
        for r in rows
        if int(r["quantity_sold"] or 0) == top
    ]


def build_sales_report(*, start: datetime, end: datetime) -> SalesReport:
    totals = Transaction.objects.filter(created_at__gte=start, created_at__lt=end).aggregate(
        total_revenue=Sum("total_amount"),
        total_transactions=Count("id"),
    )

    return SalesReport(
        start=start,
        end=end,
        total_revenue=int(totals.get("total_revenue") or 0),
        total_transactions=int(totals.get("total_transactions") or 0),
        most_sold_product=_most_sold(start, end),
    )
