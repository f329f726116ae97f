from .sales_report import (
    MostSoldProduct,
    ReportRequestError,
    SalesReport,
    build_sales_report,
    report_window,
)

__all__ = [
    "MostSoldProduct",
    "ReportRequestError",
    "SalesReport",
    "build_sales_report",
    "report_window",
]
