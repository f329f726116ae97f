# reports/views.py

"""
SALES REPORT ENDPOINTS (reports.view: managers)

- GET /api/reports/?start_date=&end_date=   inclusive dates, default today
- GET /api/reports/today/
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from backend.responses import error_response, flatten_errors, success_response
from permissions.api_key import HasValidAPIKey
from permissions.roles import CAP_REPORTS_VIEW, HasCapability
from reports.serializers import ReportQuerySerializer, SalesReportSerializer
from reports.services.sales_report import ReportRequestError, build_sales_report, report_window

logger = logging.getLogger(__name__)

INVALID_REPORT_REQUEST = "invalid report request"


class BaseReportView(APIView):
    permission_classes = [HasValidAPIKey, IsAuthenticated, HasCapability]
    required_capability = CAP_REPORTS_VIEW

    def render_report(self, start, end):
        logger.info(
            "Sales report requested",
            extra={"window_start": start.isoformat(), "window_end": end.isoformat()},
        )
        report = build_sales_report(start=start, end=end)
        return success_response(
            message="Report received successfully",
            data=SalesReportSerializer(report).data,
        )


class SalesReportView(BaseReportView):
    @extend_schema(
        parameters=[
            OpenApiParameter(name="start_date", type=str, required=False, description="YYYY-MM-DD (inclusive)"),
            OpenApiParameter(name="end_date", type=str, required=False, description="YYYY-MM-DD (inclusive)"),
        ],
        responses={200: SalesReportSerializer, 400: OpenApiResponse(description="Invalid date range")},
        description="Revenue, transaction count and most sold products over a date range.",
        tags=["Reports"],
    )
    def get(self, request):
        s = ReportQuerySerializer(data=request.query_params)
        if not s.is_valid():
            return error_response(
                message=INVALID_REPORT_REQUEST,
                detail=flatten_errors(s.errors),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            start, end = report_window(
                s.validated_data.get("start_date"),
                s.validated_data.get("end_date"),
            )
        except ReportRequestError as exc:
            return error_response(
                message=INVALID_REPORT_REQUEST,
                detail=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return self.render_report(start, end)


class TodayReportView(BaseReportView):
    @extend_schema(
        responses={200: SalesReportSerializer},
        description="Sales report for the current day in the configured time zone.",
        tags=["Reports"],
    )
    def get(self, request):
        start, end = report_window()
        return self.render_report(start, end)
