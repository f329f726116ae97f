# transactions/views.py

"""
TRANSACTION ENDPOINTS

- POST /api/transactions/checkout/   run a checkout (pos.sell)
- GET  /api/transactions/<id>/       receipt of a past transaction (pos.sell)

Error mapping (envelope message "<context>: <detail>"):
- 400 invalid / empty request        "invalid checkout request: ..."
- 404 unknown product                "Checkout created failed: product not found"
- 409 stock empty / not enough       "Checkout created failed: stock is empty" / "stock not enough"
- 500 storage failure                "Checkout created failed: storage failure"
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from backend.responses import error_response, flatten_errors, success_response
from permissions.api_key import HasValidAPIKey
from permissions.roles import CAP_POS_SELL, HasCapability
from transactions.models import Transaction
from transactions.serializers import CheckoutReceiptSerializer, CheckoutRequestSerializer
from transactions.services.checkout_orchestrator import checkout
from transactions.services.exceptions import CheckoutError, CheckoutErrorCode
from transactions.services.transaction_store import load_receipt

INVALID_CHECKOUT_REQUEST = "invalid checkout request"
CHECKOUT_FAILED = "Checkout created failed"

STATUS_BY_CODE = {
    CheckoutErrorCode.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    CheckoutErrorCode.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CheckoutErrorCode.INSUFFICIENT_STOCK: status.HTTP_409_CONFLICT,
    CheckoutErrorCode.STOCK_EMPTY: status.HTTP_409_CONFLICT,
    CheckoutErrorCode.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def checkout_error_response(exc: CheckoutError):
    context = INVALID_CHECKOUT_REQUEST if exc.code == CheckoutErrorCode.INVALID_REQUEST else CHECKOUT_FAILED
    return error_response(
        message=context,
        detail=exc.message,
        http_status=STATUS_BY_CODE[exc.code],
    )


class CheckoutView(APIView):
    permission_classes = [HasValidAPIKey, IsAuthenticated, HasCapability]
    required_capability = CAP_POS_SELL
    parser_classes = [JSONParser]

    @extend_schema(
        request=CheckoutRequestSerializer,
        responses={
            201: CheckoutReceiptSerializer,
            400: OpenApiResponse(description="Invalid or empty checkout request"),
            404: OpenApiResponse(description="Unknown product"),
            409: OpenApiResponse(description="Stock empty or not enough"),
            500: OpenApiResponse(description="Storage failure, nothing was written"),
        },
        description="Checkout a list of product lines as one all-or-nothing transaction.",
        tags=["Transactions"],
    )
    def post(self, request):
        s = CheckoutRequestSerializer(data=request.data)
        if not s.is_valid():
            return error_response(
                message=INVALID_CHECKOUT_REQUEST,
                detail=flatten_errors(s.errors),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            receipt = checkout(lines=s.validated_data["checkout"])
        except CheckoutError as exc:
            return checkout_error_response(exc)

        return success_response(
            message="Checkout created successfully",
            data=CheckoutReceiptSerializer(receipt).data,
            http_status=status.HTTP_201_CREATED,
        )


class TransactionDetailView(APIView):
    permission_classes = [HasValidAPIKey, IsAuthenticated, HasCapability]
    required_capability = CAP_POS_SELL

    @extend_schema(
        responses={200: CheckoutReceiptSerializer, 404: OpenApiResponse(description="Unknown transaction")},
        description="Receipt of a past transaction.",
        tags=["Transactions"],
    )
    def get(self, request, pk: int):
        try:
            receipt = load_receipt(pk)
        except Transaction.DoesNotExist:
            return error_response(
                message="transactions not found",
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return success_response(
            message="Transaction retrieved successfully",
            data=CheckoutReceiptSerializer(receipt).data,
        )
