# transactions/serializers.py

"""
CHECKOUT WIRE FORMAT

Request:
    {"checkout": [{"product_id": 1, "quantity": 2}, ...]}

Response data (receipt):
    {"transaction": {"id", "total_amount", "created_at", "updated_at"},
     "transaction_details": [{"id", "transaction_id", "product_id", "product_name",
                              "quantity", "subtotal", "category_id", "category_name"}, ...]}
"""

from rest_framework import serializers


# ---------------- INPUT ----------------
class CheckoutLineSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)


class CheckoutRequestSerializer(serializers.Serializer):
    # Empty lists pass here; the orchestrator reports them as "checkouts is empty".
    checkout = CheckoutLineSerializer(many=True, allow_empty=True)


# ---------------- OUTPUT ----------------
class ReceiptHeaderSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="transaction_id")
    total_amount = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ReceiptLineSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="transaction_detail_id")
    transaction_id = serializers.IntegerField()
    product_id = serializers.IntegerField()
    product_name = serializers.CharField()
    quantity = serializers.IntegerField()
    subtotal = serializers.IntegerField()
    category_id = serializers.IntegerField()
    category_name = serializers.CharField()


class CheckoutReceiptSerializer(serializers.Serializer):
    transaction = ReceiptHeaderSerializer(source="*")
    transaction_details = ReceiptLineSerializer(source="lines", many=True)
