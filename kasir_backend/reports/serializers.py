# reports/serializers.py

from rest_framework import serializers


class ReportQuerySerializer(serializers.Serializer):
    """
    ?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD (both or neither).
    """

    start_date = serializers.DateField(required=False, input_formats=["%Y-%m-%d"])
    end_date = serializers.DateField(required=False, input_formats=["%Y-%m-%d"])


class MostSoldProductSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    quantity_sold = serializers.IntegerField()


class SalesReportSerializer(serializers.Serializer):
    total_revenue = serializers.IntegerField()
    total_transactions = serializers.IntegerField()
    most_sold_product = MostSoldProductSerializer(many=True)
