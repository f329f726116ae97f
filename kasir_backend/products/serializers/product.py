# products/serializers/product.py

"""
PRODUCT SERIALIZER

Wire shape:
    {"id", "name", "price", "stock", "category_id", "category_name",
     "created_at", "updated_at"}

- category_id is writable and must point at an existing category.
- price and stock are whole non-negative integers.
"""

from rest_framework import serializers

from products.models import Category, Product


class ProductSerializer(serializers.ModelSerializer):
    category_id = serializers.IntegerField()
    category_name = serializers.CharField(source="category.name", read_only=True)

    price = serializers.IntegerField(min_value=0)
    stock = serializers.IntegerField(min_value=0)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "stock",
            "category_id",
            "category_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "category_name",
            "created_at",
            "updated_at",
        ]

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("name cannot be blank")
        return value

    def validate_category_id(self, value):
        if not Category.objects.filter(id=value).exists():
            raise serializers.ValidationError("category not found")
        return value
