# products/views/category.py

from products.models import Category
from products.serializers.category import CategorySerializer

from .base import CatalogViewSet


class CategoryViewSet(CatalogViewSet):
    """
    Category API

    Policy:
    - Any authenticated user can READ categories (needed for product forms)
    - Only managers (catalog.edit) can CREATE/UPDATE/DELETE
    - A category that still has products cannot be deleted
    """

    queryset = Category.objects.all().order_by("id")
    serializer_class = CategorySerializer

    entity_label = "Category"
    entity_label_plural = "Categories"
    blocked_delete_detail = "category still has products"
