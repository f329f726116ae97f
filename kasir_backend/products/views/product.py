# products/views/product.py

"""
PRODUCT VIEWSET

- CRUD over the catalog, list filterable with ?name=<substring>
- category_name is joined in (select_related) to avoid N+1 on lists
- products that appear on a past transaction cannot be deleted
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view

from products.filters import ProductFilter
from products.models import Product
from products.serializers.product import ProductSerializer

from .base import CatalogViewSet


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter(
                name="name",
                description="Case-insensitive substring match on product name",
                required=False,
                type=str,
            ),
        ]
    )
)
class ProductViewSet(CatalogViewSet):
    queryset = Product.objects.select_related("category").order_by("id")
    serializer_class = ProductSerializer
    filterset_class = ProductFilter

    entity_label = "Product"
    entity_label_plural = "Products"
    blocked_delete_detail = "product is referenced by transactions"
