# products/urls.py

"""
PRODUCTS URLS

Purpose:
- Register catalog routes under /api/categories/ and /api/products/
- Module health checks are listed BEFORE the router so "health" is never
  captured as a detail pk.
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from backend.health import ModuleHealthView
from products.views import CategoryViewSet, ProductViewSet

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False

router.register(r"categories", CategoryViewSet, basename="categories")
router.register(r"products", ProductViewSet, basename="products")

urlpatterns = [
    path(
        "categories/health/",
        ModuleHealthView.as_view(module_name="Categories API"),
        name="categories-health",
    ),
    path(
        "products/health/",
        ModuleHealthView.as_view(module_name="Products API"),
        name="products-health",
    ),
    path("", include(router.urls)),
]
