"""
PROJECT URLS

All API routes live under /api/

Modules:
- /api/auth/...          login + profile (JWT)
- /api/categories/...    category CRUD
- /api/products/...      product CRUD
- /api/transactions/...  checkout + receipts
- /api/reports/...       sales reports (manager only)

Public (AllowAny):
- /api/health/service/, /api/health/db/ and every /api/<module>/health/
- /api/schema/, /api/docs/

Security hardening:
- Django admin path is configurable (ADMIN_PATH setting) to reduce bot noise.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from backend.health import DatabaseHealthView, ModuleHealthView

# ------------------ ADMIN PATH (HARDENED) ------------------
# Keep the trailing slash. Do NOT expose a custom path in public docs.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health
    path(
        "health/service/",
        ModuleHealthView.as_view(module_name="Connection to Kasir API"),
        name="health-service",
    ),
    path("health/db/", DatabaseHealthView.as_view(), name="health-db"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Auth & Users
    path("auth/", include("users.urls")),
    # App modules
    path("", include("products.urls")),
    path("transactions/", include("transactions.urls")),
    path("reports/", include("reports.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    # Root convenience: visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
