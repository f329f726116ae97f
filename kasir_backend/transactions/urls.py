# transactions/urls.py

from django.urls import path

from backend.health import ModuleHealthView

from .views import CheckoutView, TransactionDetailView

app_name = "transactions"

urlpatterns = [
    path(
        "health/",
        ModuleHealthView.as_view(module_name="Transactions API"),
        name="health",
    ),
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("<int:pk>/", TransactionDetailView.as_view(), name="detail"),
]
