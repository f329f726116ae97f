# reports/urls.py

from django.urls import path

from backend.health import ModuleHealthView

from .views import SalesReportView, TodayReportView

app_name = "reports"

urlpatterns = [
    path(
        "health/",
        ModuleHealthView.as_view(module_name="Reports API"),
        name="health",
    ),
    path("", SalesReportView.as_view(), name="sales"),
    path("today/", TodayReportView.as_view(), name="today"),
]
