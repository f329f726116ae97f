# transactions/admin.py

"""
Transactions are append-only: admin is read-only, no add / change / delete.
"""

from django.contrib import admin

from transactions.models import Transaction, TransactionDetail


class ReadOnlyAdminMixin:
    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class TransactionDetailInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = TransactionDetail
    extra = 0
    fields = ("product", "quantity", "subtotal", "created_at")
    readonly_fields = fields
    can_delete = False


@admin.register(Transaction)
class TransactionAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ("id", "total_amount", "line_count", "created_at")
    date_hierarchy = "created_at"
    readonly_fields = ("total_amount", "created_at", "updated_at")
    inlines = [TransactionDetailInline]

    @admin.display(description="Lines")
    def line_count(self, obj: Transaction) -> int:
        return obj.details.count()
