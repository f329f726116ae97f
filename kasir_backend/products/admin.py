# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Admin rules:

- Categories and products are plain CRUD for managers.
- Stock is editable here (stock counts, corrections); checkout never goes
  through admin.
- Deleting a category that still has products, or a product already sold,
  is blocked by PROTECT and Django admin shows the usual "cannot delete" page.
"""

from __future__ import annotations

from django.contrib import admin

from products.models import Category, Product


class ProductInline(admin.TabularInline):
    model = Product
    extra = 0
    fields = ("name", "price", "stock")
    show_change_link = True


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "product_count", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("created_at", "updated_at")
    inlines = [ProductInline]

    @admin.display(description="Products")
    def product_count(self, obj: Category) -> int:
        return obj.products.count()


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "price", "stock", "updated_at")
    list_filter = ("category",)
    list_editable = ("stock",)
    search_fields = ("name", "category__name")
    list_select_related = ("category",)
    readonly_fields = ("created_at", "updated_at")
