# products/models/category.py

from django.db import models


class Category(models.Model):
    """
    Product grouping shown on receipts and in catalog filters.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name
