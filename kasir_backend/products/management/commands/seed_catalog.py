# products/management/commands/seed_catalog.py

"""
Seed demo categories and products for local development.

Idempotent: rows are matched by name; stock and price are only set on create
unless --reset-stock is passed.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Category, Product

CATEGORIES = [
    ("Makanan", "Makanan ringan dan mie instan"),
    ("Minuman", "Minuman kemasan"),
    ("Kebutuhan Rumah", "Sabun, deterjen, dan perlengkapan rumah"),
]

PRODUCTS = [
    # name, category, price, stock
    ("Indomie Goreng", "Makanan", 3500, 120),
    ("Chitato 68g", "Makanan", 11000, 40),
    ("Roti Tawar", "Makanan", 16000, 15),
    ("Aqua 600ml", "Minuman", 4000, 200),
    ("Teh Botol Sosro", "Minuman", 5000, 80),
    ("Kopi Kapal Api Sachet", "Minuman", 1500, 300),
    ("Sabun Lifebuoy", "Kebutuhan Rumah", 4500, 60),
    ("Rinso 800g", "Kebutuhan Rumah", 24000, 25),
]


class Command(BaseCommand):
    help = "Seed demo categories and products"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset-stock",
            action="store_true",
            help="Overwrite price and stock of existing products with the seed values.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding catalog..."))

        category_objs = {}
        for name, description in CATEGORIES:
            obj, _ = Category.objects.get_or_create(
                name=name,
                defaults={"description": description},
            )
            category_objs[name] = obj

        created_count = 0
        for name, category, price, stock in PRODUCTS:
            product, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "category": category_objs[category],
                    "price": price,
                    "stock": stock,
                },
            )
            if created:
                created_count += 1
            elif options["reset_stock"]:
                product.price = price
                product.stock = stock
                product.save(update_fields=["price", "stock", "updated_at"])

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog ready: {len(category_objs)} categories, "
                f"{created_count} new products ({len(PRODUCTS)} total)"
            )
        )
