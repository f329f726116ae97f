# products/tests/test_seed_catalog.py

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from products.models import Category, Product


class SeedCatalogCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        first = (Category.objects.count(), Product.objects.count())

        call_command("seed_catalog", stdout=StringIO())

        self.assertEqual((Category.objects.count(), Product.objects.count()), first)
        self.assertGreater(first[1], 0)

    def test_reset_stock_restores_seed_values(self):
        call_command("seed_catalog", stdout=StringIO())
        product = Product.objects.get(name="Indomie Goreng")
        Product.objects.filter(id=product.id).update(stock=0)

        call_command("seed_catalog", "--reset-stock", stdout=StringIO())

        product.refresh_from_db()
        self.assertEqual(product.stock, 120)
