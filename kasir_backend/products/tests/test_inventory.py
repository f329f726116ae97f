# products/tests/test_inventory.py

from django.test import TestCase

from products.models import Category, Product
from products.services.inventory import (
    CheckoutLineDetail,
    InsufficientStockError,
    ProductNotFoundError,
    decrement_stock,
    get_line_detail,
)


class GetLineDetailTests(TestCase):
    def setUp(self):
        self.category = Category.objects.create(name="Minuman")
        self.product = Product.objects.create(
            name="Aqua 600ml",
            price=4000,
            stock=7,
            category=self.category,
        )

    def test_resolves_product_with_category(self):
        detail = get_line_detail(self.product.id, quantity=2)

        self.assertEqual(
            detail,
            CheckoutLineDetail(
                product_id=self.product.id,
                name="Aqua 600ml",
                price=4000,
                stock=7,
                category_id=self.category.id,
                category_name="Minuman",
                quantity=2,
            ),
        )
        self.assertEqual(detail.subtotal, 8000)

    def test_unknown_product_raises(self):
        with self.assertRaises(ProductNotFoundError) as ctx:
            get_line_detail(999999, quantity=1)

        self.assertEqual(ctx.exception.product_id, 999999)

    def test_lock_inside_atomic_block(self):
        from django.db import transaction

        with transaction.atomic():
            detail = get_line_detail(self.product.id, quantity=1, lock=True)

        self.assertEqual(detail.stock, 7)


class DecrementStockTests(TestCase):
    def setUp(self):
        self.category = Category.objects.create(name="Makanan")
        self.product = Product.objects.create(
            name="Indomie Goreng",
            price=3500,
            stock=5,
            category=self.category,
        )

    def test_decrements_and_touches_updated_at(self):
        before = self.product.updated_at

        decrement_stock(self.product.id, 3)

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 2)
        self.assertGreaterEqual(self.product.updated_at, before)

    def test_can_take_the_last_unit(self):
        decrement_stock(self.product.id, 5)

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 0)

    def test_more_than_available_leaves_stock_untouched(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            decrement_stock(self.product.id, 6)

        self.assertEqual(ctx.exception.requested, 6)
        self.assertEqual(ctx.exception.available, 5)

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 5)

    def test_missing_product(self):
        with self.assertRaises(ProductNotFoundError):
            decrement_stock(424242, 1)

    def test_non_positive_quantity_is_rejected(self):
        with self.assertRaises(ValueError):
            decrement_stock(self.product.id, 0)
