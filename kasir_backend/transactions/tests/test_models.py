# transactions/tests/test_models.py

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from django.test import TestCase

from products.models import Category, Product
from transactions.models import Transaction, TransactionDetail


class TransactionImmutabilityTests(TestCase):
    """
    GUARANTEES:
    - Headers and details are append-only
    - Sold products cannot be deleted
    - Detail quantity is strictly positive
    """

    def setUp(self):
        category = Category.objects.create(name="Minuman")
        self.product = Product.objects.create(name="Teh Botol", price=5000, stock=10, category=category)
        self.txn = Transaction.objects.create(total_amount=10000)
        self.detail = TransactionDetail.objects.create(
            transaction=self.txn,
            product=self.product,
            quantity=2,
            subtotal=10000,
        )

    def test_header_cannot_be_edited(self):
        self.txn.total_amount = 1
        with self.assertRaises(ValidationError):
            self.txn.save()

        self.txn.refresh_from_db()
        self.assertEqual(self.txn.total_amount, 10000)

    def test_header_cannot_be_deleted(self):
        with self.assertRaises(ValidationError):
            self.txn.delete()
        self.assertTrue(Transaction.objects.filter(id=self.txn.id).exists())

    def test_detail_cannot_be_edited_or_deleted(self):
        self.detail.quantity = 5
        with self.assertRaises(ValidationError):
            self.detail.save()
        with self.assertRaises(ValidationError):
            self.detail.delete()

    def test_sold_product_cannot_be_deleted(self):
        with self.assertRaises(ProtectedError):
            self.product.delete()

    def test_zero_quantity_detail_is_rejected(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                TransactionDetail.objects.create(
                    transaction=self.txn,
                    product=self.product,
                    quantity=0,
                    subtotal=0,
                )

    def test_details_are_ordered_by_insertion(self):
        second = TransactionDetail.objects.create(
            transaction=self.txn,
            product=self.product,
            quantity=1,
            subtotal=5000,
        )
        self.assertEqual(list(self.txn.details.all()), [self.detail, second])
