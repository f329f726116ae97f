# transactions/tests/test_api.py

from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Category, Product
from transactions.models import Transaction
from transactions.services import transaction_store

User = get_user_model()

CHECKOUT_URL = "/api/transactions/checkout/"


class CheckoutApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.cashier = User.objects.create_user(email="cashier@toko.test", password="secret-pass-1")
        self.client.force_authenticate(self.cashier)

        self.food = Category.objects.create(name="Makanan")
        self.drink = Category.objects.create(name="Minuman")
        self.a = Product.objects.create(name="Indomie Goreng", price=100, stock=10, category=self.food)
        self.b = Product.objects.create(name="Roti Tawar", price=150, stock=0, category=self.food)
        self.c = Product.objects.create(name="Aqua 600ml", price=200, stock=5, category=self.drink)

    def post(self, body):
        return self.client.post(CHECKOUT_URL, body, format="json")

    def test_health(self):
        res = APIClient().get("/api/transactions/health/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Transactions API is healthy")

    def test_checkout_success(self):
        res = self.post(
            {
                "checkout": [
                    {"product_id": self.a.id, "quantity": 2},
                    {"product_id": self.c.id, "quantity": 1},
                ]
            }
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["code"], "1000")
        self.assertEqual(res.data["message"], "Checkout created successfully")

        data = res.data["data"]
        txn = Transaction.objects.get()
        self.assertEqual(data["transaction"]["id"], txn.id)
        self.assertEqual(data["transaction"]["total_amount"], 400)
        self.assertIn("created_at", data["transaction"])

        lines = data["transaction_details"]
        self.assertEqual([line["product_id"] for line in lines], [self.a.id, self.c.id])
        self.assertEqual(lines[0]["product_name"], "Indomie Goreng")
        self.assertEqual(lines[0]["quantity"], 2)
        self.assertEqual(lines[0]["subtotal"], 200)
        self.assertEqual(lines[0]["transaction_id"], txn.id)
        self.assertEqual(lines[1]["category_name"], "Minuman")

    def test_requires_authentication(self):
        res = APIClient().post(CHECKOUT_URL, {"checkout": []}, format="json")
        self.assertEqual(res.status_code, 401)

    def test_empty_checkout_is_400(self):
        res = self.post({"checkout": []})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data, {"code": "2000", "message": "invalid checkout request: checkouts is empty"})

    def test_missing_body_is_400(self):
        res = self.post({})

        self.assertEqual(res.status_code, 400)
        self.assertTrue(res.data["message"].startswith("invalid checkout request: checkout:"))

    def test_bad_quantity_is_400(self):
        res = self.post({"checkout": [{"product_id": self.a.id, "quantity": 0}]})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(Transaction.objects.count(), 0)

    def test_unknown_product_is_404(self):
        res = self.post({"checkout": [{"product_id": 999999, "quantity": 1}]})

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["message"], "Checkout created failed: product not found")
        self.assertEqual(Transaction.objects.count(), 0)

    def test_stock_empty_is_409(self):
        res = self.post(
            {
                "checkout": [
                    {"product_id": self.a.id, "quantity": 3},
                    {"product_id": self.b.id, "quantity": 1},
                ]
            }
        )

        self.assertEqual(res.status_code, 409)
        self.assertEqual(res.data["message"], "Checkout created failed: stock is empty")
        self.a.refresh_from_db()
        self.assertEqual(self.a.stock, 10)

    def test_insufficient_stock_is_409(self):
        res = self.post({"checkout": [{"product_id": self.c.id, "quantity": 6}]})

        self.assertEqual(res.status_code, 409)
        self.assertEqual(res.data["message"], "Checkout created failed: stock not enough")

    def test_storage_failure_is_500(self):
        with mock.patch.object(
            transaction_store,
            "insert_transaction_header",
            side_effect=DatabaseError("connection lost"),
        ):
            res = self.post({"checkout": [{"product_id": self.a.id, "quantity": 1}]})

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.data["message"], "Checkout created failed: storage failure")
        self.a.refresh_from_db()
        self.assertEqual(self.a.stock, 10)

    def test_retrieve_receipt(self):
        created = self.post({"checkout": [{"product_id": self.c.id, "quantity": 2}]})
        txn_id = created.data["data"]["transaction"]["id"]

        res = self.client.get(f"/api/transactions/{txn_id}/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Transaction retrieved successfully")
        self.assertEqual(res.data["data"], created.data["data"])

    def test_retrieve_unknown_is_404(self):
        res = self.client.get("/api/transactions/424242/")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data, {"code": "2000", "message": "transactions not found"})
