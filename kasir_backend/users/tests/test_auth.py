# users/tests/test_auth.py

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from permissions.roles import ROLE_CASHIER, ROLE_MANAGER

User = get_user_model()


class UserManagerTests(TestCase):
    """
    GUARANTEES:
    - Email is required and normalized
    - New accounts default to the cashier role
    - Superusers are managers with staff flags
    """

    def test_create_user_defaults_to_cashier(self):
        user = User.objects.create_user(email="kasir@Toko.Test", password="secret-pass-1")

        self.assertEqual(user.email, "kasir@toko.test")
        self.assertEqual(user.role, ROLE_CASHIER)
        self.assertTrue(user.check_password("secret-pass-1"))
        self.assertFalse(user.is_staff)
        self.assertIsInstance(user.pk, int)

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email="", password="secret-pass-1")

    def test_create_superuser_is_manager(self):
        admin = User.objects.create_superuser(email="owner@toko.test", password="secret-pass-1")

        self.assertEqual(admin.role, ROLE_MANAGER)
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.is_superuser)
        self.assertEqual(admin.roles, [ROLE_MANAGER])

    def test_string_representation(self):
        user = User.objects.create_user(email="ani@toko.test", password="x-pass-123")
        self.assertEqual(str(user), "ani@toko.test (cashier)")


class LoginApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="cashier@toko.test",
            password="secret-pass-1",
            name="Budi",
        )

    def test_login_returns_token_and_user(self):
        res = self.client.post(
            "/api/auth/login/",
            {"email": "cashier@toko.test", "password": "secret-pass-1"},
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["code"], "1000")
        self.assertEqual(res.data["message"], "login success")

        data = res.data["data"]
        self.assertEqual(
            data["user"],
            {"id": self.user.id, "email": "cashier@toko.test", "roles": ["cashier"]},
        )

        token = AccessToken(data["token"])
        self.assertEqual(str(token["user_id"]), str(self.user.id))
        self.assertEqual(token["email"], "cashier@toko.test")
        self.assertEqual(token["roles"], ["cashier"])

    def test_login_wrong_password_is_401(self):
        res = self.client.post(
            "/api/auth/login/",
            {"email": "cashier@toko.test", "password": "wrong"},
            format="json",
        )

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.data["code"], "2000")
        self.assertEqual(res.data["message"], "login failed: invalid email or password")
        self.assertNotIn("data", res.data)

    def test_login_inactive_user_is_401(self):
        self.user.is_active = False
        self.user.save()

        res = self.client.post(
            "/api/auth/login/",
            {"email": "cashier@toko.test", "password": "secret-pass-1"},
            format="json",
        )
        self.assertEqual(res.status_code, 401)

    def test_login_missing_fields_is_400(self):
        res = self.client.post("/api/auth/login/", {"email": "cashier@toko.test"}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["code"], "2000")
        self.assertTrue(res.data["message"].startswith("invalid request: password:"))

    def test_me_requires_token(self):
        res = self.client.get("/api/auth/me/")
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.data["code"], "2000")

    def test_me_with_bearer_token(self):
        login = self.client.post(
            "/api/auth/login/",
            {"email": "cashier@toko.test", "password": "secret-pass-1"},
            format="json",
        )
        token = login.data["data"]["token"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        res = self.client.get("/api/auth/me/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["data"]["email"], "cashier@toko.test")
        self.assertEqual(res.data["data"]["name"], "Budi")
        self.assertEqual(res.data["data"]["role"], "cashier")


@override_settings(API_KEY="kasir-test-key")
class ApiKeyGuardTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="cashier@toko.test", password="secret-pass-1")

    def test_missing_api_key_is_rejected(self):
        self.client.force_authenticate(self.user)
        res = self.client.get("/api/auth/me/")

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.data["message"], "API key required")

    def test_wrong_api_key_is_rejected(self):
        self.client.force_authenticate(self.user)
        res = self.client.get("/api/auth/me/", HTTP_X_API_KEY="nope")

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.data["message"], "Invalid API key")

    def test_valid_api_key_passes(self):
        self.client.force_authenticate(self.user)
        res = self.client.get("/api/auth/me/", HTTP_X_API_KEY="kasir-test-key")
        self.assertEqual(res.status_code, 200)

    def test_login_also_requires_api_key(self):
        res = self.client.post(
            "/api/auth/login/",
            {"email": "cashier@toko.test", "password": "secret-pass-1"},
            format="json",
        )
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.data["message"], "API key required")

    def test_health_is_public(self):
        res = self.client.get("/api/health/service/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Connection to Kasir API is healthy")
