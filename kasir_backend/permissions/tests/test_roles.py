# permissions/tests/test_roles.py

from types import SimpleNamespace

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase

from permissions.roles import (
    ALL_CAPABILITIES,
    CAP_CATALOG_EDIT,
    CAP_POS_SELL,
    CAP_REPORTS_VIEW,
    HasCapability,
    capabilities_for,
)

User = get_user_model()


class CapabilityMapTests(TestCase):
    """
    GUARANTEES:
    - Managers hold every capability
    - Cashiers may only sell
    - Superusers bypass the role map
    """

    def setUp(self):
        self.manager = User.objects.create_user(email="m@toko.test", password="x-pass-123", role="manager")
        self.cashier = User.objects.create_user(email="c@toko.test", password="x-pass-123", role="cashier")

    def test_manager_capabilities(self):
        self.assertEqual(capabilities_for(self.manager), ALL_CAPABILITIES)

    def test_cashier_capabilities(self):
        self.assertEqual(capabilities_for(self.cashier), {CAP_POS_SELL})

    def test_superuser_gets_everything(self):
        self.cashier.is_superuser = True
        self.assertEqual(capabilities_for(self.cashier), ALL_CAPABILITIES)


class PermissionClassTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.manager = User.objects.create_user(email="m@toko.test", password="x-pass-123", role="manager")
        self.cashier = User.objects.create_user(email="c@toko.test", password="x-pass-123", role="cashier")

    def _request(self, user):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_has_capability(self):
        view = SimpleNamespace(required_capability=CAP_REPORTS_VIEW)
        perm = HasCapability()

        self.assertTrue(perm.has_permission(self._request(self.manager), view))
        self.assertFalse(perm.has_permission(self._request(self.cashier), view))

    def test_cashier_can_sell(self):
        view = SimpleNamespace(required_capability=CAP_POS_SELL)
        self.assertTrue(HasCapability().has_permission(self._request(self.cashier), view))

    def test_missing_required_capability_denies(self):
        view = SimpleNamespace()
        self.assertFalse(HasCapability().has_permission(self._request(self.manager), view))

    def test_anonymous_is_denied(self):
        view = SimpleNamespace(required_capability=CAP_CATALOG_EDIT)
        self.assertFalse(HasCapability().has_permission(self._request(AnonymousUser()), view))
