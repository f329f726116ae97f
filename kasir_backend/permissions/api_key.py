# permissions/api_key.py

"""
API KEY GUARD

Clients identify themselves with an `X-API-Key` header on top of the
per-user JWT. The expected key comes from settings.API_KEY; an empty setting
turns the guard off (local development and tests).

Installed as the first DEFAULT_PERMISSION_CLASSES entry, so every view that
does not override permission_classes is covered. Health and docs views opt
out with AllowAny.
"""

from __future__ import annotations

import hmac

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.permissions import BasePermission

API_KEY_HEADER = "X-API-Key"


class APIKeyRejected(APIException):
    # Always 401, including on views that declare no authenticators.
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "API key required"
    default_code = "api_key_rejected"


class HasValidAPIKey(BasePermission):
    def has_permission(self, request, view):
        expected = (getattr(settings, "API_KEY", "") or "").strip()
        if not expected:
            return True

        supplied = (request.headers.get(API_KEY_HEADER) or "").strip()
        if not supplied:
            raise APIKeyRejected("API key required")

        if not hmac.compare_digest(supplied, expected):
            raise APIKeyRejected("Invalid API key")

        return True
