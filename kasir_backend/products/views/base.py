# products/views/base.py

"""
CATALOG VIEWSET BASE

Shared by categories and products:
- every action answers with the {code, message, data} envelope
- reads: any authenticated user; writes: catalog.edit capability
- missing rows -> 404 "<entity> not found"
- deletes blocked by references (PROTECT) -> 409
"""

from __future__ import annotations

import logging

from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated

from backend.responses import error_response, success_response
from permissions.api_key import HasValidAPIKey
from permissions.roles import CAP_CATALOG_EDIT, HasCapability

logger = logging.getLogger(__name__)

READ_ACTIONS = {"list", "retrieve"}


class CatalogViewSet(viewsets.ModelViewSet):
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    required_capability = CAP_CATALOG_EDIT

    # "Product" / "Products"; used in envelope messages
    entity_label = ""
    entity_label_plural = ""

    blocked_delete_detail = "still referenced"

    def get_permissions(self):
        if self.action in READ_ACTIONS:
            return [HasValidAPIKey(), IsAuthenticated()]
        return [HasValidAPIKey(), IsAuthenticated(), HasCapability()]

    def get_object(self):
        queryset = self.filter_queryset(self.get_queryset())
        try:
            obj = queryset.get(pk=self.kwargs["pk"])
        except (queryset.model.DoesNotExist, ValueError, TypeError):
            raise NotFound(f"{self.entity_label.lower()} not found")

        self.check_object_permissions(self.request, obj)
        return obj

    # -----------------------------
    # Envelope-wrapped actions
    # -----------------------------
    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return success_response(
            message=f"{self.entity_label_plural} retrieved successfully",
            data=serializer.data,
        )

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return success_response(
            message=f"{self.entity_label} retrieved successfully",
            data=serializer.data,
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        logger.info(
            "Catalog entry created",
            extra={"entity": self.entity_label, "id": serializer.instance.pk},
        )
        return success_response(
            message=f"{self.entity_label} created successfully",
            data=serializer.data,
            http_status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return success_response(
            message=f"{self.entity_label} updated successfully",
            data=serializer.data,
        )

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        pk = instance.pk
        try:
            self.perform_destroy(instance)
        except ProtectedError:
            logger.warning(
                "Catalog delete blocked by references",
                extra={"entity": self.entity_label, "id": pk},
            )
            return error_response(
                message=f"{self.entity_label} delete failed",
                detail=self.blocked_delete_detail,
                http_status=status.HTTP_409_CONFLICT,
            )

        return success_response(message=f"{self.entity_label} deleted successfully")
