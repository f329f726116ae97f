# backend/responses.py

"""
API RESPONSE ENVELOPE

Every endpoint answers with the same wrapper:

    {"code": "1000", "message": "...", "data": {...}}   success
    {"code": "2000", "message": "<context>: <detail>"}  failure (no data)

Views build envelopes with success_response()/error_response().
DRF-raised errors (validation, auth, permission, 404) are reshaped by
envelope_exception_handler, wired as REST_FRAMEWORK["EXCEPTION_HANDLER"].
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

SUCCESS_CODE = "1000"
ERROR_CODE = "2000"

_UNNAMED_KEYS = {"detail", "non_field_errors"}


def success_response(*, message: str, data=None, http_status: int = status.HTTP_200_OK):
    body = {"code": SUCCESS_CODE, "message": message}
    if data is not None:
        body["data"] = data
    return Response(body, status=http_status)


def error_response(*, message: str, http_status: int, detail: str | None = None):
    text = f"{message}: {detail}" if detail else message
    return Response({"code": ERROR_CODE, "message": text}, status=http_status)


def flatten_errors(errors) -> str:
    """
    Collapse DRF error structures (dict / list / ErrorDetail) into one line.
    """
    if isinstance(errors, dict):
        parts = []
        for field, value in errors.items():
            text = flatten_errors(value)
            if not text:
                continue
            parts.append(text if field in _UNNAMED_KEYS else f"{field}: {text}")
        return "; ".join(parts)

    if isinstance(errors, (list, tuple)):
        return "; ".join(t for t in (flatten_errors(v) for v in errors) if t)

    return str(errors)


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        message = f"invalid request: {flatten_errors(response.data)}"
    else:
        message = flatten_errors(response.data)

    response.data = {"code": ERROR_CODE, "message": message}
    return response
