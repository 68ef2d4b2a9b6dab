"""REST framework exception handler producing the API error envelope.

Every error body carries a ``message``; validation failures also carry an
``errors`` map of camelCase field name to a list of messages.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.application.validation import ValidationFailed

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
UNEXPECTED_ERROR = "An unexpected error occurred"


def to_camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def _as_messages(detail: Any) -> list[str]:
    if isinstance(detail, (list, tuple)):
        messages: list[str] = []
        for item in detail:
            messages.extend(_as_messages(item))
        return messages
    if isinstance(detail, dict):
        return [message for value in detail.values() for message in _as_messages(value)]
    return [str(detail)]


def _validation_response(errors: Any) -> Response:
    if not isinstance(errors, dict):
        errors = {"non_field_errors": errors}
    body = {
        "message": VALIDATION_FAILED,
        "errors": {to_camel(field): _as_messages(messages) for field, messages in errors.items()},
    }
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    if isinstance(exc, ValidationFailed):
        return _validation_response(exc.errors)
    if isinstance(exc, exceptions.ValidationError):
        return _validation_response(exc.detail)

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data
        response.data = {"message": str(detail)}
        return response

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'request'}: {exc}",
        exc_info=exc,
    )
    return Response({"message": UNEXPECTED_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
