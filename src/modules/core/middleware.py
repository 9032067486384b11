"""Request logging for the inventory API.

Every request gets a request ID: the caller's ``X-Request-ID`` when it is a
sane token, a fresh UUID4 otherwise.  The ID, method and path are bound to
structlog's context for the lifetime of the request, so the use-case and
controller events carry them, and one ``http.request`` line summarises the
outcome once the response is ready.
"""

from __future__ import annotations

import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
REQUEST_ID_META_KEY = "HTTP_X_REQUEST_ID"

# Echoed into logs and response headers, so only plain tokens are trusted.
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def resolve_request_id(request: HttpRequest) -> str:
    supplied = request.META.get(REQUEST_ID_META_KEY, "")
    if _REQUEST_ID_PATTERN.fullmatch(supplied):
        return supplied
    return str(uuid.uuid4())


def _log_method_for(status_code: int):
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    return logger.info


class CorrelationIdMiddleware:
    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = resolve_request_id(request)
        structlog.contextvars.clear_contextvars()

        with structlog.contextvars.bound_contextvars(
            correlation_id=request_id,
            method=request.method,
            path=request.path,
        ):
            started = time.monotonic()
            response = self.get_response(request)
            _log_method_for(response.status_code)(
                "http.request",
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )

        response[REQUEST_ID_HEADER] = request_id
        return response
