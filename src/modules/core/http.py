"""Framework-agnostic HTTP contract used by the controllers.

``HttpRequest`` carries the untrusted ``body`` and ``params`` of one
request; ``HttpResponse`` is the only thing a controller produces.  The
helpers below are pure: they only pair a status code with a body.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rest_framework import status


@dataclass(frozen=True)
class HttpRequest:
    body: Any = None
    params: Any = None


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None


def ok(body: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_200_OK, body=body)


def no_content() -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_204_NO_CONTENT, body=None)


def bad_request(error: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST, body=error)


def not_found(error: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_404_NOT_FOUND, body=error)


def server_error(message: str) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, body=message)
