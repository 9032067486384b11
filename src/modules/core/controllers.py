"""Controller contract.

A controller turns one ``HttpRequest`` into exactly one ``HttpResponse``.
``BaseController.handle`` is the fault boundary: any exception raised while
validating, delegating or mapping is logged and answered with an opaque
``server_error("internal")`` so internal details never reach the client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from modules.core.http import HttpRequest, HttpResponse, server_error

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "internal"


class IController(ABC):
    """Anything the route adapter can dispatch a request to."""

    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Produce the response for ``request``."""


class BaseController(IController):
    """Wraps ``perform`` with fault isolation."""

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            return await self.perform(request)
        except Exception:
            logger.exception(
                "controller.unexpected_error",
                controller=self.__class__.__name__,
            )
            return server_error(INTERNAL_ERROR_MESSAGE)

    @abstractmethod
    async def perform(self, request: HttpRequest) -> HttpResponse:
        """Validate, delegate and map the result.  May raise."""
