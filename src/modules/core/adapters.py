"""Route adapter between DRF and the controller contract.

``ControllerView`` is an ``APIView`` whose behaviour is a dispatch table
of controllers keyed by HTTP method::

    ControllerView.as_view(routes={"get": find, "delete": remove})

For each request it builds a framework-agnostic ``HttpRequest`` from the
parsed body and the URL kwargs, runs the controller's coroutine and
writes the resulting ``HttpResponse`` back as a DRF ``Response``.
Methods missing from the table answer 405.
"""

from __future__ import annotations

from typing import Any, Dict

from asgiref.sync import async_to_sync
from pydantic import BaseModel
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.controllers import IController
from modules.core.errors import DomainError
from modules.core.http import HttpRequest, HttpResponse


def serialize_body(body: Any) -> Any:
    """Render a controller body as JSON-ready data."""
    if isinstance(body, DomainError):
        return body.to_dict()
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    if isinstance(body, str):
        return {"message": body}
    return body


def to_drf_response(response: HttpResponse) -> Response:
    return Response(serialize_body(response.body), status=response.status_code)


class ControllerView(APIView):
    """Dispatches each HTTP method to the controller registered for it."""

    routes: Dict[str, IController] = {}

    def _allowed_methods(self) -> list[str]:
        return [method.upper() for method in self.routes] + ["OPTIONS"]

    def _dispatch_to_controller(
        self, method: str, request: Request, kwargs: Dict[str, Any]
    ) -> Response:
        controller = self.routes.get(method)
        if controller is None:
            return self.http_method_not_allowed(request)
        http_request = HttpRequest(body=request.data, params=dict(kwargs))
        http_response = async_to_sync(controller.handle)(http_request)
        return to_drf_response(http_response)

    def get(self, request: Request, **kwargs: Any) -> Response:
        return self._dispatch_to_controller("get", request, kwargs)

    def post(self, request: Request, **kwargs: Any) -> Response:
        return self._dispatch_to_controller("post", request, kwargs)

    def put(self, request: Request, **kwargs: Any) -> Response:
        return self._dispatch_to_controller("put", request, kwargs)

    def delete(self, request: Request, **kwargs: Any) -> Response:
        return self._dispatch_to_controller("delete", request, kwargs)
