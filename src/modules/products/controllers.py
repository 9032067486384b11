"""Product controllers.

One controller per operation.  Each validates the untrusted request,
builds the DTO the injected use-case expects, awaits it and maps the
``Either`` it resolves to onto an ``HttpResponse``:

- validation failure -> 400 naming the offending field;
- ``left``           -> 400 (Add/Edit) or 404 (Find/Delete), error unchanged;
- ``right``          -> 200 with the product, or 204 for Edit/Delete.

Anything raised is turned into a 500 by ``BaseController.handle``.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from modules.core.controllers import BaseController
from modules.core.http import (
    HttpRequest,
    HttpResponse,
    bad_request,
    no_content,
    not_found,
    ok,
)
from modules.products.dtos import AddProductDTO, EditProductDTO, WarehouseDTO
from modules.products.use_cases.interfaces import (
    IAddProductUseCase,
    IDeleteProductUseCase,
    IEditProductUseCase,
    IFindProductBySkuUseCase,
)
from modules.products.validators import (
    ADD_PRODUCT_REQUIRED_PARAMS,
    EDIT_PRODUCT_REQUIRED_PARAMS,
    parse_sku,
    validate_product_payload,
)

logger = structlog.get_logger(__name__)


def _warehouses_from(payload: Mapping[str, Any]) -> list[WarehouseDTO]:
    """Flatten ``inventory.warehouses`` into DTOs."""
    return [
        WarehouseDTO(
            locality=w["locality"],
            quantity=int(w["quantity"]),
            type=w["type"],
        )
        for w in payload["inventory"]["warehouses"]
    ]


def _rejected(controller: str, error: Any) -> HttpResponse:
    logger.info("controller.validation_failed", controller=controller, error=str(error))
    return bad_request(error)


class AddProductController(BaseController):
    """POST /products/"""

    def __init__(self, add_product: IAddProductUseCase) -> None:
        self._add_product = add_product

    async def perform(self, request: HttpRequest) -> HttpResponse:
        valid = validate_product_payload(request.body, ADD_PRODUCT_REQUIRED_PARAMS)
        if valid.is_left():
            return _rejected("add_product", valid.value)

        body = request.body
        dto = AddProductDTO(
            sku=int(body["sku"]),
            name=body["name"],
            warehouses=_warehouses_from(body),
        )
        created = await self._add_product.execute(dto)
        if created.is_left():
            return bad_request(created.value)
        return ok(created.value)


class EditProductController(BaseController):
    """PUT /products/<sku>/

    Replaces the product's name and warehouses.  Answers 204 on success.
    """

    def __init__(self, edit_product: IEditProductUseCase) -> None:
        self._edit_product = edit_product

    async def perform(self, request: HttpRequest) -> HttpResponse:
        valid = validate_product_payload(request.body, EDIT_PRODUCT_REQUIRED_PARAMS)
        if valid.is_left():
            return _rejected("edit_product", valid.value)
        sku = parse_sku(request.params)
        if sku.is_left():
            return _rejected("edit_product", sku.value)

        body = request.body
        dto = EditProductDTO(
            sku=sku.value,
            name=body["name"],
            warehouses=_warehouses_from(body),
        )
        edited = await self._edit_product.execute(dto)
        if edited.is_left():
            return bad_request(edited.value)
        return no_content()


class FindProductController(BaseController):
    """GET /products/<sku>/"""

    def __init__(self, find_product_by_sku: IFindProductBySkuUseCase) -> None:
        self._find_product_by_sku = find_product_by_sku

    async def perform(self, request: HttpRequest) -> HttpResponse:
        sku = parse_sku(request.params)
        if sku.is_left():
            return _rejected("find_product", sku.value)

        product = await self._find_product_by_sku.execute(sku.value)
        if product.is_left():
            return not_found(product.value)
        return ok(product.value)


class DeleteProductController(BaseController):
    """DELETE /products/<sku>/"""

    def __init__(self, delete_product: IDeleteProductUseCase) -> None:
        self._delete_product = delete_product

    async def perform(self, request: HttpRequest) -> HttpResponse:
        sku = parse_sku(request.params)
        if sku.is_left():
            return _rejected("delete_product", sku.value)

        deleted = await self._delete_product.execute(sku.value)
        if deleted.is_left():
            return not_found(deleted.value)
        return no_content()
