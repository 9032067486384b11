"""Product use-cases backed by ``IProductRepository``.

Each use-case receives the repository via constructor injection (DIP)
and answers with an ``Either``.  The ORM is synchronous, so the body of
every use-case runs in a single ``sync_to_async`` call: the coroutine
awaits one block of database work and never touches the ORM directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from asgiref.sync import sync_to_async
from django.db import IntegrityError

from modules.products.dtos import AddProductDTO, EditProductDTO, ProductOutputDTO
from modules.products.errors import ProductAlreadyExistsError, ProductNotFoundError
from modules.products.use_cases.interfaces import (
    IAddProductUseCase,
    IDeleteProductUseCase,
    IEditProductUseCase,
    IFindProductBySkuUseCase,
)
from shared.domain.either import Either, left, right

if TYPE_CHECKING:
    from modules.core.errors import DomainError
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class DbAddProduct(IAddProductUseCase):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def execute(self, dto: AddProductDTO) -> Either[DomainError, ProductOutputDTO]:
        return await sync_to_async(self._add)(dto)

    def _add(self, dto: AddProductDTO) -> Either[DomainError, ProductOutputDTO]:
        log = logger.bind(sku=dto.sku)

        if self._repo.get_by_sku(dto.sku):
            log.info("product.duplicate_sku")
            return left(ProductAlreadyExistsError())

        try:
            product = self._repo.create(dto.sku, dto.name, dto.warehouses)
        except IntegrityError:
            # A concurrent Add took the SKU between the check and the insert.
            log.info("product.duplicate_sku")
            return left(ProductAlreadyExistsError())
        log.info("product.created", product_id=str(product.id))
        return right(ProductOutputDTO.from_entity(product))


class DbEditProduct(IEditProductUseCase):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def execute(self, dto: EditProductDTO) -> Either[DomainError, ProductOutputDTO]:
        return await sync_to_async(self._edit)(dto)

    def _edit(self, dto: EditProductDTO) -> Either[DomainError, ProductOutputDTO]:
        product = self._repo.get_by_sku(dto.sku)
        if not product:
            logger.info("product.not_found", sku=dto.sku)
            return left(ProductNotFoundError())

        product = self._repo.replace(product, dto.name, dto.warehouses)
        logger.info("product.updated", sku=dto.sku)
        return right(ProductOutputDTO.from_entity(product))


class DbFindProductBySku(IFindProductBySkuUseCase):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def execute(self, sku: int) -> Either[DomainError, ProductOutputDTO]:
        return await sync_to_async(self._find)(sku)

    def _find(self, sku: int) -> Either[DomainError, ProductOutputDTO]:
        product = self._repo.get_by_sku(sku)
        if not product:
            logger.info("product.not_found", sku=sku)
            return left(ProductNotFoundError())
        logger.info("product.retrieved", sku=sku)
        return right(ProductOutputDTO.from_entity(product))


class DbDeleteProduct(IDeleteProductUseCase):
    """Soft-deletes the product and answers with its last state."""

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def execute(self, sku: int) -> Either[DomainError, ProductOutputDTO]:
        return await sync_to_async(self._delete)(sku)

    def _delete(self, sku: int) -> Either[DomainError, ProductOutputDTO]:
        product = self._repo.get_by_sku(sku)
        if not product:
            logger.info("product.not_found", sku=sku)
            return left(ProductNotFoundError())

        snapshot = ProductOutputDTO.from_entity(product)
        self._repo.delete(str(product.id))
        logger.info("product.deleted", sku=sku)
        return right(snapshot)
