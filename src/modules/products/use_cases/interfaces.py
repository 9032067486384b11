"""Product use-case contracts.

Controllers depend on these abstractions only.  Every use-case is a
coroutine that resolves to an ``Either``: ``left`` with a ``DomainError``
when a business rule rejects the request, ``right`` with a
``ProductOutputDTO`` otherwise.  Unexpected faults are raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modules.core.errors import DomainError
    from modules.products.dtos import AddProductDTO, EditProductDTO, ProductOutputDTO
    from shared.domain.either import Either


class IAddProductUseCase(ABC):
    @abstractmethod
    async def execute(self, dto: AddProductDTO) -> Either[DomainError, ProductOutputDTO]:
        """Create a product; ``ProductAlreadyExistsError`` when the SKU is taken."""


class IEditProductUseCase(ABC):
    @abstractmethod
    async def execute(self, dto: EditProductDTO) -> Either[DomainError, ProductOutputDTO]:
        """Replace name and stock; ``ProductNotFoundError`` for unknown SKUs."""


class IFindProductBySkuUseCase(ABC):
    @abstractmethod
    async def execute(self, sku: int) -> Either[DomainError, ProductOutputDTO]:
        """Fetch a product; ``ProductNotFoundError`` for unknown SKUs."""


class IDeleteProductUseCase(ABC):
    @abstractmethod
    async def execute(self, sku: int) -> Either[DomainError, ProductOutputDTO]:
        """Remove a product; ``ProductNotFoundError`` for unknown SKUs."""
