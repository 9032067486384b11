"""Product repository interface.

Extends ``IRepository[Product]`` with the SKU look-ups and stock writes
the product use-cases need.  Soft-deleted products are invisible to
every method.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import WarehouseDTO
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_sku(self, sku: int) -> Optional[Product]:
        """Retrieve a live product by SKU."""

    @abstractmethod
    def create(
        self, sku: int, name: str, warehouses: Sequence[WarehouseDTO]
    ) -> Product:
        """Persist a new product together with its warehouses."""

    @abstractmethod
    def replace(
        self, product: Product, name: str, warehouses: Sequence[WarehouseDTO]
    ) -> Product:
        """Overwrite a product's name and replace all of its warehouses."""
