"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the use-case layer decides how to turn a missing
product into a domain error.
"""

from __future__ import annotations

from typing import Optional, Sequence

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.dtos import WarehouseDTO
from modules.products.models import Product, Warehouse
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _live(self):
        return Product.objects.alive().prefetch_related("warehouses")

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a live product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._live().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_sku(self, sku: int) -> Optional[Product]:
        return self._live().filter(sku=sku).first()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    @transaction.atomic
    def create(
        self, sku: int, name: str, warehouses: Sequence[WarehouseDTO]
    ) -> Product:
        product = self.save(Product(sku=sku, name=name))
        self._write_warehouses(product, warehouses)
        return self.get_by_sku(sku)

    @transaction.atomic
    def replace(
        self, product: Product, name: str, warehouses: Sequence[WarehouseDTO]
    ) -> Product:
        product.name = name
        self.save(product)
        Warehouse.objects.filter(product=product).delete()
        self._write_warehouses(product, warehouses)
        return self.get_by_sku(product.sku)

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Soft-delete a product by ID.

        Returns ``True`` if the product was found and soft-deleted,
        ``False`` if no live product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _write_warehouses(
        self, product: Product, warehouses: Sequence[WarehouseDTO]
    ) -> None:
        Warehouse.objects.bulk_create(
            [
                Warehouse(
                    product=product,
                    position=position,
                    locality=w.locality,
                    quantity=w.quantity,
                    type=w.type,
                )
                for position, w in enumerate(warehouses)
            ]
        )
