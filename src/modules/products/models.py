"""Product and warehouse models.

Business rules implemented:
- A live product's ``sku`` is unique; soft-deleted products free their SKU.
- A product's stock is spread over ordered ``Warehouse`` rows.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel, SoftDeleteModel


class Product(SoftDeleteModel):
    """Product aggregate root.

    ``sku`` is the public identifier used by the API.  Uniqueness is
    enforced only among live rows, so a deleted SKU can be registered again.
    """

    sku = models.PositiveBigIntegerField(validators=[MinValueValidator(1)])
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "products"
        ordering = ["sku"]
        constraints = [
            models.UniqueConstraint(
                fields=["sku"],
                condition=models.Q(deleted_at__isnull=True),
                name="products_live_sku_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.sku} - {self.name}"


class Warehouse(BaseModel):
    """Stock held for a product at one location."""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="warehouses",
    )
    position = models.PositiveSmallIntegerField(default=0)
    locality = models.CharField(max_length=120)
    quantity = models.PositiveIntegerField(default=0)
    type = models.CharField(max_length=60)

    class Meta:
        db_table = "product_warehouses"
        ordering = ["position"]

    def __str__(self) -> str:
        return f"{self.locality}/{self.type}: {self.quantity}"
