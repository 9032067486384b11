"""Product DTOs for the use-case layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the controllers and the use-cases.
DTOs are immutable (``frozen=True``).

- ``WarehouseDTO``: one stock location.
- ``AddProductDTO``: input for product creation.
- ``EditProductDTO``: input for replacing a product's name and stock.
- ``ProductOutputDTO``: output with inventory totals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product, Warehouse


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class WarehouseDTO(BaseModel):
    """Immutable stock location.

    ``locality`` and ``type`` are normalised to uppercase so that
    "sp" and "SP" name the same place.
    """

    model_config = ConfigDict(frozen=True)

    locality: str
    quantity: int
    type: str

    @field_validator("locality", "type")
    @classmethod
    def normalise_label(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v

    @classmethod
    def from_entity(cls, warehouse: Warehouse) -> WarehouseDTO:
        return cls(
            locality=warehouse.locality,
            quantity=warehouse.quantity,
            type=warehouse.type,
        )


class AddProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    sku: int
    name: str
    warehouses: List[WarehouseDTO]


class EditProductDTO(BaseModel):
    """Immutable DTO for product edits.

    ``sku`` identifies the product (taken from the path); ``name`` and
    ``warehouses`` replace the stored values.
    """

    model_config = ConfigDict(frozen=True)

    sku: int
    name: str
    warehouses: List[WarehouseDTO]


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class InventoryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    warehouses: List[WarehouseDTO]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def quantity(self) -> int:
        return sum(w.quantity for w in self.warehouses)


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses.

    A product is marketable while any warehouse holds stock.
    """

    model_config = ConfigDict(frozen=True)

    sku: int
    name: str
    inventory: InventoryDTO

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_marketable(self) -> bool:
        return self.inventory.quantity > 0

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            sku=product.sku,
            name=product.name,
            inventory=InventoryDTO(
                warehouses=[
                    WarehouseDTO.from_entity(w) for w in product.warehouses.all()
                ]
            ),
        )
