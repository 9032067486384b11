"""Composition root for the product controllers.

Wires each controller to its use-case and the Django repository.
"""

from __future__ import annotations

from modules.products.controllers import (
    AddProductController,
    DeleteProductController,
    EditProductController,
    FindProductController,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.use_cases.db_use_cases import (
    DbAddProduct,
    DbDeleteProduct,
    DbEditProduct,
    DbFindProductBySku,
)


def make_add_product_controller() -> AddProductController:
    return AddProductController(DbAddProduct(ProductDjangoRepository()))


def make_edit_product_controller() -> EditProductController:
    return EditProductController(DbEditProduct(ProductDjangoRepository()))


def make_find_product_controller() -> FindProductController:
    return FindProductController(DbFindProductBySku(ProductDjangoRepository()))


def make_delete_product_controller() -> DeleteProductController:
    return DeleteProductController(DbDeleteProduct(ProductDjangoRepository()))
