"""Product use-cases package."""

from modules.products.use_cases.db_use_cases import (
    DbAddProduct,
    DbDeleteProduct,
    DbEditProduct,
    DbFindProductBySku,
)
from modules.products.use_cases.interfaces import (
    IAddProductUseCase,
    IDeleteProductUseCase,
    IEditProductUseCase,
    IFindProductBySkuUseCase,
)

__all__ = [
    "DbAddProduct",
    "DbDeleteProduct",
    "DbEditProduct",
    "DbFindProductBySku",
    "IAddProductUseCase",
    "IDeleteProductUseCase",
    "IEditProductUseCase",
    "IFindProductBySkuUseCase",
]
