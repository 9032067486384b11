"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.core.adapters import ControllerView
from modules.products.factories import (
    make_add_product_controller,
    make_delete_product_controller,
    make_edit_product_controller,
    make_find_product_controller,
)

urlpatterns = [
    path(
        "products/",
        ControllerView.as_view(routes={"post": make_add_product_controller()}),
        name="product-list",
    ),
    path(
        "products/<str:sku>/",
        ControllerView.as_view(
            routes={
                "get": make_find_product_controller(),
                "put": make_edit_product_controller(),
                "delete": make_delete_product_controller(),
            }
        ),
        name="product-detail",
    ),
]
