"""Product domain errors.

Returned on the left arm of an ``Either`` by the product use-cases when a
business rule rejects the request.  The controllers pass them through to
the client unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from modules.core.errors import DomainError


@dataclass(frozen=True)
class ProductAlreadyExistsError(DomainError):
    """A live product with the same SKU already exists."""

    def format_message(self) -> str:
        return "Product already exists"


@dataclass(frozen=True)
class ProductNotFoundError(DomainError):
    """No live product matches the requested SKU."""

    def format_message(self) -> str:
        return "Product not found"
