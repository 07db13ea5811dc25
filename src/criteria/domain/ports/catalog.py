"""Catalog port: source and sink of products."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from criteria.domain.model.product import Product


class CatalogPort(Protocol):
    """Protocol for product catalog storage.

    Contract: products passed to save() come back from load()
    equal and in the same order.
    """

    def load(self) -> tuple[Product, ...]:
        """Read all products.

        Raises:
            CatalogError: If the catalog cannot be read or is malformed
        """
        ...

    def save(self, products: Iterable[Product]) -> None:
        """Replace catalog contents with products.

        Raises:
            CatalogError: If the catalog cannot be written
        """
        ...
