"""Fixed-criteria product filter.

One method per criteria combination. Every new combination needs a new
method here, which is why Filter + predicates exist. Kept as a convenience
facade; each method delegates to the generic Filter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from criteria.application.services.filter import Filter
from criteria.domain.model.product import Product
from criteria.domain.predicates.composite import and_
from criteria.domain.predicates.product_predicates import ColorPredicate, SizePredicate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from criteria.domain.model.enums import Color, Size


class ProductFilter:
    """Static product filters by color, size, or both."""

    @staticmethod
    def by_color(products: Iterable[Product], color: Color) -> tuple[Product, ...]:
        """Select products of given color."""
        return Filter[Product]().apply(products, ColorPredicate(color))

    @staticmethod
    def by_size(products: Iterable[Product], size: Size) -> tuple[Product, ...]:
        """Select products of given size."""
        return Filter[Product]().apply(products, SizePredicate(size))

    @staticmethod
    def by_size_and_color(
        products: Iterable[Product],
        size: Size,
        color: Color,
    ) -> tuple[Product, ...]:
        """Select products matching both size and color."""
        return Filter[Product]().apply(products, and_(SizePredicate(size), ColorPredicate(color)))
