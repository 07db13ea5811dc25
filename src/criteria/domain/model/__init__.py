"""Domain model: immutable value objects."""

from criteria.domain.model.enums import Color, Size
from criteria.domain.model.filter_result import FilterResult
from criteria.domain.model.product import Product

__all__ = [
    "Color",
    "FilterResult",
    "Product",
    "Size",
]
