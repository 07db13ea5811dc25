"""Application services for predicate filtering.

Filter is the generic service; ProductFilter is a fixed-criteria facade.
"""

from criteria.application.services.filter import Filter, filter_items
from criteria.application.services.product_filter import ProductFilter

__all__ = [
    "Filter",
    "ProductFilter",
    "filter_items",
]
