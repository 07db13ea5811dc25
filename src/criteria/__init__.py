"""criteria - composable predicates and an order-preserving filter."""

__version__ = "0.1.0"

from criteria.application.services import Filter, filter_items
from criteria.domain.predicates import Predicate, all_of, and_, any_of, not_, or_, where

__all__ = [
    "Filter",
    "Predicate",
    "__version__",
    "all_of",
    "and_",
    "any_of",
    "filter_items",
    "not_",
    "or_",
    "where",
]
