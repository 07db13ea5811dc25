"""Application layer for predicate filtering.

Components:
- services: Filter (generic), ProductFilter (fixed criteria facade)
- reporters: Output formatting (PlainText, JSON, Console)
"""

from criteria.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
)
from criteria.application.services import Filter, ProductFilter, filter_items

__all__ = [
    # Services
    "Filter",
    "ProductFilter",
    "filter_items",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
]
