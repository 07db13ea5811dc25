"""criteria domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, fnmatch, functools, collections.abc
"""

from criteria.domain.exceptions import (
    CatalogError,
    CriteriaError,
    ExpectationError,
    InvalidPredicateError,
)
from criteria.domain.model import (
    Color,
    FilterResult,
    Product,
    Size,
)
from criteria.domain.ports import ReporterProtocol

__all__ = [
    # Exceptions
    "CriteriaError",
    "CatalogError",
    "ExpectationError",
    "InvalidPredicateError",
    # Enums
    "Color",
    "Size",
    # Value objects
    "Product",
    "FilterResult",
    # Ports
    "ReporterProtocol",
]
