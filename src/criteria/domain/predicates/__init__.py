"""Domain predicates.

Predicates are immutable objects exposing is_satisfied(item) -> bool.
Composites are predicates too, so trees nest to any depth.

Usage:
    from criteria.domain.predicates import ColorPredicate, SizePredicate, and_, or_

    red_or_large_blue = or_(
        ColorPredicate(Color.RED),
        and_(SizePredicate(Size.LARGE), ColorPredicate(Color.BLUE)),
    )
"""

from criteria.domain.predicates.base import Predicate, PredicateFunc, require_predicate
from criteria.domain.predicates.composite import (
    AllPredicate,
    AndPredicate,
    AnyPredicate,
    NotPredicate,
    OrPredicate,
    all_of,
    and_,
    any_of,
    not_,
    or_,
)
from criteria.domain.predicates.leaf import (
    CallablePredicate,
    ConstantPredicate,
    always,
    never,
    where,
)
from criteria.domain.predicates.product_predicates import (
    ColorPredicate,
    NamePredicate,
    SizePredicate,
    WeightPredicate,
)

__all__ = [
    # Protocol
    "Predicate",
    "PredicateFunc",
    "require_predicate",
    # Leaf
    "CallablePredicate",
    "ConstantPredicate",
    "always",
    "never",
    "where",
    # Composite
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    "AllPredicate",
    "AnyPredicate",
    "and_",
    "or_",
    "not_",
    "all_of",
    "any_of",
    # Product
    "ColorPredicate",
    "SizePredicate",
    "WeightPredicate",
    "NamePredicate",
]
