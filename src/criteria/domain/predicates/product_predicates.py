"""Product predicates.

Comparison value is fixed at construction; no runtime reconfiguration.
"""

import math
from dataclasses import dataclass
from fnmatch import fnmatchcase

from criteria.domain.exceptions import InvalidPredicateError
from criteria.domain.model.enums import Color, Size
from criteria.domain.model.product import Product


@dataclass(frozen=True, slots=True)
class ColorPredicate:
    """Product has exact color.

    Attributes:
        color: Required color
    """

    color: Color

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.color, Color):
            raise TypeError(f"color must be Color, got {type(self.color).__name__}")

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __str__(self) -> str:
        return f"color == {self.color.value}"


@dataclass(frozen=True, slots=True)
class SizePredicate:
    """Product has exact size.

    Attributes:
        size: Required size
    """

    size: Size

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.size, Size):
            raise TypeError(f"size must be Size, got {type(self.size).__name__}")

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __str__(self) -> str:
        return f"size == {self.size.value}"


@dataclass(frozen=True, slots=True)
class WeightPredicate:
    """Product weighs at most max_weight (inclusive).

    Attributes:
        max_weight: Upper bound in kilograms (finite, >= 0)
    """

    max_weight: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not math.isfinite(self.max_weight) or self.max_weight < 0:
            raise InvalidPredicateError(
                "WeightPredicate", f"max_weight must be finite and >= 0, got {self.max_weight}"
            )

    def is_satisfied(self, item: Product) -> bool:
        return item.weight <= self.max_weight

    def __str__(self) -> str:
        return f"weight <= {self.max_weight:g}"


@dataclass(frozen=True, slots=True)
class NamePredicate:
    """Product name matches glob pattern, case-insensitive.

    Uses fnmatch: * matches any characters, ? matches one character.

    Attributes:
        pattern: Glob pattern (e.g. "B*", "*milk*")
    """

    pattern: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.pattern:
            raise InvalidPredicateError("NamePredicate", "pattern must not be empty")

    def is_satisfied(self, item: Product) -> bool:
        return fnmatchcase(item.name.lower(), self.pattern.lower())

    def __str__(self) -> str:
        return f"name ~ {self.pattern!r}"
