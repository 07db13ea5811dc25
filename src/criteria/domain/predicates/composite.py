"""Composite predicates: AND, OR, NOT composition.

Composites hold their operands by reference. Operands are immutable,
so sharing one predicate between several trees is safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from criteria.domain.predicates.base import require_predicate
from criteria.domain.predicates.leaf import always, never

if TYPE_CHECKING:
    from criteria.domain.predicates.base import Predicate


@dataclass(frozen=True, slots=True)
class AndPredicate[T]:
    """Conjunction of two predicates. Short-circuits on left.

    Attributes:
        left: Evaluated first
        right: Evaluated only if left is satisfied
    """

    left: Predicate[T]
    right: Predicate[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        require_predicate(self.left, "left")
        require_predicate(self.right, "right")

    def is_satisfied(self, item: T) -> bool:
        return self.left.is_satisfied(item) and self.right.is_satisfied(item)

    def __str__(self) -> str:
        return f"({self.left} AND {self.right})"


@dataclass(frozen=True, slots=True)
class OrPredicate[T]:
    """Disjunction of two predicates. Short-circuits on left.

    Attributes:
        left: Evaluated first
        right: Evaluated only if left is not satisfied
    """

    left: Predicate[T]
    right: Predicate[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        require_predicate(self.left, "left")
        require_predicate(self.right, "right")

    def is_satisfied(self, item: T) -> bool:
        return self.left.is_satisfied(item) or self.right.is_satisfied(item)

    def __str__(self) -> str:
        return f"({self.left} OR {self.right})"


@dataclass(frozen=True, slots=True)
class NotPredicate[T]:
    """Negation of a predicate.

    Attributes:
        operand: Predicate to negate
    """

    operand: Predicate[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        require_predicate(self.operand, "operand")

    def is_satisfied(self, item: T) -> bool:
        return not self.operand.is_satisfied(item)

    def __str__(self) -> str:
        return f"NOT {self.operand}"


def and_[T](left: Predicate[T], right: Predicate[T]) -> AndPredicate[T]:
    """Create predicate that requires BOTH predicates to pass (AND).

    Args:
        left: First operand
        right: Second operand

    Returns:
        New predicate; operands are not modified.
    """
    return AndPredicate(left=left, right=right)


def or_[T](left: Predicate[T], right: Predicate[T]) -> OrPredicate[T]:
    """Create predicate that requires EITHER predicate to pass (OR).

    Args:
        left: First operand
        right: Second operand

    Returns:
        New predicate; operands are not modified.
    """
    return OrPredicate(left=left, right=right)


def not_[T](operand: Predicate[T]) -> NotPredicate[T]:
    """Create predicate that negates another predicate (NOT).

    Args:
        operand: Predicate to negate

    Returns:
        Predicate that returns opposite of operand.
    """
    return NotPredicate(operand=operand)


@dataclass(frozen=True, slots=True)
class AllPredicate[T]:
    """Conjunction of any number of predicates, evaluated flat.

    Stops at the first operand that is not satisfied.

    Attributes:
        operands: Predicates in evaluation order (at least two)
    """

    operands: tuple[Predicate[T], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _require_operands(self.operands)

    def is_satisfied(self, item: T) -> bool:
        return all(operand.is_satisfied(item) for operand in self.operands)

    def __str__(self) -> str:
        return "(" + " AND ".join(str(operand) for operand in self.operands) + ")"


@dataclass(frozen=True, slots=True)
class AnyPredicate[T]:
    """Disjunction of any number of predicates, evaluated flat.

    Stops at the first operand that is satisfied.

    Attributes:
        operands: Predicates in evaluation order (at least two)
    """

    operands: tuple[Predicate[T], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _require_operands(self.operands)

    def is_satisfied(self, item: T) -> bool:
        return any(operand.is_satisfied(item) for operand in self.operands)

    def __str__(self) -> str:
        return "(" + " OR ".join(str(operand) for operand in self.operands) + ")"


def _require_operands(operands: object) -> None:
    if not isinstance(operands, tuple):
        raise TypeError(f"operands must be tuple, got {type(operands).__name__}")
    if len(operands) < 2:
        raise ValueError(f"operands must hold at least 2 predicates, got {len(operands)}")
    for i, operand in enumerate(operands):
        require_predicate(operand, f"operands[{i}]")


def all_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """Combine predicates with AND, evaluated left to right.

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate satisfied only if all predicates are satisfied.
        Empty predicates = always True. Single predicate = itself.
    """
    for i, predicate in enumerate(predicates):
        require_predicate(predicate, f"predicates[{i}]")
    if not predicates:
        return always()
    if len(predicates) == 1:
        return predicates[0]
    return AllPredicate(operands=predicates)


def any_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """Combine predicates with OR, evaluated left to right.

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate satisfied if any predicate is satisfied.
        Empty predicates = always False. Single predicate = itself.
    """
    for i, predicate in enumerate(predicates):
        require_predicate(predicate, f"predicates[{i}]")
    if not predicates:
        return never()
    if len(predicates) == 1:
        return predicates[0]
    return AnyPredicate(operands=predicates)
