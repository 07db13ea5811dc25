"""Generic leaf predicates: constants and callable adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from criteria.domain.predicates.base import PredicateFunc


@dataclass(frozen=True, slots=True)
class ConstantPredicate:
    """Predicate with a fixed answer, regardless of item.

    Attributes:
        value: Answer returned for every item
    """

    value: bool

    def is_satisfied(self, item: object) -> bool:
        return self.value

    def __str__(self) -> str:
        return "always" if self.value else "never"


@dataclass(frozen=True, slots=True)
class CallablePredicate[T]:
    """Adapter exposing a plain function as a predicate.

    Attributes:
        func: Pure function item -> bool
        description: Text used by reporters
    """

    func: PredicateFunc[T]
    description: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.func):
            raise TypeError(f"func must be callable, got {type(self.func).__name__}")
        if not self.description:
            raise ValueError("description must not be empty")

    def is_satisfied(self, item: T) -> bool:
        return bool(self.func(item))

    def __str__(self) -> str:
        return self.description


def always() -> ConstantPredicate:
    """Create predicate satisfied by every item."""
    return ConstantPredicate(value=True)


def never() -> ConstantPredicate:
    """Create predicate satisfied by no item."""
    return ConstantPredicate(value=False)


def where[T](func: PredicateFunc[T], description: str | None = None) -> CallablePredicate[T]:
    """Wrap a function as a predicate.

    Args:
        func: Pure function item -> bool
        description: Text for reports. Defaults to the function name.

    Returns:
        Predicate delegating to func
    """
    if description is None:
        description = getattr(func, "__name__", "") or repr(func)
    return CallablePredicate(func=func, description=description)
