"""Predicate protocol.

A predicate is anything exposing is_satisfied(item) -> bool.
Filter depends only on this capability, so new predicate variants
never require changes to Filter or to existing predicates.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

type PredicateFunc[T] = Callable[[T], bool]


@runtime_checkable
class Predicate[T](Protocol):
    """Boolean test over a single item.

    Implementations must be pure: no side effects, no mutable state,
    same answer for the same item on every call.
    """

    def is_satisfied(self, item: T) -> bool:
        """Check item against this predicate.

        Args:
            item: Item to test

        Returns:
            True if item satisfies the predicate
        """
        ...


def require_predicate(value: object, name: str) -> None:
    """Validate that value implements Predicate. FAIL-FIRST.

    Args:
        value: Object to check
        name: Argument name for the error message

    Raises:
        TypeError: If value has no is_satisfied method
    """
    if not isinstance(value, Predicate):
        raise TypeError(f"{name} must implement is_satisfied(), got {type(value).__name__}")
