"""Generic filter service: collection + predicate -> ordered subsequence.

Stateless. Depends only on the Predicate capability (is_satisfied),
so adding a predicate variant never changes this module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from criteria.domain.model.filter_result import FilterResult
from criteria.domain.predicates.base import require_predicate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from criteria.domain.predicates.base import Predicate


class Filter[T]:
    """Selects items satisfying a predicate, preserving input order.

    Never mutates the input collection or its items.
    No match is not an error: the result is simply empty.
    """

    def apply(self, items: Iterable[T], predicate: Predicate[T]) -> tuple[T, ...]:
        """Select matching items.

        Args:
            items: Collection to filter (any iterable, consumed once)
            predicate: Test applied to each item

        Returns:
            Tuple of satisfying items in original relative order.

        Raises:
            TypeError: If predicate has no is_satisfied method
        """
        require_predicate(predicate, "predicate")
        return tuple(item for item in items if predicate.is_satisfied(item))

    def evaluate(self, items: Iterable[T], predicate: Predicate[T]) -> FilterResult[T]:
        """Select matching items and record the pass for reporting.

        Args:
            items: Collection to filter (any iterable, consumed once)
            predicate: Test applied to each item

        Returns:
            FilterResult with matches, input size and predicate description.
        """
        snapshot = tuple(items)
        matched = self.apply(snapshot, predicate)
        return FilterResult(
            items=matched,
            total_count=len(snapshot),
            predicate=str(predicate),
        )


def filter_items[T](items: Iterable[T], predicate: Predicate[T]) -> tuple[T, ...]:
    """Shortcut for Filter().apply(items, predicate)."""
    return Filter[T]().apply(items, predicate)
