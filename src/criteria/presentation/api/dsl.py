"""Fluent API (DSL) for predicate queries.

Example:
    query = ProductQuery.create(products).with_color(Color.GREEN)
    query.all()
    query.should().have_count(2).assert_check()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from criteria.application.services.filter import Filter
from criteria.domain.exceptions import ExpectationError
from criteria.domain.predicates.base import require_predicate
from criteria.domain.predicates.composite import all_of
from criteria.domain.predicates.product_predicates import (
    ColorPredicate,
    NamePredicate,
    SizePredicate,
    WeightPredicate,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from criteria.domain.model.enums import Color, Size
    from criteria.domain.model.product import Product
    from criteria.domain.predicates.base import Predicate


@dataclass(frozen=True, slots=True)
class Query[T]:
    """Immutable query builder over a collection.

    Each satisfying() call returns a new query; predicates combine with AND.
    """

    _items: tuple[T, ...]
    _predicates: tuple[Predicate[T], ...] = ()

    @classmethod
    def create(cls, items: Iterable[T]) -> Self:
        """Create new query over items.

        Args:
            items: Collection to query (copied into a tuple)

        Returns:
            Fresh query with no predicates
        """
        return cls(_items=tuple(items))

    def satisfying(self, predicate: Predicate[T]) -> Self:
        """Return new query with additional predicate.

        Args:
            predicate: Predicate every result must satisfy

        Returns:
            New query (immutable)

        Raises:
            TypeError: If predicate has no is_satisfied method
        """
        require_predicate(predicate, "predicate")
        return type(self)(
            _items=self._items,
            _predicates=(*self._predicates, predicate),
        )

    def predicate(self) -> Predicate[T]:
        """Combined predicate. No predicates = always true."""
        return all_of(*self._predicates)

    def all(self) -> tuple[T, ...]:
        """Execute query and return matching items in original order."""
        return Filter[T]().apply(self._items, self.predicate())

    def count(self) -> int:
        """Number of matching items."""
        return len(self.all())

    def first(self) -> T | None:
        """First matching item, or None if nothing matches."""
        predicate = self.predicate()
        return next((item for item in self._items if predicate.is_satisfied(item)), None)

    def should(self) -> QueryAssertion[T]:
        """Transition to assertion mode.

        Executes the query and returns assertion builder.
        """
        return QueryAssertion(_items=self.all(), _description=str(self.predicate()))


@dataclass(frozen=True, slots=True)
class ProductQuery(Query["Product"]):
    """Query builder with shortcuts for product predicates."""

    def with_color(self, color: Color) -> Self:
        """Keep products of given color."""
        return self.satisfying(ColorPredicate(color))

    def with_size(self, size: Size) -> Self:
        """Keep products of given size."""
        return self.satisfying(SizePredicate(size))

    def lighter_than(self, max_weight: float) -> Self:
        """Keep products weighing at most max_weight."""
        return self.satisfying(WeightPredicate(max_weight))

    def named(self, pattern: str) -> Self:
        """Keep products whose name matches glob pattern."""
        return self.satisfying(NamePredicate(pattern))


@dataclass(frozen=True, slots=True)
class QueryAssertion[T]:
    """Immutable assertion builder over query results.

    Supports chaining expectations before execution.
    """

    _items: tuple[T, ...]
    _description: str
    _checks: tuple[Callable[[tuple[T, ...]], str | None], ...] = ()

    def _with_check(self, check: Callable[[tuple[T, ...]], str | None]) -> QueryAssertion[T]:
        """Return new assertion with additional check (immutable)."""
        return QueryAssertion(
            _items=self._items,
            _description=self._description,
            _checks=(*self._checks, check),
        )

    def be_empty(self) -> QueryAssertion[T]:
        """Expect no matching items."""
        description = self._description

        def check(items: tuple[T, ...]) -> str | None:
            if items:
                return f"expected no items for {description}, got {len(items)}"
            return None

        return self._with_check(check)

    def not_be_empty(self) -> QueryAssertion[T]:
        """Expect at least one matching item."""
        description = self._description

        def check(items: tuple[T, ...]) -> str | None:
            if not items:
                return f"expected at least one item for {description}, got none"
            return None

        return self._with_check(check)

    def have_count(self, expected: int) -> QueryAssertion[T]:
        """Expect exactly expected matching items.

        Raises:
            ValueError: If expected < 0
        """
        if expected < 0:
            raise ValueError(f"expected must be >= 0, got {expected}")
        description = self._description

        def check(items: tuple[T, ...]) -> str | None:
            if len(items) != expected:
                return f"expected {expected} item(s) for {description}, got {len(items)}"
            return None

        return self._with_check(check)

    def all_satisfy(self, predicate: Predicate[T]) -> QueryAssertion[T]:
        """Expect every matching item to also satisfy predicate."""
        require_predicate(predicate, "predicate")

        def check(items: tuple[T, ...]) -> str | None:
            failing = [item for item in items if not predicate.is_satisfied(item)]
            if failing:
                return f"{len(failing)} item(s) do not satisfy {predicate}: {failing[0]}"
            return None

        return self._with_check(check)

    def none_satisfy(self, predicate: Predicate[T]) -> QueryAssertion[T]:
        """Expect no matching item to satisfy predicate."""
        require_predicate(predicate, "predicate")

        def check(items: tuple[T, ...]) -> str | None:
            offending = [item for item in items if predicate.is_satisfied(item)]
            if offending:
                return f"{len(offending)} item(s) satisfy {predicate}: {offending[0]}"
            return None

        return self._with_check(check)

    def collect(self) -> tuple[str, ...]:
        """Execute checks and return failure descriptions."""
        failures: list[str] = []
        for check in self._checks:
            failure = check(self._items)
            if failure is not None:
                failures.append(failure)
        return tuple(failures)

    def assert_check(self) -> None:
        """Execute checks and raise on failures.

        Raises:
            ExpectationError: If any expectation fails
        """
        failures = self.collect()
        if failures:
            raise ExpectationError(failures)

    def is_valid(self) -> bool:
        """True if all expectations hold."""
        return not self.collect()

    @property
    def item_count(self) -> int:
        """Number of items being checked."""
        return len(self._items)
