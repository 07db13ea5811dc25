"""Tests for generic leaf predicates.

Tests:
- always / never constants
- where: callable adapter
- Predicate protocol runtime check
"""

import pytest

from criteria.domain.predicates.base import Predicate, require_predicate
from criteria.domain.predicates.leaf import CallablePredicate, always, never, where
from tests.factories import make_product


class TestConstants:
    """Tests for always() and never()."""

    @pytest.mark.parametrize("item", [make_product(), 0, None, "x"])
    def test_always_true(self, item: object) -> None:
        """always() is satisfied by any item."""
        assert always().is_satisfied(item) is True

    @pytest.mark.parametrize("item", [make_product(), 0, None, "x"])
    def test_never_false(self, item: object) -> None:
        """never() is satisfied by no item."""
        assert never().is_satisfied(item) is False

    def test_str(self) -> None:
        """Constants describe themselves."""
        assert str(always()) == "always"
        assert str(never()) == "never"


class TestWhere:
    """Tests for where() adapter."""

    def test_where_delegates(self) -> None:
        """where() calls the wrapped function."""
        even = where(lambda n: n % 2 == 0, "even")

        assert even.is_satisfied(4) is True
        assert even.is_satisfied(3) is False

    def test_where_coerces_to_bool(self) -> None:
        """Truthy results become True."""
        pred = where(lambda s: s, "non-empty")

        assert pred.is_satisfied("abc") is True
        assert pred.is_satisfied("") is False

    def test_where_default_description(self) -> None:
        """Description defaults to function name."""

        def is_heavy(item: object) -> bool:
            return False

        assert str(where(is_heavy)) == "is_heavy"

    def test_where_rejects_non_callable(self) -> None:
        """Non-callable func raises TypeError."""
        with pytest.raises(TypeError, match="callable"):
            CallablePredicate(func=42, description="x")  # type: ignore[arg-type]

    def test_where_rejects_empty_description(self) -> None:
        """Empty description raises ValueError."""
        with pytest.raises(ValueError, match="description"):
            where(lambda x: True, "")


class TestPredicateProtocol:
    """Tests for the Predicate runtime protocol."""

    def test_any_object_with_is_satisfied_is_predicate(self) -> None:
        """Structural typing: no base class needed."""

        class Custom:
            def is_satisfied(self, item: object) -> bool:
                return True

        assert isinstance(Custom(), Predicate)
        require_predicate(Custom(), "custom")

    def test_plain_function_is_not_predicate(self) -> None:
        """Bare callables must be wrapped with where()."""
        assert not isinstance(lambda x: True, Predicate)

    def test_require_predicate_names_argument(self) -> None:
        """Error message names the argument and actual type."""
        with pytest.raises(TypeError, match="flt must implement is_satisfied\\(\\), got int"):
            require_predicate(1, "flt")
