"""Design principle compliance tests.

Tests verifying cross-cutting rules of the library:
- FAIL-FIRST Validation
- Immutability
- Exception hierarchy
"""

from __future__ import annotations

from pathlib import Path

import pytest

from criteria.application.reporters.console import ConsoleConfig
from criteria.domain.exceptions import (
    CatalogError,
    CriteriaError,
    ExpectationError,
    InvalidPredicateError,
)
from criteria.domain.model.enums import Color, Size
from criteria.domain.model.filter_result import FilterResult
from criteria.domain.predicates import (
    AndPredicate,
    ColorPredicate,
    NamePredicate,
    NotPredicate,
    OrPredicate,
    SizePredicate,
    WeightPredicate,
    where,
)
from criteria.presentation.api.dsl import Query
from tests.factories import make_product

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid input raises at construction, never falls back silently.

    "WRONG: if not valid: use_default()  # silent fallback
     RIGHT: if not valid: raise InvalidPredicateError(...)  # immediate failure"
    """

    def test_and_rejects_non_predicate(self) -> None:
        with pytest.raises(TypeError, match="right"):
            AndPredicate(ColorPredicate(Color.RED), None)  # type: ignore[arg-type]

    def test_or_rejects_non_predicate(self) -> None:
        with pytest.raises(TypeError, match="left"):
            OrPredicate("red", ColorPredicate(Color.RED))  # type: ignore[arg-type]

    def test_not_rejects_non_predicate(self) -> None:
        with pytest.raises(TypeError):
            NotPredicate(42)  # type: ignore[arg-type]

    def test_color_predicate_rejects_string(self) -> None:
        with pytest.raises(TypeError, match="Color"):
            ColorPredicate("red")  # type: ignore[arg-type]

    def test_size_predicate_rejects_string(self) -> None:
        with pytest.raises(TypeError, match="Size"):
            SizePredicate("large")  # type: ignore[arg-type]

    def test_weight_predicate_negative_limit(self) -> None:
        with pytest.raises(InvalidPredicateError, match="max_weight"):
            WeightPredicate(-0.5)

    def test_name_predicate_empty_pattern(self) -> None:
        with pytest.raises(InvalidPredicateError):
            NamePredicate("")

    def test_where_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError):
            where("not callable")  # type: ignore[arg-type]

    def test_product_empty_name(self) -> None:
        with pytest.raises(ValueError, match="name"):
            make_product(name="")

    def test_product_negative_weight(self) -> None:
        with pytest.raises(ValueError, match="weight"):
            make_product(weight=-1.0)

    def test_filter_result_inconsistent_counts(self) -> None:
        with pytest.raises(ValueError, match="exceed"):
            FilterResult(items=(1, 2, 3), total_count=2, predicate="always")

    def test_console_config_width(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=0)

    def test_catalog_error_requires_reason(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            CatalogError(Path("c.json"), "")

    def test_query_rejects_non_predicate(self) -> None:
        with pytest.raises(TypeError):
            Query.create([]).satisfying(None)  # type: ignore[arg-type]


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Values and predicates are frozen after construction.

    "WRONG: predicate.color = Color.BLUE  # mutable
     RIGHT: predicate = ColorPredicate(Color.BLUE)  # immutable"
    """

    def test_product_frozen(self) -> None:
        product = make_product()
        with pytest.raises(AttributeError):
            product.name = "Milk"  # type: ignore[misc]

    def test_color_predicate_frozen(self) -> None:
        predicate = ColorPredicate(Color.RED)
        with pytest.raises(AttributeError):
            predicate.color = Color.BLUE  # type: ignore[misc]

    def test_and_predicate_frozen(self) -> None:
        predicate = AndPredicate(ColorPredicate(Color.RED), SizePredicate(Size.SMALL))
        with pytest.raises(AttributeError):
            predicate.left = SizePredicate(Size.LARGE)  # type: ignore[misc]

    def test_filter_result_frozen(self) -> None:
        result = FilterResult(items=(), total_count=0, predicate="always")
        with pytest.raises(AttributeError):
            result.total_count = 5  # type: ignore[misc]

    def test_filter_result_items_is_tuple(self) -> None:
        result = FilterResult(items=(1,), total_count=1, predicate="always")
        assert isinstance(result.items, tuple)

    def test_query_frozen(self) -> None:
        query = Query.create([1, 2])
        with pytest.raises(AttributeError):
            query._predicates = ()  # type: ignore[misc]


# =============================================================================
# Exception hierarchy
# =============================================================================


class TestExceptionHierarchy:
    """All public errors derive from CriteriaError.

    Dual inheritance keeps standard except clauses working.
    """

    def test_invalid_predicate_is_value_error(self) -> None:
        assert issubclass(InvalidPredicateError, CriteriaError)
        assert issubclass(InvalidPredicateError, ValueError)

    def test_catalog_error_is_criteria_error(self) -> None:
        assert issubclass(CatalogError, CriteriaError)
        assert not issubclass(CatalogError, ValueError)

    def test_expectation_error_is_assertion_error(self) -> None:
        assert issubclass(ExpectationError, CriteriaError)
        assert issubclass(ExpectationError, AssertionError)

    def test_single_except_catches_library_errors(self) -> None:
        with pytest.raises(CriteriaError):
            WeightPredicate(-1)
        with pytest.raises(CriteriaError):
            raise ExpectationError(("expected 1 item(s) for always, got 0",))

    def test_message_carries_context(self) -> None:
        error = InvalidPredicateError("WeightPredicate", "max_weight must be >= 0, got -1")
        assert str(error) == "WeightPredicate: max_weight must be >= 0, got -1"
