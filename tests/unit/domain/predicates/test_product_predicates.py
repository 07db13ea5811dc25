"""Tests for product predicates.

Tests:
- ColorPredicate, SizePredicate: exact match
- WeightPredicate: inclusive upper bound
- NamePredicate: case-insensitive glob
- FAIL-FIRST construction
"""

import pytest

from criteria.domain.exceptions import CriteriaError, InvalidPredicateError
from criteria.domain.model.enums import Color, Size
from criteria.domain.predicates.product_predicates import (
    ColorPredicate,
    NamePredicate,
    SizePredicate,
    WeightPredicate,
)
from tests.factories import make_product


class TestColorPredicate:
    """Tests for ColorPredicate."""

    @pytest.mark.parametrize("color", list(Color))
    def test_matches_only_its_color(self, color: Color) -> None:
        """Satisfied exactly by products of that color."""
        pred = ColorPredicate(color)

        for other in Color:
            assert pred.is_satisfied(make_product(color=other)) is (other == color)

    def test_rejects_string(self) -> None:
        """Plain string instead of Color raises TypeError."""
        with pytest.raises(TypeError, match="Color"):
            ColorPredicate("green")  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(ColorPredicate(Color.GREEN)) == "color == green"


class TestSizePredicate:
    """Tests for SizePredicate."""

    @pytest.mark.parametrize("size", list(Size))
    def test_matches_only_its_size(self, size: Size) -> None:
        """Satisfied exactly by products of that size."""
        pred = SizePredicate(size)

        for other in Size:
            assert pred.is_satisfied(make_product(size=other)) is (other == size)

    def test_rejects_string(self) -> None:
        """Plain string instead of Size raises TypeError."""
        with pytest.raises(TypeError, match="Size"):
            SizePredicate("large")  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(SizePredicate(Size.LARGE)) == "size == large"


class TestWeightPredicate:
    """Tests for WeightPredicate."""

    def test_bound_is_inclusive(self) -> None:
        """Weight equal to limit satisfies."""
        pred = WeightPredicate(1.0)

        assert pred.is_satisfied(make_product(weight=0.5)) is True
        assert pred.is_satisfied(make_product(weight=1.0)) is True
        assert pred.is_satisfied(make_product(weight=1.01)) is False

    def test_zero_limit(self) -> None:
        """Zero limit keeps only weightless products."""
        pred = WeightPredicate(0)

        assert pred.is_satisfied(make_product(weight=0.0)) is True
        assert pred.is_satisfied(make_product(weight=0.1)) is False

    def test_negative_limit_raises(self) -> None:
        """Negative limit raises InvalidPredicateError."""
        with pytest.raises(InvalidPredicateError, match="max_weight") as exc_info:
            WeightPredicate(-1.0)

        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, CriteriaError)
        assert exc_info.value.predicate == "WeightPredicate"

    @pytest.mark.parametrize("limit", [float("nan"), float("inf")])
    def test_non_finite_limit_raises(self, limit: float) -> None:
        with pytest.raises(InvalidPredicateError, match="finite"):
            WeightPredicate(limit)

    def test_str(self) -> None:
        assert str(WeightPredicate(1.5)) == "weight <= 1.5"


class TestNamePredicate:
    """Tests for NamePredicate."""

    def test_exact_name(self) -> None:
        """Pattern without wildcards matches whole name."""
        pred = NamePredicate("Milk")

        assert pred.is_satisfied(make_product("Milk")) is True
        assert pred.is_satisfied(make_product("Milkshake")) is False

    def test_case_insensitive(self) -> None:
        """Matching ignores case."""
        pred = NamePredicate("b*")

        assert pred.is_satisfied(make_product("Bread")) is True
        assert pred.is_satisfied(make_product("bread")) is True
        assert pred.is_satisfied(make_product("Water")) is False

    def test_glob_question_mark(self) -> None:
        """? matches exactly one character."""
        pred = NamePredicate("T?a")

        assert pred.is_satisfied(make_product("Tea")) is True
        assert pred.is_satisfied(make_product("Teaa")) is False

    def test_empty_pattern_raises(self) -> None:
        """Empty pattern raises InvalidPredicateError."""
        with pytest.raises(InvalidPredicateError, match="pattern"):
            NamePredicate("")

    def test_str(self) -> None:
        assert str(NamePredicate("B*")) == "name ~ 'B*'"
