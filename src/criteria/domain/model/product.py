"""Product value object."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from criteria.domain.model.enums import Color, Size


@dataclass(frozen=True, slots=True)
class Product:
    """Catalog item filtered by product predicates.

    Attributes:
        name: Display name (must not be empty)
        color: Categorical color
        size: Categorical size
        weight: Weight in kilograms (finite, >= 0)
    """

    name: str
    color: Color
    size: Size
    weight: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not isinstance(self.color, Color):
            raise TypeError(f"color must be Color, got {type(self.color).__name__}")
        if not isinstance(self.size, Size):
            raise TypeError(f"size must be Size, got {type(self.size).__name__}")
        if not math.isfinite(self.weight):
            raise ValueError(f"weight must be finite, got {self.weight}")
        if self.weight < 0:
            raise ValueError(f"weight must be >= 0, got {self.weight}")

    def __str__(self) -> str:
        """Format as name (color, size)."""
        return f"{self.name} ({self.color.value}, {self.size.value})"

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "color": self.color.value,
            "size": self.size.value,
            "weight": self.weight,
        }

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> Product:
        """Build product from a decoded JSON object.

        Args:
            raw: Mapping with name, color, size and optional weight

        Returns:
            Validated Product

        Raises:
            ValueError: If a field is missing or has an unknown value
        """
        missing = [key for key in ("name", "color", "size") if key not in raw]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")

        name = raw["name"]
        if not isinstance(name, str):
            raise ValueError(f"name must be a string, got {type(name).__name__}")

        weight = raw.get("weight", 0.0)
        if isinstance(weight, bool) or not isinstance(weight, int | float):
            raise ValueError(f"weight must be a number, got {type(weight).__name__}")

        try:
            weight = float(weight)
        except OverflowError as e:
            raise ValueError(f"weight out of range: {e}") from e

        # Enum lookup raises ValueError for unknown values
        return cls(
            name=name,
            color=Color(raw["color"]),
            size=Size(raw["size"]),
            weight=weight,
        )
