"""JSON reporter: FilterResult -> JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from criteria.domain.model.product import Product

if TYPE_CHECKING:
    from criteria.domain.model.filter_result import FilterResult


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Products are serialized field by field. Other items fall back to str().
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: FilterResult) -> str:
        """Format filter result as JSON string.

        Args:
            result: Filter result to format.

        Returns:
            JSON string with predicate, summary and items.
        """
        data = {
            "predicate": result.predicate,
            "summary": {
                "total": result.total_count,
                "matched": result.matched_count,
                "rejected": result.rejected_count,
            },
            "items": [_item_to_json(item) for item in result.items],
        }
        return json.dumps(data, indent=self._indent)


def _item_to_json(item: object) -> object:
    """Convert item to JSON-serializable value."""
    match item:
        case Product():
            return item.to_dict()
        case str() | int() | float() | bool() | None:
            return item
        case _:
            return str(item)
