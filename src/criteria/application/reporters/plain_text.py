"""Plain text reporter: FilterResult -> plain string.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from criteria.domain.model.filter_result import FilterResult


class PlainTextReporter:
    """Plain text reporter.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, *, width: int = 70) -> None:
        """Initialize reporter.

        Args:
            width: Length of separator lines (must be >= 10)

        Raises:
            ValueError: If width < 10
        """
        if width < 10:
            raise ValueError(f"width must be >= 10, got {width}")
        self._width = width

    def report(self, result: FilterResult) -> str:
        """Format filter result as plain text.

        Args:
            result: Filter result to format.

        Returns:
            Multi-line string with header, summary and matched items.
        """
        lines: list[str] = []
        lines.extend(self._header())
        lines.extend(self._summary(result))
        lines.extend(self._items(result))
        lines.append("=" * self._width)
        return "\n".join(lines) + "\n"

    def _header(self) -> list[str]:
        """Report header."""
        return [
            "=" * self._width,
            "Filter Results",
            "=" * self._width,
        ]

    def _summary(self, result: FilterResult) -> list[str]:
        """Summary section."""
        return [
            f"Predicate: {result.predicate}",
            f"Matched: {result.matched_count} of {result.total_count}",
        ]

    def _items(self, result: FilterResult) -> list[str]:
        """Matched items section."""
        if result.is_empty:
            return ["-" * self._width, "No matching items."]

        lines = ["-" * self._width]
        for i, item in enumerate(result.items, start=1):
            lines.append(f"{i}. {item}")
        return lines
