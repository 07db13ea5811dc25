"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from criteria.domain.model.filter_result import FilterResult


class ReporterProtocol(Protocol):
    """Protocol for filter result reporters.

    Output is str, not print(). Caller decides destination.
    All reporters implement the same interface.

    Example:
        class CountReporter:
            def report(self, result: FilterResult) -> str:
                return f"{result.matched_count}/{result.total_count}"
    """

    def report(self, result: FilterResult) -> str:
        """Format filter result as string.

        Args:
            result: Filter result to format.

        Returns:
            Formatted string representation.
        """
        ...
