"""Filter pass result."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterResult[T]:
    """Result of applying one predicate to one collection.

    Produced by Filter.evaluate(). Consumed by reporters.

    Attributes:
        items: Matching items in original order
        total_count: Size of the input collection
        predicate: Human-readable predicate description
    """

    items: tuple[T, ...]
    total_count: int
    predicate: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {self.total_count}")
        if len(self.items) > self.total_count:
            raise ValueError(
                f"matched items ({len(self.items)}) exceed total_count ({self.total_count})"
            )
        if not self.predicate:
            raise ValueError("predicate must not be empty")

    @property
    def matched_count(self) -> int:
        """Number of items that satisfied the predicate."""
        return len(self.items)

    @property
    def rejected_count(self) -> int:
        """Number of items that did not satisfy the predicate."""
        return self.total_count - len(self.items)

    @property
    def is_empty(self) -> bool:
        """True if nothing matched."""
        return not self.items
