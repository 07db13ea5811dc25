"""Console reporter: FilterResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from criteria.domain.model.product import Product

if TYPE_CHECKING:
    from criteria.domain.model.filter_result import FilterResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience). Immutable (frozen dataclass).

    Attributes:
        max_items: Max items to display. None = unlimited.
        show_summary: Show predicate and matched/total line.
        width: Console width in characters (must be >= 40).
    """

    max_items: int | None = None
    show_summary: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_items is not None and self.max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {self.max_items}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    Shows ALL items unless user explicitly limits via config.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: FilterResult) -> str:
        """Format filter result as rich formatted string.

        Args:
            result: Filter result to format.

        Returns:
            Formatted string with colors and a table of matches.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            highlight=False,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]FILTER RESULT[/bold]")
        console.print()

        if self._config.show_summary:
            self._render_summary(console, result)

        if result.is_empty:
            console.print("[dim]No matching items.[/dim]")
        else:
            self._render_items(console, result)

        console.print()
        return output.getvalue()

    def _render_summary(self, console: Console, result: FilterResult) -> None:
        """Render predicate and counts."""
        console.print(f"[bold]Predicate:[/bold] {escape(result.predicate)}")
        console.print(f"[bold]Matched:[/bold] {result.matched_count} of {result.total_count}")
        console.print()

    def _render_items(self, console: Console, result: FilterResult) -> None:
        """Render matched items as a table."""
        shown = result.items
        if self._config.max_items is not None:
            shown = shown[: self._config.max_items]

        if all(isinstance(item, Product) for item in shown):
            table = self._product_table(shown)
        else:
            table = self._generic_table(shown)
        console.print(table)

        hidden = result.matched_count - len(shown)
        if hidden:
            console.print(f"[dim]... and {hidden} more[/dim]")

    def _product_table(self, products: tuple[Product, ...]) -> Table:
        """Create table with one column per product field."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Color")
        table.add_column("Size")
        table.add_column("Weight", justify="right")

        for i, product in enumerate(products, start=1):
            table.add_row(
                str(i),
                escape(product.name),
                product.color.value,
                product.size.value,
                f"{product.weight:g}",
            )
        return table

    def _generic_table(self, items: tuple[object, ...]) -> Table:
        """Create single-column table using str(item)."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim")
        table.add_column("Item", style="cyan")

        for i, item in enumerate(items, start=1):
            table.add_row(str(i), escape(str(item)))
        return table
