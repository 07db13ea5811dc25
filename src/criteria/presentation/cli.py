"""Command line interface for criteria.

Commands:
    criteria demo                 Run the built-in product catalog scenarios
    criteria filter CATALOG ...   Filter a JSON product catalog

Filter flags build leaf predicates. Repeated values of one flag are OR-ed
(a product has exactly one color). Different flags are AND-ed, or OR-ed
with --any. --negate wraps the result in NOT.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from criteria.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
)
from criteria.application.services import Filter, ProductFilter
from criteria.domain.exceptions import CriteriaError
from criteria.domain.model import Color, FilterResult, Product, Size
from criteria.domain.predicates import (
    ColorPredicate,
    NamePredicate,
    SizePredicate,
    WeightPredicate,
    all_of,
    and_,
    any_of,
    not_,
    or_,
)
from criteria.infrastructure.adapters.json_catalog import JsonCatalog

if TYPE_CHECKING:
    from collections.abc import Sequence

    from criteria.domain.ports.reporter import ReporterProtocol
    from criteria.domain.predicates import Predicate

DEMO_PRODUCTS: tuple[Product, ...] = (
    Product("Bread", Color.RED, Size.SMALL, 0.5),
    Product("Milk", Color.GREEN, Size.SMALL, 1.0),
    Product("Water", Color.BLUE, Size.LARGE, 1.5),
    Product("Coffee", Color.GREEN, Size.MEDIUM, 0.25),
    Product("Tea", Color.GREEN, Size.SMALL, 0.1),
    Product("Juice", Color.BLUE, Size.MEDIUM, 1.0),
    Product("Cherries", Color.RED, Size.LARGE, 0.75),
)

FORMATS = ("text", "json", "console")


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser with demo and filter subcommands."""
    parser = argparse.ArgumentParser(
        prog="criteria",
        description="Filter product catalogs with composable predicates.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run the built-in catalog scenarios")
    _add_format_argument(demo_parser)

    filter_parser = subparsers.add_parser("filter", help="Filter a JSON product catalog")
    filter_parser.add_argument("catalog", type=Path, help="Path to JSON catalog")
    filter_parser.add_argument(
        "--color",
        action="append",
        choices=[c.value for c in Color],
        default=[],
        help="Keep products of this color (repeatable)",
    )
    filter_parser.add_argument(
        "--size",
        action="append",
        choices=[s.value for s in Size],
        default=[],
        help="Keep products of this size (repeatable)",
    )
    filter_parser.add_argument("--max-weight", type=float, help="Keep products weighing at most this")
    filter_parser.add_argument("--name", help="Keep products whose name matches glob pattern")
    filter_parser.add_argument(
        "--any",
        action="store_true",
        help="Combine different flags with OR instead of AND",
    )
    filter_parser.add_argument("--negate", action="store_true", help="Invert the combined predicate")
    _add_format_argument(filter_parser)
    filter_parser.add_argument(
        "--max-items", type=_non_negative_int, help="Limit rows in console output"
    )
    return parser


def _non_negative_int(value: str) -> int:
    """argparse type: integer >= 0."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=FORMATS, default="text", help="Output format")


def make_reporter(fmt: str, max_items: int | None = None) -> ReporterProtocol:
    """Create reporter for output format.

    Raises:
        ValueError: If format is unknown or max_items is negative
    """
    match fmt:
        case "text":
            return PlainTextReporter()
        case "json":
            return JsonReporter()
        case "console":
            return ConsoleReporter(ConsoleConfig(max_items=max_items))
        case _:
            raise ValueError(f"unknown format: {fmt!r}")


def build_predicate(args: argparse.Namespace) -> Predicate[Product]:
    """Build combined predicate from filter flags.

    No flags = always true (whole catalog).
    """
    groups: list[Predicate[Product]] = []
    if args.color:
        groups.append(any_of(*(ColorPredicate(Color(c)) for c in args.color)))
    if args.size:
        groups.append(any_of(*(SizePredicate(Size(s)) for s in args.size)))
    if args.max_weight is not None:
        groups.append(WeightPredicate(args.max_weight))
    if args.name:
        groups.append(NamePredicate(args.name))

    predicate = any_of(*groups) if args.any else all_of(*groups)
    if args.negate:
        predicate = not_(predicate)
    return predicate


def run_demo(args: argparse.Namespace) -> int:
    """Run fixed-criteria and composed-predicate scenarios over DEMO_PRODUCTS."""
    reporter = make_reporter(args.format)
    product_filter = Filter[Product]()

    green = ColorPredicate(Color.GREEN)
    red_or_large_blue = or_(
        ColorPredicate(Color.RED),
        and_(SizePredicate(Size.LARGE), ColorPredicate(Color.BLUE)),
    )

    legacy = ProductFilter.by_color(DEMO_PRODUCTS, Color.GREEN)
    results = (
        FilterResult(items=legacy, total_count=len(DEMO_PRODUCTS), predicate="ProductFilter.by_color(green)"),
        product_filter.evaluate(DEMO_PRODUCTS, green),
        product_filter.evaluate(DEMO_PRODUCTS, red_or_large_blue),
    )
    for result in results:
        sys.stdout.write(reporter.report(result))
        if args.format == "json":
            sys.stdout.write("\n")
    return 0


def run_filter(args: argparse.Namespace) -> int:
    """Load catalog, filter, report. Catalog errors exit with status 1."""
    try:
        reporter = make_reporter(args.format, args.max_items)
        predicate = build_predicate(args)
        products = JsonCatalog(args.catalog).load()
    except (CriteriaError, ValueError) as e:
        print(f"criteria: error: {e}", file=sys.stderr)
        return 1

    result = Filter[Product]().evaluate(products, predicate)
    sys.stdout.write(reporter.report(result))
    if args.format == "json":
        sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the criteria console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "demo":
        return run_demo(args)
    if args.command == "filter":
        return run_filter(args)
    parser.error(f"unknown command: {args.command}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
