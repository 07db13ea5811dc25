#!/usr/bin/env python3
"""Filtering throughput benchmark for criteria.

Each case runs --repeat times over a generated catalog; the best wall time
is reported. Results are written as a JSON list of {name, unit, value}.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from criteria.application.services import Filter
from criteria.domain.model import Color, Product, Size
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


def generate_catalog(size: int) -> tuple[Product, ...]:
    """Deterministic catalog cycling through colors, sizes and weights."""
    colors = tuple(Color)
    sizes = tuple(Size)
    return tuple(
        Product(f"item-{i}", colors[i % len(colors)], sizes[(i // 3) % len(sizes)], (i % 20) / 10)
        for i in range(size)
    )


CASES = {
    "single leaf": ColorPredicate(Color.RED),
    "nested and/or/not": or_(
        and_(ColorPredicate(Color.RED), not_(SizePredicate(Size.LARGE))),
        WeightPredicate(0.3),
    ),
    "flat all_of x3": all_of(ColorPredicate(Color.GREEN), SizePredicate(Size.SMALL), WeightPredicate(1.0)),
    "flat any_of x100": any_of(*[NamePredicate(f"item-{n}") for n in range(100)]),
}


def best_time(catalog: tuple[Product, ...], predicate: object, repeat: int) -> float:
    """Fastest of repeat runs of Filter.apply, in seconds."""
    product_filter = Filter[Product]()
    timings = []
    for _ in range(repeat):
        start = time.perf_counter()
        product_filter.apply(catalog, predicate)
        timings.append(time.perf_counter() - start)
    return min(timings)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark criteria filtering")
    parser.add_argument("--catalog-size", type=int, default=100_000, help="Products to generate")
    parser.add_argument("--repeat", type=int, default=5, help="Runs per case; best is kept")
    parser.add_argument("--output", type=Path, help="Write JSON results here")
    args = parser.parse_args()

    catalog = generate_catalog(args.catalog_size)
    results = [
        {
            "name": f"{name} ({args.catalog_size} products)",
            "unit": "seconds",
            "value": best_time(catalog, predicate, args.repeat),
        }
        for name, predicate in CASES.items()
    ]

    for r in results:
        print(f"{r['name']:<40} {r['value']:.4f}s")
    if args.output is not None:
        args.output.write_text(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
