#!/usr/bin/env python3
"""Benchmark in-memory filter matching: latency (p50, p95, p99) and scans per second.

Usage:
  uv run python scripts/bench_search.py [--num-listings 5000] [--num-queries 100]
"""
from __future__ import annotations

import argparse
import os
import random
import statistics
import sys
import time
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from attrsearch.domain.services.filter_matching import FilterMatcher
from attrsearch.domain.value_objects import (
    BooleanValue,
    DataType,
    DateValue,
    MultiSelectValue,
    NumberValue,
    SearchFilter,
    TextValue,
    TypedValue,
)

FEATURES = ["Pool", "Garage", "Garden", "Balcony", "Fireplace", "Basement"]
STREETS = ["Oak Street", "Maple Avenue", "Pine Road", "Cedar Lane", "Elm Court"]


def build_cache(
    num_listings: int, attribute_ids: dict[str, UUID], rng: random.Random
) -> dict[UUID, dict[UUID, TypedValue]]:
    """Synthetic values; roughly one in ten listings leaves each attribute unset."""
    base = datetime(2024, 1, 1, tzinfo=UTC)
    cache: dict[UUID, dict[UUID, TypedValue]] = {}
    for _ in range(num_listings):
        values: dict[UUID, TypedValue] = {
            attribute_ids["price"]: NumberValue(Decimal(rng.randrange(50_000, 2_000_000))),
            attribute_ids["street"]: TextValue(f"{rng.randrange(1, 999)} {rng.choice(STREETS)}"),
            attribute_ids["features"]: MultiSelectValue.of(rng.sample(FEATURES, rng.randrange(1, 4))),
            attribute_ids["furnished"]: BooleanValue(rng.random() < 0.5),
            attribute_ids["listed"]: DateValue(base + timedelta(days=rng.randrange(0, 365))),
        }
        for key in list(values):
            if rng.random() < 0.1:
                del values[key]
        cache[uuid4()] = values
    return cache


def build_filters(attribute_ids: dict[str, UUID]) -> list[SearchFilter]:
    return [
        SearchFilter(
            attribute_id=attribute_ids["price"],
            data_type=DataType.NUMBER,
            min_value=Decimal("200000"),
            max_value=Decimal("900000"),
        ),
        SearchFilter(
            attribute_id=attribute_ids["features"],
            data_type=DataType.MULTI_SELECT,
            selected_values=("pool", "garden"),
        ),
        SearchFilter(
            attribute_id=attribute_ids["listed"],
            data_type=DataType.DATE,
            min_date=date(2024, 3, 1),
        ),
        SearchFilter(attribute_id=attribute_ids["street"], data_type=DataType.TEXT, text_value="oak"),
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark filter matching")
    parser.add_argument("--num-listings", type=int, default=5000, help="Candidates per scan")
    parser.add_argument("--num-queries", type=int, default=50, help="Number of full scans")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=str, default="", help="Optional output file path")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    attribute_ids = {name: uuid4() for name in ("price", "street", "features", "furnished", "listed")}
    print(f"Generating {args.num_listings} listings...")
    cache = build_cache(args.num_listings, attribute_ids, rng)
    filters = build_filters(attribute_ids)
    matcher = FilterMatcher(UTC)
    entity_ids = list(cache)

    latencies: list[float] = []
    matched = 0
    print(f"Running {args.num_queries} scans...")
    start_total = time.perf_counter()
    for _ in range(args.num_queries):
        t0 = time.perf_counter()
        matched = sum(1 for e in entity_ids if matcher.match_all(e, filters, cache))
        latencies.append(time.perf_counter() - t0)
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No scans run.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Filter matching benchmark (listings={args.num_listings}, filters={len(filters)}, "
        f"scans={n}, matched={matched})\n"
        f"  Scans/s: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
