#!/usr/bin/env python3

# This file performs multiple runs of dungeon generation, collecting and reporting metrics.
# Used for checking how many attempts the empty-cell tolerance costs and how the accepted layouts look.

from __future__ import annotations

import argparse
import datetime
from dataclasses import dataclass
import json
import math
import os
import random
import statistics
import time
from typing import Any, Callable, Dict, List

import networkx as nx

from dungeon_config import GenerationConfig
from dungeon_constants import DEFAULT_DUNGEON_SIZE, DEFAULT_EMPTY_ROOM_TOLERANCE
from dungeon_generator import DungeonGenerator
from dungeon_validation import build_room_graph, validate_result

PERCENTILES = [1.0, 5.0, 25.0, 50.0, 75.0, 95.0, 99.0]


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    attempts: int
    total_rooms: int
    empty_cells: int
    empty_fraction: float
    cycle_count: int
    graph_diameter: int
    variant_rejection_rate: float
    violations: List[str]


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    ordered = sorted(values)
    rank = (len(ordered) - 1) * (min(max(pct, 0.0), 100.0) / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def json_safe_number(value: float | int | None) -> float | int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def compute_basic_stats(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "min": min(values),
        "max": max(values),
        "stdev": statistics.stdev(values) if len(values) > 1 else float("nan"),
    }


@dataclass
class MetricDefinition:
    key: str
    name: str
    values: List[float]
    value_formatter: Callable[[float], str]


def report_metric(definition: MetricDefinition) -> Dict[str, Any]:
    """Print one metric's summary and return it in JSON-friendly form."""
    values = definition.values
    fmt = definition.value_formatter
    print(definition.name + ":")
    if not values:
        print("  (no data)")
        return {"count": 0}

    stats = compute_basic_stats(values)
    print(
        "  Count {count}, mean {mean}, median {median}, min {min}, max {max}, stdev {stdev}".format(
            count=len(values),
            **{key: "nan" if math.isnan(value) else fmt(value) for key, value in stats.items()},
        )
    )
    percentiles = {f"p{int(pct)}": percentile(values, pct) for pct in PERCENTILES}
    print("  Percentiles: " + ", ".join(f"{label}={fmt(value)}" for label, value in percentiles.items()))

    summary: Dict[str, Any] = {"count": len(values)}
    summary.update({key: json_safe_number(value) for key, value in stats.items()})
    summary["percentiles"] = {label: json_safe_number(value) for label, value in percentiles.items()}
    return summary


def run_single_generation(config: GenerationConfig) -> GenerationRunResult:
    """Run one dungeon generation with the provided config and collect metrics."""
    generator = DungeonGenerator(config)

    start = time.perf_counter()
    result = generator.generate()
    end = time.perf_counter()

    graph = build_room_graph(result.grid)
    graph_diameter = 0
    if graph.number_of_nodes() >= 2 and nx.is_connected(graph):
        graph_diameter = int(nx.diameter(graph))

    empty_cells = result.empty_count()
    snapshot = generator.metrics.snapshot() if generator.metrics else {}
    return GenerationRunResult(
        seed=config.random_seed if config.random_seed is not None else -1,
        duration=end - start,
        attempts=result.attempts,
        total_rooms=graph.number_of_nodes(),
        empty_cells=empty_cells,
        empty_fraction=empty_cells / config.total_cells,
        cycle_count=len(nx.cycle_basis(graph)),
        graph_diameter=graph_diameter,
        variant_rejection_rate=float(snapshot.get("variant_rejection_rate", 0.0)),
        violations=validate_result(result, config),
    )


def run_benchmark(
    num_runs: int, seed: int | None, height: int, width: int, tolerance: float
) -> List[GenerationRunResult]:
    """Run the generator multiple times and collect run-level metrics."""
    rng = random.Random(seed)

    results: List[GenerationRunResult] = []

    for _ in range(num_runs):
        config = GenerationConfig(
            height=height,
            width=width,
            empty_room_tolerance=tolerance,
            random_seed=rng.randint(0, 1_000_000),
            collect_metrics=True,
        )
        results.append(run_single_generation(config))

    return results


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.1f}ms"


def main() -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Run the dungeon generator multiple times and report timing and quality statistics."
        )
    )
    parser.add_argument(
        "-n",
        "--runs",
        type=int,
        default=20,
        help="Number of dungeon generations to execute (default: 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=(
            "Optional seed for the benchmark harness RNG; keeps run seeds reproducible"
        ),
    )
    parser.add_argument("--height", type=int, default=DEFAULT_DUNGEON_SIZE)
    parser.add_argument("--width", type=int, default=DEFAULT_DUNGEON_SIZE)
    parser.add_argument("--tolerance", type=float, default=DEFAULT_EMPTY_ROOM_TOLERANCE)
    args = parser.parse_args()

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")

    try:
        results = run_benchmark(args.runs, args.seed, args.height, args.width, args.tolerance)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    results_json: List[Dict[str, Any]] = []
    for idx, result in enumerate(results, start=1):
        status = "ok" if not result.violations else f"{len(result.violations)} violations"
        print(
            "Run {idx:02d}: {time} (seed {seed}) | attempts {attempts} | rooms {rooms}"
            " | empty {empty} ({fraction:.1%}) | cycles {cycles} | {status}".format(
                idx=idx,
                time=format_seconds(result.duration),
                seed=result.seed,
                attempts=result.attempts,
                rooms=result.total_rooms,
                empty=result.empty_cells,
                fraction=result.empty_fraction,
                cycles=result.cycle_count,
                status=status,
            )
        )
        for violation in result.violations:
            print(f"  Warning: {violation}")
        results_json.append(
            {
                "run_id": idx,
                "seed": result.seed,
                "total_time_seconds": result.duration,
                "attempts": result.attempts,
                "num_rooms": result.total_rooms,
                "empty_cells": result.empty_cells,
                "num_cycles": result.cycle_count,
                "graph_diameter": result.graph_diameter,
                "violations": result.violations,
            }
        )

    durations = [result.duration for result in results]
    worst_index = durations.index(max(durations))

    metrics_to_report = [
        MetricDefinition("generation_time", "Generation time", durations, lambda value: f"{value:.4f}s"),
        MetricDefinition(
            "attempts",
            "Attempts per accepted layout",
            [float(result.attempts) for result in results],
            lambda value: f"{value:.1f}",
        ),
        MetricDefinition(
            "empty_fraction",
            "Empty cell fraction",
            [result.empty_fraction for result in results],
            lambda value: f"{value:.1%}",
        ),
        MetricDefinition(
            "variant_rejection_rate",
            "Variant rejection rate",
            [result.variant_rejection_rate for result in results],
            lambda value: f"{value:.1%}",
        ),
        MetricDefinition(
            "cycle_count",
            "Cycle count",
            [float(result.cycle_count) for result in results],
            lambda value: f"{value:.1f}",
        ),
        MetricDefinition(
            "graph_diameter",
            "Graph diameter",
            [float(result.graph_diameter) for result in results],
            lambda value: f"{value:.0f}",
        ),
    ]

    print()
    print(f"Config runs: {args.runs}, grid {args.height}x{args.width}, tolerance {args.tolerance:g}%")
    print(
        f"Worst-case generation time: {format_seconds(durations[worst_index])}"
        f" (seed {results[worst_index].seed})"
    )
    aggregated_results_json: Dict[str, Any] = {}
    for metric in metrics_to_report:
        print()
        aggregated_results_json[metric.key] = report_metric(metric)

    timestamp = datetime.datetime.now(datetime.timezone.utc)
    filename_stamp = timestamp.strftime("%Y%m%dT%H%M%SZ")
    script_dir = os.path.dirname(os.path.abspath(__file__))
    benchmarks_dir = os.path.abspath(os.path.join(script_dir, "..", "benchmarks"))
    os.makedirs(benchmarks_dir, exist_ok=True)
    output_path = os.path.join(benchmarks_dir, f"benchmark-{filename_stamp}.json")

    benchmark_data = {
        "benchmark_run_info": {
            "timestamp": timestamp.replace(microsecond=0).isoformat(),
            "num_iterations": args.runs,
            "parameters": {
                "seed": args.seed,
                "height": args.height,
                "width": args.width,
                "tolerance": args.tolerance,
            },
        },
        "aggregated_results": aggregated_results_json,
        "results": results_json,
    }

    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(benchmark_data, handle, indent=2, sort_keys=True)
        handle.write("\n")

    print(f"\nSaved benchmark results to {os.path.relpath(output_path)}")


if __name__ == "__main__":
    main()
