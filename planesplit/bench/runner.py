# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Splitter benchmark on the grid scene.

Each splitter solves the same grid `iterations` times. The input list is
built once and shared across runs, since polygons are immutable and every
solve starts from reset(). Timings use time.perf_counter and only cover
solve(), not grid construction.

Results are written as a JSON report:

    {
      "interpreter": {"python_version": "3.13.0", "implementation": "CPython", "platform": "Linux", "machine": "x86_64"},
      "results": [
        {"splitter": "bsp", "grid_size": 5, "iterations": 10, "input_polygons": 15,
         "output_polygons": 155, "mean_seconds": ..., "min_seconds": ..., "max_seconds": ...}
      ]
    }
"""

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Sequence

from planesplit.geometry.grid import make_grid
from planesplit.geometry.vector import Vector3
from planesplit.runtime.environment import Interpreter
from planesplit.splitter.registry import create_splitter
from planesplit.utils.paths import ensure_directory

logger = logging.getLogger(__name__)

BENCH_VIEW = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class BenchResult:
    """Timing summary for one splitter on one grid size."""

    splitter: str
    grid_size: int
    iterations: int
    input_polygons: int
    output_polygons: int
    mean_seconds: float
    min_seconds: float
    max_seconds: float


def run_benchmark(splitter_name: str, grid_size: int, iterations: int) -> BenchResult:
    """
    Time one splitter solving make_grid(grid_size).

    Raises:
        KeyError: If the splitter name isn't registered.
        ValueError: If grid_size or iterations is below 1.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    polys = make_grid(grid_size)
    splitter = create_splitter(splitter_name)

    timings: list[float] = []
    output_count = 0
    for _ in range(iterations):
        start = time.perf_counter()
        result = splitter.solve(polys, BENCH_VIEW)
        timings.append(time.perf_counter() - start)
        output_count = len(result)

    bench = BenchResult(
        splitter=splitter_name,
        grid_size=grid_size,
        iterations=iterations,
        input_polygons=len(polys),
        output_polygons=output_count,
        mean_seconds=sum(timings) / len(timings),
        min_seconds=min(timings),
        max_seconds=max(timings),
    )
    logger.info("Benchmark finished", extra=asdict(bench))
    return bench


def run_benchmarks(
    splitter_names: Sequence[str],
    grid_size: int,
    iterations: int,
) -> list[BenchResult]:
    """Run run_benchmark for each splitter in order."""
    return [run_benchmark(name, grid_size, iterations) for name in splitter_names]


def write_results(results: Sequence[BenchResult], output_path: Path) -> Path:
    """Write benchmark results plus interpreter info as JSON."""
    ensure_directory(output_path.parent)
    report = {
        "interpreter": Interpreter.current().to_dict(),
        "results": [asdict(r) for r in results],
    }
    output_path.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Benchmark report written", extra={"path": str(output_path)})
    return output_path
