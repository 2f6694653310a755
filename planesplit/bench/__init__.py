# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Timing splitters on the grid scene."""

from planesplit.bench.runner import BenchResult, run_benchmark, run_benchmarks, write_results

__all__ = ["BenchResult", "run_benchmark", "run_benchmarks", "write_results"]
