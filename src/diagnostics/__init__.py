"""Diagnostics module for generator streams.

This package provides utilities for validating and inspecting generators:

- checks: Determinism/range/batch/permutation check suite
- plotting: Uniformity histogram
- runner: CLI for dumping draws and permutations as JSON
"""

from __future__ import annotations

from diagnostics.checks import CheckResult, ChecksSummary, is_permutation, run_checks
from diagnostics.plotting import plot_histogram
from diagnostics.runner import main as run_cli

__all__ = [
    # Checks
    "CheckResult",
    "ChecksSummary",
    "is_permutation",
    "run_checks",
    # Plotting
    "plot_histogram",
    # Runner
    "run_cli",
]
