"""Determinism and regression check suite.

This module provides a fast, deterministic check suite to verify that:
- Identically seeded generators reproduce the same stream
- Every draw lies in [0, 1)
- Batch draws match repeated scalar draws
- Permutations contain each index exactly once

The checks run over every registered generator and are suitable for CI
without manual inspection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from core.logging import get_logger
from core.protocols import Generator
from generators.registry import available_generators, get_generator
from permutation.knuth import random_permutation

__all__ = [
    "CheckResult",
    "ChecksSummary",
    "is_permutation",
    "draw_array",
    "check_determinism",
    "check_range",
    "check_batch_equivalence",
    "check_permutation_validity",
    "run_checks",
]

logger = get_logger(__name__)


@dataclass
class CheckResult:
    """Result of a single check.

    Attributes:
        name: Name of the check.
        passed: Whether the check passed.
        details: Additional details (generator, seed, offending values).
    """

    name: str
    passed: bool
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "passed": self.passed,
            "details": self.details,
        }


@dataclass
class ChecksSummary:
    """Summary of all checks.

    Attributes:
        passed: Whether all checks passed.
        results: List of individual check results.
    """

    passed: bool
    results: list[CheckResult] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "passed": self.passed,
            "num_checks": len(self.results),
            "num_passed": sum(1 for r in self.results if r.passed),
            "num_failed": sum(1 for r in self.results if not r.passed),
            "results": [r.to_dict() for r in self.results],
        }


def is_permutation(values: np.ndarray, length: int) -> bool:
    """Return True if values holds each of 0..length-1 exactly once."""
    arr = np.asarray(values)
    if arr.shape != (length,):
        return False
    return bool(np.array_equal(np.sort(arr), np.arange(length)))


def draw_array(generator: Generator, n: int) -> np.ndarray:
    """Return the next n draws of any Generator as a new float64 array.

    Only the protocol's eval_into is used, so variants registered without
    BaseGenerator work too.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    out = np.empty(n, dtype=np.float64)
    generator.eval_into(n, out)
    return out


def check_determinism(name: str, seed: int = 1, draws: int = 1000) -> CheckResult:
    """Two fresh generators with the same seed must agree draw for draw."""
    first = draw_array(get_generator(name, seed=seed), draws)
    second = draw_array(get_generator(name, seed=seed), draws)
    mismatches = np.flatnonzero(first != second)
    return CheckResult(
        name="determinism",
        passed=mismatches.size == 0,
        details={
            "generator": name,
            "seed": seed,
            "draws": draws,
            "first_mismatch": int(mismatches[0]) if mismatches.size else None,
        },
    )


def check_range(name: str, seed: int = 1, draws: int = 10000) -> CheckResult:
    """Every draw must lie in the half-open interval [0, 1)."""
    values = draw_array(get_generator(name, seed=seed), draws)
    bad = np.flatnonzero((values < 0.0) | (values >= 1.0))
    return CheckResult(
        name="range",
        passed=bad.size == 0,
        details={
            "generator": name,
            "seed": seed,
            "draws": draws,
            "min": float(values.min()) if values.size else None,
            "max": float(values.max()) if values.size else None,
            "num_out_of_range": int(bad.size),
        },
    )


def check_batch_equivalence(name: str, seed: int = 1, sizes: tuple[int, ...] = (0, 1, 7, 20, 97)) -> CheckResult:
    """Batch draws must equal the same number of scalar draws."""
    scalar_gen = get_generator(name, seed=seed)
    batch_gen = get_generator(name, seed=seed)
    failed_sizes: list[int] = []
    for n in sizes:
        expected = np.array([scalar_gen.eval() for _ in range(n)], dtype=np.float64)
        actual = np.empty(n, dtype=np.float64)
        batch_gen.eval_into(n, actual)
        if not np.array_equal(expected, actual):
            failed_sizes.append(n)
    return CheckResult(
        name="batch_equivalence",
        passed=not failed_sizes,
        details={"generator": name, "seed": seed, "sizes": list(sizes), "failed_sizes": failed_sizes},
    )


def check_permutation_validity(
    name: str, seed: int = 1, lengths: tuple[int, ...] = (0, 1, 2, 19, 20, 21, 100)
) -> CheckResult:
    """Permutations of every tested length must be valid."""
    gen = get_generator(name, seed=seed)
    invalid: list[int] = []
    for length in lengths:
        if not is_permutation(random_permutation(gen, length), length):
            invalid.append(length)
    return CheckResult(
        name="permutation_validity",
        passed=not invalid,
        details={"generator": name, "seed": seed, "lengths": list(lengths), "invalid_lengths": invalid},
    )


def run_checks(names: list[str] | None = None, seed: int = 1) -> ChecksSummary:
    """Run every check against the given (default: all registered) generators.

    Args:
        names: Generator names; defaults to available_generators().
        seed: Seed used by each check.

    Returns:
        ChecksSummary with passed=True only if every check passed.
    """
    if names is None:
        names = available_generators()

    results: list[CheckResult] = []
    for name in names:
        results.append(check_determinism(name, seed=seed))
        results.append(check_range(name, seed=seed))
        results.append(check_batch_equivalence(name, seed=seed))
        results.append(check_permutation_validity(name, seed=seed))

    for result in results:
        if not result.passed:
            logger.warning("check %s failed: %s", result.name, result.details)

    return ChecksSummary(passed=all(r.passed for r in results), results=results)
