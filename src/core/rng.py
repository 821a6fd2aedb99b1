"""Seed management utilities.

This module contains:
- Seed normalization shared by every generator variant
- Per-worker seed derivation so concurrent streams stay uncorrelated
- A helper that builds one independently seeded generator per worker

Generator instances are not safe to share between threads. Callers that
need concurrent streams build one generator per worker with
spawn_generators() instead.
"""

from __future__ import annotations

import numpy as np

from core.protocols import Generator

__all__ = [
    "SEED_MODULUS",
    "normalize_seed",
    "derive_worker_seed",
    "spawn_generators",
]

# Derived seeds land in [1, 2^31 - 2], which is a valid nonzero state for
# every variant (Park-Miller degenerates on a zero state).
SEED_MODULUS = 2147483646


def normalize_seed(s: int) -> int:
    """Fold a seed to the non-negative value the generators actually use.

    Args:
        s: Any integer (bool and numpy integers included).

    Returns:
        abs(int(s)).

    Raises:
        TypeError: If s is not an integer.
    """
    if isinstance(s, (int, np.integer)):
        return abs(int(s))
    raise TypeError(f"seed must be an integer, got {type(s).__name__}")


def derive_worker_seed(base_seed: int, worker_id: int) -> int:
    """Derive a child seed deterministically from a base seed and worker index.

    Uses numpy's SeedSequence so the result is identical on every platform
    and distinct workers receive well-separated seeds.

    Args:
        base_seed: Root seed of the run.
        worker_id: Non-negative worker index.

    Returns:
        An integer in [1, 2^31 - 2].

    Raises:
        ValueError: If worker_id is negative.
    """
    if worker_id < 0:
        raise ValueError(f"worker_id must be >= 0, got {worker_id}")
    entropy = [normalize_seed(base_seed), int(worker_id)]
    state = np.random.SeedSequence(entropy).generate_state(1, dtype=np.uint64)[0]
    return int(state) % SEED_MODULUS + 1


def spawn_generators(name: str, base_seed: int, count: int) -> list[Generator]:
    """Build count generators of one variant, each with its own derived seed.

    Args:
        name: Registered generator name.
        base_seed: Root seed of the run.
        count: Number of workers (>= 0).

    Returns:
        List of freshly seeded generators, index i seeded with
        derive_worker_seed(base_seed, i).

    Raises:
        ValueError: If count is negative.
        KeyError: If name is not registered.
    """
    from generators.registry import get_generator

    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [get_generator(name, seed=derive_worker_seed(base_seed, i)) for i in range(count)]
