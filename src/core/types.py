"""Core type definitions for the random number generation package.

This module contains:
- Type aliases for draw buffers and permutations
- The GeneratorConfig dataclass used by the config layer and registry
"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any

import numpy as np

__all__ = [
    "DrawBuffer",
    "PermVector",
    "StateDict",
    "GeneratorConfig",
]

# Anything indexable that accepts float assignment (numpy arrays, lists)
DrawBuffer = np.ndarray | MutableSequence[float]

# Type alias for permutation outputs (1D integer array)
PermVector = np.ndarray

# Plain-dict snapshot of a generator's integer state
StateDict = dict[str, Any]


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Configuration selecting and seeding one generator variant.

    Attributes:
        name: Registered generator name (e.g. "park_miller" or "method3").
        seed: Integer seed; any value is accepted, only abs(seed) is used.
    """

    name: str
    seed: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "seed": self.seed}
