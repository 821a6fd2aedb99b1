"""Generator variants module.

This package contains the three legacy pseudo-random generators:
- ShuffledGenerator (Numerical Recipes shuffle table, "method 1")
- MultiplePrimeGenerator (Haas multiple-prime, "method 2")
- ParkMillerGenerator (Schrage / Park-Miller, "method 3")
- A name-based registry for selecting a variant
"""

from __future__ import annotations

from generators.base import DEFAULT_SEED, BaseGenerator
from generators.multiprime import MultiplePrimeGenerator
from generators.park_miller import ParkMillerGenerator
from generators.registry import available_generators, get_generator
from generators.shuffled import ShuffledGenerator

__all__ = [
    # Base
    "BaseGenerator",
    "DEFAULT_SEED",
    # Variants
    "ShuffledGenerator",
    "MultiplePrimeGenerator",
    "ParkMillerGenerator",
    # Registry
    "get_generator",
    "available_generators",
]
