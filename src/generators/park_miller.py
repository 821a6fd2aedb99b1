"""Park-Miller multiplicative congruential generator.

From "A More Portable Fortran Random Number Generator," by Linus Schrage,
ACM Transactions on Mathematical Software, Vol. 5, No. 2, June 1979,
pp. 132-138.

Schrage's bit-split avoided 32-bit overflow in (A3 * ix) mod P3. Python
integers do not overflow, so the product is reduced directly; the result
is identical for every state in [0, P3).
"""

from __future__ import annotations

from typing import Any

from core.types import StateDict
from generators.base import BaseGenerator

__all__ = ["ParkMillerGenerator", "A3", "P3"]

A3 = 16807
P3 = 2147483647  # 2^31 - 1

# Slightly below 1/P3 so the largest state still maps below 1.0.
SCALE = 4.656612875e-10


class ParkMillerGenerator(BaseGenerator):
    """Minimal standard generator (legacy "method 3").

    Note:
        Seed 0 (and any multiple of P3) is a fixed point: every draw
        returns 0.0. This matches the legacy generator.
    """

    name = "park_miller"

    ix: int

    def _reseed(self, s: int) -> None:
        self.ix = s

    def _step(self) -> float:
        self.ix = (A3 * self.ix) % P3
        return self.ix * SCALE

    def state_dict(self) -> StateDict:
        return {"ix": self.ix}

    def load_state_dict(self, state: dict[str, Any]) -> None:
        ix = int(state["ix"])
        if ix < 0:
            raise ValueError(f"ix must be non-negative, got {ix}")
        self.ix = ix
