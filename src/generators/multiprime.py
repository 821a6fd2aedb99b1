"""Multiple prime additive generator.

From "The Multiple Prime Random Number Generator," by Alexander Haas,
ACM Transactions on Mathematical Software, Vol. 13, No. 4, December 1987,
pp. 368-381.
"""

from __future__ import annotations

from typing import Any

from core.types import StateDict
from generators.base import BaseGenerator

__all__ = ["MultiplePrimeGenerator"]

SCALE = 1.00010001e-4


class MultiplePrimeGenerator(BaseGenerator):
    """Haas multiple-prime generator (legacy "method 2").

    Three counters step through residues of different primes and are
    folded into r on every draw. For seeds with abs(seed) <= 1424 the
    counters start, and stay, inside m in [100, 9973), i in [10000, 99991)
    and j in [128000, 224729). Larger seeds keep the legacy behavior.
    """

    name = "multiprime"

    r: int
    m: int
    i: int
    j: int

    def _reseed(self, s: int) -> None:
        self.r = s
        self.m = s * 7
        self.i = s * 11
        self.j = s * 13
        if self.m < 100:
            self.m += 100
        if self.i < 10000:
            self.i += 10000
        if self.j < 128000:
            self.j += 128000

    def _step(self) -> float:
        self.m += 7
        if self.m >= 9973:
            self.m -= 9871
        self.i += 1907
        if self.i >= 99991:
            self.i -= 89989
        self.j += 73939
        if self.j >= 224729:
            self.j -= 96233
        self.r = ((self.r * self.m + self.i + self.j) % 100000) // 10
        return self.r * SCALE

    def state_dict(self) -> StateDict:
        return {"r": self.r, "m": self.m, "i": self.i, "j": self.j}

    def load_state_dict(self, state: dict[str, Any]) -> None:
        self.r = int(state["r"])
        self.m = int(state["m"])
        self.i = int(state["i"])
        self.j = int(state["j"])
