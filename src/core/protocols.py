"""Protocol definitions for the random number generation package.

This module contains the Protocol every generator variant satisfies. The
permutation builder and the diagnostics depend only on this contract, never
on a concrete variant.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.types import DrawBuffer

__all__ = ["Generator"]


@runtime_checkable
class Generator(Protocol):
    """Protocol for seeded pseudo-random generators.

    A Generator produces a reproducible stream of floats in [0, 1):
    - The same seed always yields the same stream
    - Scalar and batch draws consume the stream identically

    Contract:
    - eval() advances the state by exactly one step
    - eval_into(n, out) is observationally equal to n calls of eval()
    - seed() fully reinitializes the state and never fails
    """

    def seed(self, s: int) -> None:
        """Reinitialize all internal state from a seed.

        Args:
            s: Any integer. Negative values are folded with abs().
        """
        ...

    def eval(self) -> float:
        """Advance one step and return the next draw.

        Returns:
            A float in the half-open interval [0, 1).
        """
        ...

    def eval_into(self, n: int, out: DrawBuffer) -> None:
        """Write the next n draws into out[0:n].

        Args:
            n: Number of draws (n == 0 is a no-op).
            out: Destination buffer with len(out) >= n.

        Raises:
            ValueError: If n is negative or out is too short.
        """
        ...
