"""Base generator class shared by every variant.

This module provides an abstract base class that implements the batch
evaluation loop, argument checking and permutation entry point, leaving
the per-step arithmetic to subclasses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from core.rng import normalize_seed
from core.types import DrawBuffer, PermVector, StateDict

__all__ = ["BaseGenerator", "DEFAULT_SEED"]

DEFAULT_SEED = 1


class BaseGenerator(ABC):
    """Abstract base class for the legacy generator variants.

    Subclasses implement `_reseed()`, `_step()` and the state dict pair. The
    batch path is built on `_step()` alone, so a batch draw consumes the
    stream exactly like repeated scalar draws.

    Example:
        >>> gen = ParkMillerGenerator(seed=1)
        >>> value = gen.eval()
        >>> buf = np.empty(4)
        >>> gen.eval_into(4, buf)
        >>> perm = gen.perm(10)
    """

    #: Registry name of the variant, set by subclasses.
    name: str = ""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        """Create the generator and seed it.

        Args:
            seed: Initial seed (any integer).
        """
        self.seed(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state_dict()!r})"

    def seed(self, s: int) -> None:
        """Reinitialize all internal state from abs(s)."""
        self._reseed(normalize_seed(s))

    def eval(self) -> float:
        """Advance one step and return a float in [0, 1)."""
        return self._step()

    def eval_into(self, n: int, out: DrawBuffer) -> None:
        """Write the next n draws into out[0:n].

        Args:
            n: Number of draws. Zero leaves both the buffer and the state alone.
            out: Destination buffer with len(out) >= n.

        Raises:
            ValueError: If n is negative or out is shorter than n.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        if len(out) < n:
            raise ValueError(f"Buffer too small: need {n} slots, got {len(out)}")
        step = self._step
        for k in range(n):
            out[k] = step()

    def eval_array(self, n: int) -> np.ndarray:
        """Return the next n draws as a new float64 array."""
        out = np.empty(max(n, 0), dtype=np.float64)
        self.eval_into(n, out)
        return out

    def perm(self, length: int, out: PermVector | None = None) -> PermVector:
        """Return a random permutation of 0..length-1 drawn from this stream.

        See permutation.knuth.random_permutation for the algorithm.
        """
        from permutation.knuth import random_permutation

        return random_permutation(self, length, out)

    @abstractmethod
    def _reseed(self, s: int) -> None:
        """Reset state from a non-negative seed."""
        ...

    @abstractmethod
    def _step(self) -> float:
        """Advance one step and return the scaled draw."""
        ...

    @abstractmethod
    def state_dict(self) -> StateDict:
        """Return a snapshot of the integer state.

        The snapshot is a plain dict of ints (and int lists), safe to
        serialize to JSON and restore with load_state_dict().
        """
        ...

    @abstractmethod
    def load_state_dict(self, state: dict[str, Any]) -> None:
        """Restore state previously returned by state_dict().

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a field has the wrong shape.
        """
        ...
