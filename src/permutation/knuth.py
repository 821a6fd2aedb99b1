"""Random permutations of 0..n-1 drawn from any Generator.

The Knuth shuffle walks i from n-1 down to 1 and swaps element i with a
random earlier element. Random numbers are pulled from the generator in
batches of up to PERM_BATCH_SIZE; the grouping never changes which values
are consumed or the resulting permutation.
"""

from __future__ import annotations

import numpy as np

from core.logging import get_logger
from core.protocols import Generator
from core.types import PermVector

__all__ = ["PERM_BATCH_SIZE", "PermutationBuilder", "random_permutation"]

logger = get_logger(__name__)

PERM_BATCH_SIZE = 20


class PermutationBuilder:
    """Build permutations from a generator's stream.

    The builder holds no state besides its generator; the draw buffer
    lives only for the duration of one build() call.

    Attributes:
        generator: Source of uniform draws in [0, 1).
        batch_size: Maximum number of draws requested per eval_into call.

    Example:
        >>> gen = ParkMillerGenerator(seed=1)
        >>> PermutationBuilder(gen).build(10)
        array([5, 4, 2, 9, 8, 7, 3, 6, 1, 0])
    """

    def __init__(self, generator: Generator, *, batch_size: int = PERM_BATCH_SIZE) -> None:
        """Initialize the builder.

        Args:
            generator: Any object satisfying the Generator protocol.
            batch_size: Draws per batch (>= 1).

        Raises:
            ValueError: If batch_size < 1.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self.generator = generator
        self.batch_size = batch_size

    def build(self, length: int, out: PermVector | None = None) -> PermVector:
        """Fill out (or a new array) with a random permutation of 0..length-1.

        Swaps are skipped when the truncated candidate index equals i,
        reproducing the legacy algorithm's draw-for-draw behavior.

        Args:
            length: Permutation length (>= 0). Lengths 0 and 1 consume no draws.
            out: Optional integer array with at least length slots; only
                out[0:length] is written.

        Returns:
            The permutation (out itself when provided, else a new int64 array).

        Raises:
            ValueError: If length is negative or out is too short.
        """
        if length < 0:
            logger.debug("rejecting negative permutation length %d", length)
            raise ValueError(f"length must be >= 0, got {length}")
        if out is None:
            out = np.empty(length, dtype=np.int64)
        elif len(out) < length:
            logger.debug("rejecting buffer of %d slots for length %d", len(out), length)
            raise ValueError(f"Buffer too small: need {length} slots, got {len(out)}")

        out[:length] = np.arange(length)

        remaining = length - 1  # total draws still to request
        draws = np.empty(min(max(remaining, 0), self.batch_size), dtype=np.float64)
        available = 0
        pos = 0

        for i in range(length - 1, 0, -1):
            if pos == available:
                available = min(remaining, self.batch_size)
                self.generator.eval_into(available, draws)
                remaining -= available
                pos = 0
            k = int((i + 1) * draws[pos])
            pos += 1
            if k < i:
                out[i], out[k] = out[k], out[i]

        return out


def random_permutation(
    generator: Generator, length: int, out: PermVector | None = None
) -> PermVector:
    """Return a random permutation of 0..length-1 using generator.

    Convenience wrapper around PermutationBuilder with the default batch size.
    """
    return PermutationBuilder(generator).build(length, out)
