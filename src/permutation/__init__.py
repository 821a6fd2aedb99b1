"""Permutation module.

This package contains the Knuth-shuffle permutation builder that turns any
Generator stream into a random permutation of 0..n-1.
"""

from __future__ import annotations

from permutation.knuth import PERM_BATCH_SIZE, PermutationBuilder, random_permutation

__all__ = [
    "PERM_BATCH_SIZE",
    "PermutationBuilder",
    "random_permutation",
]
