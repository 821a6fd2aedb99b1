"""Shuffled linear congruential generator.

From "Numerical Recipes," by Press, Flannery, Teukolsky and Vetterling,
p. 197. A 97-entry table is filled from a small LCG; each draw picks a
slot based on the previous output, returns it and refills the slot with
the next LCG value.
"""

from __future__ import annotations

from typing import Any

from core.types import StateDict
from generators.base import BaseGenerator

__all__ = ["ShuffledGenerator", "TABLE_SIZE"]

TABLE_SIZE = 97

M1 = 714025
IA = 1366
IC = 150889
RM = 1.400512e-6


class ShuffledGenerator(BaseGenerator):
    """Numerical Recipes shuffled generator (legacy "method 1").

    Attributes:
        index: Last value read from the table; selects the next slot.
        seed_value: Running LCG state used to refill the table.
        shuffle: 98 ints, slot 0 unused, slots 1..97 hold the table.
    """

    name = "shuffled"

    index: int
    seed_value: int
    shuffle: list[int]

    def _reseed(self, s: int) -> None:
        self.shuffle = [0] * (TABLE_SIZE + 1)
        t = (IC + s + 1) % M1
        for k in range(1, TABLE_SIZE + 1):
            t = (IA * t + IC) % M1
            self.shuffle[k] = abs(t)
        t = (IA * t + IC) % M1
        self.seed_value = abs(t)
        self.index = abs(t)

    def _step(self) -> float:
        offset = 1 + (TABLE_SIZE * self.index) // M1
        if offset > TABLE_SIZE:
            offset = TABLE_SIZE
        if offset < 1:
            offset = 1
        elem = self.shuffle[offset]
        self.index = elem
        # The slot just read is refilled before the next draw.
        self.seed_value = (IA * self.seed_value + IC) % M1
        self.shuffle[offset] = self.seed_value
        return elem * RM

    def state_dict(self) -> StateDict:
        return {
            "index": self.index,
            "seed_value": self.seed_value,
            "shuffle": list(self.shuffle[1:]),
        }

    def load_state_dict(self, state: dict[str, Any]) -> None:
        table = [int(v) for v in state["shuffle"]]
        if len(table) != TABLE_SIZE:
            raise ValueError(f"shuffle must have {TABLE_SIZE} entries, got {len(table)}")
        if any(v < 0 for v in table):
            raise ValueError("shuffle entries must be non-negative")
        self.shuffle = [0, *table]
        self.index = int(state["index"])
        self.seed_value = int(state["seed_value"])
