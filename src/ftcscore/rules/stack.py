from __future__ import annotations
from typing import Optional
import numpy as np

from ftcscore.constants import STACK_CAPACITY
from ftcscore.errors import StackOverflowError
from ftcscore.state import Alliance


class PossessionStack:
    """
    LIFO of alliance tokens at one junction.

    Tokens live in a fixed boolean buffer (True = blue) with running per-alliance
    counts, so ``top`` and ``count`` never scan.
    """
    __slots__ = ("_data", "_depth", "_counts")

    def __init__(self, alliance: Alliance):
        self._data = np.zeros(STACK_CAPACITY, dtype=bool)
        self._depth = 0
        self._counts = np.zeros(len(Alliance), dtype=np.int16)
        self.push(alliance)

    def push(self, alliance: Alliance) -> None:
        if self._depth >= STACK_CAPACITY:
            raise StackOverflowError(f"possession stack exceeded {STACK_CAPACITY} tokens")
        self._data[self._depth] = alliance is Alliance.BLUE
        self._depth += 1
        self._counts[alliance.value] += 1

    def pop(self) -> Optional[Alliance]:
        top = self.top()
        if top is not None:
            self._depth -= 1
            self._counts[top.value] -= 1
        return top

    def top(self) -> Optional[Alliance]:
        if self._depth == 0:
            return None
        return Alliance.BLUE if self._data[self._depth - 1] else Alliance.RED

    def count(self, alliance: Alliance) -> int:
        return int(self._counts[alliance.value])

    def __len__(self) -> int:
        return self._depth

    def __bool__(self) -> bool:
        return self._depth > 0

    def __repr__(self) -> str:
        tokens = "".join("B" if b else "R" for b in self._data[:self._depth])
        return f"PossessionStack({tokens})"
