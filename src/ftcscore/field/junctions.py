"""
Junction grid of the field.

Junctions are named by row letter (V through Z) and 1-based column number.
Row Z borders the red near terminal, row V the blue one. Each carries its
zero-indexed row, column and point value; nothing about a junction changes
during a match.
"""
from __future__ import annotations
from enum import Enum

from ftcscore.constants import FIELD_COLUMNS, FIELD_ROWS
from ftcscore.state import Alliance


class Junction(Enum):
    # (row, column, points); 2 ground, 3 low, 4 medium, 5 high
    V1 = (0, 0, 2)
    V2 = (0, 1, 3)
    V3 = (0, 2, 2)
    V4 = (0, 3, 3)
    V5 = (0, 4, 2)

    W1 = (1, 0, 3)
    W2 = (1, 1, 4)
    W3 = (1, 2, 5)
    W4 = (1, 3, 4)
    W5 = (1, 4, 3)

    X1 = (2, 0, 2)
    X2 = (2, 1, 5)
    X3 = (2, 2, 2)
    X4 = (2, 3, 5)
    X5 = (2, 4, 2)

    Y1 = (3, 0, 3)
    Y2 = (3, 1, 4)
    Y3 = (3, 2, 5)
    Y4 = (3, 3, 4)
    Y5 = (3, 4, 3)

    Z1 = (4, 0, 2)
    Z2 = (4, 1, 3)
    Z3 = (4, 2, 2)
    Z4 = (4, 3, 3)
    Z5 = (4, 4, 2)

    @property
    def row(self) -> int:
        return self.value[0]

    @property
    def column(self) -> int:
        return self.value[1]

    @property
    def points(self) -> int:
        return self.value[2]

    @property
    def coordinate(self) -> tuple[int, int]:
        return self.value[0], self.value[1]

    @classmethod
    def at(cls, row: int, column: int) -> Junction:
        return _BY_COORDINATE[(row, column)]

    def __str__(self) -> str:
        return self.name


_BY_COORDINATE = {j.coordinate: j for j in Junction}


def points(loc: Junction) -> int:
    return loc.points


def row(loc: Junction) -> int:
    return loc.row


def column(loc: Junction) -> int:
    return loc.column


def coordinate(loc: Junction) -> tuple[int, int]:
    return loc.coordinate


def _build_neighbors() -> dict[Junction, frozenset[Junction]]:
    out = {}
    for j in Junction:
        adj = set()
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = j.row + dr, j.column + dc
                if (dr or dc) and 0 <= r < FIELD_ROWS and 0 <= c < FIELD_COLUMNS:
                    adj.add(Junction.at(r, c))
        out[j] = frozenset(adj)
    return out


NEIGHBORS = _build_neighbors()


def neighbors(loc: Junction) -> frozenset[Junction]:
    """Orthogonally and diagonally adjacent junctions."""
    return NEIGHBORS[loc]


# Junctions bordering each alliance's near terminal (start) and far terminal (goal).
CIRCUIT_STARTS = {
    Alliance.RED: frozenset({Junction.Z1, Junction.Y1, Junction.Z2}),
    Alliance.BLUE: frozenset({Junction.V1, Junction.W1, Junction.V2}),
}
CIRCUIT_GOALS = {
    Alliance.RED: frozenset({Junction.V5, Junction.V4, Junction.W5}),
    Alliance.BLUE: frozenset({Junction.Z5, Junction.Y5, Junction.Z4}),
}
