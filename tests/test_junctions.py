from ftcscore.field.junctions import (
    CIRCUIT_GOALS, CIRCUIT_STARTS, Junction, column, coordinate, neighbors, points, row,
)
from ftcscore.state import Alliance


def test_grid_lookup_matches_identity():
    for j in Junction:
        assert Junction.at(row(j), column(j)) is j
        assert coordinate(j) == (j.row, j.column)
    assert len(Junction) == 25


def test_point_values_by_height():
    assert points(Junction.V1) == 2
    assert points(Junction.V2) == 3
    assert points(Junction.W2) == 4
    assert points(Junction.W3) == 5
    assert {points(j) for j in Junction} == {2, 3, 4, 5}
    assert sum(j.points == 5 for j in Junction) == 4


def test_neighbors_include_diagonals():
    assert neighbors(Junction.V1) == {Junction.V2, Junction.W1, Junction.W2}
    assert len(neighbors(Junction.X3)) == 8
    for j in Junction:
        assert j not in neighbors(j)
        assert all(j in neighbors(n) for n in neighbors(j))


def test_circuit_endpoints_are_disjoint():
    for alliance in Alliance:
        assert not CIRCUIT_STARTS[alliance] & CIRCUIT_GOALS[alliance]
    assert not CIRCUIT_STARTS[Alliance.RED] & CIRCUIT_STARTS[Alliance.BLUE]
