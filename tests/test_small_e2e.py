import numpy as np
import pytest

from ftcscore.errors import ScoringError
from ftcscore.field.junctions import Junction
from ftcscore.rules.fsm import AutoMatch
from ftcscore.state import Alliance, MatchIndex, SignalZone, Terminal

JUNCTIONS = list(Junction)


def _check(record, model):
    assert set(record.stacks) == {j for j, tokens in model.items() if tokens}
    for j, s in record.stacks.items():
        for a in Alliance:
            assert s.count(a) == model[j].count(a)
        assert s.top() is model[j][-1]
    for j in JUNCTIONS:
        assert not (j in record.stacks and record.has_claim_on(j))


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_e2e_random_policy_invariants(seed):
    rng = np.random.default_rng(seed)
    phase = AutoMatch.create([(11, True), (12, False)], [(21, False), (22, True)], SignalZone.RIGHT)
    model = {j: [] for j in JUNCTIONS}
    slot_changes = {}
    for step in range(300):
        if step == 100:
            phase = phase.into_teleop()
        elif step == 200:
            phase = phase.into_end_game()
        j = JUNCTIONS[int(rng.integers(len(JUNCTIONS)))]
        a = Alliance(int(rng.integers(2)))
        op = rng.random()
        if op < 0.5:
            placed = phase.score_for(a, j)
            assert placed == (not phase.record.has_claim_on(j))
            if placed:
                model[j].append(a)
        elif op < 0.8:
            try:
                assert phase.descore(j) is model[j].pop()
            except ScoringError:
                assert not model[j] or phase.record.has_claim_on(j)
        elif op < 0.9:
            robot = MatchIndex(a, int(rng.integers(2)))
            before = phase.record[a].claim_slot(robot.index)
            try:
                phase.cap_for(robot, j)
                model[j] = []
            except ScoringError:
                pass
            after = phase.record[a].claim_slot(robot.index)
            if after != before:
                slot_changes[robot] = slot_changes.get(robot, 0) + 1
        else:
            phase.add_terminal_for(a, Terminal.NEAR if rng.random() < 0.5 else Terminal.FAR)
        _check(phase.record, model)
    assert all(n == 1 for n in slot_changes.values())
    claimed = [c.location for led in phase.record.ledgers.values() for c in led.claims if c.is_valid]
    assert len(claimed) == len(set(claimed))
    red, blue = phase.end_match()
    assert red.teleop_points >= 0 and blue.teleop_points >= 0
