import numpy as np
import pytest

from ftcscore.constants import STACK_CAPACITY
from ftcscore.errors import StackOverflowError
from ftcscore.rules.stack import PossessionStack
from ftcscore.state import Alliance

RED, BLUE = Alliance.RED, Alliance.BLUE


def test_new_stack_holds_one_token():
    s = PossessionStack(BLUE)
    assert s.top() is BLUE
    assert s.count(BLUE) == 1 and s.count(RED) == 0
    assert len(s) == 1


def test_three_red_two_blue_then_pops():
    s = PossessionStack(RED)
    s.push(RED)
    s.push(RED)
    s.push(BLUE)
    s.push(BLUE)
    assert s.pop() is BLUE
    assert s.pop() is BLUE
    assert (s.count(RED), s.count(BLUE)) == (3, 0)
    assert s.pop() is RED
    assert s.pop() is RED
    assert len(s) == 1 and s.top() is RED
    assert (s.count(RED), s.count(BLUE)) == (1, 0)


def test_pop_empty_returns_none():
    s = PossessionStack(RED)
    assert s.pop() is RED
    assert not s
    assert s.pop() is None
    assert s.top() is None


def test_overflow_is_fatal():
    s = PossessionStack(RED)
    for _ in range(STACK_CAPACITY - 1):
        s.push(BLUE)
    assert len(s) == STACK_CAPACITY
    with pytest.raises(StackOverflowError):
        s.push(RED)


def test_counts_track_random_sequence():
    rng = np.random.default_rng(0)
    s = PossessionStack(RED)
    model = [RED]
    for _ in range(500):
        if model and (rng.random() < 0.45 or len(model) == STACK_CAPACITY):
            assert s.pop() is model.pop()
        else:
            a = RED if rng.random() < 0.5 else BLUE
            s.push(a)
            model.append(a)
        assert s.count(RED) == model.count(RED)
        assert s.count(BLUE) == model.count(BLUE)
        assert s.top() is (model[-1] if model else None)
