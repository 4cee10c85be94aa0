from itertools import count

import numpy as np
import pytest

from ordsimplex.core.combinators import compose, give_up, goal, take
from ordsimplex.core.functions import sphere
from ordsimplex.core.iteration_result import IterationRecord
from ordsimplex.core.nelder_mead import minimize


def rec(best, worst=10):
    return IterationRecord(point=np.array([float(best)]), best=best, worst=worst)


def counting(records, pulled):
    for record in records:
        pulled.append(record)
        yield record


# ---------------------------------------------------------------------------
# goal
# ---------------------------------------------------------------------------

def test_goal_returns_first_satisfying_record():
    records = [rec(5), rec(4), rec(3), rec(2), rec(1)]
    assert goal(lambda x: x <= 3)(records) is records[2]


def test_goal_does_not_look_past_selected_record():
    def source():
        yield rec(5)
        yield rec(4)
        yield rec(3)
        raise AssertionError("goal pulled past the selected record")

    assert goal(lambda x: x <= 3)(source()).best == 3


def test_goal_returns_last_record_when_unsatisfied():
    records = [rec(5), rec(4), rec(3)]
    assert goal(lambda x: x < 0)(records) is records[-1]


def test_goal_on_empty_sequence_fails():
    with pytest.raises(ValueError, match="goal"):
        goal(lambda x: True)([])


# ---------------------------------------------------------------------------
# give_up
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("k", [1, 2, 5, 12])
def test_give_up_on_constant_objective_keeps_k_records(k):
    records = list(give_up(k)(minimize(1.0, [0.0, 0.0], lambda x: 1)))
    assert len(records) == k


def test_give_up_never_truncates_strict_improvement():
    records = [rec(100 - i) for i in range(100)]
    assert list(give_up(1)(records)) == records


def test_give_up_counter_resets_on_progress():
    records = [rec(3), rec(3), rec(3), rec(2), rec(2), rec(2), rec(2), rec(2)]
    assert list(give_up(3)(records)) == records[:6]


def test_give_up_worst_improvement_is_progress():
    records = [rec(1, worst=50 - i) for i in range(50)]
    assert len(list(give_up(2)(records))) == 50


def test_give_up_worse_worst_is_stagnation():
    records = [rec(1, worst=i) for i in range(50)]
    assert len(list(give_up(4)(records))) == 4


def test_give_up_passes_short_sequences():
    assert list(give_up(3)([])) == []
    single = [rec(1)]
    assert list(give_up(3)(single)) == single


@pytest.mark.parametrize("k, error", [(0, ValueError), (-2, ValueError), (1.5, TypeError)])
def test_give_up_rejects_bad_limit(k, error):
    with pytest.raises(error):
        give_up(k)


# ---------------------------------------------------------------------------
# take / compose
# ---------------------------------------------------------------------------

def test_take_limits_infinite_sequence():
    assert list(take(4)(count())) == [0, 1, 2, 3]
    assert list(take(0)(count())) == []


def test_take_rejects_negative():
    with pytest.raises(ValueError):
        take(-1)


def test_compose_applies_right_to_left():
    pipeline = compose(lambda x: x + ["f"], lambda x: x + ["g"])
    assert pipeline([]) == ["g", "f"]


def test_give_up_sees_only_what_take_lets_through():
    constant = [rec(1) for _ in range(10)]

    pulled = []
    list(compose(give_up(5), take(3))(counting(constant, pulled)))
    assert len(pulled) == 3

    pulled = []
    list(compose(take(3), give_up(5))(counting(constant, pulled)))
    assert len(pulled) == 4


def test_typical_policy_on_sphere():
    policy = compose(goal(lambda x: x < 1e-6), give_up(20), take(200))
    point, best, _ = policy(minimize([1.0, 1.0], [10.0, 10.0], sphere))
    assert best < 1e-6
    assert np.linalg.norm(point) < 1e-3


def test_policy_returns_last_record_when_capped():
    policy = compose(goal(lambda x: x < 0), give_up(50), take(7))
    records = list(take(7)(minimize(1.0, [3.0, 3.0], sphere)))
    selected = policy(minimize(1.0, [3.0, 3.0], sphere))
    assert selected.best == records[-1].best
    np.testing.assert_array_equal(selected.point, records[-1].point)
