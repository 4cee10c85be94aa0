import logging

import pytest

from ordsimplex.core.engine import METHOD_NAME, OptimizationEngine
from ordsimplex.core.functions import FUNCTIONS, lexicographic, sphere


def test_run_stops_by_max_iter():
    engine = OptimizationEngine(stagnation_limit=0)
    result = engine.run(sphere, [10.0, 10.0], box=[1.0, 1.0], max_iter=200)

    assert result.method_name == METHOD_NAME
    assert result.stopped_by == "max_iter"
    assert result.n_iter == 200
    assert len(result.iterations) == 200
    assert result.best < 1e-6
    assert result.func_evals > 200


def test_run_stops_by_goal():
    engine = OptimizationEngine()
    result = engine.run(sphere, [10.0, 10.0], target=lambda x: x < 1e-2)

    assert result.stopped_by == "goal"
    assert result.best < 1e-2
    assert result.n_iter < 200
    assert result.iterations[-1].best == result.best


def test_run_stops_by_give_up_and_counts_evaluations():
    engine = OptimizationEngine(stagnation_limit=3)
    result = engine.run(lambda x: 1, [0.0, 0.0])

    assert result.stopped_by == "give_up"
    assert result.n_iter == 3
    # 3 вершини початкового симплекса + 3 стиснення по 4 обчислення
    assert result.func_evals == 15


def test_run_on_empty_point_is_exhausted():
    result = OptimizationEngine().run(lambda x: 7, [])

    assert result.stopped_by == "exhausted"
    assert result.n_iter == 1
    assert result.best == 7 and result.worst == 7
    assert result.x_star.size == 0
    assert result.func_evals == 1


def test_run_callback_sees_every_kept_record():
    seen = []
    result = OptimizationEngine().run(
        sphere, [1.0, 2.0], max_iter=25, callback=lambda i, record: seen.append((i, record)),
    )

    assert [i for i, _ in seen] == list(range(result.n_iter))
    assert [r for _, r in seen] == result.iterations


def test_run_with_ordered_tuple_results():
    tf = FUNCTIONS["lexicographic"]
    result = OptimizationEngine().run(tf.func, tf.start, max_iter=100)

    assert isinstance(result.best, tuple)
    assert result.best <= lexicographic(tf.start)


def test_run_propagates_objective_errors():
    def broken(x):
        raise ZeroDivisionError("bad point")

    with pytest.raises(ZeroDivisionError):
        OptimizationEngine().run(broken, [1.0])


def test_run_logs_stop_reason(caplog):
    with caplog.at_level(logging.INFO, logger="ordsimplex.core.engine"):
        OptimizationEngine().run(sphere, [1.0], max_iter=5, stagnation_limit=0)
    assert any("max_iter" in message for message in caplog.messages)


@pytest.mark.parametrize("limit", [-1, -4])
def test_run_rejects_negative_stagnation_limit(limit):
    with pytest.raises(ValueError, match="give_up"):
        OptimizationEngine().run(lambda x: 1, [0.0, 0.0], max_iter=30, stagnation_limit=limit)


def test_run_on_empty_point_capped_at_one_is_exhausted():
    result = OptimizationEngine().run(lambda x: 7, [], max_iter=1)

    assert result.stopped_by == "exhausted"
    assert result.n_iter == 1
