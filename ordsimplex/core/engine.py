"""
engine.py

Двигун, що запускає minimize з типовою політикою зупинки:

    goal(target) . give_up(k) . take(n) . minimize(box, x0, h)

Функціонал:
    - обмежує кількість ітерацій (take), обрізає плато (give_up),
      вибирає перший запис, що досяг мети (goal) — саме в такому порядку;
    - формує трасу записів, які дійшли до goal (для таблиць і звітів);
    - рахує кількість викликів цільової функції;
    - фіксує причину зупинки ("goal", "give_up", "max_iter", "exhausted");
    - підтримує callback для логів на кожній ітерації.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional

import numpy as np

from .combinators import compose, give_up, goal, take
from .functions import Objective, Point, PointLike, as_point
from .iteration_result import IterationRecord
from .nelder_mead import SimplexCoefficients, minimize
from .simplex import BoxLike

_LOGGER = logging.getLogger(__name__)

METHOD_NAME = "Nelder–Mead (ordered results)"


@dataclass
class OptimizationRunResult:
    """
    Підсумок одного запуску оптимізації.

    Атрибути:
        method_name - назва методу.
        iterations  - записи, що пройшли take і give_up (траса процесу).
        x_star      - знайдена точка (вибрана goal).
        best        - значення цільової функції в x_star.
        worst       - найгірше значення симплекса на тій самій ітерації.
        n_iter      - кількість записів у трасі.
        func_evals  - кількість викликів цільової функції.
        stopped_by  - причина зупинки ("goal", "give_up", "max_iter", "exhausted").
    """
    method_name: str
    iterations: List[IterationRecord]
    x_star: Point
    best: Any
    worst: Any
    n_iter: int
    func_evals: int
    stopped_by: str


# Тип callback'а для логів: (номер ітерації, запис)
IterationCallback = Callable[[int, IterationRecord], None]


class _CountingObjective:
    """Обгортка над цільовою функцією з лічильником викликів."""

    def __init__(self, func: Objective) -> None:
        self.func = func
        self.calls = 0

    def __call__(self, x: Point) -> Any:
        self.calls += 1
        return self.func(x)


def _trace(records: Iterable[IterationRecord], sink: List[IterationRecord]) -> Iterator[IterationRecord]:
    for record in records:
        sink.append(record)
        yield record


def _never(_value: Any) -> bool:
    return False


class OptimizationEngine:
    """
    Движок, який керує ітераційним процесом Нелдера–Міда.

    Налаштування за замовчуванням (можуть бути переозначені у run()):
        max_iter         : максимальна кількість ітерацій (default: 200)
        stagnation_limit : скільки кроків поспіль без прогресу терпіти,
                           0 вимикає give_up (default: 50)
        box              : розмір початкової "коробки" (default: 1.0)
    """

    def __init__(
        self,
        max_iter: int = 200,
        stagnation_limit: int = 50,
        box: BoxLike = 1.0,
    ) -> None:
        self.max_iter_default = max_iter
        self.stagnation_limit_default = stagnation_limit
        self.box_default = box

    def run(
        self,
        objective: Objective,
        x0: PointLike,
        box: Optional[BoxLike] = None,
        max_iter: Optional[int] = None,
        stagnation_limit: Optional[int] = None,
        target: Optional[Callable[[Any], bool]] = None,
        callback: Optional[IterationCallback] = None,
        coefficients: Optional[SimplexCoefficients] = None,
    ) -> OptimizationRunResult:
        """
        Запустити процес оптимізації.
        """
        max_iter = max_iter if max_iter is not None else self.max_iter_default
        stagnation_limit = (
            stagnation_limit if stagnation_limit is not None else self.stagnation_limit_default
        )
        box = box if box is not None else self.box_default
        predicate = target if target is not None else _never
        # minimize скінченна лише для порожньої стартової точки
        finite = as_point(x0).size == 0

        counted = _CountingObjective(objective)
        records = minimize(box, x0, counted, coefficients)

        taken: List[IterationRecord] = []
        kept: List[IterationRecord] = []

        def report(stream: Iterable[IterationRecord]) -> Iterator[IterationRecord]:
            for record in _trace(stream, kept):
                if callback is not None:
                    callback(len(kept) - 1, record)
                yield record

        # Порядок: спочатку take, потім give_up, потім goal
        stages = [goal(predicate), report]
        if stagnation_limit != 0:
            stages.append(give_up(stagnation_limit))
        stages.append(lambda stream: _trace(stream, taken))
        stages.append(take(max_iter))

        _LOGGER.info(
            "%s: старт, max_iter=%d, stagnation_limit=%d",
            METHOD_NAME, max_iter, stagnation_limit,
        )
        selected = compose(*stages)(records)

        if target is not None and target(selected.best):
            stopped_by = "goal"
        elif len(kept) < len(taken):
            stopped_by = "give_up"
        elif finite or len(taken) < max_iter:
            stopped_by = "exhausted"
        else:
            stopped_by = "max_iter"

        _LOGGER.info(
            "%s: зупинка за %s після %d ітерацій, %d обчислень, найкраще %r",
            METHOD_NAME, stopped_by, len(kept), counted.calls, selected.best,
        )

        return OptimizationRunResult(
            method_name=METHOD_NAME,
            iterations=kept,
            x_star=np.array(selected.point, dtype=float),
            best=selected.best,
            worst=selected.worst,
            n_iter=len(kept),
            func_evals=counted.calls,
            stopped_by=stopped_by,
        )


__all__ = [
    "METHOD_NAME",
    "OptimizationRunResult",
    "IterationCallback",
    "OptimizationEngine",
]
