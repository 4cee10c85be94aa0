"""
nelder_mead.py

Варіант методу Нелдера–Міда для функцій з дійсними аргументами,
але не обов'язково дійсними значеннями: достатньо повного порядку.

Метод оформлено як ліниву (потенційно нескінченну) послідовність записів
IterationRecord(point, best, worst). Зупинку обирає користувач,
комбінуючи goal / give_up / take з модуля combinators:

    compose(goal(p), give_up(k), take(n))(minimize(box, x0, h))

Один крок над відсортованим симплексом:
    1. Центроїд pO усіх вершин, окрім найгіршої pL.
    2. Відбиття    pR = pL -> pO з коефіцієнтом 2.
    3. Розширення  pE = pL -> pO з коефіцієнтом 3.
    4. Контракт    pC = pL -> pO з коефіцієнтом 0.4 (не 0.5, щоб не
       отримати ту саму точку двічі).
    5. Стиснення: кожна вершина, крім найкращої, зсувається на 15%
       у бік найкращої.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .functions import Objective, PointLike, as_point
from .iteration_result import IterationRecord
from .simplex import (
    BoxLike,
    Simplex,
    Vertex,
    check_simplex,
    evaluate,
    initial_simplex,
    insert_vertex,
    make_box,
    sort_vertices,
)
from .vector_ops import centroid, move_towards

_LOGGER = logging.getLogger(__name__)

STEP_REFLECT = "reflect"
STEP_EXPAND = "expand"
STEP_CONTRACT = "contract"
STEP_SHRINK = "shrink"


@dataclass(frozen=True)
class SimplexCoefficients:
    """
    Коефіцієнти руху move_towards(pL, a, pO) та стиснення.

    Налаштування:
        reflect  : відбиття (default: 2.0)
        expand   : розширення (default: 3.0)
        contract : контракт (default: 0.4)
        shrink   : частка шляху до найкращої вершини при стисненні (default: 0.15)
    """
    reflect: float = 2.0
    expand: float = 3.0
    contract: float = 0.4
    shrink: float = 0.15


DEFAULT_COEFFICIENTS = SimplexCoefficients()


@dataclass(frozen=True, eq=False)
class StepResult:
    """
    Результат одного кроку.

    Атрибути:
        record     - запис про симплекс до переходу
        simplex    - новий відсортований симплекс
        step_type  - "reflect" / "expand" / "contract" / "shrink"
        func_evals - кількість нових обчислень цільової функції
    """
    record: IterationRecord
    simplex: Simplex
    step_type: str
    func_evals: int


def simplex_record(simplex: Sequence[Vertex]) -> IterationRecord:
    best = simplex[0]
    return IterationRecord(point=best.point, best=best.result, worst=simplex[-1].result)


# ---------------------------------------------------------------------------
# Один крок методу
# ---------------------------------------------------------------------------

def nelder_mead_step(
    simplex: Simplex,
    objective: Objective,
    coefficients: Optional[SimplexCoefficients] = None,
) -> StepResult:
    """
    Один крок над відсортованим симплексом; вхідний симплекс не змінюється.

    Розширення обчислюється лише тоді, коли відбиття краще за найкращу
    вершину, контракт — лише тоді, коли відбиття не краще
    за передостанню вершину.
    """
    c = coefficients or DEFAULT_COEFFICIENTS

    best = simplex[0]
    worst = simplex[-1]
    kept = simplex[:-1]

    x0 = best.result
    xN = kept[-1].result
    xL = worst.result

    p_o = centroid([v.point for v in kept])

    reflected = evaluate(move_towards(worst.point, c.reflect, p_o), objective)
    evals = 1

    if reflected.result < xN:
        if x0 <= reflected.result:
            accepted, step_type = reflected, STEP_REFLECT
        else:
            expanded = evaluate(move_towards(worst.point, c.expand, p_o), objective)
            evals += 1
            if reflected.result <= expanded.result:
                accepted, step_type = reflected, STEP_REFLECT
            else:
                accepted, step_type = expanded, STEP_EXPAND
        new_simplex = insert_vertex(kept, accepted)
    else:
        contracted = evaluate(move_towards(worst.point, c.contract, p_o), objective)
        evals += 1
        if contracted.result < xL:
            step_type = STEP_CONTRACT
            new_simplex = insert_vertex(kept, contracted)
        else:
            step_type = STEP_SHRINK
            shrunk = [
                evaluate(move_towards(v.point, c.shrink, best.point), objective)
                for v in simplex[1:]
            ]
            evals += len(shrunk)
            new_simplex = sort_vertices([best] + shrunk)

    _LOGGER.debug(
        "Nelder–Mead: %s, найкраще %r, найгірше %r, обчислень %d",
        step_type, x0, xL, evals,
    )

    return StepResult(
        record=simplex_record(simplex),
        simplex=new_simplex,
        step_type=step_type,
        func_evals=evals,
    )


# ---------------------------------------------------------------------------
# Лінива послідовність записів
# ---------------------------------------------------------------------------

def iterate(
    simplex: Sequence[Vertex],
    objective: Objective,
    coefficients: Optional[SimplexCoefficients] = None,
) -> Iterator[IterationRecord]:
    """
    Нескінченна послідовність записів, починаючи з довільного знімка симплекса.

    Запис видається до обчислення наступного кроку, тому споживач,
    що взяв k записів, оплачує лише k - 1 переходів.
    """
    return _iterate(check_simplex(simplex), objective, coefficients)


def _iterate(current: Simplex, objective: Objective, coefficients) -> Iterator[IterationRecord]:
    while True:
        yield simplex_record(current)
        current = nelder_mead_step(current, objective, coefficients).simplex


def _single_point(start, objective: Objective) -> Iterator[IterationRecord]:
    value = objective(start)
    yield IterationRecord(point=start, best=value, worst=value)


def _run(box, start, objective, coefficients) -> Iterator[IterationRecord]:
    yield from _iterate(initial_simplex(box, start, objective), objective, coefficients)


def minimize(
    box: BoxLike,
    start: PointLike,
    objective: Objective,
    coefficients: Optional[SimplexCoefficients] = None,
) -> Iterator[IterationRecord]:
    """
    Мінімізувати objective, починаючи з точки start.

    Parameters
    ----------
    box : float або вектор
        Розмір "коробки" — початкові зміщення по кожній осі.
        Скаляр d означає [d, d, ..., d].
    start : послідовність float
        Початкова точка. Для порожньої точки послідовність містить
        рівно один запис, а box ігнорується.
    objective : Callable[[np.ndarray], Any]
        Функція, що мінімізується; результат має підтримувати повний порядок.

    Returns
    -------
    Iterator[IterationRecord]
        Лінива послідовність (point, best, worst). Нічого не обчислюється,
        доки споживач не попросить перший запис.
    """
    start = as_point(start)
    if start.size == 0:
        return _single_point(start, objective)

    box = make_box(box, start.size)
    return _run(box, start, objective, coefficients)


__all__ = [
    "STEP_REFLECT",
    "STEP_EXPAND",
    "STEP_CONTRACT",
    "STEP_SHRINK",
    "SimplexCoefficients",
    "DEFAULT_COEFFICIENTS",
    "StepResult",
    "simplex_record",
    "nelder_mead_step",
    "iterate",
    "minimize",
]
