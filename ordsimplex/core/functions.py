"""
functions.py

Базові типи (точка, цільова функція) та набір тестових цільових функцій.

Формат:
    - точка — одновимірний numpy.ndarray з float, доступний лише для читання;
    - цільова функція приймає точку і повертає значення будь-якого типу
      з повним порядком (float, int, кортеж, ...);
    - є реєстр FUNCTIONS для зручного вибору функції в демо / тестах.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple, Union

import numpy as np

Point = np.ndarray
PointLike = Union[np.ndarray, Sequence[float]]
Objective = Callable[[Point], Any]


def as_point(x: PointLike) -> Point:
    """
    Перетворити послідовність чисел на точку (1-D масив тільки для читання).
    """
    point = np.array(x, dtype=float)
    if point.ndim != 1:
        raise ValueError(
            f"as_point: очікується одновимірна послідовність, отримано форму {point.shape}"
        )
    point.setflags(write=False)
    return point


# ---------------------------------------------------------------------------
# Тестові цільові функції (довільна розмірність, якщо не сказано інше)
# ---------------------------------------------------------------------------

def sphere(x: Point) -> float:
    """
    sphere(x) = sum(x_i^2), мінімум 0 у початку координат.
    """
    x = np.asarray(x, dtype=float)
    return float(np.sum(x ** 2))


def rosenbrock(x: Point) -> float:
    """
    rosenbrock(x) = sum(100 * (x_{i+1} - x_i^2)^2 + (1 - x_i)^2)
    (узагальнена функція Розенброка, мінімум 0 у точці (1, ..., 1))
    """
    x = np.asarray(x, dtype=float)
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def f2(x: Point) -> float:
    """
    f2(x1, x2) = (x1 - x2)^2 + (x1 + x2 - 10)^2 / 9
    """
    x1, x2 = np.asarray(x, dtype=float)
    return (x1 - x2) ** 2 + (x1 + x2 - 10.0) ** 2 / 9.0


def f8(x: Point) -> float:
    """
    f8(x1, x2) = (x1 - 4)^2 + (x2 - 4)^2
    """
    x1, x2 = np.asarray(x, dtype=float)
    return (x1 - 4.0) ** 2 + (x2 - 4.0) ** 2


def lexicographic(x: Point) -> Tuple[int, float]:
    """
    Нечислова цільова функція: кортеж (кількість від'ємних координат, sphere(x)).

    Кортежі порівнюються лексикографічно, тобто спочатку мінімізується
    кількість від'ємних координат, а вже потім відстань до нуля.
    """
    x = np.asarray(x, dtype=float)
    return int(np.count_nonzero(x < 0.0)), sphere(x)


# ---------------------------------------------------------------------------
# Реєстр функцій для демо / тестів
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    key: str
    name: str
    func: Objective
    start: Tuple[float, ...]


FUNCTIONS: Dict[str, TargetFunction] = {
    "sphere": TargetFunction(
        key="sphere",
        name="sphere(x) = sum(x_i^2)",
        func=sphere,
        start=(10.0, 10.0),
    ),
    "rosenbrock": TargetFunction(
        key="rosenbrock",
        name="rosenbrock(x1, x2) = 100 * (x2 - x1^2)^2 + (1 - x1)^2",
        func=rosenbrock,
        start=(-1.2, 1.0),
    ),
    "f2": TargetFunction(
        key="f2",
        name="f2(x1, x2) = (x1 - x2)^2 + (x1 + x2 - 10)^2 / 9",
        func=f2,
        start=(0.0, 0.0),
    ),
    "f8": TargetFunction(
        key="f8",
        name="f8(x1, x2) = (x1 - 4)^2 + (x2 - 4)^2",
        func=f8,
        start=(0.0, 0.0),
    ),
    "lexicographic": TargetFunction(
        key="lexicographic",
        name="lexicographic(x) = (#{x_i < 0}, sum(x_i^2))",
        func=lexicographic,
        start=(-3.0, 2.0, -1.0),
    ),
}

__all__ = [
    "Point",
    "PointLike",
    "Objective",
    "as_point",
    "sphere",
    "rosenbrock",
    "f2",
    "f8",
    "lexicographic",
    "TargetFunction",
    "FUNCTIONS",
]
