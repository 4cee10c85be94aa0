"""
simplex.py

Вершини та симплекс для методу Нелдера–Міда з упорядкованими значеннями.

Симплекс — це кортеж з (n + 1) вершин у n-вимірному просторі,
завжди відсортований за зростанням значення цільової функції:
    simplex[0]  - найкраща вершина
    simplex[-1] - найгірша вершина

Симплекс ніколи не змінюється на місці: кожна операція повертає новий кортеж.
Від значень функції вимагається лише повний порядок (<, <=, ==).
Рівні значення впорядковуються лексикографічно за координатами точки.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple, Union

import numpy as np

from .functions import Objective, Point, PointLike, as_point


@dataclass(frozen=True, eq=False)
class Vertex:
    """
    Вершина симплекса: точка разом зі значенням цільової функції в ній.
    """
    point: Point
    result: Any

    def sort_key(self) -> Tuple[Any, Tuple[float, ...]]:
        return self.result, tuple(self.point.tolist())


Simplex = Tuple[Vertex, ...]
BoxLike = Union[float, PointLike]


def evaluate(point: PointLike, objective: Objective) -> Vertex:
    """Обчислити цільову функцію в точці і повернути нову вершину."""
    point = as_point(point)
    return Vertex(point=point, result=objective(point))


def sort_vertices(vertices: Iterable[Vertex]) -> Simplex:
    return tuple(sorted(vertices, key=Vertex.sort_key))


def insert_vertex(vertices: Sequence[Vertex], vertex: Vertex) -> Simplex:
    """
    Вставити вершину у вже відсортовану послідовність, зберігаючи порядок.

    Нова вершина стає перед першою вершиною, ключ якої не менший за її ключ.
    """
    key = vertex.sort_key()
    index = len(vertices)
    for i, other in enumerate(vertices):
        if not other.sort_key() < key:
            index = i
            break
    return tuple(vertices[:index]) + (vertex,) + tuple(vertices[index:])


def make_box(box: BoxLike, dimension: int) -> Point:
    """
    Вектор початкових зміщень ("коробка") розмірності dimension.

    Скаляр d розгортається у [d, d, ..., d]; вектор має збігатися
    з розмірністю стартової точки.
    """
    if np.ndim(box) == 0:
        return as_point(np.full(dimension, float(box)))

    box = as_point(box)
    if box.size != dimension:
        raise ValueError(
            f"make_box: розмірність коробки {box.size} не збігається "
            f"з розмірністю точки {dimension}"
        )
    return box


def initial_simplex(box: BoxLike, start: PointLike, objective: Objective) -> Simplex:
    """
    Побудова початкового симплекса навколо start.

    Вершина 0 — сама точка start, вершина i (1..n) — start, у якої
    координату i-1 зсунуто на box[i-1]. Усі вершини обчислюються
    і сортуються за значенням цільової функції.
    """
    start = as_point(start)
    n = start.size
    box = make_box(box, n)

    points = [start]
    for i in range(n):
        y = start.copy()
        y[i] = start[i] + box[i]
        points.append(y)

    return sort_vertices(evaluate(p, objective) for p in points)


def check_simplex(simplex: Sequence[Vertex]) -> Simplex:
    """
    Перевірити знімок симплекса перед продовженням ітерацій.
    """
    simplex = tuple(simplex)
    if len(simplex) < 2:
        raise ValueError("check_simplex: симплекс має містити щонайменше дві вершини")

    n = simplex[0].point.size
    for vertex in simplex:
        if vertex.point.size != n:
            raise ValueError("check_simplex: вершини різної розмірності")
    if len(simplex) != n + 1:
        raise ValueError(
            f"check_simplex: для розмірності {n} потрібно {n + 1} вершин, "
            f"отримано {len(simplex)}"
        )

    for prev, cur in zip(simplex, simplex[1:]):
        if cur.sort_key() < prev.sort_key():
            raise ValueError("check_simplex: вершини не відсортовані за значенням")

    return simplex


__all__ = [
    "Vertex",
    "Simplex",
    "BoxLike",
    "evaluate",
    "sort_vertices",
    "insert_vertex",
    "make_box",
    "initial_simplex",
    "check_simplex",
]
