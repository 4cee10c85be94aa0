"""
vector_ops.py

Покоординатні операції над точками, з яких складаються всі кроки симплекса.

    move_towards(p, a, q) = p + a * (q - p)
        a = 0    -> p
        a = 1    -> q
        a = 2    -> відбиття p відносно q
        a = 3    -> розширення
        0 < a < 1 -> стиснення / контракт

    centroid(points) = середнє арифметичне точок по кожній координаті
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .functions import Point, PointLike, as_point


def _check_same_dimension(name: str, points: Sequence[Point]) -> None:
    size = points[0].size
    for point in points[1:]:
        if point.size != size:
            raise ValueError(
                f"{name}: точки різної розмірності ({size} і {point.size})"
            )


def move_towards(p: PointLike, a: float, q: PointLike) -> Point:
    """Точка p + a * (q - p). Обидві точки мають бути однієї розмірності."""
    p = as_point(p)
    q = as_point(q)
    _check_same_dimension("move_towards", [p, q])

    result = p + float(a) * (q - p)
    result.setflags(write=False)
    return result


def centroid(points: Sequence[PointLike]) -> Point:
    """
    Центроїд (покоординатне середнє) непорожнього списку точок.
    """
    if len(points) == 0:
        raise ValueError("centroid: порожній список точок")

    pts = [as_point(p) for p in points]
    _check_same_dimension("centroid", pts)

    result = np.mean(np.vstack(pts), axis=0)
    result.setflags(write=False)
    return result


__all__ = [
    "move_towards",
    "centroid",
]
