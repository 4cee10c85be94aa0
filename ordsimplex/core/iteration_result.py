"""
iteration_result.py

Запис про хід однієї ітерації: (найкраща точка, найкраще значення, найгірше значення).
Послідовність таких записів — зовнішній контракт методу minimize
і вхід для комбінаторів goal / give_up / take.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class IterationRecord:
    """
    Опис однієї ітерації.

    Атрибути:
        point - найкраща точка симплекса до переходу в наступний стан
        best  - значення цільової функції в point
        worst - значення в найгіршій вершині симплекса
    """
    point: np.ndarray
    best: Any
    worst: Any

    def __iter__(self) -> Iterator[Any]:
        return iter((self.point, self.best, self.worst))

    def as_tuple(self) -> Tuple[np.ndarray, Any, Any]:
        return self.point, self.best, self.worst


__all__ = [
    "IterationRecord",
]
