"""
Ядро: вершини й симплекс, крок Нелдера–Міда, комбінатори зупинки та двигун.
"""

from .combinators import compose, give_up, goal, take
from .engine import OptimizationEngine, OptimizationRunResult
from .functions import FUNCTIONS, TargetFunction, as_point
from .iteration_result import IterationRecord
from .nelder_mead import (
    SimplexCoefficients,
    StepResult,
    iterate,
    minimize,
    nelder_mead_step,
)
from .results_summary import ResultsSummary
from .simplex import Vertex, initial_simplex, insert_vertex, make_box, sort_vertices
from .vector_ops import centroid, move_towards

__all__ = [
    "compose",
    "give_up",
    "goal",
    "take",
    "OptimizationEngine",
    "OptimizationRunResult",
    "FUNCTIONS",
    "TargetFunction",
    "as_point",
    "IterationRecord",
    "SimplexCoefficients",
    "StepResult",
    "iterate",
    "minimize",
    "nelder_mead_step",
    "ResultsSummary",
    "Vertex",
    "initial_simplex",
    "insert_vertex",
    "make_box",
    "sort_vertices",
    "centroid",
    "move_towards",
]
