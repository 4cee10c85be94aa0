"""
ordsimplex - мінімізація функцій з дійсними аргументами і впорядкованими
(не обов'язково числовими) значеннями варіантом методу Нелдера–Міда.

Типове використання:

    from ordsimplex import compose, goal, give_up, take, minimize

    policy = compose(goal(lambda x: x < 1e-6), give_up(20), take(200))
    record = policy(minimize(1.0, [10.0, 10.0], h))
"""

from .core import (
    FUNCTIONS,
    IterationRecord,
    OptimizationEngine,
    OptimizationRunResult,
    ResultsSummary,
    SimplexCoefficients,
    centroid,
    compose,
    give_up,
    goal,
    iterate,
    minimize,
    move_towards,
    nelder_mead_step,
    take,
)

__version__ = "0.1.0"
__all__ = [
    "FUNCTIONS",
    "IterationRecord",
    "OptimizationEngine",
    "OptimizationRunResult",
    "ResultsSummary",
    "SimplexCoefficients",
    "centroid",
    "compose",
    "give_up",
    "goal",
    "iterate",
    "minimize",
    "move_towards",
    "nelder_mead_step",
    "take",
]
