"""
results_summary.py

Зведена таблиця результатів кількох запусків оптимізації
(різні цільові функції, стартові точки чи налаштування двигуна).

Працює поверх об'єктів, які мають інтерфейс як OptimizationRunResult:
    - method_name
    - x_star
    - best
    - worst
    - n_iter
    - func_evals
    - stopped_by
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


def _plain(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


@dataclass
class ResultsSummary:
    """
    Зведення результатів кількох запусків.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(run_sphere, label="sphere")
        summary.add_run(run_rosenbrock, label="rosenbrock")
        rows = summary.as_rows()  # для pandas / CSV / друку
    """
    runs: List[Any] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    def add_run(self, run: Any, label: Optional[str] = None) -> None:
        """Додати результат одного запуску до зведення."""
        self.runs.append(run)
        self.labels.append(label if label is not None else f"run{len(self.runs)}")

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків з полями:
            label, method, x_star, best, worst, n_iter, func_evals, stopped_by
        """
        rows: List[Dict[str, Any]] = []

        for label, run in zip(self.labels, self.runs):
            x_star = getattr(run, "x_star", None)
            n_iter = getattr(run, "n_iter", None)
            func_evals = getattr(run, "func_evals", None)

            if isinstance(x_star, np.ndarray):
                x_star = x_star.tolist()

            rows.append(
                {
                    "label": label,
                    "method": getattr(run, "method_name", "<unknown>"),
                    "x_star": x_star,
                    "best": _plain(getattr(run, "best", None)),
                    "worst": _plain(getattr(run, "worst", None)),
                    "n_iter": int(n_iter) if n_iter is not None else None,
                    "func_evals": int(func_evals) if func_evals is not None else None,
                    "stopped_by": getattr(run, "stopped_by", None),
                }
            )

        return rows

    # ------------------------------------------------------------------
    # Вибір "найкращого" запуску
    # ------------------------------------------------------------------

    def best_by_result(self) -> Optional[Any]:
        """
        Повернути run з найменшим значенням best (порівняння лише через <).
        При рівності залишається перший доданий. Порожнє зведення — None.
        """
        best_run = None

        for run in self.runs:
            if getattr(run, "best", None) is None:
                continue
            if best_run is None or run.best < best_run.best:
                best_run = run

        return best_run

    def to_dataframe(self):
        """
        Повернути pandas.DataFrame зі зведеною таблицею.

        Вимога: встановлений пакет pandas (extra "pandas").
        """
        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "Для використання ResultsSummary.to_dataframe() "
                "потрібно встановити пакет 'pandas'."
            ) from exc

        return pd.DataFrame(self.as_rows())


__all__ = ["ResultsSummary"]
