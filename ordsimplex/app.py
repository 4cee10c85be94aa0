"""
app.py

Консольний демо-прогін мінімізації для всіх функцій з реєстру FUNCTIONS.

Для кожної функції:
    - запускає OptimizationEngine зі стартової точки з реєстру;
    - додає результат до ResultsSummary;
    - друкує зведену таблицю та найкращий запуск.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ordsimplex.core.engine import OptimizationEngine, OptimizationRunResult
from ordsimplex.core.functions import FUNCTIONS
from ordsimplex.core.results_summary import ResultsSummary


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ordsimplex-demo",
        description="Мінімізація тестових функцій методом Нелдера–Міда.",
    )
    parser.add_argument("--max-iter", type=int, default=200, help="максимум ітерацій (take)")
    parser.add_argument(
        "--stagnation", type=int, default=50,
        help="кроків поспіль без прогресу до зупинки (give_up), 0 - вимкнути",
    )
    parser.add_argument("--box", type=float, default=1.0, help="розмір початкової коробки")
    parser.add_argument("--verbose", action="store_true", help="логи рівня DEBUG")
    return parser.parse_args(argv)


def run_all_functions(engine: OptimizationEngine) -> ResultsSummary:
    """
    Запустити двигун для кожної функції з реєстру.
    Помилка однієї функції не зупиняє решту.
    """
    summary = ResultsSummary()

    for key, tf in FUNCTIONS.items():
        try:
            result: OptimizationRunResult = engine.run(objective=tf.func, x0=tf.start)
        except Exception as exc:  # noqa: BLE001
            print(f"[WARN] Функція {key} завершилась помилкою: {exc}")
            continue

        summary.add_run(result, label=key)

    return summary


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = OptimizationEngine(
        max_iter=args.max_iter,
        stagnation_limit=args.stagnation,
        box=args.box,
    )
    summary = run_all_functions(engine)

    for row in summary.as_rows():
        print(
            f"{row['label']:<14} best={row['best']!r:<28} "
            f"n_iter={row['n_iter']:<4} evals={row['func_evals']:<5} "
            f"stopped_by={row['stopped_by']:<9} x*={row['x_star']}"
        )

    # Різні функції мають різні типи значень, тому найкращий шукаємо
    # лише серед числових результатів.
    numeric = ResultsSummary()
    for label, run in zip(summary.labels, summary.runs):
        if isinstance(run.best, (int, float)):
            numeric.add_run(run, label=label)

    best = numeric.best_by_result()
    if best is not None:
        label = next(lbl for lbl, run in zip(numeric.labels, numeric.runs) if run is best)
        print(f"Найкращий запуск: {label}, best = {best.best:.6e}, x* = {best.x_star.tolist()}")
    else:
        print("Не вдалося визначити найкращий запуск (немає числових результатів).")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
