"""
combinators.py

Перетворювачі послідовності записів IterationRecord, з яких користувач
складає власний критерій зупинки:

    goal(p)     - перший запис, де p(best) істинне (або останній запис);
    give_up(k)  - обрізає послідовність після k кроків поспіль без прогресу;
    take(n)     - не більше n перших записів;
    compose     - композиція справа наліво, як у математиці.

Типове використання (порядок має значення: give_up бачить лише те,
що пропустив take):

    compose(goal(p), give_up(k), take(n))(minimize(box, x0, h))
"""

from __future__ import annotations

import numbers
from functools import reduce
from itertools import islice
from typing import Any, Callable, Iterable, Iterator

from .iteration_result import IterationRecord

Records = Iterable[IterationRecord]
Transformer = Callable[[Records], Any]


def _check_count(name: str, value: int, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name}: очікується ціле число, отримано {type(value).__name__}")
    if value < minimum:
        raise ValueError(f"{name}: значення має бути не менше {minimum}, отримано {value}")


def goal(predicate: Callable[[Any], bool]) -> Callable[[Records], IterationRecord]:
    """
    Вибрати перший запис, найкраще значення якого задовольняє predicate.

    Якщо скінченна послідовність закінчилась без такого запису —
    повертається останній запис. Порожня послідовність — помилка.
    """

    def select(records: Records) -> IterationRecord:
        last = None
        seen = False
        for record in records:
            if predicate(record.best):
                return record
            last = record
            seen = True
        if not seen:
            raise ValueError("goal: порожня послідовність записів")
        return last

    return select


def _is_stagnant(cur: IterationRecord, nxt: IterationRecord) -> bool:
    return nxt.best == cur.best and nxt.worst >= cur.worst


def give_up(limit: int) -> Callable[[Records], Iterator[IterationRecord]]:
    """
    Обрізати послідовність після limit кроків поспіль без прогресу.

    Крок (cur, next) вважається кроком без прогресу, якщо найкраще значення
    не змінилося, а найгірше не покращилося. Будь-який прогрес повертає
    лічильник до limit. Для порівняння з наступним записом він читається
    наперед, тобто вхід випереджає вихід на один запис.
    """
    _check_count("give_up", limit, 1)

    def truncate(records: Records) -> Iterator[IterationRecord]:
        it = iter(records)
        try:
            current = next(it)
        except StopIteration:
            return

        counter = limit
        while counter > 0:
            try:
                nxt = next(it)
            except StopIteration:
                yield current
                return

            if _is_stagnant(current, nxt):
                counter -= 1
            else:
                counter = limit

            yield current
            current = nxt

    return truncate


def take(n: int) -> Callable[[Records], Iterator[IterationRecord]]:
    """Не більше n перших записів."""
    _check_count("take", n, 0)

    def prefix(records: Records) -> Iterator[IterationRecord]:
        return islice(records, int(n))

    return prefix


def compose(*transformers: Transformer) -> Transformer:
    """
    compose(f, g, h)(records) == f(g(h(records))).
    """
    if not transformers:
        raise ValueError("compose: потрібен хоча б один перетворювач")

    def composed(records: Records) -> Any:
        return reduce(lambda acc, transform: transform(acc), reversed(transformers), records)

    return composed


__all__ = [
    "Records",
    "Transformer",
    "goal",
    "give_up",
    "take",
    "compose",
]
