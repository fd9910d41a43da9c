"""
observers.py

Готові callback'и для NewtonSolver.solve(..., callback=...).

    - logging_callback() - пише кожну ітерацію в logging;
    - TraceCollector     - накопичує ітерації (для таблиць / графіків).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .iteration_result import Iteration


def logging_callback(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> Callable[[Iteration], None]:
    """
    Створити callback, який логує кожну ітерацію.
    За замовчуванням використовується логер модуля solver.
    """
    log = logger or logging.getLogger("newton_solver.core.solver")

    def _log_iteration(rec: Iteration) -> None:
        log.log(
            level,
            "Iter #%d - x = %r, f(x) = %r, f'(x) = %r",
            rec.index,
            rec.x,
            rec.y,
            rec.derivative,
        )

    return _log_iteration


@dataclass
class TraceCollector:
    """
    Callback, який збирає ітерації в список.

    Приклад використання:
        collector = TraceCollector()
        solver.solve(fn, callback=collector)
        xs = collector.xs
    """
    iterations: List[Iteration] = field(default_factory=list)

    def __call__(self, rec: Iteration) -> None:
        self.iterations.append(rec)

    def clear(self) -> None:
        self.iterations.clear()

    @property
    def xs(self) -> List[float]:
        return [rec.x for rec in self.iterations]

    @property
    def ys(self) -> List[float]:
        return [rec.y for rec in self.iterations]


__all__ = [
    "logging_callback",
    "TraceCollector",
]
