"""
iteration_result.py

Структура даних для представлення окремої ітерації методу Ньютона.
Використовується як у розв'язувачі (траса), так і в спостерігачах/зведеннях.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Iteration:
    """
    Опис однієї ітерації (незмінний знімок).

    Атрибути:
        index       - номер ітерації (0, 1, 2, ...)
        x           - точка, в якій обчислено функцію (до оновлення x)
        y           - значення f(x)
        derivative  - оцінка похідної f'(x) правою різницею
    """
    index: int
    x: float
    y: float
    derivative: float

    @property
    def next_x(self) -> Optional[float]:
        """
        Точка, отримана з цієї ітерації кроком Ньютона x - y / f'(x).
        None, якщо крок не визначений (нульова похідна або не скінченні значення).
        """
        if self.derivative == 0:
            return None
        if not (math.isfinite(self.y) and math.isfinite(self.derivative)):
            return None
        return self.x - self.y / self.derivative


__all__ = ["Iteration"]
