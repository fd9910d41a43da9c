"""
functions.py

Модуль з чисельною похідною та набором тестових рівнянь f(x) = 0.
Формат:
    - усі функції працюють зі скаляром x: float;
    - реалізовані:
        f, g, h, j - тестові рівняння з відомими коренями;
    - є реєстр FUNCTIONS для зручного вибору рівняння в тестах/движку.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

import numpy as np

ScalarFunction = Callable[[float], float]


# ---------------------------------------------------------------------------
# Чисельна похідна (права різниця)
# ---------------------------------------------------------------------------

def numerical_derivative(
    func: ScalarFunction,
    value: float,
    delta: float,
    f_value: Optional[float] = None,
) -> float:
    """
    Чисельна похідна за правою (односторонньою) різницею.

    f'(x) ≈ (f(x + δ) - f(x)) / δ

    Якщо f(x) вже обчислено, його можна передати як f_value -
    тоді функція викликається лише один раз.
    Винятки, які кидає func, не перехоплюються.
    """
    if delta == 0:
        raise ValueError("numerical_derivative: крок delta не може дорівнювати нулю.")

    f_x = func(value) if f_value is None else f_value
    return (func(value + delta) - f_x) / delta


# ---------------------------------------------------------------------------
# Тестові рівняння
# ---------------------------------------------------------------------------
# Для від'ємної основи з дробовим степенем numpy повертає nan
# (а не комплексне число), тож такі точки дають статус ERROR.

def f(x: float) -> float:
    """
    f(x) = sin(x)^2 - sqrt(x) + x^3 - 12
    """
    x = np.float64(x)
    return np.sin(x) ** 2 - np.sqrt(x) + x ** 3 - 12.0


def g(x: float) -> float:
    """
    g(x) = x^PI + sqrt(2)/x - 3^x - 2
    """
    x = np.float64(x)
    return np.power(x, np.pi) + np.sqrt(2.0) / x - np.power(3.0, x) - 2.0


def h(x: float) -> float:
    """
    h(x) = (x^2 + 2)/(x^3 - 2x + 4) - (e^(2x) - x^(1/3))/(4x - 8x^2) - 4
    """
    x = np.float64(x)
    term1 = (x ** 2 + 2.0) / (x ** 3 - 2.0 * x + 4.0)
    term2 = (np.exp(2.0 * x) - np.power(x, 1.0 / 3.0)) / (4.0 * x - 8.0 * x ** 2)
    return term1 - term2 - 4.0


def j(x: float) -> float:
    """
    j(x) = cos(2x) + cos(x^2)/2 + PI^x - 4
    """
    x = np.float64(x)
    return np.cos(2.0 * x) + np.cos(x ** 2) / 2.0 + np.power(np.pi, x) - 4.0


# ---------------------------------------------------------------------------
# Реєстр рівнянь
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    """
    Опис тестового рівняння.

    cases - пари (x0, zero_point): початкове наближення і корінь,
    до якого з нього збігається метод Ньютона (з точністю ~1e-5).
    """
    key: str
    name: str
    func: ScalarFunction
    cases: Tuple[Tuple[float, float], ...] = field(default_factory=tuple)


FUNCTIONS: Dict[str, TargetFunction] = {
    "f": TargetFunction(
        key="f",
        name="f(x) = sin(x)^2 - sqrt(x) + x^3 - 12",
        func=f,
        cases=(
            (2.0, 2.35320),
            (3.0, 2.35320),
            (1.0, 2.35320),
        ),
    ),
    "g": TargetFunction(
        key="g",
        name="g(x) = x^PI + sqrt(2)/x - 3^x - 2",
        func=g,
        cases=(
            (0.1, 0.40398),
            (0.5, 0.40398),
            (2.0, 2.34405),
            (3.0, 2.34405),
            (4.0, 3.77775),
        ),
    ),
    "h": TargetFunction(
        key="h",
        name="h(x) = (x^2+2)/(x^3-2x+4) - (e^(2x)-x^(1/3))/(4x-8x^2) - 4",
        func=h,
        cases=(
            # Корені -1.85004 та -0.07877 лежать там, де x^(1/3) не дійсне
            (0.7, 0.67389),
            (3.0, 2.43322),
        ),
    ),
    "j": TargetFunction(
        key="j",
        name="j(x) = cos(2x) + cos(x^2)/2 + PI^x - 4",
        func=j,
        cases=(
            (-2.0, 1.44196),
            (0.0, 1.44196),
            (1.0, 1.44196),
            (2.0, 1.44196),
        ),
    ),
}

__all__ = [
    "ScalarFunction",
    "numerical_derivative",
    "f", "g", "h", "j",
    "TargetFunction",
    "FUNCTIONS",
]
