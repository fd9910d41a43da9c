"""Винятки-діагностики розв'язувача (передаються в SolverResult.error)."""

from __future__ import annotations


class RootFindingError(Exception):
    """Базовий виняток для помилок пошуку кореня."""


class NonFiniteValueError(RootFindingError):
    """
    Функція повернула значення, яке не є скінченним дійсним числом
    (NaN, нескінченність, комплексне число, None).
    """

    def __init__(self, x: float, y: object) -> None:
        super().__init__(f"NaN or undefined with x = {x}")
        self.x = x
        self.y = y


__all__ = [
    "RootFindingError",
    "NonFiniteValueError",
]
