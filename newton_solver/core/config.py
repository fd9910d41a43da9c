"""
config.py

Незмінна конфігурація розв'язувача рівняння f(x) = 0 методом Ньютона.

Ідея:
    - SolverConfig - заморожений dataclass; після створення не змінюється;
    - значення за замовчуванням (DEFAULT_OPTIONS) накладаються на часткові
      налаштування користувача поле за полем через чисту функцію merge_options();
    - підтримуються також camelCase-ключі (targetPrecision, slopeDelta, ...),
      щоб можна було передати словник опцій "як є".
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union


# ---------------------------------------------------------------------------
# Значення за замовчуванням
# ---------------------------------------------------------------------------

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "target_precision": 1e-10,
        "derivative_delta": 1e-8,
        "max_iterations": 1000,
    }
)

# Альтернативні назви ключів -> канонічні імена полів SolverConfig
OPTION_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "targetPrecision": "target_precision",
        "derivativeDelta": "derivative_delta",
        "slopeDelta": "derivative_delta",
        "slope_delta": "derivative_delta",
        "maxIterations": "max_iterations",
        "max_iter": "max_iterations",
    }
)


@dataclass(frozen=True)
class SolverConfig:
    """
    Налаштування одного запуску розв'язувача.

    Атрибути:
        x0                - початкове наближення (обов'язкове)
        target_precision  - |f(x)| < target_precision вважається розв'язком
        derivative_delta  - крок δ для чисельної похідної
        max_iterations    - максимальна кількість ітерацій (0 - жодної)

    Скінченність значень не перевіряється: некоректні числа проявляться
    як результат зі статусом ERROR під час розв'язування.
    """
    x0: float
    target_precision: float = DEFAULT_OPTIONS["target_precision"]
    derivative_delta: float = DEFAULT_OPTIONS["derivative_delta"]
    max_iterations: int = DEFAULT_OPTIONS["max_iterations"]

    def __post_init__(self) -> None:
        if self.derivative_delta == 0:
            raise ValueError("derivative_delta не може дорівнювати нулю.")
        # NaN/inf не відкидаються: вони проявляться як результат розв'язування
        if self.target_precision <= 0:
            raise ValueError(
                f"target_precision повинен бути додатним, отримано: {self.target_precision}"
            )
        if isinstance(self.max_iterations, bool):
            raise ValueError(
                f"max_iterations повинен бути цілим числом, отримано: {self.max_iterations!r}"
            )
        if self.max_iterations < 0:
            raise ValueError(
                f"max_iterations не може бути від'ємним, отримано: {self.max_iterations}"
            )
        if not math.isfinite(self.max_iterations):
            return
        if int(self.max_iterations) != self.max_iterations:
            raise ValueError(
                f"max_iterations повинен бути цілим числом, отримано: {self.max_iterations!r}"
            )
        # Нормалізація типу (наприклад, 100.0 -> 100)
        object.__setattr__(self, "max_iterations", int(self.max_iterations))

    def replace(self, **changes: Any) -> "SolverConfig":
        """Повернути нову конфігурацію зі зміненими полями."""
        return dataclasses.replace(self, **_normalize_keys(changes))

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


OptionsLike = Union[SolverConfig, Mapping[str, Any]]


# ---------------------------------------------------------------------------
# Злиття налаштувань
# ---------------------------------------------------------------------------

def _normalize_keys(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Привести ключі до канонічних імен полів SolverConfig.
    Значення None відкидаються (не перекривають значень за замовчуванням).
    """
    known = {f.name for f in dataclasses.fields(SolverConfig)}
    normalized: Dict[str, Any] = {}

    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in known:
            raise TypeError(f"Невідомий параметр розв'язувача: {key!r}")
        if value is None:
            continue
        normalized[name] = value

    return normalized


def merge_options(
    options: Optional[OptionsLike] = None,
    **overrides: Any,
) -> SolverConfig:
    """
    Побудувати SolverConfig із значень за замовчуванням, часткових
    налаштувань options та іменованих overrides (у такому порядку
    пріоритету, поле за полем).

    Функція чиста: вхідні об'єкти не змінюються.
    """
    if isinstance(options, SolverConfig):
        base: Mapping[str, Any] = options.as_dict()
    else:
        base = options or {}

    merged: Dict[str, Any] = dict(DEFAULT_OPTIONS)
    merged.update(_normalize_keys(base))
    merged.update(_normalize_keys(overrides))

    if "x0" not in merged:
        raise ValueError("Не задано початкове наближення x0.")

    return SolverConfig(**merged)


__all__ = [
    "DEFAULT_OPTIONS",
    "OPTION_ALIASES",
    "SolverConfig",
    "OptionsLike",
    "merge_options",
]
