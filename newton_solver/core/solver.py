"""
solver.py

Розв'язувач рівняння f(x) = 0 методом Ньютона з чисельною похідною.

Функціонал:
    - виконує цикл x_{k+1} = x_k - f(x_k) / f'(x_k);
    - похідна оцінюється правою різницею (functions.numerical_derivative);
    - формує трасу ітерацій (для таблиць, графіків, діагностики);
    - фіксує причину зупинки (SolverStatus) - рівно одну з п'яти;
    - будь-який виняток, кинутий функцією f, перехоплюється один раз
      і перетворюється на результат зі статусом ERROR;
    - підтримує callback, який викликається на кожній ітерації.

Порядок перевірок після кожної ітерації:
    1) f(x) не є скінченним дійсним числом -> ERROR
    2) f(x) == 0                            -> EXACT_SOLUTION_FOUND
    3) |f(x)| < target_precision            -> SOLUTION_WITHIN_PRECISION
    4) f'(x) == 0                           -> EXTREMUM_FOUND
    інакше x <- x - f(x) / f'(x).
"""

from __future__ import annotations

import enum
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .config import OptionsLike, SolverConfig, merge_options
from .errors import NonFiniteValueError
from .functions import ScalarFunction, numerical_derivative
from .iteration_result import Iteration

LOGGER = logging.getLogger(__name__)

# Тип callback'а для GUI/логів
IterationCallback = Callable[[Iteration], None]


class SolverStatus(enum.Enum):
    """Причина зупинки розв'язувача."""

    EXACT_SOLUTION_FOUND = "exact_solution_found"
    SOLUTION_WITHIN_PRECISION = "solution_within_precision"
    MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"
    EXTREMUM_FOUND = "extremum_found"
    ERROR = "error"

    @property
    def is_converged(self) -> bool:
        return self in (
            SolverStatus.EXACT_SOLUTION_FOUND,
            SolverStatus.SOLUTION_WITHIN_PRECISION,
        )

    @property
    def has_result(self) -> bool:
        return self.is_converged or self is SolverStatus.MAX_ITERATIONS_EXCEEDED


@dataclass(frozen=True)
class SolverResult:
    """
    Підсумок одного запуску розв'язувача.

    Атрибути:
        status      - причина зупинки (SolverStatus).
        result      - знайдене x; є лише для EXACT_SOLUTION_FOUND,
                      SOLUTION_WITHIN_PRECISION та MAX_ITERATIONS_EXCEEDED.
        iterations  - траса (кортеж Iteration) або None, якщо f кинула
                      виняток ще до завершення першої ітерації.
        error       - діагностика (виняток) лише для статусу ERROR.
        func_evals  - кількість викликів f.

    Увага: наявність result не означає збіжність
    (MAX_ITERATIONS_EXCEEDED теж його заповнює) - перевіряйте status.
    """
    status: SolverStatus
    result: Optional[float] = None
    iterations: Optional[Tuple[Iteration, ...]] = None
    error: Optional[BaseException] = None
    func_evals: int = 0

    @property
    def converged(self) -> bool:
        return self.status.is_converged

    @property
    def n_iter(self) -> int:
        """Кількість завершених ітерацій."""
        return len(self.iterations) if self.iterations else 0

    @property
    def last_iteration(self) -> Optional[Iteration]:
        return self.iterations[-1] if self.iterations else None


# ---------------------------------------------------------------------------
# Обгортка над f: підрахунок викликів та приведення до float
# ---------------------------------------------------------------------------

def _as_real(value: Any) -> float:
    """
    Привести значення f(x) до float.
    Усе, що не є дійсним числом (None, рядок, комплексне з ненульовою
    уявною частиною, масив з кількох елементів), стає NaN.
    """
    if value is None or isinstance(value, (str, bytes)):
        return math.nan
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return float(value.real) if value.imag == 0 else math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


class _CountedFunction:
    """Виклик f з лічильником та приведенням результату до float."""

    def __init__(self, func: ScalarFunction) -> None:
        self.func = func
        self.calls = 0

    def __call__(self, x: float) -> float:
        self.calls += 1
        return _as_real(self.func(x))


# ---------------------------------------------------------------------------
# Розв'язувач
# ---------------------------------------------------------------------------

class NewtonSolver:
    """
    Метод Ньютона для пошуку кореня скалярної функції.

    Екземпляр зберігає лише незмінну конфігурацію, тому один і той самий
    розв'язувач можна викликати багато разів: стан між викликами не
    переноситься.

    Використання:
        solver = NewtonSolver(SolverConfig(x0=3.0))
        res = solver.solve(lambda x: x ** 2 - 4)
        if res.converged:
            print(res.result)
    """

    def __init__(self, config: SolverConfig) -> None:
        self.config = config

    def solve(
        self,
        func: ScalarFunction,
        callback: Optional[IterationCallback] = None,
    ) -> SolverResult:
        """
        Запустити ітераційний процес з точки config.x0.

        Запис у трасі містить точку, в якій обчислено f (до оновлення x).
        Винятки, кинуті callback'ом, не перехоплюються.
        """
        cfg = self.config
        evaluate = _CountedFunction(func)
        iterations: List[Iteration] = []
        x = float(cfg.x0)

        while len(iterations) < cfg.max_iterations:
            try:
                y = evaluate(x)
                derivative = numerical_derivative(
                    evaluate, x, cfg.derivative_delta, f_value=y
                )
            except Exception as exc:
                LOGGER.debug("Evaluation failed at x = %r", x, exc_info=True)
                return self._finish(
                    SolverStatus.ERROR,
                    iterations,
                    evaluate.calls,
                    error=exc,
                )

            rec = Iteration(
                index=len(iterations),
                x=x,
                y=y,
                derivative=derivative,
            )
            iterations.append(rec)

            if callback is not None:
                callback(rec)

            # Значення не визначене або не скінченне
            if not math.isfinite(y):
                return self._finish(
                    SolverStatus.ERROR,
                    iterations,
                    evaluate.calls,
                    error=NonFiniteValueError(x, y),
                )

            # Точний корінь
            if y == 0:
                return self._finish(
                    SolverStatus.EXACT_SOLUTION_FOUND,
                    iterations,
                    evaluate.calls,
                    result=x,
                )

            # Корінь з заданою точністю
            if abs(y) < cfg.target_precision:
                return self._finish(
                    SolverStatus.SOLUTION_WITHIN_PRECISION,
                    iterations,
                    evaluate.calls,
                    result=x,
                )

            # Горизонтальна дотична - наступної точки немає
            if derivative == 0:
                return self._finish(
                    SolverStatus.EXTREMUM_FOUND,
                    iterations,
                    evaluate.calls,
                )

            # Якщо похідна NaN або нескінченна, x стає NaN (або не змінюється);
            # ERROR тоді фіксується на наступній ітерації з x = nan.
            x = x - y / derivative

        return self._finish(
            SolverStatus.MAX_ITERATIONS_EXCEEDED,
            iterations,
            evaluate.calls,
            result=x,
        )

    @staticmethod
    def _finish(
        status: SolverStatus,
        iterations: List[Iteration],
        func_evals: int,
        result: Optional[float] = None,
        error: Optional[BaseException] = None,
    ) -> SolverResult:
        trace: Optional[Tuple[Iteration, ...]] = tuple(iterations)
        # Виняток до завершення першої ітерації - траси немає
        if status is SolverStatus.ERROR and not iterations:
            trace = None

        LOGGER.debug(
            "Newton solver stopped: status=%s, result=%r, n_iter=%d, func_evals=%d",
            status.value,
            result,
            len(iterations),
            func_evals,
        )

        return SolverResult(
            status=status,
            result=result,
            iterations=trace,
            error=error,
            func_evals=func_evals,
        )


def solve(
    func: ScalarFunction,
    options: Optional[OptionsLike] = None,
    *,
    callback: Optional[IterationCallback] = None,
    **overrides: Any,
) -> SolverResult:
    """
    Розв'язати f(x) = 0 методом Ньютона.

    options / overrides накладаються на значення за замовчуванням поле
    за полем (див. config.merge_options). Обов'язковий лише x0:
        solve(fn, x0=3.0)
        solve(fn, {"x0": 3.0, "maxIterations": 100})
    """
    config = merge_options(options, **overrides)
    return NewtonSolver(config).solve(func, callback=callback)


__all__ = [
    "IterationCallback",
    "SolverStatus",
    "SolverResult",
    "NewtonSolver",
    "solve",
]
