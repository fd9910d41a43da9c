"""
results_summary.py

Зведена таблиця результатів кількох запусків розв'язувача
(наприклад, одне рівняння з різних початкових наближень x0).

Працює поверх об'єктів SolverResult:
    - status
    - result
    - iterations
    - error
    - func_evals
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .solver import SolverResult


@dataclass
class ResultsSummary:
    """
    Зведення результатів кількох запусків.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run("x0=2", res_a)
        summary.add_run("x0=3", res_b)
        rows = summary.as_rows()  # для GUI / pandas / CSV
    """
    runs: List[Tuple[str, SolverResult]] = field(default_factory=list)

    def add_run(self, label: str, run: SolverResult) -> None:
        """Додати результат одного запуску до зведення."""
        self.runs.append((label, run))

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків, придатних для:
            - створення pandas.DataFrame,
            - виводу в таблицю,
            - експорту в CSV.

        Поля рядка:
            - label
            - status
            - result
            - residual   (|f(x)| останньої ітерації)
            - n_iter
            - func_evals
            - error
        """
        rows: List[Dict[str, Any]] = []

        for label, run in self.runs:
            last = run.last_iteration
            rows.append(
                {
                    "label": label,
                    "status": run.status.value,
                    "result": run.result,
                    "residual": abs(last.y) if last is not None else None,
                    "n_iter": run.n_iter,
                    "func_evals": run.func_evals,
                    "error": str(run.error) if run.error is not None else None,
                }
            )

        return rows

    # ------------------------------------------------------------------
    # Вибір "найкращого" запуску
    # ------------------------------------------------------------------

    def best_by_residual(self) -> Optional[Tuple[str, SolverResult]]:
        """
        Повернути (label, run) з найменшим |f(x)| серед запусків,
        що мають result. Якщо таких немає - None.
        """
        best: Optional[Tuple[str, SolverResult]] = None
        best_residual: Optional[float] = None

        for label, run in self.runs:
            last = run.last_iteration
            if run.result is None or last is None:
                continue
            residual = abs(last.y)
            if best_residual is None or residual < best_residual:
                best_residual = residual
                best = (label, run)

        return best

    # ------------------------------------------------------------------
    # Опційно: повернути pandas.DataFrame
    # ------------------------------------------------------------------

    def to_dataframe(self):
        """
        Повернути pandas.DataFrame зі зведеною таблицею.

        Вимога: встановлений пакет pandas.
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
