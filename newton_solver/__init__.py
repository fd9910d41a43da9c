"""
newton_solver

Пошук кореня скалярної функції методом Ньютона з чисельною похідною.

    from newton_solver import solve, SolverStatus

    res = solve(lambda x: x ** 2 - 4, x0=3.0)
    if res.status is SolverStatus.SOLUTION_WITHIN_PRECISION:
        ...
"""

from .core import *  # noqa: F401,F403
from .core import __all__  # noqa: F401

__version__ = "1.0.0"
