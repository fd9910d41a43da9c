"""
core

Ядро розв'язувача f(x) = 0 методом Ньютона:
    config            - SolverConfig, merge_options
    functions         - numerical_derivative, тестові рівняння FUNCTIONS
    iteration_result  - Iteration
    solver            - NewtonSolver, SolverResult, SolverStatus, solve
    observers         - logging_callback, TraceCollector
    results_summary   - ResultsSummary
"""

from .config import DEFAULT_OPTIONS, SolverConfig, merge_options
from .errors import NonFiniteValueError, RootFindingError
from .functions import FUNCTIONS, ScalarFunction, TargetFunction, numerical_derivative
from .iteration_result import Iteration
from .observers import TraceCollector, logging_callback
from .results_summary import ResultsSummary
from .solver import IterationCallback, NewtonSolver, SolverResult, SolverStatus, solve

__all__ = [
    "DEFAULT_OPTIONS",
    "SolverConfig",
    "merge_options",
    "RootFindingError",
    "NonFiniteValueError",
    "FUNCTIONS",
    "ScalarFunction",
    "TargetFunction",
    "numerical_derivative",
    "Iteration",
    "TraceCollector",
    "logging_callback",
    "ResultsSummary",
    "IterationCallback",
    "NewtonSolver",
    "SolverResult",
    "SolverStatus",
    "solve",
]
