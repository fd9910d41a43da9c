import dataclasses
import math

import pytest

from newton_solver import DEFAULT_OPTIONS, SolverConfig, merge_options


def test_defaults():
    cfg = SolverConfig(x0=1.0)
    assert cfg.target_precision == 1e-10
    assert cfg.derivative_delta == 1e-8
    assert cfg.max_iterations == 1000
    assert DEFAULT_OPTIONS["max_iterations"] == 1000


def test_merge_field_by_field():
    cfg = merge_options({"x0": 2.0, "max_iterations": 10})
    assert cfg.x0 == 2.0
    assert cfg.max_iterations == 10
    assert cfg.target_precision == 1e-10
    assert cfg.derivative_delta == 1e-8


def test_overrides_win_over_options():
    cfg = merge_options({"x0": 2.0, "max_iterations": 10}, max_iterations=5, target_precision=1e-6)
    assert cfg.max_iterations == 5
    assert cfg.target_precision == 1e-6
    assert cfg.x0 == 2.0


def test_none_does_not_override():
    cfg = merge_options({"x0": 2.0, "target_precision": None})
    assert cfg.target_precision == 1e-10


def test_camel_case_aliases():
    cfg = merge_options({"x0": 1.0, "targetPrecision": 1e-4, "slopeDelta": 1e-5, "maxIterations": 7})
    assert cfg == SolverConfig(x0=1.0, target_precision=1e-4, derivative_delta=1e-5, max_iterations=7)


def test_merge_from_config():
    base = SolverConfig(x0=1.0, max_iterations=3)
    cfg = merge_options(base, x0=4.0)
    assert cfg.x0 == 4.0
    assert cfg.max_iterations == 3
    assert base.x0 == 1.0


def test_merge_does_not_mutate_input():
    options = {"x0": 1.0, "maxIterations": 4}
    merge_options(options)
    assert options == {"x0": 1.0, "maxIterations": 4}


def test_missing_x0():
    with pytest.raises(ValueError):
        merge_options({"max_iterations": 10})


def test_unknown_option():
    with pytest.raises(TypeError):
        merge_options({"x0": 1.0, "tolerance": 1e-3})


@pytest.mark.parametrize(
    "changes",
    [
        {"derivative_delta": 0.0},
        {"target_precision": 0.0},
        {"target_precision": -1e-3},
        {"max_iterations": -1},
        {"max_iterations": 2.5},
    ],
)
def test_invalid_values(changes):
    with pytest.raises(ValueError):
        SolverConfig(x0=0.0, **changes)


def test_integral_float_max_iterations():
    cfg = SolverConfig(x0=0.0, max_iterations=100.0)
    assert cfg.max_iterations == 100
    assert isinstance(cfg.max_iterations, int)


def test_frozen():
    cfg = SolverConfig(x0=0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.x0 = 1.0


def test_replace_returns_new_config():
    cfg = SolverConfig(x0=0.0)
    other = cfg.replace(maxIterations=12)
    assert other.max_iterations == 12
    assert cfg.max_iterations == 1000


def test_non_finite_values_accepted():
    """ Скінченність не перевіряється: NaN/inf проходять без винятку. """
    cfg = SolverConfig(x0=float("nan"), target_precision=float("nan"), derivative_delta=float("inf"))
    assert math.isnan(cfg.target_precision)

    cfg = SolverConfig(x0=0.0, max_iterations=float("inf"))
    assert cfg.max_iterations == float("inf")

    cfg = merge_options({"x0": 0.0, "maxIterations": float("nan")})
    assert math.isnan(cfg.max_iterations)


def test_negative_infinite_max_iterations():
    with pytest.raises(ValueError):
        SolverConfig(x0=0.0, max_iterations=-float("inf"))
