import pytest

from newton_solver import ResultsSummary, SolverStatus, solve


def make_summary():
    summary = ResultsSummary()
    summary.add_run("x0=3", solve(lambda x: x ** 2 - 4, x0=3.0))
    summary.add_run("cap", solve(lambda x: x ** 2 - 4, x0=3.0, max_iterations=1))
    summary.add_run("flat", solve(lambda x: 5.0, x0=0.0))
    summary.add_run("fault", solve(lambda x: 1 / 0, x0=0.0))
    return summary


def test_as_rows():
    rows = make_summary().as_rows()
    assert [r["label"] for r in rows] == ["x0=3", "cap", "flat", "fault"]
    assert rows[1]["status"] == SolverStatus.MAX_ITERATIONS_EXCEEDED.value
    assert rows[1]["n_iter"] == 1
    assert rows[1]["residual"] == 5.0
    assert rows[2]["result"] is None
    assert rows[3]["residual"] is None
    assert rows[3]["error"] == "division by zero"
    assert rows[3]["func_evals"] == 1


def test_best_by_residual():
    label, run = make_summary().best_by_residual()
    assert label == "x0=3"
    assert run.converged


def test_best_by_residual_empty():
    assert ResultsSummary().best_by_residual() is None


def test_to_dataframe():
    pytest.importorskip("pandas")
    df = make_summary().to_dataframe()
    assert list(df["label"]) == ["x0=3", "cap", "flat", "fault"]
    assert len(df.columns) == 7
