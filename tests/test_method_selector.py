import pytest

from lp_tutor.schemas import Problem
from lp_tutor.solver import select_method, solve_lp_problem


@pytest.mark.parametrize("requested", ["graphical", "simplex", "general", None, "bogus"])
def test_two_variables_always_graphical(requested):
    assert select_method(2, requested) == "graphical"


@pytest.mark.parametrize(
    "requested, expected",
    [
        ("simplex", "simplex"),
        ("general", "general"),
        ("graphical", "simplex"),
        (None, "simplex"),
        ("bogus", "simplex"),
    ],
)
def test_other_sizes_follow_request(requested, expected):
    assert select_method(3, requested) == expected
    assert select_method(1, requested) == expected


def test_scenario_a_requested_as_simplex_uses_graphical():
    problem = Problem(
        maximize=True,
        objective=[3, 5],
        constraints=[[1, 0], [0, 2], [3, 2]],
        relations=["<=", "<=", "<="],
        rhs=[4, 12, 18],
    )
    solution = solve_lp_problem(problem, "simplex")

    assert solution.method == "graphical"
    assert solution.iterations is None
    assert solution.objective_value == pytest.approx(36.0)
    assert solution.point == pytest.approx([2.0, 6.0])


def test_three_variables_requested_as_graphical_uses_simplex():
    problem = Problem(
        maximize=True,
        objective=[2, 3, 4],
        constraints=[[3, 2, 1], [2, 5, 3]],
        relations=["<=", "<="],
        rhs=[10, 15],
    )
    solution = solve_lp_problem(problem, "graphical")

    assert solution.method == "simplex"
    assert solution.iterations is not None
    assert solution.valid


def test_unexpected_failure_becomes_invalid_result():
    problem = Problem(
        maximize=True,
        objective=[1, 1, 1],
        constraints=[[1, 2]],
        relations=["<="],
        rhs=[4],
    )
    solution = solve_lp_problem(problem, "simplex")

    assert not solution.valid
    assert solution.status == "error"
    assert solution.point == []
    assert solution.objective_value == 0.0
    assert solution.display_table.headers == []
    assert solution.display_table.rows == []
