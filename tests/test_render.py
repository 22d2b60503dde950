import pytest

from lp_tutor.lp.utils import format_cell, variable_label
from lp_tutor.render import render_display_table, render_snapshot, render_solution, render_table
from lp_tutor.schemas import Problem
from lp_tutor.solver import solve_lp_problem


def make_lp_with_blocked_row() -> Problem:
    return Problem(
        maximize=True,
        objective=[2, 3, 4],
        constraints=[[3, 2, 0], [2, 5, 3]],
        relations=["<=", "<="],
        rhs=[10, 15],
    )


def test_render_table_aligns_columns():
    text = render_table(["a", "bb"], [["100", "2"]])
    lines = text.splitlines()

    assert lines[0] == "  a | bb"
    assert lines[1] == "----+---"
    assert lines[2] == "100 |  2"


def test_render_snapshot_marks_pivot_and_infinite_ratio():
    solution = solve_lp_problem(make_lp_with_blocked_row(), "simplex")
    costs = solution.costs
    text = render_snapshot(solution.iterations[1], costs)

    assert text.startswith("Iteration 1 (optimal)")
    assert "Entering: A3  Leaving: A5  Pivot: row 2, column 3" in text
    assert "[3.00]" in text
    assert "∞" in text
    assert "xi / xij" in text


def test_render_solution_walkthrough():
    solution = solve_lp_problem(make_lp_with_blocked_row(), "simplex")
    text = render_solution(solution)

    assert text.index("Initial tableau") < text.index("Iteration 1")
    assert "Final tableau" in text
    assert "z = 20.00" in text


def test_render_graphical_solution():
    problem = Problem(
        maximize=True,
        objective=[3, 5],
        constraints=[[1, 0], [0, 2], [3, 2]],
        relations=["<=", "<=", "<="],
        rhs=[4, 12, 18],
    )
    solution = solve_lp_problem(problem)
    text = render_solution(solution)

    assert render_display_table(solution.display_table) in text
    assert "x1 = 2.00, x2 = 6.00; z = 36.00" in text


def test_render_invalid_solution():
    problem = Problem(maximize=True, objective=[1, 0, 0], constraints=[[0, 1, 1]], relations=["<="], rhs=[5])
    text = render_solution(solve_lp_problem(problem))

    assert text.startswith("No solution (unbounded)")
    assert "Initial tableau" in text


def test_empty_table_renders_nothing():
    assert render_table([], []) == ""


def test_minimisation_walkthrough_uses_caller_costs_everywhere():
    problem = Problem(
        maximize=False,
        objective=[-3, -5, -1],
        constraints=[[1, 0, 0], [0, 2, 0], [3, 2, 0], [0, 0, 1]],
        relations=["<=", "<=", "<=", "<="],
        rhs=[4, 12, 18, 1],
    )
    solution = solve_lp_problem(problem, "simplex")
    expected = {variable_label(j): format_cell(c) for j, c in enumerate(solution.costs)}

    assert solution.costs == [-3.0, -5.0, -1.0, 0.0, 0.0, 0.0, 0.0]
    final_ci = {row[1]: row[0] for row in solution.display_table.rows[:4]}
    assert final_ci == {"A4": "0.00", "A2": "-5.00", "A1": "-3.00", "A3": "-1.00"}

    seen = 0
    for snapshot in solution.iterations:
        for line in render_snapshot(snapshot, solution.costs).splitlines():
            cells = [cell.strip() for cell in line.split("|")]
            if len(cells) > 1 and cells[1] in expected:
                assert cells[0] == expected[cells[1]]
                seen += 1
    assert seen == 4 * len(solution.iterations)
