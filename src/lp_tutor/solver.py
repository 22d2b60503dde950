from __future__ import annotations

import logging
from typing import Optional

from .lp.general import general_form_solve
from .lp.graphical import graphical_solve
from .lp.simplex import tableau_simplex_solve
from .lp.utils import apply_sign_conventions, invalid_solution
from .schemas import Method, Problem, SolveOptions, Solution

logger = logging.getLogger(__name__)


def select_method(num_variables: int, requested: Optional[str] = None) -> Method:
    """
    Decide which solver handles a problem, in priority order:
      1. two variables always go to the graphical solver, whatever was requested;
      2. "simplex" and "general" are honoured as requested;
      3. anything else (including "graphical" for n != 2, or nothing) falls back to simplex.
    """

    if num_variables == 2:
        return "graphical"
    if requested == "simplex":
        return "simplex"
    if requested == "general":
        return "general"
    return "simplex"


def solve_lp_problem(
    problem: Problem,
    method: Optional[str] = None,
    options: Optional[SolveOptions] = None,
) -> Solution:
    """Single entry point: preprocess signs, pick a solver, and never raise."""

    opts = options or SolveOptions()
    try:
        objective, constraints = apply_sign_conventions(
            problem.objective,
            problem.constraints,
            problem.objective_sign,
            problem.constraint_signs,
        )
        chosen = select_method(len(objective), method)
        logger.debug("solve: n=%d, requested=%s, using %s", len(objective), method, chosen)

        if chosen == "graphical":
            return graphical_solve(
                objective, constraints, problem.relations, problem.rhs, problem.maximize, opts
            )
        if chosen == "general":
            return general_form_solve(
                objective, constraints, problem.relations, problem.rhs, problem.maximize, opts
            )
        return tableau_simplex_solve(objective, constraints, problem.rhs, problem.maximize, opts)
    except Exception as exc:
        logger.exception("solve: unexpected failure")
        return invalid_solution("error", f"Failed to solve problem: {exc}")
