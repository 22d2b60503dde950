"""LP Tutor: small linear programs solved with a full, displayable trace."""

from .schemas import IterationSnapshot, Problem, Solution, SolveOptions
from .solver import select_method, solve_lp_problem

__all__ = [
    "IterationSnapshot",
    "Problem",
    "Solution",
    "SolveOptions",
    "select_method",
    "solve_lp_problem",
]
