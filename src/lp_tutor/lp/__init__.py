"""Solver back-ends for LP Tutor."""

from .graphical import graphical_solve
from .simplex import tableau_simplex_solve
from .general import general_form_solve
from .utils import apply_sign_conventions, build_augmented_system, variable_label

__all__ = [
    "graphical_solve",
    "tableau_simplex_solve",
    "general_form_solve",
    "apply_sign_conventions",
    "build_augmented_system",
    "variable_label",
]
