import logging
from typing import Optional, Sequence

from ..schemas import SolveOptions, Solution
from .simplex import tableau_simplex_solve
from .utils import build_augmented_system

logger = logging.getLogger(__name__)


def general_form_solve(
    objective: Sequence[float],
    constraints: Sequence[Sequence[float]],
    relations: Sequence[str],
    rhs: Sequence[float],
    maximize: bool,
    options: Optional[SolveOptions] = None,
) -> Solution:
    """
    Standardise mixed-relation rows, then hand the problem to the tableau simplex.

    Known gap: the augmented system is built for inspection only. The simplex call receives the
    original rows and rhs, so >= and = rows are solved with the same <= semantics as every other
    row. No big-M or two-phase treatment happens here.
    """

    A_aug, b_aug, meta = build_augmented_system(constraints, relations, rhs)
    logger.debug(
        "general form: augmented system %s, %d slack, %d surplus, %d artificial columns",
        A_aug.shape,
        len(meta["slack_indices"]),
        len(meta["surplus_indices"]),
        len(meta["artificial_indices"]),
    )
    if meta["artificial_indices"]:
        logger.warning(
            "general form: %d row(s) with >= or = relations are solved as <= rows",
            len(meta["artificial_indices"]),
        )

    solution = tableau_simplex_solve(objective, constraints, rhs, maximize, options)
    return solution.model_copy(update={"method": "general"})
