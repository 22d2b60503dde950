import logging
from typing import List, Optional, Sequence

import numpy as np

from ..schemas import DisplayTable, IterationSnapshot, Pivot, SolveOptions, Solution
from .utils import RHS_LABEL, format_cell, invalid_solution, variable_label, variable_labels

logger = logging.getLogger(__name__)


def tableau_simplex_solve(
    objective: Sequence[float],
    constraints: Sequence[Sequence[float]],
    rhs: Sequence[float],
    maximize: bool,
    options: Optional[SolveOptions] = None,
) -> Solution:
    """
    Primal simplex on a <=-only tableau with one unit slack per row.
    Every row is treated as `a.x <= b`; relation types are not inspected here.

    Tableau layout, (m + 2) x (n + m + 1):
      rows 0..m-1  constraint rows  [A | I | b]
      row  m       Cj row           [c | 0 | 0]
      row  m + 1   Δj row           starts as a copy of Cj
    One snapshot is recorded before the first pivot and one (pre-pivot) per pivot.
    """

    opts = options or SolveOptions()
    tol = opts.pivot_tol
    original = np.asarray(objective, dtype=float)
    # always maximise internally
    c = original.copy() if maximize else -original
    A = np.asarray(constraints, dtype=float)
    b = np.asarray(rhs, dtype=float)
    m = len(constraints)
    n = len(c)
    A = A.reshape(m, n)

    tableau = np.zeros((m + 2, n + m + 1), dtype=float)
    tableau[:m, :n] = A
    tableau[:m, n : n + m] = np.eye(m)
    tableau[:m, -1] = b
    tableau[m, :n] = c
    tableau[m + 1] = tableau[m]

    costs = [float(x) for x in original] + [0.0] * m
    basis: List[int] = list(range(n, n + m))
    iterations: List[IterationSnapshot] = [
        IterationSnapshot(
            index=0,
            tableau=tableau.tolist(),
            basis=[variable_label(idx) for idx in basis],
        )
    ]

    iteration = 0
    optimal = False
    while iteration < opts.max_iters:
        reduced = tableau[m + 1, :-1]
        entering = int(np.argmax(reduced)) if reduced.size else -1
        if entering < 0 or reduced[entering] <= tol:
            iterations[-1].is_optimal = True
            optimal = True
            break

        column = tableau[:m, entering]
        ratios = np.full(m, np.inf)
        positive = column > tol
        ratios[positive] = tableau[:m, -1][positive] / column[positive]
        if not np.any(np.isfinite(ratios)):
            logger.debug("simplex: column %s has no positive entry, problem is unbounded", variable_label(entering))
            return invalid_solution(
                "unbounded",
                f"Entering variable {variable_label(entering)} can grow without bound.",
                method="simplex",
                iterations=iterations,
                costs=costs,
            )
        leaving = int(np.argmin(ratios))

        iterations.append(
            IterationSnapshot(
                index=iteration + 1,
                tableau=tableau.tolist(),
                basis=[variable_label(idx) for idx in basis],
                pivot=Pivot(row=leaving, col=entering),
                ratios=ratios.tolist(),
                entering_label=variable_label(entering),
                leaving_label=variable_label(basis[leaving]),
                is_optimal=False,
            )
        )
        logger.debug(
            "simplex: iteration %d, %s enters, %s leaves",
            iteration + 1,
            variable_label(entering),
            variable_label(basis[leaving]),
        )

        _pivot(tableau, leaving, entering)
        basis[leaving] = entering
        iteration += 1

    if not optimal:
        return invalid_solution(
            "iteration_limit",
            f"No optimal tableau after {opts.max_iters} iterations.",
            method="simplex",
            iterations=iterations,
            costs=costs,
        )

    point = [0.0] * n
    for row, var in enumerate(basis):
        if var < n:
            point[var] = float(tableau[row, -1])

    final_value = -tableau[m + 1, -1] if maximize else tableau[m + 1, -1]
    display = _final_table(tableau, basis, costs, n, m, opts.decimals)
    return Solution(
        valid=True,
        point=point,
        objective_value=float(abs(final_value)),
        display_table=display,
        iterations=iterations,
        costs=costs,
        status="optimal",
        method="simplex",
    )


def _pivot(tableau: np.ndarray, row: int, col: int) -> None:
    tableau[row] = tableau[row] / tableau[row, col]
    for i in range(tableau.shape[0]):
        if i != row:
            tableau[i] = tableau[i] - tableau[i, col] * tableau[row]


def _final_table(
    tableau: np.ndarray,
    basis: List[int],
    costs: List[float],
    n: int,
    m: int,
    decimals: int,
) -> DisplayTable:
    headers = ["Ci", "i", *variable_labels(n + m), RHS_LABEL]
    rows: List[List[str]] = []
    for i, var in enumerate(basis):
        ci = costs[var]
        rows.append(
            [format_cell(ci, decimals), variable_label(var), *(format_cell(x, decimals) for x in tableau[i])]
        )
    rows.append(["Cj", "", *(format_cell(x, decimals) for x in tableau[m])])
    rows.append(["Δj", "", *(format_cell(x, decimals) for x in tableau[m + 1])])
    return DisplayTable(headers=headers, rows=rows)
