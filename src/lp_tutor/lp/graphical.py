from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..schemas import DisplayTable, SolveOptions, Solution
from .utils import format_number, invalid_solution

logger = logging.getLogger(__name__)

GRAPHICAL_HEADERS = ["Constraint", "Boundary line", "Point 1", "Point 2", "Point 3"]
NON_NEGATIVITY_ROW = ["x₁, x₂ ≥ 0", "x₁ = 0, x₂ = 0", "(0, 0)", "-", "-"]


def graphical_solve(
    objective: Sequence[float],
    constraints: Sequence[Sequence[float]],
    relations: Sequence[str],
    rhs: Sequence[float],
    maximize: bool,
    options: Optional[SolveOptions] = None,
) -> Solution:
    """
    Two-variable solver: enumerate boundary-line intersections, axis crossings and the origin,
    keep the feasible ones and pick the best objective value.

    Only vertices are enumerated, so an unbounded feasible region is never reported as such:
    the best enumerated vertex is returned even when the objective keeps improving along an
    unbounded edge.
    """

    opts = options or SolveOptions()
    tol = opts.feas_tol
    det_tol = opts.det_tol
    c = np.asarray(objective, dtype=float)
    A = np.asarray(constraints, dtype=float).reshape(len(constraints), 2)
    b = np.asarray(rhs, dtype=float)
    m = A.shape[0]

    table_rows: List[List[str]] = []
    candidates: List[Tuple[float, float]] = []

    for i in range(m):
        table_rows.append(_describe_constraint(A[i], relations[i], b[i]))
        for j in range(i + 1, m):
            point = intersection_2d(A[i], b[i], A[j], b[j], det_tol)
            if point is not None:
                candidates.append(point)

    table_rows.append(list(NON_NEGATIVITY_ROW))

    for i in range(m):
        # crossing with x1 = 0
        if abs(A[i, 1]) > det_tol:
            candidates.append((0.0, float(b[i] / A[i, 1])))
        # crossing with x2 = 0
        if abs(A[i, 0]) > det_tol:
            candidates.append((float(b[i] / A[i, 0]), 0.0))
    candidates.append((0.0, 0.0))

    feasible = [pt for pt in candidates if is_feasible(pt, A, relations, b, tol)]
    logger.debug("graphical: %d candidate points, %d feasible", len(candidates), len(feasible))
    if not feasible:
        return invalid_solution("infeasible", "No candidate point satisfies every constraint.", method="graphical")

    values = [float(c[0] * x1 + c[1] * x2) for x1, x2 in feasible]
    best = 0
    for idx in range(1, len(values)):
        if (maximize and values[idx] > values[best]) or (not maximize and values[idx] < values[best]):
            best = idx

    x1, x2 = feasible[best]
    return Solution(
        valid=True,
        point=[x1, x2],
        objective_value=values[best],
        display_table=DisplayTable(headers=list(GRAPHICAL_HEADERS), rows=table_rows),
        status="optimal",
        method="graphical",
    )


def intersection_2d(
    a1: Sequence[float], b1: float, a2: Sequence[float], b2: float, tol: float = 1e-8
) -> Optional[Tuple[float, float]]:
    """Solve a1.x = b1, a2.x = b2 by Cramer's rule; None for parallel or coincident lines."""
    det = a1[0] * a2[1] - a2[0] * a1[1]
    if abs(det) < tol:
        return None
    x1 = (b1 * a2[1] - b2 * a1[1]) / det
    x2 = (a1[0] * b2 - a2[0] * b1) / det
    return float(x1), float(x2)


def is_feasible(
    point: Tuple[float, float],
    A: np.ndarray,
    relations: Sequence[str],
    b: np.ndarray,
    tol: float = 1e-8,
) -> bool:
    x1, x2 = point
    if x1 < -tol or x2 < -tol:
        return False
    for row, relation, rhs in zip(A, relations, b):
        lhs = row[0] * x1 + row[1] * x2
        if relation == "<=" and lhs > rhs + tol:
            return False
        if relation == ">=" and lhs < rhs - tol:
            return False
        if relation == "=" and abs(lhs - rhs) > tol:
            return False
    return True


def _describe_constraint(coeffs: np.ndarray, relation: str, value: float) -> List[str]:
    a1, a2 = format_number(coeffs[0]), format_number(coeffs[1])
    joiner = "+" if coeffs[1] >= 0 else ""
    lhs = f"{a1}x₁ {joiner}{a2}x₂"
    rhs = format_number(value)

    points: List[str] = []
    if coeffs[0] != 0:
        x1 = value / coeffs[0]
        if x1 >= 0:
            points.append(f"({_format_intercept(x1)}, 0)")
    if coeffs[1] != 0:
        x2 = value / coeffs[1]
        if x2 >= 0:
            points.append(f"(0, {_format_intercept(x2)})")
    while len(points) < 3:
        points.append("-")

    return [f"{lhs} {relation} {rhs}", f"{lhs} = {rhs}", *points]


def _format_intercept(value: float) -> str:
    value = float(value) + 0.0
    if value % 1 == 0:
        return f"{value:.0f}"
    return f"{value:.1f}"
