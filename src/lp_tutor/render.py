"""Plain-text views of solver output, one table per simplex iteration."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .lp.utils import RHS_LABEL, format_cell, variable_labels
from .schemas import DisplayTable, IterationSnapshot, Solution


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    if not headers:
        return ""
    widths = [len(h) for h in headers]
    for row in rows:
        for idx, cell in enumerate(row):
            if idx < len(widths):
                widths[idx] = max(widths[idx], len(cell))
            else:
                widths.append(len(cell))

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.rjust(widths[idx]) for idx, cell in enumerate(cells)).rstrip()

    separator = "-+-".join("-" * w for w in widths)
    return "\n".join([line(headers), separator, *(line(row) for row in rows)])


def render_display_table(table: DisplayTable) -> str:
    return render_table(table.headers, table.rows)


def render_snapshot(
    snapshot: IterationSnapshot,
    costs: Optional[Sequence[float]] = None,
    decimals: int = 2,
) -> str:
    """
    Render one tableau. `costs` are the objective coefficients of every tableau column as the caller
    gave them (`Solution.costs`), used for the Ci column; without them the column shows zeros.
    """

    m = len(snapshot.basis)
    width = len(snapshot.tableau[0]) - 1 if snapshot.tableau else 0
    labels = variable_labels(width)
    headers = ["Ci", "i", *labels, RHS_LABEL]
    if snapshot.ratios is not None:
        headers.append("xi / xij")

    rows: List[List[str]] = []
    for i in range(m):
        basic = snapshot.basis[i]
        ci = 0.0
        if costs is not None and basic in labels:
            ci = costs[labels.index(basic)]
        cells = []
        for j, value in enumerate(snapshot.tableau[i]):
            text = format_cell(value, decimals)
            if snapshot.pivot is not None and snapshot.pivot.row == i and snapshot.pivot.col == j:
                text = f"[{text}]"
            cells.append(text)
        row = [format_cell(ci, decimals), basic, *cells]
        if snapshot.ratios is not None:
            ratio = snapshot.ratios[i]
            row.append("∞" if math.isinf(ratio) else format_cell(ratio, decimals))
        rows.append(row)

    rows.append(["Cj", "", *(format_cell(x, decimals) for x in snapshot.tableau[m])])
    rows.append(["Δj", "", *(format_cell(x, decimals) for x in snapshot.tableau[m + 1])])

    title = "Initial tableau" if snapshot.index == 0 else f"Iteration {snapshot.index}"
    if snapshot.is_optimal:
        title += " (optimal)"
    lines = [title]
    if snapshot.pivot is not None:
        lines.append(
            f"Entering: {snapshot.entering_label}  Leaving: {snapshot.leaving_label}  "
            f"Pivot: row {snapshot.pivot.row + 1}, column {snapshot.pivot.col + 1}"
        )
    lines.append(render_table(headers, rows))
    return "\n".join(lines)


def render_solution(solution: Solution, decimals: int = 2) -> str:
    if not solution.valid:
        text = f"No solution ({solution.status})"
        if solution.message:
            text += f": {solution.message}"
        if solution.iterations:
            text += "\n\n" + _render_iterations(solution.iterations, solution.costs, decimals)
        return text

    if solution.iterations:
        body = _render_iterations(solution.iterations, solution.costs, decimals)
        body += "\n\nFinal tableau\n" + render_display_table(solution.display_table)
    else:
        body = render_display_table(solution.display_table)

    point = ", ".join(f"x{idx + 1} = {format_cell(v, decimals)}" for idx, v in enumerate(solution.point))
    return f"{body}\n\nOptimum: {point}; z = {format_cell(solution.objective_value, decimals)}"


def _render_iterations(
    iterations: Sequence[IterationSnapshot],
    costs: Optional[Sequence[float]],
    decimals: int,
) -> str:
    return "\n\n".join(render_snapshot(snap, costs, decimals) for snap in iterations)
