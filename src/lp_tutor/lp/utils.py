import numpy as np
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..schemas import DisplayTable, IterationSnapshot, Method, Solution, Status

RHS_LABEL = "A0"


def apply_sign_conventions(
    objective: Sequence[float],
    constraints: Sequence[Sequence[float]],
    objective_sign: Optional[str] = None,
    constraint_signs: Optional[Sequence[str]] = None,
) -> Tuple[List[float], List[List[float]]]:
    """
    Apply the optional "+"/"-" operator flags entered next to the objective and each row.
    A "-" flag negates every coefficient except the first one; rhs and relations are untouched.
    Row flags are only honoured when there is exactly one per constraint row.
    """

    adjusted_objective = [float(c) for c in objective]
    if objective_sign == "-":
        adjusted_objective = [c if idx == 0 else -c for idx, c in enumerate(adjusted_objective)]

    adjusted_rows = [[float(a) for a in row] for row in constraints]
    if constraint_signs is not None and len(constraint_signs) == len(adjusted_rows):
        adjusted_rows = [
            [a if col == 0 else -a for col, a in enumerate(row)] if sign == "-" else row
            for row, sign in zip(adjusted_rows, constraint_signs)
        ]

    return adjusted_objective, adjusted_rows


def variable_label(index: int) -> str:
    # Column j of the tableau is A(j+1); A0 is reserved for the rhs column.
    return f"A{index + 1}"


def variable_labels(count: int) -> List[str]:
    return [variable_label(idx) for idx in range(count)]


def build_augmented_system(
    constraints: Sequence[Sequence[float]],
    relations: Sequence[str],
    rhs: Sequence[float],
) -> Tuple[np.ndarray, np.ndarray, Dict[str, Any]]:
    """
    Convert mixed-relation rows to an augmented m x (n + 2m) system.
    Columns n..n+m-1 hold slack (+1) / surplus (-1) entries, columns n+m..n+2m-1 hold
    artificial entries, each placed on the row's own diagonal position.
    Return A, b and metadata with the column kinds.
    """

    m = len(constraints)
    n = len(constraints[0]) if m else 0
    A = np.zeros((m, n + 2 * m), dtype=float)
    b = np.array(rhs, dtype=float) if m else np.zeros(0, dtype=float)

    slack_indices: List[int] = []
    surplus_indices: List[int] = []
    artificial_indices: List[int] = []

    for i, (row, relation) in enumerate(zip(constraints, relations)):
        A[i, :n] = row
        aux_col = n + i
        art_col = n + m + i
        if relation == "<=":
            A[i, aux_col] = 1.0
            slack_indices.append(aux_col)
        elif relation == ">=":
            A[i, aux_col] = -1.0
            A[i, art_col] = 1.0
            surplus_indices.append(aux_col)
            artificial_indices.append(art_col)
        elif relation == "=":
            A[i, art_col] = 1.0
            artificial_indices.append(art_col)
        else:
            raise ValueError(f"Constraint {i + 1} has unknown relation '{relation}'.")

    metadata: Dict[str, Any] = {
        "num_structural": n,
        "col_labels": variable_labels(n + 2 * m),
        "slack_indices": slack_indices,
        "surplus_indices": surplus_indices,
        "artificial_indices": artificial_indices,
    }
    return A, b, metadata


def format_cell(value: float, decimals: int = 2) -> str:
    text = f"{value:.{decimals}f}"
    # "-0.00" reads as noise in a tableau
    if float(text) == 0.0:
        return f"{0.0:.{decimals}f}"
    return text


def format_number(value: float) -> str:
    """Shortest readable form of a coefficient: integers without a decimal point."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def invalid_solution(
    status: Status,
    message: str,
    method: Optional[Method] = None,
    iterations: Optional[List[IterationSnapshot]] = None,
    costs: Optional[List[float]] = None,
) -> Solution:
    return Solution(
        valid=False,
        point=[],
        objective_value=0.0,
        display_table=DisplayTable(),
        iterations=iterations,
        costs=costs,
        status=status,
        method=method,
        message=message,
    )
