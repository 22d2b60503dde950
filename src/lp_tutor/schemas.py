from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

Relation = Literal["<=", "=", ">="]
Sign = Literal["+", "-"]
Method = Literal["graphical", "simplex", "general"]
Status = Literal["optimal", "infeasible", "unbounded", "iteration_limit", "error"]

_RELATION_ALIASES = {"==": "=", "≤": "<=", "≥": ">=", "=<": "<=", "=>": ">="}


class Problem(BaseModel):
    maximize: bool = True
    objective: List[float]
    constraints: List[List[float]]
    relations: List[Relation]
    rhs: List[float]
    objective_sign: Optional[Sign] = None
    constraint_signs: Optional[List[Sign]] = None

    @field_validator("relations", mode="before")
    @classmethod
    def _normalise_relations(cls, value):
        if isinstance(value, (list, tuple)):
            return [_RELATION_ALIASES.get(item, item) if isinstance(item, str) else item for item in value]
        return value

    @model_validator(mode="after")
    def _check_shapes(self) -> "Problem":
        if not self.objective:
            raise ValueError("Objective must have at least one coefficient.")
        m = len(self.constraints)
        if len(self.relations) != m or len(self.rhs) != m:
            raise ValueError(
                f"Got {m} constraint rows, {len(self.relations)} relations and {len(self.rhs)} right-hand sides."
            )
        return self

    @property
    def num_variables(self) -> int:
        return len(self.objective)


class SolveOptions(BaseModel):
    max_iters: int = 100
    pivot_tol: float = 1e-10
    feas_tol: float = 1e-8
    det_tol: float = 1e-8
    decimals: int = 2


class Pivot(BaseModel):
    row: int
    col: int


class IterationSnapshot(BaseModel):
    index: int
    tableau: List[List[float]]
    basis: List[str]
    pivot: Optional[Pivot] = None
    ratios: Optional[List[float]] = None
    entering_label: Optional[str] = None
    leaving_label: Optional[str] = None
    is_optimal: bool = False


class DisplayTable(BaseModel):
    headers: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)


class Solution(BaseModel):
    valid: bool
    point: List[float] = Field(default_factory=list)
    objective_value: float = 0.0
    display_table: DisplayTable = Field(default_factory=DisplayTable)
    iterations: Optional[List[IterationSnapshot]] = None
    # caller's objective padded with one zero per slack; Ci source for every tableau view
    costs: Optional[List[float]] = None
    status: Status = "optimal"
    method: Optional[Method] = None
    message: str = ""
