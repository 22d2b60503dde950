#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from lp_tutor.schemas import Problem


def generate_random_lp(num_vars: int, num_constraints: int, seed: Optional[int] = None) -> Problem:
    """Random <= problem with positive data, so the origin is feasible and the optimum bounded."""
    rng = random.Random(seed)
    constraints: List[List[float]] = []
    rhs: List[float] = []
    for _ in range(num_constraints):
        constraints.append([round(rng.uniform(0.5, 5.0), 2) for _ in range(num_vars)])
        rhs.append(round(rng.uniform(num_vars * 2.0, num_vars * 6.0), 2))
    objective = [round(rng.uniform(1.0, 4.0), 2) for _ in range(num_vars)]
    return Problem(
        maximize=True,
        objective=objective,
        constraints=constraints,
        relations=["<="] * num_constraints,
        rhs=rhs,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible LP instances.")
    parser.add_argument("--vars", type=int, default=3, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    # without --seed every instance is drawn from fresh entropy
    instances = [
        generate_random_lp(args.vars, args.constraints, None if args.seed is None else args.seed + idx)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
