#!/usr/bin/env python3
import json
import logging
import os
import time
from pathlib import Path

from lp_tutor.schemas import Problem
from lp_tutor.solver import solve_lp_problem
from scripts.generate_instances import generate_random_lp


def load_example(name: str) -> Problem:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return Problem.model_validate(json.loads(path.read_text()))


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING"))
    cases = [
        ("examples/scenario_a.json", load_example("scenario_a.json")),
        ("examples/three_products.json", load_example("three_products.json")),
    ]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_lp(3, 3, seed)))

    print("name,method,status,objective,iterations,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        solution = solve_lp_problem(problem, "simplex")
        elapsed_ms = (time.perf_counter() - start) * 1000
        steps = len(solution.iterations) - 1 if solution.iterations else 0
        print(
            f"{name},{solution.method},{solution.status},{solution.objective_value},{steps},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()
