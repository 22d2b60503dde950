from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .render import render_solution
from .schemas import Method, Problem, SolveOptions
from .solver import solve_lp_problem

logger = logging.getLogger(__name__)

app = FastMCP("LP Tutor")


@app.tool()
def solve_linear_program(
    problem: Problem,
    method: Method | None = None,
    options: SolveOptions | None = None,
) -> dict:
    """
    Solve a small LP and return the optimum together with the solution trace.

    Two-variable problems always use the graphical method. Otherwise `method` selects
    "simplex" (default) or "general".
    """
    opts = options or SolveOptions()
    return solve_lp_problem(problem, method, opts).model_dump()


@app.tool()
def explain_linear_program(
    problem: Problem,
    method: Method | None = None,
    options: SolveOptions | None = None,
) -> dict:
    """Solve a small LP and also return a plain-text walkthrough of every tableau."""
    opts = options or SolveOptions()
    solution = solve_lp_problem(problem, method, opts)
    return {
        "solution": solution.model_dump(),
        "report": render_solution(solution, opts.decimals),
    }


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio" or "--stdio" in sys.argv:
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        logger.info("Serving LP Tutor on port %d", port)
        app.run(transport="streamable-http")
