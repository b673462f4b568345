"""Default settings for the iterative solvers."""

from typing import Any

SOLVER_DEFAULTS: dict[str, dict[str, Any]] = {
    "rate": {
        "guess": 0.1,
        "tol": 1e-6,
        "maxiter": 100,
    },
    "irr": {
        "guess": 0.1,
        "tol": 1e-12,
        "maxiter": 100,
    },
}
