"""Newton-Raphson iteration shared by the rate and IRR solvers."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from timevalue.errors import DidNotConvergeError

logger = logging.getLogger(__name__)

# Step applied to the iterate when the derivative vanishes
STATIONARY_NUDGE = 1e-4


@dataclass(frozen=True)
class SolverResult:
    """
    Outcome of an iterative solve.

    Attributes:
        rate: Converged root, or the last iterate when not converged.
        iterations: Number of iterations performed.
        converged: Whether the tolerance was met within the budget.
    """

    rate: float
    iterations: int
    converged: bool

    def value(self) -> float:
        """
        Return the converged rate.

        Raises:
            DidNotConvergeError: If the solver did not converge.
        """
        if not self.converged:
            raise DidNotConvergeError(
                f"Solver did not converge after {self.iterations} iterations "
                f"(last estimate {self.rate})",
                last_estimate=self.rate,
                iterations=self.iterations,
            )
        return self.rate


def newton_raphson(
    step: Callable[[float], tuple[float, float]],
    x0: float,
    tol: float,
    maxiter: int,
    domain: Callable[[float], None] | None = None,
) -> SolverResult:
    """
    Find a root of f by Newton-Raphson iteration.

    Converges when two successive iterates differ by less than ``tol``;
    the later iterate is returned. When ``f'(x)`` is exactly zero the
    iterate is nudged by ``STATIONARY_NUDGE`` instead of dividing by it;
    small derivatives are divided through, so the iteration does not
    depend on the scale of f.

    Args:
        step: Callable returning ``(f(x), f'(x))``.
        x0: Initial guess.
        tol: Absolute tolerance on the change between iterates.
        maxiter: Iteration budget.
        domain: Optional check raising for iterates outside the domain.

    Returns:
        SolverResult with the root or the last iterate.
    """
    x = x0
    if domain is not None:
        domain(x)
    for iteration in range(1, maxiter + 1):
        f, fprime = step(x)
        if fprime == 0:
            x = x + STATIONARY_NUDGE
            continue

        x_next = x - f / fprime
        if not math.isfinite(x_next):
            logger.debug("Newton iterate diverged at iteration %d: %s", iteration, x_next)
            return SolverResult(rate=x_next, iterations=iteration, converged=False)
        if domain is not None:
            domain(x_next)

        if abs(x_next - x) < tol:
            logger.debug("Converged to %s after %d iterations", x_next, iteration)
            return SolverResult(rate=x_next, iterations=iteration, converged=True)
        x = x_next

    logger.debug("Maximum iterations (%d) reached, last estimate %s", maxiter, x)
    return SolverResult(rate=x, iterations=maxiter, converged=False)
