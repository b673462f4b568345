"""Internal rate of return of a periodic cash-flow series."""

import logging
from collections.abc import Iterable

import numpy as np

from timevalue.core.cash_flows import CashFlowSeries
from timevalue.core.newton import SolverResult, newton_raphson
from timevalue.core.rate_solver import RateSolverConfig
from timevalue.errors import InvalidDomainError, UndefinedError

logger = logging.getLogger(__name__)


def solve_irr(
    values: "Iterable[float] | CashFlowSeries",
    config: RateSolverConfig | None = None,
) -> SolverResult:
    """
    Find a rate at which the series has zero net present value.

    Substituting ``g = 1 + r`` and multiplying the NPV by ``g**(n-1)``
    turns the problem into finding a root of the polynomial::

        v[0]*g**(n-1) + v[1]*g**(n-2) + ... + v[n-1]

    which is solved by Newton-Raphson from ``1 + guess``. A series whose
    sign changes more than once may have several roots; only the one the
    iteration reaches from the guess is returned.

    Args:
        values: Cash flows in period order; index 0 is time zero.
        config: Solver settings; defaults to SOLVER_DEFAULTS['irr'].

    Returns:
        SolverResult carrying the rate (or last iterate) and iteration count.

    Raises:
        UndefinedError: If the series has no inflow or no outflow.
        InvalidDomainError: If an iterate falls to a rate of -1 or below.
    """
    series = CashFlowSeries(values)
    if not series.has_sign_change:
        logger.debug("IRR undefined for %r: no sign change", series)
        raise UndefinedError(
            "IRR requires at least one positive and one negative cash flow"
        )
    if config is None:
        config = RateSolverConfig.from_defaults("irr")

    coefficients = series.values
    derivative = np.polyder(coefficients)

    def step(rate: float) -> tuple[float, float]:
        g = 1.0 + rate
        return float(np.polyval(coefficients, g)), float(np.polyval(derivative, g))

    def domain(rate: float) -> None:
        if rate <= -1.0:
            raise InvalidDomainError(
                f"IRR iteration left the domain: rate {rate} <= -1"
            )

    result = newton_raphson(step, config.guess, config.tol, config.maxiter, domain=domain)
    if not result.converged:
        logger.debug("IRR did not converge for %r", series)
    return result


def irr(
    values: "Iterable[float] | CashFlowSeries",
    guess: float | None = None,
    tol: float | None = None,
    maxiter: int | None = None,
) -> float:
    """
    Compute the internal rate of return.

    Args:
        values: Cash flows in period order. By convention deposits are
            negative and withdrawals positive.
        guess: Starting guess (default 0.1).
        tol: Required tolerance (default 1e-12).
        maxiter: Maximum iterations (default 100).

    Returns:
        IRR as decimal (e.g., 0.05 for 5%).

    Raises:
        UndefinedError: If all cash flows share the same sign.
        DidNotConvergeError: If no root is found within ``maxiter`` iterations.

    Example:
        >>> irr([-150000, 15000, 25000, 35000, 45000, 60000])
        0.05243288...
    """
    config = RateSolverConfig.from_defaults("irr", guess=guess, tol=tol, maxiter=maxiter)
    return solve_irr(values, config).value()
