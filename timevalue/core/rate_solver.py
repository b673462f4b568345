"""Newton-Raphson solver for the periodic interest rate of an annuity."""

import logging
from dataclasses import dataclass

import numpy as np

from timevalue.core.newton import SolverResult, newton_raphson
from timevalue.errors import InvalidDomainError
from timevalue.templates.solver_defaults import SOLVER_DEFAULTS
from timevalue.utils.financial_utils import When, validate_nper, validate_rate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateSolverConfig:
    """
    Starting point and stopping rules for an iterative rate solve.

    Args:
        guess: Initial rate estimate.
        tol: Required absolute change between iterates, must be positive.
        maxiter: Iteration budget, must be positive.

    Example:
        >>> RateSolverConfig.from_defaults("irr", maxiter=50)
        RateSolverConfig(guess=0.1, tol=1e-12, maxiter=50)
    """

    guess: float = 0.1
    tol: float = 1e-6
    maxiter: int = 100

    def __post_init__(self) -> None:
        object.__setattr__(self, "guess", validate_rate(self.guess, name="guess"))
        if not self.tol > 0:
            raise InvalidDomainError(f"tol must be positive, got {self.tol}")
        maxiter = self.maxiter
        if isinstance(maxiter, bool) or int(maxiter) != maxiter or maxiter <= 0:
            raise InvalidDomainError(
                f"maxiter must be a positive integer, got {maxiter}"
            )
        object.__setattr__(self, "maxiter", int(self.maxiter))

    @classmethod
    def from_defaults(cls, name: str, **overrides: float) -> "RateSolverConfig":
        """
        Build a config from the named defaults with optional overrides.

        Args:
            name: Key in SOLVER_DEFAULTS ('rate' or 'irr').
            **overrides: guess, tol or maxiter values that replace the defaults.
                None values are ignored.

        Raises:
            ValueError: If ``name`` is not a known solver.
        """
        if name not in SOLVER_DEFAULTS:
            raise ValueError(
                f"Unknown solver '{name}'. "
                f"Available solvers: {list(SOLVER_DEFAULTS.keys())}"
            )
        settings = dict(SOLVER_DEFAULTS[name])
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**settings)


def _annuity_residual(
    rate: float,
    nper: int,
    pmt: float,
    pv: float,
    fv: float,
    when: When,
) -> tuple[float, float]:
    """
    Evaluate g(rate) and g'(rate) for the annuity identity.

    g = fv + pv*(1+r)**n + pmt*(1+r*w)/r*((1+r)**n - 1)
    """
    if rate == 0:
        # g is continuous at zero but the closed form is not; report a
        # stationary point so the iteration steps off it
        return fv + pv + pmt * nper, 0.0

    r = np.float64(rate)
    w = float(when)
    with np.errstate(all="ignore"):
        t1 = (r + 1) ** nper
        t2 = (r + 1) ** (nper - 1)
        g = fv + t1 * pv + pmt * (t1 - 1) * (r * w + 1) / r
        gp = (
            nper * t2 * pv
            - pmt * (t1 - 1) * (r * w + 1) / r**2
            + nper * pmt * t2 * (r * w + 1) / r
            + pmt * (t1 - 1) * w / r
        )
    return float(g), float(gp)


def solve_rate(
    nper: int,
    pmt: float,
    pv: float,
    fv: float,
    when: When | str | int = When.END,
    config: RateSolverConfig | None = None,
) -> SolverResult:
    """
    Solve the annuity identity for the periodic interest rate.

    Args:
        nper: Number of compounding periods, at least 1.
        pmt: Payment per period.
        pv: Present value.
        fv: Future value.
        when: When payments are due.
        config: Solver settings; defaults to SOLVER_DEFAULTS['rate'].

    Returns:
        SolverResult carrying the rate (or last iterate) and iteration count.
    """
    nper = validate_nper(nper, allow_zero=False)
    when = When.parse(when)
    if config is None:
        config = RateSolverConfig.from_defaults("rate")

    def step(rate: float) -> tuple[float, float]:
        return _annuity_residual(rate, nper, pmt, pv, fv, when)

    result = newton_raphson(step, config.guess, config.tol, config.maxiter)
    if not result.converged:
        logger.debug(
            "rate did not converge for nper=%s pmt=%s pv=%s fv=%s when=%s",
            nper, pmt, pv, fv, when.name,
        )
    return result


def rate(
    nper: int,
    pmt: float,
    pv: float,
    fv: float,
    when: When | str | int = When.END,
    guess: float | None = None,
    tol: float | None = None,
    maxiter: int | None = None,
) -> float:
    """
    Compute the rate of interest per period.

    Args:
        nper: Number of compounding periods.
        pmt: Payment per period.
        pv: Present value.
        fv: Future value.
        when: When payments are due.
        guess: Starting guess (default 0.1).
        tol: Required tolerance (default 1e-6).
        maxiter: Maximum iterations (default 100).

    Returns:
        Periodic interest rate.

    Raises:
        DidNotConvergeError: If no rate is found within ``maxiter`` iterations.

    Example:
        >>> rate(10, 0, -3500, 10000)
        0.11069085...
    """
    config = RateSolverConfig.from_defaults("rate", guess=guess, tol=tol, maxiter=maxiter)
    return solve_rate(nper, pmt, pv, fv, when, config).value()
