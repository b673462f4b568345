"""Value objects for the annuity functions (fv, pv, pmt, nper, ipmt, ppmt, rate)."""

from dataclasses import dataclass

from timevalue.core import time_value
from timevalue.core.newton import SolverResult
from timevalue.core.rate_solver import RateSolverConfig, solve_rate
from timevalue.models.base import CalculationModel
from timevalue.utils.financial_utils import (
    When,
    validate_nper,
    validate_period,
    validate_rate,
)


def _normalize(obj: object, **values: object) -> None:
    for name, value in values.items():
        object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class FutureValue(CalculationModel):
    """
    Future value of a present amount plus a stream of payments.

    Example:
        >>> FutureValue.from_tuple((0.075, 20, -2000.0, 0.0, When.END)).get()
        86609.36267304...
    """

    rate: float
    nper: int
    pmt: float
    pv: float
    when: When = When.END

    def __post_init__(self) -> None:
        _normalize(
            self,
            rate=validate_rate(self.rate),
            nper=validate_nper(self.nper),
            when=When.parse(self.when),
        )

    def get(self) -> float:
        return time_value.future_value(self.rate, self.nper, self.pmt, self.pv, self.when)


@dataclass(frozen=True)
class PresentValue(CalculationModel):
    """Present value of a future amount plus a stream of payments."""

    rate: float
    nper: int
    pmt: float
    fv: float = 0.0
    when: When = When.END

    def __post_init__(self) -> None:
        _normalize(
            self,
            rate=validate_rate(self.rate),
            nper=validate_nper(self.nper),
            when=When.parse(self.when),
        )

    def get(self) -> float:
        return time_value.present_value(self.rate, self.nper, self.pmt, self.fv, self.when)


@dataclass(frozen=True)
class Payment(CalculationModel):
    """Constant payment against loan principal plus interest."""

    rate: float
    nper: int
    pv: float
    fv: float = 0.0
    when: When = When.END

    def __post_init__(self) -> None:
        _normalize(
            self,
            rate=validate_rate(self.rate),
            nper=validate_nper(self.nper, allow_zero=False),
            when=When.parse(self.when),
        )

    def get(self) -> float:
        return time_value.payment(self.rate, self.nper, self.pv, self.fv, self.when)


@dataclass(frozen=True)
class NumberOfPeriods(CalculationModel):
    """Number of periodic payments needed to move pv to fv."""

    rate: float
    pmt: float
    pv: float
    fv: float = 0.0
    when: When = When.END

    def __post_init__(self) -> None:
        _normalize(self, rate=validate_rate(self.rate), when=When.parse(self.when))

    def get(self) -> float:
        return time_value.number_of_periods(self.rate, self.pmt, self.pv, self.fv, self.when)


@dataclass(frozen=True)
class InterestPayment(CalculationModel):
    """
    Interest portion of the payment due in period ``per``.

    ``per`` is checked against ``[1, nper]`` when the object is built.
    """

    rate: float
    per: int
    nper: int
    pv: float
    fv: float = 0.0
    when: When = When.END

    def __post_init__(self) -> None:
        nper = validate_nper(self.nper, allow_zero=False)
        _normalize(
            self,
            rate=validate_rate(self.rate),
            nper=nper,
            per=validate_period(self.per, nper),
            when=When.parse(self.when),
        )

    def get(self) -> float:
        return time_value.interest_payment(
            self.rate, self.per, self.nper, self.pv, self.fv, self.when
        )


@dataclass(frozen=True)
class PrincipalPayment(InterestPayment):
    """Principal portion of the payment due in period ``per``."""

    def get(self) -> float:
        return time_value.principal_payment(
            self.rate, self.per, self.nper, self.pv, self.fv, self.when
        )


@dataclass(frozen=True)
class Rate(CalculationModel):
    """
    Periodic interest rate solved by Newton-Raphson.

    Example:
        >>> Rate.from_tuple((10, 0.0, -3500.0, 10000.0, When.END, 0.1, 1e-6, 100)).get()
        0.11069085...
    """

    nper: int
    pmt: float
    pv: float
    fv: float
    when: When = When.END
    guess: float = 0.1
    tol: float = 1e-6
    maxiter: int = 100

    def __post_init__(self) -> None:
        config = RateSolverConfig(guess=self.guess, tol=self.tol, maxiter=self.maxiter)
        _normalize(
            self,
            nper=validate_nper(self.nper, allow_zero=False),
            when=When.parse(self.when),
            guess=config.guess,
            maxiter=config.maxiter,
        )

    @property
    def config(self) -> RateSolverConfig:
        return RateSolverConfig(guess=self.guess, tol=self.tol, maxiter=self.maxiter)

    def solve(self) -> SolverResult:
        """Run the solver and return the full result, converged or not."""
        return solve_rate(self.nper, self.pmt, self.pv, self.fv, self.when, self.config)

    def get(self) -> float:
        return self.solve().value()
