"""Value objects for the cash-flow functions (npv, irr, mirr)."""

from dataclasses import dataclass

from timevalue.core.cash_flows import CashFlowSeries, net_present_value
from timevalue.core.irr_solver import solve_irr
from timevalue.core.mirr import modified_internal_rate
from timevalue.core.newton import SolverResult
from timevalue.core.rate_solver import RateSolverConfig
from timevalue.models.base import CalculationModel
from timevalue.utils.financial_utils import validate_rate


@dataclass(frozen=True)
class NetPresentValue(CalculationModel):
    """
    Net present value of a cash-flow series at a fixed rate.

    Example:
        >>> NetPresentValue.from_tuple(([-15000.0, 1500.0, 2500.0, 3500.0, 4500.0, 6000.0], 0.05)).get()
        122.89485495...
    """

    values: CashFlowSeries
    rate: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", CashFlowSeries(self.values))
        object.__setattr__(self, "rate", validate_rate(self.rate))

    def get(self) -> float:
        return net_present_value(self.rate, self.values)


@dataclass(frozen=True)
class InternalRateOfReturn(CalculationModel):
    """
    Internal rate of return of a cash-flow series.

    Only the root reached from ``guess`` is reported when the series
    changes sign more than once.
    """

    values: CashFlowSeries
    guess: float = 0.1
    tol: float = 1e-12
    maxiter: int = 100

    def __post_init__(self) -> None:
        config = RateSolverConfig(guess=self.guess, tol=self.tol, maxiter=self.maxiter)
        object.__setattr__(self, "values", CashFlowSeries(self.values))
        object.__setattr__(self, "guess", config.guess)
        object.__setattr__(self, "maxiter", config.maxiter)

    def solve(self) -> SolverResult:
        """Run the solver and return the full result, converged or not."""
        config = RateSolverConfig(guess=self.guess, tol=self.tol, maxiter=self.maxiter)
        return solve_irr(self.values, config)

    def get(self) -> float:
        return self.solve().value()


@dataclass(frozen=True)
class ModifiedIRR(CalculationModel):
    """
    Modified internal rate of return.

    Example:
        >>> ModifiedIRR.from_tuple(([100.0, 200.0, -50.0, 300.0, -200.0], 0.05, 0.06)).get()
        0.34282338...
    """

    values: CashFlowSeries
    finance_rate: float
    reinvest_rate: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", CashFlowSeries(self.values))
        object.__setattr__(
            self, "finance_rate", validate_rate(self.finance_rate, name="finance_rate")
        )
        object.__setattr__(
            self, "reinvest_rate", validate_rate(self.reinvest_rate, name="reinvest_rate")
        )

    def get(self) -> float:
        return modified_internal_rate(self.values, self.finance_rate, self.reinvest_rate)
