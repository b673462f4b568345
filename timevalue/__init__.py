"""
Time-value-of-money engine.

Closed-form annuity formulas and iterative rate solvers that reproduce
the results of ``numpy_financial``:
- fv, pv, pmt, nper, ipmt, ppmt from the annuity identity
- rate by Newton-Raphson on the annuity identity
- npv, irr and mirr over periodic cash-flow series
"""

from timevalue.core.cash_flows import CashFlowSeries, net_present_value, npv
from timevalue.core.irr_solver import irr, solve_irr
from timevalue.core.mirr import mirr, modified_internal_rate
from timevalue.core.newton import SolverResult
from timevalue.core.rate_solver import RateSolverConfig, rate, solve_rate
from timevalue.core.time_value import (
    TimeValueParameters,
    future_value,
    fv,
    interest_payment,
    ipmt,
    nper,
    number_of_periods,
    payment,
    pmt,
    ppmt,
    present_value,
    principal_payment,
    pv,
)
from timevalue.errors import (
    DidNotConvergeError,
    InvalidDomainError,
    TimeValueError,
    UndefinedError,
)
from timevalue.utils.financial_utils import When

__version__ = "1.0.0"
__all__ = [
    "CashFlowSeries",
    "DidNotConvergeError",
    "InvalidDomainError",
    "RateSolverConfig",
    "SolverResult",
    "TimeValueError",
    "TimeValueParameters",
    "UndefinedError",
    "When",
    "future_value",
    "fv",
    "interest_payment",
    "ipmt",
    "irr",
    "mirr",
    "modified_internal_rate",
    "net_present_value",
    "npv",
    "nper",
    "number_of_periods",
    "payment",
    "pmt",
    "ppmt",
    "present_value",
    "principal_payment",
    "pv",
    "rate",
    "solve_irr",
    "solve_rate",
]
