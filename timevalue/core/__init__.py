"""Core formulas and solvers."""

from timevalue.core.cash_flows import CashFlowSeries, net_present_value
from timevalue.core.irr_solver import solve_irr
from timevalue.core.mirr import modified_internal_rate
from timevalue.core.newton import SolverResult, newton_raphson
from timevalue.core.rate_solver import RateSolverConfig, solve_rate

__all__ = [
    "CashFlowSeries",
    "RateSolverConfig",
    "SolverResult",
    "modified_internal_rate",
    "net_present_value",
    "newton_raphson",
    "solve_irr",
    "solve_rate",
]
