"""Modified internal rate of return."""

import logging
from collections.abc import Iterable

from timevalue.core.cash_flows import CashFlowSeries, net_present_value
from timevalue.errors import UndefinedError
from timevalue.utils.financial_utils import validate_rate

logger = logging.getLogger(__name__)


def modified_internal_rate(
    values: "Iterable[float] | CashFlowSeries",
    finance_rate: float,
    reinvest_rate: float,
) -> float:
    """
    Compute the modified internal rate of return.

    Outflows are discounted to time zero at ``finance_rate``; inflows are
    compounded to the last period at ``reinvest_rate``. The MIRR is the
    rate that grows the former into the latter over ``n - 1`` periods.

    Args:
        values: Cash flows in period order. Must contain at least one
            positive and one negative value.
        finance_rate: Rate paid on the cash flows.
        reinvest_rate: Rate received on reinvested cash flows.

    Returns:
        MIRR as decimal.

    Raises:
        InvalidDomainError: If either rate is at or below -1.
        UndefinedError: If the series has fewer than two periods, or lacks
            an inflow or an outflow.

    Example:
        >>> modified_internal_rate([-120000, 39000, 30000, 21000, 37000, 46000], 0.10, 0.12)
        0.12609413...
    """
    finance_rate = validate_rate(finance_rate, name="finance_rate")
    reinvest_rate = validate_rate(reinvest_rate, name="reinvest_rate")
    series = CashFlowSeries(values)

    n = len(series)
    if n <= 1:
        raise UndefinedError("MIRR requires at least two periods")
    if not series.has_sign_change:
        logger.debug("MIRR undefined for %r: cash flows share one sign", series)
        raise UndefinedError(
            "MIRR requires at least one positive and one negative cash flow"
        )

    # Compounding the inflows to period n-1 is folded into the final
    # (1 + reinvest_rate) factor so (1 + reinvest_rate)**(n-1) is never formed
    numer = abs(net_present_value(reinvest_rate, series.inflows()))
    denom = abs(net_present_value(finance_rate, series.outflows()))
    return (numer / denom) ** (1 / (n - 1)) * (1 + reinvest_rate) - 1


mirr = modified_internal_rate
