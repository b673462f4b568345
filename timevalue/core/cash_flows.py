"""Periodic cash-flow series and net present value."""

from collections.abc import Iterable, Iterator

import numpy as np

from timevalue.errors import InvalidDomainError
from timevalue.utils.financial_utils import calculate_discount_factors


class CashFlowSeries:
    """
    Immutable ordered series of periodic cash flows.

    Index 0 is time zero, index t is the end of period t. Outflows are
    negative and inflows positive; zeros are valid entries.

    Args:
        values: Cash flows in period order.

    Example:
        >>> series = CashFlowSeries([-100.0, 60.0, 60.0])
        >>> series.has_sign_change
        True
    """

    def __init__(self, values: "Iterable[float] | CashFlowSeries") -> None:
        """Initialize the series from any iterable of numbers."""
        if isinstance(values, CashFlowSeries):
            array = values._values
        else:
            array = np.asarray(list(values), dtype=np.float64)
        if array.ndim != 1 or array.size == 0:
            raise InvalidDomainError("Cash flow series must be a non-empty 1-D sequence")
        if not np.all(np.isfinite(array)):
            raise InvalidDomainError("Cash flow series must contain finite values only")

        self._values = array.copy()
        self._values.flags.writeable = False

    def __len__(self) -> int:
        return int(self._values.size)

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CashFlowSeries):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        return f"CashFlowSeries({self._values.tolist()!r})"

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the cash flows."""
        return self._values

    @property
    def has_sign_change(self) -> bool:
        """True if the series holds at least one inflow and one outflow."""
        return bool(np.any(self._values > 0) and np.any(self._values < 0))

    def outflows(self) -> np.ndarray:
        """Negative entries in place, every other period zeroed."""
        return np.where(self._values < 0, self._values, 0.0)

    def inflows(self) -> np.ndarray:
        """Positive entries in place, every other period zeroed."""
        return np.where(self._values > 0, self._values, 0.0)


def net_present_value(
    rate: float,
    values: "Iterable[float] | CashFlowSeries",
) -> float:
    """
    Calculate the net present value of a cash-flow series.

    The first value sits at time zero and is not discounted.

    Args:
        rate: Periodic discount rate.
        values: Cash flows in period order.

    Returns:
        NPV as float.

    Raises:
        InvalidDomainError: If ``rate <= -1``.

    Example:
        >>> net_present_value(0.05, [-15000, 1500, 2500, 3500, 4500, 6000])
        122.89485495...
    """
    series = CashFlowSeries(values)
    discount_factors = calculate_discount_factors(rate, len(series))
    return float(np.sum(series.values * discount_factors))


npv = net_present_value
