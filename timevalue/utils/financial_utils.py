"""Financial utility functions shared by formulas and solvers."""

import math
from enum import IntEnum
from typing import Any

import numpy as np

from timevalue.errors import InvalidDomainError


class When(IntEnum):
    """
    When payments are due within a period.

    The integer value is the timing factor applied to the payment term:
    ``(1 + rate * when)``.
    """

    END = 0
    BEGIN = 1

    @classmethod
    def parse(cls, value: Any) -> "When":
        """
        Coerce ``value`` into a ``When`` member.

        Accepts members, the integers 0/1 and the strings 'end'/'begin'
        (also 'finish'/'start').

        Raises:
            InvalidDomainError: If the value names no known timing.
        """
        if isinstance(value, When):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            aliases = {"end": cls.END, "finish": cls.END, "begin": cls.BEGIN, "start": cls.BEGIN}
            if key in aliases:
                return aliases[key]
        elif value in (0, 1) and not isinstance(value, bool):
            return cls(int(value))
        raise InvalidDomainError(
            f"Unknown payment timing {value!r}. Use 'end'/0 or 'begin'/1"
        )


def calculate_discount_factors(discount_rate: float, n_periods: int) -> np.ndarray:
    """
    Calculate discount factors for periods 0 to n_periods-1.

    Period 0 is not discounted; period t is discounted by 1/(1+r)^t.

    Args:
        discount_rate: Periodic discount rate.
        n_periods: Number of periods.

    Returns:
        Array of discount factors.

    Example:
        >>> calculate_discount_factors(0.05, 3)
        array([1.        , 0.95238095, 0.90702948])
    """
    validate_rate(discount_rate)
    periods = np.arange(n_periods, dtype=np.float64)
    return 1 / (1 + discount_rate) ** periods


def validate_rate(rate: float, name: str = "rate") -> float:
    """Reject rates at or below -1, where compounding is undefined."""
    rate = float(rate)
    if np.isnan(rate) or rate <= -1.0:
        raise InvalidDomainError(f"{name} must be greater than -1, got {rate}")
    return rate


def validate_nper(nper: int, allow_zero: bool = True) -> int:
    """Reject negative (and optionally zero) period counts."""
    if isinstance(nper, bool) or not math.isfinite(nper) or int(nper) != nper:
        raise InvalidDomainError(f"nper must be a whole number of periods, got {nper!r}")
    nper = int(nper)
    if nper < 0 or (nper == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise InvalidDomainError(f"nper must be {bound}, got {nper}")
    return nper


def validate_period(per: int, nper: int) -> int:
    """Reject period indices outside ``[1, nper]``."""
    if isinstance(per, bool) or not math.isfinite(per) or int(per) != per:
        raise InvalidDomainError(f"per must be a whole period index, got {per!r}")
    per = int(per)
    if not 1 <= per <= nper:
        raise InvalidDomainError(f"per must lie in [1, {nper}], got {per}")
    return per
