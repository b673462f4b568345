"""
Closed-form time-value-of-money formulas.

Every function solves the same annuity identity for a different unknown::

    fv + pv*(1+rate)**nper + pmt*(1+rate*when)/rate*((1+rate)**nper - 1) = 0

which degenerates to ``fv + pv + pmt*nper = 0`` when ``rate == 0``.
Signs follow the cash-flow convention: money paid out is negative,
money received is positive.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from timevalue.errors import UndefinedError
from timevalue.utils.financial_utils import (
    When,
    validate_nper,
    validate_period,
    validate_rate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeValueParameters:
    """
    The parameter set shared by the annuity formulas.

    Validated on construction: ``rate`` must exceed -1 and ``nper`` must be
    a non-negative whole number.
    """

    rate: float
    nper: int
    pmt: float = 0.0
    pv: float = 0.0
    fv: float = 0.0
    when: When = When.END

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", validate_rate(self.rate))
        object.__setattr__(self, "nper", validate_nper(self.nper))
        object.__setattr__(self, "when", When.parse(self.when))

    @property
    def compound_factor(self) -> float:
        """(1 + rate) ** nper."""
        return _compound(self.rate, self.nper)

    @property
    def annuity_factor(self) -> float:
        """Future value of one unit paid every period."""
        return _annuity_factor(self.rate, self.nper, self.when)


def _compound(rate: float, nper: float) -> float:
    # numpy keeps overflow as inf instead of raising OverflowError
    with np.errstate(over="ignore"):
        return float(np.power(np.float64(1.0 + rate), nper))


def _annuity_factor(rate: float, nper: int, when: When) -> float:
    if rate == 0:
        return float(nper)
    return (1 + rate * when) * (_compound(rate, nper) - 1) / rate


def future_value(
    rate: float,
    nper: int,
    pmt: float,
    pv: float,
    when: When | str | int = When.END,
) -> float:
    """
    Compute the future value.

    Args:
        rate: Periodic interest rate (e.g., 0.075 for 7.5%).
        nper: Number of compounding periods.
        pmt: Payment made every period.
        pv: Present value.
        when: When payments are due, at period end or begin.

    Returns:
        Value at the end of ``nper`` periods.

    Example:
        >>> future_value(0.075, 20, -2000, 0)
        86609.36267304...
    """
    params = TimeValueParameters(rate, nper, pmt=pmt, pv=pv, when=when)
    if params.rate == 0:
        return -(params.pv + params.pmt * params.nper)
    return -(params.pv * params.compound_factor + params.pmt * params.annuity_factor)


def present_value(
    rate: float,
    nper: int,
    pmt: float,
    fv: float = 0.0,
    when: When | str | int = When.END,
) -> float:
    """
    Compute the present value.

    Args:
        rate: Periodic interest rate.
        nper: Number of compounding periods.
        pmt: Payment made every period.
        fv: Future value.
        when: When payments are due.

    Returns:
        Value at time zero.
    """
    params = TimeValueParameters(rate, nper, pmt=pmt, fv=fv, when=when)
    return -(params.fv + params.pmt * params.annuity_factor) / params.compound_factor


def payment(
    rate: float,
    nper: int,
    pv: float,
    fv: float = 0.0,
    when: When | str | int = When.END,
) -> float:
    """
    Compute the payment against principal plus interest.

    Args:
        rate: Periodic interest rate.
        nper: Number of payment periods, at least 1.
        pv: Present value (e.g., the loan amount).
        fv: Future value left after the last payment.
        when: When payments are due.

    Returns:
        Constant payment per period.

    Raises:
        InvalidDomainError: If ``nper`` is zero or ``rate <= -1``.

    Example:
        >>> payment(0.08 / 12, 60, 15000)
        -304.14591...
    """
    validate_nper(nper, allow_zero=False)
    params = TimeValueParameters(rate, nper, pv=pv, fv=fv, when=when)
    return -(params.fv + params.pv * params.compound_factor) / params.annuity_factor


def number_of_periods(
    rate: float,
    pmt: float,
    pv: float,
    fv: float = 0.0,
    when: When | str | int = When.END,
) -> float:
    """
    Compute the number of periodic payments.

    The result is fractional in general. A zero rate with a zero payment
    never reaches the target and yields ``inf``.

    Args:
        rate: Periodic interest rate.
        pmt: Payment per period.
        pv: Present value.
        fv: Future value.
        when: When payments are due.

    Returns:
        Number of periods.

    Raises:
        InvalidDomainError: If ``rate <= -1``.
        UndefinedError: If no real number of periods satisfies the identity.
    """
    rate = validate_rate(rate)
    when = When.parse(when)

    if rate == 0:
        if pmt == 0:
            return math.inf
        return -(pv + fv) / pmt

    z = pmt * (1 + rate * when) / rate
    numerator = -fv + z
    denominator = pv + z
    if denominator == 0 or numerator / denominator <= 0:
        logger.debug(
            "nper undefined for rate=%s pmt=%s pv=%s fv=%s", rate, pmt, pv, fv
        )
        raise UndefinedError(
            "No real number of periods satisfies the given rate, payment and values"
        )
    return math.log(numerator / denominator) / math.log(1 + rate)


def interest_payment(
    rate: float,
    per: int,
    nper: int,
    pv: float,
    fv: float = 0.0,
    when: When | str | int = When.END,
) -> float:
    """
    Compute the interest portion of the payment due in period ``per``.

    The interest is the rate applied to the balance remaining after
    ``per - 1`` payments. For payments due at the beginning of a period
    the first payment carries no interest and later ones are discounted
    by one period.

    Args:
        rate: Periodic interest rate.
        per: Payment period, from 1 to ``nper``.
        nper: Number of payment periods.
        pv: Present value.
        fv: Future value.
        when: When payments are due.

    Returns:
        Interest portion of the payment.

    Raises:
        InvalidDomainError: If ``per`` is outside ``[1, nper]``.
    """
    nper = validate_nper(nper, allow_zero=False)
    per = validate_period(per, nper)
    when = When.parse(when)

    total_pmt = payment(rate, nper, pv, fv, when)
    if when == When.BEGIN and per == 1:
        return 0.0

    remaining_balance = future_value(rate, per - 1, total_pmt, pv, when)
    interest = remaining_balance * rate
    if when == When.BEGIN:
        interest = interest / (1 + rate)
    return interest


def principal_payment(
    rate: float,
    per: int,
    nper: int,
    pv: float,
    fv: float = 0.0,
    when: When | str | int = When.END,
) -> float:
    """Compute the principal portion of the payment due in period ``per``."""
    total_pmt = payment(rate, nper, pv, fv, when)
    return total_pmt - interest_payment(rate, per, nper, pv, fv, when)


fv = future_value
pv = present_value
pmt = payment
nper = number_of_periods
ipmt = interest_payment
ppmt = principal_payment
