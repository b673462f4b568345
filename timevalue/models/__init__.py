"""One value object per financial function, built from tuples or mappings."""

from timevalue.models.cash_flow_models import (
    InternalRateOfReturn,
    ModifiedIRR,
    NetPresentValue,
)
from timevalue.models.time_value_models import (
    FutureValue,
    InterestPayment,
    NumberOfPeriods,
    Payment,
    PresentValue,
    PrincipalPayment,
    Rate,
)

__all__ = [
    "FutureValue",
    "PresentValue",
    "Payment",
    "NumberOfPeriods",
    "InterestPayment",
    "PrincipalPayment",
    "Rate",
    "NetPresentValue",
    "InternalRateOfReturn",
    "ModifiedIRR",
]
