"""Tests for the calculation value objects."""

import dataclasses

import pytest

from timevalue import CashFlowSeries, DidNotConvergeError, InvalidDomainError, When
from timevalue.models import (
    FutureValue,
    InterestPayment,
    InternalRateOfReturn,
    ModifiedIRR,
    NetPresentValue,
    NumberOfPeriods,
    Payment,
    PresentValue,
    PrincipalPayment,
    Rate,
)
from timevalue.models.base import CalculationModel


class TestTimeValueModels:
    """Tests for the annuity value objects."""

    def test_future_value_from_tuple(self) -> None:
        """Test tuple construction in field order."""
        model = FutureValue.from_tuple((0.075, 20, -2000.0, 0.0, When.END))
        assert model.get() == pytest.approx(86609.362673042924, rel=1e-10)

    def test_payment_from_dict(self) -> None:
        """Test mapping construction with defaults omitted."""
        model = Payment.from_dict({"rate": 0.08 / 12, "nper": 60, "pv": 15000.0})
        assert model.get() == pytest.approx(-304.145914, abs=1e-6)

    def test_present_value_timing_string(self) -> None:
        """Test timing strings are normalized at construction."""
        model = PresentValue(0.07, 20, 12000.0, 0.0, "begin")
        assert model.when is When.BEGIN
        assert model.get() == pytest.approx(-136027.14291242755, rel=1e-10)

    def test_number_of_periods(self) -> None:
        """Test nper through its value object."""
        model = NumberOfPeriods.from_tuple((0.075, -2000.0, 0.0, 100000.0, When.END))
        assert model.get() == pytest.approx(21.544944, abs=1e-5)

    def test_interest_and_principal(self) -> None:
        """Test the payment split through value objects."""
        params = (0.1 / 12, 1, 60, 55000.0, 0.0, When.END)
        interest = InterestPayment.from_tuple(params).get()
        principal = PrincipalPayment.from_tuple(params).get()
        assert principal == pytest.approx(-710.254125786425, rel=1e-10)
        assert interest + principal == pytest.approx(
            Payment(0.1 / 12, 60, 55000.0).get()
        )

    def test_rate(self) -> None:
        """Test rate through its value object."""
        model = Rate.from_tuple((10, 0.0, -3500.0, 10000.0, When.END, 0.1, 1e-6, 100))
        assert model.get() == pytest.approx(0.11069085371426901, rel=1e-6)
        assert model.solve().converged

    def test_rate_no_solution(self) -> None:
        """Test a failed solve raises from get() but not from solve()."""
        model = Rate(12, 400.0, 10000.0, 5000.0)
        assert not model.solve().converged
        with pytest.raises(DidNotConvergeError):
            model.get()

    def test_base_requires_get(self) -> None:
        """Test the shared base cannot be built without a get() implementation."""
        with pytest.raises(TypeError):
            CalculationModel()  # type: ignore[abstract]

        class NoEvaluation(CalculationModel):
            pass

        with pytest.raises(TypeError):
            NoEvaluation()  # type: ignore[abstract]

    def test_frozen(self) -> None:
        """Test value objects are immutable."""
        model = FutureValue(0.05, 10, -100.0, 0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.rate = 0.06  # type: ignore[misc]


class TestEagerValidation:
    """Tests that invalid inputs fail at construction, not evaluation."""

    def test_period_out_of_range(self) -> None:
        """Test per outside [1, nper] fails when built."""
        with pytest.raises(InvalidDomainError):
            InterestPayment(0.1 / 12, 0, 24, 2000.0)
        with pytest.raises(InvalidDomainError):
            PrincipalPayment(0.1 / 12, 61, 60, 55000.0)

    def test_zero_periods_payment(self) -> None:
        """Test payment requires at least one period."""
        with pytest.raises(InvalidDomainError):
            Payment(0.05, 0, 1000.0)

    def test_rate_domain(self) -> None:
        """Test rates at or below -1 fail when built."""
        with pytest.raises(InvalidDomainError):
            NumberOfPeriods(-10.0, 0.0, 0.0, 100000.0)

    def test_solver_settings(self) -> None:
        """Test solver invariants are checked when built."""
        with pytest.raises(InvalidDomainError):
            Rate(10, 0.0, -3500.0, 10000.0, tol=0.0)
        with pytest.raises(InvalidDomainError):
            InternalRateOfReturn([-1.0, 2.0], maxiter=0)

    def test_unknown_key(self) -> None:
        """Test misspelled keys are reported by name."""
        params = {"Rate": 0.075, "pmt": -2000.0, "pv": 0.0, "fv": 100000.0}
        with pytest.raises(InvalidDomainError, match="Rate"):
            NumberOfPeriods.from_dict(params)

    def test_missing_key(self) -> None:
        """Test missing required keys raise InvalidDomainError."""
        with pytest.raises(InvalidDomainError, match="NumberOfPeriods"):
            NumberOfPeriods.from_dict({"pmt": -2000.0, "pv": 0.0})

    def test_tuple_length(self) -> None:
        """Test tuples must supply every field."""
        with pytest.raises(InvalidDomainError, match="expects 5 values"):
            FutureValue.from_tuple((0.05, 10, -100.0))


class TestCashFlowModels:
    """Tests for the cash-flow value objects."""

    def test_net_present_value(self) -> None:
        """Test NPV through its value object, including zero rate."""
        values = [-15000.0, 1500.0, 2500.0, 3500.0, 4500.0, 6000.0]
        assert NetPresentValue.from_tuple((values, 0.05)).get() == pytest.approx(
            122.89485495093959, rel=1e-10
        )
        assert NetPresentValue(values, 0.0).get() == pytest.approx(3000.0)

    def test_values_normalized_to_series(self) -> None:
        """Test cash flows are stored as an immutable series."""
        model = NetPresentValue([-1.0, 2.0], 0.1)
        assert isinstance(model.values, CashFlowSeries)
        assert model == NetPresentValue(CashFlowSeries([-1.0, 2.0]), 0.1)

    def test_internal_rate_of_return(self) -> None:
        """Test IRR through its value object."""
        model = InternalRateOfReturn([-150000.0, 15000.0, 25000.0, 35000.0, 45000.0, 60000.0])
        assert model.get() == pytest.approx(0.052432888859413884, rel=1e-9)
        assert model.solve().iterations < 100

    def test_modified_irr(self) -> None:
        """Test MIRR through its value object."""
        model = ModifiedIRR.from_dict(
            {
                "values": [-120000.0, 39000.0, 30000.0, 21000.0, 37000.0, 46000.0],
                "finance_rate": 0.10,
                "reinvest_rate": 0.12,
            }
        )
        assert model.get() == pytest.approx(0.1260941303659051, rel=1e-10)

    def test_modified_irr_rate_domain(self) -> None:
        """Test MIRR rates are checked when built."""
        with pytest.raises(InvalidDomainError, match="finance_rate"):
            ModifiedIRR([-1.0, 2.0], -1.0, 0.1)
