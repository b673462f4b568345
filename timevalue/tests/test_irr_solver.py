"""Tests for the internal rate of return solver."""

import pytest

from timevalue import (
    CashFlowSeries,
    DidNotConvergeError,
    InvalidDomainError,
    RateSolverConfig,
    UndefinedError,
    irr,
    net_present_value,
    solve_irr,
)


class TestInternalRateOfReturn:
    """Tests for irr() and solve_irr()."""

    @pytest.fixture
    def project(self) -> list[float]:
        """Create an investment with a single sign change."""
        return [-150000.0, 15000.0, 25000.0, 35000.0, 45000.0, 60000.0]

    def test_reference_value(self, project: list[float]) -> None:
        """Test IRR against numpy_financial."""
        assert irr(project) == pytest.approx(0.052432888859413884, rel=1e-9)

    def test_npv_vanishes_at_irr(self, project: list[float]) -> None:
        """Test the recomputed NPV at the IRR is zero."""
        assert net_present_value(irr(project), project) == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize("scale", [1e-18, 1e-6, 1e6])
    def test_independent_of_cash_flow_scale(
        self, project: list[float], scale: float
    ) -> None:
        """Test rescaling every cash flow leaves the IRR unchanged."""
        scaled = [value * scale for value in project]
        assert irr(scaled) == pytest.approx(0.052432888859413884, rel=1e-9)

    @pytest.mark.parametrize(
        "values,expected",
        [
            ([-100.0, 39.0, 59.0, 55.0, 20.0], 0.28094842),
            ([-100.0, 0.0, 0.0, 74.0], 0.74 ** (1 / 3) - 1),
            ([-1000.0, 1100.0], 0.1),
        ],
    )
    def test_known_series(self, values: list[float], expected: float) -> None:
        """Test textbook series."""
        assert irr(values) == pytest.approx(expected, abs=1e-7)

    def test_accepts_series(self, project: list[float]) -> None:
        """Test a CashFlowSeries gives the same result as a list."""
        assert irr(CashFlowSeries(project)) == pytest.approx(irr(project))

    def test_multiple_roots_follow_guess(self) -> None:
        """Test a series with two roots returns the one nearest the guess."""
        values = [-100.0, 230.0, -132.0]  # roots at 10% and 20%
        assert irr(values) == pytest.approx(0.10, abs=1e-9)
        assert irr(values, guess=0.25) == pytest.approx(0.20, abs=1e-9)

    @pytest.mark.parametrize(
        "values",
        [
            [100.0, 200.0, 300.0],
            [-100.0, -200.0],
            [0.0, 0.0, 0.0],
            [100.0, 0.0, 50.0],
            [-5.0],
        ],
    )
    def test_no_sign_change_is_undefined(self, values: list[float]) -> None:
        """Test one-signed series fail fast."""
        with pytest.raises(UndefinedError):
            solve_irr(values)

    def test_iterate_leaving_domain(self) -> None:
        """Test a step below a rate of -1 raises InvalidDomainError."""
        # from g = 1.1 the tangent of g**2 - 2.4g + 0.5 crosses zero at g < 0
        with pytest.raises(InvalidDomainError):
            irr([1.0, -2.4, 0.5])

    def test_budget_exhausted(self, project: list[float]) -> None:
        """Test a too-small budget reports the last estimate."""
        config = RateSolverConfig(guess=0.1, tol=1e-12, maxiter=1)
        result = solve_irr(project, config)
        assert not result.converged
        assert result.iterations == 1
        with pytest.raises(DidNotConvergeError) as exc_info:
            irr(project, maxiter=1)
        assert exc_info.value.iterations == 1
        assert exc_info.value.last_estimate == pytest.approx(result.rate)
