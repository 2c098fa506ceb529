"""Unit tests for offplan.domain.calculator.roi module."""

import math

import pytest

from offplan.core.exceptions import ProjectionError, ValidationError, ZeroDownPaymentError
from offplan.domain.calculator.roi import (
    annualized_return_pct,
    future_value,
    project,
    share_pct,
)
from offplan.domain.models.roi import ROIInputs, ROIResult


class TestFutureValue:
    """Tests for future_value function."""

    def test_compound_growth(self):
        assert future_value(1_000_000, 8, 5) == pytest.approx(1_469_328.0768)

    def test_zero_growth(self):
        assert future_value(750_000, 0, 10) == pytest.approx(750_000)

    def test_fractional_years(self):
        assert future_value(100, 10, 0.5) == pytest.approx(100 * math.sqrt(1.1))


class TestAnnualizedReturn:
    """Tests for annualized_return_pct function."""

    def test_doubling_over_one_year(self):
        assert annualized_return_pct(100, 1) == pytest.approx(100)

    def test_quadrupling_over_two_years(self):
        assert annualized_return_pct(300, 2) == pytest.approx(100)

    def test_total_loss_floor(self):
        """Losses beyond the initial outlay floor at -100%."""
        assert annualized_return_pct(-100, 5) == -100.0
        assert annualized_return_pct(-250, 5) == -100.0


class TestSharePct:
    """Tests for share_pct function."""

    def test_share(self):
        assert share_pct(25, 100) == 25.0

    def test_zero_whole(self):
        assert share_pct(10, 0) == 0.0


class TestProject:
    """Tests for project function."""

    def test_reference_scenario(self, roi_reference_inputs):
        """1M AED, 20% down, 8% growth, 6% yield, 5 years, 12k service charge."""
        result = project(roi_reference_inputs)
        assert result.down_payment == pytest.approx(200_000)
        assert result.future_value == pytest.approx(1_469_328.08, abs=0.01)
        assert result.capital_gain == pytest.approx(469_328.08, abs=0.01)
        assert result.annual_rental_income == pytest.approx(60_000)
        assert result.total_rental_income == pytest.approx(300_000)
        assert result.total_service_charges == pytest.approx(60_000)
        assert result.net_rental_income == pytest.approx(240_000)
        assert result.total_return == pytest.approx(709_328.08, abs=0.01)
        assert result.total_roi_pct == pytest.approx(354.66, abs=0.01)
        assert result.annualized_roi_pct == pytest.approx(35.37, abs=0.01)

    def test_shares_sum_to_100(self, roi_reference_inputs):
        result = project(roi_reference_inputs)
        assert result.capital_gain_share_pct == pytest.approx(66.17, abs=0.01)
        assert result.capital_gain_share_pct + result.rental_share_pct == pytest.approx(100)

    def test_accepts_model(self, roi_reference_inputs):
        inputs = ROIInputs(**roi_reference_inputs)
        assert project(inputs) == project(roi_reference_inputs)

    def test_returns_result_model(self, roi_reference_inputs):
        assert isinstance(project(roi_reference_inputs), ROIResult)

    def test_defaults_applied(self):
        """Only the price is required."""
        result = project({"property_price": 1_000_000})
        assert result.down_payment == pytest.approx(200_000)
        assert result.total_service_charges == 0
        assert result.net_rental_income == pytest.approx(300_000)

    def test_none_fields_use_defaults(self):
        result = project({"property_price": 1_000_000, "holding_period_years": None})
        assert result.total_rental_income == pytest.approx(300_000)

    def test_zero_return_shares(self):
        """No growth, no rent, no charges: shares are reported as 0."""
        result = project({
            "property_price": 1_000_000,
            "annual_appreciation_pct": 0,
            "rental_yield_pct": 0,
        })
        assert result.total_return == 0
        assert result.total_roi_pct == 0
        assert result.annualized_roi_pct == pytest.approx(0)
        assert result.capital_gain_share_pct == 0.0
        assert result.rental_share_pct == 0.0

    def test_charges_exceeding_rent(self):
        """Service charges can push net rental income below zero."""
        result = project({
            "property_price": 1_000_000,
            "down_payment_pct": 10,
            "annual_appreciation_pct": 0,
            "rental_yield_pct": 0,
            "annual_service_charge": 50_000,
        })
        assert result.net_rental_income == pytest.approx(-250_000)
        assert result.total_roi_pct == pytest.approx(-250)
        assert result.annualized_roi_pct == -100.0

    def test_results_are_finite(self, roi_reference_inputs):
        result = project(roi_reference_inputs)
        assert all(math.isfinite(v) for v in result.model_dump().values())


class TestProjectErrors:
    """Tests for project failure modes."""

    def test_zero_down_payment(self, roi_reference_inputs):
        """A zero down payment must not yield an infinite ROI."""
        roi_reference_inputs["down_payment_pct"] = 0
        with pytest.raises(ZeroDownPaymentError):
            project(roi_reference_inputs)

    def test_zero_price(self):
        with pytest.raises(ZeroDownPaymentError):
            project({"property_price": 0})

    def test_zero_down_payment_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            project({"property_price": 1_000_000, "down_payment_pct": 0})

    @pytest.mark.parametrize("field", [
        "property_price",
        "down_payment_pct",
        "annual_appreciation_pct",
        "rental_yield_pct",
        "annual_service_charge",
    ])
    def test_negative_input(self, roi_reference_inputs, field):
        roi_reference_inputs[field] = -1
        with pytest.raises(ValidationError):
            project(roi_reference_inputs)

    @pytest.mark.parametrize("years", [0, -5])
    def test_non_positive_holding_period(self, roi_reference_inputs, years):
        roi_reference_inputs["holding_period_years"] = years
        with pytest.raises(ValidationError) as exc_info:
            project(roi_reference_inputs)
        assert "holding_period_years" in str(exc_info.value)

    def test_non_numeric_input(self, roi_reference_inputs):
        roi_reference_inputs["rental_yield_pct"] = "six"
        with pytest.raises(ValidationError):
            project(roi_reference_inputs)

    def test_nan_input(self, roi_reference_inputs):
        roi_reference_inputs["property_price"] = float("nan")
        with pytest.raises(ValidationError):
            project(roi_reference_inputs)

    def test_missing_price(self):
        with pytest.raises(ValidationError):
            project({})

    def test_not_a_mapping(self):
        with pytest.raises(ValidationError):
            project([1_000_000, 20])

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            project({"property_price": -1})

    def test_error_details_kept(self):
        with pytest.raises(ValidationError) as exc_info:
            project({"property_price": -1})
        assert exc_info.value.errors[0]["loc"] == ("property_price",)

    def test_overflowing_growth(self):
        """Compounding past the float range is an error, not a NaN result."""
        with pytest.raises(ProjectionError, match="overflowed"):
            project({
                "property_price": 1_000_000,
                "annual_appreciation_pct": 900,
                "holding_period_years": 400,
            })

    def test_overflowing_annualized_rate(self):
        with pytest.raises(ProjectionError):
            project({
                "property_price": 1_000_000,
                "down_payment_pct": 0.0001,
                "annual_appreciation_pct": 100,
                "holding_period_years": 0.0001,
            })
