"""ROI projection calculations.

Capital appreciation plus net rental income over a holding period, measured
against the down payment.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Union

import numpy as np
import numpy_financial as npf
from pydantic import ValidationError as PydanticValidationError

from offplan.core.exceptions import ProjectionError, ValidationError, ZeroDownPaymentError
from offplan.core.logging import get_logger
from offplan.domain.models.roi import ROIInputs, ROIResult

log = get_logger(__name__)

# Floor for the annualized ROI when losses exceed the down payment
TOTAL_LOSS_PCT = -100.0


def future_value(
    present_value: float,
    annual_growth_pct: float,
    years: float,
) -> float:
    """Compound a value over a number of years.

    Args:
        present_value: Value today in AED
        annual_growth_pct: Annual growth rate as percentage (e.g., 8 for 8%)
        years: Number of years

    Returns:
        Value after `years` of compounding in AED
    """
    # Overflow surfaces as inf/nan, checked by the caller
    with np.errstate(over="ignore", invalid="ignore"):
        return float(npf.fv(annual_growth_pct / 100.0, years, 0, -present_value))


def annualized_return_pct(total_return_pct: float, years: float) -> float:
    """Convert a total return over `years` into a compound annual rate.

    Args:
        total_return_pct: Total return as percentage of the initial outlay
        years: Holding period, must be positive

    Returns:
        Compound annual return as percentage, floored at -100; inf on overflow
    """
    growth = 1.0 + total_return_pct / 100.0
    if growth <= 0:
        return TOTAL_LOSS_PCT
    try:
        return (growth ** (1.0 / years) - 1.0) * 100.0
    except OverflowError:
        return math.inf


def share_pct(part: float, whole: float) -> float:
    """Percentage of `whole` represented by `part`, 0 when `whole` is 0."""
    if whole == 0:
        return 0.0
    return part / whole * 100.0


def _coerce_inputs(inputs: Union[ROIInputs, Mapping[str, Any]]) -> ROIInputs:
    if isinstance(inputs, ROIInputs):
        return inputs
    if not isinstance(inputs, Mapping):
        raise ValidationError(f"ROI inputs must be a mapping, got {type(inputs).__name__}")
    try:
        return ROIInputs.model_validate(dict(inputs))
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ValidationError(
            f"Invalid ROI inputs: {fields}",
            errors=e.errors(include_url=False),
        ) from e


def project(inputs: Union[ROIInputs, Mapping[str, Any]]) -> ROIResult:
    """Project the return of buying, renting out and holding a property.

    Args:
        inputs: ROIInputs, or a mapping of its field names to numbers

    Returns:
        ROIResult with every intermediate amount and the ROI percentages

    Raises:
        ValidationError: If an input is negative, non-numeric or the holding
            period is not positive
        ZeroDownPaymentError: If the down payment is zero, which leaves the
            total ROI undefined
        ProjectionError: If the compounded amounts overflow to a non-finite value
    """
    params = _coerce_inputs(inputs)

    price = params.property_price
    years = params.holding_period_years

    down_payment = price * (params.down_payment_pct / 100.0)
    if down_payment == 0:
        raise ZeroDownPaymentError(
            f"Total ROI is undefined for a zero down payment "
            f"(price={price}, down_payment_pct={params.down_payment_pct})"
        )

    value_at_exit = future_value(price, params.annual_appreciation_pct, years)
    capital_gain = value_at_exit - price

    annual_rental_income = price * (params.rental_yield_pct / 100.0)
    total_rental_income = annual_rental_income * years
    total_service_charges = params.annual_service_charge * years
    net_rental_income = total_rental_income - total_service_charges

    total_return = capital_gain + net_rental_income
    total_roi_pct = total_return / down_payment * 100.0
    annualized_roi_pct = annualized_return_pct(total_roi_pct, years)

    figures = (value_at_exit, total_return, total_roi_pct, annualized_roi_pct)
    if not all(math.isfinite(v) for v in figures):
        raise ProjectionError(
            f"ROI projection overflowed (price={price}, "
            f"appreciation={params.annual_appreciation_pct}%, years={years})"
        )

    result = ROIResult(
        down_payment=down_payment,
        future_value=value_at_exit,
        capital_gain=capital_gain,
        annual_rental_income=annual_rental_income,
        total_rental_income=total_rental_income,
        total_service_charges=total_service_charges,
        net_rental_income=net_rental_income,
        total_return=total_return,
        total_roi_pct=total_roi_pct,
        annualized_roi_pct=annualized_roi_pct,
        capital_gain_share_pct=share_pct(capital_gain, total_return),
        rental_share_pct=share_pct(net_rental_income, total_return),
    )

    log.debug(
        "roi_projected",
        price=price,
        years=years,
        total_roi_pct=round(total_roi_pct, 2),
    )
    return result
