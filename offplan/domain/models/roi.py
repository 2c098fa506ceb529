"""ROI projection input and result models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_DOWN_PAYMENT_PCT = 20.0
DEFAULT_APPRECIATION_PCT = 8.0
DEFAULT_RENTAL_YIELD_PCT = 6.0
DEFAULT_HOLDING_PERIOD_YEARS = 5.0
DEFAULT_SERVICE_CHARGE = 0.0

# Quick per-unit report assumes a typical annual service charge
REPORT_SERVICE_CHARGE = 12_000.0


class ROIInputs(BaseModel):
    """Numeric inputs of the ROI calculator form.

    Strict: numbers only, no NaN or infinity. Missing or ``None`` fields take
    the documented defaults.
    """

    property_price: float = Field(..., ge=0, description="Purchase price in AED")
    down_payment_pct: float = Field(default=DEFAULT_DOWN_PAYMENT_PCT, ge=0)
    annual_appreciation_pct: float = Field(default=DEFAULT_APPRECIATION_PCT, ge=0)
    rental_yield_pct: float = Field(default=DEFAULT_RENTAL_YIELD_PCT, ge=0)
    holding_period_years: float = Field(default=DEFAULT_HOLDING_PERIOD_YEARS, gt=0)
    annual_service_charge: float = Field(default=DEFAULT_SERVICE_CHARGE, ge=0, description="AED per year")

    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def drop_missing(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ROIResult(BaseModel):
    """Projected investment outcome over the holding period. Amounts in AED."""

    down_payment: float
    future_value: float
    capital_gain: float
    annual_rental_income: float
    total_rental_income: float
    total_service_charges: float
    net_rental_income: float
    total_return: float
    total_roi_pct: float
    annualized_roi_pct: float
    capital_gain_share_pct: float
    rental_share_pct: float

    model_config = ConfigDict(frozen=True)
