"""Detail view lookups and the hand-off to the ROI calculator.

Selecting a property or unit passes an id (and a price) to the next view as
query-string parameters. These helpers build and read those parameters.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode

from offplan.core.exceptions import PropertyNotFoundError, UnitNotFoundError, ValidationError
from offplan.core.settings import get_settings
from offplan.domain.models.property import PropertyRecord, UnitRecord
from offplan.domain.models.roi import REPORT_SERVICE_CHARGE, ROIInputs


def find_property(catalog: Sequence[PropertyRecord], property_id: Any) -> PropertyRecord:
    """Look up a listing by id. String and integer ids compare equal ("7" == 7).

    Raises:
        PropertyNotFoundError: If no listing has that id
    """
    wanted = str(property_id)
    for record in catalog:
        if str(record.id) == wanted:
            return record
    raise PropertyNotFoundError(property_id)


def find_unit(record: PropertyRecord, unit_id: Any) -> UnitRecord:
    """Look up a unit in a listing's floor plan.

    Raises:
        UnitNotFoundError: If the floor plan has no such unit
    """
    wanted = str(unit_id)
    for unit in record.floor_plan:
        if str(unit.id) == wanted:
            return unit
    raise UnitNotFoundError(record.id, unit_id)


def unit_price(record: PropertyRecord, unit: UnitRecord | None = None) -> float:
    """Price to project for a unit: its own price, else the listing's, else the fallback."""
    if unit is not None and unit.has_price:
        return float(unit.price)
    if record.price:
        return record.price
    return get_settings().fallback_unit_price


def roi_inputs_for_unit(
    record: PropertyRecord,
    unit: UnitRecord | None = None,
    **overrides: Any,
) -> ROIInputs:
    """Starting calculator inputs for a listing or one of its units.

    Args:
        record: Selected listing
        unit: Selected unit, if any
        **overrides: ROIInputs fields replacing the defaults

    Returns:
        ROIInputs priced for the unit
    """
    return ROIInputs(property_price=unit_price(record, unit), **overrides)


def report_inputs_for_unit(record: PropertyRecord, unit: UnitRecord | None = None) -> ROIInputs:
    """Inputs of the quick per-unit report: defaults plus a typical service charge."""
    return roi_inputs_for_unit(record, unit, annual_service_charge=REPORT_SERVICE_CHARGE)


def roi_params(record: PropertyRecord, unit: UnitRecord | None = None) -> dict[str, str]:
    """Parameters handed to the ROI view for a selected listing or unit."""
    params = {"propertyId": str(record.id)}
    if unit is not None:
        params["unitId"] = str(unit.id)
        params["unitName"] = unit.name
    price = unit_price(record, unit)
    params["price"] = str(int(price)) if price.is_integer() else str(price)
    return params


def roi_query_string(record: PropertyRecord, unit: UnitRecord | None = None) -> str:
    """URL-encoded form of roi_params."""
    return urlencode(roi_params(record, unit))


def roi_inputs_from_params(params: Mapping[str, str]) -> ROIInputs:
    """Build calculator inputs from ROI view parameters.

    A missing price falls back to the configured default price.

    Raises:
        ValidationError: If the price is not a finite non-negative number
    """
    raw = params.get("price")
    if raw in (None, ""):
        return ROIInputs(property_price=get_settings().fallback_unit_price)
    try:
        price = float(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid price parameter: {raw!r}") from e
    if not math.isfinite(price) or price < 0:
        raise ValidationError(f"Invalid price parameter: {raw!r}")
    return ROIInputs(property_price=price)
