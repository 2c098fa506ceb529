"""Property listing data models.

A property record is one off-plan project from the static catalog, with its
optional unit breakdown and payment plan. Records are immutable once loaded.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from offplan.core.logging import get_logger

log = get_logger(__name__)

# Keys the raw catalog nests under "newParam"
NESTED_BLOCK = "newParam"

PAYMENT_STAGE_LABELS = {
    "booking": "Booking",
    "construction": "Construction",
    "handover": "Handover",
    "post_handover": "Post Handover",
}

_RECORD_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class AgentContact(BaseModel):
    """Listing agent contact details."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None

    model_config = _RECORD_CONFIG


class PaymentPlan(BaseModel):
    """Four-stage payment plan, each stage a percentage of the price.

    The raw catalog keys the stages "one" to "four". The stages are expected to
    sum to 100 but this is not enforced.
    """

    booking: float = Field(default=0.0, ge=0, validation_alias="one")
    construction: float = Field(default=0.0, ge=0, validation_alias="two")
    handover: float = Field(default=0.0, ge=0, validation_alias="three")
    post_handover: float = Field(default=0.0, ge=0, validation_alias="four")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("booking", "construction", "handover", "post_handover", mode="before")
    @classmethod
    def missing_stage_is_zero(cls, v: Any) -> Any:
        return 0.0 if v in (None, "") else v

    @computed_field
    @property
    def total(self) -> float:
        """Sum of the four stages."""
        return self.booking + self.construction + self.handover + self.post_handover

    def steps(self) -> list[tuple[str, float]]:
        """Return (label, percentage) pairs in payment order."""
        return [(label, getattr(self, key)) for key, label in PAYMENT_STAGE_LABELS.items()]


class UnitRecord(BaseModel):
    """One unit type in a property's floor plan."""

    id: str | int
    name: str = ""
    area: float | None = Field(default=None, ge=0, description="Area in sq ft")
    price: float | None = Field(default=None, ge=0, description="Unit price in AED")
    image_urls: tuple[str, ...] = Field(default=(), alias="imgUrl")

    model_config = _RECORD_CONFIG

    @field_validator("area", "price", mode="before")
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        return None if v == "" else v

    @property
    def has_price(self) -> bool:
        """False for 'price on request' units."""
        return bool(self.price)


class PropertyRecord(BaseModel):
    """Validated off-plan property listing.

    Accepts both the flat layout and the raw catalog layout where the optional
    fields live under a nested "newParam" object.
    """

    # Identity
    id: str | int = Field(..., description="Unique listing identifier")
    title: str = Field(default="", description="Project name")
    region: str = Field(default="", description="Area / community")
    developer: str = Field(default="", description="Developer name")
    type: str = Field(default="", description="Property type (Apartment, Villa, ...)")

    # Pricing
    price: float = Field(..., ge=0, description="Starting price in AED")

    # Optional details
    bedroom_min: int | None = Field(default=None, ge=0)
    bedroom_max: int | None = Field(default=None, ge=0)
    handover_time: str | None = Field(default=None, description="Handover date, ISO-like")
    payment_plan: PaymentPlan | None = None

    # Media & content
    amenities: tuple[str, ...] = ()
    photos: tuple[str, ...] = ()
    floor_plan: tuple[UnitRecord, ...] = ()
    developer_logo: str | None = None
    agent: AgentContact | None = None

    model_config = _RECORD_CONFIG

    @model_validator(mode="before")
    @classmethod
    def flatten_nested_block(cls, data: Any) -> Any:
        """Lift the "newParam" block to the top level."""
        if not isinstance(data, dict) or not isinstance(data.get(NESTED_BLOCK), dict):
            return data
        flat = {k: v for k, v in data.items() if k != NESTED_BLOCK}
        for key, value in data[NESTED_BLOCK].items():
            flat.setdefault(key, value)
        return flat

    @field_validator("title", "region", "developer", "type", mode="before")
    @classmethod
    def none_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("bedroom_min", "bedroom_max", "handover_time", mode="before")
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        return None if v == "" else v

    @field_validator("amenities", "photos", "floor_plan", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("payment_plan", mode="before")
    @classmethod
    def parse_payment_plan(cls, v: Any) -> Any:
        """Decode JSON-encoded plans; unreadable plans count as absent."""
        if v in (None, ""):
            return None
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except json.JSONDecodeError:
                log.warning("payment_plan_unparseable", raw=v[:80])
                return None
        if isinstance(v, PaymentPlan):
            return v
        try:
            return PaymentPlan.model_validate(v)
        except PydanticValidationError:
            log.warning("payment_plan_unparseable", raw=repr(v)[:80])
            return None

    @model_validator(mode="after")
    def check_bedroom_range(self) -> PropertyRecord:
        if (
            self.bedroom_min is not None
            and self.bedroom_max is not None
            and self.bedroom_min > self.bedroom_max
        ):
            raise ValueError(
                f"bedroom_min ({self.bedroom_min}) exceeds bedroom_max ({self.bedroom_max})"
            )
        return self

    @property
    def effective_bedroom_min(self) -> int:
        """Minimum bedrooms, 0 when unknown."""
        return self.bedroom_min if self.bedroom_min is not None else 0

    @property
    def handover_sort_key(self) -> str:
        """Raw handover string, empty when unknown so it sorts first."""
        return self.handover_time or ""

    @property
    def cover_photo(self) -> str | None:
        """First photo URL, if any."""
        return self.photos[0] if self.photos else None
