from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ImpactPriority(str, Enum):
    water = "water"
    co2 = "co2"
    recycled = "recycled"
    all = "all"


class SustainabilityFactor(BaseModel):
    # Free text on the wire; unrecognised ids score nothing.
    id: str
    name: str = ""
    weight: float = Field(default=0.0, description="Expected in [0, 1]; not clamped")


class PriceRange(BaseModel):
    min: float = Field(default=0.0, ge=0.0)
    max: float = Field(default=500.0, ge=0.0)


class UserPreferences(BaseModel):
    sustainability_factors: list[SustainabilityFactor] = Field(default_factory=list)
    price_range: PriceRange = Field(default_factory=PriceRange)
    categories: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    materials: list[str] = Field(default_factory=list)
    impact_priority: ImpactPriority = ImpactPriority.all


class PreferencesUpdate(BaseModel):
    sustainability_factors: list[SustainabilityFactor] | None = None
    price_range: PriceRange | None = None
    categories: list[str] | None = None
    certifications: list[str] | None = None
    materials: list[str] | None = None
    impact_priority: ImpactPriority | None = None


DEFAULT_PREFERENCES = UserPreferences(
    sustainability_factors=[
        SustainabilityFactor(id="organic", name="Organic Materials", weight=0.8),
        SustainabilityFactor(id="recycled", name="Recycled Content", weight=0.7),
        SustainabilityFactor(id="water-conservation", name="Water Conservation", weight=0.6),
        SustainabilityFactor(id="carbon-neutral", name="Carbon Footprint", weight=0.5),
        SustainabilityFactor(id="fair-trade", name="Fair Trade", weight=0.7),
        SustainabilityFactor(id="durability", name="Product Durability", weight=0.9),
    ],
    price_range=PriceRange(min=0.0, max=500.0),
)


def merge_preferences(current: UserPreferences, update: PreferencesUpdate) -> UserPreferences:
    """Return *current* with every field that was explicitly sent in *update* replaced."""
    changes = {
        name: getattr(update, name)
        for name in update.model_fields_set
        if getattr(update, name) is not None
    }
    return current.model_copy(update=changes, deep=True)
