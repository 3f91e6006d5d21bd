from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.models import Product
from ..config import DEFAULT_APP_CONFIG


class AverageImpact(BaseModel):
    water_saved: int = 0
    co2_reduced: float = 0.0
    recycled_materials: int = 0


class SustainabilityComparison(BaseModel):
    products: list[Product] = Field(default_factory=list)
    best_water_saver: Product | None = None
    best_co2_reducer: Product | None = None
    most_recycled: Product | None = None
    most_certifications: Product | None = None
    sustainability_scores: dict[str, int] = Field(default_factory=dict)
    average_impact: AverageImpact = Field(default_factory=AverageImpact)


class ComparisonRequest(BaseModel):
    product_ids: list[str] = Field(..., min_length=1, max_length=DEFAULT_APP_CONFIG.max_compare_items)
