from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.models import Product
from ..config import DEFAULT_APP_CONFIG
from ..preferences.models import UserPreferences


class ProductRecommendation(BaseModel):
    product: Product
    score: float
    reasons: list[str] = Field(default_factory=list, max_length=3)
    sustainability_match: float
    price_match: float
    category_match: float


class RecommendationRequest(BaseModel):
    preferences: UserPreferences | None = Field(
        default=None,
        description="Explicit preferences; the session's preferences are used when omitted",
    )
    exclude_id: str | None = Field(default=None, description="Product to leave out, e.g. the one being viewed")
    limit: int = Field(default=DEFAULT_APP_CONFIG.recommendation_limit, ge=1, le=50)


class RecommendationResponse(BaseModel):
    recommendations: list[ProductRecommendation]
    total_candidates: int


class SimilarProductsResponse(BaseModel):
    product_id: str
    similar: list[Product]
