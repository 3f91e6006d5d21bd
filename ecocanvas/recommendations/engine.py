from __future__ import annotations

import logging
from collections.abc import Sequence

from ..catalog.models import Product
from ..preferences.models import UserPreferences
from ..scoring.metrics import parse_impact
from ..scoring.scorers import (
    category_score,
    certification_score,
    impact_priority_score,
    material_score,
    price_score,
    sustainability_factor_score,
)
from .models import ProductRecommendation

logger = logging.getLogger(__name__)

COMPONENT_WEIGHTS: dict[str, float] = {
    "sustainability": 0.35,
    "price": 0.20,
    "category": 0.15,
    "certification": 0.15,
    "material": 0.10,
    "impact": 0.05,
}

SIMILARITY_WEIGHTS: dict[str, float] = {
    "category": 0.4,
    "price": 0.25,
    "material": 0.2,
    "certification": 0.15,
}

MAX_REASONS = 3
HIGHLIGHT_CERTIFICATION = "GOTS Certified"


def _build_reasons(product: Product, scores: dict[str, float]) -> list[str]:
    """Generic reasons first, then product-specific ones, in a fixed order."""
    metrics = parse_impact(product)
    reasons: list[str] = []

    if scores["sustainability"] > 0.7:
        reasons.append("High sustainability rating")
    if scores["price"] == 1.0:
        reasons.append("Within your budget")
    if scores["category"] == 1.0:
        reasons.append("Matches your preferred categories")
    if scores["certification"] > 0.5:
        reasons.append("Has preferred certifications")
    if scores["material"] == 1.0:
        reasons.append("Made with preferred materials")

    if HIGHLIGHT_CERTIFICATION in product.certifications:
        reasons.append("GOTS certified organic")
    if metrics.recycled_materials > 50:
        reasons.append("High recycled content")
    if metrics.water_saved > 3000:
        reasons.append("Significant water savings")

    return reasons[:MAX_REASONS]


def _score_product(product: Product, preferences: UserPreferences) -> ProductRecommendation:
    scores = {
        "sustainability": sustainability_factor_score(product, preferences),
        "price": price_score(product, preferences),
        "category": category_score(product, preferences),
        "certification": certification_score(product, preferences),
        "material": material_score(product, preferences),
        "impact": impact_priority_score(product, preferences),
    }
    overall = sum(COMPONENT_WEIGHTS[name] * scores[name] for name in COMPONENT_WEIGHTS)
    return ProductRecommendation(
        product=product,
        score=overall,
        reasons=_build_reasons(product, scores),
        sustainability_match=scores["sustainability"],
        price_match=scores["price"],
        category_match=scores["category"],
    )


def generate_recommendations(
    catalog: Sequence[Product],
    preferences: UserPreferences,
    exclude_id: str | None = None,
    limit: int = 5,
) -> list[ProductRecommendation]:
    """Rank *catalog* against *preferences*, best first.

    The sort is stable, so products with equal scores keep their catalog
    order. Returns at most *limit* entries; a non-positive limit yields
    an empty list.
    """
    if limit <= 0:
        return []

    scored = [
        _score_product(product, preferences)
        for product in catalog
        if exclude_id is None or product.id != exclude_id
    ]
    scored.sort(key=lambda r: r.score, reverse=True)
    logger.debug("Scored %d candidates, returning up to %d", len(scored), limit)
    return scored[:limit]


def _overlap(candidate: list[str], target: list[str]) -> float:
    longest = max(len(candidate), len(target))
    if longest == 0:
        return 0.0
    common = sum(1 for item in candidate if item in target)
    return common / longest


def _similarity(target: Product, candidate: Product) -> float:
    w = SIMILARITY_WEIGHTS
    similarity = 0.0

    if candidate.category == target.category:
        similarity += w["category"]

    # A free target product gives no price similarity.
    if target.price > 0:
        price_diff = abs(candidate.price - target.price) / target.price
        similarity += (1.0 - min(price_diff, 1.0)) * w["price"]

    similarity += _overlap(
        [m.name for m in candidate.materials], [m.name for m in target.materials]
    ) * w["material"]
    similarity += _overlap(candidate.certifications, target.certifications) * w["certification"]
    return similarity


def generate_similar_products(
    target: Product,
    catalog: Sequence[Product],
    limit: int = 4,
) -> list[Product]:
    """Return up to *limit* catalog products most like *target*, never *target* itself."""
    if limit <= 0:
        return []

    ranked = [
        (product, _similarity(target, product))
        for product in catalog
        if product.id != target.id
    ]
    ranked.sort(key=lambda item: item[1], reverse=True)
    return [product for product, _ in ranked[:limit]]
