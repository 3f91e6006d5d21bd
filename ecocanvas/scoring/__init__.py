"""
Rules-based scoring.

Responsibilities:
- Extract numeric magnitudes from free-text impact fields.
- Score a product against one aspect of a user's preferences
  (sustainability factors, price, category, certifications, materials,
  impact priority). Every scorer is a pure function returning a float.
"""
from .metrics import ImpactMetrics, parse_impact, parse_metric
from .scorers import (
    FactorId,
    FactorMatch,
    category_score,
    certification_score,
    impact_priority_score,
    match_sustainability_factors,
    material_score,
    price_score,
    sustainability_factor_score,
)

__all__ = [
    "FactorId",
    "FactorMatch",
    "ImpactMetrics",
    "category_score",
    "certification_score",
    "impact_priority_score",
    "match_sustainability_factors",
    "material_score",
    "parse_impact",
    "parse_metric",
    "price_score",
    "sustainability_factor_score",
]
