"""
Sustainable fashion recommendation and sustainability-scoring service.

Responsibilities:
- Rank a product catalog against a user's weighted sustainability preferences.
- Find products similar to a given one.
- Compare a handful of products on their sustainability impact.
"""
from .comparison import generate_comparison, sustainability_score
from .recommendations import generate_recommendations, generate_similar_products
from .scoring import parse_metric

__all__ = [
    "generate_comparison",
    "generate_recommendations",
    "generate_similar_products",
    "parse_metric",
    "sustainability_score",
]
