"""
Recommendation engine.

Responsibilities:
- Combine the rules-based scorers into one weighted score per product.
- Rank a catalog against the caller's preferences with short reasons.
- Rank "similar products" for a target product.
"""
from .engine import generate_recommendations, generate_similar_products

__all__ = ["generate_recommendations", "generate_similar_products"]
