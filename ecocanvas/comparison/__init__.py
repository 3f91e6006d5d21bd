"""
Sustainability comparison.

Responsibilities:
- Score a single product's sustainability on a 0-100 scale.
- Aggregate a candidate set: per-product scores, best-in-metric
  superlatives and average impact.
"""
from .aggregator import generate_comparison, sustainability_score

__all__ = ["generate_comparison", "sustainability_score"]
