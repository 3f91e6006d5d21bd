from __future__ import annotations

import math
from collections.abc import Sequence

import pandas as pd

from ..catalog.models import Product
from ..scoring.metrics import parse_impact
from .models import AverageImpact, SustainabilityComparison

# Points available per component of the 0-100 sustainability score.
WATER_POINTS = 30
CO2_POINTS = 30
RECYCLED_POINTS = 25
CERTIFICATION_POINTS = 3
MAX_CERTIFICATION_POINTS = 15

WATER_SCORE_CEILING = 10000.0
CO2_SCORE_CEILING = 20.0

_METRIC_COLUMNS = ["water_saved", "co2_reduced", "recycled_materials"]


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def sustainability_score(product: Product) -> int:
    """Composite 0-100 score from water, CO2, recycled content and certifications."""
    metrics = parse_impact(product)
    water = min(metrics.water_saved / WATER_SCORE_CEILING, 1.0) * WATER_POINTS
    co2 = min(metrics.co2_reduced / CO2_SCORE_CEILING, 1.0) * CO2_POINTS
    recycled = (metrics.recycled_materials / 100) * RECYCLED_POINTS
    certs = min(len(product.certifications) * CERTIFICATION_POINTS, MAX_CERTIFICATION_POINTS)
    return int(_round_half_up(water + co2 + recycled + certs))


def _metrics_frame(products: list[Product]) -> pd.DataFrame:
    rows = [
        {**parse_impact(p)._asdict(), "certifications": len(p.certifications)}
        for p in products
    ]
    return pd.DataFrame(rows, columns=[*_METRIC_COLUMNS, "certifications"])


def generate_comparison(candidates: Sequence[Product]) -> SustainabilityComparison:
    """Aggregate sustainability metrics across *candidates*.

    Superlatives go to the first candidate holding the maximum, so ties
    resolve in input order. An empty input gives an all-empty comparison.
    """
    products = list(candidates)
    if not products:
        return SustainabilityComparison()

    df = _metrics_frame(products)
    # idxmax returns the first row label holding the maximum.
    best = df.idxmax()
    means = df[_METRIC_COLUMNS].mean()

    return SustainabilityComparison(
        products=products,
        best_water_saver=products[int(best["water_saved"])],
        best_co2_reducer=products[int(best["co2_reduced"])],
        most_recycled=products[int(best["recycled_materials"])],
        most_certifications=products[int(best["certifications"])],
        sustainability_scores={p.id: sustainability_score(p) for p in products},
        average_impact=AverageImpact(
            water_saved=int(_round_half_up(float(means["water_saved"]))),
            co2_reduced=_round_half_up(float(means["co2_reduced"]), 1),
            recycled_materials=int(_round_half_up(float(means["recycled_materials"]))),
        ),
    )
