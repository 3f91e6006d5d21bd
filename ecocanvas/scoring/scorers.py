from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple

from ..catalog.models import Product
from ..preferences.models import ImpactPriority, UserPreferences
from .metrics import ImpactMetrics, parse_impact

# Normalisation ceilings for the impact-priority score.
WATER_IMPACT_CEILING = 5000.0
CO2_IMPACT_CEILING = 20.0

BELOW_BUDGET_SCORE = 0.8
CATEGORY_MISMATCH_SCORE = 0.3
MATERIAL_MISMATCH_SCORE = 0.5


class FactorId(str, Enum):
    organic = "organic"
    recycled = "recycled"
    water_conservation = "water-conservation"
    carbon_neutral = "carbon-neutral"
    fair_trade = "fair-trade"
    durability = "durability"


class FactorMatch(NamedTuple):
    score: float
    reasons: list[str]


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def _any_contains(values: list[str], needles: tuple[str, ...]) -> bool:
    return any(needle in value.lower() for value in values for needle in needles)


@dataclass(frozen=True)
class FactorRule:
    """How one sustainability factor is detected and credited.

    ``scale`` multiplies the fixed coefficient; only the recycled factor
    uses it, to credit partially recycled products proportionally.
    """

    coefficient: float
    matches: Callable[[Product, ImpactMetrics], bool]
    reason: Callable[[Product, ImpactMetrics], str]
    scale: Callable[[ImpactMetrics], float] = lambda metrics: 1.0


FACTOR_RULES: dict[FactorId, FactorRule] = {
    FactorId.organic: FactorRule(
        coefficient=0.2,
        matches=lambda p, m: _any_contains(
            [mat.sustainability for mat in p.materials], ("organic", "gots")
        ),
        reason=lambda p, m: "Contains organic materials",
    ),
    FactorId.recycled: FactorRule(
        coefficient=0.2,
        matches=lambda p, m: m.recycled_materials > 0,
        reason=lambda p, m: f"{_format_number(m.recycled_materials)}% recycled materials",
        scale=lambda m: m.recycled_materials / 100,
    ),
    FactorId.water_conservation: FactorRule(
        coefficient=0.15,
        matches=lambda p, m: m.water_saved > 1000,
        reason=lambda p, m: f"Saves {p.impact.water_saved} of water",
    ),
    FactorId.carbon_neutral: FactorRule(
        coefficient=0.15,
        matches=lambda p, m: m.co2_reduced > 2,
        reason=lambda p, m: f"Reduces {p.impact.co2_reduced} CO2",
    ),
    FactorId.fair_trade: FactorRule(
        coefficient=0.15,
        matches=lambda p, m: _any_contains(p.certifications, ("fair trade",)),
        reason=lambda p, m: "Fair Trade certified",
    ),
    FactorId.durability: FactorRule(
        coefficient=0.15,
        matches=lambda p, m: _any_contains(p.features, ("durable", "long-lasting")),
        reason=lambda p, m: "Built for durability",
    ),
}


def _factor_rule(factor_id: str) -> FactorRule | None:
    try:
        return FACTOR_RULES[FactorId(factor_id)]
    except ValueError:
        return None


def match_sustainability_factors(product: Product, preferences: UserPreferences) -> FactorMatch:
    """Credit each weighted preference factor the product satisfies, capped at 1.0.

    The per-factor reasons are for direct callers; recommendations build
    their own reason list and only use the score.
    """
    metrics = parse_impact(product)
    score = 0.0
    reasons: list[str] = []
    for factor in preferences.sustainability_factors:
        rule = _factor_rule(factor.id)
        if rule is None or not rule.matches(product, metrics):
            continue
        score += factor.weight * rule.coefficient * rule.scale(metrics)
        reasons.append(rule.reason(product, metrics))
    return FactorMatch(score=min(score, 1.0), reasons=reasons)


def sustainability_factor_score(product: Product, preferences: UserPreferences) -> float:
    return match_sustainability_factors(product, preferences).score


def price_score(product: Product, preferences: UserPreferences) -> float:
    low = preferences.price_range.min
    high = preferences.price_range.max
    if low <= product.price <= high:
        return 1.0
    if product.price < low:
        return BELOW_BUDGET_SCORE
    if high <= 0:
        return 0.0
    overage = (product.price - high) / high
    return max(0.0, 1.0 - overage)


def category_score(product: Product, preferences: UserPreferences) -> float:
    if not preferences.categories or product.category in preferences.categories:
        return 1.0
    return CATEGORY_MISMATCH_SCORE


def certification_score(product: Product, preferences: UserPreferences) -> float:
    """Fraction of preferred certifications found (as substrings) on the product."""
    if not preferences.certifications:
        return 1.0
    certs = [c.lower() for c in product.certifications]
    matched = sum(
        1 for wanted in preferences.certifications
        if any(wanted.lower() in cert for cert in certs)
    )
    return matched / len(preferences.certifications)


def material_score(product: Product, preferences: UserPreferences) -> float:
    if not preferences.materials:
        return 1.0
    names = [m.name for m in product.materials]
    wanted = tuple(pref.lower() for pref in preferences.materials)
    return 1.0 if _any_contains(names, wanted) else MATERIAL_MISMATCH_SCORE


def _water_impact(metrics: ImpactMetrics) -> float:
    return min(metrics.water_saved / WATER_IMPACT_CEILING, 1.0)


def _co2_impact(metrics: ImpactMetrics) -> float:
    return min(metrics.co2_reduced / CO2_IMPACT_CEILING, 1.0)


def _recycled_impact(metrics: ImpactMetrics) -> float:
    return metrics.recycled_materials / 100


def _balanced_impact(metrics: ImpactMetrics) -> float:
    return (_water_impact(metrics) + _co2_impact(metrics) + _recycled_impact(metrics)) / 3


_IMPACT_SCORERS: dict[ImpactPriority, Callable[[ImpactMetrics], float]] = {
    ImpactPriority.water: _water_impact,
    ImpactPriority.co2: _co2_impact,
    ImpactPriority.recycled: _recycled_impact,
    ImpactPriority.all: _balanced_impact,
}


def impact_priority_score(product: Product, preferences: UserPreferences) -> float:
    scorer = _IMPACT_SCORERS.get(preferences.impact_priority, _balanced_impact)
    return scorer(parse_impact(product))
