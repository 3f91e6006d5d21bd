from __future__ import annotations

import math
import re
from typing import NamedTuple

from ..catalog.models import Product

_NON_NUMERIC = re.compile(r"[^\d.]")
_LEADING_NUMBER = re.compile(r"\d*\.?\d+|\d+\.?")


class ImpactMetrics(NamedTuple):
    water_saved: float
    co2_reduced: float
    recycled_materials: float


def parse_metric(text: str | None) -> float:
    """Extract the number from an impact field such as ``"2,700L"`` or ``"3.2kg"``.

    Units, thousands separators and percent signs are dropped and the
    leading decimal number of what remains is parsed. Anything without a
    number (``""``, ``"N/A"``, ``None``) or too large to represent is
    treated as zero impact.
    """
    if not text:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", str(text))
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    value = float(match.group())
    if not math.isfinite(value):
        return 0.0
    return value


def parse_impact(product: Product) -> ImpactMetrics:
    impact = product.impact
    return ImpactMetrics(
        water_saved=parse_metric(impact.water_saved),
        co2_reduced=parse_metric(impact.co2_reduced),
        recycled_materials=parse_metric(impact.recycled_materials),
    )
