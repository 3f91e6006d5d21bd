from __future__ import annotations

import pytest

from ecocanvas.preferences.models import (
    ImpactPriority,
    PriceRange,
    SustainabilityFactor,
    UserPreferences,
)
from ecocanvas.recommendations.engine import (
    _similarity,
    generate_recommendations,
    generate_similar_products,
)


@pytest.fixture
def strict_prefs() -> UserPreferences:
    return UserPreferences(
        sustainability_factors=[SustainabilityFactor(id="organic", name="Organic", weight=5.0)],
        price_range=PriceRange(min=50, max=200),
        categories=["Dresses"],
        certifications=["gots"],
        materials=["cotton"],
        impact_priority=ImpactPriority.water,
    )


@pytest.fixture
def strong_and_weak(make_product):
    # strong: 0.35 + 0.20 + 0.15 + 0.15 + 0.5 * 0.10 = 0.90
    strong = make_product(
        "strong",
        category="Dresses",
        materials=[("Organic Hemp", "Organic")],
        certifications=["GOTS Certified"],
    )
    # weak: 0.20 + 0.15 + 0.5 * 0.10 = 0.40
    weak = make_product("weak", category="Dresses", materials=[("Polyester", "Virgin")])
    return strong, weak


# ── generate_recommendations ─────────────────────────────────────────────


def test_higher_score_ranks_first(strict_prefs, strong_and_weak):
    strong, weak = strong_and_weak
    recs = generate_recommendations([weak, strong], strict_prefs, limit=5)
    assert [r.product.id for r in recs] == ["strong", "weak"]
    assert recs[0].score == pytest.approx(0.9)
    assert recs[1].score == pytest.approx(0.4)


def test_component_scores_retained(strict_prefs, strong_and_weak):
    strong, _ = strong_and_weak
    (rec,) = generate_recommendations([strong], strict_prefs)
    assert rec.sustainability_match == 1.0
    assert rec.price_match == 1.0
    assert rec.category_match == 1.0


def test_reasons_truncated_to_three(strict_prefs, strong_and_weak):
    strong, weak = strong_and_weak
    recs = {r.product.id: r for r in generate_recommendations([strong, weak], strict_prefs)}
    assert recs["strong"].reasons == [
        "High sustainability rating",
        "Within your budget",
        "Matches your preferred categories",
    ]
    assert recs["weak"].reasons == ["Within your budget", "Matches your preferred categories"]


def test_specific_reasons_follow_generic(make_product):
    product = make_product(
        category="Dresses",
        price=300,
        certifications=["GOTS Certified"],
        recycled="80%",
        water="4,000L",
    )
    prefs = UserPreferences(
        price_range=PriceRange(min=0, max=100),
        categories=["Tops"],
        certifications=["bluesign"],
        materials=["silk"],
    )
    (rec,) = generate_recommendations([product], prefs)
    assert rec.reasons == [
        "GOTS certified organic",
        "High recycled content",
        "Significant water savings",
    ]


def test_ties_keep_catalog_order(make_product):
    catalog = [make_product(pid) for pid in ("c", "a", "b")]
    recs = generate_recommendations(catalog, UserPreferences(), limit=3)
    assert [r.product.id for r in recs] == ["c", "a", "b"]


def test_exclude_id_removes_product(make_product):
    catalog = [make_product(pid) for pid in ("a", "b", "c")]
    recs = generate_recommendations(catalog, UserPreferences(), exclude_id="b", limit=10)
    assert len(recs) == 2
    assert "b" not in {r.product.id for r in recs}


def test_output_never_exceeds_limit(make_product):
    catalog = [make_product(f"p{i}") for i in range(6)]
    assert len(generate_recommendations(catalog, UserPreferences(), limit=4)) == 4
    assert len(generate_recommendations(catalog, UserPreferences(), limit=10)) == 6


@pytest.mark.parametrize("limit", [0, -1])
def test_non_positive_limit_is_empty(make_product, limit):
    assert generate_recommendations([make_product()], UserPreferences(), limit=limit) == []


def test_empty_catalog():
    assert generate_recommendations([], UserPreferences()) == []


def test_unknown_impact_priority_falls_back_to_average(make_product):
    product = make_product(water="5,000L", co2="0kg", recycled="0%")
    prefs = UserPreferences().model_copy(update={"impact_priority": "planet"})
    (rec,) = generate_recommendations([product], prefs)
    # every other component is 1.0 or 0.0; impact contributes (1 / 3) * 0.05
    assert rec.score == pytest.approx(0.6 + 0.05 / 3)


# ── generate_similar_products ────────────────────────────────────────────


@pytest.fixture
def similar_catalog(make_product):
    target = make_product(
        "target", category="Dresses", price=100,
        materials=[("Cotton", "")], certifications=["A", "B"],
    )
    twin = make_product(
        "twin", category="Dresses", price=100,
        materials=[("Cotton", "")], certifications=["A", "B"],
    )
    cousin = make_product(
        "cousin", category="Tops", price=150,
        materials=[("Cotton", ""), ("Linen", "")], certifications=["A"],
    )
    stranger = make_product("stranger", category="Tops", price=300)
    return target, [target, stranger, cousin, twin]


def test_similarity_weights(similar_catalog):
    target, catalog = similar_catalog
    by_id = {p.id: p for p in catalog}
    assert _similarity(target, by_id["twin"]) == pytest.approx(1.0)
    # price 0.125 + materials 0.1 + certifications 0.075
    assert _similarity(target, by_id["cousin"]) == pytest.approx(0.3)
    assert _similarity(target, by_id["stranger"]) == 0.0


def test_similar_products_ranked_without_target(similar_catalog):
    target, catalog = similar_catalog
    result = generate_similar_products(target, catalog, limit=4)
    assert [p.id for p in result] == ["twin", "cousin", "stranger"]


def test_similar_products_limit(similar_catalog):
    target, catalog = similar_catalog
    assert [p.id for p in generate_similar_products(target, catalog, limit=1)] == ["twin"]
    assert generate_similar_products(target, catalog, limit=0) == []


def test_similar_products_zero_price_target(make_product):
    target = make_product("free", category="Dresses", price=0)
    other = make_product("also-free", category="Dresses", price=0)
    assert _similarity(target, other) == pytest.approx(0.4)
    assert generate_similar_products(target, [target, other]) == [other]


def test_similar_products_excludes_every_copy_of_target(make_product):
    target = make_product("dup")
    catalog = [target, make_product("dup"), make_product("other")]
    assert [p.id for p in generate_similar_products(target, catalog)] == ["other"]
