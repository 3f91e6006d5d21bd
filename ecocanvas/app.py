from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .catalog.data_store import get_product, get_products, get_products_by_category
from .catalog.models import Product, ProductDetail
from .comparison.aggregator import generate_comparison, sustainability_score
from .comparison.models import ComparisonRequest, SustainabilityComparison
from .config import DEFAULT_APP_CONFIG
from .errors import ProductNotFoundError
from .logger import configure_logging
from .preferences.models import (
    DEFAULT_PREFERENCES,
    ImpactPriority,
    PreferencesUpdate,
    UserPreferences,
    merge_preferences,
)
from .recommendations.engine import generate_recommendations, generate_similar_products
from .recommendations.models import (
    RecommendationRequest,
    RecommendationResponse,
    SimilarProductsResponse,
)
from .scoring.scorers import FactorId

configure_logging(DEFAULT_APP_CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Sustainable Fashion Recommendation API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_APP_CONFIG.session_secret)

_PREFERENCES_KEY = "preferences"


def _session_preferences(request: Request) -> UserPreferences:
    raw = request.session.get(_PREFERENCES_KEY)
    if not raw:
        return DEFAULT_PREFERENCES
    return UserPreferences.model_validate(raw)


def _lookup(product_id: str) -> Product:
    try:
        return get_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    products = get_products()
    return {
        "categories": sorted({p.category for p in products}),
        "certifications": sorted({c for p in products for c in p.certifications}),
        "materials": sorted({m.name for p in products for m in p.materials}),
        "sustainability_factors": [f.value for f in FactorId],
        "impact_priorities": [p.value for p in ImpactPriority],
    }


@app.get("/products", response_model=list[Product])
def list_products(category: str | None = None) -> list[Product]:
    if category:
        return get_products_by_category(category)
    return get_products()


@app.get("/products/{product_id}", response_model=ProductDetail)
def product_detail(product_id: str) -> ProductDetail:
    product = _lookup(product_id)
    return ProductDetail(product=product, sustainability_score=sustainability_score(product))


@app.get("/products/{product_id}/similar", response_model=SimilarProductsResponse)
def similar_products(
    product_id: str,
    limit: int = Query(default=DEFAULT_APP_CONFIG.similar_limit, ge=1, le=20),
) -> SimilarProductsResponse:
    target = _lookup(product_id)
    similar = generate_similar_products(target, get_products(), limit)
    return SimilarProductsResponse(product_id=product_id, similar=similar)


# ── Preference endpoints ─────────────────────────────────────────────────


@app.get("/preferences", response_model=UserPreferences)
def read_preferences(request: Request) -> UserPreferences:
    return _session_preferences(request)


@app.put("/preferences", response_model=UserPreferences)
def update_preferences(body: PreferencesUpdate, request: Request) -> UserPreferences:
    updated = merge_preferences(_session_preferences(request), body)
    request.session[_PREFERENCES_KEY] = updated.model_dump(mode="json")
    return updated


@app.delete("/preferences", response_model=UserPreferences)
def reset_preferences(request: Request) -> UserPreferences:
    request.session.pop(_PREFERENCES_KEY, None)
    return DEFAULT_PREFERENCES


# ── Engine endpoints ─────────────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: RecommendationRequest, request: Request) -> RecommendationResponse:
    # Explicit preferences win; otherwise fall back to the session's.
    preferences = body.preferences or _session_preferences(request)
    catalog = get_products()
    items = generate_recommendations(catalog, preferences, body.exclude_id, body.limit)
    total = sum(1 for p in catalog if p.id != body.exclude_id)
    logger.info("Recommended %d of %d candidates", len(items), total)
    return RecommendationResponse(recommendations=items, total_candidates=total)


@app.post("/compare", response_model=SustainabilityComparison)
def compare(body: ComparisonRequest) -> SustainabilityComparison:
    candidates = [_lookup(pid) for pid in body.product_ids]
    return generate_comparison(candidates)
