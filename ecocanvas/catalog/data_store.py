from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..config import DEFAULT_APP_CONFIG
from ..errors import CatalogLoadError, ProductNotFoundError
from .models import Product

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(list[Product])
_products: list[Product] | None = None


def load_catalog(path: Path) -> list[Product]:
    """Read and validate a JSON catalog file."""
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        logger.error("Catalog file not found: %s", path)
        raise CatalogLoadError(f"File not found: {path}") from e
    try:
        products = _catalog_adapter.validate_json(raw)
    except ValidationError as e:
        logger.error("Invalid catalog in %s", path)
        raise CatalogLoadError(f"Invalid catalog in {path}") from e
    logger.info("Loaded %d products from %s", len(products), path)
    return products


def get_products() -> list[Product]:
    """Return the in-memory catalog, loading it on first call."""
    global _products
    if _products is None:
        _products = load_catalog(DEFAULT_APP_CONFIG.catalog_path)
    return _products


def get_product(product_id: str) -> Product:
    for product in get_products():
        if product.id == product_id:
            return product
    raise ProductNotFoundError(product_id)


def get_products_by_category(category: str) -> list[Product]:
    return [p for p in get_products() if p.category == category]
