from __future__ import annotations

import pytest

from ecocanvas.catalog.models import Impact, Material, Product


@pytest.fixture
def make_product():
    """Build a Product with only the fields a test cares about."""

    def _make(
        product_id: str = "p1",
        *,
        category: str = "Tops",
        price: float = 100.0,
        materials: list[tuple[str, str]] | None = None,
        certifications: list[str] | None = None,
        features: list[str] | None = None,
        water: str = "0L",
        co2: str = "0kg",
        recycled: str = "0%",
    ) -> Product:
        return Product(
            id=product_id,
            name=product_id.replace("-", " ").title(),
            category=category,
            price=price,
            materials=[
                Material(name=name, sustainability=descriptor)
                for name, descriptor in (materials or [])
            ],
            certifications=certifications or [],
            features=features or [],
            impact=Impact(water_saved=water, co2_reduced=co2, recycled_materials=recycled),
        )

    return _make
