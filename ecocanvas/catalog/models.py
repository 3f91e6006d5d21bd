from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Material(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    percentage: float = Field(default=100.0, ge=0.0, le=100.0)
    sustainability: str = ""
    origin: str = ""


class Impact(BaseModel):
    model_config = ConfigDict(frozen=True)

    water_saved: str = Field(default="", description='e.g. "2,700L"')
    co2_reduced: str = Field(default="", description='e.g. "3.2kg"')
    recycled_materials: str = Field(default="", description='e.g. "100%"')


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    category: str
    price: float = Field(..., ge=0.0)
    original_price: float | None = None
    description: str = ""
    materials: list[Material] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    impact: Impact = Field(default_factory=Impact)


class ProductDetail(BaseModel):
    product: Product
    sustainability_score: int
