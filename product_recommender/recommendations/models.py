from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LIMIT = 5


class ExperienceLevel(str, Enum):
    iniciante = "iniciante"
    intermediario = "intermediário"
    avancado = "avançado"


class PriceRange(BaseModel):
    min: float = Field(default=0.0, ge=0.0)
    max: float = Field(..., ge=0.0)


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str
    category: str
    price: float = Field(..., ge=0.0)
    tags: list[str] = Field(default_factory=list)
    description: str = ""


class ScoredProduct(Product):
    score: int = Field(..., ge=0)


class Preferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    price_range: PriceRange | None = Field(default=None, alias="priceRange")
    budget: float | None = Field(default=None, ge=0.0)
    # Kept as a plain string: unknown levels are tolerated, not rejected.
    experience_level: str | None = Field(
        default=None,
        alias="experienceLevel",
        description="One of iniciante, intermediário, avançado",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags_as_empty(cls, value):
        return [] if value is None else value


class Single(BaseModel):
    kind: Literal["single"] = "single"


class Multiple(BaseModel):
    kind: Literal["multiple"] = "multiple"
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)


Mode = Annotated[Union[Single, Multiple], Field(discriminator="kind")]


class Stats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    count: int = 0
    average_price: float = Field(default=0.0, alias="averagePrice")
    categories: list[str] = Field(default_factory=list)
    price_range: PriceRange | None = Field(default=None, alias="priceRange")


class RecommendationRequest(BaseModel):
    preferences: Preferences = Field(default_factory=Preferences)
    mode: Mode = Field(default_factory=Single)


class RecommendationResponse(BaseModel):
    mode: Literal["single", "multiple"]
    recommendations: list[ScoredProduct]
    total_candidates: int
    stats: Stats
