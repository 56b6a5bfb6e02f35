from __future__ import annotations

from fastapi import Depends, FastAPI

from .analytics.aggregator import summarize
from .catalog.provider import CatalogProvider, get_default_provider
from .recommendations.models import (
    ExperienceLevel,
    Product,
    RecommendationRequest,
    RecommendationResponse,
    Stats,
)
from .recommendations.retrieval import filter_and_rank

app = FastAPI(title="Product Recommendation API", version="1.0.0")


def get_catalog_provider() -> CatalogProvider:
    return get_default_provider()


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/products", response_model=list[Product])
def products(provider: CatalogProvider = Depends(get_catalog_provider)) -> list[Product]:
    return provider.get_catalog()


@app.get("/metadata")
def metadata(provider: CatalogProvider = Depends(get_catalog_provider)) -> dict:
    catalog = provider.get_catalog()
    categories = sorted({p.category for p in catalog})
    tags: set[str] = set()
    for p in catalog:
        tags.update(p.tags)
    return {
        "categories": categories,
        "tags": sorted(tags),
        "experience_levels": [level.value for level in ExperienceLevel],
    }


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post(
    "/recommendations",
    response_model=RecommendationResponse,
    response_model_exclude_none=True,
)
def recommendations(
    body: RecommendationRequest,
    provider: CatalogProvider = Depends(get_catalog_provider),
) -> RecommendationResponse:
    total_candidates, result = filter_and_rank(
        provider.get_catalog(), body.preferences, body.mode,
    )

    if result is None:
        items = []
    elif isinstance(result, list):
        items = result
    else:
        items = [result]

    return RecommendationResponse(
        mode=body.mode.kind,
        recommendations=items,
        total_candidates=total_candidates,
        stats=summarize(items),
    )


@app.post("/recommendations/stats", response_model=Stats, response_model_exclude_none=True)
def recommendation_stats(body: list[Product]) -> Stats:
    return summarize(body)
