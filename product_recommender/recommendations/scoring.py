"""
Additive relevance scoring.

Every preference dimension contributes independently; unset dimensions
contribute nothing. The importance of each dimension is fixed:

- category match            +10
- each matching tag         +5
- price inside priceRange   +8
- price within max * 1.2    +4 (near-budget tolerance band)
- experience level match    +6
- price within budget       +3
"""
from __future__ import annotations

from .filtering import allowed_levels
from .models import Preferences, Product

CATEGORY_WEIGHT = 10
TAG_WEIGHT = 5
PRICE_IN_RANGE_WEIGHT = 8
PRICE_TOLERANCE_WEIGHT = 4
PRICE_TOLERANCE_FACTOR = 1.2
EXPERIENCE_WEIGHT = 6
BUDGET_WEIGHT = 3


def _price_range_score(price: float, preferences: Preferences) -> int:
    price_range = preferences.price_range
    if price_range is None:
        return 0
    if price_range.min <= price <= price_range.max:
        return PRICE_IN_RANGE_WEIGHT
    # Applies below min as well as slightly above max.
    if price <= price_range.max * PRICE_TOLERANCE_FACTOR:
        return PRICE_TOLERANCE_WEIGHT
    return 0


def score_breakdown(product: Product, preferences: Preferences) -> dict[str, int]:
    """Return the contribution of each preference dimension for one product."""
    product_tags = set(product.tags)

    category = 0
    if preferences.category and product.category == preferences.category:
        category = CATEGORY_WEIGHT

    matching_tags = {t for t in preferences.tags if t in product_tags}

    levels = allowed_levels(preferences.experience_level)
    experience = EXPERIENCE_WEIGHT if levels & product_tags else 0

    budget = 0
    if preferences.budget is not None and product.price <= preferences.budget:
        budget = BUDGET_WEIGHT

    return {
        "category": category,
        "tags": len(matching_tags) * TAG_WEIGHT,
        "price_range": _price_range_score(product.price, preferences),
        "experience_level": experience,
        "budget": budget,
    }


def score_product(product: Product, preferences: Preferences) -> int:
    return sum(score_breakdown(product, preferences).values())
