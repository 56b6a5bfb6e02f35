from __future__ import annotations

from collections.abc import Iterable

from .models import ExperienceLevel, Preferences, Product

# Each level admits itself and every level below it.
EXPERIENCE_LEVELS: dict[str, frozenset[str]] = {
    ExperienceLevel.iniciante.value: frozenset({"iniciante"}),
    ExperienceLevel.intermediario.value: frozenset({"iniciante", "intermediário"}),
    ExperienceLevel.avancado.value: frozenset({"iniciante", "intermediário", "avançado"}),
}


def allowed_levels(experience_level: str | None) -> frozenset[str]:
    """Return the tags a product may carry for the given level (empty if unknown)."""
    if not experience_level:
        return frozenset()
    return EXPERIENCE_LEVELS.get(experience_level, frozenset())


def _passes(product: Product, preferences: Preferences, levels: frozenset[str]) -> bool:
    if preferences.category and product.category != preferences.category:
        return False

    if preferences.budget is not None and product.price > preferences.budget:
        return False

    if levels and levels.isdisjoint(product.tags):
        return False

    return True


def filter_products(catalog: Iterable[Product], preferences: Preferences) -> list[Product]:
    """
    Drop products failing the hard constraints (category, budget, experience level).

    The result keeps catalog order. ``price_range`` is deliberately not a
    filter; it only affects scoring.
    """
    levels = allowed_levels(preferences.experience_level)
    return [p for p in catalog if _passes(p, preferences, levels)]
