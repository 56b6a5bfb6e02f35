from __future__ import annotations

from collections.abc import Sequence

from .models import Mode, Multiple, Preferences, Product, ScoredProduct, Single
from .scoring import score_product


def _catalog_positions(catalog: Sequence[Product]) -> dict[int | str, int]:
    positions: dict[int | str, int] = {}
    for index, product in enumerate(catalog):
        positions.setdefault(product.id, index)
    return positions


def score_candidates(
    candidates: Sequence[Product],
    preferences: Preferences,
) -> list[ScoredProduct]:
    return [
        ScoredProduct(**c.model_dump(exclude={"score"}), score=score_product(c, preferences))
        for c in candidates
    ]


def sort_scored(
    scored: list[ScoredProduct],
    catalog: Sequence[Product] | None = None,
) -> list[ScoredProduct]:
    """
    Order by score (highest first); equal scores keep catalog order.

    When ``catalog`` is omitted the candidates' own order stands in for it,
    which is the same thing for Filter Stage output.
    """
    if catalog is None:
        # sorted() is stable
        return sorted(scored, key=lambda s: -s.score)

    positions = _catalog_positions(catalog)
    fallback = len(positions)
    return sorted(scored, key=lambda s: (-s.score, positions.get(s.id, fallback)))


def rank_candidates(
    candidates: Sequence[Product],
    preferences: Preferences,
    mode: Mode | None = None,
    catalog: Sequence[Product] | None = None,
) -> ScoredProduct | list[ScoredProduct] | None:
    """
    Score, order and truncate candidates according to ``mode``.

    ``Single`` returns the best item, or None when there are no candidates.
    ``Multiple`` returns at most ``limit`` items, possibly an empty list.
    """
    mode = mode or Single()
    ranked = sort_scored(score_candidates(candidates, preferences), catalog)

    if isinstance(mode, Multiple):
        return ranked[: mode.limit]
    return ranked[0] if ranked else None
