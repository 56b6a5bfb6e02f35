from __future__ import annotations

import logging
from collections.abc import Sequence

from ..catalog.provider import CatalogProvider, get_default_provider
from .filtering import filter_products
from .models import Mode, Preferences, Product, ScoredProduct, Single
from .ranking import rank_candidates

logger = logging.getLogger(__name__)


def filter_and_rank(
    catalog: Sequence[Product],
    preferences: Preferences,
    mode: Mode | None = None,
) -> tuple[int, ScoredProduct | list[ScoredProduct] | None]:
    """
    Run filter -> score -> rank over an explicit catalog snapshot.

    Returns the number of candidates that passed the filters alongside the
    ranked result.
    """
    mode = mode or Single()
    candidates = filter_products(catalog, preferences)
    logger.debug(
        "%d of %d products passed the filters (mode=%s)",
        len(candidates), len(catalog), mode.kind,
    )
    return len(candidates), rank_candidates(candidates, preferences, mode, catalog=catalog)


def recommend_from_catalog(
    catalog: Sequence[Product],
    preferences: Preferences,
    mode: Mode | None = None,
) -> ScoredProduct | list[ScoredProduct] | None:
    _, result = filter_and_rank(catalog, preferences, mode)
    return result


def recommend(
    preferences: Preferences,
    mode: Mode | None = None,
    provider: CatalogProvider | None = None,
) -> ScoredProduct | list[ScoredProduct] | None:
    """
    Recommend products from the provider's catalog.

    An unavailable catalog behaves like an empty one: None for ``Single``,
    an empty list for ``Multiple``.
    """
    provider = provider or get_default_provider()
    return recommend_from_catalog(provider.get_catalog(), preferences, mode)
