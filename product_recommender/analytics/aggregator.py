from __future__ import annotations

from collections.abc import Sequence

from ..recommendations.models import PriceRange, Product, Stats


def summarize(results: Sequence[Product] | Product | None) -> Stats:
    """
    Summarise a recommendation result set.

    Accepts the output of either mode: a list, a single item, or None for
    "no match". ``price_range`` is only set when there is at least one item.
    """
    if results is None:
        return Stats()
    if isinstance(results, Product):
        results = [results]
    if not results:
        return Stats()

    prices = [p.price for p in results]
    # dict keeps first-occurrence order
    categories = list(dict.fromkeys(p.category for p in results))

    return Stats(
        count=len(results),
        average_price=sum(prices) / len(prices),
        categories=categories,
        price_range=PriceRange(min=min(prices), max=max(prices)),
    )
