"""
Recommendation engine.

Responsibilities:
- Accept user preferences (category, tags, price range, budget, experience level).
- Filter the catalog snapshot to candidates passing the hard constraints.
- Score and rank candidates using deterministic additive heuristics.
- Return a single best match or a top-N list.
"""
