"""Position Ranker — Pipeline Step 3.

Ranks entities by reading order: the entity whose alias appears earliest in
the original response text is rank 1. Matching here is a plain
case-insensitive substring search (no word boundaries), so "Acme" inside
"acme.com" still counts as an occurrence.

Ties on equal offsets go to input order: the brand first, then competitors
in the order supplied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def first_occurrence(text: str, aliases: Sequence[str]) -> int:
    """Lowest character offset at which any alias occurs, or -1."""
    text_lower = (text or "").lower()
    best_offset = -1
    for alias in aliases:
        alias = (alias or "").strip().lower()
        if not alias:
            continue
        offset = text_lower.find(alias)
        if offset != -1 and (best_offset < 0 or offset < best_offset):
            best_offset = offset
    return best_offset


def rank_positions(
    text: str,
    entities: Sequence[tuple[str, Sequence[str]]],
) -> list[int]:
    """Rank every entity by first occurrence.

    Args:
        text: Original (unmodified) response text.
        entities: Ordered (name, aliases) pairs; order breaks offset ties.

    Returns:
        One rank per entity, aligned with ``entities``: 1-based for entities
        that occur in the text, 0 for entities that never occur.
    """
    offsets = [first_occurrence(text, aliases) for _, aliases in entities]
    mentioned = sorted(
        (idx for idx, offset in enumerate(offsets) if offset >= 0),
        key=lambda idx: (offsets[idx], idx),
    )

    ranks = [0] * len(entities)
    for rank, idx in enumerate(mentioned, start=1):
        ranks[idx] = rank
    return ranks


def brand_position(
    text: str,
    brand_aliases: Sequence[str],
    competitors: Sequence[tuple[str, Sequence[str]]] = (),
) -> int:
    """Rank of the target brand among itself and all competitors.

    Returns 0 if none of the brand's aliases occur in the text.
    """
    return rank_positions(text, [("", brand_aliases), *competitors])[0]
