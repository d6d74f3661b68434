"""Mention Counter — Pipeline Step 2.

Counts whole-word, case-insensitive alias matches per entity:
  - Target brand first, then competitors in caller-supplied order
  - Each matched span is credited to exactly one entity
  - Earlier entities (and earlier aliases) claim overlapping text first

Labels inside dotted hostnames ("acme" in "acme.com") are not mentions;
they are picked up by the domain extractor as citations instead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from brandlens.analysis.types import MentionCounts

logger = logging.getLogger(__name__)

Span = tuple[int, int]


def _build_pattern(alias: str) -> re.Pattern:
    """Build a whole-word regex for an alias.

    Lookarounds instead of ``\\b`` so that aliases starting or ending with
    punctuation ("c++", ".net") still behave as whole words.
    """
    escaped = re.escape(alias)
    return re.compile(rf"(?<!\w)(?<!\w\.){escaped}(?!\w)(?!\.\w)")


class _ClaimedSpans:
    """Character spans already credited to some entity."""

    def __init__(self) -> None:
        self._spans: list[Span] = []

    def overlaps(self, start: int, end: int) -> bool:
        return any(start < claimed_end and claimed_start < end for claimed_start, claimed_end in self._spans)

    def claim(self, start: int, end: int) -> None:
        self._spans.append((start, end))


def _claim_entity(text: str, aliases: Sequence[str], claimed: _ClaimedSpans) -> list[Span]:
    spans: list[Span] = []
    for alias in aliases:
        alias = (alias or "").strip().lower()
        if not alias:
            continue
        for match in _build_pattern(alias).finditer(text):
            if claimed.overlaps(match.start(), match.end()):
                continue
            claimed.claim(match.start(), match.end())
            spans.append(match.span())
    return spans


def claim_mentions(
    text: str,
    brand_name: str,
    brand_aliases: Sequence[str],
    competitors: Sequence[tuple[str, Sequence[str]]] = (),
) -> dict[str, list[Span]]:
    """Resolve which character spans of the text belong to which entity.

    Args:
        text: Response text (matched case-insensitively).
        brand_name: Key for the target entity.
        brand_aliases: Aliases of the target entity, in priority order.
        competitors: Ordered (tracked name, aliases) pairs.

    Returns:
        Dict of {entity name: [(start, end), ...]} with the brand first and
        competitors following in input order. No span appears twice.
    """
    normalized = (text or "").lower()
    claimed = _ClaimedSpans()

    spans = {brand_name: _claim_entity(normalized, brand_aliases, claimed)}
    for comp_name, comp_aliases in competitors:
        spans.setdefault(comp_name, []).extend(_claim_entity(normalized, comp_aliases, claimed))
    return spans


def count_mentions(
    text: str,
    brand_name: str,
    brand_aliases: Sequence[str],
    competitors: Sequence[tuple[str, Sequence[str]]] = (),
) -> MentionCounts:
    """Count brand and competitor mentions without double counting.

    Returns:
        Dict of {entity name: mention count}.
    """
    spans = claim_mentions(text, brand_name, brand_aliases, competitors)
    counts = {name: len(found) for name, found in spans.items()}

    logger.debug("Mention counts: brand=%s, counts=%s", brand_name, counts)
    return counts
