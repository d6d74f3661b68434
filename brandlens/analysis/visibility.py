"""Visibility Calculator — Pipeline Step 5.

  visibility = target_mentions / all_mentions × 100

where target_mentions sums every count whose key matches one of the
entity's aliases (case-insensitive).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


def calculate_visibility(mentions: Mapping[str, int], aliases: Sequence[str]) -> float:
    """Calculate an entity's share of all recorded mentions, in percent.

    Args:
        mentions: Dict of {entity name: mention count} for one response.
        aliases: Names identifying the entity. Pass the canonical name too
                 when the mention keys use it verbatim.

    Returns:
        Float between 0.0 and 100.0; 0.0 when nothing was mentioned.
    """
    wanted = {alias.casefold() for alias in aliases if alias}

    total = 0
    target = 0
    for name, count in mentions.items():
        total += count
        if name.casefold() in wanted:
            target += count

    if total == 0:
        return 0.0
    return target / total * 100
