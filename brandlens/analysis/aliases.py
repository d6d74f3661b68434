"""Alias Generator — Pipeline Step 1.

Expands a brand or competitor name into the lexical variants that the
mention counter and position ranker match against:

  "Bajaj Finserv" → ("bajaj finserv", "bajajfinserv", "bajaj", "bf")
"""

from __future__ import annotations

from brandlens.analysis.types import AliasSet


def generate_aliases(name: str) -> AliasSet:
    """Generate lowercase variants of an entity name.

    Variants, in order (duplicates skipped):
      1. the full lowercased name
      2. the words joined without spaces
      3. the first word alone
      4. the initials of every word (only for multi-word names)
      5. variant 2 with hyphens and underscores stripped

    An empty name yields a single empty alias; callers are expected to reject
    empty names before analysis.
    """
    name = (name or "").strip().lower()
    words = name.split()
    joined = "".join(words)

    candidates = [name, joined]
    if words:
        candidates.append(words[0])
    if len(words) > 1:
        candidates.append("".join(word[0] for word in words))
    candidates.append(joined.replace("-", "").replace("_", ""))

    aliases: list[str] = []
    for candidate in candidates:
        if candidate not in aliases:
            aliases.append(candidate)
    return tuple(aliases)
