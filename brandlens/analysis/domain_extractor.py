"""Domain Extractor — Pipeline Step 6.

Pulls distinct domain-like tokens ("example.com", "sub.example.co.uk") out
of the response text. Every domain is reported once per response with
placeholder citation metadata; citation frequency and domain type are
filled in downstream.
"""

from __future__ import annotations

import logging
import re

from brandlens.analysis.types import DomainCitation

logger = logging.getLogger(__name__)

# One or more "label." groups followed by a 2+ letter top-level label. A match
# may not start inside an alphanumeric run, which keeps finditer linear.
_DOMAIN_PATTERN = re.compile(r"(?<![a-zA-Z0-9-])(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}")

DEFAULT_DOMAIN_TYPE = "unknown"


def extract_domains(text: str) -> list[DomainCitation]:
    """Extract deduplicated domain citations from the response text.

    Returns:
        List of DomainCitation in first-seen order. Callers must not rely
        on the ordering.
    """
    seen: set[str] = set()
    domains: list[DomainCitation] = []
    for match in _DOMAIN_PATTERN.finditer(text or ""):
        domain = match.group()
        if domain in seen:
            continue
        seen.add(domain)
        domains.append(DomainCitation(domain=domain, used=1, avg_citations=0.0, type=DEFAULT_DOMAIN_TYPE))
    return domains
