"""Core types and DTOs for the Brand Visibility Engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Ordered, deduplicated lowercase variants of one entity name.
AliasSet = tuple[str, ...]

# Entity name -> number of credited mentions.
MentionCounts = dict[str, int]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PromptResponse:
    """One prompt and the generated text it produced."""

    prompt: str = ""
    response: str = ""


@dataclass(frozen=True)
class Competitor:
    """A tracked competitor.

    ``tracked_name`` is the identity used for matching and as the key in
    mention counts; ``display_name`` is what the user typed in.
    """

    display_name: str = ""
    tracked_name: str = ""


# ---------------------------------------------------------------------------
# Data containers — atomic analysis results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BrandMetric:
    """Per-entity metrics for a single response."""

    name: str = ""  # Brand name or competitor tracked name
    sentiment: int = 1  # 1..100, shared across the response
    position: int = 0  # 0 = not mentioned, else 1-based rank by first occurrence
    visibility: float = 0.0  # 0..100 share of mentions
    display_name: str = ""

    def to_dict(self) -> dict:
        return {
            "brand_name": self.name,
            "display_name": self.display_name or self.name,
            "sentiment": self.sentiment,
            "position": self.position,
            "visibility": self.visibility,
        }


@dataclass(frozen=True)
class DomainCitation:
    """A distinct domain-like token found in a response.

    ``used``, ``avg_citations`` and ``type`` are placeholders that downstream
    aggregation may refine.
    """

    domain: str = ""
    used: int = 1
    avg_citations: float = 0.0
    type: str = "unknown"

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "used": self.used,
            "avg_citations": self.avg_citations,
            "type": self.type,
        }


# ---------------------------------------------------------------------------
# Main output DTO — AnalysisResult
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis result for one (prompt, response) pair.

    ``brands`` always starts with the main brand, followed by competitors in
    the order they were supplied. The top-level ``sentiment``, ``position``
    and ``visibility`` mirror the main brand's metric.

    Collections are frozen on construction: ``mentions`` becomes a read-only
    mapping, ``domains``, ``brands`` and ``tags`` become tuples.
    """

    prompt: str = ""
    response: str = ""
    country: str = ""
    mentions: Mapping[str, int] = field(default_factory=dict, hash=False)
    domains: tuple[DomainCitation, ...] = ()
    word_volume: int = 0
    brands: tuple[BrandMetric, ...] = ()
    tags: tuple[str, ...] = ()  # frontend tags, assigned later

    def __post_init__(self):
        object.__setattr__(self, "mentions", MappingProxyType(dict(self.mentions)))
        object.__setattr__(self, "domains", tuple(self.domains))
        object.__setattr__(self, "brands", tuple(self.brands))
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def main_brand(self) -> BrandMetric:
        return self.brands[0] if self.brands else BrandMetric()

    @property
    def sentiment(self) -> int:
        return self.main_brand.sentiment

    @property
    def position(self) -> int:
        return self.main_brand.position

    @property
    def visibility(self) -> float:
        return self.main_brand.visibility

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict for storage."""
        return {
            "prompt": self.prompt,
            "response": self.response,
            "tags": list(self.tags),
            "sentiment": self.sentiment,
            "position": self.position,
            "mentions": dict(self.mentions),
            "visibility": self.visibility,
            "domains": [d.to_dict() for d in self.domains],
            "volume": self.word_volume,
            "location": self.country,
            "brands": [b.to_dict() for b in self.brands],
        }


@dataclass(frozen=True)
class BrandOverview:
    """Per-brand averages across a batch of analysis results."""

    brand_name: str = ""
    avg_visibility: float = 0.0
    avg_position: float = 0.0
    avg_sentiment: float = 0.0
    responses: int = 0
