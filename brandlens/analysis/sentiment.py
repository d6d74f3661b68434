"""Sentiment Scorer — Pipeline Step 4.

The engine does not classify sentiment itself. It relies on an injected
classifier that returns a raw score in [0, 2] and rescales it:

  score = floor(raw / 2 × 99) + 1, clamped to [1, 100]

Sentiment is response-level: one score is shared by every brand metric of
a response.

KeywordSentimentClassifier is a rule-based classifier for deployments
without an external sentiment model.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

RAW_SCORE_MIN = 0.0
RAW_SCORE_MAX = 2.0
SCORE_MIN = 1
SCORE_MAX = 100


class SentimentModelNotInitializedError(RuntimeError):
    """Raised when scoring is attempted without a sentiment classifier."""


@runtime_checkable
class SentimentClassifier(Protocol):
    """Read-only sentiment capability, safe for concurrent calls."""

    def classify(self, text: str) -> float:
        """Return a raw sentiment score, expected in [0, 2]."""
        ...


def rescale_score(raw_score: float) -> int:
    """Convert a raw [0, 2] classifier score to the 1..100 scale.

    Out-of-range values are clamped rather than rejected.
    """
    raw_score = float(raw_score)
    if math.isnan(raw_score):
        raise ValueError("sentiment classifier returned NaN")

    raw_score = max(RAW_SCORE_MIN, min(RAW_SCORE_MAX, raw_score))
    score = math.floor((raw_score / RAW_SCORE_MAX) * 99.0) + 1
    return max(SCORE_MIN, min(SCORE_MAX, score))


class SentimentScorer:
    """Adapter from an injected classifier to the 1..100 sentiment scale."""

    def __init__(self, classifier: SentimentClassifier | None):
        if classifier is None:
            raise SentimentModelNotInitializedError("sentiment model not initialized")
        if not isinstance(classifier, SentimentClassifier):
            raise TypeError(f"{type(classifier).__name__} does not implement classify(text)")
        self._classifier = classifier

    @property
    def classifier(self) -> SentimentClassifier:
        return self._classifier

    def score(self, text: str) -> int:
        raw = self._classifier.classify(text or "")
        score = rescale_score(raw)
        logger.debug("Sentiment: raw=%.4f → score=%d", float(raw), score)
        return score


# ---------------------------------------------------------------------------
# Rule-based classifier
# ---------------------------------------------------------------------------

_POSITIVE_WORDS = frozenset(
    {
        "best",
        "better",
        "excellent",
        "reliable",
        "convenient",
        "fast",
        "recommend",
        "recommended",
        "popular",
        "quality",
        "safe",
        "leader",
        "top",
        "superior",
        "ideal",
        "great",
        "good",
        "outstanding",
        "trusted",
        "leading",
        "innovative",
        "affordable",
        "easy",
    }
)

_NEGATIVE_WORDS = frozenset(
    {
        "worst",
        "bad",
        "slow",
        "expensive",
        "unreliable",
        "problem",
        "problems",
        "disadvantage",
        "disadvantages",
        "drawback",
        "drawbacks",
        "dangerous",
        "risky",
        "outdated",
        "complex",
        "difficult",
        "poor",
        "issue",
        "issues",
        "worse",
        "avoid",
    }
)

_WORD_PATTERN = re.compile(r"[a-zA-Z]+")


class KeywordSentimentClassifier:
    """Lexicon classifier: (positive − negative) / hits, shifted onto [0, 2].

    Text without any sentiment words is neutral (1.0). The word sets are
    frozen at construction, so one instance can be shared across threads.
    """

    def __init__(
        self,
        positive_words: frozenset[str] | None = None,
        negative_words: frozenset[str] | None = None,
    ):
        self.positive_words = frozenset(positive_words if positive_words is not None else _POSITIVE_WORDS)
        self.negative_words = frozenset(negative_words if negative_words is not None else _NEGATIVE_WORDS)

    def polarity(self, text: str) -> float:
        """Sentiment polarity between -1.0 and 1.0."""
        words = set(_WORD_PATTERN.findall((text or "").lower()))

        positive_hits = len(words & self.positive_words)
        negative_hits = len(words & self.negative_words)

        total = positive_hits + negative_hits
        if total == 0:
            return 0.0
        return round((positive_hits - negative_hits) / total, 2)

    def classify(self, text: str) -> float:
        return self.polarity(text) + 1.0
