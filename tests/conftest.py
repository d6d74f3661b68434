import pytest

from brandlens.analysis.pipeline import AnalysisPipeline
from brandlens.analysis.sentiment import KeywordSentimentClassifier


class FixedClassifier:
    """Deterministic classifier returning the same raw score for any text."""

    def __init__(self, raw_score: float = 1.0):
        self.raw_score = raw_score
        self.calls: list[str] = []

    def classify(self, text: str) -> float:
        self.calls.append(text)
        return self.raw_score


@pytest.fixture
def fixed_classifier() -> FixedClassifier:
    return FixedClassifier()


@pytest.fixture
def pipeline(fixed_classifier) -> AnalysisPipeline:
    return AnalysisPipeline(fixed_classifier)


@pytest.fixture
def keyword_pipeline() -> AnalysisPipeline:
    return AnalysisPipeline(KeywordSentimentClassifier())


@pytest.fixture
def make_classifier():
    """Factory for classifiers with a chosen raw score."""
    return FixedClassifier
