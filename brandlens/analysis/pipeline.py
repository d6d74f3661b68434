"""Analysis Pipeline — orchestrator for the brand visibility steps.

Chains the analysis steps per response:
  1. Alias Generator
  2. Mention Counter
  3. Position Ranker
  4. Sentiment Scorer (injected classifier)
  5. Visibility Calculator
  6. Domain Extractor
  + word volume

Input:  (prompt, response) pairs, country, brand name, ordered competitors
Output: AnalysisResult per pair, in input order
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from brandlens.analysis.aliases import generate_aliases
from brandlens.analysis.domain_extractor import extract_domains
from brandlens.analysis.mention_counter import count_mentions
from brandlens.analysis.position_ranker import rank_positions
from brandlens.analysis.sentiment import SentimentClassifier, SentimentScorer
from brandlens.analysis.types import (
    AnalysisResult,
    BrandMetric,
    Competitor,
    PromptResponse,
)
from brandlens.analysis.visibility import calculate_visibility
from brandlens.core.config import settings

if TYPE_CHECKING:
    from brandlens.schemas.analysis import AnalysisRequest

logger = logging.getLogger(__name__)


def word_volume(text: str) -> int:
    """Number of whitespace-delimited tokens in the text."""
    return len((text or "").split())


class AnalysisPipeline:
    """Brand visibility analysis over generated responses.

    The sentiment classifier is injected once and only read afterwards, so
    one pipeline can serve concurrent calls.

    Args:
        classifier: Sentiment capability; ``None`` fails immediately with
                    SentimentModelNotInitializedError.
        max_workers: Thread pool size for ``analyze_batch``; 1 analyses
                     responses sequentially.
    """

    def __init__(self, classifier: SentimentClassifier | None, max_workers: int = 1):
        self.scorer = SentimentScorer(classifier)
        self.max_workers = max(1, max_workers)

    @classmethod
    def from_settings(cls, classifier: SentimentClassifier | None) -> AnalysisPipeline:
        """Build a pipeline sized by ANALYSIS_MAX_WORKERS."""
        return cls(classifier, max_workers=settings.analysis_max_workers)

    def analyze_response(
        self,
        item: PromptResponse,
        country: str,
        brand_name: str,
        competitors: Sequence[Competitor] = (),
    ) -> AnalysisResult:
        """Run the full analysis on a single response.

        Args:
            item: Prompt and the generated response text.
            country: Location the prompt was run for (passed through).
            brand_name: Main brand to track. Must be non-empty.
            competitors: Ordered competitors; matched by ``tracked_name``.

        Returns:
            AnalysisResult with the main brand first in ``brands``.
        """
        text = item.response or ""

        # Step 1: Aliases
        brand_aliases = generate_aliases(brand_name)
        comp_aliases = [(c.tracked_name, generate_aliases(c.tracked_name)) for c in competitors]

        # Step 2: Mentions
        mentions = count_mentions(text.lower(), brand_name, brand_aliases, comp_aliases)

        # Step 3: Positions (original text, brand first so ties go to input order)
        positions = rank_positions(text, [(brand_name, brand_aliases), *comp_aliases])

        # Step 4: Sentiment, one score for the whole response
        sentiment = self.scorer.score(text)

        # Step 5: Visibility
        brands = [
            BrandMetric(
                name=brand_name,
                sentiment=sentiment,
                position=positions[0],
                visibility=calculate_visibility(mentions, (brand_name, *brand_aliases)),
                display_name=brand_name,
            )
        ]
        for idx, comp in enumerate(competitors, start=1):
            brands.append(
                BrandMetric(
                    name=comp.tracked_name,
                    sentiment=sentiment,
                    position=positions[idx],
                    visibility=calculate_visibility(mentions, (comp.tracked_name, *comp_aliases[idx - 1][1])),
                    display_name=comp.display_name or comp.tracked_name,
                )
            )

        # Step 6: Domains
        domains = extract_domains(text)

        result = AnalysisResult(
            prompt=item.prompt,
            response=text,
            country=country,
            mentions=mentions,
            domains=domains,
            word_volume=word_volume(text),
            brands=brands,
        )

        logger.info(
            "Analysis complete: position=%d, visibility=%.2f, sentiment=%d, domains=%d, volume=%d",
            result.position,
            result.visibility,
            result.sentiment,
            len(domains),
            result.word_volume,
            extra={
                "brand": brand_name,
                "country": country,
                "position": result.position,
                "visibility": result.visibility,
                "sentiment": result.sentiment,
            },
        )
        return result

    def analyze_batch(
        self,
        responses: Sequence[PromptResponse],
        country: str,
        brand_name: str,
        competitors: Sequence[Competitor] = (),
    ) -> list[AnalysisResult]:
        """Run the pipeline on a batch of responses.

        Returns:
            List of AnalysisResult objects, in the same order as ``responses``.
        """
        competitors = tuple(competitors)

        def analyze(item: PromptResponse) -> AnalysisResult:
            return self.analyze_response(item, country, brand_name, competitors)

        if self.max_workers > 1 and len(responses) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(analyze, responses))
        else:
            results = [analyze(item) for item in responses]

        logger.info(
            "Batch analysis complete: %d responses, competitors=%d",
            len(results),
            len(competitors),
            extra={"brand": brand_name, "country": country, "responses": len(results), "competitors": len(competitors)},
        )
        return results

    def analyze_request(self, request: AnalysisRequest) -> list[AnalysisResult]:
        """Run the pipeline on a validated request schema."""
        return self.analyze_batch(
            responses=[PromptResponse(prompt=r.prompt, response=r.response) for r in request.responses],
            country=request.country,
            brand_name=request.brand_name,
            competitors=[
                Competitor(display_name=c.display_name, tracked_name=c.tracked_name) for c in request.competitors
            ],
        )
