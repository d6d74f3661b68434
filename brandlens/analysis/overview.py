"""Brand overview across a batch of analysed responses.

Averages each brand's visibility, position and sentiment over every result
it appears in. Position 0 (not mentioned) is averaged in as-is, so a brand
that is rarely mentioned drifts towards 0.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from brandlens.analysis.types import AnalysisResult, BrandOverview

logger = logging.getLogger(__name__)


def summarize_brands(results: Iterable[AnalysisResult]) -> list[BrandOverview]:
    """Aggregate per-brand averages.

    Returns:
        One BrandOverview per brand name, highest average visibility first.
        Ties keep first-seen order.
    """
    totals: dict[str, list[float]] = {}  # name -> [visibility, position, sentiment, count]

    for result in results:
        for metric in result.brands:
            acc = totals.setdefault(metric.name, [0.0, 0.0, 0.0, 0])
            acc[0] += metric.visibility
            acc[1] += metric.position
            acc[2] += metric.sentiment
            acc[3] += 1

    overview = [
        BrandOverview(
            brand_name=name,
            avg_visibility=visibility / count,
            avg_position=position / count,
            avg_sentiment=sentiment / count,
            responses=int(count),
        )
        for name, (visibility, position, sentiment, count) in totals.items()
    ]
    overview.sort(key=lambda o: o.avg_visibility, reverse=True)

    logger.debug("Brand overview: %d brands", len(overview))
    return overview
