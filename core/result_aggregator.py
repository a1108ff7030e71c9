"""Aggregate statistics over a list of comparison results."""

from collections import Counter
from collections.abc import Sequence

import structlog

from models.comparison import AggregateStats, ComparisonResult

logger = structlog.get_logger(__name__)


def aggregate_results(results: Sequence[ComparisonResult] | None) -> AggregateStats:
    """Reduce comparison results into operation counts and mean similarity.

    Counts are per segment, not per result. Results without segments add
    nothing to the counts but still contribute to the average. An empty list
    yields zero counts and an average of 0.0.

    Args:
        results: Comparison results of one report

    Returns:
        AggregateStats for the whole list
    """
    if not results:
        return AggregateStats()

    counts: Counter[str] = Counter()
    for result in results:
        if not result.segments:
            continue
        counts.update(segment.operation.value for segment in result.segments)

    avg_similarity = sum(r.similarity.overall for r in results) / len(results)

    stats = AggregateStats(
        equal=counts["equal"],
        delete=counts["delete"],
        insert=counts["insert"],
        replace=counts["replace"],
        avg_similarity=avg_similarity,
    )

    logger.debug(
        "Aggregated comparison results",
        phase="aggregation",
        result_count=len(results),
        counts=dict(counts),
        avg_similarity=round(avg_similarity, 4),
    )
    return stats
