"""Comparison report models package."""

from .comparison import (
    AggregateStats,
    ComparisonReport,
    ComparisonResult,
    DisplayGroup,
    OperationKind,
    Segment,
    SimilarityRecord,
)

__all__ = [
    "Segment",
    "SimilarityRecord",
    "ComparisonResult",
    "ComparisonReport",
    "DisplayGroup",
    "AggregateStats",
    "OperationKind",
]
