"""Shared display configuration for comparison reports."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TierThresholds:
    """Inclusive lower bounds for the four-tier overall similarity badge."""

    excellent: float = 0.90
    good: float = 0.75
    fair: float = 0.60


@dataclass(frozen=True)
class BandThresholds:
    """Inclusive lower bounds for the three-band per-dimension score bars."""

    high: float = 0.75
    medium: float = 0.50


TIER_THRESHOLDS = TierThresholds()
BAND_THRESHOLDS = BandThresholds()

# Ordinal display weight per tier, highest first
TIER_COLOR_WEIGHTS = {
    "excellent": 1.0,
    "good": 0.75,
    "fair": 0.5,
    "poor": 0.25,
}

TIER_COLORS = {
    "excellent": "#10b981",  # green
    "good": "#f59e0b",  # orange
    "fair": "#f87171",  # light red
    "poor": "#dc2626",  # red
}

BAND_COLORS = {
    "high": "#10b981",
    "medium": "#f59e0b",
    "low": "#ef4444",
}

DEFAULT_MAX_GROUP_CHARS = 500
TRUNCATION_MARKER = "..."

OPERATION_LABELS = {
    "equal": "Common",
    "delete": "Removed",
    "insert": "Added",
    "replace": "Changed",
}

LEGEND_LABELS = {
    "equal": "Normal (Both Documents)",
    "delete": "Removed from Document 1",
    "insert": "Added in Document 2",
    "replace": "Modified Content",
}

STAT_LABELS = {
    "avg_similarity": "Overall Similarity",
    "equal": "Common Content",
    "delete": "Removed",
    "insert": "Added",
    "replace": "Modified",
}


ERROR_MESSAGES = {
    "comparison_failed_title": "Comparison Failed",
    "comparison_failed": "Comparison failed. Please try again.",
    "retry": "Try Again",
    "missing_report": "Select two documents to compare",
    "no_differences": "No differences found",
    "invalid_report": "Comparison response did not match the expected report format.",
}
