"""
Similarity classification for comparison display.

This module maps continuous similarity scores onto two ordinal scales:
the four-tier scale drives the overall similarity badge and the three-band
scale drives the per-dimension score bars. The scales use separate
thresholds and must stay separate.
"""

from typing import Any

import structlog

from models.comparison import (
    BandClassification,
    Classification,
    ScoreBand,
    SimilarityRecord,
    SimilarityTier,
)
from shared.config import (
    BAND_COLORS,
    BAND_THRESHOLDS,
    TIER_COLOR_WEIGHTS,
    TIER_COLORS,
    TIER_THRESHOLDS,
    BandThresholds,
    TierThresholds,
)
from utils.validators import validate_unit_score

logger = structlog.get_logger(__name__)


class SimilarityClassifier:
    """Classifies similarity scores into display tiers and bands."""

    def __init__(
        self,
        thresholds: TierThresholds = TIER_THRESHOLDS,
        bands: BandThresholds = BAND_THRESHOLDS,
    ) -> None:
        self.thresholds = thresholds
        self.bands = bands

    def classify(self, score: Any) -> Classification:
        """
        Classify a score on the four-tier scale.

        Args:
            score: Similarity score in [0, 1]

        Returns:
            Classification with tier, ordinal color weight, color and label

        Raises:
            ContractViolation: If the score is outside [0, 1] or not a number
        """
        value = validate_unit_score(score)
        tier = self._get_tier(value)
        return Classification(
            tier=tier,
            color_weight=TIER_COLOR_WEIGHTS[tier.value],
            color=TIER_COLORS[tier.value],
            label=tier.value.capitalize(),
        )

    def classify_band(self, score: Any) -> BandClassification:
        """
        Classify a score on the three-band scale used for score bars.

        Raises:
            ContractViolation: If the score is outside [0, 1] or not a number
        """
        value = validate_unit_score(score)
        band = self._get_band(value)
        return BandClassification(band=band, color=BAND_COLORS[band.value])

    def classify_record(
        self, similarity: SimilarityRecord
    ) -> tuple[Classification, list[tuple[str, float, BandClassification]]]:
        """Classify the overall score and every present dimension."""
        overall = self.classify(similarity.overall)
        dimensions = [
            (label, value, self.classify_band(value))
            for label, value in similarity.dimensions()
        ]

        logger.debug(
            "Classified similarity record",
            phase="classification",
            tier=overall.tier.value,
            dimension_count=len(dimensions),
        )
        return overall, dimensions

    def _get_tier(self, score: float) -> SimilarityTier:
        """Get tier for an in-range score using inclusive lower bounds."""
        if score >= self.thresholds.excellent:
            return SimilarityTier.EXCELLENT
        elif score >= self.thresholds.good:
            return SimilarityTier.GOOD
        elif score >= self.thresholds.fair:
            return SimilarityTier.FAIR
        else:
            return SimilarityTier.POOR

    def _get_band(self, score: float) -> ScoreBand:
        if score >= self.bands.high:
            return ScoreBand.HIGH
        if score >= self.bands.medium:
            return ScoreBand.MEDIUM
        return ScoreBand.LOW


default_classifier = SimilarityClassifier()


def classify(score: Any) -> Classification:
    """Four-tier classification with the default thresholds."""
    return default_classifier.classify(score)


def classify_band(score: Any) -> BandClassification:
    """Three-band classification with the default thresholds."""
    return default_classifier.classify_band(score)


def format_percentage(score: float) -> str:
    """Format a similarity score as a percentage string."""
    return f"{score * 100:.1f}%"
