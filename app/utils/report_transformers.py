"""Pure transformer functions for comparison report display.

These functions compose grouping, truncation, classification and
aggregation into display-ready dicts. They are pure functions (no side
effects) and are recomputed whenever the report changes.
"""

from __future__ import annotations

import json
from typing import Any

from app.expansion_state import ExpansionState
from config import settings
from core.result_aggregator import aggregate_results
from core.segment_grouper import group_segments
from core.similarity_classifier import SimilarityClassifier, default_classifier, format_percentage
from models.comparison import ComparisonReport, ComparisonResult, DisplayGroup, OperationKind
from shared.config import (
    DEFAULT_MAX_GROUP_CHARS,
    ERROR_MESSAGES,
    LEGEND_LABELS,
    OPERATION_LABELS,
    STAT_LABELS,
)
from utils.text_truncator import format_truncation_notice, truncate_text


def format_metadata_value(value: Any) -> str:
    """Format a metadata value for display; containers are shown as JSON."""
    if isinstance(value, dict | list):
        return json.dumps(value)
    return str(value)


def transform_group(group: DisplayGroup, max_length: int = DEFAULT_MAX_GROUP_CHARS) -> dict[str, Any]:
    """Build the display dict for a single diff group."""
    bounded = truncate_text(group.text, max_length)
    label = OPERATION_LABELS[group.operation.value]
    return {
        "operation": group.operation.value,
        "label": label,
        "title": f"{label} - {group.original_length} chars",
        "text": bounded.shown,
        "truncated": bounded.truncated,
        "notice": format_truncation_notice(bounded),
        "total_length": bounded.total_length,
    }


def transform_result_card(
    result: ComparisonResult,
    index: int,
    expanded: bool = True,
    classifier: SimilarityClassifier = default_classifier,
    max_length: int = DEFAULT_MAX_GROUP_CHARS,
) -> dict[str, Any]:
    """Transform one comparison result into display-ready card data.

    The detail body (score bars, diff groups, metadata) is only built for
    expanded cards.
    """
    overall, dimensions = classifier.classify_record(result.similarity)
    card: dict[str, Any] = {
        "index": index,
        "item_type": result.item_type.upper(),
        "item_id": result.item_id,
        "expanded": expanded,
        "toggle_icon": "▼" if expanded else "▶",
        "badge": {
            "value": format_percentage(result.similarity.overall),
            "tier": overall.tier.value,
            "label": overall.label,
            "color": overall.color,
            "color_weight": overall.color_weight,
        },
    }
    if not expanded:
        return card

    card["score_bars"] = [
        {
            "label": label,
            "percentage": format_percentage(value),
            "width": f"{value * 100:.1f}%",
            "band": band.band.value,
            "color": band.color,
        }
        for label, value, band in dimensions
    ]
    card["groups"] = (
        [transform_group(group, max_length) for group in group_segments(result.segments)]
        if result.has_segments
        else []
    )
    card["metadata"] = [
        {"key": key, "value": format_metadata_value(value)}
        for key, value in (result.metadata or {}).items()
    ]
    return card


def transform_statistics(results: list[ComparisonResult]) -> list[dict[str, Any]]:
    """Statistic cards for the report header."""
    stats = aggregate_results(results)
    cards = [
        {
            "key": "avg_similarity",
            "label": STAT_LABELS["avg_similarity"],
            "value": format_percentage(stats.avg_similarity),
        }
    ]
    for operation in OperationKind:
        cards.append(
            {
                "key": operation.value,
                "label": STAT_LABELS[operation.value],
                "value": str(stats.count_for(operation)),
            }
        )
    return cards


def legend_items() -> list[dict[str, str]]:
    return [{"operation": op, "label": label} for op, label in LEGEND_LABELS.items()]


def build_report_view(
    report: ComparisonReport | None,
    expansion: ExpansionState,
    classifier: SimilarityClassifier = default_classifier,
    max_length: int | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Build the complete display model for a comparison report.

    A failed fetch takes precedence over any previously loaded report and
    yields a failure view with a manual retry. A missing report is a valid
    state and yields an empty-state view.
    """
    if error is not None:
        return {
            "empty": False,
            "failed": True,
            "title": ERROR_MESSAGES["comparison_failed_title"],
            "message": error or ERROR_MESSAGES["comparison_failed"],
            "retry_label": ERROR_MESSAGES["retry"],
        }
    if report is None:
        return {"empty": True, "failed": False, "message": ERROR_MESSAGES["missing_report"]}
    if max_length is None:
        max_length = settings.max_group_chars

    return {
        "empty": False,
        "failed": False,
        "header": {
            "file_id_1": report.file_id_1,
            "file_id_2": report.file_id_2,
            "mode": report.mode,
            "time": f"{report.comparison_time_seconds:.2f}s",
        },
        "legend": legend_items(),
        "statistics": transform_statistics(report.results),
        "results_title": f"Detailed Comparison ({report.total_comparisons} items)",
        "results": [
            transform_result_card(
                result,
                index,
                expanded=expansion.is_expanded(index),
                classifier=classifier,
                max_length=max_length,
            )
            for index, result in enumerate(report.results)
        ],
        "footer": (
            f"Comparison completed in {report.comparison_time_seconds:.3f} seconds"
        ),
    }
