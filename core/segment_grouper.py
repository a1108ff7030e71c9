"""
Segment grouping for diff display.

Consecutive segments that share an edit operation are merged into a single
display group so a fine-grained diff renders as a compact sequence of
blocks.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from models.comparison import DisplayGroup, Segment, parse_segment

logger = structlog.get_logger(__name__)


def group_segments(
    segments: Sequence[Segment | Mapping[str, Any]] | None,
) -> list[DisplayGroup]:
    """Merge consecutive same-operation segments into display groups.

    Args:
        segments: Diff segments in document order. Raw mappings are validated
            into Segment first.

    Returns:
        Groups in document order. Concatenating their text reproduces the
        concatenated segment text and no two neighbours share an operation.

    Raises:
        ContractViolation: If a raw segment carries an unknown operation
    """
    if not segments:
        return []

    grouped: list[DisplayGroup] = []
    current: DisplayGroup | None = None

    for raw in segments:
        segment = parse_segment(raw)
        if current is not None and segment.operation == current.operation:
            # Same operation, combine text
            current.text += segment.text
            current.original_length += len(segment.text)
            continue

        if current is not None:
            grouped.append(current)
        current = DisplayGroup(
            operation=segment.operation,
            text=segment.text,
            original_length=len(segment.text),
        )

    grouped.append(current)

    logger.debug(
        "Grouped diff segments",
        phase="grouping",
        segment_count=len(segments),
        group_count=len(grouped),
    )
    return grouped
