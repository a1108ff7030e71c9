"""Expand/collapse state for the results of one comparison session."""

from __future__ import annotations

import structlog

from models.comparison import ComparisonReport

logger = structlog.get_logger(__name__)


class ExpansionState:
    """Set of expanded result indices.

    Keys are positions in the report's result list, so the results must not
    be reordered after a report is loaded. Indices are not checked against
    the list bounds: toggling an index with no result simply has no visible
    effect.
    """

    def __init__(self) -> None:
        self._expanded: set[int] = set()

    @property
    def expanded(self) -> tuple[int, ...]:
        """Sorted snapshot of the expanded indices."""
        return tuple(sorted(self._expanded))

    def __contains__(self, index: object) -> bool:
        return index in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def is_expanded(self, index: int) -> bool:
        """Whether the result at index renders its detail body."""
        return index in self._expanded

    def initialize_all(self, count: int) -> None:
        """Expand every result; called once per newly loaded report."""
        self._expanded = set(range(max(count, 0)))

    def toggle(self, index: int) -> None:
        """Flip the expansion of one result."""
        if index in self._expanded:
            self._expanded.discard(index)
        else:
            self._expanded.add(index)

    def expand_all(self, count: int) -> None:
        """Expand every result of a list of count items."""
        self._expanded = set(range(max(count, 0)))

    def collapse_all(self) -> None:
        """Collapse every result."""
        self._expanded = set()

    def load_report(self, report: ComparisonReport | None) -> None:
        """Reset for a new report; no report leaves everything collapsed."""
        if report is None:
            self.collapse_all()
            return
        self.initialize_all(len(report.results))
        logger.debug(
            "Expansion state reset", phase="expansion", expanded=len(self._expanded)
        )
