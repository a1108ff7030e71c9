"""Viewer session tying a comparison fetch to expansion state and display."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from app.expansion_state import ExpansionState
from app.utils.report_transformers import build_report_view
from frontend.api_client import ComparisonAPIClient
from models.comparison import ComparisonMode, ComparisonReport

logger = structlog.get_logger(__name__)


class ComparisonViewerSession:
    """One viewer's comparison between two documents.

    Holds at most one report and one error. Each call to ``fetch`` issues a
    single request; a failure is kept until the caller fetches again.
    """

    def __init__(
        self,
        client: ComparisonAPIClient,
        file_id_1: str,
        file_id_2: str,
        mode: ComparisonMode | str = ComparisonMode.SECTION,
        query: str | None = None,
        on_complete: Callable[[ComparisonReport], None] | None = None,
    ) -> None:
        self.client = client
        self.file_id_1 = file_id_1
        self.file_id_2 = file_id_2
        self.mode = mode
        self.query = query
        self.on_complete = on_complete

        self.report: ComparisonReport | None = None
        self.error: str | None = None
        self.expansion = ExpansionState()

    def fetch(self) -> bool:
        """Request the comparison and load it on success.

        Returns:
            Whether a report was loaded
        """
        self.error = None
        success, value = self.client.compare_documents(
            self.file_id_1, self.file_id_2, mode=self.mode, query=self.query
        )
        if not success:
            self.error = value
            logger.warning(
                "Comparison fetch failed",
                phase="viewer",
                file_id_1=self.file_id_1,
                file_id_2=self.file_id_2,
                error=value,
            )
            return False

        self.report = value
        self.expansion.load_report(value)
        if self.on_complete is not None:
            self.on_complete(value)
        return True

    def retry(self) -> bool:
        """Manually re-run a failed (or any) comparison."""
        logger.info("Retrying comparison", phase="viewer", previous_error=self.error)
        return self.fetch()

    def toggle(self, index: int) -> None:
        self.expansion.toggle(index)

    def expand_all(self) -> None:
        count = len(self.report.results) if self.report is not None else 0
        self.expansion.expand_all(count)

    def collapse_all(self) -> None:
        self.expansion.collapse_all()

    def view(self) -> dict[str, Any]:
        """Display model for the current session state."""
        return build_report_view(self.report, self.expansion, error=self.error)
