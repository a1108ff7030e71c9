"""Shared test configuration and fixtures for all tests."""

import os

import pytest

# Mock environment variables for testing
os.environ["COMPARE_BACKEND_URL"] = "http://localhost:8000"

from models.comparison import ComparisonResult, Segment, SimilarityRecord  # noqa: E402


def _make_result(
    operations: list[str] | None,
    overall: float,
    item_id: str = "item",
    item_type: str = "section",
) -> ComparisonResult:
    """Build a comparison result whose segments carry the given operations."""
    segments = (
        [Segment(operation=op, text=f"{op}-{i} ") for i, op in enumerate(operations)]
        if operations is not None
        else None
    )
    return ComparisonResult(
        item_type=item_type,
        item_id=item_id,
        similarity=SimilarityRecord(
            overall=overall,
            structural=overall,
            content=overall,
            lexical=overall,
            semantic=overall,
        ),
        segments=segments,
    )


@pytest.fixture
def make_result():
    """Factory for comparison results with the given segment operations."""
    return _make_result


@pytest.fixture
def sample_segments() -> list[Segment]:
    """Segments with runs of repeated operations."""
    return [
        Segment(operation="equal", text="The quick "),
        Segment(operation="equal", text="brown fox "),
        Segment(operation="delete", text="jumps "),
        Segment(operation="insert", text="leaps "),
        Segment(operation="insert", text="gracefully "),
        Segment(operation="equal", text="over the dog."),
    ]


@pytest.fixture
def sample_report_data() -> dict:
    """Raw JSON body of a comparison response."""
    return {
        "file_id_1": "doc-a",
        "file_id_2": "doc-b",
        "mode": "section",
        "comparison_time_seconds": 1.5,
        "total_comparisons": 2,
        "results": [
            {
                "item_type": "section",
                "item_id": "1. Introduction",
                "similarity": {
                    "overall": 0.8,
                    "structural": 0.9,
                    "content": 0.7,
                    "lexical": 0.6,
                    "semantic": 0.85,
                    "embedding": 0.4,
                },
                "segments": [
                    {"operation": "equal", "text": "Hello "},
                    {"operation": "equal", "text": "world"},
                    {"operation": "insert", "text": "!"},
                ],
                "metadata": {"page": 1, "headings": ["Intro", "Scope"]},
            },
            {
                "item_type": "table",
                "item_id": "Table 2",
                "similarity": {
                    "overall": 0.6,
                    "structural": 0.5,
                    "content": 0.6,
                    "lexical": 0.4,
                    "semantic": 0.7,
                    "embedding": None,
                },
                "segments": [{"operation": "delete", "text": "row 3"}],
                "metadata": None,
            },
        ],
    }

