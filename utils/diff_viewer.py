"""Diff viewer utility for document comparison reports."""

import html
from typing import Any

from core.segment_grouper import group_segments
from shared.config import DEFAULT_MAX_GROUP_CHARS, ERROR_MESSAGES, OPERATION_LABELS
from utils.text_truncator import format_truncation_notice, truncate_text, visible_text


def get_diff_styles() -> str:
    """Return CSS for diff groups, score bars and statistic cards."""
    base_styles = """
    .diff-viewer {
        font-family: 'Courier New', monospace;
        background: #f6f8fa;
        border: 1px solid #d1d5da;
        border-radius: 6px;
        padding: 12px;
        overflow-x: auto;
    }
    .diff-segment {
        white-space: pre-wrap;
        word-break: break-word;
        line-height: 1.5;
        display: block;
        margin-bottom: 4px;
    }
    .diff-segment.equal {
        background-color: #ffffff;
        color: #24292e;
    }
    .diff-segment.delete {
        background-color: #ffeef0;
        color: #cb2431;
    }
    .diff-segment.insert {
        background-color: #fff5b4;
        color: #735c0f;
    }
    .diff-segment.replace {
        background-color: #ffe4cc;
        color: #b35900;
    }
    .operation-label {
        font-weight: bold;
        user-select: none;
        padding-right: 8px;
    }
    .truncation-notice {
        color: #6a737d;
        font-style: italic;
    }
    .score-bar-container {
        background: #e1e4e8;
        border-radius: 3px;
        height: 8px;
    }
    .score-bar-fill {
        height: 8px;
        border-radius: 3px;
    }
    .empty-diff {
        color: #6a737d;
    }"""

    return f"<style>{base_styles}</style>"


class ComparisonDiffRenderer:
    """Render grouped diff segments and similarity scores as HTML."""

    def __init__(self, max_length: int = DEFAULT_MAX_GROUP_CHARS):
        self.max_length = max_length

    def render_segments(self, segments) -> str:
        """Group, truncate and render segments.

        A truncated group shows its visible prefix followed by the
        truncation notice, so the marker is not repeated.

        Args:
            segments: Diff segments in document order (models or raw dicts)

        Returns:
            HTML string with embedded CSS
        """
        groups = group_segments(segments)
        if not groups:
            return f'<div class="empty-diff">{ERROR_MESSAGES["no_differences"]}</div>'

        rows = []
        for group in groups:
            operation = group.operation.value
            label = OPERATION_LABELS[operation]
            bounded = truncate_text(group.text, self.max_length)
            notice = format_truncation_notice(bounded)
            notice_html = (
                f'<span class="truncation-notice">{html.escape(notice)}</span>'
                if notice
                else ""
            )
            rows.append(
                f'<div class="diff-segment {operation}" '
                f'title="{label} - {group.original_length} chars">'
                f'<span class="operation-label">{label}</span>'
                f'<span class="segment-text">{html.escape(visible_text(bounded))}</span>'
                f"{notice_html}"
                f"</div>"
            )

        content = "".join(rows)
        return f'{get_diff_styles()}<div class="diff-viewer"><div class="diff-content">{content}</div></div>'

    def render_score_bar(self, bar: dict[str, Any]) -> str:
        """Render a score bar built by the report transformers."""
        return (
            f'<div class="score-item">'
            f'<div class="score-header">'
            f'<span class="score-label">{html.escape(bar["label"])}</span>'
            f'<span class="score-percentage">{bar["percentage"]}</span>'
            f"</div>"
            f'<div class="score-bar-container">'
            f'<div class="score-bar-fill" style="width: {bar["width"]}; '
            f'background-color: {bar["color"]};"></div>'
            f"</div></div>"
        )

    def render_statistics(self, cards: list[dict[str, str]]) -> str:
        """Render the statistic cards of a report header."""
        items = "".join(
            f'<div class="stat-card {card["key"]}">'
            f'<span class="stat-label">{html.escape(card["label"])}</span>'
            f'<span class="stat-value">{html.escape(card["value"])}</span>'
            f"</div>"
            for card in cards
        )
        return f'<div class="stats-grid">{items}</div>'
