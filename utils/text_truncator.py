"""Text truncation for bounded diff rendering."""

import structlog

from models.comparison import TruncatedText
from shared.config import DEFAULT_MAX_GROUP_CHARS, TRUNCATION_MARKER

logger = structlog.get_logger(__name__)


def truncate_text(text: str, max_length: int = DEFAULT_MAX_GROUP_CHARS) -> TruncatedText:
    """Bound text to max_length characters for rendering.

    Slicing works on code points, so multi-byte characters are never split.
    The marker is appended after the visible characters when anything was
    cut, and total_length always reports the untruncated length.

    Args:
        text: Text to bound
        max_length: Maximum number of visible characters

    Returns:
        TruncatedText with shown text, truncated flag and total length
    """
    total_length = len(text)

    if max_length <= 0:
        logger.debug(
            "Non-positive truncation bound", phase="truncation", max_length=max_length
        )
        return TruncatedText(shown="", truncated=True, total_length=total_length)

    if total_length <= max_length:
        return TruncatedText(shown=text, truncated=False, total_length=total_length)

    return TruncatedText(
        shown=text[:max_length] + TRUNCATION_MARKER,
        truncated=True,
        total_length=total_length,
    )


def visible_text(result: TruncatedText) -> str:
    """Shown text without the truncation marker."""
    if result.truncated and result.shown.endswith(TRUNCATION_MARKER):
        return result.shown[: -len(TRUNCATION_MARKER)]
    return result.shown


def format_truncation_notice(result: TruncatedText) -> str:
    """Notice shown under a truncated group, empty when nothing was cut."""
    if not result.truncated:
        return ""
    return f"... ({result.total_length} chars total)"
