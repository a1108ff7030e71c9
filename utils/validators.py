"""
Shared validation utilities for comparison report data.

These checks are used by the pydantic models and by the similarity
classifier so that a malformed upstream record fails the same way no matter
where it is first seen.
"""

import math
from typing import Any

import structlog

from core.errors import ContractViolation

logger = structlog.get_logger(__name__)

VALID_OPERATIONS = ("equal", "delete", "insert", "replace")


def validate_unit_score(value: Any, field: str = "score") -> float:
    """
    Validate that a similarity score lies within [0, 1].

    Args:
        value: Score to validate
        field: Name used in the error message

    Returns:
        The score as a float

    Raises:
        ContractViolation: If the score is non-numeric, NaN or out of range
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ContractViolation(
            f"{field} must be a number, got {type(value).__name__}",
            field=field,
            value=value,
        )

    # Compare ints exactly; float() overflows on huge values
    if isinstance(value, int):
        in_range = 0 <= value <= 1
        shown = str(value) if in_range or abs(value) < 10**12 else f"an integer of {value.bit_length()} bits"
    else:
        in_range = not math.isnan(value) and 0.0 <= value <= 1.0
        shown = str(value)

    if not in_range:
        logger.warning(
            "Similarity score outside [0, 1]",
            phase="validation",
            field=field,
            value=shown,
        )
        raise ContractViolation(
            f"{field} must be within [0, 1], got {shown}", field=field, value=value
        )
    return float(value)


def validate_operation(value: Any) -> str:
    """
    Validate a segment operation tag.

    Args:
        value: Raw operation tag (string or enum member)

    Returns:
        The operation tag as a plain string

    Raises:
        ContractViolation: If the tag is not a known edit operation
    """
    tag = getattr(value, "value", value)
    if tag not in VALID_OPERATIONS:
        logger.warning(
            "Unknown segment operation", phase="validation", operation=repr(tag)
        )
        raise ContractViolation(
            f"Unknown segment operation: {tag!r}", field="operation", value=value
        )
    return tag
