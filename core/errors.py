"""Typed failures raised by the comparison report engine."""

from typing import Any


class ContractViolation(ValueError):
    """Upstream data broke the comparison report contract.

    Raised for similarity scores outside [0, 1], unknown segment operation
    tags and reports whose ``total_comparisons`` disagrees with ``results``.
    Empty inputs are never contract violations.
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value
