"""Core report-building modules for document comparison."""

from .errors import ContractViolation

__all__ = [
    "ContractViolation",
]
