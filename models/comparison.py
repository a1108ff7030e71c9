"""
Pydantic models for document comparison reports.

These models define the data structures exchanged with the comparison
backend and the derived, display-only views built from them:
- Diff segments and similarity records received from upstream
- Per-item comparison results and the enclosing report
- Display groups, truncated text and aggregate statistics
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from core.errors import ContractViolation
from utils.validators import validate_operation, validate_unit_score


class OperationKind(str, Enum):
    """Edit classification of a diff segment."""

    EQUAL = "equal"  # present in both documents
    DELETE = "delete"  # only in the first document
    INSERT = "insert"  # only in the second document
    REPLACE = "replace"  # changed content


class ComparisonMode(str, Enum):
    """Granularity requested from the comparison backend."""

    PAGE = "page"
    SECTION = "section"
    TABLE = "table"
    STRING = "string"
    STRUCTURE = "structure"


class SimilarityTier(str, Enum):
    """Four-tier classification used for the overall similarity badge."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ScoreBand(str, Enum):
    """Three-band classification used for per-dimension score bars."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Segment(BaseModel):
    """An atomic span of text tagged with one edit operation."""

    model_config = ConfigDict(frozen=True)

    operation: OperationKind = Field(description="Edit operation for this span")
    text: str = Field(description="Text covered by the segment")

    @field_validator("operation", mode="before")
    @classmethod
    def validate_known_operation(cls, v: Any) -> str:
        """Reject operation tags outside the known edit operations."""
        return validate_operation(v)


class SimilarityRecord(BaseModel):
    """Multi-dimensional similarity scores, all within [0, 1]."""

    model_config = ConfigDict(frozen=True)

    overall: float = Field(description="Combined similarity score")
    structural: float = Field(description="Layout and structure similarity")
    content: float = Field(description="Content similarity")
    lexical: float = Field(description="Token-level similarity")
    semantic: float = Field(description="Meaning-level similarity")
    embedding: float | None = Field(
        None, description="Embedding similarity, only for modes that compute it"
    )

    @field_validator(
        "overall", "structural", "content", "lexical", "semantic", "embedding", mode="before"
    )
    @classmethod
    def validate_score_range(cls, v: Any, info) -> float | None:
        """Ensure every present score is a number within [0, 1], uncoerced."""
        if v is None:
            return v
        return validate_unit_score(v, field=info.field_name)

    def dimensions(self) -> list[tuple[str, float]]:
        """Labelled per-dimension scores in display order.

        Embedding is only included when the comparison mode computed it.
        """
        scores = [
            ("Structural", self.structural),
            ("Content", self.content),
            ("Lexical", self.lexical),
            ("Semantic", self.semantic),
        ]
        if self.embedding is not None:
            scores.append(("Embedding", self.embedding))
        return scores


class ComparisonResult(BaseModel):
    """Comparison outcome for a single page, section, table or string match."""

    item_type: str = Field(description="Kind of compared unit")
    item_id: str = Field(description="Identifier of the compared unit")
    similarity: SimilarityRecord
    segments: list[Segment] | None = Field(
        None, description="Granular diff, absent for modes without one"
    )
    metadata: dict[str, Any] | None = Field(None)

    @property
    def has_segments(self) -> bool:
        """Whether the result carries a non-empty granular diff."""
        return bool(self.segments)


class ComparisonReport(BaseModel):
    """Complete comparison run between two documents."""

    file_id_1: str
    file_id_2: str
    mode: str = Field(description="Comparison mode used by the backend")
    comparison_time_seconds: float = Field(ge=0)
    total_comparisons: int = Field(ge=0)
    results: list[ComparisonResult] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_total_comparisons(self) -> "ComparisonReport":
        """Ensure the declared total matches the number of results."""
        if self.total_comparisons != len(self.results):
            raise ContractViolation(
                f"total_comparisons ({self.total_comparisons}) does not match "
                f"number of results ({len(self.results)})",
                field="total_comparisons",
                value=self.total_comparisons,
            )
        return self


class ComparisonRequest(BaseModel):
    """JSON body of a document comparison request."""

    file_id_1: str
    file_id_2: str
    mode: ComparisonMode = ComparisonMode.SECTION
    query: str | None = None


class DisplayGroup(BaseModel):
    """A maximal run of consecutive same-operation segments."""

    operation: OperationKind
    text: str
    original_length: int = Field(ge=0)


class TruncatedText(BaseModel):
    """Text bounded for rendering, with the untruncated length retained."""

    shown: str
    truncated: bool
    total_length: int = Field(ge=0)


class Classification(BaseModel):
    """Four-tier classification of a similarity score."""

    tier: SimilarityTier
    color_weight: float
    color: str
    label: str


class BandClassification(BaseModel):
    """Three-band classification of a per-dimension score."""

    band: ScoreBand
    color: str


class AggregateStats(BaseModel):
    """Segment-level operation counts and mean overall similarity."""

    equal: int = 0
    delete: int = 0
    insert: int = 0
    replace: int = 0
    avg_similarity: float = 0.0

    def count_for(self, operation: OperationKind | str) -> int:
        """Count for a single operation."""
        return getattr(self, OperationKind(operation).value)


def _unwrap_contract_violation(error: ValidationError) -> ContractViolation | None:
    """Return the first ContractViolation wrapped inside a ValidationError."""
    for detail in error.errors():
        cause = (detail.get("ctx") or {}).get("error")
        if isinstance(cause, ContractViolation):
            return cause
    return None


def parse_segment(data: Segment | Mapping[str, Any]) -> Segment:
    """
    Build a Segment from raw data.

    Raises:
        ContractViolation: If the operation tag is unknown
        ValidationError: For any other malformed input
    """
    if isinstance(data, Segment):
        return data
    try:
        return Segment.model_validate(data)
    except ValidationError as e:
        violation = _unwrap_contract_violation(e)
        if violation is not None:
            raise violation from e
        raise


def parse_report(data: Mapping[str, Any]) -> ComparisonReport:
    """
    Build a ComparisonReport from a decoded JSON response body.

    Raises:
        ContractViolation: For out-of-range scores, unknown operation tags or
            a total_comparisons mismatch
        ValidationError: For any other malformed input
    """
    try:
        return ComparisonReport.model_validate(data)
    except ValidationError as e:
        violation = _unwrap_contract_violation(e)
        if violation is not None:
            raise violation from e
        raise
