"""Derived cross-reference schemas - conflict links and consistency verdicts."""

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from evalxref.schemas.catalog import RecordShape


class TemporalSign(str, Enum):
    """Which date is subtracted from which for elapsed_days."""

    REFERENCE_MINUS_SUBJECT = "reference_minus_subject"
    SUBJECT_MINUS_REFERENCE = "subject_minus_reference"


class QueryMatch(str, Enum):
    """Query comparison criterion."""

    EXACT = "exact"
    NORMALIZED = "normalized"
    FUZZY = "fuzzy"


class TemporalStatus(str, Enum):
    UNRESOLVABLE = "unresolvable"
    CONSISTENT = "consistent"
    DRIFTED = "drifted"


class QueryStatus(str, Enum):
    UNRESOLVABLE = "unresolvable"
    IDENTICAL = "identical"
    DIVERGED = "diverged"


class ConsistencyPolicy(BaseModel):
    """Tolerances for the temporal and query checks."""

    model_config = ConfigDict(frozen=True)

    tolerance_days: int = Field(default=30, ge=0)
    sign: TemporalSign = TemporalSign.REFERENCE_MINUS_SUBJECT
    match: QueryMatch = QueryMatch.NORMALIZED
    fuzzy_threshold: float = Field(default=0.9, ge=0.0, le=1.0)


class ConflictLink(BaseModel):
    """Actionable conflict-of-interest disclosure for one system."""

    model_config = ConfigDict(frozen=True)

    system_id: str
    system_name: str
    search_link: str
    disambiguation_query: str
    tooltip: str


class TemporalVerdict(BaseModel):
    """Temporal-difference check result.

    elapsed_days follows `sign`; with the default convention a positive value
    means the reference is newer than the subject. `direction` always
    describes the subject relative to the reference.
    """

    model_config = ConfigDict(frozen=True)

    subject_id: str
    reference_id: str
    status: TemporalStatus
    tolerance_days: int
    sign: TemporalSign
    subject_date: datetime.date | None = None
    reference_date: datetime.date | None = None
    elapsed_days: int | None = None
    direction: str | None = None

    def describe(self) -> str:
        """Short human-readable form, e.g. '400 days older'."""
        if self.status == TemporalStatus.UNRESOLVABLE:
            return "no data"
        if self.direction == "same":
            return "same date"
        days = abs(self.elapsed_days or 0)
        unit = "day" if days == 1 else "days"
        return f"{days} {unit} {self.direction}"


class QueryVerdict(BaseModel):
    """Query-consistency check result."""

    model_config = ConfigDict(frozen=True)

    subject_id: str
    reference_id: str
    status: QueryStatus
    match: QueryMatch
    subject_query: str | None = None
    reference_query: str | None = None
    similarity: float | None = None


class ComparisonChecks(BaseModel):
    """Both checks of one record against a reference record."""

    model_config = ConfigDict(frozen=True)

    temporal: TemporalVerdict
    query: QueryVerdict


class EvaluatorInfo(BaseModel):
    """Evaluator details shown next to an evaluation."""

    id: str
    name: str
    role: str = ""
    url: str | None = None


class SystemLink(BaseModel):
    """Evaluated system with the record's query pre-filled."""

    system_id: str
    name: str
    search_link: str


class EvaluationSummary(BaseModel):
    """Presentation-ready view of one evaluation record."""

    id: str
    query: str
    date: datetime.date
    url: str | None = None
    evaluator: EvaluatorInfo | None = None
    systems_evaluated: list[str] = Field(default_factory=list)
    system_links: list[SystemLink] = Field(default_factory=list)
    conflict_notice: str | None = None
    conflicts: list[ConflictLink] = Field(default_factory=list)
    shape: RecordShape
    is_reference: bool = False
    checks: ComparisonChecks | None = None
