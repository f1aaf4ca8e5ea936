"""Catalog entity schemas - systems, evaluators, evaluation records."""

import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class System(BaseModel):
    """Information-retrieval system with a `%s` search-link template."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    search_link: str = ""


class Evaluator(BaseModel):
    """Person who authored evaluations, with declared conflicts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    role: str = ""
    url: str | None = Field(default=None, alias="URL")
    conflict: tuple[str, ...] | None = None

    @property
    def conflicts(self) -> tuple[str, ...]:
        """Declared conflict system ids; absent means none."""
        return self.conflict if self.conflict is not None else ()


class EvaluationPart(BaseModel):
    """Sub-evaluation nested one level under an evaluation record."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    query: str = ""
    date: datetime.date | None = None
    url: str | None = None
    evaluator_id: str | None = None
    systems: tuple[str, ...] = ()


class EvaluationRecord(BaseModel):
    """One query-and-results assessment."""

    model_config = ConfigDict(frozen=True)

    id: str
    query: str
    date: datetime.date
    url: str | None = None
    evaluator_id: str | None = None
    systems: tuple[str, ...] = ()
    eval_parts: tuple[EvaluationPart, ...] | None = None


class Leaf(BaseModel):
    """Record rendered as a single evaluation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    record: EvaluationRecord


class Container(BaseModel):
    """Record whose eval_parts replace the record itself."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["container"] = "container"
    record: EvaluationRecord
    parts: tuple[EvaluationPart, ...]

    @field_serializer("record")
    def _record_without_parts(self, record: EvaluationRecord, info) -> dict:
        # parts are already carried once, in `parts`
        return record.model_dump(mode=info.mode, exclude={"eval_parts"})


RecordShape = Annotated[Union[Leaf, Container], Field(discriminator="kind")]


def shape_for(record: EvaluationRecord) -> Leaf | Container:
    """Classify a record; an empty eval_parts list still counts as a container."""
    if record.eval_parts is not None:
        return Container(record=record, parts=record.eval_parts)
    return Leaf(record=record)


class CatalogDocument(BaseModel):
    """On-disk catalog layout (JSON)."""

    systems: list[System] = Field(default_factory=list)
    evaluators: list[Evaluator] = Field(default_factory=list)
    evaluations: list[EvaluationRecord] = Field(default_factory=list)
