"""Evaluation and evaluator cross-reference endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from evalxref.datastore import get_catalog, get_policy
from evalxref.engine.conflicts import resolve_conflicts, resolve_conflicts_for_evaluation
from evalxref.engine.consistency import run_checks
from evalxref.engine.summary import summarize_evaluation
from evalxref.schemas.checks import (
    ComparisonChecks,
    ConflictLink,
    ConsistencyPolicy,
    EvaluationSummary,
)
from evalxref.storage.catalog import CatalogStore

router = APIRouter()

CatalogDep = Annotated[CatalogStore, Depends(get_catalog)]
PolicyDep = Annotated[ConsistencyPolicy, Depends(get_policy)]


@router.get("/evaluations/{evaluation_id}", response_model=EvaluationSummary)
def get_evaluation(
    evaluation_id: str,
    catalog: CatalogDep,
    policy: PolicyDep,
    reference: str | None = None,
    include_conflicts: bool = True,
):
    """
    Summary of one evaluation: evaluator, systems, conflicts, shape.
    With `reference`, also the temporal and query checks against it.
    """
    summary = summarize_evaluation(
        evaluation_id,
        catalog,
        reference_id=reference,
        policy=policy,
        include_conflicts=include_conflicts,
    )
    if summary is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No data found for this ID",
        )
    return summary


@router.get("/evaluations/{evaluation_id}/conflicts", response_model=list[ConflictLink])
def get_evaluation_conflicts(evaluation_id: str, catalog: CatalogDep):
    """Conflict links of the evaluation's evaluator ([] when unresolvable)."""
    return resolve_conflicts_for_evaluation(evaluation_id, catalog)


@router.get("/evaluations/{evaluation_id}/checks", response_model=ComparisonChecks)
def get_evaluation_checks(
    evaluation_id: str,
    catalog: CatalogDep,
    policy: PolicyDep,
    reference: Annotated[str, Query(description="Current evaluation id")],
):
    """Temporal and query checks; missing records give 'unresolvable' verdicts."""
    return run_checks(evaluation_id, reference, catalog, policy)


@router.get("/evaluators/{evaluator_id}/conflicts", response_model=list[ConflictLink])
def get_evaluator_conflicts(evaluator_id: str, catalog: CatalogDep):
    """Conflict links declared by an evaluator."""
    evaluator = catalog.find_evaluator(evaluator_id)
    if not evaluator:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Evaluator not found",
        )
    return resolve_conflicts(evaluator, catalog)
