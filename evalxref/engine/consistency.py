"""Consistency checks between an evaluation record and a reference record."""

import re
from difflib import SequenceMatcher

from evalxref.schemas.checks import (
    ComparisonChecks,
    ConsistencyPolicy,
    QueryMatch,
    QueryStatus,
    QueryVerdict,
    TemporalSign,
    TemporalStatus,
    TemporalVerdict,
)
from evalxref.storage.catalog import CatalogStore

_WHITESPACE = re.compile(r"\s+")


def normalize_query(query: str) -> str:
    """Collapse whitespace runs and casefold."""
    return _WHITESPACE.sub(" ", query).strip().casefold()


def _direction(subject_minus_reference: int) -> str:
    if subject_minus_reference > 0:
        return "newer"
    if subject_minus_reference < 0:
        return "older"
    return "same"


def check_temporal_difference(
    subject_id: str,
    reference_id: str,
    catalog: CatalogStore,
    tolerance_days: int = 30,
    sign: TemporalSign = TemporalSign.REFERENCE_MINUS_SUBJECT,
) -> TemporalVerdict:
    """
    Compare record dates.

    elapsed_days is reference - subject by default (positive: reference is
    newer), or subject - reference with SUBJECT_MINUS_REFERENCE. A missing
    record gives an UNRESOLVABLE verdict rather than an error.
    """
    if catalog is None:
        raise ValueError("catalog is required")
    if tolerance_days < 0:
        raise ValueError("tolerance_days must be >= 0")
    sign = TemporalSign(sign)

    subject = catalog.find_evaluation(subject_id)
    reference = catalog.find_evaluation(reference_id)
    if subject is None or reference is None:
        return TemporalVerdict(
            subject_id=subject_id,
            reference_id=reference_id,
            status=TemporalStatus.UNRESOLVABLE,
            tolerance_days=tolerance_days,
            sign=sign,
            subject_date=subject.date if subject else None,
            reference_date=reference.date if reference else None,
        )

    subject_minus_reference = (subject.date - reference.date).days
    if sign == TemporalSign.REFERENCE_MINUS_SUBJECT:
        elapsed = -subject_minus_reference
    else:
        elapsed = subject_minus_reference

    within = abs(elapsed) <= tolerance_days
    return TemporalVerdict(
        subject_id=subject_id,
        reference_id=reference_id,
        status=TemporalStatus.CONSISTENT if within else TemporalStatus.DRIFTED,
        tolerance_days=tolerance_days,
        sign=sign,
        subject_date=subject.date,
        reference_date=reference.date,
        elapsed_days=elapsed,
        direction=_direction(subject_minus_reference),
    )


def _similarity(a: str, b: str) -> float:
    if a == b:
        return 1.0
    return SequenceMatcher(None, a, b).ratio()


def check_query_consistency(
    subject_id: str,
    reference_id: str,
    catalog: CatalogStore,
    match: QueryMatch = QueryMatch.NORMALIZED,
    fuzzy_threshold: float = 0.9,
) -> QueryVerdict:
    """
    Compare record queries under the chosen criterion.

    EXACT compares raw text, NORMALIZED ignores whitespace runs and case,
    FUZZY accepts normalized texts whose similarity ratio is at least
    fuzzy_threshold.
    """
    if catalog is None:
        raise ValueError("catalog is required")
    if not 0.0 <= fuzzy_threshold <= 1.0:
        raise ValueError("fuzzy_threshold must be between 0 and 1")
    match = QueryMatch(match)

    subject = catalog.find_evaluation(subject_id)
    reference = catalog.find_evaluation(reference_id)
    if subject is None or reference is None:
        return QueryVerdict(
            subject_id=subject_id,
            reference_id=reference_id,
            status=QueryStatus.UNRESOLVABLE,
            match=match,
            subject_query=subject.query if subject else None,
            reference_query=reference.query if reference else None,
        )

    if match == QueryMatch.EXACT:
        a, b = subject.query, reference.query
    else:
        a, b = normalize_query(subject.query), normalize_query(reference.query)
    ratio = _similarity(a, b)

    if match == QueryMatch.FUZZY:
        same = ratio >= fuzzy_threshold
    else:
        same = a == b

    return QueryVerdict(
        subject_id=subject_id,
        reference_id=reference_id,
        status=QueryStatus.IDENTICAL if same else QueryStatus.DIVERGED,
        match=match,
        subject_query=subject.query,
        reference_query=reference.query,
        similarity=round(ratio, 4),
    )


def run_checks(
    subject_id: str,
    reference_id: str,
    catalog: CatalogStore,
    policy: ConsistencyPolicy | None = None,
) -> ComparisonChecks:
    """Run both checks under one policy."""
    policy = policy or ConsistencyPolicy()
    return ComparisonChecks(
        temporal=check_temporal_difference(
            subject_id,
            reference_id,
            catalog,
            tolerance_days=policy.tolerance_days,
            sign=policy.sign,
        ),
        query=check_query_consistency(
            subject_id,
            reference_id,
            catalog,
            match=policy.match,
            fuzzy_threshold=policy.fuzzy_threshold,
        ),
    )
