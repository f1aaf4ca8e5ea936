"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from evalxref.config import Settings
from evalxref.schemas.checks import QueryMatch, TemporalSign


def test_defaults():
    """Default policy: 30 days, reference minus subject, normalized text."""
    policy = Settings(_env_file=None).consistency_policy()
    assert policy.tolerance_days == 30
    assert policy.sign == TemporalSign.REFERENCE_MINUS_SUBJECT
    assert policy.match == QueryMatch.NORMALIZED


def test_env_overrides(monkeypatch):
    """Environment variables configure the policy."""
    monkeypatch.setenv("DRIFT_TOLERANCE_DAYS", "7")
    monkeypatch.setenv("QUERY_MATCH", "Fuzzy")
    monkeypatch.setenv("TEMPORAL_SIGN", "SUBJECT_MINUS_REFERENCE")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.drift_tolerance_days == 7
    assert s.query_match == QueryMatch.FUZZY
    assert s.temporal_sign == TemporalSign.SUBJECT_MINUS_REFERENCE
    assert s.log_level == "DEBUG"


def test_negative_tolerance_rejected():
    """Tolerance must be non-negative."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, drift_tolerance_days=-1)


def test_threshold_range():
    """Fuzzy threshold must be within [0, 1]."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, fuzzy_threshold=1.5)
