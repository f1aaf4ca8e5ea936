"""API tests against an in-memory catalog."""

import pytest
from fastapi.testclient import TestClient

from evalxref.datastore import get_catalog, get_policy
from evalxref.main import app
from evalxref.schemas.checks import ConsistencyPolicy


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_policy] = lambda: ConsistencyPolicy(tolerance_days=30)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    """Health check responds ok."""
    assert client.get("/health").json() == {"status": "ok"}


def test_metrics(client):
    """Metrics expose counts and a 64-char fingerprint."""
    body = client.get("/metrics").json()
    assert body["catalog"]["evaluations"] == 4
    assert len(body["catalog_hash"]) == 64


def test_evaluation_summary(client):
    """Summary includes conflicts and shape."""
    resp = client.get("/v1/evaluations/A")
    assert resp.status_code == 200
    body = resp.json()
    assert body["evaluator"]["name"] == "Erin Example"
    assert body["shape"]["kind"] == "leaf"
    assert body["conflicts"][0]["search_link"].startswith("https://s1.test/?q=How+is+")
    assert body["checks"] is None


def test_evaluation_summary_with_reference(client):
    """reference= adds verdicts."""
    body = client.get("/v1/evaluations/A", params={"reference": "B"}).json()
    assert body["checks"]["temporal"]["status"] == "drifted"
    assert body["checks"]["temporal"]["elapsed_days"] == 400
    assert body["checks"]["query"]["status"] == "identical"


def test_evaluation_not_found(client):
    """Unknown evaluation is a 404."""
    assert client.get("/v1/evaluations/missing").status_code == 404


def test_evaluation_conflicts(client):
    """Conflict endpoint never 404s."""
    assert len(client.get("/v1/evaluations/A/conflicts").json()) == 1
    resp = client.get("/v1/evaluations/missing/conflicts")
    assert resp.status_code == 200
    assert resp.json() == []


def test_checks_unresolvable(client):
    """Missing reference gives unresolvable verdicts with 200."""
    resp = client.get("/v1/evaluations/A/checks", params={"reference": "missing"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["temporal"]["status"] == "unresolvable"
    assert body["query"]["status"] == "unresolvable"


def test_checks_require_reference(client):
    """reference is a required query parameter."""
    assert client.get("/v1/evaluations/A/checks").status_code == 422


def test_evaluator_conflicts(client):
    """Evaluator endpoint resolves declared conflicts."""
    body = client.get("/v1/evaluators/DUP/conflicts").json()
    assert [c["system_id"] for c in body] == ["S3", "S1", "S3"]
    assert client.get("/v1/evaluators/nobody/conflicts").status_code == 404


def test_root(client):
    """Root banner names the service."""
    assert client.get("/").json()["service"] == "evalxref"


def test_container_summary_json(client):
    """Container parts appear once in the response."""
    shape = client.get("/v1/evaluations/P").json()["shape"]
    assert shape["kind"] == "container"
    assert len(shape["parts"]) == 2
    assert "eval_parts" not in shape["record"]
