"""Shared catalog fixtures."""

import pytest

from evalxref.storage.catalog import CatalogStore

CATALOG = {
    "systems": [
        {"id": "S1", "name": "Search One", "search_link": "https://s1.test/?q=%s"},
        {"id": "S3", "name": "Search Three", "search_link": "https://s3.test/search?query=%s&lang=en"},
        {"id": "NOPH", "name": "No Placeholder", "search_link": "https://noph.test/search"},
    ],
    "evaluators": [
        {
            "id": "E",
            "name": "Erin Example",
            "role": "reviewer",
            "URL": "https://people.test/erin",
            "conflict": ["S1", "S2"],
        },
        {"id": "EMPTY", "name": "Nobody", "role": "reviewer", "conflict": []},
        {"id": "ABSENT", "name": "Quiet", "role": "reviewer"},
        {"id": "DUP", "name": "Dee", "conflict": ["S3", "S1", "S3"]},
    ],
    "evaluations": [
        {
            "id": "A",
            "query": "Foo  Bar",
            "date": "2023-02-10",
            "url": "https://evals.test/a",
            "evaluator_id": "E",
            "systems": ["S1", "S3"],
        },
        {
            "id": "B",
            "query": "foo bar",
            "date": "2024-03-16",
            "evaluator_id": "EMPTY",
            "systems": ["S1", "S2"],
        },
        {
            "id": "C",
            "query": "foo baz",
            "date": "2024-03-30",
            "evaluator_id": "missing-person",
            "systems": [],
        },
        {
            "id": "P",
            "query": "parts query",
            "date": "2024-03-01",
            "evaluator_id": "DUP",
            "systems": ["S3"],
            "eval_parts": [
                {"query": "parts query", "systems": ["S3"]},
                {"query": "parts query", "systems": ["S1"], "url": "https://evals.test/p2"},
            ],
        },
    ],
}


@pytest.fixture
def catalog_data() -> dict:
    return CATALOG


@pytest.fixture
def catalog(catalog_data) -> CatalogStore:
    return CatalogStore.from_dict(catalog_data)
