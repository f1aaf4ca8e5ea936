#!/usr/bin/env python3
"""
Generate sample_checks.json from sample_catalog.json.
Runs the cross-reference engine in-memory (no API needed).
Usage: python scripts/generate_sample_checks.py [reference_id]
"""

import json
import sys
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from evalxref.engine.summary import summarize_evaluation
from evalxref.schemas.checks import ConsistencyPolicy
from evalxref.storage.catalog import CatalogLoadError, load_catalog
from evalxref.utils.canonical import catalog_hash

DEFAULT_REFERENCE = "eval-002"


def main():
    data_dir = Path(__file__).resolve().parent.parent / "data"
    catalog_path = data_dir / "sample_catalog.json"
    checks_path = data_dir / "sample_checks.json"
    reference_id = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_REFERENCE

    try:
        catalog = load_catalog(catalog_path)
    except CatalogLoadError as e:
        print(f"Error: {e}")
        sys.exit(1)

    policy = ConsistencyPolicy()
    summaries = []
    for record in catalog.evaluations():
        summary = summarize_evaluation(
            record.id, catalog, reference_id=reference_id, policy=policy
        )
        summaries.append(summary.model_dump(mode="json"))

    output = {
        "catalog_hash": catalog_hash(catalog),
        "reference_id": reference_id,
        "policy": policy.model_dump(mode="json"),
        "summaries": summaries,
    }
    with open(checks_path, "w") as f:
        json.dump(output, f, indent=2)

    print(f"Generated {len(summaries)} evaluation summaries -> {checks_path}")


if __name__ == "__main__":
    main()
