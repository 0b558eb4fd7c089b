"""
NoID Test Configuration and Fixtures

Provides message catalogs and configuration isolation for tests.
"""

import json
import pytest
from pathlib import Path


class BrokenCatalog:
    """Catalog whose backing resource cannot be reached."""

    catalog_name = "Broken.Catalog"

    def lookup(self, key):
        raise OSError("resource stream missing")


@pytest.fixture
def dict_catalog():
    """In-memory catalog with a plain and a parameterised message."""
    from noid.errors.catalog import DictCatalog

    return DictCatalog(
        "Test.Messages",
        {
            100: "Plain message.",
            200: "Record {0} failed after {1} attempts.",
        },
    )


@pytest.fixture
def broken_catalog():
    return BrokenCatalog()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """JSON catalog written to a temporary directory."""
    path = tmp_path / "patient_errors.json"
    path.write_text(json.dumps({
        "name": "patient_errors",
        "messages": {
            "410001": "Patient {0} not found.",
            "410002": "Fingerprint rejected.",
        },
    }))
    return path


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep NOID_* environment and the global config out of each test."""
    from noid.bootstrap.config import reset_config

    for name in (
        "NOID_ENVIRONMENT",
        "NOID_DEBUG",
        "NOID_CATALOG_DIR",
        "NOID_DEFAULT_CATALOG",
        "NOID_LOG_LEVEL",
        "NOID_LOG_FORMAT",
        "NOID_LOG_FILE",
        "NOID_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)

    reset_config()
    yield
    reset_config()
