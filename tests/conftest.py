"""
Test fixtures and shared setup.

Everything runs against the built-in reference table; no external services.
Tests that swap the process-wide table (JSON source, strict mode) use the
`fresh_reference_table` fixture so the cached table is rebuilt afterwards.
"""

import os

import pytest
from fastapi.testclient import TestClient

# ── Override settings BEFORE importing app modules ────────────────────────────
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("TAXONOMY_DATA_PATH", None)
os.environ.pop("TAXONOMY_STRICT_NUMERIC_CODES", None)

from nna_registry.main import app
from nna_registry.services.taxonomy.resolver import TaxonomyResolver
from nna_registry.taxonomy.loader import build_reference_table, reset_reference_table


# ── Reference table ───────────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def reference_table():
    """The built-in taxonomy, built once per session."""
    return build_reference_table()


@pytest.fixture
def resolver(reference_table) -> TaxonomyResolver:
    return TaxonomyResolver(reference_table)


@pytest.fixture
def fresh_reference_table():
    """Drop the process-wide table before and after the test."""
    reset_reference_table()
    yield
    reset_reference_table()


# ── Small hand-built tables ───────────────────────────────────────────────────

MINI_LAYERS = [("W", "5", "Worlds"), ("S", "2", "Stars")]
MINI_CATEGORIES = [
    ("W", "BCH", "004", "Beach"),
    ("S", "POP", "001", "Pop"),
]
MINI_SUBCATEGORIES = [
    ("W", "BCH", "BAS", "001", "Base"),
    ("W", "BCH", "SUN", "003", "Sunset"),
    ("W", "BCH", "FES", "003", "Festival"),
    ("S", "POP", "BAS", "001", "Base"),
]


@pytest.fixture
def mini_rows():
    return list(MINI_LAYERS), list(MINI_CATEGORIES), list(MINI_SUBCATEGORIES)


@pytest.fixture
def unresolved_resolver(mini_rows) -> TaxonomyResolver:
    """Resolver over the mini table with no overrides: 5.004.003 is ambiguous."""
    return TaxonomyResolver(build_reference_table(*mini_rows, overrides={}))


# ── API ───────────────────────────────────────────────────────────────────────


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client; entering the context runs the startup lifespan."""
    with TestClient(app) as c:
        yield c
