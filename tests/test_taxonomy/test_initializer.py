"""Startup initialization tests."""

import pytest

from nna_registry.services.taxonomy.initializer import (
    CRITICAL_MAPPINGS,
    REQUIRED_LAYERS,
    InitializationResult,
    initialize_taxonomy,
)
from nna_registry.services.taxonomy.resolver import TaxonomyResolver
from nna_registry.settings import settings
from nna_registry.taxonomy.loader import build_reference_table


class TestInitializeTaxonomy:

    def test_builtin_table_succeeds(self, resolver):
        result = initialize_taxonomy(resolver)
        assert result.success is True
        assert result.error is None
        assert result.layer_count == len(REQUIRED_LAYERS)
        assert result.category_count == 90
        assert result.subcategory_count == 608
        assert len(result.collisions) == 1
        assert result.failed_mappings == []

    def test_uses_shared_resolver_by_default(self, fresh_reference_table):
        assert initialize_taxonomy().success is True

    def test_missing_layers(self, unresolved_resolver):
        result = initialize_taxonomy(unresolved_resolver)
        assert result.success is False
        assert "Required layers missing or empty: G, L, M, B, P, T, C, R" in result.error

    def test_missing_critical_mapping(self, unresolved_resolver):
        result = initialize_taxonomy(unresolved_resolver)
        assert len(result.failed_mappings) == 1
        assert result.failed_mappings[0].startswith("S.POP.HPM.001: expected 2.001.007.001, got <error:")
        assert "Critical mappings failed" in result.error

    def test_drifted_critical_mapping(self):
        table = build_reference_table(
            overrides={"W.BCH.SUN": "5.004.002", "S.POP.HPM": "2.001.007"}
        )
        result = initialize_taxonomy(TaxonomyResolver(table))
        assert result.success is False
        assert result.failed_mappings == [
            "W.BCH.SUN.001: expected 5.004.003.001, got 5.004.002.001"
        ]

    def test_load_failure_is_returned_not_raised(self, monkeypatch, fresh_reference_table):
        monkeypatch.setattr(settings, "taxonomy_strict_numeric_codes", True)
        result = initialize_taxonomy()
        assert result.success is False
        assert "integrity check failed" in result.error
        assert result.layer_count == 0

    def test_critical_mappings_cover_overrides(self):
        hfns = {hfn for hfn, _ in CRITICAL_MAPPINGS}
        assert {"W.BCH.SUN.001", "S.POP.HPM.001"} <= hfns


class TestSummary:

    def test_summary_shape(self, resolver):
        summary = initialize_taxonomy(resolver).summary()
        assert summary == {
            "success": True,
            "error": None,
            "layers": 10,
            "categories": 90,
            "subcategories": 608,
            "collisions": 1,
            "failed_mappings": [],
        }

    @pytest.mark.parametrize("error", [None, "boom"])
    def test_failed_result(self, error):
        summary = InitializationResult(success=False, error=error).summary()
        assert summary["success"] is False
        assert summary["error"] == error
        assert summary["layers"] == 0
