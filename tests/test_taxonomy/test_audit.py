"""
Mapping audit tests: per-layer round-trip report and the command-line entry.
"""

import pytest

from nna_registry.services.taxonomy.resolver import TaxonomyResolver
from nna_registry.settings import settings
from nna_registry.taxonomy import audit
from nna_registry.taxonomy.audit import audit_layer, main
from nna_registry.taxonomy.loader import build_reference_table


@pytest.fixture
def drifted_resolver() -> TaxonomyResolver:
    """W.BCH.SUN pinned onto TRO's numeric address: TRO no longer round-trips."""
    table = build_reference_table(
        overrides={"W.BCH.SUN": "5.004.002", "S.POP.HPM": "2.001.007"}
    )
    return TaxonomyResolver(table)


class TestAuditLayer:

    def test_worlds_collision_is_ambiguous_not_failure(self, resolver):
        result = audit_layer("W", resolver)
        assert result.ok
        assert len(result.mappings) == 73
        assert result.round_trip_failures == []
        assert result.ambiguous == ["W.BCH.FES.001 -> 5.004.003.001 -> W.BCH.SUN.001"]

    @pytest.mark.parametrize("layer", ["G", "S", "L", "M", "B", "P", "T", "C", "R"])
    def test_other_layers_clean(self, resolver, layer):
        result = audit_layer(layer, resolver)
        assert result.ok
        assert result.mappings
        assert result.ambiguous == []

    def test_lower_case_layer(self, resolver):
        assert audit_layer("w", resolver).layer == "W"

    def test_drift_is_a_failure(self, drifted_resolver):
        result = audit_layer("W", drifted_resolver)
        assert not result.ok
        assert "W.BCH.TRO.001 -> 5.004.002.001 -> W.BCH.SUN.001" in result.round_trip_failures


class TestMain:

    def test_selected_layers(self, capsys, fresh_reference_table):
        assert main(["W", "S"]) == 0
        out = capsys.readouterr().out
        assert "✓ W: 73 mappings, 0 failures, 1 ambiguous" in out
        assert "AMBIG W.BCH.FES.001" in out
        assert "✓ S:" in out

    def test_all_layers_by_default(self, capsys, fresh_reference_table):
        assert main([]) == 0
        lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("✓")]
        assert len(lines) == 10

    def test_unknown_layer_fails(self, capsys, fresh_reference_table):
        assert main(["ZZ"]) == 1
        assert "✗ ZZ: unknown layer" in capsys.readouterr().out

    def test_unknown_layer_does_not_hide_others(self, capsys, fresh_reference_table):
        assert main(["w", "zz"]) == 1
        out = capsys.readouterr().out
        assert "✓ W: 73 mappings" in out
        assert "✗ ZZ: unknown layer" in out

    def test_failure_exit_code(self, capsys, monkeypatch, drifted_resolver):
        monkeypatch.setattr(audit, "get_resolver", lambda: drifted_resolver)
        assert main(["W"]) == 1
        out = capsys.readouterr().out
        assert "✗ W:" in out
        assert "FAIL  W.BCH.TRO.001" in out

    def test_load_failure(self, capsys, monkeypatch, fresh_reference_table):
        monkeypatch.setattr(settings, "taxonomy_strict_numeric_codes", True)
        assert main(["W"]) == 1
        assert "Taxonomy failed to load" in capsys.readouterr().err
