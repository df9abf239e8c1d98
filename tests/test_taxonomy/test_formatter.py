"""Formatter tests: display names and free-form input to canonical addresses."""

import pytest

from nna_registry.services.taxonomy.formatter import (
    display_name,
    format_hfn,
    format_mfa,
    lookup_category_code,
    lookup_subcategory_code,
)
from nna_registry.taxonomy.exceptions import TaxonomyLookupError


class TestLookupCodes:

    @pytest.mark.parametrize("layer,value,expected", [
        ("S", "HIP",         "HIP"),
        ("S", "hip",         "HIP"),
        ("S", "hip_hop",     "HIP"),
        ("S", "Hip Hop",     "HIP"),
        ("S", "hip-hop",     "HIP"),
        ("W", "dance clubs", "CLB"),
        ("W", "Beach",       "BCH"),
        ("w", "bch",         "BCH"),
    ])
    def test_category(self, resolver, layer, value, expected):
        assert lookup_category_code(layer, value, resolver) == expected

    @pytest.mark.parametrize("layer,category,value,expected", [
        ("W", "BCH",   "SUN",      "SUN"),
        ("W", "beach", "sunset",   "SUN"),
        ("W", "beach", "Festival", "FES"),
        ("W", "BCH",   "base",     "BAS"),
        ("S", "pop",   "Pop Hipster Male Stars", "HPM"),
    ])
    def test_subcategory(self, resolver, layer, category, value, expected):
        assert lookup_subcategory_code(layer, category, value, resolver) == expected

    @pytest.mark.parametrize("layer,value", [
        ("W", "nowhere"),
        ("X", "BCH"),
        ("W", ""),
        ("W", None),
    ])
    def test_unknown_category_raises(self, resolver, layer, value):
        with pytest.raises(TaxonomyLookupError):
            lookup_category_code(layer, value, resolver)

    def test_unknown_subcategory_raises(self, resolver):
        with pytest.raises(TaxonomyLookupError, match="No subcategory 'moonrise' in W.BCH"):
            lookup_subcategory_code("W", "beach", "moonrise", resolver)


class TestFormatHFN:

    @pytest.mark.parametrize("raw,expected", [
        ("W.BCH.SUN.001",          "W.BCH.SUN.001"),
        ("w.beach.sunset.2.mp4",   "W.BCH.SUN.002.mp4"),
        ("s.pop.hpm",              "S.POP.HPM.001"),
        ("S.Hip_Hop.Base.7",       "S.HIP.BAS.007"),
        (" W.Dance_Clubs.VIP.12 ", "W.CLB.VIP.012"),
    ])
    def test_canonicalizes(self, resolver, raw, expected):
        assert format_hfn(raw, resolver) == expected

    def test_output_converts(self, resolver):
        hfn = format_hfn("w.beach.sunset.1", resolver)
        assert resolver.convert_hfn_to_mfa(hfn) == "5.004.003.001"

    @pytest.mark.parametrize("raw", [
        "X.BCH.SUN.001",
        "W.nowhere.SUN.001",
        "W.BCH.moonrise.001",
        "W.BCH.SUN.first",
        "W.BCH",
        "",
    ])
    def test_unresolvable_raises(self, resolver, raw):
        with pytest.raises(TaxonomyLookupError):
            format_hfn(raw, resolver)


class TestFormatMFA:

    @pytest.mark.parametrize("raw,expected", [
        ("5.004.003.001",     "5.004.003.001"),
        ("05.4.3.2",          "5.004.003.002"),
        ("5.4.3",             "5.004.003.001"),
        ("10.3.6.1.mp4",      "10.003.006.001.mp4"),
    ])
    def test_pads(self, raw, expected):
        assert format_mfa(raw) == expected

    def test_does_not_check_existence(self):
        assert format_mfa("99.999.999.1") == "99.999.999.001"

    @pytest.mark.parametrize("raw", ["5.A.3.1", "5.4", "5.4.3.x", ""])
    def test_malformed_raises(self, raw):
        with pytest.raises(TaxonomyLookupError):
            format_mfa(raw)


class TestDisplayName:

    def test_underscores_become_spaces(self, resolver):
        clubs = resolver.get_categories("W")[0]
        assert display_name(clubs) == "Dance Clubs"

    def test_plain_name_unchanged(self, resolver):
        beach = resolver.get_categories("W")[3]
        assert display_name(beach) == "Beach"
