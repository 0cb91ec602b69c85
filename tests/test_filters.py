"""Tests for variant filter predicates."""

import pytest

from mitoview.filters import (
    column_filters_match,
    filter_variants,
    i_contains_filter,
    in_range,
    in_set_filter,
    range_text_filter,
    variant_matches,
)
from mitoview.models.search import FilterConfig


class TestRangeTextFilter:
    """Tests for range_text_filter, e.g. 156-173."""

    @pytest.mark.parametrize("expression,value,expected", [
        (None, 152, True),
        ("152", 152, True),
        ("152-", 152, True),
        ("-152", 152, True),
        ("152-152", 152, True),
        ("151-153", 152, True),
        ("-", 152, True),
        ("", 152, True),
        ("-151", 152, False),
        ("153-", 152, False),
        ("151", 152, False),
        ("0.01", 0.01, True),
        ("0.1-0.2", 0.15, True),
        ("0.03-0.03", 0.03, True),
        ("0.01-0.1", 0.05, True),
        ("0.01-0.1", 0.11, False),
        ("152", None, False),
    ])
    def test_expressions(self, expression, value, expected):
        """Test the documented expression forms."""
        assert range_text_filter(expression, value) is expected

    def test_no_expression_and_no_value(self):
        """Test that no expression matches even a missing value."""
        assert range_text_filter(None, None) is True

    def test_empty_expression_with_missing_value(self):
        """Test that a missing value fails any given expression."""
        assert range_text_filter("", None) is False
        assert range_text_filter("-", None) is False

    def test_inclusive_bounds(self):
        """Test that both ends of A-B are inclusive and outside values fail."""
        for value in (10, 15, 20):
            assert range_text_filter("10-20", value)
        assert not range_text_filter("10-20", 9.99)
        assert not range_text_filter("10-20", 20.01)

    def test_whitespace_ignored(self):
        """Test that whitespace around bounds is ignored."""
        assert range_text_filter(" 100 - 200 ", 150)

    def test_unparsable_bound_never_matches(self):
        """Test that a non-numeric expression does not match."""
        assert range_text_filter("abc", 5) is False
        assert range_text_filter("1-abc", 5) is False


class TestIContainsFilter:
    """Tests for i_contains_filter."""

    @pytest.mark.parametrize("expression,value,expected", [
        (None, "hello", True),
        ("", "hello", True),
        ("hello", "hello", True),
        ("hello", None, True),
        ("hello", "", True),
        ("ElL", "hello", True),
        ("hello", "ElL", False),
        ("LL", "HELLO", True),
        ("xyz", "hello", False),
    ])
    def test_expressions(self, expression, value, expected):
        """Test case-insensitive, directional containment."""
        assert i_contains_filter(expression, value) is expected

    def test_list_value_is_joined(self):
        """Test that list values are matched as joined text."""
        assert i_contains_filter("pmid:21", ["PMID:2102678", "PMID:1"])
        assert not i_contains_filter("pmid:99", ["PMID:2102678"])


class TestInSetFilter:
    """Tests for in_set_filter."""

    @pytest.mark.parametrize("selected,value,expected", [
        (None, "INS", True),
        ([], "INS", True),
        (["INS"], "INS", True),
        (["DEL", "INS"], "INS", True),
        (["DEL", "SNP"], "INS", False),
    ])
    def test_membership(self, selected, value, expected):
        """Test set membership with empty selections matching everything."""
        assert in_set_filter(selected, value) is expected


class TestInRange:
    """Tests for in_range."""

    def test_closed_range(self):
        """Test inclusive closed bounds."""
        assert in_range([0, 1], 0)
        assert in_range([0, 1], 1)
        assert not in_range([0, 1], 1.5)

    def test_open_bound(self):
        """Test that a None bound is open."""
        assert in_range([60, None], 100000)
        assert not in_range([60, None], 59)
        assert in_range([None, None], None)

    def test_missing_value(self):
        """Test that a missing value fails a bounded range."""
        assert not in_range([0, 10000], None)


class TestVariantMatches:
    """Tests for whole filter configurations."""

    def test_default_config_matches_complete_variants(self, variants):
        """Test that the default config keeps variants with all range fields."""
        matched = filter_variants(variants, FilterConfig())
        assert [v.position for v in matched] == [3243, 8993]

    def test_selected_genes_and_types(self, variants):
        """Test set criteria."""
        config = FilterConfig(selectedGenes=["MT-ATP6"], selectedTypes=["SNP"])
        assert [v.position for v in filter_variants(variants, config)] == [8993]

    def test_selected_consequences_use_display_name(self, variants):
        """Test that consequences are matched by display name."""
        config = FilterConfig(selectedConsequences=["missense_variant"])
        assert variant_matches(variants[0], config)
        assert not variant_matches(variants[1], config)

    def test_allele_matches_ref_alt(self, variants):
        """Test that the allele text matches ref/alt notation."""
        config = FilterConfig(allele="a/g")
        assert [v.position for v in filter_variants(variants, config)] == [3243]

    def test_text_fields(self, variants):
        """Test disease, mitoMap, curated refs and HGVS criteria."""
        assert variant_matches(variants[0], FilterConfig(disease="melas", mitoMap="cfrm", curatedRefs="2102678"))
        assert variant_matches(variants[1], FilterConfig(hgvsp="leu156"))
        assert not variant_matches(variants[0], FilterConfig(hgvs="m.8993"))

    def test_ranges(self, variants):
        """Test VAF and depth ranges."""
        config = FilterConfig(vafRange=[0.01, 0.1], depthRange=[60, None])
        assert [v.position for v in filter_variants(variants, config)] == [8993]


class TestColumnFiltersMatch:
    """Tests for per-column filter expressions."""

    def test_numeric_columns_use_ranges(self, variants):
        """Test that position, vaf and DP take range expressions."""
        assert column_filters_match(variants[0], {"position": "3000-4000", "DP": "50"})
        assert not column_filters_match(variants[0], {"vaf": "0.5-"})

    def test_text_columns_use_substrings(self, variants):
        """Test that other columns are case-insensitive substrings."""
        assert column_filters_match(variants[0], {"gene": "tl1", "consequence": "MISSENSE"})
        assert not column_filters_match(variants[1], {"gene": "tl1"})

    def test_missing_value_in_range_column(self, variants):
        """Test that a variant without depth fails a depth expression only when one is given."""
        assert not column_filters_match(variants[2], {"DP": "10-"})
        assert column_filters_match(variants[2], {"DP": None})

    def test_variant_without_consequence_or_position(self):
        """Test per-column filters on a record missing consequence and position."""
        from mitoview.utils.variant_normalization import normalize_variant

        variant = normalize_variant({"ref": "A", "alt": "G", "DP": 40})
        assert column_filters_match(variant, {"consequence": "missense", "DP": "40"})
        assert not column_filters_match(variant, {"position": "1-"})
        assert not variant_matches(variant, FilterConfig(selectedConsequences=["missense_variant"]))
        assert variant_matches(variant, FilterConfig(posRange=[None, None], vafRange=[None, None]))
