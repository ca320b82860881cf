"""Tests for brand_canon/matching/canonical.py"""

import pytest

from brand_canon.matching.brand_graph import build_brand_graph
from brand_canon.matching.canonical import find_home_group, resolve_canonical
from brand_canon.models import BrandConnection


class TestFindHomeGroup:
    def test_group_from_key(self, sample_graph):
        assert find_home_group("beiersdorf", sample_graph) == {"beiersdorf", "eucerin", "nivea"}

    def test_group_from_neighbour(self, sample_graph):
        assert find_home_group("NIVEA", sample_graph) == {"beiersdorf", "eucerin", "nivea"}

    def test_unknown_brand(self, sample_graph):
        assert find_home_group("brontex", sample_graph) == set()

    def test_first_matching_key_wins(self):
        graph = {
            "x": ["shared"],
            "shared": ["x", "a"],
            "a": ["shared"],
        }
        assert find_home_group("shared", graph) == {"x", "shared"}


class TestResolveCanonical:
    @pytest.mark.parametrize("brand,expected", [
        ("eucerin", "beiersdorf"),
        ("Beiersdorf", "beiersdorf"),
        ("NIVEA", "beiersdorf"),
        ("molicare", "hartmann"),
        ("samarin", "livol"),
        ("isdin deo", "isdin"),
    ])
    def test_known_brands(self, sample_graph, brand, expected):
        assert resolve_canonical(brand, sample_graph) == expected

    def test_unknown_brand_is_its_own_canonical(self, sample_graph):
        assert resolve_canonical("Brontex", sample_graph) == "brontex"

    @pytest.mark.parametrize("pair", [
        ("eucerin", "beiersdorf"),
        ("eucerin", "nivea"),
        ("samarin", "livol"),
        ("hartmann", "molicare"),
        ("isdin", "isdin deo"),
    ])
    def test_same_group_same_canonical(self, sample_graph, pair):
        x, y = pair
        assert resolve_canonical(x, sample_graph) == resolve_canonical(y, sample_graph)

    @pytest.mark.parametrize("brand", ["eucerin", "nivea", "molicare", "samarin", "isdin deo", "brontex"])
    def test_idempotent(self, sample_graph, brand):
        canonical = resolve_canonical(brand, sample_graph)
        assert resolve_canonical(canonical, sample_graph) == canonical

    def test_empty_graph(self):
        assert resolve_canonical("Eucerin", {}) == "eucerin"


class TestOneHopResolution:
    """Resolution looks at one adjacency entry only; these tests pin that down."""

    def test_chain_members_resolve_differently(self):
        # a - b - c - d, inserted from the far end
        graph = build_brand_graph([
            BrandConnection("c", "d"),
            BrandConnection("b", "c"),
            BrandConnection("a", "b"),
        ])
        assert resolve_canonical("d", graph) == "b"
        assert resolve_canonical("a", graph) == "a"

    def test_canonical_can_resolve_one_hop_further(self):
        graph = build_brand_graph([
            BrandConnection("c", "a"),
            BrandConnection("k", "x; c"),
        ])
        assert resolve_canonical("x", graph) == "c"
        assert resolve_canonical("c", graph) == "a"

    def test_insertion_order_decides_group(self):
        forward = build_brand_graph([BrandConnection("m", "z"), BrandConnection("z", "a")])
        assert resolve_canonical("z", forward) == "m"

        reverse = build_brand_graph([BrandConnection("z", "a"), BrandConnection("m", "z")])
        assert resolve_canonical("z", reverse) == "a"
