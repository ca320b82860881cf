"""Shared test fixtures."""

import pytest

from brand_canon.matching import BrandMatcher, build_brand_graph
from brand_canon.models import BrandConnection, PriorityConfig, ProductRecord


@pytest.fixture
def sample_rules():
    """Matching rules mirroring config/brand_rules.yaml (no config I/O)."""
    return PriorityConfig(
        front_only=frozenset({
            "rich", "rff", "flex", "ultra", "gum", "beauty",
            "orto", "free", "112", "kin", "happy",
        }),
        front_or_second=frozenset({"heel", "contour", "nero", "rsv"}),
        ignored=frozenset({"bio", "neb"}),
        case_sensitive=frozenset({"happy"}),
        normalize_pattern="Babē",
        normalize_replacement="Babe",
    )


@pytest.fixture
def matcher(sample_rules):
    """Create a BrandMatcher with test rules."""
    return BrandMatcher(config=sample_rules)


@pytest.fixture
def sample_connections():
    """Small set of brand connections (parent company -> sub-brands)."""
    return [
        BrandConnection("Beiersdorf", "Eucerin; Nivea"),
        BrandConnection("Hartmann", "Molicare"),
        BrandConnection("ISDIN", "Isdin Deo"),
        BrandConnection("Samarin", "Livol"),
        BrandConnection("Heel", "Traumeel"),
        BrandConnection("Bio", "Bioderma"),
    ]


@pytest.fixture
def sample_graph(sample_connections):
    return build_brand_graph(sample_connections)


@pytest.fixture
def sample_products():
    """Products covering matched, unmatched and already mapped records."""
    return [
        ProductRecord(title="EUCERIN Hyaluron-Filler kremas SPF30, 50ml", source_id="1",
                      source="benu", country_code="lt"),
        ProductRecord(title="HARTMANN rankų kremas MOLICARE SKIN, 200ml", source_id="2",
                      source="benu", country_code="lt"),
        ProductRecord(title="Brontex 15mg/5ml sirupas 100ml N1", source_id="3",
                      source="benu", country_code="lt"),
        ProductRecord(title="NIVEA Creme 150ml", source_id="4", already_mapped=True,
                      source="benu", country_code="lt"),
    ]
