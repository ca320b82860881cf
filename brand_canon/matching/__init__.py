"""
Brand matching and canonicalization.

Modules:
    brand_graph - Build the brand adjacency map from connection records
    brand_matcher - Detect brand mentions in titles, apply position rules
    canonical - Resolve a brand to its group's canonical name
    assigner - Run matching over batches of product records
    sinks - Result sinks (in-memory, CSV)
"""

from .assigner import BrandAssigner, MatchSink, assign_brands
from .brand_graph import BrandGraph, build_brand_graph, graph_stats, split_related_brands
from .brand_matcher import BrandMatcher, get_brand_matcher, is_separate_term_match
from .canonical import find_home_group, resolve_canonical
from .sinks import CsvMatchSink, MemorySink, result_to_row

__all__ = [
    # Graph
    'BrandGraph',
    'build_brand_graph',
    'graph_stats',
    'split_related_brands',
    # Matching
    'BrandMatcher',
    'get_brand_matcher',
    'is_separate_term_match',
    # Canonical resolution
    'find_home_group',
    'resolve_canonical',
    # Batch assignment
    'BrandAssigner',
    'MatchSink',
    'assign_brands',
    # Sinks
    'CsvMatchSink',
    'MemorySink',
    'result_to_row',
]
