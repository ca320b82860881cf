"""
Brand Relationship Graph

Builds the brand -> related brands adjacency map from connection records.

Each connection record names a primary brand and one or more related brands
(';'-separated). Every pair becomes an undirected edge. The map keeps
insertion order for both keys and neighbours; canonical resolution depends
on that order.

The graph holds direct neighbours only. Two brands linked through a third
brand are not neighbours of each other.
"""

import logging
from typing import Any, Dict, List, Sequence, Union

from ..common.errors import InvalidInputError
from ..models.records import BrandConnection

logger = logging.getLogger(__name__)

BrandGraph = Dict[str, List[str]]


def split_related_brands(related_brands: str) -> List[str]:
    """
    Split a ';'-separated related brands field into lowercase names.

    Example:
        >>> split_related_brands("Molicare; Tena ;")
        ['molicare', 'tena']
    """
    names = (name.strip().lower() for name in related_brands.split(';'))
    return [name for name in names if name]


def _add_edge(graph: BrandGraph, a: str, b: str) -> None:
    if b not in graph[a]:
        graph[a].append(b)
    if a not in graph[b]:
        graph[b].append(a)


def build_brand_graph(records: Sequence[Union[BrandConnection, Dict[str, Any]]]) -> BrandGraph:
    """
    Build a symmetric brand adjacency map.

    Args:
        records: Connection records (BrandConnection or raw dicts)

    Returns:
        Dict mapping lowercase brand to its directly related lowercase brands

    Raises:
        InvalidInputError: If records is empty or not a sequence, or a record
            has no primary brand or no related brands
    """
    if isinstance(records, (str, bytes, dict)) or not isinstance(records, Sequence):
        raise InvalidInputError("Brand connections must be a sequence of records")
    if not records:
        raise InvalidInputError("Brand connections are empty")

    graph: BrandGraph = {}

    for i, record in enumerate(records):
        if not isinstance(record, BrandConnection):
            record = BrandConnection.from_dict(record)

        primary = record.primary_brand.strip().lower()
        if not primary:
            raise InvalidInputError(f"Connection record {i} has no primary brand")

        related = split_related_brands(record.related_brands)
        if not related:
            raise InvalidInputError(f"Connection record {i} ({primary}) has no related brands")

        graph.setdefault(primary, [])
        for alias in related:
            graph.setdefault(alias, [])
            if alias != primary:
                _add_edge(graph, primary, alias)

    logger.info("Built brand graph: %d brands, %d connections",
                len(graph), graph_stats(graph)['edges'])
    return graph


def graph_stats(graph: BrandGraph) -> Dict[str, int]:
    """Return brand and edge counts for a graph."""
    return {
        'brands': len(graph),
        'edges': sum(len(related) for related in graph.values()) // 2,
    }
