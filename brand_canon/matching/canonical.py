"""
Canonical Brand Resolver

Maps a brand to one representative name of its group, so that products
sold under a parent company and its sub-brands get the same brand id.

The group of a brand is the first graph entry (in insertion order) whose key
is the brand or whose neighbours include it: that key plus its neighbours.
The canonical brand is the alphabetically first member of the group.

Only one hop is considered. Brands connected solely through an intermediate
brand can resolve to different canonical names.
"""

from typing import Set

from .brand_graph import BrandGraph


def find_home_group(brand: str, graph: BrandGraph) -> Set[str]:
    """
    Find the group a brand belongs to.

    Args:
        brand: Brand name (any case)
        graph: Brand adjacency map

    Returns:
        Set of lowercase brand names, empty if the brand is unknown

    Example:
        >>> graph = build_brand_graph([BrandConnection("Hartmann", "Molicare")])
        >>> find_home_group("MOLICARE", graph)
        {'hartmann', 'molicare'}
    """
    name = brand.lower()
    for key, related in graph.items():
        if key == name or name in related:
            return {key, *related}
    return set()


def resolve_canonical(brand: str, graph: BrandGraph) -> str:
    """
    Resolve the canonical brand for a brand name.

    Args:
        brand: Brand name (any case)
        graph: Brand adjacency map

    Returns:
        Alphabetically first member of the brand's group, or the lowercased
        brand itself if it is not in the graph

    Example:
        >>> resolve_canonical("eucerin", graph)
        'beiersdorf'
    """
    group = find_home_group(brand, graph)
    if not group:
        return brand.lower()
    return min(group)
