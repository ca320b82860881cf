"""
Brand Canonicalization Engine

Assigns a canonical brand to product titles so that products sold under
related brand names deduplicate across data sources.

Modules:
    models      - Data models (ProductRecord, MatchResult, PriorityConfig)
    common      - Shared utilities (config loader, logging, text, CSV)
    matching    - Brand graph, matcher, canonical resolver, batch assigner
"""
