#!/usr/bin/env python3
"""
Brand Assignment Script

Matches product titles against the brand connection graph and writes the
matched and canonical brand of every product to a CSV file.

Input files:
- Brand connections: JSON list of {manufacturer_p1, manufacturers_p2}
  (or {primary_brand, related_brands}), or a CSV with the same columns
- Products: JSON list of {title, source_id, m_id/already_mapped, ...}

Usage:
    python3 scripts/assign_brands.py --connections data/brandConnections.json --products data/items.json
    python3 scripts/assign_brands.py -c connections.csv -p items.json --output output/brands.csv
    python3 scripts/assign_brands.py -c connections.json -p items.json --source benu --country lt --trace
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from brand_canon.common.config_loader import load_priority_config
from brand_canon.common.csv_utils import read_csv
from brand_canon.common.errors import InvalidInputError
from brand_canon.common.log_config import setup_logging
from brand_canon.matching import BrandAssigner, BrandMatcher, CsvMatchSink, build_brand_graph

logger = logging.getLogger(__name__)


def load_rows(path: str) -> list:
    """Load a JSON list or CSV file into a list of dicts."""
    if Path(path).suffix.lower() == ".csv":
        return list(read_csv(path))

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list in {path}")
    return data


def main():
    parser = argparse.ArgumentParser(
        description="Assign matched and canonical brands to product titles"
    )
    parser.add_argument(
        "--connections", "-c",
        required=True,
        help="Brand connections file (JSON or CSV)"
    )
    parser.add_argument(
        "--products", "-p",
        required=True,
        help="Products file (JSON list)"
    )
    parser.add_argument(
        "--output", "-o",
        default="output/brand_assignments.csv",
        help="Output CSV file (default: output/brand_assignments.csv)"
    )
    parser.add_argument(
        "--rules",
        help="Brand rules YAML (default: config/brand_rules.yaml)"
    )
    parser.add_argument(
        "--source",
        default="",
        help="Source name used in record keys when products lack one"
    )
    parser.add_argument(
        "--country",
        default="",
        help="Country code used in record keys when products lack one"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging (per-title matches need --trace)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only show warnings and errors")
    parser.add_argument("--trace", action="store_true", help="Log matched and canonical brands for every title")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet, trace_matches=args.trace)

    try:
        graph = build_brand_graph(load_rows(args.connections))
    except (InvalidInputError, ValueError, OSError) as e:
        logger.error("Cannot build brand graph: %s", e)
        sys.exit(1)

    products = load_rows(args.products)
    for product in products:
        if isinstance(product, dict):
            product.setdefault("source", args.source)
            product.setdefault("country_code", args.country)

    matcher = BrandMatcher(load_priority_config(args.rules))
    assigner = BrandAssigner(graph, matcher)

    with CsvMatchSink(args.output) as sink:
        report = assigner.run(products, sink=sink)

    stats = report.stats()
    print("\n" + "=" * 60)
    print("Brand Assignment Summary")
    print("=" * 60)
    print(f"  Brands in graph:     {len(graph)}")
    print(f"  Products processed:  {stats['results']}")
    print(f"  With brand:          {stats['matched']}")
    print(f"  Without brand:       {stats['unmatched']}")
    print(f"  Already mapped:      {stats['skipped']}")
    print(f"  Invalid records:     {stats['errors']}")
    print(f"  Output:              {args.output}")
    print("=" * 60)

    for error in report.errors:
        print(f"  [record {error.index}] {error.source_id}: {error.error}")


if __name__ == "__main__":
    main()
