"""
Brand Assigner

Runs brand matching over a batch of product records and produces one
MatchResult per record.

Features:
- Skips records already mapped in an earlier run
- Collects every matching alias of every brand group
- Picks a canonical brand so related brands deduplicate across sources
- Malformed records are skipped and reported, the batch continues
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, Protocol

from ..common.errors import InvalidRecordError
from ..models import AssignmentReport, MatchResult, ProductRecord, RecordError
from ..models.records import is_already_mapped
from .brand_graph import BrandGraph
from .brand_matcher import BrandMatcher, get_brand_matcher
from .canonical import resolve_canonical

logger = logging.getLogger(__name__)


class MatchSink(Protocol):
    """Anything that stores match results."""

    def write(self, result: MatchResult) -> None:
        ...


class BrandAssigner:
    """Assigns matched and canonical brands to product records."""

    def __init__(self, graph: BrandGraph, matcher: Optional[BrandMatcher] = None):
        """
        Initialize the assigner.

        Args:
            graph: Brand adjacency map, built once per session
            matcher: Brand matcher. If None, uses the default rules.
        """
        self.graph = graph
        self.matcher = matcher if matcher is not None else get_brand_matcher()

        # State
        self.errors: list[RecordError] = []
        self.skipped = 0

    def match_title(self, title: str) -> list[str]:
        """
        Find all brands mentioned in a title.

        Every graph key and each of its related brands is tested. Matches are
        deduplicated case-insensitively, keeping the first spelling seen, and
        then prioritized (first-word match first).

        Args:
            title: Raw product title

        Returns:
            Ordered list of matched brand names
        """
        matched: list[str] = []
        seen: set[str] = set()

        for key, related in self.graph.items():
            for brand in (key, *related):
                name = brand.lower()
                if name in seen:
                    continue
                if self.matcher.is_separate_term_match(title, brand):
                    matched.append(brand)
                    seen.add(name)

        return self.matcher.prioritize(title, matched)

    def assign_record(self, record: ProductRecord) -> MatchResult:
        """Match a single record and resolve its canonical brand."""
        matched = self.match_title(record.title)
        canonical = resolve_canonical(matched[0], self.graph) if matched else None

        logger.debug("%s -> %s -> canonical: %s", record.title, matched, canonical)

        return MatchResult(
            record_key=record.record_key,
            matched_brands=matched,
            canonical_brand=canonical,
        )

    def assign(self, records: Iterable[ProductRecord | dict[str, Any]]) -> Iterator[MatchResult]:
        """
        Assign brands to a batch of records.

        Records may be ProductRecord instances or raw dicts. Already mapped
        records yield nothing. Malformed records are logged, added to
        ``self.errors`` and skipped.

        Args:
            records: Product records

        Yields:
            One MatchResult per processed record
        """
        for i, raw in enumerate(records):
            if isinstance(raw, dict) and is_already_mapped(raw):
                self.skipped += 1
                continue

            try:
                record = raw if isinstance(raw, ProductRecord) else ProductRecord.from_dict(raw)
            except InvalidRecordError as e:
                source_id = str(raw.get("source_id") or "") if isinstance(raw, dict) else ""
                logger.warning("Skipping record %d (source_id=%s): %s", i, source_id, e)
                self.errors.append(RecordError(index=i, source_id=source_id, error=str(e)))
                continue

            if record.already_mapped:
                self.skipped += 1
                continue

            yield self.assign_record(record)

    def run(
        self,
        records: Iterable[ProductRecord | dict[str, Any]],
        sink: Optional[MatchSink] = None,
    ) -> AssignmentReport:
        """
        Assign brands to all records and optionally write results to a sink.

        Args:
            records: Product records
            sink: Optional result sink with a ``write(result)`` method

        Returns:
            AssignmentReport with results, per-record errors and skip count
        """
        self.errors = []
        self.skipped = 0

        report = AssignmentReport()
        for result in self.assign(records):
            if sink is not None:
                sink.write(result)
            report.results.append(result)

        report.errors = list(self.errors)
        report.skipped = self.skipped

        stats = report.stats()
        logger.info("Brand assignment: results=%d, matched=%d, unmatched=%d, skipped=%d, errors=%d",
                    stats['results'], stats['matched'], stats['unmatched'],
                    stats['skipped'], stats['errors'])
        return report


def assign_brands(
    records: Iterable[ProductRecord | dict[str, Any]],
    graph: BrandGraph,
    matcher: Optional[BrandMatcher] = None,
) -> Iterator[MatchResult]:
    """Yield a MatchResult for each unskipped record (see BrandAssigner.assign)."""
    return BrandAssigner(graph, matcher).assign(records)
