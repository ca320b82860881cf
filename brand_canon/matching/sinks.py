"""
Result sinks for brand assignment.

A sink receives MatchResult objects one at a time, keyed by record_key.
Writes may arrive in any order.
"""

from __future__ import annotations

import csv
from pathlib import Path

from ..models import MatchResult

RESULT_FIELDNAMES = ['record_key', 'matched_brands', 'canonical_brand']


def result_to_row(result: MatchResult) -> dict[str, str]:
    """Flatten a result into a CSV row (brands joined with ';')."""
    return {
        'record_key': result.record_key,
        'matched_brands': ';'.join(result.matched_brands),
        'canonical_brand': result.canonical_brand or '',
    }


class MemorySink:
    """Keeps the latest result per record key."""

    def __init__(self):
        self.results: dict[str, MatchResult] = {}

    def write(self, result: MatchResult) -> None:
        self.results[result.record_key] = result

    def __len__(self) -> int:
        return len(self.results)


class CsvMatchSink:
    """
    Streams results to a CSV file.

    Usage:
        with CsvMatchSink("output/brands.csv") as sink:
            assigner.run(records, sink=sink)
    """

    def __init__(self, output_csv: str | Path):
        self.output_csv = Path(output_csv)
        self.rows_written = 0
        self._file = None
        self._writer = None

    def __enter__(self) -> "CsvMatchSink":
        self.output_csv.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.output_csv, 'w', newline='', encoding='utf-8')
        self._writer = csv.DictWriter(self._file, fieldnames=RESULT_FIELDNAMES)
        self._writer.writeheader()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write(self, result: MatchResult) -> None:
        if self._writer is None:
            raise RuntimeError("CsvMatchSink is not open (use it as a context manager)")
        self._writer.writerow(result_to_row(result))
        self.rows_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

