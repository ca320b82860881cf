"""
Record models for brand assignment.

Pure data classes for the engine's inputs and outputs.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..common.errors import InvalidInputError, InvalidRecordError


def make_record_key(source: str, country_code: str, source_id: str) -> str:
    """
    Build the opaque sink key for a product record.

    Deterministic: the same source, country and id always give the same key.

    Example:
        >>> make_record_key("benu", "lt", "123")
        '...'  # UUID5 string
    """
    key = f"{source}_{country_code}_{source_id}"
    return str(uuid.uuid5(uuid.NAMESPACE_URL, key))


def is_already_mapped(data: Dict[str, Any]) -> bool:
    """True if a raw product row was mapped in an earlier run ('already_mapped' or an 'm_id')."""
    return bool(data.get('already_mapped') or data.get('m_id'))


@dataclass(frozen=True)
class BrandConnection:
    """A primary brand and its ';'-separated related brand names."""
    primary_brand: str
    related_brands: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BrandConnection":
        """
        Parse a raw connection row.

        Accepts both ``primary_brand``/``related_brands`` and the exported
        ``manufacturer_p1``/``manufacturers_p2`` column names.

        Raises:
            InvalidInputError: If the row is not a mapping or a name is missing
        """
        if not isinstance(data, dict):
            raise InvalidInputError(f"Connection record must be a mapping, got {type(data).__name__}")

        primary = data.get('primary_brand', data.get('manufacturer_p1'))
        related = data.get('related_brands', data.get('manufacturers_p2'))

        if not isinstance(primary, str) or not isinstance(related, str):
            raise InvalidInputError(f"Connection record is missing brand names: {data!r}")

        return cls(primary_brand=primary, related_brands=related)


@dataclass
class ProductRecord:
    """
    A catalog product to be brand-matched.

    ``already_mapped`` marks records resolved in an earlier run; the
    assigner skips them.
    """
    title: str
    source_id: str
    already_mapped: bool = False
    source: str = ""
    country_code: str = ""

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidRecordError(f"Product title is required (source_id={self.source_id!r})")

    @property
    def record_key(self) -> str:
        """Opaque key used by result sinks."""
        return make_record_key(self.source, self.country_code, self.source_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductRecord":
        """
        Parse a raw product row.

        ``m_id`` (an existing mapping id) counts as ``already_mapped``.

        Raises:
            InvalidRecordError: If the row is not a mapping or has no title
        """
        if not isinstance(data, dict):
            raise InvalidRecordError(f"Product record must be a mapping, got {type(data).__name__}")

        return cls(
            title=data.get('title'),
            source_id=str(data.get('source_id') or ''),
            already_mapped=is_already_mapped(data),
            source=str(data.get('source') or ''),
            country_code=str(data.get('country_code') or ''),
        )


@dataclass
class MatchResult:
    """Brands found in one product title and the canonical brand chosen."""
    record_key: str
    matched_brands: List[str] = field(default_factory=list)
    canonical_brand: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_key': self.record_key,
            'matched_brands': list(self.matched_brands),
            'canonical_brand': self.canonical_brand,
        }


@dataclass
class RecordError:
    """A product record that was skipped because it is malformed."""
    index: int
    source_id: str
    error: str


@dataclass
class AssignmentReport:
    """Outcome of one assignment session."""
    results: List[MatchResult] = field(default_factory=list)
    errors: List[RecordError] = field(default_factory=list)
    skipped: int = 0

    def stats(self) -> Dict[str, int]:
        """Return assignment statistics."""
        return {
            'results': len(self.results),
            'matched': sum(1 for r in self.results if r.canonical_brand),
            'unmatched': sum(1 for r in self.results if not r.canonical_brand),
            'skipped': self.skipped,
            'errors': len(self.errors),
        }
