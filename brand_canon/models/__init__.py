"""
Data models for brand assignment.

This module contains pure data classes with no matching logic.
"""

from .brand_rules import PriorityConfig
from .records import (
    AssignmentReport,
    BrandConnection,
    MatchResult,
    ProductRecord,
    RecordError,
    make_record_key,
)

__all__ = [
    'AssignmentReport',
    'BrandConnection',
    'MatchResult',
    'PriorityConfig',
    'ProductRecord',
    'RecordError',
    'make_record_key',
]
