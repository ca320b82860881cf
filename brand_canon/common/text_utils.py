"""
Text Utilities

Title normalization and whole-word pattern helpers used by the brand matcher.
"""

import re
from typing import List, Optional

from ..models.brand_rules import PriorityConfig


def normalize_title(title: str, config: Optional[PriorityConfig] = None) -> str:
    """
    Normalize a product title for matching.

    Replaces the configured diacritic spelling with its plain form
    (case-insensitive) and lowercases the result.

    Args:
        title: Raw product title
        config: Rules holding the normalization pattern (none applied if None)

    Returns:
        Normalized title ("" for an empty title)

    Example:
        >>> normalize_title("BABĒ Crema 50ml", config)
        'babe crema 50ml'
    """
    if not title:
        return ""

    if config is not None and config.normalize_pattern:
        title = re.sub(
            re.escape(config.normalize_pattern),
            lambda _: config.normalize_replacement,
            title,
            flags=re.IGNORECASE,
        )

    return title.lower()


def title_words(normalized_title: str) -> List[str]:
    """Split a normalized title into whitespace-delimited words."""
    return normalized_title.split()


def whole_word_pattern(term: str, ignore_case: bool = False) -> re.Pattern:
    """
    Compile a pattern matching ``term`` as a literal whole word.

    The term may not touch another word character on either side, so
    "free" matches "alcohol free 48h" but not "freedom".
    """
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf'(?<!\w){re.escape(term)}(?!\w)', flags)
