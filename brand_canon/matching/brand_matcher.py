"""
Brand Matcher

Decides whether a brand name is a genuine mention in a product title:
1. Whole-word detection in the normalized title (case-insensitive)
2. Uppercase-only detection for case-sensitive brands (e.g. "HAPPY")
3. Position rules: ignored brands, front-only brands, front-or-second brands

The rules are loaded from config/brand_rules.yaml.
"""

import re
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from ..common.config_loader import load_priority_config
from ..common.text_utils import normalize_title, title_words, whole_word_pattern
from ..models.brand_rules import PriorityConfig


class BrandMatcher:
    """
    Matches brand names against product titles.

    Usage:
        matcher = BrandMatcher()
        matcher.is_separate_term_match("RICH vitamin complex", "rich")
        # Returns: True
        matcher.is_separate_term_match("Something RICH not first", "rich")
        # Returns: False
    """

    def __init__(self, config: Optional[PriorityConfig] = None):
        """
        Initialize the brand matcher.

        Args:
            config: Optional matching rules. If None, loads from config.
        """
        if config is None:
            self.config = load_priority_config()
        else:
            self.config = config

        # Compiled patterns keyed by (term, ignore_case)
        self._patterns: Dict[Tuple[str, bool], re.Pattern] = {}

    def _pattern(self, term: str, ignore_case: bool) -> re.Pattern:
        key = (term, ignore_case)
        pattern = self._patterns.get(key)
        if pattern is None:
            pattern = whole_word_pattern(term, ignore_case=ignore_case)
            self._patterns[key] = pattern
        return pattern

    def normalize(self, title: str) -> str:
        """Normalize a title with this matcher's rules."""
        return normalize_title(title, self.config)

    def is_brand_present(self, title: str, brand: str) -> bool:
        """
        Check whether a brand occurs in a title as a whole word.

        Case-sensitive brands must appear in uppercase in the original title;
        normalization is skipped for them. All other brands are matched
        case-insensitively against the normalized title.

        Args:
            title: Raw product title
            brand: Brand name

        Returns:
            True if the brand occurs as a separate word
        """
        if not title or not brand:
            return False

        name = brand.lower()
        if name in self.config.case_sensitive:
            return bool(self._pattern(brand.upper(), False).search(title))

        return bool(self._pattern(name, True).search(self.normalize(title)))

    def is_position_valid(self, title: str, brand: str) -> bool:
        """
        Apply position rules to a brand already found in the title.

        Rules, in order:
        1. Ignored brands are never valid
        2. Front-only brands must be the first word
        3. Front-or-second brands must be the first or second word
        4. Any other brand is valid anywhere

        Args:
            title: Raw product title
            brand: Brand name

        Returns:
            True if the brand's position is acceptable
        """
        name = brand.lower()

        if name in self.config.ignored:
            return False

        words = title_words(self.normalize(title))

        if name in self.config.front_only:
            return words[:1] == [name]

        if name in self.config.front_or_second:
            return name in words[:2]

        return True

    def is_separate_term_match(self, title: str, brand: str) -> bool:
        """Return True if the brand is present in the title at a valid position."""
        if not self.is_brand_present(title, brand):
            return False
        return self.is_position_valid(title, brand)

    def prioritize(self, title: str, matches: List[str]) -> List[str]:
        """
        Order matched brands so that a brand equal to the first title word
        comes first.

        The sort is stable: matches keep their input order within the
        front and non-front groups.

        Args:
            title: Raw product title
            matches: Matched brand names

        Returns:
            New, reordered list

        Example:
            >>> matcher.prioritize("Eucerin Hyaluron cream", ["hyaluron", "eucerin"])
            ['eucerin', 'hyaluron']
        """
        if len(matches) <= 1:
            return list(matches)

        words = title_words(self.normalize(title))
        first_word = words[0] if words else None

        return sorted(matches, key=lambda m: m.lower() != first_word)


@lru_cache(maxsize=1)
def get_brand_matcher() -> BrandMatcher:
    """Return a process-wide BrandMatcher using config/brand_rules.yaml."""
    return BrandMatcher()


def is_separate_term_match(title: str, brand: str) -> bool:
    """
    Check a brand against a title using the default rules.

    Example:
        >>> is_separate_term_match("HAPPY skincare cream", "happy")
        True
        >>> is_separate_term_match("Product with BIO extract", "bio")
        False
    """
    return get_brand_matcher().is_separate_term_match(title, brand)
