"""
Brand matching rules model.

Static, process-wide data that steers the matcher. Loaded once from
config/brand_rules.yaml, but any mapping of the same shape can be used.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable

RULE_SETS = ('front_only', 'front_or_second', 'ignored', 'case_sensitive')


def _name_set(values: Iterable[Any], section: str) -> FrozenSet[str]:
    if not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError(f"Rules section '{section}' must be a list of names")
    return frozenset(str(v).strip().lower() for v in values if str(v).strip())


@dataclass(frozen=True)
class PriorityConfig:
    """
    Brand priority classes plus the single title normalization rule.

    Fields:
    - front_only: brands accepted only as the first title word
    - front_or_second: brands accepted as the first or second title word
    - ignored: brands that are never accepted
    - case_sensitive: brands accepted only when spelled in uppercase
    - normalize_pattern / normalize_replacement: literal text replaced
      case-insensitively in titles before lowercasing
    """
    front_only: FrozenSet[str] = frozenset()
    front_or_second: FrozenSet[str] = frozenset()
    ignored: FrozenSet[str] = frozenset()
    case_sensitive: FrozenSet[str] = frozenset()
    normalize_pattern: str = ""
    normalize_replacement: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriorityConfig":
        """
        Build rules from a parsed config mapping.

        Missing sections default to empty. Unknown top-level keys are rejected
        so that a typo in the rules file does not silently disable a rule.

        Raises:
            ValueError: On unknown sections or wrongly typed values
        """
        if not isinstance(data, dict):
            raise ValueError("Brand rules must be a mapping")

        unknown = set(data) - set(RULE_SETS) - {'normalization'}
        if unknown:
            raise ValueError(f"Unknown brand rules sections: {', '.join(sorted(unknown))}")

        sets = {name: _name_set(data.get(name) or [], name) for name in RULE_SETS}

        normalization = data.get('normalization') or {}
        if not isinstance(normalization, dict):
            raise ValueError("Rules section 'normalization' must be a mapping")

        pattern = normalization.get('pattern') or ''
        replacement = normalization.get('replacement')
        if pattern and replacement is None:
            raise ValueError("Rules section 'normalization' has a pattern but no replacement")

        return cls(
            normalize_pattern=str(pattern),
            normalize_replacement=str(replacement or ''),
            **sets,
        )
