"""
Configuration Loader

Loads YAML configuration files for brand matching rules
(priority classes, ignored and case-sensitive brands, title normalization).
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..models.brand_rules import PriorityConfig

RULES_FILENAME = 'brand_rules.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'brand_rules.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    return _read_yaml(_get_config_dir() / filename)


def load_priority_config(path: Optional[str | Path] = None) -> PriorityConfig:
    """
    Load brand matching rules.

    Args:
        path: Explicit rules file. If None, loads config/brand_rules.yaml.

    Returns:
        PriorityConfig built from the file

    Raises:
        FileNotFoundError: If the rules file doesn't exist
        ValueError: If a section has the wrong shape

    Example:
        >>> config = load_priority_config()
        >>> 'rich' in config.front_only
        True
    """
    if path is None:
        data = load_config(RULES_FILENAME)
    else:
        data = _read_yaml(Path(path))

    return PriorityConfig.from_dict(data)
