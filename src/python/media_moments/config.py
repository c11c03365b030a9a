"""
Configuration management for media-moments.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from media_moments.models.enums import NamingMode, SurplusPolicy
from media_moments.scanner.grouper import GroupingContext

logger = logging.getLogger(__name__)

# Default locations to search for config.yaml
CONFIG_SEARCH_PATHS = [
    Path("config.yaml"),
    Path("src/python/config.yaml"),
    Path.home() / ".media_moments" / "config.yaml",
]


@dataclass(frozen=True)
class GroupingSettings:
    """
    Settings of the `grouping` config section.

    Attributes:
        naming_mode: Naming convention of scanned files
        surplus_policy: Handling of a third file competing for main/edited
        recursive: Scan subdirectories
        include_hidden: Include files whose name starts with "."
        max_workers: Threads reading capture dates (1 = sequential)
    """
    naming_mode: NamingMode = NamingMode.STANDARD
    surplus_policy: SurplusPolicy = SurplusPolicy.LAST_WINS
    recursive: bool = False
    include_hidden: bool = False
    max_workers: int = 4

    def to_context(self) -> GroupingContext:
        """Build the GroupingContext for the grouping engine."""
        return GroupingContext(surplus_policy=self.surplus_policy)


def find_config_file(config_path: Optional[Path] = None) -> Path:
    """
    Locate the config file to load.

    An explicit path must exist; otherwise the first existing entry of
    CONFIG_SEARCH_PATHS is used.

    Raises:
        FileNotFoundError: If the explicit path is missing or no default exists
    """
    if config_path:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return config_path

    found = next((path for path in CONFIG_SEARCH_PATHS if path.exists()), None)
    if found is None:
        searched = ", ".join(str(path) for path in CONFIG_SEARCH_PATHS)
        raise FileNotFoundError(f"No config file found (searched: {searched})")
    return found


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the media-moments configuration from YAML.

    Args:
        config_path: Config file to read; the default locations are searched if None

    Returns:
        Configuration mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If no config file is found
        ValueError: If the file does not hold a YAML mapping
    """
    path = find_config_file(config_path)

    logger.info("Loading config from %s", path)

    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(config).__name__}")

    return config


def get_grouping_settings(config: Dict[str, Any]) -> GroupingSettings:
    """
    Get the grouping settings from config.

    Missing keys (or a missing `grouping` section) use the defaults.

    Args:
        config: Configuration dictionary

    Returns:
        GroupingSettings

    Raises:
        ValueError: If a setting has an invalid value
    """
    section = config.get("grouping") or {}
    defaults = GroupingSettings()

    try:
        naming_mode = NamingMode(section.get("naming_mode", defaults.naming_mode.value))
        surplus_policy = SurplusPolicy(section.get("surplus_policy", defaults.surplus_policy.value))
    except ValueError as e:
        raise ValueError(f"Invalid grouping setting: {e}") from e

    max_workers = section.get("max_workers", defaults.max_workers)
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        raise ValueError(f"grouping.max_workers must be a positive integer, got {max_workers!r}")

    return GroupingSettings(
        naming_mode=naming_mode,
        surplus_policy=surplus_policy,
        recursive=_get_flag(section, "recursive", defaults.recursive),
        include_hidden=_get_flag(section, "include_hidden", defaults.include_hidden),
        max_workers=max_workers,
    )


def _get_flag(section: Dict[str, Any], name: str, default: bool) -> bool:
    """Read a YAML boolean; quoted strings such as "false" are rejected."""
    value = section.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"grouping.{name} must be true or false, got {value!r}")
    return value


def get_logging_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the logging configuration from config.

    Args:
        config: Configuration dictionary

    Returns:
        Dictionary with "level" and "file" keys
    """
    logging_config = config.get("logging") or {}
    return {
        "level": logging_config.get("level", "INFO"),
        "file": logging_config.get("file"),
    }
