"""Shared data loading utilities for configuration and translation files.

This module locates YAML files shipped in the package data directory and
formats helpful errors when an override path does not exist.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import yaml

PACKAGE_DATA_DIR = Path(__file__).parent.parent / "data"


def find_data_file(
    subdirectory: str,
    filenames: List[str],
    data_dir: Optional[Path] = None,
) -> Optional[Path]:
    """Find data file in the package data directory.

    Args:
        subdirectory: Subdirectory of the data directory ('' for the root,
            'translations' for message catalogs)
        filenames: Candidate filenames, tried in order
        data_dir: Data directory to search (default: reportcore/data/)

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> find_data_file('', ['config.yaml'])
        PosixPath('.../reportcore/data/config.yaml')

        >>> find_data_file('translations', ['xx.yaml', 'en.yaml']).name
        'en.yaml'
    """
    base = (data_dir or PACKAGE_DATA_DIR) / subdirectory

    for filename in filenames:
        p = base / filename
        if p.exists():
            return p

    return None


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def format_not_found_error(
    what: str,
    searched_locations: List[Tuple[str, object]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        what: Name of the missing resource (e.g., 'config', 'translations')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {what} file found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "PACKAGE_DATA_DIR",
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]
