"""Configuration loader.

Loads reportcore settings from YAML with the following priority:
1. Explicit path passed to load_config()
2. REPORTCORE_CONFIG_PATH environment variable
3. Packaged defaults (reportcore/data/config.yaml)

Override files only need the keys they change; missing keys fall back to
the packaged defaults.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

from reportcore.utils.dataloader import (
    PACKAGE_DATA_DIR,
    find_data_file,
    format_not_found_error,
    load_yaml_file,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "REPORTCORE_CONFIG_PATH"


def _load_defaults() -> Dict[str, Any]:
    path = find_data_file("", ["config.yaml"])
    if path is None:
        raise FileNotFoundError(
            format_not_found_error(
                what="config",
                searched_locations=[("Package data", PACKAGE_DATA_DIR / "config.yaml")],
                fix_instructions=["Reinstall reportcore: pip install -e ."],
            )
        )
    return load_yaml_file(path)


@lru_cache(maxsize=1)
def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load configuration with environment/explicit-path overrides.

    Args:
        path: Optional explicit path to a YAML override file

    Returns:
        Configuration dict (packaged defaults merged with the override)

    Raises:
        FileNotFoundError: If the explicit or environment path does not exist

    Examples:
        >>> load_config()["period_ids"]["month"]
        3
        >>> load_config()["default_timezone"]
        'UTC'
    """
    config = _load_defaults()

    override = None
    source = None
    if path is not None:
        override, source = Path(path), "explicit path"
    elif os.environ.get(CONFIG_ENV_VAR):
        override, source = Path(os.environ[CONFIG_ENV_VAR]), CONFIG_ENV_VAR

    if override is not None:
        if not override.exists():
            raise FileNotFoundError(
                format_not_found_error(
                    what="config",
                    searched_locations=[(source, override)],
                    fix_instructions=[
                        f"Point {CONFIG_ENV_VAR} at an existing YAML file",
                        f"Or unset {CONFIG_ENV_VAR} to use the packaged defaults",
                    ],
                )
            )
        config.update(load_yaml_file(override))
        logger.info(f"Loaded config override from {source}: {override}")

    return config


def get_setting(key: str, default: Any = None) -> Any:
    """Return a single configuration value."""
    return load_config().get(key, default)


def clear_config_cache():
    """Clear the LRU cache for load_config.

    Useful for testing or when the environment override changes.
    """
    load_config.cache_clear()
    logger.info("Cleared config cache")


__all__ = [
    "CONFIG_ENV_VAR",
    "load_config",
    "get_setting",
    "clear_config_cache",
]
