"""Message catalog lookup.

Produces human-readable text for exception messages and localized period
labels. Catalogs live in reportcore/data/translations/<language>.yaml and
use printf-style placeholders.
"""

import logging
from functools import lru_cache
from typing import Dict

from reportcore.config import get_setting
from reportcore.utils.dataloader import (
    PACKAGE_DATA_DIR,
    find_data_file,
    format_not_found_error,
    load_yaml_file,
)

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"


@lru_cache(maxsize=8)
def load_translations(language: str) -> Dict[str, str]:
    """Load the message catalog for a language (falls back to English)."""
    path = find_data_file("translations", [f"{language}.yaml", f"{FALLBACK_LANGUAGE}.yaml"])
    if path is None:
        raise FileNotFoundError(
            format_not_found_error(
                what="translations",
                searched_locations=[("Package data", PACKAGE_DATA_DIR / "translations")],
                fix_instructions=["Reinstall reportcore: pip install -e ."],
            )
        )
    if path.stem != language:
        logger.warning(f"No '{language}' translations, using '{path.stem}'")
    return {str(k): str(v) for k, v in load_yaml_file(path).items()}


def translate(key: str, *args) -> str:
    """
    Translate a message key, substituting printf-style arguments.

    Unknown keys are returned unchanged so a missing entry never hides the
    underlying error.

    Examples:
        >>> translate("General_DateRangeFromTo", "2024-01-01", "2024-01-07")
        'From 2024-01-01 to 2024-01-07'

        >>> translate("LongMonth_2")
        'February'
    """
    catalog = load_translations(get_setting("language", FALLBACK_LANGUAGE))
    text = catalog.get(key)
    if text is None:
        return key
    if args:
        text = text % args
    return text


__all__ = [
    "load_translations",
    "translate",
]
