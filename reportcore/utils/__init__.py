"""Shared utilities for the reportcore package."""

from reportcore.utils.dataloader import (
    PACKAGE_DATA_DIR,
    find_data_file,
    load_yaml_file,
    format_not_found_error,
)

__all__ = [
    "PACKAGE_DATA_DIR",
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]
