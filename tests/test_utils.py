"""Tests for shared utilities."""

import pytest
from pathlib import Path

from reportcore.utils.dataloader import (
    PACKAGE_DATA_DIR,
    find_data_file,
    load_yaml_file,
    format_not_found_error,
)


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_packaged_config(self):
        """Test the packaged config is found"""
        path = find_data_file("", ["config.yaml"])
        assert path is not None
        assert path.parent == PACKAGE_DATA_DIR

    def test_first_existing_candidate_wins(self):
        """Test candidates are tried in order"""
        path = find_data_file("translations", ["xx.yaml", "en.yaml"])
        assert path.name == "en.yaml"

    def test_find_nonexistent_file(self):
        """Test that None is returned when file not found"""
        assert find_data_file("nonexistent", ["missing.yaml"]) is None

    def test_custom_data_dir(self, tmp_path):
        """Test searching another directory"""
        (tmp_path / "extra").mkdir()
        (tmp_path / "extra" / "a.yaml").write_text("x: 1\n")
        assert find_data_file("extra", ["a.yaml"], data_dir=tmp_path) == tmp_path / "extra" / "a.yaml"


class TestLoadYamlFile:
    """Test YAML loading utility"""

    def test_load(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("period_ids:\n  day: 1\n")
        assert load_yaml_file(path) == {"period_ids": {"day": 1}}

    def test_empty_file(self, tmp_path):
        """Test an empty file loads as an empty dict"""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_file(path) == {}

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_yaml_file(Path("/nonexistent/config.yaml"))


class TestFormatNotFoundError:
    """Test error message formatting"""

    def test_format(self):
        message = format_not_found_error(
            what="config",
            searched_locations=[("Environment variable", "/tmp/x.yaml")],
            fix_instructions=["Set REPORTCORE_CONFIG_PATH"],
        )
        assert message.startswith("No config file found")
        assert "  1. Environment variable: /tmp/x.yaml" in message
        assert "  • Set REPORTCORE_CONFIG_PATH" in message
