"""Tests for jsonresin configuration loading and validation."""

import tempfile
from pathlib import Path

import pytest
import yaml

from jsonresin.config import ResinConfig, load_config, parse_config


def create_test_config(content: dict) -> Path:
    """Create a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(content, f)
        return Path(f.name)


def test_load_valid_config():
    """Test loading a valid configuration."""
    config_path = create_test_config(
        {
            "jsonresin": {
                "indent": 2,
                "validate": True,
                "report": True,
                "log_level": "debug",
                "encoding": "latin-1",
            }
        }
    )

    try:
        config = load_config(config_path)
        assert config.indent == 2
        assert config.validate is True
        assert config.report is True
        assert config.log_level == "DEBUG"
        assert config.encoding == "latin-1"
    finally:
        config_path.unlink()


def test_empty_section_uses_defaults():
    """An empty section gives the default configuration."""
    config_path = create_test_config({"jsonresin": None})

    try:
        assert load_config(config_path) == ResinConfig()
    finally:
        config_path.unlink()


def test_load_missing_file():
    """Test loading a non-existent config file."""
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/path.yaml")


def test_load_missing_section():
    """Test loading config without 'jsonresin' section."""
    config_path = create_test_config({"other": "data"})

    try:
        with pytest.raises(ValueError, match="missing 'jsonresin' section"):
            load_config(config_path)
    finally:
        config_path.unlink()


def test_load_malformed_yaml(tmp_path):
    """Malformed YAML propagates the parser error."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("jsonresin: [unclosed\n")

    with pytest.raises(yaml.YAMLError):
        load_config(config_path)


def test_section_must_be_mapping(tmp_path):
    """A non-mapping section is rejected."""
    config_path = tmp_path / "list.yaml"
    config_path.write_text("jsonresin:\n  - indent\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(config_path)


@pytest.mark.parametrize(
    "data, message",
    [
        ({"indent": -1}, "'indent'"),
        ({"indent": "two"}, "'indent'"),
        ({"indent": True}, "'indent'"),
        ({"validate": "yes"}, "'validate'"),
        ({"report": 1}, "'report'"),
        ({"log_level": "verbose"}, "'log_level'"),
        ({"encoding": ""}, "'encoding'"),
        ({"encoding": "bogus"}, "not a known codec"),
        ({"colour": "red"}, "Unknown configuration keys: colour"),
    ],
)
def test_invalid_values(data, message):
    """Invalid values name the offending key."""
    with pytest.raises(ValueError, match=message):
        parse_config(data)


def test_null_indent_allowed():
    """Indent may be explicitly null."""
    assert parse_config({"indent": None}).indent is None
