"""Configuration loading for the jsonresin command line tool."""

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ResinConfig:
    """Settings for the jsonresin command line tool."""

    indent: Optional[int] = None
    validate: bool = False
    report: bool = False
    log_level: str = "INFO"
    encoding: str = "utf-8"


def parse_config(data: Dict[str, Any]) -> ResinConfig:
    """Build a validated ResinConfig from the 'jsonresin' section of a config file.

    Raises:
        ValueError: If a value has the wrong type or is out of range
    """
    config = ResinConfig()

    if "indent" in data:
        indent = data["indent"]
        if indent is not None and (
            isinstance(indent, bool) or not isinstance(indent, int) or indent < 0
        ):
            raise ValueError(f"'indent' must be a non-negative integer or null, got {indent!r}")
        config.indent = indent

    for flag in ("validate", "report"):
        if flag in data:
            if not isinstance(data[flag], bool):
                raise ValueError(f"'{flag}' must be true or false, got {data[flag]!r}")
            setattr(config, flag, data[flag])

    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {data['log_level']!r}"
            )
        config.log_level = level

    if "encoding" in data:
        if not isinstance(data["encoding"], str) or not data["encoding"]:
            raise ValueError(f"'encoding' must be a non-empty string, got {data['encoding']!r}")
        try:
            codecs.lookup(data["encoding"])
        except LookupError:
            raise ValueError(f"'encoding' is not a known codec: {data['encoding']!r}") from None
        config.encoding = data["encoding"]

    unknown = set(data) - {"indent", "validate", "report", "log_level", "encoding"}
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    return config


def load_config(path: str | Path) -> ResinConfig:
    """Load and validate jsonresin configuration from YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If config file not found
        ValueError: If configuration is invalid
        yaml.YAMLError: If YAML is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not data or "jsonresin" not in data:
        raise ValueError("Configuration file missing 'jsonresin' section")

    section = data["jsonresin"] or {}
    if not isinstance(section, dict):
        raise ValueError("'jsonresin' section must be a mapping")

    return parse_config(section)
