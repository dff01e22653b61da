"""Configuration management for rangegaps."""

from __future__ import annotations

import configparser
import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

CONFIG_FILE_NAME = "rangegaps.ini"
CONFIG_DIR_NAME = ".rangegaps"

OutputFormat = Literal["text", "json", "csv"]


class ValidationConfig(BaseModel):
    """Input validation configuration."""

    check_order: bool = True  # Reject points that are not ascending


class OutputConfig(BaseModel):
    """Report output configuration."""

    format: OutputFormat = "text"
    max_display: int = Field(default=20, ge=0)  # Gaps shown in text output unless --verbose


class AppConfig(BaseModel):
    """Application configuration."""

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# Global config instance
_config: AppConfig | None = None
_config_path: Path | None = None  # Track where config was loaded from


def get_config_paths() -> list[Path]:
    """Get list of config file paths to search, in priority order.

    Search order:
    1. Current working directory (INI)
    2. User home directory (~/.rangegaps/, INI)
    3. YAML files in the same places

    Returns:
        List of paths to check for config files.
    """
    cwd = Path.cwd()
    home_dir = Path.home() / CONFIG_DIR_NAME

    return [
        cwd / CONFIG_FILE_NAME,
        home_dir / CONFIG_FILE_NAME,
        cwd / ".rangegaps.yaml",
        cwd / ".rangegaps.yml",
        home_dir / "config.yaml",
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file.

    Returns:
        Path to config file if found, None otherwise.
    """
    for path in get_config_paths():
        if path.exists():
            return path
    return None


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and $VAR syntax.

    Args:
        value: Config value (string, dict, list, or other).

    Returns:
        Value with environment variables expanded.
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")

        def replace(match: re.Match[str]) -> str:
            var_name = match.group(1) or match.group(2)
            return os.environ.get(var_name, "")

        return pattern.sub(replace, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _parse_bool(value: str) -> bool:
    """Parse a boolean value from a string (true/false/yes/no/1/0/on/off)."""
    return value.strip().lower() in ("true", "yes", "1", "on")


def _load_ini_config(path: Path) -> dict[str, Any]:
    """Load configuration from INI file.

    Args:
        path: Path to INI config file.

    Returns:
        Dictionary structure matching AppConfig schema.
    """
    parser = configparser.ConfigParser()
    parser.read(path, encoding="utf-8")

    config: dict[str, Any] = {}

    if parser.has_section("validation") and parser.has_option("validation", "check_order"):
        value = _expand_env_vars(parser.get("validation", "check_order"))
        config["validation"] = {"check_order": _parse_bool(value)}

    if parser.has_section("output"):
        output: dict[str, Any] = {}
        if parser.has_option("output", "format"):
            fmt = _expand_env_vars(parser.get("output", "format")).strip().lower()
            if fmt:
                output["format"] = fmt
        if parser.has_option("output", "max_display"):
            try:
                max_display = int(parser.get("output", "max_display"))
            except ValueError:
                max_display = -1
            # Invalid or negative values keep the default
            if max_display >= 0:
                output["max_display"] = max_display
        if output:
            config["output"] = output

    return config


def _load_yaml_config(path: Path) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Dictionary structure matching AppConfig schema.
    """
    with open(path, encoding="utf-8") as f:
        return _expand_env_vars(yaml.safe_load(f) or {})


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from file.

    Supports both INI (.ini/.cfg) and YAML (.yaml/.yml) formats.
    Environment variables are expanded using ${VAR} syntax.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration.

    Raises:
        pydantic.ValidationError: If the file holds invalid values.
    """
    global _config, _config_path

    if path is None:
        path = find_config_file()

    if path is None or not path.exists():
        _config = AppConfig()
        _config_path = None
        return _config

    if path.suffix in (".ini", ".cfg"):
        raw_config = _load_ini_config(path)
    else:
        raw_config = _load_yaml_config(path)

    _config = AppConfig.model_validate(raw_config)
    _config_path = path
    return _config


def get_config_path() -> Path | None:
    """Get the path to the currently loaded config file.

    Returns:
        Path to config file, or None if using defaults.
    """
    return _config_path


def get_config() -> AppConfig:
    """Get the current configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the cached configuration.

    Useful for testing or when config file changes.
    """
    global _config, _config_path
    _config = None
    _config_path = None


def save_default_config(path: Path | None = None) -> Path:
    """Save a default INI config file.

    Args:
        path: Where to save. Defaults to ./rangegaps.ini.

    Returns:
        Path to saved config file.
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILE_NAME

    default_config = """\
# rangegaps configuration
# You can use environment variables with ${VAR} syntax

[validation]
# Reject points that are not in ascending order.
# Turning this off skips the check; unordered input then gives wrong gaps.
check_order = true

[output]
# Default report format: text, json or csv
format = text
# Gaps listed in text output (use --verbose to show all)
max_display = 20
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(default_config)

    return path
