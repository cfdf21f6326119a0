"""TOML configuration loading and validation."""

import sys
from dataclasses import dataclass
from pathlib import Path

# Python 3.11+ has tomllib built-in
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .utils import DEFAULT_LINE_LENGTH, DEFAULT_MAX_CHARS


@dataclass
class Config:
    """Complete application configuration."""

    # Input settings
    max_chars: int = DEFAULT_MAX_CHARS

    # Output settings
    line_length: int = DEFAULT_LINE_LENGTH
    quiet: bool = False
    verbose: bool = False


def _get_int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def _get_bool(section: dict, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value


def load_config(config_path: Path) -> Config:
    """
    Load configuration from TOML file.

    Args:
        config_path: Path to TOML config file

    Returns:
        Parsed Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        tomllib.TOMLDecodeError: If TOML is invalid
        ValueError: If config values are invalid
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    config = Config()

    if "input" in data:
        input_section = data["input"]
        config.max_chars = _get_int(input_section, "max_chars", config.max_chars)
        if config.max_chars < 0:
            raise ValueError(f"'max_chars' must be 0 or greater, got {config.max_chars}")

    if "output" in data:
        output_section = data["output"]
        config.line_length = _get_int(output_section, "line_length", config.line_length)
        if config.line_length < 1:
            raise ValueError(f"'line_length' must be at least 1, got {config.line_length}")
        config.quiet = _get_bool(output_section, "quiet", config.quiet)

    return config


def merge_config_with_args(config: Config, args) -> Config:
    """
    Merge CLI arguments over config file values.

    CLI args take precedence over config file.
    """
    if getattr(args, "max_chars", None) is not None:
        config.max_chars = args.max_chars

    if getattr(args, "line_length", None) is not None:
        config.line_length = args.line_length

    if getattr(args, "quiet", False):
        config.quiet = True

    if getattr(args, "verbose", False):
        config.verbose = True

    return config
