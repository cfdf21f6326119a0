"""Tests for TOML configuration loading."""

import argparse

import pytest

from wordsum.config import Config, load_config, merge_config_with_args


def _write(tmp_path, text):
    path = tmp_path / "wordsum.toml"
    path.write_text(text)
    return path


def test_defaults() -> None:
    """Test the built-in configuration defaults."""
    config = Config()
    assert config.max_chars == 1023
    assert config.line_length == 80
    assert config.quiet is False


def test_load_full_config(tmp_path) -> None:
    """Test that every supported key is read."""
    path = _write(
        tmp_path,
        """
[input]
max_chars = 0

[output]
line_length = 40
quiet = true
""",
    )
    config = load_config(path)
    assert config.max_chars == 0
    assert config.line_length == 40
    assert config.quiet is True


def test_load_quiet_false(tmp_path) -> None:
    """Test that an explicit quiet = false keeps quiet mode off."""
    config = load_config(_write(tmp_path, "[output]\nquiet = false\n"))
    assert config.quiet is False


def test_load_empty_config(tmp_path) -> None:
    """Test that missing sections keep the defaults."""
    assert load_config(_write(tmp_path, "")) == Config()


@pytest.mark.parametrize(
    "text",
    [
        "[input]\nmax_chars = -1\n",
        "[input]\nmax_chars = \"lots\"\n",
        "[output]\nline_length = 0\n",
        "[output]\nline_length = true\n",
        "[output]\nquiet = \"false\"\n",
        "[output]\nquiet = 1\n",
    ],
)
def test_invalid_values(tmp_path, text) -> None:
    """Test that out-of-range or wrongly typed values raise ValueError."""
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, text))


def test_invalid_toml(tmp_path) -> None:
    """Test that malformed TOML raises ValueError."""
    # TOMLDecodeError subclasses ValueError
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "[input\n"))


def test_missing_file(tmp_path) -> None:
    """Test that a missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_merge_args_override_config() -> None:
    """Test that CLI args take precedence over config values."""
    config = Config(max_chars=10, line_length=20)
    args = argparse.Namespace(max_chars=500, line_length=None, quiet=True, verbose=False)
    merged = merge_config_with_args(config, args)
    assert merged.max_chars == 500
    assert merged.line_length == 20
    assert merged.quiet is True
    assert merged.verbose is False
