# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the tool configuration module."""

from pathlib import Path

import pytest

from swaggerdoc.workspace import (
    CONFIG_FILE_NAME,
    ToolConfig,
    ToolConfigError,
    load_tool_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default configuration."""
    config = load_tool_config(_write_config(tmp_path, ""))
    assert config == ToolConfig()
    assert config.indent == 2
    assert config.sort_keys is False
    assert config.profile == "standard"
    assert config.definition_providers == []


def test_full_config(tmp_path: Path) -> None:
    """Every key is read into the matching attribute."""
    content = """\
indent: 4
sort-keys: true
profile: legacy
definition-providers:
  - myapi.schema:Provider
  - myapi.other:instance
"""
    config = load_tool_config(_write_config(tmp_path, content))
    assert config.indent == 4
    assert config.sort_keys is True
    assert config.profile == "legacy"
    assert config.definition_providers == ["myapi.schema:Provider", "myapi.other:instance"]


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    config = load_tool_config(_write_config(tmp_path, "indent: 0\ncolor: blue\n"))
    assert config.indent == 0


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ToolConfigError, match="not found"):
        load_tool_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ToolConfigError, match="Invalid YAML"):
        load_tool_config(_write_config(tmp_path, "indent: [2\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ToolConfigError, match="mapping"):
        load_tool_config(_write_config(tmp_path, "- indent\n"))


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ("indent: -1\n", "indent"),
        ("indent: two\n", "indent"),
        ("indent: true\n", "indent"),
        ("sort-keys: yes-please\n", "sort-keys"),
        ("profile: openapi3\n", "profile"),
        ("definition-providers: myapi:Provider\n", "definition-providers"),
        ("definition-providers: [1, 2]\n", "definition-providers"),
    ],
)
def test_invalid_values(tmp_path: Path, content: str, key: str) -> None:
    with pytest.raises(ToolConfigError, match=key):
        load_tool_config(_write_config(tmp_path, content))
