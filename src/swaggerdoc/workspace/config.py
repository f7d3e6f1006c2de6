# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the swaggerdoc tool configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from swaggerdoc.codec.document import PROFILES, STANDARD_PROFILE

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".swaggerdoc.yaml"


class ToolConfigError(Exception):
    """Raised when a tool configuration file is invalid or cannot be loaded."""


@dataclass
class ToolConfig:
    """Settings used when a document is re-encoded by the command-line tool.

    Attributes:
        indent: Indentation of JSON output.
        sort_keys: Whether object keys are sorted on output.
        profile: Document profile, ``"standard"`` or the deprecated ``"legacy"``.
        definition_providers: ``"module:attribute"`` paths of definition
            providers merged into the document before encoding.
    """

    indent: int = 2
    sort_keys: bool = False
    profile: str = STANDARD_PROFILE
    definition_providers: list[str] = field(default_factory=list)


def load_tool_config(path: Path) -> ToolConfig:
    """Load and parse a swaggerdoc configuration file.

    Args:
        path: Path to the `.swaggerdoc.yaml` file.

    Returns:
        A ToolConfig instance populated from the file.

    Raises:
        ToolConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ToolConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ToolConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_tool_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_tool_config(text: str, source_label: str = "<string>") -> ToolConfig:
    """Parse config YAML text into a ToolConfig.

    An empty file yields the default configuration.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ToolConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ToolConfig()
    if not isinstance(data, dict):
        raise ToolConfigError(f"{source_label}: config must be a YAML mapping")

    config = ToolConfig()

    if "indent" in data:
        indent = data["indent"]
        if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
            raise ToolConfigError(f"{source_label}: 'indent' must be a non-negative integer")
        config.indent = indent

    if "sort-keys" in data:
        sort_keys = data["sort-keys"]
        if not isinstance(sort_keys, bool):
            raise ToolConfigError(f"{source_label}: 'sort-keys' must be true or false")
        config.sort_keys = sort_keys

    if "profile" in data:
        profile = data["profile"]
        if profile not in PROFILES:
            choices = ", ".join(PROFILES)
            raise ToolConfigError(f"{source_label}: 'profile' must be one of {choices}")
        config.profile = profile

    if "definition-providers" in data:
        providers = data["definition-providers"]
        if not isinstance(providers, list) or not all(isinstance(p, str) for p in providers):
            raise ToolConfigError(f"{source_label}: 'definition-providers' must be a list of strings")
        config.definition_providers = list(providers)

    return config
