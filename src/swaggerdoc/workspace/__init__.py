# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tool configuration for swaggerdoc."""

from swaggerdoc.workspace.config import (
    CONFIG_FILE_NAME,
    ToolConfig,
    ToolConfigError,
    load_tool_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ToolConfig",
    "ToolConfigError",
    "load_tool_config",
]
