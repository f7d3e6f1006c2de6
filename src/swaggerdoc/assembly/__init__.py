# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of documents from decoded content and programmatic definitions."""

from swaggerdoc.assembly.providers import (
    DefinitionConflictError,
    DefinitionProvider,
    ProviderLoadError,
    load_provider,
    merge_definitions,
)

__all__ = [
    "DefinitionProvider",
    "DefinitionConflictError",
    "ProviderLoadError",
    "load_provider",
    "merge_definitions",
]
