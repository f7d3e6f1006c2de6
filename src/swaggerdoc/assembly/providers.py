# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Definitions contributed by code rather than by a decoded document.

Any object with an ``openapi_definitions()`` method returning a mapping of
name to :class:`~swaggerdoc.model.Definition` is a definition provider.
Tools merge providers into a document before encoding it; the codec itself
never calls them.
"""

from __future__ import annotations

import importlib
import logging
from typing import Protocol, runtime_checkable

from swaggerdoc.model.entities import Definition, Document

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@runtime_checkable
class DefinitionProvider(Protocol):
    """Something that can enumerate named type definitions."""

    def openapi_definitions(self) -> dict[str, Definition]: ...


class DefinitionConflictError(Exception):
    """Raised when two sources define the same name differently."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Conflicting definitions for '{name}'")


class ProviderLoadError(Exception):
    """Raised when a provider cannot be located from its import path."""


def merge_definitions(document: Document, *providers: DefinitionProvider, overwrite: bool = False) -> Document:
    """Return a copy of *document* extended with the definitions of *providers*.

    Providers are applied in order, after the document's own definitions.

    Args:
        document: The document to extend. It is not modified.
        providers: Sources of extra definitions.
        overwrite: Let a later definition replace an earlier one of the same name.

    Returns:
        A new :class:`Document`.

    Raises:
        DefinitionConflictError: If a name is defined twice with different
            content and *overwrite* is false.
    """
    definitions = dict(document.definitions)
    for provider in providers:
        for name, definition in provider.openapi_definitions().items():
            existing = definitions.get(name)
            if existing is not None and existing != definition and not overwrite:
                raise DefinitionConflictError(name)
            definitions[name] = definition
        logger.debug("Merged definitions from %s", type(provider).__name__)
    return document.model_copy(update={"definitions": definitions})


def load_provider(spec: str) -> DefinitionProvider:
    """Locate a provider given as ``"package.module:attribute"``.

    A class is instantiated without arguments; any other object is used as is.

    Raises:
        ProviderLoadError: If the import path is malformed, fails to import,
            names a class that cannot be instantiated without arguments,
            or does not name a definition provider.
    """
    module_name, sep, attribute = spec.partition(":")
    if not sep or not module_name or not attribute:
        raise ProviderLoadError(f"Provider must be given as 'module:attribute', got {spec!r}")

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ProviderLoadError(f"Cannot import provider module '{module_name}': {exc}") from exc

    try:
        target = getattr(module, attribute)
    except AttributeError:
        raise ProviderLoadError(f"Module '{module_name}' has no attribute '{attribute}'") from None

    if isinstance(target, type):
        try:
            provider = target()
        except Exception as exc:
            raise ProviderLoadError(f"Cannot instantiate provider {spec!r}: {exc}") from exc
    else:
        provider = target
    if not isinstance(provider, DefinitionProvider):
        raise ProviderLoadError(f"{spec!r} does not provide an openapi_definitions() method")
    return provider
