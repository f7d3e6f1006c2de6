# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory model of Swagger 2.0 documents."""

from swaggerdoc.model.entities import (
    Definition,
    Document,
    Info,
    Parameter,
    Property,
    Request,
    Response,
    SecurityDefinition,
)
from swaggerdoc.model.legacy import (
    LegacyDefinition,
    LegacyDocument,
    LegacyInfo,
    LegacyItemRef,
    LegacyParameter,
    LegacyProperty,
    LegacyRequest,
    LegacyResponse,
    LegacyResponses,
    LegacySchema,
)
from swaggerdoc.model.types import ItemRef, ParameterLocation, Schema, SecurityLocation

__all__ = [
    # Type references
    "ParameterLocation",
    "SecurityLocation",
    "ItemRef",
    "Schema",
    # Entities
    "Info",
    "Parameter",
    "Response",
    "Request",
    "Property",
    "Definition",
    "SecurityDefinition",
    "Document",
    # Minimal profile (deprecated)
    "LegacyInfo",
    "LegacyParameter",
    "LegacyItemRef",
    "LegacySchema",
    "LegacyResponse",
    "LegacyResponses",
    "LegacyRequest",
    "LegacyProperty",
    "LegacyDefinition",
    "LegacyDocument",
]
