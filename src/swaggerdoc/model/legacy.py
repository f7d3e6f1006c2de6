# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deprecated minimal profile of the Swagger 2.0 document model.

This profile predates :mod:`swaggerdoc.model.entities` and is kept for
consumers that still exchange documents in its shape. Compared with the
canonical model it has no security sections, no ``required`` name lists, no
body-parameter schemas and no ``$ref`` on schemas or properties, and it only
knows the ``"200"`` response of each operation. Every field is always
emitted, including empty strings and ``false``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictBool, StrictStr, model_validator

from swaggerdoc.model.base import WireModel, status_codes_as_strings

# ###############
# Public Interface
# ###############


class LegacyInfo(WireModel):
    title: StrictStr = ""
    description: StrictStr = ""
    version: StrictStr = ""


class LegacyParameter(WireModel):
    name: StrictStr = ""
    location: StrictStr = Field(default="", alias="in")
    description: StrictStr = ""
    required: StrictBool = False
    type: StrictStr = ""
    format: StrictStr = ""


class LegacyItemRef(WireModel):
    ref: StrictStr = Field(default="", alias="$ref")


class LegacySchema(WireModel):
    type: StrictStr = ""
    items: LegacyItemRef = Field(default_factory=LegacyItemRef)


class LegacyResponse(WireModel):
    description: StrictStr = ""
    schema_: LegacySchema = Field(default_factory=LegacySchema, alias="schema")


class LegacyResponses(WireModel):
    """The responses of an operation, limited to HTTP 200."""

    ok: LegacyResponse = Field(default_factory=LegacyResponse, alias="200")

    @model_validator(mode="before")
    @classmethod
    def _status_codes_as_strings(cls, data: Any) -> Any:
        return status_codes_as_strings(data)


class LegacyRequest(WireModel):
    summary: StrictStr = ""
    description: StrictStr = ""
    parameters: list[LegacyParameter] = Field(default_factory=list)
    tags: list[StrictStr] = Field(default_factory=list)
    responses: LegacyResponses = Field(default_factory=LegacyResponses)


class LegacyProperty(WireModel):
    type: StrictStr = ""
    format: StrictStr = ""
    description: StrictStr = ""
    items: LegacyItemRef = Field(default_factory=LegacyItemRef)


class LegacyDefinition(WireModel):
    type: StrictStr = ""
    properties: dict[str, LegacyProperty] = Field(default_factory=dict)


class LegacyDocument(WireModel):
    """Root of a document in the minimal profile."""

    swagger_version: StrictStr = Field(default="", alias="swagger")
    info: LegacyInfo = Field(default_factory=LegacyInfo)
    host: StrictStr = ""
    schemes: list[StrictStr] = Field(default_factory=list)
    base_path: StrictStr = Field(default="", alias="basePath")
    produces: list[StrictStr] = Field(default_factory=list)
    paths: dict[str, dict[str, LegacyRequest]] = Field(default_factory=dict)
    definitions: dict[str, LegacyDefinition] = Field(default_factory=dict)
