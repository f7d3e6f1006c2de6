# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entities of a Swagger 2.0 document.

Every field is optional on the wire and omitted from the output when it holds
its zero value.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictBool, StrictStr, field_validator

from swaggerdoc.model.base import OmitEmptyModel, status_codes_as_strings
from swaggerdoc.model.types import ItemRef, ParameterLocation, Schema, SecurityLocation

# ###############
# Public Interface
# ###############


class Info(OmitEmptyModel):
    """Basic information about the API."""

    title: StrictStr = ""
    description: StrictStr = ""
    version: StrictStr = ""


class Parameter(OmitEmptyModel):
    """A single parameter of an HTTP request.

    ``type`` and ``format`` are not needed for body parameters, which carry a
    ``schema_`` instead. A ``type`` of ``"file"`` is only meaningful for
    ``formData`` parameters; that constraint is not checked here.
    """

    name: StrictStr = ""
    location: ParameterLocation | None = Field(default=None, alias="in")
    description: StrictStr = ""
    required: StrictBool = False
    type: StrictStr = ""
    format: StrictStr = ""
    schema_: Schema | None = Field(default=None, alias="schema")


class Response(OmitEmptyModel):
    """One possible response to an HTTP request."""

    description: StrictStr = ""
    schema_: Schema = Field(default_factory=Schema, alias="schema")


class Request(OmitEmptyModel):
    """An operation: the documentation and parameters of one HTTP verb on a path."""

    summary: StrictStr = ""
    description: StrictStr = ""
    parameters: list[Parameter] = Field(default_factory=list)
    tags: list[StrictStr] = Field(default_factory=list)
    responses: dict[str, Response] = Field(default_factory=dict)

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_strings(cls, value: Any) -> Any:
        return status_codes_as_strings(value)


class Property(OmitEmptyModel):
    """One field of a :class:`Definition`."""

    type: StrictStr = ""
    format: StrictStr = ""
    description: StrictStr = ""
    items: ItemRef | None = None
    ref: StrictStr = Field(default="", alias="$ref")


class Definition(OmitEmptyModel):
    """A named, reusable type referenced elsewhere through a ``$ref`` string."""

    type: StrictStr = ""
    properties: dict[str, Property] = Field(default_factory=dict)
    required: list[StrictStr] = Field(default_factory=list)


class SecurityDefinition(OmitEmptyModel):
    """A named authentication scheme."""

    type: StrictStr = ""
    name: StrictStr = ""
    location: SecurityLocation | None = Field(default=None, alias="in")


class Document(OmitEmptyModel):
    """The root of a Swagger 2.0 document.

    Attributes:
        swagger_version: The Swagger version, usually ``"2.0"``.
        paths: Operations keyed by path, then by lower-case HTTP verb.
        definitions: Reusable types keyed by name.
        security: Alternative sets of security requirements, each mapping a
            scheme name to the scopes it needs.
        security_definitions: Authentication schemes keyed by name.
    """

    swagger_version: StrictStr = Field(default="", alias="swagger")
    info: Info = Field(default_factory=Info)
    host: StrictStr = ""
    schemes: list[StrictStr] = Field(default_factory=list)
    base_path: StrictStr = Field(default="", alias="basePath")
    produces: list[StrictStr] = Field(default_factory=list)
    paths: dict[str, dict[str, Request]] = Field(default_factory=dict)
    definitions: dict[str, Definition] = Field(default_factory=dict)
    security: list[dict[str, list[StrictStr]]] = Field(default_factory=list)
    security_definitions: dict[str, SecurityDefinition] = Field(default_factory=dict, alias="securityDefinitions")

    def operations(self) -> list[tuple[str, str, Request]]:
        """Return every ``(path, verb, request)`` triple in document order."""
        return [(path, verb, request) for path, verbs in self.paths.items() for verb, request in verbs.items()]
