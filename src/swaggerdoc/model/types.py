# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type references and enumerations used by the Swagger 2.0 document model."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, StrictStr

from swaggerdoc.model.base import OmitEmptyModel

# ###############
# Public Interface
# ###############


class ParameterLocation(str, Enum):
    """Where a request parameter is carried."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    FORM_DATA = "formData"
    BODY = "body"


class SecurityLocation(str, Enum):
    """Where an API key is carried."""

    QUERY = "query"
    HEADER = "header"


class ItemRef(OmitEmptyModel):
    """The type of the items of an array, either by reference or inline."""

    ref: StrictStr = Field(default="", alias="$ref")
    type: StrictStr = ""


class Schema(OmitEmptyModel):
    """The shape of a response or body payload.

    ``ref`` is kept as an opaque string; it is never resolved against the
    document's definitions.
    """

    type: StrictStr = ""
    items: ItemRef | None = None
    ref: StrictStr = Field(default="", alias="$ref")
