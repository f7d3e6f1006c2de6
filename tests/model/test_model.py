# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the Swagger 2.0 document model."""

import pytest
from pydantic import ValidationError

from swaggerdoc.model import (
    Definition,
    Document,
    Info,
    ItemRef,
    Parameter,
    ParameterLocation,
    Property,
    Request,
    Response,
    Schema,
    SecurityDefinition,
    SecurityLocation,
)


def test_empty_document_holds_zero_values() -> None:
    """A document built without arguments has every field at its zero value."""
    doc = Document()
    assert doc.swagger_version == ""
    assert doc.info == Info()
    assert doc.host == ""
    assert doc.schemes == []
    assert doc.base_path == ""
    assert doc.produces == []
    assert doc.paths == {}
    assert doc.definitions == {}
    assert doc.security == []
    assert doc.security_definitions == {}


def test_fields_accept_python_names_and_wire_aliases() -> None:
    """Aliased fields can be populated by either name."""
    by_name = Document(swagger_version="2.0", base_path="/v1")
    by_alias = Document.model_validate({"swagger": "2.0", "basePath": "/v1"})
    assert by_name == by_alias


def test_body_parameter_with_schema() -> None:
    """A body parameter carries a schema whose $ref stays a plain string."""
    param = Parameter(
        name="body",
        location=ParameterLocation.BODY,
        required=True,
        schema_=Schema(ref="#/definitions/Widget"),
    )
    assert param.location is ParameterLocation.BODY
    assert param.schema_ is not None
    assert param.schema_.ref == "#/definitions/Widget"


def test_parameter_location_from_string() -> None:
    """The location enum is populated from its wire string."""
    param = Parameter.model_validate({"name": "file", "in": "formData", "type": "file"})
    assert param.location is ParameterLocation.FORM_DATA


def test_unknown_parameter_location_is_rejected() -> None:
    """Only the five Swagger 2.0 locations are accepted."""
    with pytest.raises(ValidationError):
        Parameter.model_validate({"name": "session", "in": "cookie"})


def test_response_schema_defaults_to_empty_schema() -> None:
    """A response without a schema holds an empty Schema rather than None."""
    response = Response(description="No content")
    assert response.schema_ == Schema()


def test_array_schema_with_item_ref() -> None:
    """An array schema refers to its item type through an ItemRef."""
    schema = Schema(type="array", items=ItemRef(ref="#/definitions/Pet"))
    assert schema.items is not None
    assert schema.items.ref == "#/definitions/Pet"
    assert schema.items.type == ""


def test_definition_with_properties() -> None:
    """A definition maps property names to properties and lists required names."""
    definition = Definition(
        type="object",
        properties={
            "id": Property(type="integer", format="int64"),
            "tags": Property(type="array", items=ItemRef(type="string")),
            "owner": Property(ref="#/definitions/User"),
        },
        required=["id"],
    )
    assert list(definition.properties) == ["id", "tags", "owner"]
    assert definition.properties["tags"].items == ItemRef(type="string")
    assert definition.properties["owner"].ref == "#/definitions/User"
    assert definition.required == ["id"]


def test_security_definition() -> None:
    """An API key scheme names its parameter and where it is carried."""
    scheme = SecurityDefinition(type="apiKey", name="X-API-Key", location=SecurityLocation.HEADER)
    assert scheme.location is SecurityLocation.HEADER


def test_operations_lists_every_path_and_verb() -> None:
    """operations() flattens the path/verb mapping in document order."""
    doc = Document(
        paths={
            "/pets": {"get": Request(summary="List"), "post": Request(summary="Create")},
            "/pets/{id}": {"get": Request(summary="Show")},
        }
    )
    assert [(path, verb) for path, verb, _ in doc.operations()] == [
        ("/pets", "get"),
        ("/pets", "post"),
        ("/pets/{id}", "get"),
    ]


def test_entities_are_frozen() -> None:
    """Entities cannot be mutated after construction."""
    info = Info(title="Pets")
    with pytest.raises(ValidationError):
        info.title = "Other"  # type: ignore[misc]


def test_null_is_treated_as_absent() -> None:
    """An explicit null leaves the field at its zero value."""
    request = Request.model_validate({"summary": None, "tags": None, "parameters": [{"name": "q", "in": None}]})
    assert request.summary == ""
    assert request.tags == []
    assert request.parameters[0].location is None


def test_integer_status_codes_become_strings() -> None:
    """Status codes loaded as integers are keyed by their string form."""
    request = Request.model_validate({"responses": {200: {"description": "OK"}, "default": {"description": "Error"}}})
    assert list(request.responses) == ["200", "default"]


def test_strict_scalars() -> None:
    """Booleans and strings are not coerced from other types."""
    with pytest.raises(ValidationError):
        Parameter.model_validate({"required": "yes"})
    with pytest.raises(ValidationError):
        Info.model_validate({"version": 1})
