# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base classes shared by every wire entity of the document model.

Two serialization policies exist:

* :class:`OmitEmptyModel` leaves a field out of the encoded output when its
  value is the zero value of its type: ``""``, ``False``, an empty list or
  mapping, a nested entity that itself encodes to nothing, or ``None`` for an
  optional entity. An optional entity that is set is always emitted, even
  when it encodes to ``{}``.
* :class:`WireModel` always emits every field.

Both ignore unknown keys on input and treat an explicit ``null`` as the zero
value, whether it stands for a field, a mapping value or a list element.
"""

from __future__ import annotations

from typing import Annotated, Any, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

# ###############
# Public Interface
# ###############


class WireModel(BaseModel):
    """An immutable entity that maps field-for-field onto a JSON object."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_is_absent(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("*", mode="before")
    @classmethod
    def _null_items_are_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name is None:
            return value
        return _zero_nulls(value, cls.model_fields[info.field_name].annotation)


class OmitEmptyModel(WireModel):
    """A wire entity whose fields are all omitted from the output when empty."""

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        present = self._present_optional_keys(bool(info.by_alias))
        return {key: value for key, value in data.items() if key in present or not is_empty(value)}

    def _present_optional_keys(self, by_alias: bool) -> set[str]:
        """Return the output keys of optional entities that are set."""
        keys = set()
        for name, field in type(self).model_fields.items():
            if field.default is None and isinstance(getattr(self, name), BaseModel):
                keys.add(field.alias if by_alias and field.alias else name)
        return keys


def is_empty(value: Any) -> bool:
    """Return True if *value* is the zero value of a wire field."""
    if value is None or value is False:
        return True
    if isinstance(value, str | list | dict):
        return len(value) == 0
    return False


def status_codes_as_strings(value: Any) -> Any:
    """Key a mapping of responses by string status codes.

    YAML loads unquoted status codes such as ``200`` as integers.
    """
    if isinstance(value, dict):
        return {str(code) if isinstance(code, int) else code: response for code, response in value.items()}
    return value


# ################
# Implementation
# ################


def _zero_nulls(value: Any, annotation: Any) -> Any:
    """Replace null mapping values and list elements with the zero value of their type."""
    origin = get_origin(annotation)
    if origin is list and isinstance(value, list):
        (item,) = get_args(annotation)
        return [_zero_of(item) if element is None else _zero_nulls(element, item) for element in value]
    if origin is dict and isinstance(value, dict):
        _, item = get_args(annotation)
        return {
            key: _zero_of(item) if element is None else _zero_nulls(element, item) for key, element in value.items()
        }
    return value


def _zero_of(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is list:
        return []
    if origin is dict:
        return {}
    if origin is Annotated:
        return _zero_of(get_args(annotation)[0])
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return {}
    if annotation is bool:
        return False
    return ""
