# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding and encoding of Swagger 2.0 documents.

Documents are read from and written to their JSON wire form, or YAML as an
equivalent textual form. Decoding is permissive about keys the model does not
declare (they are dropped, including ``x-`` vendor extensions) and strict
about the types of the keys it does declare.
"""

from __future__ import annotations

import json
import logging
import warnings
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from swaggerdoc.model.entities import Document
from swaggerdoc.model.legacy import LegacyDocument

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# ###############
# Public Interface
# ###############

STANDARD_PROFILE = "standard"
LEGACY_PROFILE = "legacy"
PROFILES = (STANDARD_PROFILE, LEGACY_PROFILE)

YAML_SUFFIXES = (".yaml", ".yml")


class DecodeError(Exception):
    """Base class for failures to turn a payload into a document."""


class MalformedInputError(DecodeError):
    """Raised when the payload is not well-formed JSON (or YAML)."""


class ShapeMismatchError(DecodeError):
    """Raised when a value cannot be taken as the type its field declares.

    Attributes:
        problems: ``(location, message)`` pairs, where location is the dotted
            path of the offending value, e.g. ``paths./pets.get.parameters.0.required``.
    """

    def __init__(self, problems: list[tuple[str, str]]) -> None:
        self.problems = problems
        details = "; ".join(f"{location}: {message}" for location, message in problems)
        super().__init__(f"Document does not match the Swagger 2.0 model: {details}")


class DocumentIOError(Exception):
    """Raised when a document file cannot be read or written."""


def decode(data: bytes | str) -> Document:
    """Decode a JSON payload into a :class:`Document`.

    Args:
        data: The JSON text, as bytes or str.

    Returns:
        The decoded document. Keys missing from the payload hold their zero value.

    Raises:
        MalformedInputError: If *data* is not well-formed JSON.
        ShapeMismatchError: If a value does not fit its field, e.g. a string
            where a list or a boolean is expected.
    """
    return _validate(Document, _load_json(data))


def encode(document: Document, *, indent: int | None = None, sort_keys: bool = False) -> bytes:
    """Encode a :class:`Document` as UTF-8 JSON, leaving out empty fields."""
    return _dump_json(document, indent=indent, sort_keys=sort_keys)


def decode_yaml(data: bytes | str) -> Document:
    """Decode a YAML payload into a :class:`Document`.

    An empty payload decodes to an empty document.

    Raises:
        MalformedInputError: If *data* is not well-formed YAML.
        ShapeMismatchError: If a value does not fit its field.
    """
    return _validate(Document, _load_yaml(data))


def encode_yaml(document: Document, *, sort_keys: bool = False) -> bytes:
    """Encode a :class:`Document` as UTF-8 YAML, leaving out empty fields."""
    return _dump_yaml(document, sort_keys=sort_keys)


def decode_legacy(data: bytes | str) -> LegacyDocument:
    """Decode a JSON payload into the deprecated minimal profile.

    Raises:
        MalformedInputError: If *data* is not well-formed JSON.
        ShapeMismatchError: If a value does not fit its field.
    """
    _warn_legacy()
    return _validate(LegacyDocument, _load_json(data))


def encode_legacy(document: LegacyDocument, *, indent: int | None = None, sort_keys: bool = False) -> bytes:
    """Encode a minimal-profile document as UTF-8 JSON, emitting every field."""
    _warn_legacy()
    return _dump_json(document, indent=indent, sort_keys=sort_keys)


def read_document(path: Path, *, profile: str = STANDARD_PROFILE) -> Document | LegacyDocument:
    """Read and decode a document file.

    Files with a ``.yaml`` or ``.yml`` suffix are read as YAML, anything else as JSON.

    Raises:
        DocumentIOError: If the file cannot be read.
        MalformedInputError: If the content is not well-formed.
        ShapeMismatchError: If the content does not fit the model.
        ValueError: If *profile* is unknown.
    """
    model = _model_for(profile)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentIOError(f"Cannot read document '{path}': {exc}") from exc

    logger.debug("Reading %s document %s", profile, path)
    obj = _load_yaml(raw) if _is_yaml(path) else _load_json(raw)
    return _validate(model, obj)


def write_document(
    document: Document | LegacyDocument,
    path: Path,
    *,
    indent: int | None = 2,
    sort_keys: bool = False,
) -> None:
    """Encode *document* and write it to *path*, creating parent directories as needed.

    The encoding follows the suffix of *path* as in :func:`read_document`.

    Raises:
        DocumentIOError: If the file cannot be written.
    """
    if _is_yaml(path):
        payload = _dump_yaml(document, sort_keys=sort_keys)
    else:
        payload = _dump_json(document, indent=indent, sort_keys=sort_keys)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise DocumentIOError(f"Cannot write document '{path}': {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(payload), path)


# ################
# Implementation
# ################


def _load_json(data: bytes | str) -> Any:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise MalformedInputError("Invalid JSON: nested too deeply") from exc


def _load_yaml(data: bytes | str) -> Any:
    try:
        obj = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise MalformedInputError(f"Invalid YAML: {exc}") from exc
    except RecursionError as exc:
        raise MalformedInputError("Invalid YAML: nested too deeply") from exc
    return {} if obj is None else obj


def _validate(model: type[_ModelT], obj: Any) -> _ModelT:
    try:
        document = model.model_validate(obj)
    except ValidationError as exc:
        problems = [(_format_location(error["loc"]), error["msg"]) for error in exc.errors()]
        raise ShapeMismatchError(problems) from exc
    logger.debug("Decoded %s", model.__name__)
    return document


def _dump_json(document: BaseModel, *, indent: int | None, sort_keys: bool) -> bytes:
    data = document.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False).encode("utf-8")


def _dump_yaml(document: BaseModel, *, sort_keys: bool) -> bytes:
    data = document.model_dump(mode="json", by_alias=True)
    text = yaml.safe_dump(data, sort_keys=sort_keys, allow_unicode=True, default_flow_style=False)
    return text.encode("utf-8")


def _format_location(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return "<document>"
    return ".".join(str(part) for part in loc)


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def _model_for(profile: str) -> type[Document] | type[LegacyDocument]:
    if profile == STANDARD_PROFILE:
        return Document
    if profile == LEGACY_PROFILE:
        _warn_legacy(stacklevel=4)
        return LegacyDocument
    raise ValueError(f"Unknown document profile: {profile!r}")


def _warn_legacy(stacklevel: int = 3) -> None:
    warnings.warn(
        "The minimal document profile is deprecated; use the standard profile instead",
        DeprecationWarning,
        stacklevel=stacklevel,
    )
