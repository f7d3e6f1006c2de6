# Copyright 2026 SwaggerDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between Swagger 2.0 documents and their JSON or YAML text."""

from swaggerdoc.codec.document import (
    LEGACY_PROFILE,
    PROFILES,
    STANDARD_PROFILE,
    DecodeError,
    DocumentIOError,
    MalformedInputError,
    ShapeMismatchError,
    decode,
    decode_legacy,
    decode_yaml,
    encode,
    encode_legacy,
    encode_yaml,
    read_document,
    write_document,
)

__all__ = [
    "decode",
    "encode",
    "decode_yaml",
    "encode_yaml",
    "decode_legacy",
    "encode_legacy",
    "read_document",
    "write_document",
    "DecodeError",
    "MalformedInputError",
    "ShapeMismatchError",
    "DocumentIOError",
    "STANDARD_PROFILE",
    "LEGACY_PROFILE",
    "PROFILES",
]
