"""Mapping engine: declarations, registry, codecs, validation, updates."""

from .codec import CodecOptions, decode_model, encode_model
from .enums import WireEnum, decode_enum, encode_enum
from .fields import (
    EnumDescriptor,
    FieldSpec,
    ModelDescriptor,
    list_of,
    one_of,
    optional,
    required,
)
from .model import SdkModel, UnknownVariant
from .registry import SchemaRegistry, default_registry, describe
from .schema_doc import dump_schema, load_schema, load_schema_file
from .update import with_field, with_fields, without_field
from .validation import validate_instance

__all__ = [
    "CodecOptions",
    "EnumDescriptor",
    "FieldSpec",
    "ModelDescriptor",
    "SchemaRegistry",
    "SdkModel",
    "UnknownVariant",
    "WireEnum",
    "decode_enum",
    "decode_model",
    "default_registry",
    "describe",
    "dump_schema",
    "encode_enum",
    "encode_model",
    "list_of",
    "load_schema",
    "load_schema_file",
    "one_of",
    "optional",
    "required",
    "validate_instance",
    "with_field",
    "with_fields",
    "without_field",
]
