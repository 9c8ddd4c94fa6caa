"""Schema documents: load model/enum definitions from JSON, or dump them.

A schema document is the generator-facing form of the registry:

    {
      "format": "ledgerwire.schema",
      "version": "0.1",
      "enums":  [{"name": "Currency", "members": [{"wire": "usd", "symbol": "USD"}]}],
      "models": [{"name": "Balance", "fields": [{"wire_name": "amount", ...}]}]
    }

Loading generates real WireEnum and SdkModel classes, so documents and
hand-written declarations are interchangeable.
"""

import logging
import types
from pathlib import Path
from typing import Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import WireEnum
from .fields import EnumDescriptor, FieldDeclaration, ModelDescriptor
from .model import SdkModel
from .registry import SchemaRegistry
from .._internal.canonical_json import load_json

logger = logging.getLogger(__name__)

SCHEMA_FORMAT = "ledgerwire.schema"
SCHEMA_VERSION = "0.1"


class SchemaDocument(BaseModel):
    format: Literal["ledgerwire.schema"] = SCHEMA_FORMAT
    version: Literal["0.1"] = SCHEMA_VERSION
    enums: List[EnumDescriptor] = Field(default_factory=list)
    models: List[ModelDescriptor] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="forbid")


def _build_enum(descriptor: EnumDescriptor) -> type:
    enum_cls = WireEnum(
        descriptor.name,
        [(member.symbol, member.wire) for member in descriptor.members],
        module=__name__,
    )
    enum_cls.__doc__ = descriptor.description
    return enum_cls


def _build_model(descriptor: ModelDescriptor, registry: SchemaRegistry) -> type:
    def body(namespace):
        namespace["__doc__"] = descriptor.description
        namespace["__module__"] = __name__
        for spec in descriptor.fields:
            declaration = FieldDeclaration(
                spec.wire_name,
                spec.kind,
                presence=spec.presence,
                nullable=spec.nullable,
                when=(spec.when.tag, spec.when.value) if spec.when is not None else None,
                doc=spec.description,
            )
            namespace[spec.accessor] = declaration

    return types.new_class(
        descriptor.name,
        (SdkModel,),
        {"registry": registry, "schema_name": descriptor.name},
        body,
    )


def load_schema(document: Mapping[str, Any], registry: Optional[SchemaRegistry] = None) -> SchemaRegistry:
    """Generate classes for every enum and model of a schema document.

    Args:
        document: Parsed schema document
        registry: Target registry (a fresh one when omitted)

    Returns:
        The registry holding the generated classes

    Raises:
        pydantic.ValidationError: If the document is malformed
        ConfigurationError: On name clashes or dangling references
    """
    parsed = SchemaDocument.model_validate(document)
    registry = registry if registry is not None else SchemaRegistry("schema")
    for enum_descriptor in parsed.enums:
        registry.register_enum(_build_enum(enum_descriptor))
    for model_descriptor in parsed.models:
        _build_model(model_descriptor, registry)
    registry.verify()
    logger.debug(
        "Loaded schema document into %s: %d enums, %d models",
        registry.name, len(parsed.enums), len(parsed.models),
    )
    return registry


def load_schema_file(path: Union[str, Path], registry: Optional[SchemaRegistry] = None) -> SchemaRegistry:
    return load_schema(load_json(path), registry)


def dump_schema(registry: SchemaRegistry) -> dict:
    """Describe every registered enum and model as a schema document."""
    document = SchemaDocument(
        enums=[registry.describe_enum(name) for name in registry.enum_names()],
        models=[registry.describe(name) for name in registry.names()],
    )
    return document.model_dump(mode="json", exclude_none=True)
