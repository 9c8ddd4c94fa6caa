"""Public API for ledgerwire.

High-level functions that accept a model class or a registered model name
and return complete, structured results. The CLI is built on these.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from ledgerwire import resources  # noqa: F401  (registers the resource models)
from ledgerwire.codes import ValidationCode
from ledgerwire.contracts import ValidationIssue, ValidationResult
from ledgerwire.errors import DecodeError
from ledgerwire.kernel import (
    CodecOptions,
    SchemaRegistry,
    SdkModel,
    decode_model,
    default_registry,
    encode_model,
    validate_instance,
)

ModelRef = Union[str, type]


def _model_class(model: ModelRef, registry: Optional[SchemaRegistry] = None) -> type:
    if isinstance(model, str):
        return (registry or default_registry()).model_class(model)
    if isinstance(model, type) and issubclass(model, SdkModel):
        return model
    raise TypeError(f"Expected a model class or a registered model name, got {model!r}")


def list_models(registry: Optional[SchemaRegistry] = None) -> List[str]:
    """Sorted names of every registered model."""
    return (registry or default_registry()).names()


def describe(model: ModelRef, registry: Optional[SchemaRegistry] = None) -> Dict[str, Any]:
    """Describe a model's fields as a JSON-ready dict.

    Raises:
        ConfigurationError: If no model is registered under that name
    """
    model_cls = _model_class(model, registry)
    return model_cls.__descriptor__.model_dump(mode="json", exclude_none=True)


def decode(
    model: ModelRef,
    payload: Mapping[str, Any],
    options: Optional[CodecOptions] = None,
    registry: Optional[SchemaRegistry] = None,
) -> SdkModel:
    """Decode a parsed JSON payload into a model instance.

    Raises:
        DecodeError: On the first mismatch between payload and schema
    """
    return decode_model(_model_class(model, registry), payload, options=options)


def encode(instance: SdkModel, partial: bool = False) -> Dict[str, Any]:
    """Encode a model instance into a JSON-ready dict."""
    return encode_model(instance, partial=partial)


def validate(
    model: ModelRef,
    payload: Any,
    strict_enums: bool = False,
    options: Optional[CodecOptions] = None,
    registry: Optional[SchemaRegistry] = None,
) -> ValidationResult:
    """Check a payload against a model and report every problem.

    Unlike ``decode``, this never raises on bad data: missing fields,
    disallowed nulls and mistyped values anywhere in the payload all end
    up in ``issues``.

    Args:
        model: Model class or registered name
        payload: Parsed JSON
        strict_enums: Also report enum values the schema does not declare
        options: CodecOptions for unknown-field handling
        registry: Registry to resolve model names in
    """
    model_cls = _model_class(model, registry)
    try:
        instance = decode_model(model_cls, payload, options=options, lenient=True)
    except DecodeError as e:
        issues = [
            ValidationIssue(
                path=e.path,
                code=ValidationCode.WRONG_TYPE,
                message=str(e),
                expected=e.expected,
                actual=e.actual,
            )
        ]
    else:
        issues = validate_instance(instance, strict_enums=strict_enums, from_wire=True)
    return ValidationResult(ok=not issues, model=model_cls.__descriptor__.name, issues=issues)
