"""Model codec: wire JSON <-> SdkModel instances.

Decoding is strict by default and atomic: either a complete instance is
returned or DecodeError is raised with the path of the first offending
field (``notifications_of_change[2].change_code``). Unknown wire keys and
unknown enum values are not errors; they are kept so re-encoding is
lossless.

Encoding distinguishes three field states:

    absent        -> key omitted (except Required+nullable on full encode)
    explicit null -> "key": null
    set           -> "key": <encoded value>
"""

import copy
import logging
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict

from .enums import decode_enum
from .fields import EnumKind, ListKind, ModelKind, ScalarKind, UnionKind, kind_label
from .model import SdkModel, UnknownVariant
from ..errors import DecodeError
from .._internal.isotime import format_date, format_datetime, parse_date, parse_datetime

logger = logging.getLogger(__name__)


class CodecOptions(BaseModel):
    """Decode policies.

    unknown_fields:
        preserve - keep undeclared wire keys in the instance's extra fields
        ignore   - drop them
        reject   - raise DecodeError
    unknown_enums:
        preserve - keep undeclared enum values as opaque members
        reject   - raise DecodeError
    """
    unknown_fields: Literal["preserve", "ignore", "reject"] = "preserve"
    unknown_enums: Literal["preserve", "reject"] = "preserve"

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_OPTIONS = CodecOptions()


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


class _Decoder:
    def __init__(self, registry: Any, options: CodecOptions, lenient: bool):
        self.registry = registry
        self.options = options
        self.lenient = lenient

    def model(self, model_cls: type, raw: Any, path: str) -> SdkModel:
        descriptor = model_cls.__descriptor__
        if not isinstance(raw, Mapping):
            raise DecodeError(path, f"object {descriptor.name}", _json_type(raw))

        values: Dict[str, Any] = {}
        deferred = []
        for spec in descriptor.fields:
            field_path = _join(path, spec.wire_name)
            if spec.wire_name not in raw:
                if spec.is_required and not self.lenient:
                    raise DecodeError(field_path, f"required field ({kind_label(spec.kind)})", "nothing")
                continue
            item = raw[spec.wire_name]
            if item is None:
                if not spec.nullable and not self.lenient:
                    raise DecodeError(field_path, kind_label(spec.kind), "null")
                values[spec.accessor] = None
                continue
            if isinstance(spec.kind, UnionKind):
                deferred.append((spec, item, field_path))
                continue
            values[spec.accessor] = self.field(spec.kind, item, field_path)

        # Union payloads need the decoded tag, which may be declared after them
        for spec, item, field_path in deferred:
            tag_spec = descriptor.by_wire_name(spec.kind.tag)
            values[spec.accessor] = self.union(spec.kind, item, values.get(tag_spec.accessor), field_path)

        extra = self.extra_fields(descriptor, raw, path)
        return model_cls._from_state(values, extra)

    def extra_fields(self, descriptor: Any, raw: Mapping, path: str) -> Dict[str, Any]:
        known = {spec.wire_name for spec in descriptor.fields}
        unknown = [key for key in raw if key not in known]
        if not unknown:
            return {}
        policy = self.options.unknown_fields
        if policy == "reject":
            raise DecodeError(_join(path, unknown[0]), f"only fields of {descriptor.name}", "unknown field")
        if policy == "ignore":
            return {}
        logger.debug("Preserving unknown keys %s on %s at %s", unknown, descriptor.name, path or "<root>")
        return {key: copy.deepcopy(raw[key]) for key in unknown}

    def field(self, kind: Any, raw: Any, path: str) -> Any:
        if not self.lenient:
            return self.value(kind, raw, path)
        try:
            return self.value(kind, raw, path)
        except DecodeError:
            # Keep the wire value; validation reports it with the full picture
            return copy.deepcopy(raw)

    def value(self, kind: Any, raw: Any, path: str) -> Any:
        if raw is None:
            raise DecodeError(path, kind_label(kind), "null")
        if isinstance(kind, ScalarKind):
            return self.scalar(kind.scalar, raw, path)
        if isinstance(kind, EnumKind):
            return decode_enum(
                self.registry.enum_class(kind.enum),
                raw,
                path,
                strict=self.options.unknown_enums == "reject",
            )
        if isinstance(kind, ModelKind):
            return self.model(self.registry.model_class(kind.model), raw, path)
        if isinstance(kind, ListKind):
            if not isinstance(raw, list):
                raise DecodeError(path, kind_label(kind), _json_type(raw))
            return tuple(self.field(kind.item, item, f"{path}[{index}]") for index, item in enumerate(raw))
        raise DecodeError(path, kind_label(kind), _json_type(raw))

    def union(self, kind: UnionKind, raw: Any, tag_value: Any, path: str) -> Any:
        tag_text = getattr(tag_value, "value", tag_value)
        target = kind.variants.get(tag_text) if isinstance(tag_text, str) else None
        if target is None:
            logger.debug("Unknown variant tag %r at %s", tag_text, path)
            return UnknownVariant(tag=tag_text, payload=copy.deepcopy(raw))
        return self.field(ModelKind(model=target), raw, path)

    def scalar(self, scalar: str, raw: Any, path: str) -> Any:
        if scalar == "string":
            if isinstance(raw, str):
                return raw
        elif scalar == "integer":
            if isinstance(raw, int) and not isinstance(raw, bool):
                return raw
            if isinstance(raw, float) and raw.is_integer():
                return int(raw)
        elif scalar == "number":
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return raw
        elif scalar == "boolean":
            if isinstance(raw, bool):
                return raw
        elif scalar == "datetime":
            if isinstance(raw, str):
                try:
                    return parse_datetime(raw)
                except ValueError:
                    raise DecodeError(path, "ISO 8601 date-time with offset", repr(raw))
        elif scalar == "date":
            if isinstance(raw, str):
                try:
                    return parse_date(raw)
                except ValueError:
                    raise DecodeError(path, "YYYY-MM-DD date", repr(raw))
        elif scalar == "object":
            if isinstance(raw, Mapping):
                return copy.deepcopy(dict(raw))
        raise DecodeError(path, scalar, _json_type(raw))


def decode_model(
    model_cls: type,
    raw: Any,
    path: str = "",
    options: Optional[CodecOptions] = None,
    lenient: bool = False,
) -> SdkModel:
    """Decode a parsed JSON object into an instance of ``model_cls``.

    Args:
        model_cls: Registered SdkModel subclass
        raw: Parsed JSON (a mapping)
        path: Path prefix for error messages
        options: CodecOptions (defaults: preserve unknown fields and enums)
        lenient: Keep missing/null/mistyped fields as found instead of
                 raising, so validate_instance can report all of them

    Raises:
        DecodeError: On the first mismatch between payload and schema
    """
    decoder = _Decoder(model_cls.__registry__, options or DEFAULT_OPTIONS, lenient)
    return decoder.model(model_cls, raw, path)


def encode_model(instance: SdkModel, partial: bool = False) -> Dict[str, Any]:
    """Encode an instance to a JSON-ready dict.

    Args:
        instance: Model instance
        partial: Emit only fields that were set (PATCH bodies). A full
                 encode also emits unset Required+nullable fields as null.
    """
    out: Dict[str, Any] = {}
    for spec in type(instance).__descriptor__.fields:
        if instance.is_set(spec.accessor):
            out[spec.wire_name] = _encode_value(instance.get(spec.accessor), partial)
        elif not partial and spec.is_required and spec.nullable:
            out[spec.wire_name] = None
    for key, value in instance.extra_fields.items():
        if key not in out:
            out[key] = copy.deepcopy(value)
    return out


def _encode_value(value: Any, partial: bool) -> Any:
    if value is None:
        return None
    if isinstance(value, SdkModel):
        return encode_model(value, partial=partial)
    if isinstance(value, UnknownVariant):
        return copy.deepcopy(value.payload)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item, partial) for item in value]
    if isinstance(value, Mapping):
        return copy.deepcopy(dict(value))
    return value
