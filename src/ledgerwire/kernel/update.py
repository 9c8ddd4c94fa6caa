"""Persistent updates: every change returns a new instance.

Values handed to a model (constructor keywords or ``with_*`` calls) are
normalized once, here, so the rest of the kernel only ever sees typed
values: nested models as SdkModel instances, enum strings as WireEnum
members, ISO date strings as date/datetime objects and lists as tuples.
Values that cannot be normalized are stored as given; validation reports
them.
"""

from collections.abc import Mapping
from typing import Any, Dict

from .fields import EnumKind, ListKind, ModelKind, ScalarKind, UnionKind
from .model import SdkModel, UnknownVariant
from .._internal.isotime import parse_date, parse_datetime


def coerce_value(kind: Any, value: Any, registry: Any) -> Any:
    """Normalize one assigned value toward ``kind``."""
    if value is None:
        return None
    if isinstance(kind, ScalarKind):
        if kind.scalar == "datetime" and isinstance(value, str):
            try:
                return parse_datetime(value)
            except ValueError:
                return value
        if kind.scalar == "date" and isinstance(value, str):
            try:
                return parse_date(value)
            except ValueError:
                return value
        return value
    if isinstance(kind, EnumKind):
        if isinstance(value, str) and not isinstance(value, registry.enum_class(kind.enum)):
            return registry.enum_class(kind.enum)(value)
        return value
    if isinstance(kind, ModelKind):
        if isinstance(value, Mapping):
            return registry.model_class(kind.model)(**value)
        return value
    if isinstance(kind, ListKind):
        if isinstance(value, (list, tuple)):
            return tuple(coerce_value(kind.item, item, registry) for item in value)
        return value
    return value


def coerce_union(kind: UnionKind, value: Any, tag_value: Any, registry: Any) -> Any:
    """Normalize a polymorphic value using the current tag."""
    if not isinstance(value, Mapping) or isinstance(value, SdkModel):
        return value
    tag_text = getattr(tag_value, "value", tag_value)
    target = kind.variants.get(tag_text) if tag_text is not None else None
    if target is None:
        return UnknownVariant(tag=tag_text, payload=dict(value))
    return registry.model_class(target)(**value)


def normalize_values(model_cls: type, base: Dict[str, Any], changes: Dict[str, Any]) -> Dict[str, Any]:
    """Apply ``changes`` (accessor -> value) over ``base`` and normalize them."""
    registry = model_cls.__registry__
    descriptor = model_cls.__descriptor__
    specs = model_cls.__field_specs__
    values = dict(base)
    unions = []
    for accessor, value in changes.items():
        spec = specs[accessor]
        if isinstance(spec.kind, UnionKind):
            unions.append(spec)
            values[accessor] = value
        else:
            values[accessor] = coerce_value(spec.kind, value, registry)
    # Unions dispatch on the post-update tag, so they go last
    for spec in unions:
        tag_spec = descriptor.by_wire_name(spec.kind.tag)
        values[spec.accessor] = coerce_union(
            spec.kind, values[spec.accessor], values.get(tag_spec.accessor), registry
        )
    return values


def _check_accessors(instance: SdkModel, accessors: Any) -> None:
    specs = type(instance).__field_specs__
    unknown = sorted(set(accessors) - set(specs))
    if unknown:
        raise KeyError(f"{type(instance).__name__} has no field(s) {unknown}")


def with_field(instance: SdkModel, accessor: str, value: Any) -> SdkModel:
    """Return a copy of ``instance`` with one field set (None sets explicit null).

    Raises:
        KeyError: If the model has no such field
    """
    return with_fields(instance, **{accessor: value})


def with_fields(instance: SdkModel, **changes: Any) -> SdkModel:
    """Return a copy of ``instance`` with several fields set at once."""
    _check_accessors(instance, changes)
    cls = type(instance)
    values = normalize_values(cls, instance._values, changes)
    return cls._from_state(values, dict(instance._extra))


def without_field(instance: SdkModel, accessor: str) -> SdkModel:
    """Return a copy of ``instance`` with the field made absent again."""
    _check_accessors(instance, [accessor])
    values = dict(instance._values)
    values.pop(accessor, None)
    return type(instance)._from_state(values, dict(instance._extra))
