"""Field declarations and the immutable descriptors they compile to.

A resource model declares its fields as class attributes:

    class NotificationOfChange(SdkModel):
        change_code = required("change_code", ChangeCode)
        corrected_data = required("corrected_data", str)
        created_at = required("created_at", datetime)

The attribute name is the accessor, the first argument is the wire name.
At class creation every declaration is compiled into a FieldSpec, and the
ordered FieldSpecs become the model's ModelDescriptor. Descriptors are
frozen pydantic models: they never change after registration and can be
round-tripped through a JSON schema document.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import ConfigurationError


_FROZEN = ConfigDict(frozen=True, extra="forbid")

ScalarType = Literal["string", "integer", "number", "boolean", "datetime", "date", "object"]

SCALAR_TYPES: Dict[type, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    datetime: "datetime",
    date: "date",
    dict: "object",
}


class ScalarKind(BaseModel):
    """A JSON scalar, a date/date-time string, or an opaque JSON object."""
    type: Literal["scalar"] = "scalar"
    scalar: ScalarType

    model_config = _FROZEN


class EnumKind(BaseModel):
    """A string drawn from a registered enum (by name)."""
    type: Literal["enum"] = "enum"
    enum: str

    model_config = _FROZEN


class ModelKind(BaseModel):
    """A nested object described by a registered model (by name)."""
    type: Literal["model"] = "model"
    model: str

    model_config = _FROZEN


class ListKind(BaseModel):
    """A JSON array whose items all share one kind."""
    type: Literal["list"] = "list"
    item: "FieldKind"

    model_config = _FROZEN


class UnionKind(BaseModel):
    """A polymorphic object whose model is chosen by a sibling tag field.

    ``tag`` is the wire name of the sibling; ``variants`` maps each known
    tag value to a model name. Unrecognized tags decode to UnknownVariant.
    """
    type: Literal["union"] = "union"
    tag: str
    variants: Dict[str, str]

    model_config = _FROZEN


FieldKind = Annotated[
    Union[ScalarKind, EnumKind, ModelKind, ListKind, UnionKind],
    Field(discriminator="type"),
]

ListKind.model_rebuild()


class SlotGuard(BaseModel):
    """The field is only populated when sibling ``tag`` equals ``value``."""
    tag: str
    value: str

    model_config = _FROZEN


class FieldSpec(BaseModel):
    """One field of a model: wire name, accessor, presence, nullability, kind."""
    wire_name: str
    accessor: str
    presence: Literal["required", "optional"]
    nullable: bool = False
    kind: FieldKind
    when: Optional[SlotGuard] = None
    description: Optional[str] = None

    model_config = _FROZEN

    @property
    def is_required(self) -> bool:
        return self.presence == "required"


class ModelDescriptor(BaseModel):
    """Ordered FieldSpecs plus the model's display name."""
    name: str
    fields: Tuple[FieldSpec, ...] = ()
    description: Optional[str] = None

    model_config = _FROZEN

    @model_validator(mode='after')
    def validate_field_identity(self):
        """Wire names and accessors must be unique; tags must name siblings."""
        wire_names = [f.wire_name for f in self.fields]
        accessors = [f.accessor for f in self.fields]
        for label, names in (("wire name", wire_names), ("accessor", accessors)):
            seen = set()
            duplicates = set()
            for name in names:
                if name in seen:
                    duplicates.add(name)
                seen.add(name)
            if duplicates:
                raise ConfigurationError(f"{self.name}: duplicate {label}(s) {sorted(duplicates)}")

        known = set(wire_names)
        for spec in self.fields:
            if isinstance(spec.kind, UnionKind) and spec.kind.tag not in known:
                raise ConfigurationError(
                    f"{self.name}.{spec.accessor}: union tag '{spec.kind.tag}' is not a field of {self.name}"
                )
            if spec.when is not None and spec.when.tag not in known:
                raise ConfigurationError(
                    f"{self.name}.{spec.accessor}: slot tag '{spec.when.tag}' is not a field of {self.name}"
                )
            if _contains_union(spec.kind, nested=False):
                raise ConfigurationError(
                    f"{self.name}.{spec.accessor}: unions cannot appear inside lists"
                )
        return self

    def field(self, accessor: str) -> FieldSpec:
        for spec in self.fields:
            if spec.accessor == accessor:
                return spec
        raise KeyError(accessor)

    def by_wire_name(self, wire_name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.wire_name == wire_name:
                return spec
        return None

    def required_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.is_required)


class EnumMember(BaseModel):
    wire: str
    symbol: str

    model_config = _FROZEN


class EnumDescriptor(BaseModel):
    """Known (wire value, symbolic name) pairs of an enum.

    Unknown wire values are always preserved as opaque members.
    """
    name: str
    members: Tuple[EnumMember, ...] = ()
    unknown_values: Literal["preserve"] = "preserve"
    description: Optional[str] = None

    model_config = _FROZEN

    @classmethod
    def from_enum(cls, enum_cls: type) -> "EnumDescriptor":
        return cls(
            name=enum_cls.__qualname__,
            members=tuple(EnumMember(wire=m.value, symbol=m.name) for m in enum_cls),
            description=_first_line(enum_cls.__doc__),
        )

    def wire_values(self) -> Tuple[str, ...]:
        return tuple(m.wire for m in self.members)


def _contains_union(kind: Any, nested: bool) -> bool:
    if isinstance(kind, UnionKind):
        return nested
    if isinstance(kind, ListKind):
        return _contains_union(kind.item, nested=True)
    return False


def _first_line(doc: Optional[str]) -> Optional[str]:
    if not doc:
        return None
    for line in doc.strip().splitlines():
        if line.strip():
            return line.strip()
    return None


def kind_label(kind: Any) -> str:
    """Short human description of a kind, used in error messages."""
    if isinstance(kind, ScalarKind):
        return kind.scalar
    if isinstance(kind, EnumKind):
        return f"enum {kind.enum}"
    if isinstance(kind, ModelKind):
        return f"object {kind.model}"
    if isinstance(kind, ListKind):
        return f"list of {kind_label(kind.item)}"
    if isinstance(kind, UnionKind):
        return f"one of {sorted(kind.variants.values())}"
    return type(kind).__name__


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class ListOf:
    """Declaration marker: a list whose items have the wrapped kind."""

    def __init__(self, item: Any):
        self.item = item


class OneOf:
    """Declaration marker: a union dispatched on a sibling tag."""

    def __init__(self, tag: str, variants: Dict[Any, Any]):
        self.tag = tag
        self.variants = dict(variants)


def list_of(item: Any) -> ListOf:
    return ListOf(item)


def one_of(tag: str, variants: Dict[Any, Any]) -> OneOf:
    """Declare a polymorphic field.

    Args:
        tag: Wire name of the sibling discriminator field
        variants: Tag value (string or enum member) -> model class or model name
    """
    return OneOf(tag, variants)


def _tag_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def resolve_kind(kind: Any, registry: Any) -> Any:
    """Compile a declaration kind (type, class, name, marker) into a FieldKind.

    Enum classes referenced here are registered on ``registry`` as a side
    effect; model references are kept by name and resolved lazily.
    """
    from .enums import WireEnum
    from .model import SdkModel

    if isinstance(kind, (ScalarKind, EnumKind, ModelKind, ListKind, UnionKind)):
        return kind
    if isinstance(kind, str):
        return ModelKind(model=kind)
    if isinstance(kind, ListOf):
        return ListKind(item=resolve_kind(kind.item, registry))
    if isinstance(kind, OneOf):
        return UnionKind(
            tag=kind.tag,
            variants={
                _tag_value(tag): _model_name(target)
                for tag, target in kind.variants.items()
            },
        )
    if isinstance(kind, type):
        if kind in SCALAR_TYPES:
            return ScalarKind(scalar=SCALAR_TYPES[kind])
        if issubclass(kind, WireEnum):
            descriptor = registry.register_enum(kind)
            return EnumKind(enum=descriptor.name)
        if issubclass(kind, SdkModel):
            return ModelKind(model=kind.__descriptor__.name)
    raise ConfigurationError(f"Unsupported field kind: {kind!r}")


def _model_name(target: Any) -> str:
    if isinstance(target, str):
        return target
    descriptor = getattr(target, "__descriptor__", None)
    if descriptor is None:
        raise ConfigurationError(f"Union variant {target!r} is not a model")
    return descriptor.name


class FieldDeclaration:
    """Class-attribute declaration of a model field.

    Acts as a read-only descriptor on instances: reading returns the field
    value (None when absent), assigning raises.
    """

    def __init__(
        self,
        wire_name: str,
        kind: Any,
        *,
        presence: str,
        nullable: bool = False,
        when: Optional[Tuple[str, Any]] = None,
        doc: Optional[str] = None,
    ):
        self.wire_name = wire_name
        self.kind = kind
        self.presence = presence
        self.nullable = nullable
        self.when = when
        self.doc = doc
        self.accessor: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.accessor = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.accessor)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(
            f"{type(instance).__name__} is immutable; use with_{self.accessor}(...)"
        )

    def __repr__(self) -> str:
        return f"<{self.presence} field {self.accessor!r} wire={self.wire_name!r}>"

    def to_spec(self, registry: Any) -> FieldSpec:
        guard = None
        if self.when is not None:
            tag, value = self.when
            guard = SlotGuard(tag=tag, value=_tag_value(value))
        return FieldSpec(
            wire_name=self.wire_name,
            accessor=self.accessor,
            presence=self.presence,
            nullable=self.nullable,
            kind=resolve_kind(self.kind, registry),
            when=guard,
            description=self.doc,
        )


def required(
    wire_name: str,
    kind: Any = str,
    *,
    nullable: bool = False,
    when: Optional[Tuple[str, Any]] = None,
    doc: Optional[str] = None,
) -> Any:
    """Declare a field that is always present on the wire (possibly null)."""
    return FieldDeclaration(wire_name, kind, presence="required", nullable=nullable, when=when, doc=doc)


def optional(
    wire_name: str,
    kind: Any = str,
    *,
    nullable: bool = False,
    when: Optional[Tuple[str, Any]] = None,
    doc: Optional[str] = None,
) -> Any:
    """Declare a field that may be omitted from the wire entirely."""
    return FieldDeclaration(wire_name, kind, presence="optional", nullable=nullable, when=when, doc=doc)
