"""SdkModel: the base class of every typed API object.

An SdkModel instance is an immutable value: a mapping from accessor to
value plus a bag of wire keys the schema did not describe. A field is
either absent (never set, not on the wire), explicitly null, or set.
Updates go through ``with_field`` / ``with_<accessor>`` and return a new
instance; the original is never touched.
"""

from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional

from .fields import FieldDeclaration, FieldSpec, ModelDescriptor, _first_line
from .registry import SchemaRegistry, default_registry
from ..errors import ConfigurationError

_RESERVED = frozenset({
    "create",
    "from_dict",
    "to_dict",
    "validate",
    "with_field",
    "with_fields",
    "without_field",
    "is_set",
    "get",
    "variant",
    "fields_set",
    "extra_fields",
})


@dataclass(frozen=True)
class UnknownVariant:
    """Placeholder for a polymorphic payload whose tag this schema does not know.

    ``payload`` is the raw wire object, re-emitted verbatim on encode.
    """
    tag: Optional[str]
    payload: Any = None


class SdkModel:
    """Base class for API resources and request parameter objects.

    Subclass keywords:
        registry: SchemaRegistry to join (inherited by further subclasses)
        schema_name: Registry name (defaults to the class qualname)
        abstract: Do not register this class (shared bases)
    """

    __registry__: ClassVar[SchemaRegistry] = default_registry()
    __descriptor__: ClassVar[ModelDescriptor]
    __field_specs__: ClassVar[Dict[str, FieldSpec]]

    def __init_subclass__(
        cls,
        registry: Optional[SchemaRegistry] = None,
        schema_name: Optional[str] = None,
        abstract: bool = False,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)
        if registry is not None:
            cls.__registry__ = registry
        if abstract:
            return

        declarations: Dict[str, FieldDeclaration] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, FieldDeclaration):
                    declarations[attr] = value

        clashes = sorted(set(declarations) & _RESERVED)
        if clashes:
            raise ConfigurationError(f"{cls.__qualname__}: field accessor(s) {clashes} shadow SdkModel methods")

        descriptor = ModelDescriptor(
            name=schema_name or cls.__qualname__,
            fields=tuple(decl.to_spec(cls.__registry__) for decl in declarations.values()),
            description=_first_line(cls.__doc__),
        )
        cls.__descriptor__ = cls.__registry__.register_model(descriptor, cls)
        cls.__field_specs__ = {spec.accessor: spec for spec in cls.__descriptor__.fields}

    def __init__(self, **fields: Any):
        """Build an instance from accessor keywords.

        Raw dicts for model fields and raw strings for enum fields are
        normalized to their typed form. Missing required fields are allowed
        here (builder style); ``create`` enforces them.
        """
        from .update import normalize_values

        cls = type(self)
        if not hasattr(cls, "__descriptor__"):
            raise TypeError(f"{cls.__name__} is abstract and cannot be instantiated")
        unknown = sorted(set(fields) - set(cls.__field_specs__))
        if unknown:
            raise TypeError(f"{cls.__name__} got unexpected field(s) {unknown}")
        object.__setattr__(self, "_values", normalize_values(cls, {}, fields))
        object.__setattr__(self, "_extra", {})

    @classmethod
    def _from_state(cls, values: Dict[str, Any], extra: Dict[str, Any]) -> "SdkModel":
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_values", values)
        object.__setattr__(instance, "_extra", extra)
        return instance

    @classmethod
    def create(cls, **fields: Any) -> "SdkModel":
        """Build an instance and require it to validate.

        Raises:
            ModelValidationError: Listing every missing or mistyped field
        """
        from .validation import validate_instance
        from ..errors import ModelValidationError

        instance = cls(**fields)
        issues = validate_instance(instance)
        if issues:
            raise ModelValidationError(cls.__descriptor__.name, issues)
        return instance

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], options: Any = None) -> "SdkModel":
        """Decode a wire payload (see kernel.codec.decode_model)."""
        from .codec import decode_model
        return decode_model(cls, raw, options=options)

    def to_dict(self, partial: bool = False) -> Dict[str, Any]:
        """Encode to a wire payload (see kernel.codec.encode_model)."""
        from .codec import encode_model
        return encode_model(self, partial=partial)

    def validate(self, strict_enums: bool = False) -> List[Any]:
        from .validation import validate_instance
        return validate_instance(self, strict_enums=strict_enums)

    def with_field(self, accessor: str, value: Any) -> "SdkModel":
        from .update import with_field
        return with_field(self, accessor, value)

    def with_fields(self, **changes: Any) -> "SdkModel":
        from .update import with_fields
        return with_fields(self, **changes)

    def without_field(self, accessor: str) -> "SdkModel":
        from .update import without_field
        return without_field(self, accessor)

    def __getattr__(self, name: str) -> Any:
        # Fluent setters: instance.with_amount(100)
        if name.startswith("with_"):
            accessor = name[5:]
            if accessor in getattr(type(self), "__field_specs__", {}):
                return partial(self.with_field, accessor)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; use with_field()")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; use without_field()")

    def is_set(self, accessor: str) -> bool:
        """True when the field is present (including explicitly null)."""
        return accessor in self._values

    def get(self, accessor: str, default: Any = None) -> Any:
        return self._values.get(accessor, default)

    @property
    def fields_set(self) -> FrozenSet[str]:
        return frozenset(self._values)

    @property
    def extra_fields(self) -> Mapping[str, Any]:
        """Wire keys the schema does not describe, preserved for re-encoding."""
        return MappingProxyType(self._extra)

    def variant(self, tag: Optional[str] = None) -> Any:
        """Return the slot selected by the current value of a tag field.

        Slot fields are declared with ``when=(tag, value)``. When the tag
        value names no declared slot, the result is an UnknownVariant
        wrapping the wire payload stored under that key (if any).

        Args:
            tag: Wire name of the tag field; optional when the model has
                 slots for a single tag only
        """
        descriptor = type(self).__descriptor__
        guarded = [spec for spec in descriptor.fields if spec.when is not None]
        tags = sorted({spec.when.tag for spec in guarded})
        if not tags:
            raise TypeError(f"{descriptor.name} declares no tag-selected slots")
        if tag is None:
            if len(tags) > 1:
                raise TypeError(f"{descriptor.name} has slots for several tags {tags}; pass tag=")
            tag = tags[0]
        tag_spec = descriptor.by_wire_name(tag)
        if tag_spec is None:
            raise KeyError(tag)
        tag_value = self._values.get(tag_spec.accessor)
        if tag_value is None:
            return None
        tag_text = getattr(tag_value, "value", tag_value)
        for spec in guarded:
            if spec.when.tag == tag and spec.when.value == tag_text:
                return self._values.get(spec.accessor)
        return UnknownVariant(tag=tag_text, payload=self._extra.get(tag_text))

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values and self._extra == other._extra

    __hash__ = None

    def __repr__(self) -> str:
        parts = [f"{accessor}={value!r}" for accessor, value in self._values.items()]
        if self._extra:
            parts.append(f"extra_fields={self._extra!r}")
        return f"{type(self).__name__}({', '.join(parts)})"
