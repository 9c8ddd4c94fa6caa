"""Schema registry: process-wide, read-mostly model and enum descriptors.

Models register themselves at class creation (SdkModel.__init_subclass__);
enums register when a field first references them. Registration takes a
lock; lookups are plain dict reads, so concurrent decode/encode traffic
never contends once the schema is loaded. ``freeze()`` closes the
registry for good.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from .fields import EnumDescriptor, EnumKind, ListKind, ModelDescriptor, ModelKind, UnionKind
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Name -> (descriptor, class) tables for models and enums."""

    def __init__(self, name: str = "default"):
        self.name = name
        self._models: Dict[str, Tuple[ModelDescriptor, type]] = {}
        self._enums: Dict[str, Tuple[EnumDescriptor, type]] = {}
        self._lock = threading.Lock()
        self._frozen = False

    def __repr__(self) -> str:
        return f"<SchemaRegistry {self.name!r}: {len(self._models)} models, {len(self._enums)} enums>"

    def __contains__(self, name: str) -> bool:
        return name in self._models

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject every further registration."""
        with self._lock:
            self._frozen = True

    def _check_open(self, name: str) -> None:
        if self._frozen:
            raise ConfigurationError(
                f"Registry '{self.name}' is frozen; cannot register '{name}'"
            )

    def register_model(self, descriptor: ModelDescriptor, model_cls: type) -> ModelDescriptor:
        """Register a model descriptor and the class that builds its instances.

        Re-registering an equal descriptor is a no-op and returns the
        descriptor already registered.

        Raises:
            ConfigurationError: If the name is taken by a different descriptor,
                                or the registry is frozen
        """
        with self._lock:
            existing = self._models.get(descriptor.name)
            if existing is not None:
                if existing[0] == descriptor:
                    return existing[0]
                raise ConfigurationError(
                    f"Model '{descriptor.name}' is already registered with a different schema"
                )
            self._check_open(descriptor.name)
            self._models[descriptor.name] = (descriptor, model_cls)
        logger.debug("Registered model %s (%d fields) in %s", descriptor.name, len(descriptor.fields), self.name)
        return descriptor

    def register_enum(self, enum_cls: type) -> EnumDescriptor:
        """Register an enum class (idempotent for the same class)."""
        descriptor = EnumDescriptor.from_enum(enum_cls)
        with self._lock:
            existing = self._enums.get(descriptor.name)
            if existing is not None:
                if existing[1] is enum_cls or existing[0] == descriptor:
                    return existing[0]
                raise ConfigurationError(
                    f"Enum '{descriptor.name}' is already registered with different values"
                )
            self._check_open(descriptor.name)
            self._enums[descriptor.name] = (descriptor, enum_cls)
        logger.debug("Registered enum %s (%d values) in %s", descriptor.name, len(descriptor.members), self.name)
        return descriptor

    def describe(self, name: str) -> ModelDescriptor:
        """Return the descriptor registered under ``name``.

        Raises:
            ConfigurationError: If no model is registered under that name
        """
        return self._model_entry(name)[0]

    def describe_enum(self, name: str) -> EnumDescriptor:
        return self._enum_entry(name)[0]

    def model_class(self, name: str) -> type:
        return self._model_entry(name)[1]

    def enum_class(self, name: str) -> type:
        return self._enum_entry(name)[1]

    def _model_entry(self, name: str) -> Tuple[ModelDescriptor, type]:
        entry = self._models.get(name)
        if entry is None:
            raise ConfigurationError(f"No model registered under '{name}' in registry '{self.name}'")
        return entry

    def _enum_entry(self, name: str) -> Tuple[EnumDescriptor, type]:
        entry = self._enums.get(name)
        if entry is None:
            raise ConfigurationError(f"No enum registered under '{name}' in registry '{self.name}'")
        return entry

    def names(self) -> List[str]:
        """Sorted model names."""
        return sorted(self._models)

    def enum_names(self) -> List[str]:
        return sorted(self._enums)

    def verify(self) -> None:
        """Resolve every by-name reference.

        Raises:
            ConfigurationError: Listing every dangling model or enum reference
        """
        dangling: List[str] = []
        for name in self.names():
            descriptor = self.describe(name)
            for spec in descriptor.fields:
                for ref in _references(spec.kind):
                    kind, target = ref
                    table = self._models if kind == "model" else self._enums
                    if target not in table:
                        dangling.append(f"{name}.{spec.accessor} -> {kind} '{target}'")
        if dangling:
            raise ConfigurationError("Unresolved schema references: " + "; ".join(dangling))


def _references(kind) -> List[Tuple[str, str]]:
    if isinstance(kind, ModelKind):
        return [("model", kind.model)]
    if isinstance(kind, EnumKind):
        return [("enum", kind.enum)]
    if isinstance(kind, ListKind):
        return _references(kind.item)
    if isinstance(kind, UnionKind):
        return [("model", target) for target in kind.variants.values()]
    return []


_default_registry = SchemaRegistry("default")


def default_registry() -> SchemaRegistry:
    """The registry every SdkModel subclass joins unless told otherwise."""
    return _default_registry


def describe(name: str, registry: Optional[SchemaRegistry] = None) -> ModelDescriptor:
    """Look up a model descriptor by name (default registry)."""
    return (registry or _default_registry).describe(name)
