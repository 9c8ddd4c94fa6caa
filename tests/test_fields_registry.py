"""Tests for field declarations, model descriptors and the schema registry."""

from datetime import datetime

import pytest

from ledgerwire.errors import ConfigurationError
from ledgerwire.kernel import (
    SchemaRegistry,
    SdkModel,
    WireEnum,
    default_registry,
    describe,
    list_of,
    optional,
    required,
)
from ledgerwire.kernel.fields import EnumKind, ListKind, ModelKind, ScalarKind


REG = SchemaRegistry("test-fields")


class Tier(WireEnum):
    GOLD = "gold"
    SILVER = "silver"


class Limit(SdkModel, registry=REG):
    """Spending limit."""
    amount = required("amount", int)


class Card(SdkModel, registry=REG):
    """A payment card.

    Longer description that is not part of the descriptor.
    """
    id = required("id", str)
    tier = required("tier", Tier)
    limits = optional("limits", list_of(Limit))
    expires_at = required("expires_at", datetime, nullable=True)
    from_ = optional("from", str, doc="Wire name that is a Python keyword")


def test_descriptor_preserves_declaration_order():
    """FieldSpecs follow the class body order."""
    accessors = [spec.accessor for spec in Card.__descriptor__.fields]
    assert accessors == ["id", "tier", "limits", "expires_at", "from_"]


def test_descriptor_records_presence_nullability_and_kind():
    """Each FieldSpec carries wire name, presence, nullability and kind."""
    descriptor = REG.describe("Card")
    assert descriptor.description == "A payment card."

    expires_at = descriptor.field("expires_at")
    assert expires_at.is_required
    assert expires_at.nullable
    assert expires_at.kind == ScalarKind(scalar="datetime")

    tier = descriptor.field("tier")
    assert tier.kind == EnumKind(enum="Tier")

    limits = descriptor.field("limits")
    assert not limits.is_required
    assert limits.kind == ListKind(item=ModelKind(model="Limit"))


def test_accessor_and_wire_name_can_differ():
    """Keyword wire names get a trailing-underscore accessor."""
    spec = Card.__descriptor__.by_wire_name("from")
    assert spec.accessor == "from_"
    assert spec.description == "Wire name that is a Python keyword"
    assert Card.__descriptor__.by_wire_name("nope") is None


def test_required_fields():
    names = [spec.wire_name for spec in Card.__descriptor__.required_fields()]
    assert names == ["id", "tier", "expires_at"]


def test_enum_registers_on_first_reference():
    """Enums join the registry of the model that references them."""
    assert "Tier" in REG.enum_names()
    enum_descriptor = REG.describe_enum("Tier")
    assert enum_descriptor.wire_values() == ("gold", "silver")
    assert REG.enum_class("Tier") is Tier


def test_registry_lookup_by_name():
    assert "Card" in REG
    assert REG.model_class("Card") is Card
    assert REG.names() == sorted(REG.names())


def test_unknown_name_raises_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        REG.describe("Nope")
    assert "Nope" in str(excinfo.value)


def test_duplicate_wire_name_is_rejected():
    """Two accessors may not share a wire name."""
    registry = SchemaRegistry("dup")
    with pytest.raises(ConfigurationError) as excinfo:
        class Broken(SdkModel, registry=registry):
            a = required("name", str)
            b = optional("name", str)
    assert "duplicate wire name" in str(excinfo.value)
    assert "Broken" not in registry


def test_reserved_accessor_is_rejected():
    """Accessors may not shadow SdkModel methods."""
    registry = SchemaRegistry("reserved")
    with pytest.raises(ConfigurationError) as excinfo:
        class Broken(SdkModel, registry=registry):
            validate = required("validate", bool)
    assert "validate" in str(excinfo.value)


def test_same_name_with_different_schema_is_rejected():
    """A registry name maps to exactly one schema."""
    registry = SchemaRegistry("clash")

    class Thing(SdkModel, registry=registry):
        a = required("a", str)

    with pytest.raises(ConfigurationError):
        class Thing(SdkModel, registry=registry):  # noqa: F811
            a = required("a", int)


def test_reregistering_equal_schema_is_idempotent():
    """Declaring the same schema twice under one name is a no-op."""
    registry = SchemaRegistry("idempotent")

    class Thing(SdkModel, registry=registry):
        a = required("a", str)

    first = Thing.__descriptor__

    class Thing(SdkModel, registry=registry):  # noqa: F811
        a = required("a", str)

    assert Thing.__descriptor__ == first
    assert registry.names() == [Thing.__descriptor__.name]


def test_frozen_registry_rejects_new_models():
    registry = SchemaRegistry("frozen")

    class Before(SdkModel, registry=registry):
        a = required("a", str)

    registry.freeze()
    assert registry.frozen
    with pytest.raises(ConfigurationError) as excinfo:
        class After(SdkModel, registry=registry):
            a = required("a", str)
    assert "frozen" in str(excinfo.value)
    assert registry.names() == [Before.__descriptor__.name]


def test_verify_reports_dangling_references():
    """Model references by name resolve lazily; verify lists the missing ones."""
    registry = SchemaRegistry("dangling")

    class Holder(SdkModel, registry=registry):
        child = required("child", "Missing")
        children = optional("children", list_of("AlsoMissing"))

    with pytest.raises(ConfigurationError) as excinfo:
        registry.verify()
    message = str(excinfo.value)
    assert "Holder.child -> model 'Missing'" in message
    assert "Holder.children -> model 'AlsoMissing'" in message


def test_verify_passes_on_complete_registry():
    REG.verify()


def test_abstract_base_is_not_registered():
    """Shared bases contribute fields without registering themselves."""
    registry = SchemaRegistry("abstract")

    class Timestamped(SdkModel, registry=registry, abstract=True):
        created_at = required("created_at", datetime)

    class Event(Timestamped):
        name = required("name", str)

    assert registry.names() == [Event.__descriptor__.name]
    assert Event.__descriptor__.name.endswith("Event")
    assert [spec.accessor for spec in Event.__descriptor__.fields] == ["created_at", "name"]
    with pytest.raises(TypeError):
        Timestamped()


def test_schema_name_overrides_qualname():
    registry = SchemaRegistry("named")

    class Local(SdkModel, registry=registry, schema_name="Renamed"):
        a = required("a", str)

    assert registry.names() == ["Renamed"]
    assert Local.__descriptor__.name == "Renamed"


def test_unsupported_kind_is_rejected():
    registry = SchemaRegistry("unsupported")
    with pytest.raises(ConfigurationError):
        class Broken(SdkModel, registry=registry):
            a = required("a", bytes)


def test_resource_models_live_in_default_registry():
    """Importing the resources registers them in the default registry."""
    import ledgerwire.resources  # noqa: F401

    assert "ACHTransfer" in default_registry()
    assert describe("ACHTransfer").field("return_").wire_name == "return"
    default_registry().verify()
