"""Tests for the Increase resource schemas against realistic payloads."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from ledgerwire import api
from ledgerwire.codes import ValidationCode
from ledgerwire.errors import DecodeError
from ledgerwire.kernel import (
    SchemaRegistry,
    SdkModel,
    UnknownVariant,
    decode_model,
    default_registry,
    encode_model,
    optional,
    required,
    validate_instance,
)
from ledgerwire.kernel.fields import EnumKind, ListKind, ModelKind, ScalarKind, UnionKind
from ledgerwire.resources import (
    ACHTransfer,
    ACHTransferCreateParams,
    ACHTransferStatus,
    Account,
    AccountUpdateParams,
    CardDispute,
    CardDisputeCreateParams,
    Currency,
    NetworkEventCategory,
)
from ledgerwire.resources.ach_transfers import AddendaCategory, CreatedByUser
from ledgerwire.resources.shared import ChangeCode


def test_ach_transfer_round_trip(ach_transfer_payload):
    """A complete response decodes and re-encodes to the same JSON."""
    transfer = decode_model(ACHTransfer, ach_transfer_payload)
    assert transfer.id == "ach_transfer_uoxatyh3lt5evrsdvo7q"
    assert transfer.status is ACHTransferStatus.RETURNED
    assert transfer.currency is Currency.USD
    assert transfer.created_at == datetime(2020, 1, 31, 23, 59, 59, tzinfo=timezone.utc)
    assert transfer.return_ is None
    assert transfer.is_set("return_")
    assert encode_model(transfer) == ach_transfer_payload


def test_ach_transfer_unknown_status_is_preserved(ach_transfer_payload):
    """A status added to the API after this schema was written still round-trips."""
    ach_transfer_payload["status"] = "pending_mailing_label"
    transfer = decode_model(ACHTransfer, ach_transfer_payload)
    assert not transfer.status.is_known
    assert transfer.status == "pending_mailing_label"
    assert encode_model(transfer)["status"] == "pending_mailing_label"
    assert validate_instance(transfer) == []
    issues = validate_instance(transfer, strict_enums=True)
    assert [(issue.path, issue.code) for issue in issues] == [("status", ValidationCode.INVALID_ENUM_VALUE)]


def test_ach_transfer_new_field_is_preserved(ach_transfer_payload):
    ach_transfer_payload["effective_date_override"] = "2020-02-03"
    transfer = decode_model(ACHTransfer, ach_transfer_payload)
    assert transfer.extra_fields["effective_date_override"] == "2020-02-03"
    assert encode_model(transfer) == ach_transfer_payload


def test_ach_transfer_missing_required_field(ach_transfer_payload):
    del ach_transfer_payload["amount"]
    with pytest.raises(DecodeError) as excinfo:
        decode_model(ACHTransfer, ach_transfer_payload)
    assert excinfo.value.path == "amount"


def test_notifications_of_change_error_path(ach_transfer_payload, notification_of_change_payload):
    """Errors inside list items report the index of the offending item."""
    bad = dict(notification_of_change_payload, change_code=5)
    ach_transfer_payload["notifications_of_change"] = [
        notification_of_change_payload,
        notification_of_change_payload,
        bad,
    ]
    with pytest.raises(DecodeError) as excinfo:
        decode_model(ACHTransfer, ach_transfer_payload)
    assert excinfo.value.path == "notifications_of_change[2].change_code"


def test_notifications_of_change_decode(ach_transfer_payload, notification_of_change_payload):
    ach_transfer_payload["notifications_of_change"] = [notification_of_change_payload]
    transfer = decode_model(ACHTransfer, ach_transfer_payload)
    notice = transfer.notifications_of_change[0]
    assert notice.change_code is ChangeCode.INCORRECT_ACCOUNT_NUMBER
    assert notice.corrected_data == "123456789"


def test_created_by_slot(ach_transfer_payload):
    transfer = decode_model(ACHTransfer, ach_transfer_payload)
    assert transfer.created_by.variant() == CreatedByUser(email="user@example.com")


def test_addenda_slot(ach_transfer_payload):
    ach_transfer_payload["addenda"] = {
        "category": "freeform",
        "freeform": {"entries": [{"payment_related_information": "invoice 42"}]},
        "payment_order_remittance_advice": None,
    }
    transfer = decode_model(ACHTransfer, ach_transfer_payload)
    assert transfer.addenda.category is AddendaCategory.FREEFORM
    entries = transfer.addenda.variant().entries
    assert entries[0].payment_related_information == "invoice 42"
    assert encode_model(transfer) == ach_transfer_payload


def test_card_dispute_visa_slot(card_dispute_payload):
    dispute = decode_model(CardDispute, card_dispute_payload)
    visa = dispute.variant()
    event = visa.network_events[0]
    assert event.category is NetworkEventCategory.CHARGEBACK_SUBMITTED
    assert event.variant() == {}
    assert event.attachment_files[0].file_id == "file_makxrc67oh9l6sg7w9yc"
    assert encode_model(dispute) == card_dispute_payload


def test_card_dispute_unknown_network(card_dispute_payload):
    """A network without a declared slot yields an UnknownVariant."""
    card_dispute_payload["network"] = "pulse"
    card_dispute_payload["visa"] = None
    card_dispute_payload["pulse"] = {"network_events": []}
    dispute = decode_model(CardDispute, card_dispute_payload)
    assert dispute.network == "pulse"
    assert dispute.variant() == UnknownVariant(tag="pulse", payload={"network_events": []})
    assert encode_model(dispute) == card_dispute_payload


def test_card_dispute_unknown_network_event_category(card_dispute_payload):
    event = card_dispute_payload["visa"]["network_events"][0]
    event["category"] = "merchant_arbitration_received"
    del event["chargeback_submitted"]
    event["merchant_arbitration_received"] = {"reason": "unknown"}
    dispute = decode_model(CardDispute, card_dispute_payload)
    variant = dispute.visa.network_events[0].variant()
    assert isinstance(variant, UnknownVariant)
    assert variant.payload == {"reason": "unknown"}
    assert encode_model(dispute) == card_dispute_payload


def test_account_decode(account_payload):
    account = decode_model(Account, account_payload)
    assert account.interest_accrued_at.isoformat() == "2020-01-31"
    assert account.loan is None
    assert encode_model(account) == account_payload


def test_ach_transfer_create_params_validation():
    """Outbound parameters report every missing field at once."""
    params = ACHTransferCreateParams(account_id="account_in71c4amph0vgo2qllky")
    issues = params.validate()
    assert [issue.path for issue in issues] == ["amount", "statement_descriptor"]


def test_ach_transfer_create_params_addenda_mismatch():
    params = ACHTransferCreateParams(
        account_id="account_in71c4amph0vgo2qllky",
        amount=100,
        statement_descriptor="New ACH transfer",
        addenda={
            "category": "payment_order_remittance_advice",
            "freeform": {"entries": [{"payment_related_information": "x"}]},
        },
    )
    issues = params.validate()
    assert [(issue.path, issue.code) for issue in issues] == [
        ("addenda.freeform", ValidationCode.VARIANT_MISMATCH)
    ]


def test_ach_transfer_create_params_encode():
    params = ACHTransferCreateParams.create(
        account_id="account_in71c4amph0vgo2qllky",
        amount=100,
        statement_descriptor="New ACH transfer",
        require_approval=True,
        preferred_effective_date={"date": "2020-02-03"},
    )
    assert encode_model(params) == {
        "account_id": "account_in71c4amph0vgo2qllky",
        "amount": 100,
        "statement_descriptor": "New ACH transfer",
        "require_approval": True,
        "preferred_effective_date": {"date": "2020-02-03"},
    }


def test_account_update_params_partial_encode():
    params = AccountUpdateParams(name="Renamed")
    assert encode_model(params, partial=True) == {"name": "Renamed"}


def test_card_dispute_create_params_visa_slot():
    params = CardDisputeCreateParams(
        disputed_transaction_id="transaction_uyrp7fld2ium70oa7oi",
        network="visa",
        visa={"category": "fraud", "fraud": {"fraud_type": "lost"}},
    )
    assert params.validate() == []
    assert params.variant().variant() == {"fraud_type": "lost"}


SAMPLE_SCALARS = {
    "string": "x",
    "integer": 1,
    "number": 1.5,
    "boolean": True,
    "datetime": "2020-01-31T23:59:59Z",
    "date": "2020-01-31",
    "object": {"key": "value"},
}


def _sample(kind, registry):
    if isinstance(kind, ScalarKind):
        return SAMPLE_SCALARS[kind.scalar]
    if isinstance(kind, EnumKind):
        return next(iter(registry.enum_class(kind.enum))).value
    if isinstance(kind, ModelKind):
        return _sample_payload(registry.model_class(kind.model))
    if isinstance(kind, ListKind):
        return [_sample(kind.item, registry)]
    raise AssertionError(f"no sample for {kind!r}")


def _sample_payload(model_cls):
    """Smallest wire payload for a model: its Required fields only."""
    registry = model_cls.__registry__
    payload = {}
    unions = []
    for spec in model_cls.__descriptor__.required_fields():
        if spec.nullable:
            payload[spec.wire_name] = None
        elif isinstance(spec.kind, UnionKind):
            unions.append(spec)
        else:
            payload[spec.wire_name] = _sample(spec.kind, registry)
    for spec in unions:
        target = spec.kind.variants.get(payload.get(spec.kind.tag))
        payload[spec.wire_name] = _sample_payload(registry.model_class(target)) if target else {}
    return payload


RESOURCE_MODELS = [
    name for name in default_registry().names()
    if default_registry().model_class(name).__module__.startswith("ledgerwire.resources")
]


@pytest.mark.parametrize("name", RESOURCE_MODELS)
def test_every_resource_model_round_trips(name):
    """Required-only payloads decode, validate and re-encode unchanged."""
    model_cls = default_registry().model_class(name)
    payload = _sample_payload(model_cls)
    instance = decode_model(model_cls, payload)
    assert encode_model(instance) == payload
    assert api.validate(name, payload).ok


def test_resource_models_are_all_covered():
    assert "ACHTransfer" in RESOURCE_MODELS
    assert "CardDisputeCreateParams" in RESOURCE_MODELS
    assert len(RESOURCE_MODELS) > 40


def test_minimal_transfer_payload():
    """Four fields against a schema where everything else is optional."""
    registry = SchemaRegistry("resources-minimal-transfer")

    class MinimalTransfer(SdkModel, registry=registry, schema_name="MinimalTransfer"):
        id = required("id", str)
        amount = required("amount", int)
        currency = required("currency", Currency)
        status = required("status", ACHTransferStatus)
        account_id = optional("account_id", str)
        statement_descriptor = optional("statement_descriptor", str)
        created_at = optional("created_at", datetime)

    payload = {"id": "t_1", "amount": 1000, "currency": "usd", "status": "pending_submission"}
    transfer = decode_model(MinimalTransfer, payload)

    assert transfer.amount == 1000
    assert transfer.currency is Currency.USD
    assert transfer.status is ACHTransferStatus.PENDING_SUBMISSION
    assert not transfer.is_set("created_at")
    assert validate_instance(transfer) == []
    assert validate_instance(transfer, from_wire=True) == []
    assert encode_model(transfer) == payload


def test_concurrent_decode_and_encode(ach_transfer_payload):
    """A loaded registry serves decode/encode from many threads at once."""
    ach_transfer_payload["status"] = "pending_mailing_label"

    def round_trip(_):
        transfer = decode_model(ACHTransfer, ach_transfer_payload)
        return encode_model(transfer.with_amount(transfer.amount + 1))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(round_trip, range(200)))

    expected = dict(ach_transfer_payload, amount=ach_transfer_payload["amount"] + 1)
    assert all(result == expected for result in results)
    assert decode_model(ACHTransfer, ach_transfer_payload).amount == ach_transfer_payload["amount"]
