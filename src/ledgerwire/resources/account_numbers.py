"""Account Numbers: routable account/routing number pairs for an Account."""

from datetime import datetime

from ..kernel import SdkModel, WireEnum, list_of, optional, required
from .shared import CreatedAtFilter


class AccountNumberStatus(WireEnum):
    ACTIVE = "active"
    DISABLED = "disabled"
    CANCELED = "canceled"


class AccountNumberType(WireEnum):
    ACCOUNT_NUMBER = "account_number"


class InboundACHDebitStatus(WireEnum):
    """Whether ACH debits are allowed against this Account Number."""
    ALLOWED = "allowed"
    BLOCKED = "blocked"


class InboundChecksStatus(WireEnum):
    """Whether checks can be drawn against this Account Number."""
    ALLOWED = "allowed"
    CHECK_TRANSFERS_ONLY = "check_transfers_only"


class AccountNumberInboundACH(SdkModel):
    """Properties related to how this Account Number handles inbound ACH transfers."""
    debit_status = required("debit_status", InboundACHDebitStatus)


class AccountNumberInboundChecks(SdkModel):
    """Properties related to how this Account Number handles inbound check withdrawals."""
    status = required("status", InboundChecksStatus)


class AccountNumber(SdkModel):
    """Each account can have multiple account and routing numbers."""
    id = required("id", str)
    account_id = required("account_id", str)
    account_number = required("account_number", str)
    created_at = required("created_at", datetime)
    idempotency_key = required("idempotency_key", str, nullable=True)
    inbound_ach = required("inbound_ach", AccountNumberInboundACH)
    inbound_checks = required("inbound_checks", AccountNumberInboundChecks)
    name = required("name", str)
    routing_number = required("routing_number", str)
    status = required("status", AccountNumberStatus)
    type = required("type", AccountNumberType)


class AccountNumberInboundACHParams(SdkModel):
    debit_status = optional("debit_status", InboundACHDebitStatus)


class AccountNumberInboundChecksParams(SdkModel):
    status = optional("status", InboundChecksStatus)


class AccountNumberCreateParams(SdkModel):
    """Body of POST /account_numbers."""
    account_id = required("account_id", str)
    name = required("name", str)
    inbound_ach = optional("inbound_ach", AccountNumberInboundACHParams)
    inbound_checks = optional("inbound_checks", AccountNumberInboundChecksParams)


class AccountNumberUpdateParams(SdkModel):
    """Body of PATCH /account_numbers/{account_number_id}."""
    inbound_ach = optional("inbound_ach", AccountNumberInboundACHParams)
    inbound_checks = optional("inbound_checks", AccountNumberInboundChecksParams)
    name = optional("name", str)
    status = optional("status", AccountNumberStatus)


class AccountNumberStatusFilter(SdkModel):
    in_ = optional("in", list_of(AccountNumberStatus))


class AccountNumberACHDebitStatusFilter(SdkModel):
    in_ = optional("in", list_of(InboundACHDebitStatus))


class AccountNumberListParams(SdkModel):
    """Query of GET /account_numbers."""
    account_id = optional("account_id", str)
    ach_debit_status = optional("ach_debit_status", AccountNumberACHDebitStatusFilter)
    created_at = optional("created_at", CreatedAtFilter)
    cursor = optional("cursor", str)
    idempotency_key = optional("idempotency_key", str)
    limit = optional("limit", int)
    status = optional("status", AccountNumberStatusFilter)
