"""ACH Prenotifications: zero-dollar entries that verify account details."""

from datetime import date, datetime

from ..kernel import SdkModel, WireEnum, list_of, optional, required
from .ach_transfers import ACHReturnReasonCode
from .shared import CreatedAtFilter, NotificationOfChange, StandardEntryClassCode


class ACHPrenotificationStatus(WireEnum):
    PENDING_SUBMITTING = "pending_submitting"
    REQUIRES_ATTENTION = "requires_attention"
    RETURNED = "returned"
    SUBMITTED = "submitted"


class ACHPrenotificationType(WireEnum):
    ACH_PRENOTIFICATION = "ach_prenotification"


class CreditDebitIndicator(WireEnum):
    CREDIT = "credit"
    DEBIT = "debit"


class PrenotificationReturn(SdkModel):
    created_at = required("created_at", datetime)
    return_reason_code = required("return_reason_code", ACHReturnReasonCode)


class ACHPrenotification(SdkModel):
    """Prenotifications test whether an account exists before money is sent to it."""
    id = required("id", str)
    account_id = required("account_id", str, nullable=True)
    account_number = required("account_number", str)
    addendum = required("addendum", str, nullable=True)
    company_descriptive_date = required("company_descriptive_date", str, nullable=True)
    company_discretionary_data = required("company_discretionary_data", str, nullable=True)
    company_entry_description = required("company_entry_description", str, nullable=True)
    company_name = required("company_name", str, nullable=True)
    created_at = required("created_at", datetime)
    credit_debit_indicator = required("credit_debit_indicator", CreditDebitIndicator, nullable=True)
    effective_date = required("effective_date", datetime, nullable=True)
    idempotency_key = required("idempotency_key", str, nullable=True)
    individual_id = required("individual_id", str, nullable=True)
    individual_name = required("individual_name", str, nullable=True)
    notifications_of_change = required("notifications_of_change", list_of(NotificationOfChange))
    prenotification_return = required("prenotification_return", PrenotificationReturn, nullable=True)
    routing_number = required("routing_number", str)
    standard_entry_class_code = required("standard_entry_class_code", StandardEntryClassCode, nullable=True)
    status = required("status", ACHPrenotificationStatus)
    type = required("type", ACHPrenotificationType)


class ACHPrenotificationCreateParams(SdkModel):
    """Body of POST /ach_prenotifications."""
    account_id = required("account_id", str)
    account_number = required("account_number", str)
    routing_number = required("routing_number", str)
    addendum = optional("addendum", str)
    company_descriptive_date = optional("company_descriptive_date", str)
    company_discretionary_data = optional("company_discretionary_data", str)
    company_entry_description = optional("company_entry_description", str)
    company_name = optional("company_name", str)
    credit_debit_indicator = optional("credit_debit_indicator", CreditDebitIndicator)
    effective_date = optional("effective_date", date)
    individual_id = optional("individual_id", str)
    individual_name = optional("individual_name", str)
    standard_entry_class_code = optional("standard_entry_class_code", StandardEntryClassCode)


class ACHPrenotificationListParams(SdkModel):
    """Query of GET /ach_prenotifications."""
    created_at = optional("created_at", CreatedAtFilter)
    cursor = optional("cursor", str)
    idempotency_key = optional("idempotency_key", str)
    limit = optional("limit", int)
