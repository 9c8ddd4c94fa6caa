"""ACH Transfers: outbound ACH credits and debits."""

from datetime import date, datetime

from ..kernel import SdkModel, WireEnum, list_of, optional, required
from .shared import CreatedAtFilter, Currency, NotificationOfChange, StandardEntryClassCode


class ACHTransferStatus(WireEnum):
    """Lifecycle status of an ACH Transfer."""
    PENDING_APPROVAL = "pending_approval"
    PENDING_TRANSFER_SESSION_CONFIRMATION = "pending_transfer_session_confirmation"
    CANCELED = "canceled"
    PENDING_SUBMISSION = "pending_submission"
    PENDING_REVIEWING = "pending_reviewing"
    REQUIRES_ATTENTION = "requires_attention"
    REJECTED = "rejected"
    SUBMITTED = "submitted"
    RETURNED = "returned"


class ACHTransferType(WireEnum):
    ACH_TRANSFER = "ach_transfer"


class ACHNetwork(WireEnum):
    ACH = "ach"


class ACHFunding(WireEnum):
    """Type of the destination account."""
    CHECKING = "checking"
    SAVINGS = "savings"
    GENERAL_LEDGER = "general_ledger"


class DestinationAccountHolder(WireEnum):
    BUSINESS = "business"
    INDIVIDUAL = "individual"
    UNKNOWN = "unknown"


class SettlementSchedule(WireEnum):
    SAME_DAY = "same_day"
    FUTURE_DATED = "future_dated"


class TransactionTiming(WireEnum):
    SYNCHRONOUS = "synchronous"
    ASYNCHRONOUS = "asynchronous"


class AddendaCategory(WireEnum):
    """Which addenda slot is populated."""
    FREEFORM = "freeform"
    PAYMENT_ORDER_REMITTANCE_ADVICE = "payment_order_remittance_advice"
    OTHER = "other"


class CreatedByCategory(WireEnum):
    API_KEY = "api_key"
    OAUTH_APPLICATION = "oauth_application"
    USER = "user"


class InboundFundsHoldStatus(WireEnum):
    HELD = "held"
    COMPLETE = "complete"


class InboundFundsHoldType(WireEnum):
    INBOUND_FUNDS_HOLD = "inbound_funds_hold"


class ACHReturnReasonCode(WireEnum):
    """Why the receiving bank returned the transfer."""
    INSUFFICIENT_FUND = "insufficient_fund"
    NO_ACCOUNT = "no_account"
    ACCOUNT_CLOSED = "account_closed"
    INVALID_ACCOUNT_NUMBER_STRUCTURE = "invalid_account_number_structure"
    ACCOUNT_FROZEN_ENTRY_RETURNED_PER_OFAC_INSTRUCTION = "account_frozen_entry_returned_per_ofac_instruction"
    CREDIT_ENTRY_REFUSED_BY_RECEIVER = "credit_entry_refused_by_receiver"
    UNAUTHORIZED_DEBIT_TO_CONSUMER_ACCOUNT_USING_CORPORATE_SEC_CODE = "unauthorized_debit_to_consumer_account_using_corporate_sec_code"
    CORPORATE_CUSTOMER_ADVISED_NOT_AUTHORIZED = "corporate_customer_advised_not_authorized"
    PAYMENT_STOPPED = "payment_stopped"
    NON_TRANSACTION_ACCOUNT = "non_transaction_account"
    UNCOLLECTED_FUNDS = "uncollected_funds"
    ROUTING_NUMBER_CHECK_DIGIT_ERROR = "routing_number_check_digit_error"
    CUSTOMER_ADVISED_UNAUTHORIZED_IMPROPER_INELIGIBLE_OR_INCOMPLETE = "customer_advised_unauthorized_improper_ineligible_or_incomplete"
    AMOUNT_FIELD_ERROR = "amount_field_error"
    AUTHORIZATION_REVOKED_BY_CUSTOMER = "authorization_revoked_by_customer"
    INVALID_ACH_ROUTING_NUMBER = "invalid_ach_routing_number"
    FILE_RECORD_EDIT_CRITERIA = "file_record_edit_criteria"
    ENR_INVALID_INDIVIDUAL_NAME = "enr_invalid_individual_name"
    RETURNED_PER_ODFI_REQUEST = "returned_per_odfi_request"
    LIMITED_PARTICIPATION_DFI = "limited_participation_dfi"
    INCORRECTLY_CODED_OUTBOUND_INTERNATIONAL_PAYMENT = "incorrectly_coded_outbound_international_payment"
    ACCOUNT_SOLD_TO_ANOTHER_DFI = "account_sold_to_another_dfi"
    ADDENDA_ERROR = "addenda_error"
    BENEFICIARY_OR_ACCOUNT_HOLDER_DECEASED = "beneficiary_or_account_holder_deceased"
    CUSTOMER_ADVISED_NOT_WITHIN_AUTHORIZATION_TERMS = "customer_advised_not_within_authorization_terms"
    CORRECTED_RETURN = "corrected_return"
    DUPLICATE_ENTRY = "duplicate_entry"
    DUPLICATE_RETURN = "duplicate_return"
    ENR_DUPLICATE_ENROLLMENT = "enr_duplicate_enrollment"
    ENR_INVALID_DFI_ACCOUNT_NUMBER = "enr_invalid_dfi_account_number"
    ENR_INVALID_INDIVIDUAL_ID_NUMBER = "enr_invalid_individual_id_number"
    ENR_INVALID_REPRESENTATIVE_PAYEE_INDICATOR = "enr_invalid_representative_payee_indicator"
    ENR_INVALID_TRANSACTION_CODE = "enr_invalid_transaction_code"
    ENR_RETURN_OF_ENR_ENTRY = "enr_return_of_enr_entry"
    ENR_ROUTING_NUMBER_CHECK_DIGIT_ERROR = "enr_routing_number_check_digit_error"
    ENTRY_NOT_PROCESSED_BY_GATEWAY = "entry_not_processed_by_gateway"
    FIELD_ERROR = "field_error"
    FOREIGN_RECEIVING_DFI_UNABLE_TO_SETTLE = "foreign_receiving_dfi_unable_to_settle"
    IAT_ENTRY_CODING_ERROR = "iat_entry_coding_error"
    IMPROPER_EFFECTIVE_ENTRY_DATE = "improper_effective_entry_date"
    IMPROPER_SOURCE_DOCUMENT_SOURCE_DOCUMENT_PRESENTED = "improper_source_document_source_document_presented"
    INVALID_COMPANY_ID = "invalid_company_id"
    INVALID_FOREIGN_RECEIVING_DFI_IDENTIFICATION = "invalid_foreign_receiving_dfi_identification"
    INVALID_INDIVIDUAL_ID_NUMBER = "invalid_individual_id_number"
    ITEM_AND_RCK_ENTRY_PRESENTED_FOR_PAYMENT = "item_and_rck_entry_presented_for_payment"
    ITEM_RELATED_TO_RCK_ENTRY_IS_INELIGIBLE = "item_related_to_rck_entry_is_ineligible"
    MANDATORY_FIELD_ERROR = "mandatory_field_error"
    MISROUTED_DISHONORED_RETURN = "misrouted_dishonored_return"
    MISROUTED_RETURN = "misrouted_return"
    NO_ERRORS_FOUND = "no_errors_found"
    NON_ACCEPTANCE_OF_R62_DISHONORED_RETURN = "non_acceptance_of_r62_dishonored_return"
    NON_PARTICIPANT_IN_IAT_PROGRAM = "non_participant_in_iat_program"
    PERMISSIBLE_RETURN_ENTRY = "permissible_return_entry"
    PERMISSIBLE_RETURN_ENTRY_NOT_ACCEPTED = "permissible_return_entry_not_accepted"
    RDFI_NON_SETTLEMENT = "rdfi_non_settlement"
    RDFI_PARTICIPANT_IN_CHECK_TRUNCATION_PROGRAM = "rdfi_participant_in_check_truncation_program"
    REPRESENTATIVE_PAYEE_DECEASED_OR_UNABLE_TO_CONTINUE_IN_THAT_CAPACITY = "representative_payee_deceased_or_unable_to_continue_in_that_capacity"
    RETURN_NOT_A_DUPLICATE = "return_not_a_duplicate"
    RETURN_OF_ERRONEOUS_OR_REVERSING_DEBIT = "return_of_erroneous_or_reversing_debit"
    RETURN_OF_IMPROPER_CREDIT_ENTRY = "return_of_improper_credit_entry"
    RETURN_OF_IMPROPER_DEBIT_ENTRY = "return_of_improper_debit_entry"
    RETURN_OF_XCK_ENTRY = "return_of_xck_entry"
    SOURCE_DOCUMENT_PRESENTED_FOR_PAYMENT = "source_document_presented_for_payment"
    STATE_LAW_AFFECTING_RCK_ACCEPTANCE = "state_law_affecting_rck_acceptance"
    STOP_PAYMENT_ON_ITEM_RELATED_TO_RCK_ENTRY = "stop_payment_on_item_related_to_rck_entry"
    STOP_PAYMENT_ON_SOURCE_DOCUMENT = "stop_payment_on_source_document"
    TIMELY_ORIGINAL_RETURN = "timely_original_return"
    TRACE_NUMBER_ERROR = "trace_number_error"
    UNTIMELY_DISHONORED_RETURN = "untimely_dishonored_return"
    UNTIMELY_RETURN = "untimely_return"


class ACHTransferAcknowledgement(SdkModel):
    """Set once the Federal Reserve has acknowledged the transfer."""
    acknowledged_at = required("acknowledged_at", datetime)


class FreeformEntry(SdkModel):
    payment_related_information = required("payment_related_information", str)


class AddendaFreeform(SdkModel):
    entries = required("entries", list_of(FreeformEntry))


class RemittanceInvoice(SdkModel):
    invoice_number = required("invoice_number", str)
    paid_amount = required("paid_amount", int)


class AddendaPaymentOrderRemittanceAdvice(SdkModel):
    invoices = required("invoices", list_of(RemittanceInvoice))


class ACHTransferAddenda(SdkModel):
    """Additional information sent to the recipient along with the transfer."""
    category = required("category", AddendaCategory)
    freeform = optional(
        "freeform", AddendaFreeform, nullable=True,
        when=("category", AddendaCategory.FREEFORM),
    )
    payment_order_remittance_advice = optional(
        "payment_order_remittance_advice", AddendaPaymentOrderRemittanceAdvice, nullable=True,
        when=("category", AddendaCategory.PAYMENT_ORDER_REMITTANCE_ADVICE),
    )


class ACHTransferApproval(SdkModel):
    approved_at = required("approved_at", datetime)
    approved_by = required("approved_by", str, nullable=True)


class ACHTransferCancellation(SdkModel):
    canceled_at = required("canceled_at", datetime)
    canceled_by = required("canceled_by", str, nullable=True)


class CreatedByAPIKey(SdkModel):
    description = required("description", str, nullable=True)


class CreatedByOAuthApplication(SdkModel):
    name = required("name", str)


class CreatedByUser(SdkModel):
    email = required("email", str)


class ACHTransferCreatedBy(SdkModel):
    """What object created the transfer, either via the API or the dashboard."""
    category = required("category", CreatedByCategory)
    api_key = optional(
        "api_key", CreatedByAPIKey, nullable=True,
        when=("category", CreatedByCategory.API_KEY),
    )
    oauth_application = optional(
        "oauth_application", CreatedByOAuthApplication, nullable=True,
        when=("category", CreatedByCategory.OAUTH_APPLICATION),
    )
    user = optional(
        "user", CreatedByUser, nullable=True,
        when=("category", CreatedByCategory.USER),
    )


class ACHTransferInboundFundsHold(SdkModel):
    """Hold placed on the funds of an ACH debit until they can no longer be returned."""
    amount = required("amount", int)
    automatically_releases_at = required("automatically_releases_at", datetime)
    created_at = required("created_at", datetime)
    currency = required("currency", Currency)
    held_transaction_id = required("held_transaction_id", str, nullable=True)
    pending_transaction_id = required("pending_transaction_id", str, nullable=True)
    released_at = required("released_at", datetime, nullable=True)
    status = required("status", InboundFundsHoldStatus)
    type = required("type", InboundFundsHoldType)


class ACHTransferPreferredEffectiveDate(SdkModel):
    date = required("date", date, nullable=True)
    settlement_schedule = required("settlement_schedule", SettlementSchedule, nullable=True)


class ACHTransferReturn(SdkModel):
    """Set if the receiving bank returned the transfer."""
    created_at = required("created_at", datetime)
    raw_return_reason_code = required("raw_return_reason_code", str)
    return_reason_code = required("return_reason_code", ACHReturnReasonCode)
    trace_number = required("trace_number", str)
    transaction_id = required("transaction_id", str)
    transfer_id = required("transfer_id", str)


class ACHTransferSettlement(SdkModel):
    settled_at = required("settled_at", datetime)


class ACHTransferSubmission(SdkModel):
    """Set once the transfer has been submitted to the Federal Reserve."""
    administrative_returns_expected_by = required("administrative_returns_expected_by", datetime)
    effective_date = required("effective_date", date)
    expected_funds_settlement_at = required("expected_funds_settlement_at", datetime)
    expected_settlement_schedule = required("expected_settlement_schedule", SettlementSchedule)
    submitted_at = required("submitted_at", datetime)
    trace_number = required("trace_number", str)


class ACHTransfer(SdkModel):
    """ACH transfers move funds between your Increase account and any other account accessible by the Automated Clearing House (ACH)."""
    id = required("id", str)
    account_id = required("account_id", str)
    account_number = required("account_number", str)
    acknowledgement = required("acknowledgement", ACHTransferAcknowledgement, nullable=True)
    addenda = required("addenda", ACHTransferAddenda, nullable=True)
    amount = required("amount", int, doc="Minor units; positive for credits, negative for debits")
    approval = required("approval", ACHTransferApproval, nullable=True)
    cancellation = required("cancellation", ACHTransferCancellation, nullable=True)
    company_descriptive_date = required("company_descriptive_date", str, nullable=True)
    company_discretionary_data = required("company_discretionary_data", str, nullable=True)
    company_entry_description = required("company_entry_description", str, nullable=True)
    company_id = required("company_id", str)
    company_name = required("company_name", str, nullable=True)
    created_at = required("created_at", datetime)
    created_by = required("created_by", ACHTransferCreatedBy, nullable=True)
    currency = required("currency", Currency)
    destination_account_holder = required("destination_account_holder", DestinationAccountHolder)
    external_account_id = required("external_account_id", str, nullable=True)
    funding = required("funding", ACHFunding)
    idempotency_key = required("idempotency_key", str, nullable=True)
    inbound_funds_hold = required("inbound_funds_hold", ACHTransferInboundFundsHold, nullable=True)
    individual_id = required("individual_id", str, nullable=True)
    individual_name = required("individual_name", str, nullable=True)
    network = required("network", ACHNetwork)
    notifications_of_change = required("notifications_of_change", list_of(NotificationOfChange))
    pending_transaction_id = required("pending_transaction_id", str, nullable=True)
    preferred_effective_date = required("preferred_effective_date", ACHTransferPreferredEffectiveDate)
    return_ = required("return", ACHTransferReturn, nullable=True)
    routing_number = required("routing_number", str)
    settlement = required("settlement", ACHTransferSettlement, nullable=True)
    standard_entry_class_code = required("standard_entry_class_code", StandardEntryClassCode)
    statement_descriptor = required("statement_descriptor", str)
    status = required("status", ACHTransferStatus)
    submission = required("submission", ACHTransferSubmission, nullable=True)
    transaction_id = required("transaction_id", str, nullable=True)
    type = required("type", ACHTransferType)


class ACHTransferCreateAddenda(SdkModel):
    category = required("category", AddendaCategory)
    freeform = optional("freeform", AddendaFreeform, when=("category", AddendaCategory.FREEFORM))
    payment_order_remittance_advice = optional(
        "payment_order_remittance_advice", AddendaPaymentOrderRemittanceAdvice,
        when=("category", AddendaCategory.PAYMENT_ORDER_REMITTANCE_ADVICE),
    )


class ACHTransferCreatePreferredEffectiveDate(SdkModel):
    date = optional("date", date)
    settlement_schedule = optional("settlement_schedule", SettlementSchedule)


class ACHTransferCreateParams(SdkModel):
    """Body of POST /ach_transfers."""
    account_id = required("account_id", str)
    amount = required("amount", int)
    statement_descriptor = required("statement_descriptor", str)
    account_number = optional("account_number", str)
    addenda = optional("addenda", ACHTransferCreateAddenda)
    company_descriptive_date = optional("company_descriptive_date", str)
    company_discretionary_data = optional("company_discretionary_data", str)
    company_entry_description = optional("company_entry_description", str)
    company_name = optional("company_name", str)
    destination_account_holder = optional("destination_account_holder", DestinationAccountHolder)
    external_account_id = optional("external_account_id", str)
    funding = optional("funding", ACHFunding)
    individual_id = optional("individual_id", str)
    individual_name = optional("individual_name", str)
    preferred_effective_date = optional("preferred_effective_date", ACHTransferCreatePreferredEffectiveDate)
    require_approval = optional("require_approval", bool)
    routing_number = optional("routing_number", str)
    standard_entry_class_code = optional("standard_entry_class_code", StandardEntryClassCode)
    transaction_timing = optional("transaction_timing", TransactionTiming)


class ACHTransferStatusFilter(SdkModel):
    in_ = optional("in", list_of(ACHTransferStatus))


class ACHTransferListParams(SdkModel):
    """Query of GET /ach_transfers."""
    account_id = optional("account_id", str)
    created_at = optional("created_at", CreatedAtFilter)
    cursor = optional("cursor", str)
    external_account_id = optional("external_account_id", str)
    idempotency_key = optional("idempotency_key", str)
    limit = optional("limit", int)
    status = optional("status", ACHTransferStatusFilter)
