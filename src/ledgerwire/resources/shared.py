"""Enums and objects shared by several resources, plus the API error body."""

from datetime import datetime

from ..kernel import SdkModel, WireEnum, list_of, optional, required


class Currency(WireEnum):
    """ISO 4217 currency code."""
    CAD = "CAD"
    CHF = "CHF"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    USD = "USD"


class StandardEntryClassCode(WireEnum):
    """NACHA Standard Entry Class code of an ACH entry."""
    CORPORATE_CREDIT_OR_DEBIT = "corporate_credit_or_debit"
    CORPORATE_TRADE_EXCHANGE = "corporate_trade_exchange"
    PREARRANGED_PAYMENTS_AND_DEPOSIT = "prearranged_payments_and_deposit"
    INTERNET_INITIATED = "internet_initiated"


class ChangeCode(WireEnum):
    """Kind of correction carried by an ACH Notification of Change."""
    INCORRECT_ACCOUNT_NUMBER = "incorrect_account_number"
    INCORRECT_ROUTING_NUMBER = "incorrect_routing_number"
    INCORRECT_ROUTING_NUMBER_AND_ACCOUNT_NUMBER = "incorrect_routing_number_and_account_number"
    INCORRECT_TRANSACTION_CODE = "incorrect_transaction_code"
    INCORRECT_ACCOUNT_NUMBER_AND_TRANSACTION_CODE = "incorrect_account_number_and_transaction_code"
    INCORRECT_ROUTING_NUMBER_ACCOUNT_NUMBER_AND_TRANSACTION_CODE = "incorrect_routing_number_account_number_and_transaction_code"
    INCORRECT_RECEIVING_DEPOSITORY_FINANCIAL_INSTITUTION_IDENTIFICATION = "incorrect_receiving_depository_financial_institution_identification"
    INCORRECT_INDIVIDUAL_IDENTIFICATION_NUMBER = "incorrect_individual_identification_number"
    ADDENDA_FORMAT_ERROR = "addenda_format_error"
    INCORRECT_STANDARD_ENTRY_CLASS_CODE_FOR_OUTBOUND_INTERNATIONAL_PAYMENT = "incorrect_standard_entry_class_code_for_outbound_international_payment"
    ACH_RECEIVER_NOT_PARTICIPANT_IN_GATEWAY_PROGRAM = "ach_receiver_not_participant_in_gateway_program"
    INCORRECT_ACH_RECEIVER_COUNTRY_CODE = "incorrect_ach_receiver_country_code"
    INCORRECT_GATEWAY_ROUTING_NUMBER = "incorrect_gateway_routing_number"


class NotificationOfChange(SdkModel):
    """A correction the receiving bank sent back for an ACH entry."""
    change_code = required("change_code", ChangeCode)
    corrected_data = required("corrected_data", str)
    created_at = required("created_at", datetime)


class CreatedAtFilter(SdkModel):
    """Time-range filter on ``created_at`` for list endpoints."""
    after = optional("after", datetime)
    before = optional("before", datetime)
    on_or_after = optional("on_or_after", datetime)
    on_or_before = optional("on_or_before", datetime)


class APIErrorType(WireEnum):
    INSUFFICIENT_PERMISSIONS_ERROR = "insufficient_permissions_error"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    INVALID_API_KEY_ERROR = "invalid_api_key_error"
    INVALID_OPERATION_ERROR = "invalid_operation_error"
    INVALID_PARAMETERS_ERROR = "invalid_parameters_error"
    MALFORMED_REQUEST_ERROR = "malformed_request_error"
    OBJECT_NOT_FOUND_ERROR = "object_not_found_error"
    PRIVATE_FEATURE_ERROR = "private_feature_error"
    RATE_LIMITED_ERROR = "rate_limited_error"
    IDEMPOTENCY_KEY_ALREADY_USED_ERROR = "idempotency_key_already_used_error"
    ENVIRONMENT_MISMATCH_ERROR = "environment_mismatch_error"


class APIErrorBody(SdkModel):
    """Body of a non-2xx API response."""
    type = required("type", APIErrorType)
    title = required("title", str)
    status = required("status", int)
    detail = optional("detail", str, nullable=True)
    errors = optional("errors", list_of(dict))
    resource_id = optional("resource_id", str)
    retry_after = optional("retry_after", int, nullable=True)
