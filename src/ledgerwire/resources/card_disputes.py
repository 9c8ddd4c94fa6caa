"""Card Disputes: chargebacks of card transactions and their network history.

Several objects here carry one populated slot per value of a tag field
(``NetworkEvent.category``, ``Represented.reason``, ``CardDispute.network``).
``instance.variant()`` returns the slot selected by the tag.
"""

from datetime import date, datetime

from ..kernel import SdkModel, WireEnum, list_of, optional, required
from .shared import CreatedAtFilter


class CardDisputeNetwork(WireEnum):
    VISA = "visa"
    PULSE = "pulse"


class CardDisputeStatus(WireEnum):
    USER_SUBMISSION_REQUIRED = "user_submission_required"
    PENDING_USER_SUBMISSION_REVIEWING = "pending_user_submission_reviewing"
    PENDING_USER_SUBMISSION_SUBMITTING = "pending_user_submission_submitting"
    PENDING_USER_WITHDRAWAL_SUBMITTING = "pending_user_withdrawal_submitting"
    PENDING_RESPONSE = "pending_response"
    LOST = "lost"
    WON = "won"


class CardDisputeType(WireEnum):
    CARD_DISPUTE = "card_dispute"


class LossReason(WireEnum):
    USER_WITHDRAWN = "user_withdrawn"
    LOSS = "loss"


class NetworkEventCategory(WireEnum):
    """What happened in a Visa dispute network event."""
    CHARGEBACK_ACCEPTED = "chargeback_accepted"
    CHARGEBACK_SUBMITTED = "chargeback_submitted"
    CHARGEBACK_TIMED_OUT = "chargeback_timed_out"
    MERCHANT_PREARBITRATION_DECLINE_SUBMITTED = "merchant_prearbitration_decline_submitted"
    MERCHANT_PREARBITRATION_RECEIVED = "merchant_prearbitration_received"
    MERCHANT_PREARBITRATION_TIMED_OUT = "merchant_prearbitration_timed_out"
    REPRESENTED = "represented"
    REPRESENTMENT_TIMED_OUT = "representment_timed_out"
    USER_PREARBITRATION_ACCEPTED = "user_prearbitration_accepted"
    USER_PREARBITRATION_DECLINED = "user_prearbitration_declined"
    USER_PREARBITRATION_SUBMITTED = "user_prearbitration_submitted"
    USER_PREARBITRATION_TIMED_OUT = "user_prearbitration_timed_out"
    USER_WITHDRAWAL_SUBMITTED = "user_withdrawal_submitted"


class RepresentedReason(WireEnum):
    CARDHOLDER_NO_LONGER_DISPUTES = "cardholder_no_longer_disputes"
    CREDIT_OR_REVERSAL_PROCESSED = "credit_or_reversal_processed"
    INVALID_DISPUTE = "invalid_dispute"
    NON_FIAT_CURRENCY_OR_NON_FUNGIBLE_TOKEN_AS_DESCRIBED = "non_fiat_currency_or_non_fungible_token_as_described"
    NON_FIAT_CURRENCY_OR_NON_FUNGIBLE_TOKEN_RECEIVED = "non_fiat_currency_or_non_fungible_token_received"
    PROOF_OF_CASH_DISBURSEMENT = "proof_of_cash_disbursement"
    REVERSAL_ISSUED = "reversal_issued"


class PrearbitrationReason(WireEnum):
    CARDHOLDER_NO_LONGER_DISPUTES = "cardholder_no_longer_disputes"
    COMPELLING_EVIDENCE = "compelling_evidence"
    CREDIT_OR_REVERSAL_PROCESSED = "credit_or_reversal_processed"
    DELAYED_CHARGE_TRANSACTION = "delayed_charge_transaction"
    EVIDENCE_OF_IMPRINT = "evidence_of_imprint"
    INVALID_DISPUTE = "invalid_dispute"
    NON_FIAT_CURRENCY_OR_NON_FUNGIBLE_TOKEN_RECEIVED = "non_fiat_currency_or_non_fungible_token_received"
    PRIOR_UNDISPUTED_NON_FRAUD_TRANSACTIONS = "prior_undisputed_non_fraud_transactions"


class UserSubmissionCategory(WireEnum):
    CHARGEBACK = "chargeback"
    MERCHANT_PREARBITRATION_DECLINE = "merchant_prearbitration_decline"
    USER_PREARBITRATION = "user_prearbitration"


class VisaDisputeCategory(WireEnum):
    """Reason category of a new Visa dispute."""
    AUTHORIZATION = "authorization"
    CONSUMER_CANCELED_MERCHANDISE = "consumer_canceled_merchandise"
    CONSUMER_CANCELED_RECURRING_TRANSACTION = "consumer_canceled_recurring_transaction"
    CONSUMER_CANCELED_SERVICES = "consumer_canceled_services"
    CONSUMER_COUNTERFEIT_MERCHANDISE = "consumer_counterfeit_merchandise"
    CONSUMER_CREDIT_NOT_PROCESSED = "consumer_credit_not_processed"
    CONSUMER_DAMAGED_OR_DEFECTIVE_MERCHANDISE = "consumer_damaged_or_defective_merchandise"
    CONSUMER_MERCHANDISE_MISREPRESENTATION = "consumer_merchandise_misrepresentation"
    CONSUMER_MERCHANDISE_NOT_AS_DESCRIBED = "consumer_merchandise_not_as_described"
    CONSUMER_MERCHANDISE_NOT_RECEIVED = "consumer_merchandise_not_received"
    CONSUMER_NON_RECEIPT_OF_CASH = "consumer_non_receipt_of_cash"
    CONSUMER_ORIGINAL_CREDIT_TRANSACTION_NOT_ACCEPTED = "consumer_original_credit_transaction_not_accepted"
    CONSUMER_QUALITY_MERCHANDISE = "consumer_quality_merchandise"
    CONSUMER_QUALITY_SERVICES = "consumer_quality_services"
    CONSUMER_SERVICES_MISREPRESENTATION = "consumer_services_misrepresentation"
    CONSUMER_SERVICES_NOT_AS_DESCRIBED = "consumer_services_not_as_described"
    CONSUMER_SERVICES_NOT_RECEIVED = "consumer_services_not_received"
    FRAUD = "fraud"
    PROCESSING_ERROR = "processing_error"


class AttachmentFile(SdkModel):
    file_id = required("file_id", str)


class CreditOrReversalProcessed(SdkModel):
    amount = required("amount", int)
    currency = required("currency", str)
    explanation = required("explanation", str, nullable=True)
    processed_at = required("processed_at", date)


class MerchantPrearbitrationReceived(SdkModel):
    """The merchant filed pre-arbitration; one evidence slot per reason."""
    reason = required("reason", PrearbitrationReason)
    cardholder_no_longer_disputes = required(
        "cardholder_no_longer_disputes", dict, nullable=True,
        when=("reason", PrearbitrationReason.CARDHOLDER_NO_LONGER_DISPUTES),
    )
    compelling_evidence = required(
        "compelling_evidence", dict, nullable=True,
        when=("reason", PrearbitrationReason.COMPELLING_EVIDENCE),
    )
    credit_or_reversal_processed = required(
        "credit_or_reversal_processed", CreditOrReversalProcessed, nullable=True,
        when=("reason", PrearbitrationReason.CREDIT_OR_REVERSAL_PROCESSED),
    )
    delayed_charge_transaction = required(
        "delayed_charge_transaction", dict, nullable=True,
        when=("reason", PrearbitrationReason.DELAYED_CHARGE_TRANSACTION),
    )
    evidence_of_imprint = required(
        "evidence_of_imprint", dict, nullable=True,
        when=("reason", PrearbitrationReason.EVIDENCE_OF_IMPRINT),
    )
    invalid_dispute = required(
        "invalid_dispute", dict, nullable=True,
        when=("reason", PrearbitrationReason.INVALID_DISPUTE),
    )
    non_fiat_currency_or_non_fungible_token_received = required(
        "non_fiat_currency_or_non_fungible_token_received", dict, nullable=True,
        when=("reason", PrearbitrationReason.NON_FIAT_CURRENCY_OR_NON_FUNGIBLE_TOKEN_RECEIVED),
    )
    prior_undisputed_non_fraud_transactions = required(
        "prior_undisputed_non_fraud_transactions", dict, nullable=True,
        when=("reason", PrearbitrationReason.PRIOR_UNDISPUTED_NON_FRAUD_TRANSACTIONS),
    )


class Represented(SdkModel):
    """The merchant represented the dispute; one evidence slot per reason."""
    reason = required("reason", RepresentedReason)
    cardholder_no_longer_disputes = required(
        "cardholder_no_longer_disputes", dict, nullable=True,
        when=("reason", RepresentedReason.CARDHOLDER_NO_LONGER_DISPUTES),
    )
    credit_or_reversal_processed = required(
        "credit_or_reversal_processed", CreditOrReversalProcessed, nullable=True,
        when=("reason", RepresentedReason.CREDIT_OR_REVERSAL_PROCESSED),
    )
    invalid_dispute = required(
        "invalid_dispute", dict, nullable=True,
        when=("reason", RepresentedReason.INVALID_DISPUTE),
    )
    non_fiat_currency_or_non_fungible_token_as_described = required(
        "non_fiat_currency_or_non_fungible_token_as_described", dict, nullable=True,
        when=("reason", RepresentedReason.NON_FIAT_CURRENCY_OR_NON_FUNGIBLE_TOKEN_AS_DESCRIBED),
    )
    non_fiat_currency_or_non_fungible_token_received = required(
        "non_fiat_currency_or_non_fungible_token_received", dict, nullable=True,
        when=("reason", RepresentedReason.NON_FIAT_CURRENCY_OR_NON_FUNGIBLE_TOKEN_RECEIVED),
    )
    proof_of_cash_disbursement = required(
        "proof_of_cash_disbursement", dict, nullable=True,
        when=("reason", RepresentedReason.PROOF_OF_CASH_DISBURSEMENT),
    )
    reversal_issued = required(
        "reversal_issued", dict, nullable=True,
        when=("reason", RepresentedReason.REVERSAL_ISSUED),
    )


class NetworkEvent(SdkModel):
    """One step of the dispute's history on the Visa network."""
    attachment_files = required("attachment_files", list_of(AttachmentFile))
    category = required("category", NetworkEventCategory)
    created_at = required("created_at", datetime)
    dispute_financial_transaction_id = required("dispute_financial_transaction_id", str, nullable=True)
    chargeback_accepted = optional(
        "chargeback_accepted", dict, nullable=True,
        when=("category", NetworkEventCategory.CHARGEBACK_ACCEPTED),
    )
    chargeback_submitted = optional(
        "chargeback_submitted", dict, nullable=True,
        when=("category", NetworkEventCategory.CHARGEBACK_SUBMITTED),
    )
    chargeback_timed_out = optional(
        "chargeback_timed_out", dict, nullable=True,
        when=("category", NetworkEventCategory.CHARGEBACK_TIMED_OUT),
    )
    merchant_prearbitration_decline_submitted = optional(
        "merchant_prearbitration_decline_submitted", dict, nullable=True,
        when=("category", NetworkEventCategory.MERCHANT_PREARBITRATION_DECLINE_SUBMITTED),
    )
    merchant_prearbitration_received = optional(
        "merchant_prearbitration_received", MerchantPrearbitrationReceived, nullable=True,
        when=("category", NetworkEventCategory.MERCHANT_PREARBITRATION_RECEIVED),
    )
    merchant_prearbitration_timed_out = optional(
        "merchant_prearbitration_timed_out", dict, nullable=True,
        when=("category", NetworkEventCategory.MERCHANT_PREARBITRATION_TIMED_OUT),
    )
    represented = optional(
        "represented", Represented, nullable=True,
        when=("category", NetworkEventCategory.REPRESENTED),
    )
    representment_timed_out = optional(
        "representment_timed_out", dict, nullable=True,
        when=("category", NetworkEventCategory.REPRESENTMENT_TIMED_OUT),
    )
    user_prearbitration_accepted = optional(
        "user_prearbitration_accepted", dict, nullable=True,
        when=("category", NetworkEventCategory.USER_PREARBITRATION_ACCEPTED),
    )
    user_prearbitration_declined = optional(
        "user_prearbitration_declined", dict, nullable=True,
        when=("category", NetworkEventCategory.USER_PREARBITRATION_DECLINED),
    )
    user_prearbitration_submitted = optional(
        "user_prearbitration_submitted", dict, nullable=True,
        when=("category", NetworkEventCategory.USER_PREARBITRATION_SUBMITTED),
    )
    user_prearbitration_timed_out = optional(
        "user_prearbitration_timed_out", dict, nullable=True,
        when=("category", NetworkEventCategory.USER_PREARBITRATION_TIMED_OUT),
    )
    user_withdrawal_submitted = optional(
        "user_withdrawal_submitted", dict, nullable=True,
        when=("category", NetworkEventCategory.USER_WITHDRAWAL_SUBMITTED),
    )


class CardDisputeVisa(SdkModel):
    """Visa-specific details; present when the dispute's network is visa."""
    network_events = required("network_events", list_of(NetworkEvent))
    required_user_submission_category = required(
        "required_user_submission_category", UserSubmissionCategory, nullable=True,
    )
    user_submissions = required("user_submissions", list_of(dict))


class CardDisputeLoss(SdkModel):
    lost_at = required("lost_at", datetime)
    reason = required("reason", LossReason)


class CardDisputeWin(SdkModel):
    won_at = required("won_at", datetime)


class CardDisputeWithdrawal(SdkModel):
    explanation = required("explanation", str, nullable=True)


class CardDispute(SdkModel):
    """A dispute of a card transaction with the card network."""
    id = required("id", str)
    amount = required("amount", int)
    card_id = required("card_id", str)
    created_at = required("created_at", datetime)
    disputed_transaction_id = required("disputed_transaction_id", str)
    idempotency_key = required("idempotency_key", str, nullable=True)
    loss = required("loss", CardDisputeLoss, nullable=True)
    network = required("network", CardDisputeNetwork)
    status = required("status", CardDisputeStatus)
    type = required("type", CardDisputeType)
    user_submission_required_by = required("user_submission_required_by", datetime, nullable=True)
    visa = required("visa", CardDisputeVisa, nullable=True, when=("network", CardDisputeNetwork.VISA))
    win = required("win", CardDisputeWin, nullable=True)
    withdrawal = required("withdrawal", CardDisputeWithdrawal, nullable=True)


class CardDisputeCreateVisa(SdkModel):
    """Visa dispute details; populate the slot named by ``category``."""
    category = required("category", VisaDisputeCategory)
    authorization = optional(
        "authorization", dict, when=("category", VisaDisputeCategory.AUTHORIZATION))
    consumer_canceled_merchandise = optional(
        "consumer_canceled_merchandise", dict,
        when=("category", VisaDisputeCategory.CONSUMER_CANCELED_MERCHANDISE))
    consumer_canceled_recurring_transaction = optional(
        "consumer_canceled_recurring_transaction", dict,
        when=("category", VisaDisputeCategory.CONSUMER_CANCELED_RECURRING_TRANSACTION))
    consumer_canceled_services = optional(
        "consumer_canceled_services", dict,
        when=("category", VisaDisputeCategory.CONSUMER_CANCELED_SERVICES))
    consumer_counterfeit_merchandise = optional(
        "consumer_counterfeit_merchandise", dict,
        when=("category", VisaDisputeCategory.CONSUMER_COUNTERFEIT_MERCHANDISE))
    consumer_credit_not_processed = optional(
        "consumer_credit_not_processed", dict,
        when=("category", VisaDisputeCategory.CONSUMER_CREDIT_NOT_PROCESSED))
    consumer_damaged_or_defective_merchandise = optional(
        "consumer_damaged_or_defective_merchandise", dict,
        when=("category", VisaDisputeCategory.CONSUMER_DAMAGED_OR_DEFECTIVE_MERCHANDISE))
    consumer_merchandise_misrepresentation = optional(
        "consumer_merchandise_misrepresentation", dict,
        when=("category", VisaDisputeCategory.CONSUMER_MERCHANDISE_MISREPRESENTATION))
    consumer_merchandise_not_as_described = optional(
        "consumer_merchandise_not_as_described", dict,
        when=("category", VisaDisputeCategory.CONSUMER_MERCHANDISE_NOT_AS_DESCRIBED))
    consumer_merchandise_not_received = optional(
        "consumer_merchandise_not_received", dict,
        when=("category", VisaDisputeCategory.CONSUMER_MERCHANDISE_NOT_RECEIVED))
    consumer_non_receipt_of_cash = optional(
        "consumer_non_receipt_of_cash", dict,
        when=("category", VisaDisputeCategory.CONSUMER_NON_RECEIPT_OF_CASH))
    consumer_original_credit_transaction_not_accepted = optional(
        "consumer_original_credit_transaction_not_accepted", dict,
        when=("category", VisaDisputeCategory.CONSUMER_ORIGINAL_CREDIT_TRANSACTION_NOT_ACCEPTED))
    consumer_quality_merchandise = optional(
        "consumer_quality_merchandise", dict,
        when=("category", VisaDisputeCategory.CONSUMER_QUALITY_MERCHANDISE))
    consumer_quality_services = optional(
        "consumer_quality_services", dict,
        when=("category", VisaDisputeCategory.CONSUMER_QUALITY_SERVICES))
    consumer_services_misrepresentation = optional(
        "consumer_services_misrepresentation", dict,
        when=("category", VisaDisputeCategory.CONSUMER_SERVICES_MISREPRESENTATION))
    consumer_services_not_as_described = optional(
        "consumer_services_not_as_described", dict,
        when=("category", VisaDisputeCategory.CONSUMER_SERVICES_NOT_AS_DESCRIBED))
    consumer_services_not_received = optional(
        "consumer_services_not_received", dict,
        when=("category", VisaDisputeCategory.CONSUMER_SERVICES_NOT_RECEIVED))
    fraud = optional("fraud", dict, when=("category", VisaDisputeCategory.FRAUD))
    processing_error = optional(
        "processing_error", dict, when=("category", VisaDisputeCategory.PROCESSING_ERROR))


class CardDisputeCreateParams(SdkModel):
    """Body of POST /card_disputes."""
    disputed_transaction_id = required("disputed_transaction_id", str)
    network = required("network", CardDisputeNetwork)
    amount = optional("amount", int)
    attachment_files = optional("attachment_files", list_of(AttachmentFile))
    explanation = optional("explanation", str)
    visa = optional("visa", CardDisputeCreateVisa, when=("network", CardDisputeNetwork.VISA))


class CardDisputeWithdrawParams(SdkModel):
    """Body of POST /card_disputes/{card_dispute_id}/withdraw."""
    explanation = optional("explanation", str)


class CardDisputeStatusFilter(SdkModel):
    in_ = optional("in", list_of(CardDisputeStatus))


class CardDisputeListParams(SdkModel):
    """Query of GET /card_disputes."""
    created_at = optional("created_at", CreatedAtFilter)
    cursor = optional("cursor", str)
    idempotency_key = optional("idempotency_key", str)
    limit = optional("limit", int)
    status = optional("status", CardDisputeStatusFilter)
