"""Pytest configuration and shared wire payloads.

No sys.path hacks - tests should import from installed ledgerwire package.
Payloads mirror real API responses; each fixture hands out a fresh deep copy
so tests can mutate them freely.
"""

import copy

import pytest


ACH_TRANSFER = {
    "id": "ach_transfer_uoxatyh3lt5evrsdvo7q",
    "account_id": "account_in71c4amph0vgo2qllky",
    "account_number": "987654321",
    "acknowledgement": {"acknowledged_at": "2020-01-31T23:59:59Z"},
    "addenda": None,
    "amount": 100,
    "approval": None,
    "cancellation": None,
    "company_descriptive_date": None,
    "company_discretionary_data": None,
    "company_entry_description": None,
    "company_id": "1234987601",
    "company_name": "National Phonograph Company",
    "created_at": "2020-01-31T23:59:59Z",
    "created_by": {"category": "user", "user": {"email": "user@example.com"}},
    "currency": "USD",
    "destination_account_holder": "business",
    "external_account_id": "external_account_ukk55lr923a3ac0pp7iv",
    "funding": "checking",
    "idempotency_key": None,
    "inbound_funds_hold": None,
    "individual_id": None,
    "individual_name": "Ian Crease",
    "network": "ach",
    "notifications_of_change": [],
    "pending_transaction_id": None,
    "preferred_effective_date": {"date": None, "settlement_schedule": "same_day"},
    "return": None,
    "routing_number": "101050001",
    "settlement": None,
    "standard_entry_class_code": "corporate_credit_or_debit",
    "statement_descriptor": "Statement descriptor",
    "status": "returned",
    "submission": None,
    "transaction_id": "transaction_uyrp7fld2ium70oa7oi",
    "type": "ach_transfer",
}

NOTIFICATION_OF_CHANGE = {
    "change_code": "incorrect_account_number",
    "corrected_data": "123456789",
    "created_at": "2020-02-03T10:00:00Z",
}

CARD_DISPUTE = {
    "id": "card_dispute_h9sc95nbl1cgltpp7men",
    "amount": 1000,
    "card_id": "card_oubs0hwk5rn6knuecxg2",
    "created_at": "2020-01-31T23:59:59Z",
    "disputed_transaction_id": "transaction_uyrp7fld2ium70oa7oi",
    "idempotency_key": None,
    "loss": None,
    "network": "visa",
    "status": "pending_response",
    "type": "card_dispute",
    "user_submission_required_by": None,
    "visa": {
        "network_events": [
            {
                "attachment_files": [{"file_id": "file_makxrc67oh9l6sg7w9yc"}],
                "category": "chargeback_submitted",
                "created_at": "2020-02-01T08:00:00Z",
                "dispute_financial_transaction_id": None,
                "chargeback_submitted": {},
            }
        ],
        "required_user_submission_category": None,
        "user_submissions": [],
    },
    "win": None,
    "withdrawal": None,
}

ACCOUNT = {
    "id": "account_in71c4amph0vgo2qllky",
    "account_revenue_rate": None,
    "bank": "first_internet_bank",
    "closed_at": None,
    "created_at": "2020-01-31T23:59:59Z",
    "currency": "USD",
    "entity_id": "entity_n8y8tnk2p9339ti393yi",
    "funding": "deposits",
    "idempotency_key": None,
    "informational_entity_id": None,
    "interest_accrued": "0.01",
    "interest_accrued_at": "2020-01-31",
    "interest_rate": "0.055",
    "loan": None,
    "name": "My first account!",
    "program_id": "program_i2v2os4mwza1oetokh9i",
    "status": "open",
    "type": "account",
}

API_ERROR = {
    "type": "invalid_parameters_error",
    "title": "Invalid parameters.",
    "status": 400,
    "detail": "amount must be positive",
    "errors": [{"field": "amount", "message": "must be positive"}],
}


@pytest.fixture
def ach_transfer_payload():
    return copy.deepcopy(ACH_TRANSFER)


@pytest.fixture
def notification_of_change_payload():
    return copy.deepcopy(NOTIFICATION_OF_CHANGE)


@pytest.fixture
def card_dispute_payload():
    return copy.deepcopy(CARD_DISPUTE)


@pytest.fixture
def account_payload():
    return copy.deepcopy(ACCOUNT)


@pytest.fixture
def api_error_payload():
    return copy.deepcopy(API_ERROR)
