"""Accounts: the account resource, its balance lookup and request parameters."""

from datetime import date, datetime

from ..kernel import SdkModel, WireEnum, list_of, optional, required
from .shared import CreatedAtFilter, Currency


class AccountBank(WireEnum):
    """The bank the Account is with."""
    CORE_BANK = "core_bank"
    FIRST_INTERNET_BANK = "first_internet_bank"
    GRASSHOPPER_BANK = "grasshopper_bank"


class AccountFunding(WireEnum):
    """Whether the Account is funded by a loan or by deposits."""
    LOAN = "loan"
    DEPOSITS = "deposits"


class AccountStatus(WireEnum):
    CLOSED = "closed"
    OPEN = "open"


class AccountType(WireEnum):
    ACCOUNT = "account"


class BalanceLookupType(WireEnum):
    BALANCE_LOOKUP = "balance_lookup"


class StatementPaymentType(WireEnum):
    """How the loan statement payment is computed."""
    BALANCE = "balance"
    INTEREST_UNTIL_MATURITY = "interest_until_maturity"


class AccountLoan(SdkModel):
    """Loan-related information of a loan account."""
    credit_limit = required("credit_limit", int)
    grace_period_days = required("grace_period_days", int)
    maturity_date = required("maturity_date", date, nullable=True)
    statement_day_of_month = required("statement_day_of_month", int)
    statement_payment_type = required("statement_payment_type", StatementPaymentType)


class Account(SdkModel):
    """Accounts are your bank accounts with Increase.

    They store money, receive transfers, and send payments. They earn
    interest and have depository insurance.
    """
    id = required("id", str)
    account_revenue_rate = required("account_revenue_rate", str, nullable=True)
    bank = required("bank", AccountBank)
    closed_at = required("closed_at", datetime, nullable=True)
    created_at = required("created_at", datetime)
    currency = required("currency", Currency)
    entity_id = required("entity_id", str)
    funding = required("funding", AccountFunding)
    idempotency_key = required("idempotency_key", str, nullable=True)
    informational_entity_id = required("informational_entity_id", str, nullable=True)
    interest_accrued = required("interest_accrued", str, doc="Decimal string, e.g. \"0.01\"")
    interest_accrued_at = required("interest_accrued_at", date, nullable=True)
    interest_rate = required("interest_rate", str, doc="Decimal string, e.g. \"0.01\"")
    loan = required("loan", AccountLoan, nullable=True)
    name = required("name", str)
    program_id = required("program_id", str)
    status = required("status", AccountStatus)
    type = required("type", AccountType)


class BalanceLookup(SdkModel):
    """Current and available balances of an Account, in minor units."""
    account_id = required("account_id", str)
    available_balance = required("available_balance", int)
    current_balance = required("current_balance", int)
    loan = required("loan", AccountLoan, nullable=True)
    type = required("type", BalanceLookupType)


class AccountCreateLoan(SdkModel):
    credit_limit = required("credit_limit", int)
    grace_period_days = required("grace_period_days", int)
    statement_day_of_month = required("statement_day_of_month", int)
    statement_payment_type = required("statement_payment_type", StatementPaymentType)
    maturity_date = optional("maturity_date", date)


class AccountCreateParams(SdkModel):
    """Body of POST /accounts."""
    name = required("name", str)
    entity_id = optional("entity_id", str)
    funding = optional("funding", AccountFunding)
    informational_entity_id = optional("informational_entity_id", str)
    loan = optional("loan", AccountCreateLoan)
    program_id = optional("program_id", str)


class AccountUpdateLoan(SdkModel):
    credit_limit = optional("credit_limit", int)


class AccountUpdateParams(SdkModel):
    """Body of PATCH /accounts/{account_id}; only set fields are sent."""
    name = optional("name", str)
    loan = optional("loan", AccountUpdateLoan)


class AccountStatusFilter(SdkModel):
    in_ = optional("in", list_of(AccountStatus))


class AccountListParams(SdkModel):
    """Query of GET /accounts."""
    created_at = optional("created_at", CreatedAtFilter)
    cursor = optional("cursor", str)
    entity_id = optional("entity_id", str)
    idempotency_key = optional("idempotency_key", str)
    informational_entity_id = optional("informational_entity_id", str)
    limit = optional("limit", int)
    program_id = optional("program_id", str)
    status = optional("status", AccountStatusFilter)


class AccountBalanceParams(SdkModel):
    """Query of GET /accounts/{account_id}/balance."""
    at_time = optional("at_time", datetime)
