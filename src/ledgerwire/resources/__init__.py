"""Increase resource schemas, declared with the mapping engine.

Importing this package registers every resource model and enum in the
default registry.
"""

from .accounts import (
    Account,
    AccountBalanceParams,
    AccountCreateParams,
    AccountListParams,
    AccountUpdateParams,
    BalanceLookup,
)
from .account_numbers import (
    AccountNumber,
    AccountNumberCreateParams,
    AccountNumberListParams,
    AccountNumberUpdateParams,
)
from .ach_prenotifications import (
    ACHPrenotification,
    ACHPrenotificationCreateParams,
    ACHPrenotificationListParams,
)
from .ach_transfers import (
    ACHTransfer,
    ACHTransferCreateParams,
    ACHTransferListParams,
    ACHTransferStatus,
)
from .card_disputes import (
    CardDispute,
    CardDisputeCreateParams,
    CardDisputeListParams,
    CardDisputeWithdrawParams,
    NetworkEvent,
    NetworkEventCategory,
)
from .shared import APIErrorBody, Currency

__all__ = [
    "ACHPrenotification",
    "ACHPrenotificationCreateParams",
    "ACHPrenotificationListParams",
    "ACHTransfer",
    "ACHTransferCreateParams",
    "ACHTransferListParams",
    "ACHTransferStatus",
    "APIErrorBody",
    "Account",
    "AccountBalanceParams",
    "AccountCreateParams",
    "AccountListParams",
    "AccountNumber",
    "AccountNumberCreateParams",
    "AccountNumberListParams",
    "AccountNumberUpdateParams",
    "AccountUpdateParams",
    "BalanceLookup",
    "CardDispute",
    "CardDisputeCreateParams",
    "CardDisputeListParams",
    "CardDisputeWithdrawParams",
    "Currency",
    "NetworkEvent",
    "NetworkEventCategory",
]
