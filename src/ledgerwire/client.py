"""IncreaseClient: typed request/response plumbing over a Transport.

Every call follows the same path:

    params model --validate--> encode --> transport.send --> status check --> decode

Parameter models are validated before any I/O, so a caller's mistakes
surface as one ModelValidationError listing every problem instead of a
round trip that fails on the first one.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Type
from urllib.parse import quote

from .config import ClientSettings
from .errors import APIStatusError, ConfigurationError, DecodeError, ModelValidationError
from .kernel import SdkModel, decode_model, encode_model, validate_instance
from .resources.accounts import (
    Account,
    AccountBalanceParams,
    AccountCreateParams,
    AccountListParams,
    AccountUpdateParams,
    BalanceLookup,
)
from .resources.account_numbers import (
    AccountNumber,
    AccountNumberCreateParams,
    AccountNumberListParams,
    AccountNumberUpdateParams,
)
from .resources.ach_prenotifications import (
    ACHPrenotification,
    ACHPrenotificationCreateParams,
    ACHPrenotificationListParams,
)
from .resources.ach_transfers import ACHTransfer, ACHTransferCreateParams, ACHTransferListParams
from .resources.card_disputes import (
    CardDispute,
    CardDisputeCreateParams,
    CardDisputeListParams,
    CardDisputeWithdrawParams,
)
from .resources.shared import APIErrorBody
from .transport import HttpxTransport, QueryParams, Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """One page of a list endpoint."""
    data: Tuple[Any, ...]
    next_cursor: Optional[str] = None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def has_next_page(self) -> bool:
        return self.next_cursor is not None


def flatten_query(encoded: Mapping, prefix: str = "") -> QueryParams:
    """Flatten an encoded query object into ordered (key, value) pairs.

    Nested objects join keys with dots (``created_at.after``); lists repeat
    the key (``status.in=open&status.in=closed``); nulls are dropped.
    """
    pairs: QueryParams = []
    for key, value in encoded.items():
        name = f"{prefix}.{key}" if prefix else key
        if value is None:
            continue
        if isinstance(value, Mapping):
            pairs.extend(flatten_query(value, name))
        elif isinstance(value, list):
            pairs.extend((name, _query_scalar(item)) for item in value if item is not None)
        else:
            pairs.append((name, _query_scalar(value)))
    return pairs


def _query_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _path(template: str, *ids: str) -> str:
    for resource_id in ids:
        if not resource_id:
            raise ValueError(f"Expected a non-empty id for {template!r}")
    return template.format(*(quote(str(resource_id), safe="") for resource_id in ids))


class IncreaseClient:
    """Client for the Increase API.

    Args:
        api_key: API key (default: INCREASE_API_KEY)
        base_url: API root (default: INCREASE_BASE_URL or https://api.increase.com)
        transport: Custom Transport; when omitted an HttpxTransport is built
        settings: Explicit ClientSettings instead of reading the environment
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        settings: Optional[ClientSettings] = None,
    ):
        settings = settings or ClientSettings()
        self.api_key = api_key or settings.api_key
        self.base_url = base_url or settings.base_url
        if transport is None:
            if not self.api_key:
                raise ConfigurationError("No API key: pass api_key= or set INCREASE_API_KEY")
            transport = HttpxTransport(
                self.base_url,
                api_key=self.api_key,
                timeout=settings.timeout_seconds,
                user_agent=settings.user_agent,
            )
        self._transport = transport

        self.accounts = AccountsService(self)
        self.account_numbers = AccountNumbersService(self)
        self.ach_transfers = ACHTransfersService(self)
        self.ach_prenotifications = ACHPrenotificationsService(self)
        self.card_disputes = CardDisputesService(self)

    def __enter__(self) -> "IncreaseClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Any = None,
        convert: Optional[Type[SdkModel]] = None,
        page: bool = False,
        idempotency_key: Optional[str] = None,
    ) -> Any:
        """Send one API request.

        Args:
            method: HTTP method
            path: Path below the base URL
            body: Parameter model (validated, then encoded) or plain dict
            query: Parameter model or plain dict, flattened into the query string
            convert: Model to decode the response into (raw JSON when omitted)
            page: The response is a list page of ``convert`` items
            idempotency_key: Sent as the Idempotency-Key header

        Raises:
            ModelValidationError: If a parameter model is invalid (before any I/O)
            APIConnectionError: If the transport could not reach the API
            APIStatusError: On a non-2xx response
            DecodeError: If the response does not match ``convert``
        """
        partial = method.lower() == "patch"
        json_body = self._encode_params(body, partial=partial) if body is not None else None
        params = flatten_query(self._encode_params(query)) if query is not None else None
        headers = {"Idempotency-Key": idempotency_key} if idempotency_key else None

        response = self._transport.send(method, path, json_body=json_body, params=params, headers=headers)
        if not 200 <= response.status_code < 300:
            raise self._status_error(response.status_code, response.body)

        if convert is None:
            return response.body
        if page:
            return self._decode_page(convert, response.body)
        return decode_model(convert, response.body)

    def _encode_params(self, params: Any, partial: bool = False) -> dict:
        if isinstance(params, SdkModel):
            issues = validate_instance(params)
            if issues:
                raise ModelValidationError(type(params).__descriptor__.name, issues)
            return encode_model(params, partial=partial)
        if isinstance(params, Mapping):
            return dict(params)
        raise TypeError(f"Request parameters must be a model or a mapping, got {type(params).__name__}")

    def _decode_page(self, convert: Type[SdkModel], body: Any) -> Page:
        if not isinstance(body, Mapping):
            raise DecodeError("", "list page object", type(body).__name__)
        items = body.get("data")
        if not isinstance(items, list):
            raise DecodeError("data", "array", type(items).__name__)
        next_cursor = body.get("next_cursor")
        if next_cursor is not None and not isinstance(next_cursor, str):
            raise DecodeError("next_cursor", "string", type(next_cursor).__name__)
        data = tuple(decode_model(convert, item, path=f"data[{index}]") for index, item in enumerate(items))
        return Page(data=data, next_cursor=next_cursor)

    def _status_error(self, status_code: int, body: Any) -> APIStatusError:
        error = None
        if isinstance(body, Mapping):
            try:
                error = decode_model(APIErrorBody, body)
            except DecodeError as e:
                logger.debug("Error body did not match APIErrorBody: %s", e)
        return APIStatusError(status_code, body, error=error)


class _Service:
    def __init__(self, client: IncreaseClient):
        self._client = client

    @staticmethod
    def _params(model_cls: Type[SdkModel], params: Optional[Any], fields: dict) -> Any:
        if params is not None and fields:
            raise TypeError("Pass either a parameter object or keyword fields, not both")
        if params is not None:
            return params
        return model_cls(**fields)


class AccountsService(_Service):
    def create(self, params: Optional[AccountCreateParams] = None, *, idempotency_key: Optional[str] = None, **fields: Any) -> Account:
        body = self._params(AccountCreateParams, params, fields)
        return self._client.request("post", "accounts", body=body, convert=Account, idempotency_key=idempotency_key)

    def retrieve(self, account_id: str) -> Account:
        return self._client.request("get", _path("accounts/{}", account_id), convert=Account)

    def update(self, account_id: str, params: Optional[AccountUpdateParams] = None, **fields: Any) -> Account:
        body = self._params(AccountUpdateParams, params, fields)
        return self._client.request("patch", _path("accounts/{}", account_id), body=body, convert=Account)

    def list(self, params: Optional[AccountListParams] = None, **fields: Any) -> Page:
        query = self._params(AccountListParams, params, fields)
        return self._client.request("get", "accounts", query=query, convert=Account, page=True)

    def balance(self, account_id: str, params: Optional[AccountBalanceParams] = None, **fields: Any) -> BalanceLookup:
        query = self._params(AccountBalanceParams, params, fields)
        return self._client.request("get", _path("accounts/{}/balance", account_id), query=query, convert=BalanceLookup)

    def close(self, account_id: str) -> Account:
        return self._client.request("post", _path("accounts/{}/close", account_id), convert=Account)


class AccountNumbersService(_Service):
    def create(self, params: Optional[AccountNumberCreateParams] = None, *, idempotency_key: Optional[str] = None, **fields: Any) -> AccountNumber:
        body = self._params(AccountNumberCreateParams, params, fields)
        return self._client.request(
            "post", "account_numbers", body=body, convert=AccountNumber, idempotency_key=idempotency_key
        )

    def retrieve(self, account_number_id: str) -> AccountNumber:
        return self._client.request("get", _path("account_numbers/{}", account_number_id), convert=AccountNumber)

    def update(self, account_number_id: str, params: Optional[AccountNumberUpdateParams] = None, **fields: Any) -> AccountNumber:
        body = self._params(AccountNumberUpdateParams, params, fields)
        return self._client.request(
            "patch", _path("account_numbers/{}", account_number_id), body=body, convert=AccountNumber
        )

    def list(self, params: Optional[AccountNumberListParams] = None, **fields: Any) -> Page:
        query = self._params(AccountNumberListParams, params, fields)
        return self._client.request("get", "account_numbers", query=query, convert=AccountNumber, page=True)


class ACHTransfersService(_Service):
    def create(self, params: Optional[ACHTransferCreateParams] = None, *, idempotency_key: Optional[str] = None, **fields: Any) -> ACHTransfer:
        body = self._params(ACHTransferCreateParams, params, fields)
        return self._client.request(
            "post", "ach_transfers", body=body, convert=ACHTransfer, idempotency_key=idempotency_key
        )

    def retrieve(self, ach_transfer_id: str) -> ACHTransfer:
        return self._client.request("get", _path("ach_transfers/{}", ach_transfer_id), convert=ACHTransfer)

    def list(self, params: Optional[ACHTransferListParams] = None, **fields: Any) -> Page:
        query = self._params(ACHTransferListParams, params, fields)
        return self._client.request("get", "ach_transfers", query=query, convert=ACHTransfer, page=True)

    def approve(self, ach_transfer_id: str) -> ACHTransfer:
        """Approve a transfer that is pending approval."""
        return self._client.request("post", _path("ach_transfers/{}/approve", ach_transfer_id), convert=ACHTransfer)

    def cancel(self, ach_transfer_id: str) -> ACHTransfer:
        """Cancel a transfer that is pending approval."""
        return self._client.request("post", _path("ach_transfers/{}/cancel", ach_transfer_id), convert=ACHTransfer)


class ACHPrenotificationsService(_Service):
    def create(self, params: Optional[ACHPrenotificationCreateParams] = None, *, idempotency_key: Optional[str] = None, **fields: Any) -> ACHPrenotification:
        body = self._params(ACHPrenotificationCreateParams, params, fields)
        return self._client.request(
            "post", "ach_prenotifications", body=body, convert=ACHPrenotification, idempotency_key=idempotency_key
        )

    def retrieve(self, ach_prenotification_id: str) -> ACHPrenotification:
        return self._client.request(
            "get", _path("ach_prenotifications/{}", ach_prenotification_id), convert=ACHPrenotification
        )

    def list(self, params: Optional[ACHPrenotificationListParams] = None, **fields: Any) -> Page:
        query = self._params(ACHPrenotificationListParams, params, fields)
        return self._client.request("get", "ach_prenotifications", query=query, convert=ACHPrenotification, page=True)


class CardDisputesService(_Service):
    def create(self, params: Optional[CardDisputeCreateParams] = None, *, idempotency_key: Optional[str] = None, **fields: Any) -> CardDispute:
        body = self._params(CardDisputeCreateParams, params, fields)
        return self._client.request(
            "post", "card_disputes", body=body, convert=CardDispute, idempotency_key=idempotency_key
        )

    def retrieve(self, card_dispute_id: str) -> CardDispute:
        return self._client.request("get", _path("card_disputes/{}", card_dispute_id), convert=CardDispute)

    def list(self, params: Optional[CardDisputeListParams] = None, **fields: Any) -> Page:
        query = self._params(CardDisputeListParams, params, fields)
        return self._client.request("get", "card_disputes", query=query, convert=CardDispute, page=True)

    def withdraw(self, card_dispute_id: str, params: Optional[CardDisputeWithdrawParams] = None, **fields: Any) -> CardDispute:
        """Withdraw a dispute; ``explanation`` is optional."""
        body = self._params(CardDisputeWithdrawParams, params, fields)
        return self._client.request(
            "post", _path("card_disputes/{}/withdraw", card_dispute_id), body=body, convert=CardDispute
        )
