"""Tests for IncreaseClient over an in-process httpx.MockTransport."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from ledgerwire.client import IncreaseClient, Page, _path, flatten_query
from ledgerwire.config import ClientSettings
from ledgerwire.errors import (
    APIConnectionError,
    APIStatusError,
    ConfigurationError,
    DecodeError,
    ModelValidationError,
)
from ledgerwire.resources import ACHTransfer, ACHTransferCreateParams, Account
from ledgerwire.resources.shared import APIErrorType
from ledgerwire.transport import HttpxTransport


BASE_URL = "https://sandbox.increase.test"


def _client(handler):
    transport = HttpxTransport(BASE_URL, api_key="test_key", http_transport=httpx.MockTransport(handler))
    return IncreaseClient(api_key="test_key", base_url=BASE_URL, transport=transport)


def _fail(request):
    raise AssertionError(f"unexpected request {request.method} {request.url}")


def test_create_sends_encoded_body(ach_transfer_payload):
    """Parameters are validated, encoded and posted; the response is decoded."""
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        seen["headers"] = request.headers
        return httpx.Response(200, json=ach_transfer_payload)

    with _client(handler) as client:
        transfer = client.ach_transfers.create(
            account_id="account_in71c4amph0vgo2qllky",
            amount=100,
            statement_descriptor="New ACH transfer",
            idempotency_key="key-1",
        )

    assert isinstance(transfer, ACHTransfer)
    assert transfer.id == ach_transfer_payload["id"]
    assert seen["method"] == "POST"
    assert seen["path"] == "/ach_transfers"
    assert seen["body"] == {
        "account_id": "account_in71c4amph0vgo2qllky",
        "amount": 100,
        "statement_descriptor": "New ACH transfer",
    }
    assert seen["headers"]["Idempotency-Key"] == "key-1"
    assert seen["headers"]["Authorization"] == "Bearer test_key"


def test_create_accepts_params_object(ach_transfer_payload):
    params = ACHTransferCreateParams(account_id="a", amount=1, statement_descriptor="x")
    client = _client(lambda request: httpx.Response(200, json=ach_transfer_payload))
    assert isinstance(client.ach_transfers.create(params), ACHTransfer)


def test_invalid_params_fail_before_any_request():
    """Every problem is reported and nothing is sent."""
    client = _client(_fail)
    with pytest.raises(ModelValidationError) as excinfo:
        client.ach_transfers.create(account_id="a")
    assert [issue.path for issue in excinfo.value.issues] == ["amount", "statement_descriptor"]


def test_params_object_and_fields_are_exclusive():
    client = _client(_fail)
    params = ACHTransferCreateParams(account_id="a", amount=1, statement_descriptor="x")
    with pytest.raises(TypeError):
        client.ach_transfers.create(params, amount=2)


def test_update_sends_only_set_fields(account_payload):
    """PATCH bodies are partial: unset fields are not sent."""
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=account_payload)

    client = _client(handler)
    account = client.accounts.update("account_in71c4amph0vgo2qllky", name="Renamed")
    assert isinstance(account, Account)
    assert seen == {
        "method": "PATCH",
        "path": "/accounts/account_in71c4amph0vgo2qllky",
        "body": {"name": "Renamed"},
    }


def test_list_decodes_page_and_flattens_query(ach_transfer_payload):
    seen = {}

    def handler(request):
        seen["params"] = request.url.params
        return httpx.Response(200, json={"data": [ach_transfer_payload], "next_cursor": "v57w5d"})

    client = _client(handler)
    page = client.ach_transfers.list(
        status={"in_": ["pending_approval", "submitted"]},
        created_at={"after": datetime(2020, 1, 1, tzinfo=timezone.utc)},
        limit=10,
    )

    assert isinstance(page, Page)
    assert len(page) == 1
    assert page.has_next_page
    assert page.next_cursor == "v57w5d"
    assert [transfer.id for transfer in page] == [ach_transfer_payload["id"]]

    params = seen["params"]
    assert params.get_list("status.in") == ["pending_approval", "submitted"]
    assert params["created_at.after"] == "2020-01-01T00:00:00Z"
    assert params["limit"] == "10"


def test_list_last_page():
    client = _client(lambda request: httpx.Response(200, json={"data": [], "next_cursor": None}))
    page = client.accounts.list()
    assert len(page) == 0
    assert not page.has_next_page


def test_page_item_error_carries_index(ach_transfer_payload):
    broken = dict(ach_transfer_payload, amount="100")
    body = {"data": [ach_transfer_payload, broken], "next_cursor": None}
    client = _client(lambda request: httpx.Response(200, json=body))
    with pytest.raises(DecodeError) as excinfo:
        client.ach_transfers.list()
    assert excinfo.value.path == "data[1].amount"


def test_api_error_body_is_decoded(api_error_payload):
    client = _client(lambda request: httpx.Response(400, json=api_error_payload))
    with pytest.raises(APIStatusError) as excinfo:
        client.accounts.retrieve("account_in71c4amph0vgo2qllky")
    error = excinfo.value
    assert error.status_code == 400
    assert error.error.type is APIErrorType.INVALID_PARAMETERS_ERROR
    assert error.error.errors == ({"field": "amount", "message": "must be positive"},)
    assert str(error) == "400 Invalid parameters.: amount must be positive"


def test_unstructured_error_body():
    client = _client(lambda request: httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(APIStatusError) as excinfo:
        client.accounts.retrieve("account_1")
    assert excinfo.value.error is None
    assert excinfo.value.body == "Bad Gateway"
    assert str(excinfo.value) == "502 API request failed"


def test_connection_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    with pytest.raises(APIConnectionError):
        client.accounts.retrieve("account_1")


def test_action_endpoints(ach_transfer_payload):
    paths = []

    def handler(request):
        paths.append((request.method, request.url.path))
        return httpx.Response(200, json=ach_transfer_payload)

    client = _client(handler)
    client.ach_transfers.approve("ach_transfer_1")
    client.ach_transfers.cancel("ach_transfer_1")
    assert paths == [
        ("POST", "/ach_transfers/ach_transfer_1/approve"),
        ("POST", "/ach_transfers/ach_transfer_1/cancel"),
    ]


def test_raw_request_without_model():
    client = _client(lambda request: httpx.Response(200, json={"ok": True}))
    assert client.request("get", "anything", query={"a": 1}) == {"ok": True}


def test_missing_api_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        IncreaseClient(settings=ClientSettings(api_key=None))


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("INCREASE_API_KEY", "env_key")
    monkeypatch.setenv("INCREASE_BASE_URL", BASE_URL)
    settings = ClientSettings()
    assert settings.api_key == "env_key"
    assert settings.base_url == BASE_URL
    client = IncreaseClient(settings=settings)
    assert client.api_key == "env_key"
    client.close()


def test_path_quotes_ids():
    assert _path("accounts/{}", "a/b") == "accounts/a%2Fb"
    with pytest.raises(ValueError):
        _path("accounts/{}", "")


def test_flatten_query():
    pairs = flatten_query({
        "limit": 5,
        "cursor": None,
        "include": True,
        "status": {"in": ["open", "closed"]},
        "created_at": {"before": "2020-01-31T00:00:00Z"},
    })
    assert pairs == [
        ("limit", "5"),
        ("include", "true"),
        ("status.in", "open"),
        ("status.in", "closed"),
        ("created_at.before", "2020-01-31T00:00:00Z"),
    ]
