"""HTTP transport: moves already-encoded JSON to the API and back.

The client only depends on the ``Transport`` protocol; ``HttpxTransport``
is the default implementation. Tests plug an ``httpx.MockTransport`` into
HttpxTransport instead of standing up a server.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

import httpx

from .errors import APIConnectionError

logger = logging.getLogger(__name__)

QueryParams = List[Tuple[str, str]]


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: Any  # Parsed JSON, or the raw text when the body is not JSON


class Transport(Protocol):
    def send(
        self,
        method: str,
        path: str,
        json_body: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        ...


class HttpxTransport:
    """Transport over a synchronous ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 60.0,
        user_agent: str = "ledgerwire",
        http_transport: Optional[httpx.BaseTransport] = None,
    ):
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": user_agent,
        }
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=http_transport,
        )

    def send(
        self,
        method: str,
        path: str,
        json_body: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """Send one request and return status code plus parsed body.

        Raises:
            APIConnectionError: On timeouts and network failures
        """
        logger.debug("%s %s", method.upper(), path)
        try:
            response = self._client.request(
                method.upper(),
                "/" + path.lstrip("/"),
                json=json_body,
                params=params,
                headers=dict(headers or {}),
            )
        except httpx.TimeoutException as e:
            raise APIConnectionError(f"Request to {path} timed out") from e
        except httpx.TransportError as e:
            raise APIConnectionError(f"Request to {path} failed: {e}") from e

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = response.text
        return TransportResponse(status_code=response.status_code, body=body)

    def close(self) -> None:
        self._client.close()
