"""
Transport protocol for mirror node REST calls.

Defines the seam where concrete HTTP implementations plug in. The mirror
client depends on this protocol, not on httpx directly, so the transport
can be swapped without editing client logic.

Concrete implementations:
    - HttpxTransport (default, uses httpx.AsyncClient)
    - FakeMirrorTransport (hiero_enterprise.testing, canned responses)

Contract:
    - A GET that could not complete (DNS, refused, TLS, timeout) raises.
    - A GET that completed returns a MirrorResponse, whatever its status.
      Classification of non-2xx statuses belongs to the client.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class MirrorResponse:
    """A completed HTTP exchange.

    Attributes:
        status_code: HTTP status code.
        reason: HTTP reason phrase ("Not Found").
        body: Parsed JSON body, or None if the body was empty or not JSON.
    """

    status_code: int
    reason: str = ""
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class MirrorTransport(Protocol):
    """Async transport for mirror node GET requests."""

    async def get_json(self, url: str) -> MirrorResponse:
        """Perform one GET and return the completed response.

        Args:
            url: Absolute URL to fetch.

        Returns:
            MirrorResponse with status and parsed body.

        Raises:
            Exception: On transport-level failures. The mirror client maps
                these to MIRROR_NODE_ERROR.
        """
        ...


class HttpxTransport:
    """Default transport using httpx.AsyncClient.

    Lazily imports httpx so that importing the package does not require
    it; httpx is only needed when actually making network calls.

    Args:
        timeout: Request timeout in seconds.
        headers: Extra headers sent with every request.
    """

    def __init__(self, timeout: float = 30.0, headers: dict[str, str] | None = None) -> None:
        self._timeout = timeout
        self._headers = {"Accept": "application/json", **(headers or {})}

    async def get_json(self, url: str) -> MirrorResponse:
        """Send a GET via httpx and parse the body as JSON when possible."""
        import httpx

        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            response = await client.get(url, headers=self._headers)

        body: Any = None
        if response.content:
            try:
                body = response.json()
            except (json.JSONDecodeError, UnicodeDecodeError):
                body = None

        return MirrorResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=body,
        )
