"""
Test doubles for code built on hiero-enterprise.

Nothing here touches the network or the SDK:

    - TEST_CONFIG: a syntactically valid testnet config.
    - FakeMirrorTransport: canned MirrorResponse per path, records calls.
    - FakeLedgerSession / fake_session_factory: stand-in ledger session.
    - RecordingListener: collects every event it is handed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from hiero_enterprise.config import HieroConfig, Network
from hiero_enterprise.interceptors import TransactionEvent
from hiero_enterprise.mirror.transport import MirrorResponse

TEST_CONFIG = HieroConfig(
    network="testnet",
    operator_id="0.0.1001",
    operator_key="302e020100300506032b657004220420" + "ab" * 32,
)

_MISSING = object()


class FakeMirrorTransport:
    """Returns canned responses keyed by URL path (query string included).

    Unregistered paths answer 404. A registered exception is raised
    instead of returning a response.

    Args:
        routes: Path -> response body (served as 200, ``None`` included),
            MirrorResponse, or exception instance.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self._routes: dict[str, Any] = dict(routes or {})
        self.calls: list[str] = []

    def add(self, path: str, response: Any) -> None:
        self._routes[path] = response

    async def get_json(self, url: str) -> MirrorResponse:
        self.calls.append(url)
        route = self._routes.get(_path_of(url), _MISSING)
        if route is _MISSING:
            return MirrorResponse(status_code=404, reason="Not Found", body={"_status": {"messages": []}})
        if isinstance(route, BaseException):
            raise route
        if isinstance(route, MirrorResponse):
            return route
        return MirrorResponse(status_code=200, reason="OK", body=route)


def _path_of(url: str) -> str:
    parts = urlsplit(url)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path


@dataclass
class FakeLedgerSession:
    """LedgerSession stand-in. ``close_error`` makes close() raise."""

    operator_account_id: str
    operator_key: str
    network: Network | None = None
    closed: bool = False
    close_error: Exception | None = None

    def close(self) -> None:
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


def fake_session_factory(network: Network, config: HieroConfig) -> FakeLedgerSession:
    return FakeLedgerSession(
        operator_account_id=config.operator_id,
        operator_key=config.operator_key,
        network=network,
    )


@dataclass
class RecordingListener:
    """Listener that appends ``(phase, event)`` to ``events``.

    Pass a shared ``log`` list to observe ordering across listeners.
    """

    name: str = "listener"
    events: list[tuple[str, TransactionEvent]] = field(default_factory=list)
    log: list[str] | None = None

    def on_before_transaction(self, event: TransactionEvent) -> None:
        self._record("before", event)

    def on_after_transaction(self, event: TransactionEvent) -> None:
        self._record("after", event)

    def _record(self, phase: str, event: TransactionEvent) -> None:
        self.events.append((phase, event))
        if self.log is not None:
            self.log.append(f"{self.name}:{phase}")
