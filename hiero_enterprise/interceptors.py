"""
Transaction lifecycle events and listener dispatch.

Every ledger-mutating call produces exactly two dispatches around one event
envelope:

    idle -> before-emitted -> executing -> after-emitted

The before-event carries only type, service_name, method_name and
timestamp. The after-event is a copy of the same envelope (never a
mutation) that adds ``duration_ms`` and exactly one of:

    - ``status`` (+ ``transaction_id``) on success
    - ``error`` (the original exception) on failure

Dispatch is strictly sequential in registration order: each hook is
awaited to completion before the next listener runs. A listener without
the hook for the current phase is skipped. A listener that raises aborts
the rest of that phase; the failure surfaces as ListenerDispatchError
carrying how many listeners had already run.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, Protocol

from hiero_enterprise.errors import ListenerDispatchError


class DispatchPhase(StrEnum):
    BEFORE = "before"
    AFTER = "after"


_HOOK_NAMES: dict[DispatchPhase, str] = {
    DispatchPhase.BEFORE: "on_before_transaction",
    DispatchPhase.AFTER: "on_after_transaction",
}


@dataclass(frozen=True)
class TransactionEvent:
    """Event emitted before and after each ledger transaction.

    Attributes:
        type: Transaction type, e.g. "AccountCreate", "TokenMint".
        service_name: Service class name, e.g. "AccountClient".
        method_name: Method name, e.g. "create_account".
        timestamp: UTC time the envelope was created.
        transaction_id: Ledger transaction ID (after, success only).
        status: Receipt status (after, success only).
        error: Original failure (after, failure only).
        duration_ms: Milliseconds from just before the before-dispatch to
            just before the after-dispatch (after only). Includes time
            spent in before-phase listeners.
    """

    type: str
    service_name: str
    method_name: str
    timestamp: datetime
    transaction_id: str | None = None
    status: str | None = None
    error: BaseException | None = None
    duration_ms: float | None = None

    @classmethod
    def create(
        cls,
        type: str,
        service_name: str,
        method_name: str,
        timestamp: datetime | None = None,
    ) -> TransactionEvent:
        """New before-event envelope."""
        return cls(
            type=type,
            service_name=service_name,
            method_name=method_name,
            timestamp=timestamp or datetime.now(timezone.utc),
        )

    def succeeded(
        self,
        *,
        status: str,
        transaction_id: str | None,
        duration_ms: float,
    ) -> TransactionEvent:
        """After-event copy for a successful call."""
        return replace(
            self,
            transaction_id=transaction_id,
            status=status,
            error=None,
            duration_ms=duration_ms,
        )

    def failed(self, *, error: BaseException, duration_ms: float) -> TransactionEvent:
        """After-event copy for a failed call."""
        return replace(
            self,
            transaction_id=None,
            status=None,
            error=error,
            duration_ms=duration_ms,
        )

    @property
    def is_after(self) -> bool:
        return self.duration_ms is not None


class TransactionListener(Protocol):
    """Receives before/after notifications around ledger calls.

    Both hooks are optional: dispatch looks each one up on the listener
    and skips listeners that do not define it. Hooks may be plain
    functions or coroutines. Subclassing this protocol explicitly gives
    no-op defaults for both hooks.
    """

    def on_before_transaction(self, event: TransactionEvent) -> None | Awaitable[None]:
        """Called before the transaction is submitted to the network."""
        ...

    def on_after_transaction(self, event: TransactionEvent) -> None | Awaitable[None]:
        """Called after the transaction completes, successfully or not."""
        ...


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch phase.

    Attributes:
        phase: Which hook was dispatched.
        invoked: Listeners whose hook ran to completion.
        skipped: Listeners without the hook, or removed mid-dispatch.
    """

    phase: DispatchPhase
    invoked: int
    skipped: int = 0


async def dispatch_event(
    listeners: Iterable[Any],
    phase: DispatchPhase,
    event: TransactionEvent,
    *,
    is_registered: Callable[[Any], bool] | None = None,
) -> DispatchResult:
    """Invoke one phase's hook on each listener, in order, one at a time.

    Args:
        listeners: Listener snapshot in registration order.
        phase: BEFORE or AFTER.
        event: The event passed to every hook.
        is_registered: Checked right before each listener runs; listeners
            removed since the snapshot was taken are skipped.

    Returns:
        DispatchResult with invoked/skipped counts.

    Raises:
        ListenerDispatchError: A hook raised. Remaining listeners in this
            phase are not invoked. The hook's exception is ``__cause__``.
    """
    hook_name = _HOOK_NAMES[phase]
    invoked = 0
    skipped = 0

    for listener in listeners:
        if is_registered is not None and not is_registered(listener):
            skipped += 1
            continue

        hook = getattr(listener, hook_name, None)
        if hook is None:
            skipped += 1
            continue

        try:
            result = hook(event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            raise ListenerDispatchError(
                f"{hook_name} failed in {type(listener).__name__} "
                f"after {invoked} listener(s) ran: {e}",
                phase=str(phase),
                invoked=invoked,
                listener=listener,
                context=f"{event.service_name}.{event.method_name}",
            ) from e

        invoked += 1

    return DispatchResult(phase=phase, invoked=invoked, skipped=skipped)
