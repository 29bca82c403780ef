"""
HieroContext — the session that every ledger-mutating call goes through.

Owns three things:
    - the ledger session (SDK client bound to one network and operator)
    - the resolved configuration
    - the listener registry, in registration order

Lifecycle:
    - ``HieroContext.initialize(config=None)`` creates the process-wide
      instance on first call. Later calls return the same instance and
      ignore their arguments.
    - ``HieroContext.get()`` returns it, or raises NOT_INITIALIZED.
    - ``HieroContext.reset()`` closes the ledger session (best effort) and
      forgets the instance. Safe to call when nothing is initialized.

The constructor is public too, so an entry point can build one context and
pass it down explicitly instead of going through the singleton.

Thread safety: one lock guards the singleton slot, another guards each
context's registry. Dispatch iterates a snapshot and re-checks membership
before each listener, so a listener removed mid-dispatch is not invoked
afterwards.
"""

from __future__ import annotations

import inspect
import logging
import threading
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from hiero_enterprise.config import (
    HieroConfig,
    Network,
    resolve_config_from_env,
    resolve_mirror_node_url,
    validate_config,
)
from hiero_enterprise.errors import ErrorCode, HieroError, normalize_error
from hiero_enterprise.interceptors import (
    DispatchPhase,
    DispatchResult,
    TransactionEvent,
    TransactionListener,
    dispatch_event,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerSession(Protocol):
    """Opaque handle bound to one network and one operator.

    Services use it to build, sign and submit SDK transactions. This
    package never builds transactions itself; it only owns the handle.
    """

    @property
    def operator_account_id(self) -> Any: ...

    @property
    def operator_key(self) -> Any: ...

    def close(self) -> None: ...


SessionFactory = Callable[[Network, HieroConfig], LedgerSession]


@dataclass
class SdkSession:
    """LedgerSession backed by the Hiero Python SDK client."""

    client: Any
    operator_account_id: Any
    operator_key: Any

    def close(self) -> None:
        self.client.close()


def sdk_session_factory(network: Network, config: HieroConfig) -> SdkSession:
    """Build an SDK client for ``network`` with the config's operator.

    The SDK is imported lazily; it is only required when a context is
    created without an explicit session factory.
    """
    from hiero_sdk_python import AccountId, Client, PrivateKey
    from hiero_sdk_python import Network as SdkNetwork

    try:
        operator_id = AccountId.from_string(config.operator_id)
        operator_key = PrivateKey.from_string(config.operator_key)
    except Exception as e:
        raise HieroError(
            f"Invalid operator credentials for account {config.operator_id}",
            code=ErrorCode.INVALID_CONFIG,
        ) from e

    client = Client(SdkNetwork(network=network.value))
    client.set_operator(operator_id, operator_key)
    return SdkSession(client=client, operator_account_id=operator_id, operator_key=operator_key)


@dataclass(frozen=True)
class TransactionOutcome(Generic[T]):
    """What a ledger operation hands back to ``execute_transaction``.

    Attributes:
        status: Receipt status, e.g. "SUCCESS".
        transaction_id: Ledger transaction ID, if known.
        value: Value returned to the service's caller.
    """

    status: str
    transaction_id: str | None = None
    value: T | None = None


LedgerOperation = Callable[[LedgerSession], Awaitable[TransactionOutcome[T]] | TransactionOutcome[T]]


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class HieroContext:
    """Central context for interacting with a Hiero network.

    Args:
        config: Resolved configuration.
        session_factory: Builds the ledger session. Defaults to the Hiero
            Python SDK. Inject a fake for tests.

    Raises:
        HieroError: INVALID_CONFIG or UNSUPPORTED_NETWORK.
    """

    _instance: ClassVar[HieroContext | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        config: HieroConfig,
        *,
        session_factory: SessionFactory | None = None,
    ) -> None:
        self._network = validate_config(config)
        self._config = config
        self._session = (session_factory or sdk_session_factory)(self._network, config)
        self._listeners: list[TransactionListener] = []
        self._listeners_lock = threading.Lock()

    # -----------------------------------------------------------------
    # Singleton lifecycle
    # -----------------------------------------------------------------

    @classmethod
    def initialize(
        cls,
        config: HieroConfig | None = None,
        *,
        session_factory: SessionFactory | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> HieroContext:
        """Create the process-wide context, or return the existing one.

        Args:
            config: Explicit configuration. Falls back to environment
                variables when None. Ignored if already initialized.
            session_factory: Ledger session factory. Ignored if already
                initialized.
            environ: Environment mapping to read instead of os.environ.

        Raises:
            HieroError: MISSING_CONFIG when neither source yields a config,
                INVALID_CONFIG or UNSUPPORTED_NETWORK when it is unusable.
        """
        with cls._instance_lock:
            if cls._instance is not None:
                if config is not None:
                    logger.debug("HieroContext already initialized; ignoring new config")
                return cls._instance

            resolved = config if config is not None else resolve_config_from_env(environ)
            if resolved is None:
                raise HieroError(
                    "No Hiero configuration found. Provide a config object or set "
                    "HIERO_NETWORK, HIERO_OPERATOR_ID, and HIERO_OPERATOR_KEY "
                    "environment variables.",
                    code=ErrorCode.MISSING_CONFIG,
                )

            cls._instance = cls(resolved, session_factory=session_factory)
            logger.debug(
                "HieroContext initialized for %s (operator %s)",
                cls._instance.network,
                resolved.operator_id,
            )
            return cls._instance

    @classmethod
    def get(cls) -> HieroContext:
        """Return the process-wide context. Never initializes implicitly."""
        instance = cls._instance
        if instance is None:
            raise HieroError(
                "HieroContext has not been initialized. Call HieroContext.initialize() first.",
                code=ErrorCode.NOT_INITIALIZED,
            )
        return instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset(cls) -> None:
        """Close the ledger session and drop the process-wide context."""
        with cls._instance_lock:
            instance = cls._instance
            cls._instance = None
        if instance is not None:
            instance.close()

    def close(self) -> None:
        """Release the ledger session. Close failures are logged, not raised."""
        try:
            self._session.close()
        except Exception:
            logger.warning("Closing the ledger session failed", exc_info=True)

    # -----------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------

    @property
    def config(self) -> HieroConfig:
        return self._config

    @property
    def network(self) -> Network:
        return self._network

    @property
    def session(self) -> LedgerSession:
        """The ledger session handle."""
        return self._session

    @property
    def operator_account_id(self) -> Any:
        return self._session.operator_account_id

    @property
    def operator_key(self) -> Any:
        return self._session.operator_key

    @property
    def mirror_node_url(self) -> str:
        return resolve_mirror_node_url(self._config.network, self._config.mirror_node_url)

    # -----------------------------------------------------------------
    # Listener registry
    # -----------------------------------------------------------------

    def add_transaction_listener(self, listener: TransactionListener) -> None:
        """Register a listener. Adding the same listener twice registers it twice."""
        with self._listeners_lock:
            self._listeners.append(listener)

    def remove_transaction_listener(self, listener: TransactionListener) -> None:
        """Remove the first registration of ``listener`` (by identity), if any."""
        with self._listeners_lock:
            for index, registered in enumerate(self._listeners):
                if registered is listener:
                    del self._listeners[index]
                    return

    @property
    def transaction_listeners(self) -> tuple[TransactionListener, ...]:
        """Snapshot of the registry in registration order."""
        with self._listeners_lock:
            return tuple(self._listeners)

    def _is_registered(self, listener: Any) -> bool:
        with self._listeners_lock:
            return any(registered is listener for registered in self._listeners)

    # -----------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------

    async def emit_before_transaction(self, event: TransactionEvent) -> DispatchResult:
        """Run every listener's ``on_before_transaction``, in order."""
        return await dispatch_event(
            self.transaction_listeners,
            DispatchPhase.BEFORE,
            event,
            is_registered=self._is_registered,
        )

    async def emit_after_transaction(self, event: TransactionEvent) -> DispatchResult:
        """Run every listener's ``on_after_transaction``, in order."""
        return await dispatch_event(
            self.transaction_listeners,
            DispatchPhase.AFTER,
            event,
            is_registered=self._is_registered,
        )

    async def execute_transaction(
        self,
        transaction_type: str,
        service_name: str,
        method_name: str,
        operation: LedgerOperation[T],
    ) -> T | None:
        """Run one ledger operation between a before- and an after-dispatch.

        The operation receives the ledger session and returns a
        TransactionOutcome (directly or as an awaitable). The after-event
        is emitted exactly once, whether the operation succeeds or fails.

        Returns:
            ``outcome.value``.

        An outcome without a status is a failure: the after-event always
        carries exactly one of ``status`` or ``error``.

        Raises:
            ListenerDispatchError: A listener raised. A before-phase failure
                means the operation never ran. When the operation failed and
                an after-phase listener also raised, this error wins; the
                operation's failure is then only reachable as the
                ``__context__`` of the listener's exception (``__cause__``).
            HieroError: The operation failed; normalized with context
                "service_name.method_name" and chained to the original.
        """
        event = TransactionEvent.create(transaction_type, service_name, method_name)
        start = time.perf_counter()
        await self.emit_before_transaction(event)

        try:
            outcome = operation(self._session)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if not isinstance(outcome, TransactionOutcome):
                raise TypeError(
                    f"{service_name}.{method_name} returned {type(outcome).__name__}, "
                    "expected TransactionOutcome"
                )
            if not outcome.status:
                raise ValueError(f"{service_name}.{method_name} returned an outcome without a status")
        except Exception as e:
            await self.emit_after_transaction(event.failed(error=e, duration_ms=_elapsed_ms(start)))
            error = normalize_error(e, f"{service_name}.{method_name}")
            if error is e:
                raise
            raise error from e

        await self.emit_after_transaction(
            event.succeeded(
                status=outcome.status,
                transaction_id=outcome.transaction_id,
                duration_ms=_elapsed_ms(start),
            )
        )
        return outcome.value
