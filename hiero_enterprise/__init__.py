"""
hiero-enterprise — typed mirror node access and transaction lifecycle events
for Hiero networks.

Public API:

    Context:
        - ``HieroContext`` — process-wide session: ledger handle, config,
          transaction listeners.
        - ``TransactionOutcome`` — what a ledger operation returns.

    Mirror node:
        - ``MirrorNodeClient`` — one async method per REST query.
        - Repositories (``AccountRepository`` ...) — entity-oriented facades.

    Events:
        - ``TransactionEvent``, ``TransactionListener``, ``dispatch_event()``.

    Errors:
        - ``HieroError``, ``ListenerDispatchError``, ``ErrorCode``,
          ``normalize_error()``.
"""

from hiero_enterprise.config import (
    HieroConfig,
    Network,
    resolve_config_from_env,
    resolve_mirror_node_url,
    resolve_network,
)
from hiero_enterprise.context import HieroContext, LedgerSession, TransactionOutcome
from hiero_enterprise.data import Page, PageLinks
from hiero_enterprise.errors import ErrorCode, HieroError, ListenerDispatchError, normalize_error
from hiero_enterprise.interceptors import (
    DispatchPhase,
    DispatchResult,
    TransactionEvent,
    TransactionListener,
    dispatch_event,
)
from hiero_enterprise.mirror import MirrorNodeClient
from hiero_enterprise.repositories import (
    AccountRepository,
    NetworkRepository,
    NftRepository,
    Repositories,
    TokenRepository,
    TopicRepository,
    TransactionRepository,
)

__version__ = "0.3.0"

__all__ = [
    "AccountRepository",
    "DispatchPhase",
    "DispatchResult",
    "ErrorCode",
    "HieroConfig",
    "HieroContext",
    "HieroError",
    "LedgerSession",
    "ListenerDispatchError",
    "MirrorNodeClient",
    "Network",
    "NetworkRepository",
    "NftRepository",
    "Page",
    "PageLinks",
    "Repositories",
    "TokenRepository",
    "TopicRepository",
    "TransactionEvent",
    "TransactionListener",
    "TransactionOutcome",
    "TransactionRepository",
    "__version__",
    "dispatch_event",
    "normalize_error",
    "resolve_config_from_env",
    "resolve_mirror_node_url",
    "resolve_network",
]
