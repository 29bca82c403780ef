"""
Mirror node REST client.

One async method per query. Each method builds a path, performs one GET
through the injectable MirrorTransport, and hands the body to a pure
converter (converters.py) or to the pagination engine (pagination.py).

No retry loops. No caching. Identifiers are appended to paths verbatim;
callers pre-encode anything that needs escaping.

Failures are always HieroError with ``context`` set to the request path:
    - MIRROR_NODE_ERROR: the transport raised (network, DNS, timeout).
    - NOT_FOUND: HTTP 404, or no transaction in a by-id lookup.
    - MIRROR_NODE_HTTP_ERROR: any other non-2xx status.
    - INVALID_RESPONSE: 2xx body not a JSON object, or missing the
      shape's required field.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from typing import Any, TypeVar

from hiero_enterprise.config import HieroConfig, resolve_mirror_node_url
from hiero_enterprise.data.account import AccountInfo, Balance
from hiero_enterprise.data.network import ExchangeRates, NetworkStake, NetworkSupplies
from hiero_enterprise.data.nft import Nft
from hiero_enterprise.data.page import Page
from hiero_enterprise.data.token import TokenInfo
from hiero_enterprise.data.topic import TopicMessage
from hiero_enterprise.data.transaction import TransactionInfo
from hiero_enterprise.errors import ErrorCode, HieroError
from hiero_enterprise.mirror.converters import (
    convert_account_info,
    convert_balance,
    convert_exchange_rates,
    convert_network_stake,
    convert_network_supplies,
    convert_nft,
    convert_token_info,
    convert_topic_message,
    convert_transaction_info,
)
from hiero_enterprise.mirror.pagination import (
    PAGE_DATA_KEYS,
    QueryKind,
    convert_page,
    data_key_for_path,
)
from hiero_enterprise.mirror.transport import HttpxTransport, MirrorTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MirrorNodeClient:
    """Typed client for the mirror node REST API.

    Args:
        base_url: Mirror node base URL. Trailing slashes are stripped once.
        transport: Injectable transport for HTTP GET. Defaults to
            HttpxTransport. Pass a fake transport for testing.
    """

    def __init__(self, base_url: str, transport: MirrorTransport | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport or HttpxTransport()

    @classmethod
    def for_config(
        cls,
        config: HieroConfig,
        transport: MirrorTransport | None = None,
    ) -> MirrorNodeClient:
        """Client for the config's explicit mirror URL or its network default."""
        return cls(resolve_mirror_node_url(config.network, config.mirror_node_url), transport)

    @property
    def base_url(self) -> str:
        """The normalized base URL."""
        return self._base_url

    # -----------------------------------------------------------------
    # HTTP
    # -----------------------------------------------------------------

    async def _get(self, path: str) -> dict[str, Any]:
        """GET ``base_url + path`` and return the JSON object body."""
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)

        try:
            response = await self._transport.get_json(url)
        except Exception as e:
            raise HieroError(
                f"Mirror node request failed: {url}",
                code=ErrorCode.MIRROR_NODE_ERROR,
                context=path,
            ) from e

        if not response.ok:
            code = ErrorCode.NOT_FOUND if response.status_code == 404 else ErrorCode.MIRROR_NODE_HTTP_ERROR
            message = f"Mirror node returned {response.status_code}"
            if response.reason:
                message = f"{message}: {response.reason}"
            raise HieroError(
                message,
                code=code,
                context=path,
                status_code=response.status_code,
            )

        if not isinstance(response.body, dict):
            raise HieroError(
                "Mirror node response was not a JSON object",
                code=ErrorCode.INVALID_RESPONSE,
                context=path,
                status_code=response.status_code,
            )
        return response.body

    async def _fetch(self, path: str, converter: Callable[[dict[str, Any]], T]) -> T:
        raw = await self._get(path)
        return _with_context(path, converter, raw)

    async def _fetch_page(
        self,
        path: str,
        converter: Callable[[Any], T],
        data_key: str | None,
    ) -> Page[T]:
        raw = await self._get(path)
        return _with_context(path, lambda r: convert_page(r, converter, data_key), raw)

    async def _query_page(self, kind: QueryKind, path: str, converter: Callable[[Any], T]) -> Page[T]:
        return await self._fetch_page(path, converter, PAGE_DATA_KEYS[kind])

    # -----------------------------------------------------------------
    # Accounts
    # -----------------------------------------------------------------

    async def query_account(self, account_id: str) -> AccountInfo:
        return await self._fetch(f"/api/v1/accounts/{account_id}", convert_account_info)

    async def query_account_balance(self, account_id: str) -> Balance:
        return await self._fetch(
            f"/api/v1/accounts/{account_id}",
            lambda raw: convert_balance(account_id, raw),
        )

    # -----------------------------------------------------------------
    # NFTs
    # -----------------------------------------------------------------

    async def query_nfts_by_account(self, account_id: str) -> Page[Nft]:
        return await self._query_page(
            QueryKind.NFTS_BY_ACCOUNT,
            f"/api/v1/accounts/{account_id}/nfts",
            convert_nft,
        )

    async def query_nfts_by_account_and_token_id(self, account_id: str, token_id: str) -> Page[Nft]:
        return await self._query_page(
            QueryKind.NFTS_BY_ACCOUNT_AND_TOKEN,
            f"/api/v1/accounts/{account_id}/nfts?token.id={token_id}",
            convert_nft,
        )

    async def query_nfts_by_token_id(self, token_id: str) -> Page[Nft]:
        return await self._query_page(
            QueryKind.NFTS_BY_TOKEN,
            f"/api/v1/tokens/{token_id}/nfts",
            convert_nft,
        )

    async def query_nft_by_token_id_and_serial(self, token_id: str, serial_number: int | str) -> Nft:
        return await self._fetch(f"/api/v1/tokens/{token_id}/nfts/{serial_number}", convert_nft)

    # -----------------------------------------------------------------
    # Tokens
    # -----------------------------------------------------------------

    async def query_token_by_id(self, token_id: str) -> TokenInfo:
        return await self._fetch(f"/api/v1/tokens/{token_id}", convert_token_info)

    async def query_tokens_by_account_id(self, account_id: str) -> Page[TokenInfo]:
        return await self._query_page(
            QueryKind.TOKENS_BY_ACCOUNT,
            f"/api/v1/tokens?account.id={account_id}",
            convert_token_info,
        )

    # -----------------------------------------------------------------
    # Topics
    # -----------------------------------------------------------------

    async def query_topic_messages(self, topic_id: str) -> Page[TopicMessage]:
        return await self._query_page(
            QueryKind.TOPIC_MESSAGES,
            f"/api/v1/topics/{topic_id}/messages",
            convert_topic_message,
        )

    async def query_topic_message_by_sequence(self, topic_id: str, sequence_number: int | str) -> TopicMessage:
        return await self._fetch(
            f"/api/v1/topics/{topic_id}/messages/{sequence_number}",
            convert_topic_message,
        )

    # -----------------------------------------------------------------
    # Transactions
    # -----------------------------------------------------------------

    async def query_transactions_by_account(self, account_id: str) -> Page[TransactionInfo]:
        return await self._query_page(
            QueryKind.TRANSACTIONS_BY_ACCOUNT,
            f"/api/v1/transactions?account.id={account_id}",
            convert_transaction_info,
        )

    async def query_transactions_by_account_and_type(
        self,
        account_id: str,
        transaction_type: str,
    ) -> Page[TransactionInfo]:
        return await self._query_page(
            QueryKind.TRANSACTIONS_BY_ACCOUNT_AND_TYPE,
            f"/api/v1/transactions?account.id={account_id}&transactiontype={transaction_type}",
            convert_transaction_info,
        )

    async def query_transaction(self, transaction_id: str) -> TransactionInfo:
        """Look up one transaction by ID.

        The endpoint answers with a ``transactions`` list even for a single
        ID. An empty list is a NOT_FOUND failure, never a None result.
        """
        path = f"/api/v1/transactions/{transaction_id}"
        raw = await self._get(path)

        transactions = raw.get("transactions")
        if not isinstance(transactions, list) or not transactions:
            raise HieroError(
                f"Transaction not found: {transaction_id}",
                code=ErrorCode.NOT_FOUND,
                context=path,
            )
        return _with_context(path, convert_transaction_info, transactions[0])

    # -----------------------------------------------------------------
    # Network
    # -----------------------------------------------------------------

    async def query_exchange_rates(self) -> ExchangeRates:
        return await self._fetch("/api/v1/network/exchangerate", convert_exchange_rates)

    async def query_network_supplies(self) -> NetworkSupplies:
        return await self._fetch("/api/v1/network/supply", convert_network_supplies)

    async def query_network_stake(self) -> NetworkStake:
        return await self._fetch("/api/v1/network/stake", convert_network_stake)

    # -----------------------------------------------------------------
    # Pagination
    # -----------------------------------------------------------------

    async def fetch_next_page(
        self,
        next_link: str,
        converter: Callable[[Any], T],
        data_key: str | None = None,
    ) -> Page[T]:
        """Fetch the page a ``links.next`` value points at.

        Args:
            next_link: Relative path from ``Page.links.next``.
            converter: Item converter, normally the one used for the first page.
            data_key: Key holding the items. Inferred from the link path
                when None; falls back to scanning for unknown paths.
        """
        if data_key is None:
            data_key = data_key_for_path(next_link)
        return await self._fetch_page(next_link, converter, data_key)

    async def iter_pages(
        self,
        first_page: Page[T],
        converter: Callable[[Any], T],
    ) -> AsyncIterator[Page[T]]:
        """Yield ``first_page`` and every following page, one GET per page."""
        page = first_page
        yield page
        while page.links.next is not None:
            page = await self.fetch_next_page(page.links.next, converter)
            yield page


def _with_context(path: str, converter: Callable[[Any], T], raw: Any) -> T:
    """Run a converter, tagging conversion failures with the request path."""
    try:
        return converter(raw)
    except HieroError as e:
        if e.context is not None:
            raise
        raise HieroError(e.message, code=e.code, context=path) from e
