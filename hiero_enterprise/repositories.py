"""
Repository facades over MirrorNodeClient.

Each repository groups the read-only queries for one entity and names them
by what the caller is looking for (``find_by_owner``) rather than by the
REST path. They hold no state besides the client and add no behavior:
every method is exactly one mirror node query.

Use ``Repositories.for_client(client)`` to build the full set at once.
"""

from __future__ import annotations

from dataclasses import dataclass

from hiero_enterprise.data.account import AccountInfo, Balance
from hiero_enterprise.data.network import ExchangeRates, NetworkStake, NetworkSupplies
from hiero_enterprise.data.nft import Nft
from hiero_enterprise.data.page import Page
from hiero_enterprise.data.token import TokenInfo
from hiero_enterprise.data.topic import TopicMessage
from hiero_enterprise.data.transaction import TransactionInfo
from hiero_enterprise.mirror.client import MirrorNodeClient


class AccountRepository:
    """Account details and balances."""

    def __init__(self, client: MirrorNodeClient) -> None:
        self._client = client

    async def find_by_account_id(self, account_id: str) -> AccountInfo:
        return await self._client.query_account(account_id)

    async def find_by_alias(self, alias: str) -> AccountInfo:
        """Look up an account by its EVM address or key alias.

        The accounts endpoint accepts an alias wherever it accepts an ID.
        """
        return await self._client.query_account(alias)

    async def get_balance(self, account_id: str) -> Balance:
        return await self._client.query_account_balance(account_id)


class NftRepository:
    """NFTs by owner, by token type, or by serial number."""

    def __init__(self, client: MirrorNodeClient) -> None:
        self._client = client

    async def find_by_owner(self, account_id: str) -> Page[Nft]:
        return await self._client.query_nfts_by_account(account_id)

    async def find_by_type(self, token_id: str) -> Page[Nft]:
        """All NFTs of one token type, regardless of owner."""
        return await self._client.query_nfts_by_token_id(token_id)

    async def find_by_serial(self, token_id: str, serial_number: int) -> Nft:
        return await self._client.query_nft_by_token_id_and_serial(token_id, serial_number)

    async def find_by_owner_and_type(self, account_id: str, token_id: str) -> Page[Nft]:
        return await self._client.query_nfts_by_account_and_token_id(account_id, token_id)


class TokenRepository:
    """Token definitions and per-account token associations."""

    def __init__(self, client: MirrorNodeClient) -> None:
        self._client = client

    async def find_by_id(self, token_id: str) -> TokenInfo:
        return await self._client.query_token_by_id(token_id)

    async def find_by_account_id(self, account_id: str) -> Page[TokenInfo]:
        """Tokens associated with an account."""
        return await self._client.query_tokens_by_account_id(account_id)


class TopicRepository:
    """Messages submitted to consensus topics."""

    def __init__(self, client: MirrorNodeClient) -> None:
        self._client = client

    async def find_by_topic_id(self, topic_id: str) -> Page[TopicMessage]:
        return await self._client.query_topic_messages(topic_id)

    async def find_by_topic_id_and_sequence_number(
        self,
        topic_id: str,
        sequence_number: int,
    ) -> TopicMessage:
        return await self._client.query_topic_message_by_sequence(topic_id, sequence_number)


class TransactionRepository:
    """Transaction history by account, by type, or by ID."""

    def __init__(self, client: MirrorNodeClient) -> None:
        self._client = client

    async def find_by_account(self, account_id: str) -> Page[TransactionInfo]:
        return await self._client.query_transactions_by_account(account_id)

    async def find_by_account_and_type(
        self,
        account_id: str,
        transaction_type: str,
    ) -> Page[TransactionInfo]:
        """Transactions of one type, e.g. "CRYPTOTRANSFER", touching an account."""
        return await self._client.query_transactions_by_account_and_type(account_id, transaction_type)

    async def find_by_id(self, transaction_id: str) -> TransactionInfo:
        """Raises HieroError(NOT_FOUND) when the mirror node has no such transaction."""
        return await self._client.query_transaction(transaction_id)


class NetworkRepository:
    """Network-wide exchange rates, supply and staking figures."""

    def __init__(self, client: MirrorNodeClient) -> None:
        self._client = client

    async def find_exchange_rates(self) -> ExchangeRates:
        return await self._client.query_exchange_rates()

    async def find_network_supplies(self) -> NetworkSupplies:
        return await self._client.query_network_supplies()

    async def find_staking_rewards(self) -> NetworkStake:
        return await self._client.query_network_stake()


@dataclass(frozen=True)
class Repositories:
    """Every repository, sharing one mirror node client."""

    accounts: AccountRepository
    nfts: NftRepository
    tokens: TokenRepository
    topics: TopicRepository
    transactions: TransactionRepository
    network: NetworkRepository

    @classmethod
    def for_client(cls, client: MirrorNodeClient) -> Repositories:
        return cls(
            accounts=AccountRepository(client),
            nfts=NftRepository(client),
            tokens=TokenRepository(client),
            topics=TopicRepository(client),
            transactions=TransactionRepository(client),
            network=NetworkRepository(client),
        )
