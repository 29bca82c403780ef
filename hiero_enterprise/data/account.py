"""Account and balance records from the mirror node."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccountInfo:
    """Account information from ``/api/v1/accounts/{id}``.

    Only ``account_id`` is guaranteed. Every other field is None when the
    mirror node omits it.

    Attributes:
        account_id: The account ID ("0.0.12345").
        alias: Account alias, if any.
        evm_address: EVM address ("0x...").
        key: Public key string from ``key.key``.
        balance: HBAR balance in tinybars.
        deleted: Whether the account has been deleted.
        auto_renew_period: Auto-renewal period in seconds.
        memo: Account memo.
        max_automatic_token_associations: Max automatic associations.
        staked_account_id: Account this account stakes to.
        staked_node_id: Node this account stakes to.
        stake_period_start: Start of the current staking period.
        created_timestamp: Consensus timestamp of creation.
        expiration_timestamp: Expiry timestamp.
    """

    account_id: str
    alias: str | None = None
    evm_address: str | None = None
    key: str | None = None
    balance: int | None = None
    deleted: bool | None = None
    auto_renew_period: int | None = None
    memo: str | None = None
    max_automatic_token_associations: int | None = None
    staked_account_id: str | None = None
    staked_node_id: int | None = None
    stake_period_start: str | None = None
    created_timestamp: str | None = None
    expiration_timestamp: str | None = None


@dataclass(frozen=True)
class TokenBalance:
    """Balance of one token held by an account."""

    token_id: str
    balance: int | None = None
    decimals: int | None = None


@dataclass(frozen=True)
class Balance:
    """HBAR and token balances of an account.

    ``hbars`` is None when the response carries no balance object.
    """

    account_id: str
    hbars: int | None = None
    tokens: list[TokenBalance] = field(default_factory=list)
