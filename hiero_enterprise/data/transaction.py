"""Transaction history records."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transfer:
    """HBAR transfer. Negative amounts are debits."""

    account_id: str | None = None
    amount: int | None = None
    is_approval: bool | None = None


@dataclass(frozen=True)
class TokenTransferInfo:
    token_id: str | None = None
    account_id: str | None = None
    amount: int | None = None


@dataclass(frozen=True)
class NftTransferInfo:
    token_id: str | None = None
    serial_number: int | None = None
    sender_account_id: str | None = None
    receiver_account_id: str | None = None


@dataclass(frozen=True)
class StakingRewardTransfer:
    account_id: str | None = None
    amount: int | None = None


@dataclass(frozen=True)
class TransactionInfo:
    """One transaction from ``/api/v1/transactions``.

    Attributes:
        transaction_id: Transaction ID ("0.0.2-1700000000-000000000").
        type: Name upper-cased with spaces removed ("CRYPTOTRANSFER").
        name: Name as reported by the mirror node.
        result: Result status ("SUCCESS", "INSUFFICIENT_PAYER_BALANCE", ...).
        successful: ``result == "SUCCESS"``. None when result is absent.
        consensus_timestamp: Consensus timestamp.
        valid_start_timestamp: Valid start timestamp.
        charged_tx_fee: Fee charged in tinybars.
        memo: Decoded memo text. None when empty or not valid base64/UTF-8.
        transfers: HBAR transfers.
        token_transfers: Fungible token transfers.
        nft_transfers: NFT transfers.
        staking_reward_transfers: Staking reward payouts.
    """

    transaction_id: str
    type: str | None = None
    name: str | None = None
    result: str | None = None
    successful: bool | None = None
    consensus_timestamp: str | None = None
    valid_start_timestamp: str | None = None
    charged_tx_fee: int | None = None
    memo: str | None = None
    transfers: list[Transfer] = field(default_factory=list)
    token_transfers: list[TokenTransferInfo] = field(default_factory=list)
    nft_transfers: list[NftTransferInfo] = field(default_factory=list)
    staking_reward_transfers: list[StakingRewardTransfer] = field(default_factory=list)
