"""
Mirror node response converters (pure functions, no I/O).

Each converter maps one snake_case JSON shape to one frozen record.

Rules shared by every converter:
    - The shape's minimum required field(s) must be present, otherwise
      HieroError(INVALID_RESPONSE) is raised. Nothing else is validated.
    - Any missing optional field becomes None. No zero or False defaults
      are invented for data the mirror node did not send.
    - Nested lists that are missing or not lists become empty lists.
    - Key objects (``{"_type": "ED25519", "key": "..."}``) collapse to
      their ``key`` string.

Response shapes follow the mirror node REST API v1:
    - /api/v1/accounts/{id}: account + balance{balance, tokens[]}
    - /api/v1/tokens/{id}: token + custom_fees{fixed_fees, fractional_fees,
      royalty_fees}
    - /api/v1/transactions/...: transfers, token_transfers, nft_transfers,
      staking_reward_transfers
    - /api/v1/network/*: flat objects
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Callable
from typing import Any, TypeVar

from hiero_enterprise.data.account import AccountInfo, Balance, TokenBalance
from hiero_enterprise.data.network import (
    ExchangeRate,
    ExchangeRates,
    NetworkStake,
    NetworkSupplies,
)
from hiero_enterprise.data.nft import Nft
from hiero_enterprise.data.token import (
    CustomFee,
    FallbackFee,
    FixedFee,
    FractionalFee,
    RoyaltyFee,
    TokenInfo,
    TokenType,
)
from hiero_enterprise.data.topic import TopicMessage
from hiero_enterprise.data.transaction import (
    NftTransferInfo,
    StakingRewardTransfer,
    TokenTransferInfo,
    TransactionInfo,
    Transfer,
)
from hiero_enterprise.errors import ErrorCode, HieroError

T = TypeVar("T")

RawMirrorObject = dict[str, Any]
Converter = Callable[[RawMirrorObject], T]


# =====================================================================
# Field helpers
# =====================================================================


def _require_object(raw: Any, shape: str) -> RawMirrorObject:
    if not isinstance(raw, dict):
        raise HieroError(
            f"{shape} response is not a JSON object (got {type(raw).__name__})",
            code=ErrorCode.INVALID_RESPONSE,
        )
    return raw


def _require(raw: RawMirrorObject, key: str, shape: str) -> Any:
    value = raw.get(key)
    if value is None:
        raise HieroError(
            f"{shape} response missing required field '{key}'",
            code=ErrorCode.INVALID_RESPONSE,
        )
    return value


def _object(raw: RawMirrorObject, key: str) -> RawMirrorObject:
    """Nested object or an empty dict when missing/not an object."""
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _list(raw: RawMirrorObject, key: str) -> list[Any]:
    value = raw.get(key)
    return value if isinstance(value, list) else []


def _key(raw: RawMirrorObject, key: str) -> str | None:
    """Collapse a key object to its key string."""
    value = raw.get(key)
    if isinstance(value, dict):
        return value.get("key")
    return None


def _int_or_none(value: Any) -> int | None:
    """Parse integers that the mirror node sends as strings ("8")."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        return None


def _str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


def _decode_memo(memo_base64: Any) -> str | None:
    if not memo_base64 or not isinstance(memo_base64, str):
        return None
    try:
        return base64.b64decode(memo_base64, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return None


# =====================================================================
# Accounts
# =====================================================================


def convert_account_info(raw: RawMirrorObject) -> AccountInfo:
    """Convert an ``/api/v1/accounts/{id}`` body. Requires ``account``."""
    raw = _require_object(raw, "account")
    account_id = _require(raw, "account", "account")
    balance = _object(raw, "balance")

    return AccountInfo(
        account_id=account_id,
        alias=raw.get("alias"),
        evm_address=raw.get("evm_address"),
        key=_key(raw, "key"),
        balance=balance.get("balance"),
        deleted=raw.get("deleted"),
        auto_renew_period=raw.get("auto_renew_period"),
        memo=raw.get("memo"),
        max_automatic_token_associations=raw.get("max_automatic_token_associations"),
        staked_account_id=raw.get("staked_account_id"),
        staked_node_id=raw.get("staked_node_id"),
        stake_period_start=raw.get("stake_period_start"),
        created_timestamp=raw.get("created_timestamp"),
        expiration_timestamp=raw.get("expiry_timestamp"),
    )


def convert_token_balance(raw: RawMirrorObject) -> TokenBalance:
    raw = _require_object(raw, "token balance")
    return TokenBalance(
        token_id=_require(raw, "token_id", "token balance"),
        balance=raw.get("balance"),
        decimals=_int_or_none(raw.get("decimals")),
    )


def convert_balance(account_id: str, raw: RawMirrorObject) -> Balance:
    """Convert an account body into its balances.

    The account ID comes from the caller; the body may identify the account
    by alias or EVM address instead.
    """
    raw = _require_object(raw, "account")
    balance = _object(raw, "balance")
    return Balance(
        account_id=account_id,
        hbars=balance.get("balance"),
        tokens=[convert_token_balance(t) for t in _list(balance, "tokens")],
    )


# =====================================================================
# NFTs
# =====================================================================


def convert_nft(raw: RawMirrorObject) -> Nft:
    """Convert one NFT. Requires ``token_id`` and ``serial_number``."""
    raw = _require_object(raw, "nft")
    return Nft(
        token_id=_require(raw, "token_id", "nft"),
        serial_number=_require(raw, "serial_number", "nft"),
        account_id=raw.get("account_id"),
        metadata=raw.get("metadata"),
        created_timestamp=raw.get("created_timestamp"),
        deleted=raw.get("deleted"),
        delegating_spender=raw.get("delegating_spender"),
        spender=raw.get("spender"),
    )


# =====================================================================
# Tokens
# =====================================================================


def _convert_fixed_fee(raw: RawMirrorObject) -> FixedFee:
    return FixedFee(
        amount=raw.get("amount"),
        collector_account_id=raw.get("collector_account_id"),
        all_collectors_are_exempt=raw.get("all_collectors_are_exempt"),
        denominating_token_id=raw.get("denominating_token_id"),
    )


def _convert_fractional_fee(raw: RawMirrorObject) -> FractionalFee:
    # Current mirror nodes nest the fraction as {"amount": {...}}; older
    # ones sent numerator/denominator at the top level.
    fraction = _object(raw, "amount") or raw
    return FractionalFee(
        numerator=fraction.get("numerator"),
        denominator=fraction.get("denominator"),
        minimum=raw.get("minimum"),
        maximum=raw.get("maximum"),
        net_of_transfers=raw.get("net_of_transfers"),
        collector_account_id=raw.get("collector_account_id"),
        all_collectors_are_exempt=raw.get("all_collectors_are_exempt"),
    )


def _convert_royalty_fee(raw: RawMirrorObject) -> RoyaltyFee:
    fraction = _object(raw, "amount") or raw
    fallback = raw.get("fallback_fee")
    fallback_fee = None
    if isinstance(fallback, dict):
        fallback_fee = FallbackFee(
            amount=fallback.get("amount"),
            denominating_token_id=fallback.get("denominating_token_id"),
        )
    return RoyaltyFee(
        numerator=fraction.get("numerator"),
        denominator=fraction.get("denominator"),
        fallback_fee=fallback_fee,
        collector_account_id=raw.get("collector_account_id"),
        all_collectors_are_exempt=raw.get("all_collectors_are_exempt"),
    )


def convert_custom_fees(raw: RawMirrorObject | None) -> list[CustomFee]:
    """Flatten the three fee arrays into one tagged list.

    Order is fixed, then fractional, then royalty; each group keeps its
    source-array order. Entries that are not objects are skipped.
    """
    if not isinstance(raw, dict):
        return []

    fees: list[CustomFee] = []
    for f in _list(raw, "fixed_fees"):
        if isinstance(f, dict):
            fees.append(_convert_fixed_fee(f))
    for f in _list(raw, "fractional_fees"):
        if isinstance(f, dict):
            fees.append(_convert_fractional_fee(f))
    for f in _list(raw, "royalty_fees"):
        if isinstance(f, dict):
            fees.append(_convert_royalty_fee(f))
    return fees


def _token_type(value: Any) -> TokenType | None:
    if value is None:
        return None
    if value == TokenType.NON_FUNGIBLE_UNIQUE:
        return TokenType.NON_FUNGIBLE_UNIQUE
    return TokenType.FUNGIBLE_COMMON


def convert_token_info(raw: RawMirrorObject) -> TokenInfo:
    """Convert a token body (full or list entry). Requires ``token_id``."""
    raw = _require_object(raw, "token")
    pause_status = raw.get("pause_status")

    return TokenInfo(
        token_id=_require(raw, "token_id", "token"),
        name=raw.get("name"),
        symbol=raw.get("symbol"),
        type=_token_type(raw.get("type")),
        decimals=_int_or_none(raw.get("decimals")),
        total_supply=_str_or_none(raw.get("total_supply")),
        max_supply=_str_or_none(raw.get("max_supply")),
        treasury_account_id=raw.get("treasury_account_id"),
        admin_key=_key(raw, "admin_key"),
        supply_key=_key(raw, "supply_key"),
        freeze_key=_key(raw, "freeze_key"),
        wipe_key=_key(raw, "wipe_key"),
        kyc_key=_key(raw, "kyc_key"),
        pause_key=_key(raw, "pause_key"),
        fee_schedule_key=_key(raw, "fee_schedule_key"),
        deleted=raw.get("deleted"),
        paused=None if pause_status is None else pause_status == "PAUSED",
        custom_fees=convert_custom_fees(raw.get("custom_fees")),
        created_timestamp=raw.get("created_timestamp"),
        expiration_timestamp=_str_or_none(raw.get("expiry_timestamp")),
        memo=raw.get("memo"),
    )


# =====================================================================
# Topics
# =====================================================================


def convert_topic_message(raw: RawMirrorObject) -> TopicMessage:
    """Convert a topic message. Requires ``topic_id`` and ``sequence_number``."""
    raw = _require_object(raw, "topic message")
    return TopicMessage(
        topic_id=_require(raw, "topic_id", "topic message"),
        sequence_number=_require(raw, "sequence_number", "topic message"),
        message=raw.get("message"),
        running_hash=raw.get("running_hash"),
        consensus_timestamp=raw.get("consensus_timestamp"),
        payer_account_id=raw.get("payer_account_id"),
    )


# =====================================================================
# Transactions
# =====================================================================


def convert_transfer(raw: RawMirrorObject) -> Transfer:
    return Transfer(
        account_id=raw.get("account"),
        amount=raw.get("amount"),
        is_approval=raw.get("is_approval"),
    )


def convert_token_transfer(raw: RawMirrorObject) -> TokenTransferInfo:
    return TokenTransferInfo(
        token_id=raw.get("token_id"),
        account_id=raw.get("account"),
        amount=raw.get("amount"),
    )


def convert_nft_transfer(raw: RawMirrorObject) -> NftTransferInfo:
    return NftTransferInfo(
        token_id=raw.get("token_id"),
        serial_number=raw.get("serial_number"),
        sender_account_id=raw.get("sender_account_id"),
        receiver_account_id=raw.get("receiver_account_id"),
    )


def convert_staking_reward_transfer(raw: RawMirrorObject) -> StakingRewardTransfer:
    return StakingRewardTransfer(
        account_id=raw.get("account"),
        amount=raw.get("amount"),
    )


def _convert_each(items: list[Any], converter: Callable[[RawMirrorObject], T]) -> list[T]:
    return [converter(item) for item in items if isinstance(item, dict)]


def convert_transaction_info(raw: RawMirrorObject) -> TransactionInfo:
    """Convert one transaction. Requires ``transaction_id``."""
    raw = _require_object(raw, "transaction")
    name = raw.get("name")
    result = raw.get("result")

    return TransactionInfo(
        transaction_id=_require(raw, "transaction_id", "transaction"),
        type=name.upper().replace(" ", "") if isinstance(name, str) else None,
        name=name,
        result=result,
        successful=None if result is None else result == "SUCCESS",
        consensus_timestamp=raw.get("consensus_timestamp"),
        valid_start_timestamp=raw.get("valid_start_timestamp"),
        charged_tx_fee=raw.get("charged_tx_fee"),
        memo=_decode_memo(raw.get("memo_base64")),
        transfers=_convert_each(_list(raw, "transfers"), convert_transfer),
        token_transfers=_convert_each(_list(raw, "token_transfers"), convert_token_transfer),
        nft_transfers=_convert_each(_list(raw, "nft_transfers"), convert_nft_transfer),
        staking_reward_transfers=_convert_each(
            _list(raw, "staking_reward_transfers"), convert_staking_reward_transfer
        ),
    )


# =====================================================================
# Network
# =====================================================================


def convert_exchange_rate(raw: RawMirrorObject | None) -> ExchangeRate | None:
    if not isinstance(raw, dict):
        return None
    return ExchangeRate(
        hbar_equivalent=raw.get("hbar_equivalent"),
        cent_equivalent=raw.get("cent_equivalent"),
        expiration_time=_str_or_none(raw.get("expiration_time")),
    )


def convert_exchange_rates(raw: RawMirrorObject) -> ExchangeRates:
    """Convert ``/api/v1/network/exchangerate``. Requires ``current_rate``."""
    raw = _require_object(raw, "exchange rate")
    _require(raw, "current_rate", "exchange rate")
    return ExchangeRates(
        current_rate=convert_exchange_rate(raw.get("current_rate")),
        next_rate=convert_exchange_rate(raw.get("next_rate")),
    )


def convert_network_supplies(raw: RawMirrorObject) -> NetworkSupplies:
    raw = _require_object(raw, "network supply")
    return NetworkSupplies(
        released_supply=_str_or_none(raw.get("released_supply")),
        total_supply=_str_or_none(raw.get("total_supply")),
        timestamp=raw.get("timestamp"),
    )


def convert_network_stake(raw: RawMirrorObject) -> NetworkStake:
    raw = _require_object(raw, "network stake")
    return NetworkStake(
        max_stake_rewarded=raw.get("max_stake_rewarded"),
        max_staking_reward_rate_per_hbar=raw.get("max_staking_reward_rate_per_hbar"),
        max_total_reward=raw.get("max_total_reward"),
        node_reward_fee_fraction=raw.get("node_reward_fee_fraction"),
        reserved_staking_rewards=raw.get("reserved_staking_rewards"),
        reward_balance_threshold=raw.get("reward_balance_threshold"),
        stake_total=raw.get("stake_total"),
        staking_period=raw.get("staking_period"),
        staking_period_duration=raw.get("staking_period_duration"),
        staking_periods_stored=raw.get("staking_periods_stored"),
        unreserved_staking_reward_balance=raw.get("unreserved_staking_reward_balance"),
    )
