"""
Token records, including the custom fee union.

CustomFee is a closed union of three frozen dataclasses, each tagged with a
``type`` literal:

    - FixedFee       ("fixed")      flat amount per transfer
    - FractionalFee  ("fractional") share of the transferred amount
    - RoyaltyFee     ("royalty")    share of value exchanged for an NFT

TokenInfo.custom_fees lists all fixed fees first, then fractional, then
royalty, each group in its upstream order. Consumers may rely on this
ordering to display fees positionally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal, Union


class TokenType(StrEnum):
    """Token type as reported by the mirror node."""

    FUNGIBLE_COMMON = "FUNGIBLE_COMMON"
    NON_FUNGIBLE_UNIQUE = "NON_FUNGIBLE_UNIQUE"


@dataclass(frozen=True)
class FixedFee:
    """Flat fee charged per transfer. No denominating token means HBAR."""

    amount: int | None = None
    collector_account_id: str | None = None
    all_collectors_are_exempt: bool | None = None
    denominating_token_id: str | None = None
    type: Literal["fixed"] = field(default="fixed", init=False)


@dataclass(frozen=True)
class FractionalFee:
    """Fraction of the transferred amount, optionally bounded."""

    numerator: int | None = None
    denominator: int | None = None
    minimum: int | None = None
    maximum: int | None = None
    net_of_transfers: bool | None = None
    collector_account_id: str | None = None
    all_collectors_are_exempt: bool | None = None
    type: Literal["fractional"] = field(default="fractional", init=False)


@dataclass(frozen=True)
class FallbackFee:
    """Fixed fee charged when an NFT changes hands with no value exchanged."""

    amount: int | None = None
    denominating_token_id: str | None = None


@dataclass(frozen=True)
class RoyaltyFee:
    """Fraction of the value exchanged in an NFT transfer."""

    numerator: int | None = None
    denominator: int | None = None
    fallback_fee: FallbackFee | None = None
    collector_account_id: str | None = None
    all_collectors_are_exempt: bool | None = None
    type: Literal["royalty"] = field(default="royalty", init=False)


CustomFee = Union[FixedFee, FractionalFee, RoyaltyFee]


@dataclass(frozen=True)
class TokenInfo:
    """Token information from ``/api/v1/tokens/{id}``.

    Supplies are decimal strings because they can exceed 2**63.
    """

    token_id: str
    name: str | None = None
    symbol: str | None = None
    type: TokenType | None = None
    decimals: int | None = None
    total_supply: str | None = None
    max_supply: str | None = None
    treasury_account_id: str | None = None
    admin_key: str | None = None
    supply_key: str | None = None
    freeze_key: str | None = None
    wipe_key: str | None = None
    kyc_key: str | None = None
    pause_key: str | None = None
    fee_schedule_key: str | None = None
    deleted: bool | None = None
    paused: bool | None = None
    custom_fees: list[CustomFee] = field(default_factory=list)
    created_timestamp: str | None = None
    expiration_timestamp: str | None = None
    memo: str | None = None
