"""Typed records produced by the mirror node converters."""

from hiero_enterprise.data.account import AccountInfo, Balance, TokenBalance
from hiero_enterprise.data.network import (
    ExchangeRate,
    ExchangeRates,
    NetworkStake,
    NetworkSupplies,
)
from hiero_enterprise.data.nft import Nft
from hiero_enterprise.data.page import Page, PageLinks, empty_page
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

__all__ = [
    "AccountInfo",
    "Balance",
    "CustomFee",
    "ExchangeRate",
    "ExchangeRates",
    "FallbackFee",
    "FixedFee",
    "FractionalFee",
    "NetworkStake",
    "NetworkSupplies",
    "Nft",
    "NftTransferInfo",
    "Page",
    "PageLinks",
    "RoyaltyFee",
    "StakingRewardTransfer",
    "TokenBalance",
    "TokenInfo",
    "TokenTransferInfo",
    "TokenType",
    "TopicMessage",
    "TransactionInfo",
    "Transfer",
    "empty_page",
]
