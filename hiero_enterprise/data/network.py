"""Network-wide records: exchange rates, supply, staking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExchangeRate:
    """Exchange rate between HBAR and US cents."""

    hbar_equivalent: int | None = None
    cent_equivalent: int | None = None
    expiration_time: str | None = None


@dataclass(frozen=True)
class ExchangeRates:
    """Current and next exchange rates."""

    current_rate: ExchangeRate | None = None
    next_rate: ExchangeRate | None = None


@dataclass(frozen=True)
class NetworkSupplies:
    """Released and total HBAR supply, in tinybars (decimal strings)."""

    released_supply: str | None = None
    total_supply: str | None = None
    timestamp: str | None = None


@dataclass(frozen=True)
class NetworkStake:
    """Network staking parameters from ``/api/v1/network/stake``.

    Attributes:
        max_stake_rewarded: Maximum stake rewarded, in tinybars.
        max_staking_reward_rate_per_hbar: Maximum reward rate per HBAR.
        max_total_reward: Maximum total reward, in tinybars.
        node_reward_fee_fraction: Fraction of fees paid to node rewards.
        reserved_staking_rewards: Reserved staking rewards, in tinybars.
        reward_balance_threshold: Reward balance threshold.
        stake_total: Total stake across all nodes.
        staking_period: Staking period bounds.
        staking_period_duration: Staking period length in minutes.
        staking_periods_stored: Number of staking periods stored.
        unreserved_staking_reward_balance: Unreserved reward balance.
    """

    max_stake_rewarded: int | None = None
    max_staking_reward_rate_per_hbar: int | None = None
    max_total_reward: int | None = None
    node_reward_fee_fraction: float | None = None
    reserved_staking_rewards: int | None = None
    reward_balance_threshold: int | None = None
    stake_total: int | None = None
    staking_period: Any = None
    staking_period_duration: int | None = None
    staking_periods_stored: int | None = None
    unreserved_staking_reward_balance: int | None = None
