"""
Tests for the mirror node converters — canned response dicts, no I/O.

Test plan:
- Account: required field, key/balance flattening, optional fields absent
- Balance: hbars + token balances, decimals parsed
- NFT / topic message: required fields, base64 message decoding
- Token: decimals string → int, pause status, custom fee flattening order
- Transaction: type normalization, success flag, memo decoding, transfers
- Network: exchange rates, supplies, stake
"""

import base64

import pytest

from hiero_enterprise.data import FixedFee, FractionalFee, RoyaltyFee, TokenType
from hiero_enterprise.errors import ErrorCode, HieroError
from hiero_enterprise.mirror.converters import (
    convert_account_info,
    convert_balance,
    convert_custom_fees,
    convert_exchange_rates,
    convert_network_stake,
    convert_network_supplies,
    convert_nft,
    convert_token_info,
    convert_topic_message,
    convert_transaction_info,
)

# ---------------------------------------------------------------------------
# Canned responses
# ---------------------------------------------------------------------------

ACCOUNT_MINIMAL = {
    "account": "0.0.12345",
    "balance": {"balance": 500000, "tokens": []},
    "deleted": False,
}

ACCOUNT_FULL = {
    "account": "0.0.800",
    "alias": "HIQQEXWKW53RKN4W6XXC4Q232SYNZ3SZANVZZSUME5B5PRGXL663UAQA",
    "evm_address": "0x0000000000000000000000000000000000000320",
    "key": {"_type": "ED25519", "key": "aabbcc"},
    "balance": {
        "balance": 1_000_000,
        "timestamp": "1700000000.000000000",
        "tokens": [
            {"token_id": "0.0.5001", "balance": 42, "decimals": "2"},
            {"token_id": "0.0.5002", "balance": 7},
        ],
    },
    "deleted": False,
    "auto_renew_period": 7776000,
    "memo": "treasury",
    "max_automatic_token_associations": 10,
    "staked_account_id": None,
    "staked_node_id": 3,
    "stake_period_start": "1699920000.000000000",
    "created_timestamp": "1600000000.000000000",
    "expiry_timestamp": "1800000000.000000000",
}

TOKEN_WITH_FEES = {
    "token_id": "0.0.7001",
    "name": "Example",
    "symbol": "EXM",
    "type": "NON_FUNGIBLE_UNIQUE",
    "decimals": "0",
    "total_supply": "12",
    "max_supply": "100",
    "treasury_account_id": "0.0.800",
    "admin_key": {"_type": "ED25519", "key": "admin"},
    "supply_key": {"_type": "ED25519", "key": "supply"},
    "freeze_key": None,
    "pause_status": "PAUSED",
    "deleted": False,
    "memo": "",
    "created_timestamp": "1600000000.000000000",
    "custom_fees": {
        "created_timestamp": "1600000000.000000000",
        "royalty_fees": [
            {
                "amount": {"numerator": 5, "denominator": 100},
                "collector_account_id": "0.0.900",
                "all_collectors_are_exempt": False,
                "fallback_fee": {"amount": 10, "denominating_token_id": None},
            }
        ],
        "fixed_fees": [
            {"amount": 100, "collector_account_id": "0.0.901", "denominating_token_id": "0.0.5001"}
        ],
        "fractional_fees": [
            {
                "amount": {"numerator": 1, "denominator": 10},
                "minimum": 1,
                "maximum": 50,
                "net_of_transfers": True,
                "collector_account_id": "0.0.902",
            }
        ],
    },
}

TRANSACTION = {
    "transaction_id": "0.0.800-1700000000-000000000",
    "name": "CRYPTO TRANSFER",
    "result": "SUCCESS",
    "consensus_timestamp": "1700000001.000000000",
    "valid_start_timestamp": "1700000000.000000000",
    "charged_tx_fee": 84000,
    "memo_base64": base64.b64encode(b"payroll").decode(),
    "transfers": [
        {"account": "0.0.800", "amount": -100, "is_approval": False},
        {"account": "0.0.801", "amount": 100, "is_approval": False},
    ],
    "token_transfers": [{"token_id": "0.0.5001", "account": "0.0.801", "amount": 5}],
    "nft_transfers": [
        {
            "token_id": "0.0.7001",
            "serial_number": 3,
            "sender_account_id": "0.0.800",
            "receiver_account_id": "0.0.801",
        }
    ],
    "staking_reward_transfers": [{"account": "0.0.800", "amount": 12}],
}


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class TestAccountInfo:
    def test_minimal_body_leaves_optional_fields_absent(self) -> None:
        info = convert_account_info(ACCOUNT_MINIMAL)
        assert info.account_id == "0.0.12345"
        assert info.balance == 500000
        assert info.deleted is False
        assert info.evm_address is None
        assert info.key is None
        assert info.memo is None
        assert info.staked_node_id is None
        assert info.expiration_timestamp is None

    def test_full_body(self) -> None:
        info = convert_account_info(ACCOUNT_FULL)
        assert info.key == "aabbcc"
        assert info.balance == 1_000_000
        assert info.alias == ACCOUNT_FULL["alias"]
        assert info.staked_node_id == 3
        assert info.staked_account_id is None
        assert info.expiration_timestamp == "1800000000.000000000"

    def test_missing_account_field(self) -> None:
        with pytest.raises(HieroError) as exc_info:
            convert_account_info({"balance": {"balance": 1}})
        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    def test_not_an_object(self) -> None:
        with pytest.raises(HieroError) as exc_info:
            convert_account_info([])  # type: ignore[arg-type]
        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE


class TestBalance:
    def test_hbars_and_tokens(self) -> None:
        balance = convert_balance("0.0.800", ACCOUNT_FULL)
        assert balance.account_id == "0.0.800"
        assert balance.hbars == 1_000_000
        assert [t.token_id for t in balance.tokens] == ["0.0.5001", "0.0.5002"]
        assert balance.tokens[0].decimals == 2
        assert balance.tokens[1].decimals is None

    def test_no_balance_object(self) -> None:
        balance = convert_balance("0.0.1", {"account": "0.0.1"})
        assert balance.hbars is None
        assert balance.tokens == []


# ---------------------------------------------------------------------------
# NFTs and topics
# ---------------------------------------------------------------------------


class TestNft:
    def test_converts(self) -> None:
        nft = convert_nft(
            {
                "token_id": "0.0.7001",
                "serial_number": 3,
                "account_id": "0.0.801",
                "metadata": "aXBmczovL2Zvbw==",
                "deleted": False,
                "spender": None,
            }
        )
        assert nft.token_id == "0.0.7001"
        assert nft.serial_number == 3
        assert nft.account_id == "0.0.801"
        assert nft.spender is None
        assert nft.delegating_spender is None

    def test_serial_number_required(self) -> None:
        with pytest.raises(HieroError) as exc_info:
            convert_nft({"token_id": "0.0.7001"})
        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE
        assert "serial_number" in exc_info.value.message


class TestTopicMessage:
    def test_decoded_message(self) -> None:
        msg = convert_topic_message(
            {
                "topic_id": "0.0.6001",
                "sequence_number": 1,
                "message": base64.b64encode(b"hello").decode(),
                "consensus_timestamp": "1700000000.000000001",
            }
        )
        assert msg.sequence_number == 1
        assert msg.decoded_message() == b"hello"
        assert msg.payer_account_id is None

    def test_undecodable_message(self) -> None:
        msg = convert_topic_message({"topic_id": "0.0.6001", "sequence_number": 2, "message": "not base64!"})
        assert msg.decoded_message() is None


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class TestTokenInfo:
    def test_scalar_fields(self) -> None:
        token = convert_token_info(TOKEN_WITH_FEES)
        assert token.token_id == "0.0.7001"
        assert token.type is TokenType.NON_FUNGIBLE_UNIQUE
        assert token.decimals == 0
        assert token.total_supply == "12"
        assert token.admin_key == "admin"
        assert token.freeze_key is None
        assert token.kyc_key is None
        assert token.paused is True

    def test_unparsable_decimals_absent(self) -> None:
        token = convert_token_info({"token_id": "0.0.1", "decimals": "n/a"})
        assert token.decimals is None

    def test_pause_status_absent(self) -> None:
        token = convert_token_info({"token_id": "0.0.1"})
        assert token.paused is None
        assert token.custom_fees == []

    def test_unpaused(self) -> None:
        assert convert_token_info({"token_id": "0.0.1", "pause_status": "UNPAUSED"}).paused is False


class TestCustomFees:
    def test_flattened_fixed_fractional_royalty(self) -> None:
        fees = convert_token_info(TOKEN_WITH_FEES).custom_fees
        assert [f.type for f in fees] == ["fixed", "fractional", "royalty"]
        assert isinstance(fees[0], FixedFee)
        assert isinstance(fees[1], FractionalFee)
        assert isinstance(fees[2], RoyaltyFee)

    def test_fee_fields(self) -> None:
        fixed, fractional, royalty = convert_token_info(TOKEN_WITH_FEES).custom_fees
        assert fixed.amount == 100
        assert fixed.denominating_token_id == "0.0.5001"
        assert (fractional.numerator, fractional.denominator) == (1, 10)
        assert fractional.maximum == 50
        assert (royalty.numerator, royalty.denominator) == (5, 100)
        assert royalty.fallback_fee is not None
        assert royalty.fallback_fee.amount == 10

    def test_group_order_preserved(self) -> None:
        fees = convert_custom_fees(
            {
                "fixed_fees": [{"amount": 1}, {"amount": 2}],
                "royalty_fees": [{"numerator": 3, "denominator": 4}],
            }
        )
        assert [f.type for f in fees] == ["fixed", "fixed", "royalty"]
        assert [fees[0].amount, fees[1].amount] == [1, 2]
        assert fees[2].numerator == 3

    def test_not_an_object(self) -> None:
        assert convert_custom_fees(None) == []


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class TestTransactionInfo:
    def test_type_and_result(self) -> None:
        tx = convert_transaction_info(TRANSACTION)
        assert tx.type == "CRYPTOTRANSFER"
        assert tx.name == "CRYPTO TRANSFER"
        assert tx.successful is True
        assert tx.memo == "payroll"

    def test_transfer_lists(self) -> None:
        tx = convert_transaction_info(TRANSACTION)
        assert [t.amount for t in tx.transfers] == [-100, 100]
        assert tx.token_transfers[0].account_id == "0.0.801"
        assert tx.nft_transfers[0].serial_number == 3
        assert tx.staking_reward_transfers[0].amount == 12

    def test_missing_lists_are_empty(self) -> None:
        tx = convert_transaction_info({"transaction_id": "0.0.1-1-1", "result": "INVALID_SIGNATURE"})
        assert tx.transfers == []
        assert tx.nft_transfers == []
        assert tx.successful is False
        assert tx.type is None

    def test_success_absent_without_result(self) -> None:
        assert convert_transaction_info({"transaction_id": "0.0.1-1-1"}).successful is None

    def test_empty_memo_absent(self) -> None:
        assert convert_transaction_info({"transaction_id": "0.0.1-1-1", "memo_base64": ""}).memo is None


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


class TestNetwork:
    def test_exchange_rates(self) -> None:
        rates = convert_exchange_rates(
            {
                "current_rate": {"cent_equivalent": 596987, "hbar_equivalent": 30000, "expiration_time": 1700003600},
                "next_rate": {"cent_equivalent": 600000, "hbar_equivalent": 30000, "expiration_time": 1700007200},
                "timestamp": "1700000000.000000000",
            }
        )
        assert rates.current_rate is not None
        assert rates.current_rate.cent_equivalent == 596987
        assert rates.current_rate.expiration_time == "1700003600"
        assert rates.next_rate is not None

    def test_exchange_rates_require_current(self) -> None:
        with pytest.raises(HieroError) as exc_info:
            convert_exchange_rates({"next_rate": {}})
        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    def test_supplies(self) -> None:
        supplies = convert_network_supplies(
            {"released_supply": "3999999999999999949", "total_supply": "5000000000000000000", "timestamp": "1.2"}
        )
        assert supplies.released_supply == "3999999999999999949"
        assert supplies.timestamp == "1.2"

    def test_stake(self) -> None:
        stake = convert_network_stake({"stake_total": 35000000000000000, "staking_periods_stored": 365})
        assert stake.stake_total == 35000000000000000
        assert stake.staking_periods_stored == 365
        assert stake.max_total_reward is None
