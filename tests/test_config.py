"""
Tests for network resolution and environment configuration.
"""

import pytest

from hiero_enterprise.config import (
    HieroConfig,
    Network,
    resolve_config_from_env,
    resolve_mirror_node_url,
    resolve_network,
    validate_config,
)
from hiero_enterprise.errors import ErrorCode, HieroError


class TestResolveNetwork:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("main", Network.MAINNET),
            ("mainnet", Network.MAINNET),
            ("hedera-mainnet", Network.MAINNET),
            ("TESTNET", Network.TESTNET),
            ("  test  ", Network.TESTNET),
            ("Hedera-Testnet", Network.TESTNET),
            ("preview", Network.PREVIEWNET),
            ("hedera-previewnet", Network.PREVIEWNET),
        ],
    )
    def test_aliases(self, name: str, expected: Network) -> None:
        assert resolve_network(name) is expected

    def test_custom_network_rejected(self) -> None:
        with pytest.raises(HieroError) as exc_info:
            resolve_network("localnet")
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_NETWORK
        assert "localnet" in exc_info.value.message


class TestMirrorNodeUrl:
    def test_default_per_network(self) -> None:
        assert resolve_mirror_node_url("testnet") == "https://testnet.mirrornode.hedera.com"
        assert resolve_mirror_node_url("main") == "https://mainnet.mirrornode.hedera.com"

    def test_explicit_url_wins(self) -> None:
        assert resolve_mirror_node_url("testnet", "http://localhost:5551") == "http://localhost:5551"

    def test_explicit_url_wins_for_unknown_network(self) -> None:
        assert resolve_mirror_node_url("localnet", "http://localhost:5551") == "http://localhost:5551"

    def test_unknown_network_without_url(self) -> None:
        with pytest.raises(HieroError) as exc_info:
            resolve_mirror_node_url("localnet")
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_NETWORK


class TestConfigFromEnv:
    def test_hiero_names(self) -> None:
        config = resolve_config_from_env(
            {
                "HIERO_NETWORK": "testnet",
                "HIERO_OPERATOR_ID": "0.0.2",
                "HIERO_OPERATOR_KEY": "302e",
                "HIERO_MIRROR_NODE_URL": "http://localhost:5551",
            }
        )
        assert config == HieroConfig(
            network="testnet",
            operator_id="0.0.2",
            operator_key="302e",
            mirror_node_url="http://localhost:5551",
        )

    def test_hedera_names_are_fallback(self) -> None:
        config = resolve_config_from_env(
            {
                "HIERO_NETWORK": "mainnet",
                "HEDERA_NETWORK": "testnet",
                "HEDERA_OPERATOR_ID": "0.0.3",
                "HEDERA_OPERATOR_KEY": "302e",
            }
        )
        assert config is not None
        assert config.network == "mainnet"
        assert config.operator_id == "0.0.3"
        assert config.mirror_node_url is None

    def test_missing_value_returns_none(self) -> None:
        assert resolve_config_from_env({"HIERO_NETWORK": "testnet", "HIERO_OPERATOR_ID": "0.0.2"}) is None

    def test_empty_environment(self) -> None:
        assert resolve_config_from_env({}) is None

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HIERO_NETWORK", "previewnet")
        monkeypatch.setenv("HIERO_OPERATOR_ID", "0.0.4")
        monkeypatch.setenv("HIERO_OPERATOR_KEY", "302e")
        config = resolve_config_from_env()
        assert config is not None
        assert config.network == "previewnet"


class TestValidateConfig:
    def test_returns_network(self) -> None:
        assert validate_config(HieroConfig("hedera-testnet", "0.0.2", "302e")) is Network.TESTNET

    @pytest.mark.parametrize(
        "config",
        [
            HieroConfig(" ", "0.0.2", "302e"),
            HieroConfig("testnet", "", "302e"),
            HieroConfig("testnet", "0.0.2", "  "),
        ],
    )
    def test_blank_fields(self, config: HieroConfig) -> None:
        with pytest.raises(HieroError) as exc_info:
            validate_config(config)
        assert exc_info.value.code == ErrorCode.INVALID_CONFIG

    def test_repr_hides_key(self) -> None:
        config = HieroConfig("testnet", "0.0.2", "super-secret-key")
        assert "super-secret-key" not in repr(config)
