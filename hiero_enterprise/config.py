"""
Network and operator configuration.

Configuration comes from an explicit HieroConfig or, failing that, from
environment variables:

    HIERO_NETWORK / HEDERA_NETWORK
    HIERO_OPERATOR_ID / HEDERA_OPERATOR_ID
    HIERO_OPERATOR_KEY / HEDERA_OPERATOR_KEY
    HIERO_MIRROR_NODE_URL (optional)

Only the three public networks are supported. Custom networks are rejected
with UNSUPPORTED_NETWORK rather than silently falling back.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from hiero_enterprise.errors import ErrorCode, HieroError


class Network(StrEnum):
    """Supported public networks."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"


_NETWORK_ALIASES: dict[str, Network] = {
    "main": Network.MAINNET,
    "mainnet": Network.MAINNET,
    "hedera-mainnet": Network.MAINNET,
    "test": Network.TESTNET,
    "testnet": Network.TESTNET,
    "hedera-testnet": Network.TESTNET,
    "preview": Network.PREVIEWNET,
    "previewnet": Network.PREVIEWNET,
    "hedera-previewnet": Network.PREVIEWNET,
}

MIRROR_NODE_URLS: dict[Network, str] = {
    Network.MAINNET: "https://mainnet.mirrornode.hedera.com",
    Network.TESTNET: "https://testnet.mirrornode.hedera.com",
    Network.PREVIEWNET: "https://previewnet.mirrornode.hedera.com",
}


@dataclass(frozen=True)
class HieroConfig:
    """Connection settings for one network and one operator.

    Attributes:
        network: Network name ("testnet", "hedera-mainnet", ...).
        operator_id: Operator account ID, e.g. "0.0.12345".
        operator_key: Operator private key (DER hex).
        mirror_node_url: Mirror node base URL. Resolved from the network
            when None.
    """

    network: str
    operator_id: str
    operator_key: str
    mirror_node_url: str | None = None

    def __repr__(self) -> str:
        # operator_key stays out of reprs and logs
        return (
            f"HieroConfig(network={self.network!r}, operator_id={self.operator_id!r}, "
            f"mirror_node_url={self.mirror_node_url!r})"
        )


def resolve_network(name: str) -> Network:
    """Map a network name or alias to a Network, case-insensitively.

    Raises:
        HieroError: UNSUPPORTED_NETWORK for anything else.
    """
    network = _NETWORK_ALIASES.get(name.strip().lower())
    if network is None:
        raise HieroError(
            f'Custom networks are not yet supported: "{name}"',
            code=ErrorCode.UNSUPPORTED_NETWORK,
        )
    return network


def resolve_mirror_node_url(network: str, explicit_url: str | None = None) -> str:
    """Return the mirror node base URL for a network.

    An explicit URL always wins. Otherwise the network must be one of the
    known public networks.
    """
    if explicit_url:
        return explicit_url
    return MIRROR_NODE_URLS[resolve_network(network)]


def _first(environ: Mapping[str, str], *names: str) -> str | None:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def resolve_config_from_env(environ: Mapping[str, str] | None = None) -> HieroConfig | None:
    """Build a HieroConfig from environment variables.

    HIERO_* names take precedence over HEDERA_* names.

    Returns:
        The config, or None when network, operator id or operator key
        is missing.
    """
    env = os.environ if environ is None else environ

    network = _first(env, "HIERO_NETWORK", "HEDERA_NETWORK")
    operator_id = _first(env, "HIERO_OPERATOR_ID", "HEDERA_OPERATOR_ID")
    operator_key = _first(env, "HIERO_OPERATOR_KEY", "HEDERA_OPERATOR_KEY")

    if not network or not operator_id or not operator_key:
        return None

    return HieroConfig(
        network=network,
        operator_id=operator_id,
        operator_key=operator_key,
        mirror_node_url=env.get("HIERO_MIRROR_NODE_URL") or None,
    )


def validate_config(config: HieroConfig) -> Network:
    """Check that a config is usable and return its resolved network.

    Raises:
        HieroError: INVALID_CONFIG when operator fields are blank,
            UNSUPPORTED_NETWORK for unknown networks.
    """
    if not config.network or not config.network.strip():
        raise HieroError("network must be non-empty", code=ErrorCode.INVALID_CONFIG)
    if not config.operator_id or not config.operator_id.strip():
        raise HieroError("operator_id must be non-empty", code=ErrorCode.INVALID_CONFIG)
    if not config.operator_key or not config.operator_key.strip():
        raise HieroError("operator_key must be non-empty", code=ErrorCode.INVALID_CONFIG)
    return resolve_network(config.network)
