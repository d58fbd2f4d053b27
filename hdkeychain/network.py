#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions.

Networks differ only by data, i.e. their SLIP-0044 registered coin type:
https://github.com/satoshilabs/slips/blob/master/slip-0044.md

The registry is built once at import time and it is read-only.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from dataclasses_json import DataClassJsonMixin

from hdkeychain.exceptions import UnknownNetwork


class Coin(Enum):
    BITCOIN = "bitcoin"
    BITCOIN_TESTNET = "bitcoin-testnet"
    LITECOIN = "litecoin"
    DOGECOIN = "dogecoin"
    DASH = "dash"
    ETHEREUM = "ethereum"
    ETHEREUM_CLASSIC = "ethereum-classic"
    COSMOS = "cosmos"
    ZCASH = "zcash"
    RIPPLE = "ripple"
    BITCOIN_CASH = "bitcoin-cash"
    STELLAR = "stellar"
    TRON = "tron"
    POLKADOT = "polkadot"
    SOLANA = "solana"
    CARDANO = "cardano"


@dataclass(frozen=True)
class NetworkConfig(DataClassJsonMixin):
    coin_type: int
    name: str
    symbol: str


_NETWORKS = {
    Coin.BITCOIN: NetworkConfig(0, "Bitcoin", "BTC"),
    # SLIP-0044 coin type 1 is shared by all testnets
    Coin.BITCOIN_TESTNET: NetworkConfig(1, "Bitcoin Testnet", "tBTC"),
    Coin.LITECOIN: NetworkConfig(2, "Litecoin", "LTC"),
    Coin.DOGECOIN: NetworkConfig(3, "Dogecoin", "DOGE"),
    Coin.DASH: NetworkConfig(5, "Dash", "DASH"),
    Coin.ETHEREUM: NetworkConfig(60, "Ethereum", "ETH"),
    Coin.ETHEREUM_CLASSIC: NetworkConfig(61, "Ethereum Classic", "ETC"),
    Coin.COSMOS: NetworkConfig(118, "Cosmos", "ATOM"),
    Coin.ZCASH: NetworkConfig(133, "Zcash", "ZEC"),
    Coin.RIPPLE: NetworkConfig(144, "Ripple", "XRP"),
    Coin.BITCOIN_CASH: NetworkConfig(145, "Bitcoin Cash", "BCH"),
    Coin.STELLAR: NetworkConfig(148, "Stellar", "XLM"),
    Coin.TRON: NetworkConfig(195, "Tron", "TRX"),
    Coin.POLKADOT: NetworkConfig(354, "Polkadot", "DOT"),
    Coin.SOLANA: NetworkConfig(501, "Solana", "SOL"),
    Coin.CARDANO: NetworkConfig(1815, "Cardano", "ADA"),
}

NETWORKS: Mapping[Coin, NetworkConfig] = MappingProxyType(_NETWORKS)

NetworkName = Union[str, Coin]


def lookup_network(network: NetworkName) -> Optional[NetworkConfig]:
    """Return the network configuration, None if unknown.

    Network names are case and blank insensitive
    (e.g. "bitcoin", " Bitcoin ", "BITCOIN").
    """

    if isinstance(network, Coin):
        return NETWORKS[network]
    try:
        coin = Coin(network.strip().lower())
    except (ValueError, AttributeError):
        return None
    return NETWORKS[coin]


def network_from_name(network: NetworkName) -> NetworkConfig:
    "Return the network configuration, raising UnknownNetwork if unknown."

    network_config = lookup_network(network)
    if network_config is None:
        raise UnknownNetwork(f"unknown network: {network!r}")
    return network_config
