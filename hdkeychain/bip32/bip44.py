#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP44, BIP49, and BIP84 multi-account hierarchy.

m / purpose' / coin_type' / account' / change / address_index

- purpose is 44 (BIP44, p2pkh), 49 (BIP49, p2wpkh-p2sh), or 84 (BIP84, p2wpkh)
- coin_type is the SLIP-0044 registered coin type of the network
- change is 0 for the external (receive) chain, 1 for the internal one

https://github.com/bitcoin/bips/blob/master/bip-0044.mediawiki
https://github.com/bitcoin/bips/blob/master/bip-0049.mediawiki
https://github.com/bitcoin/bips/blob/master/bip-0084.mediawiki
"""

from typing import List

from hdkeychain.alias import Octets
from hdkeychain.bip32.bip32 import HDKey, derive, derive_path
from hdkeychain.bip32.der_path import HARDENED, str_from_der_path
from hdkeychain.exceptions import MalformedPath
from hdkeychain.network import NetworkName, network_from_name

BIP44 = 44
BIP49 = 49
BIP84 = 84


def indexes_from_bip44(
    purpose: int,
    coin_type: int,
    account: int = 0,
    change: int = 0,
    address_index: int = 0,
) -> List[int]:
    "Return [purpose', coin_type', account', change, address_index] indexes."

    for key, value in (
        ("purpose", purpose),
        ("coin type", coin_type),
        ("account", account),
        ("change", change),
        ("address index", address_index),
    ):
        if isinstance(value, bool) or not 0 <= value < HARDENED:
            raise MalformedPath(f"invalid {key}: {value}")

    return [
        purpose + HARDENED,
        coin_type + HARDENED,
        account + HARDENED,
        change,
        address_index,
    ]


def bip44_der_path(
    purpose: int,
    network: NetworkName,
    account: int = 0,
    change: int = 0,
    address_index: int = 0,
) -> str:
    "Return the derivation path string, e.g. m/44'/0'/0'/0/0."

    coin_type = network_from_name(network).coin_type
    indexes = indexes_from_bip44(purpose, coin_type, account, change, address_index)
    return str_from_der_path(indexes)


def _derive_purpose_path(
    purpose: int,
    seed: Octets,
    network: NetworkName,
    account: int,
    change: int,
    address_index: int,
) -> HDKey:

    coin_type = network_from_name(network).coin_type
    indexes = indexes_from_bip44(purpose, coin_type, account, change, address_index)
    return derive_path(seed, indexes)


def derive_bip44_path(
    seed: Octets,
    network: NetworkName,
    account: int = 0,
    change: int = 0,
    address_index: int = 0,
) -> HDKey:
    "Return the HDKey at m/44'/coin_type'/account'/change/address_index."
    return _derive_purpose_path(BIP44, seed, network, account, change, address_index)


def derive_bip49_path(
    seed: Octets,
    network: NetworkName,
    account: int = 0,
    change: int = 0,
    address_index: int = 0,
) -> HDKey:
    "Return the HDKey at m/49'/coin_type'/account'/change/address_index."
    return _derive_purpose_path(BIP49, seed, network, account, change, address_index)


def derive_bip84_path(
    seed: Octets,
    network: NetworkName,
    account: int = 0,
    change: int = 0,
    address_index: int = 0,
) -> HDKey:
    "Return the HDKey at m/84'/coin_type'/account'/change/address_index."
    return _derive_purpose_path(BIP84, seed, network, account, change, address_index)


def derive_from_account(
    account_key: HDKey,
    change: int,
    address_index: int,
    changes_0_1_only: bool = True,
    max_index: int = 0xFFFF,
) -> HDKey:
    """Derive a key with normal derivation at the given change and index.

    It also ensures that the account key is hardened,
    that the change is a standard receive or change,
    and that the index is not arbitrarily high.
    """

    if not account_key.is_hardened:
        raise MalformedPath("unhardened account key")

    if change >= HARDENED:
        raise MalformedPath("invalid hardened derivation at change level")
    if change > max_index:
        raise MalformedPath(f"too high change: {change}")
    if changes_0_1_only and change not in (0, 1):
        raise MalformedPath(f"invalid change: {change} not in (0, 1)")

    if address_index >= HARDENED:
        raise MalformedPath("invalid hardened derivation at address index level")
    if address_index > max_index:
        raise MalformedPath(f"too high address index: {address_index}")

    return derive(account_key, [change, address_index])
