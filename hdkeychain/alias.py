#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Sequence, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "000102030405060708090a0b0c0d0e0f"
# "00010203 04050607 08090a0b 0c0d0e0f"
#
# use hdkeychain.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for entropy (16-32 bytes), seeds (64 bytes),
# private keys and chain codes (32 bytes), fingerprints (4 bytes)
Octets = Union[bytes, str]

# BIP39 mnemonic sentence: words separated by blanks
# e.g. "abandon abandon abandon abandon abandon abandon
#       abandon abandon abandon abandon abandon about"
Mnemonic = str

# A BIP32 derivation path can be represented as:
#
# - "m/44'/0'/1h/0/10" string
# - sequence of integer indexes (hardened ones having bit 31 set)
DerPath = Union[str, Sequence[int]]
