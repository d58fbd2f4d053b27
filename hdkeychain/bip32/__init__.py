#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeychain.bip32."""

from hdkeychain.bip32.bip32 import (
    MAX_DEPTH,
    HDKey,
    derive,
    derive_child,
    derive_path,
    master_key_from_seed,
)
from hdkeychain.bip32.bip44 import (
    BIP44,
    BIP49,
    BIP84,
    bip44_der_path,
    derive_bip44_path,
    derive_bip49_path,
    derive_bip84_path,
    derive_from_account,
    indexes_from_bip44,
)
from hdkeychain.bip32.der_path import (
    HARDENED,
    indexes_from_der_path,
    int_from_index_str,
    str_from_der_path,
    str_from_index_int,
)

__all__ = [
    "MAX_DEPTH",
    "HDKey",
    "derive",
    "derive_child",
    "derive_path",
    "master_key_from_seed",
    "BIP44",
    "BIP49",
    "BIP84",
    "bip44_der_path",
    "derive_bip44_path",
    "derive_bip49_path",
    "derive_bip84_path",
    "derive_from_account",
    "indexes_from_bip44",
    "HARDENED",
    "indexes_from_der_path",
    "int_from_index_str",
    "str_from_der_path",
    "str_from_index_int",
]
