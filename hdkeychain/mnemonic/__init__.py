#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeychain.mnemonic."""

from hdkeychain.mnemonic.bip39 import (
    entropy_from_mnemonic,
    is_valid_mnemonic,
    master_key_from_mnemonic,
    mnemonic_from_entropy,
    mnemonic_from_random,
    seed_from_mnemonic,
)
from hdkeychain.mnemonic.entropy import (
    ENTROPY_SIZES,
    WORD_COUNTS,
    bytes_entropy_from_random,
)
from hdkeychain.mnemonic.wordlist import WORDLIST

__all__ = [
    "entropy_from_mnemonic",
    "is_valid_mnemonic",
    "master_key_from_mnemonic",
    "mnemonic_from_entropy",
    "mnemonic_from_random",
    "seed_from_mnemonic",
    "ENTROPY_SIZES",
    "WORD_COUNTS",
    "bytes_entropy_from_random",
    "WORDLIST",
]
