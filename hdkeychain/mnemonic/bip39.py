#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP39 entropy / mnemonic / seed functions.

https://github.com/bitcoin/bips/blob/master/bip-0039/bip-0039.mediawiki.

Checksummed entropy (**ENT+CS**) is converted from/to mnemonic.

* bits per word = bpw = 11
* **ENT** = raw entropy
* **CS** = checksum = **ENT** / 32
* **MS** = words in the mnemonic sentence = (**ENT+CS**) / bpw

+-----+----+--------+----+
| ENT | CS | ENT+CS | MS |
+=====+====+========+====+
| 128 |  4 |    132 | 12 |
+-----+----+--------+----+
| 160 |  5 |    165 | 15 |
+-----+----+--------+----+
| 192 |  6 |    198 | 18 |
+-----+----+--------+----+
| 224 |  7 |    231 | 21 |
+-----+----+--------+----+
| 256 |  8 |    264 | 24 |
+-----+----+--------+----+
"""

import logging
import unicodedata
from typing import List

from hdkeychain.alias import Mnemonic, Octets
from hdkeychain.bip32.bip32 import HDKey, master_key_from_seed
from hdkeychain.exceptions import HDKeychainValueError, InvalidMnemonic
from hdkeychain.hashes import pbkdf2_hmac_sha512, sha256
from hdkeychain.mnemonic.entropy import (
    WORD_COUNTS,
    bytes_entropy_from_octets,
    bytes_entropy_from_random,
    bytes_from_wordlist_indexes,
    wordlist_indexes_from_bytes,
)
from hdkeychain.mnemonic.wordlist import BITS_PER_WORD, WORD_INDEXES, WORDLIST

logger = logging.getLogger(__name__)

PBKDF2_ROUNDS = 2048
SALT_PREFIX = "mnemonic"


def mnemonic_from_entropy(entropy: Octets) -> Mnemonic:
    """Convert input entropy to BIP39 checksummed mnemonic sentence.

    Input entropy can be expressed as bytes or hex-string;
    it must be 128, 160, 192, 224, or 256 bits.
    Leading zeros are considered genuine entropy, not redundant padding.
    """

    entropy = bytes_entropy_from_octets(entropy)
    # at most 8 checksum bits: the first checksum byte is enough
    checksum = sha256(entropy)[:1]
    n_bits = len(entropy) * 8 + len(entropy) // 4
    indexes = wordlist_indexes_from_bytes(entropy + checksum, n_bits)
    return " ".join(WORDLIST[i] for i in indexes)


def mnemonic_from_random(word_count: int = 12) -> Mnemonic:
    "Return a random BIP39 mnemonic, using the system CSPRNG."

    logger.debug("generating a random %d words mnemonic", word_count)
    return mnemonic_from_entropy(bytes_entropy_from_random(word_count))


def _words_from_mnemonic(mnemonic: Mnemonic) -> List[str]:

    if not isinstance(mnemonic, str):
        err_msg = f"invalid mnemonic type: {type(mnemonic).__name__}"
        raise InvalidMnemonic(err_msg)
    return mnemonic.split()


def _wordlist_indexes_from_mnemonic(mnemonic: Mnemonic) -> List[int]:

    words = _words_from_mnemonic(mnemonic)
    if len(words) not in WORD_COUNTS:
        err_msg = f"invalid number of words: {len(words)}"
        err_msg += f" instead of {WORD_COUNTS}"
        raise InvalidMnemonic(err_msg)

    indexes = []
    for i, word in enumerate(words):
        index = WORD_INDEXES.get(word)
        if index is None:
            # no mnemonic material in error messages
            raise InvalidMnemonic(f"word #{i + 1} is not in the word-list")
        indexes.append(index)
    return indexes


def entropy_from_mnemonic(mnemonic: Mnemonic) -> bytes:
    "Return the entropy from the BIP39 checksummed mnemonic sentence."

    indexes = _wordlist_indexes_from_mnemonic(mnemonic)
    cs_entropy = bytes_from_wordlist_indexes(indexes)

    n_checksum_bits = len(indexes) // 3
    n_bytes = (len(indexes) * BITS_PER_WORD - n_checksum_bits) // 8
    # entropy is only the first part of cs_entropy,
    # the checksum bits lead the following byte
    entropy = cs_entropy[:n_bytes]
    checksum = cs_entropy[n_bytes] >> (8 - n_checksum_bits)
    if checksum != sha256(entropy)[0] >> (8 - n_checksum_bits):
        raise InvalidMnemonic("invalid checksum")

    return entropy


def is_valid_mnemonic(mnemonic: Mnemonic) -> bool:
    """Return True if the input is a valid BIP39 mnemonic sentence.

    It never raises: any invalid input, non-string included, results in False.
    """

    try:
        entropy_from_mnemonic(mnemonic)
    except HDKeychainValueError:
        return False
    return True


def seed_from_mnemonic(
    mnemonic: Mnemonic, passphrase: str = "", verify_checksum: bool = True
) -> bytes:
    """Return the 64 bytes seed from the provided BIP39 mnemonic sentence.

    Mnemonic and passphrase are NFKD normalized,
    then PBKDF2-HMAC-SHA512 stretches the mnemonic with
    "mnemonic" + passphrase as salt and 2048 iterations.

    The mnemonic checksum verification can be skipped if needed.
    """

    # clean up mnemonic from spurious whitespaces
    mnemonic = " ".join(_words_from_mnemonic(mnemonic))

    if verify_checksum:
        entropy_from_mnemonic(mnemonic)

    password = unicodedata.normalize("NFKD", mnemonic).encode()
    salt = unicodedata.normalize("NFKD", SALT_PREFIX + (passphrase or "")).encode()
    logger.debug("stretching a %d words mnemonic", len(mnemonic.split()))
    return pbkdf2_hmac_sha512(password, salt, PBKDF2_ROUNDS, 64)


def master_key_from_mnemonic(
    mnemonic: Mnemonic, passphrase: str = "", verify_checksum: bool = True
) -> HDKey:
    "Return the BIP32 master key from the BIP39 mnemonic."

    seed = seed_from_mnemonic(mnemonic, passphrase, verify_checksum)
    return master_key_from_seed(seed)
