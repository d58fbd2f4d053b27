#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Entropy functions.

Input entropy can be expressed as bytes or hex-string;
leading zeros are never considered redundant padding.

Output entropy is always bytes.

Word-list indexes are packed/unpacked with plain bit-index arithmetic
over byte buffers: the most significant bit of the first byte is bit 0,
and each word-list index is read most significant bit first.
"""

import secrets
from typing import List, Sequence

from hdkeychain.alias import Octets
from hdkeychain.exceptions import HDKeychainValueError, InvalidEntropyLength
from hdkeychain.mnemonic.wordlist import BITS_PER_WORD
from hdkeychain.utils import bytes_from_octets

ENTROPY_SIZES = 16, 20, 24, 28, 32
WORD_COUNTS = 12, 15, 18, 21, 24


def bytes_entropy_from_octets(entropy: Octets) -> bytes:
    "Return bytes entropy, ensuring it is 128, 160, 192, 224, or 256 bits."

    entropy = bytes_from_octets(entropy)
    if len(entropy) not in ENTROPY_SIZES:
        err_msg = f"invalid entropy length: {len(entropy)} bytes"
        err_msg += f" instead of {ENTROPY_SIZES}"
        raise InvalidEntropyLength(err_msg)
    return entropy


def entropy_size_from_word_count(word_count: int) -> int:
    """Return the entropy size in bytes for the given number of words.

    (word_count * 11 - checksum bits) / 8,
    with checksum bits being word_count / 3.
    """

    if word_count not in WORD_COUNTS:
        err_msg = f"invalid number of words: {word_count}"
        err_msg += f" instead of {WORD_COUNTS}"
        raise InvalidEntropyLength(err_msg)
    return (word_count * BITS_PER_WORD - word_count // 3) // 8


def bytes_entropy_from_random(word_count: int = 12) -> bytes:
    """Return entropy from the system CSPRNG.

    Entropy size is the one needed for a mnemonic of word_count words.
    """

    return secrets.token_bytes(entropy_size_from_word_count(word_count))


def _bit(data: bytes, i: int) -> int:
    return (data[i >> 3] >> (7 - (i & 7))) & 1


def wordlist_indexes_from_bytes(data: bytes, n_bits: int) -> List[int]:
    """Return the word-list indexes packed in the leftmost n_bits of data.

    n_bits must be a multiple of the bits per word (11)
    and cannot exceed the data bit length.
    """

    if n_bits % BITS_PER_WORD or n_bits > len(data) * 8:
        raise HDKeychainValueError(f"invalid number of bits: {n_bits}")

    indexes = []
    for start in range(0, n_bits, BITS_PER_WORD):
        index = 0
        for i in range(start, start + BITS_PER_WORD):
            index = (index << 1) | _bit(data, i)
        indexes.append(index)
    return indexes


def bytes_from_wordlist_indexes(indexes: Sequence[int]) -> bytes:
    """Return the bytes packing the given word-list indexes.

    The last byte is right-padded with zero bits, if needed.
    """

    n_bits = len(indexes) * BITS_PER_WORD
    data = bytearray((n_bits + 7) // 8)
    for word_number, index in enumerate(indexes):
        if not 0 <= index < 1 << BITS_PER_WORD:
            raise HDKeychainValueError(f"invalid word-list index: {index}")
        start = word_number * BITS_PER_WORD
        for j in range(BITS_PER_WORD):
            if (index >> (BITS_PER_WORD - 1 - j)) & 1:
                i = start + j
                data[i >> 3] |= 0x80 >> (i & 7)
    return bytes(data)
