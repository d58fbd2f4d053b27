#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.mnemonic.bip39` module."

import json
import secrets
from os import path

import pytest

from hdkeychain.bip32 import master_key_from_seed
from hdkeychain.exceptions import (
    HDKeychainValueError,
    InvalidEntropyLength,
    InvalidMnemonic,
)
from hdkeychain.mnemonic import bip39
from hdkeychain.mnemonic.wordlist import WORD_INDEXES, WORDLIST

ABOUT = "abandon " * 11 + "about"


def test_bip39() -> None:
    mnem = "abandon abandon atom trust ankle walnut oil across awake bunker divorce abstract"

    raw_entr = bytes.fromhex("0000003974d093eda670121023cd0000")
    mnemonic = bip39.mnemonic_from_entropy(raw_entr)
    assert mnemonic == mnem
    assert bip39.entropy_from_mnemonic(mnemonic) == raw_entr
    # hex-string entropy
    assert bip39.mnemonic_from_entropy(raw_entr.hex()) == mnem

    wrong_mnemonic = mnemonic + " abandon"
    err_msg = "invalid number of words: 13"
    with pytest.raises(InvalidMnemonic, match=err_msg):
        bip39.entropy_from_mnemonic(wrong_mnemonic)

    err_msg = "invalid checksum"
    with pytest.raises(InvalidMnemonic, match=err_msg):
        wr_m = "abandon abandon atom trust ankle walnut oil across awake bunker divorce oil"
        bip39.entropy_from_mnemonic(wr_m)

    err_msg = "word #3 is not in the word-list"
    with pytest.raises(InvalidMnemonic, match=err_msg):
        wr_m = "abandon abandon atomic trust ankle walnut oil across awake bunker divorce abstract"
        bip39.entropy_from_mnemonic(wr_m)


def test_vectors() -> None:
    """BIP39 test vectors

    https://github.com/trezor/python-mnemonic/blob/master/vectors.json
    """
    fname = "bip39_test_vectors.json"
    filename = path.join(path.dirname(__file__), "_data", fname)
    with open(filename, "r", encoding="ascii") as file_:
        bip39_test_vectors = json.load(file_)["english"]

    for entr, mnemonic, seed in bip39_test_vectors:
        entropy = bytes.fromhex(entr)
        assert mnemonic == bip39.mnemonic_from_entropy(entropy)
        assert bip39.is_valid_mnemonic(mnemonic)
        assert seed == bip39.seed_from_mnemonic(mnemonic, "TREZOR").hex()
        assert entropy == bip39.entropy_from_mnemonic(mnemonic)


def test_all_zero_entropy() -> None:
    assert bip39.mnemonic_from_entropy(b"\x00" * 16) == ABOUT
    assert bip39.mnemonic_from_entropy(b"\x00" * 32).split()[-1] == "art"


def test_invalid_entropy_length() -> None:
    for size in (0, 4, 12, 15, 17, 30, 33, 64):
        with pytest.raises(InvalidEntropyLength, match="invalid entropy length: "):
            bip39.mnemonic_from_entropy(b"\x00" * size)

    # integer entropy is not silently turned into zero bytes
    for entropy in (16, 32):
        with pytest.raises(HDKeychainValueError, match="invalid octets type: int"):
            bip39.mnemonic_from_entropy(entropy)  # type: ignore


def test_round_trip() -> None:
    for size in (16, 20, 24, 28, 32):
        for _ in range(8):
            entropy = secrets.token_bytes(size)
            mnemonic = bip39.mnemonic_from_entropy(entropy)
            assert len(mnemonic.split()) == size * 3 // 4
            assert bip39.is_valid_mnemonic(mnemonic)
            assert bip39.entropy_from_mnemonic(mnemonic) == entropy


def test_mnemonic_from_random() -> None:
    # default is 12 words
    assert len(bip39.mnemonic_from_random().split()) == 12
    for word_count in (12, 15, 18, 21, 24):
        mnemonic = bip39.mnemonic_from_random(word_count)
        assert len(mnemonic.split()) == word_count
        assert bip39.is_valid_mnemonic(mnemonic)

    # CSPRNG
    assert bip39.mnemonic_from_random(24) != bip39.mnemonic_from_random(24)

    for word_count in (0, 11, 13, 25, 27):
        with pytest.raises(InvalidEntropyLength, match="invalid number of words: "):
            bip39.mnemonic_from_random(word_count)


def test_is_valid_mnemonic() -> None:
    assert bip39.is_valid_mnemonic(ABOUT)
    # spurious whitespaces are not a problem
    assert bip39.is_valid_mnemonic("  " + ABOUT.replace(" ", " \t ") + "\n")

    invalid_mnemonics = [
        "",
        "abandon",
        # right number of bits, wrong number of words
        "abandon " * 12 + "about",
        "abandon " * 10 + "about",
        # wrong checksum
        "abandon " * 11 + "abandon",
        "abandon " * 23 + "about",
        # words not in the word-list
        "abandon " * 11 + "abou",
        "Abandon " * 11 + "about",
        "abandon " * 11 + "zzzz",
    ]
    for mnemonic in invalid_mnemonics:
        assert not bip39.is_valid_mnemonic(mnemonic)

    # it never raises
    assert not bip39.is_valid_mnemonic(None)  # type: ignore
    assert not bip39.is_valid_mnemonic(12)  # type: ignore
    assert not bip39.is_valid_mnemonic(ABOUT.encode())  # type: ignore


def test_checksum_sensitivity() -> None:
    """Flipping any checksum bit must invalidate the mnemonic.

    The checksum bits are the least significant ones of the last word:
    4 bits for 12 words, 8 bits for 24 words.
    """

    for word_count in (12, 15, 18, 21, 24):
        for mnemonic in (ABOUT, bip39.mnemonic_from_random(word_count)):
            words = mnemonic.split()
            if len(words) != word_count:
                continue
            last_index = WORD_INDEXES[words[-1]]
            for bit in range(word_count // 3):
                words[-1] = WORDLIST[last_index ^ (1 << bit)]
                assert not bip39.is_valid_mnemonic(" ".join(words))


def test_seed_from_mnemonic() -> None:
    seed = bip39.seed_from_mnemonic(ABOUT)
    assert len(seed) == 64
    exp = "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    exp += "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
    assert seed.hex() == exp
    # deterministic
    assert seed == bip39.seed_from_mnemonic(ABOUT, "")
    # None passphrase is the empty one
    assert seed == bip39.seed_from_mnemonic(ABOUT, None)  # type: ignore
    # spurious whitespaces are removed
    assert seed == bip39.seed_from_mnemonic(" " + ABOUT.replace(" ", "  ") + " ")
    # the passphrase matters
    assert seed != bip39.seed_from_mnemonic(ABOUT, "TREZOR")

    with pytest.raises(InvalidMnemonic, match="invalid checksum"):
        bip39.seed_from_mnemonic("abandon " * 12)
    # unless checksum verification is skipped
    seed = bip39.seed_from_mnemonic("abandon " * 12, verify_checksum=False)
    assert len(seed) == 64


def test_passphrase_normalization() -> None:
    # NFC and NFKD forms of the same passphrase
    nfc = "caf\u00e9"
    nfkd = "cafe\u0301"
    assert nfc != nfkd
    assert bip39.seed_from_mnemonic(ABOUT, nfc) == bip39.seed_from_mnemonic(ABOUT, nfkd)


def test_master_key_from_mnemonic() -> None:
    key = bip39.master_key_from_mnemonic(ABOUT)
    assert key == master_key_from_seed(bip39.seed_from_mnemonic(ABOUT))
    assert key.is_root

    with pytest.raises(HDKeychainValueError):
        bip39.master_key_from_mnemonic("abandon " * 12)


def test_non_string_mnemonic() -> None:
    err_msg = "invalid mnemonic type: "
    for mnemonic in (None, 12, ABOUT.encode(), ABOUT.split()):
        with pytest.raises(InvalidMnemonic, match=err_msg):
            bip39.seed_from_mnemonic(mnemonic)  # type: ignore
        with pytest.raises(InvalidMnemonic, match=err_msg):
            bip39.seed_from_mnemonic(mnemonic, verify_checksum=False)  # type: ignore
        with pytest.raises(InvalidMnemonic, match=err_msg):
            bip39.entropy_from_mnemonic(mnemonic)  # type: ignore
        with pytest.raises(InvalidMnemonic, match=err_msg):
            bip39.master_key_from_mnemonic(mnemonic)  # type: ignore
        assert not bip39.is_valid_mnemonic(mnemonic)  # type: ignore
