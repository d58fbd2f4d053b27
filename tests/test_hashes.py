#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.hashes` module."

from hdkeychain.hashes import (
    hash160,
    hmac_sha256,
    hmac_sha512,
    pbkdf2_hmac_sha512,
    ripemd160,
    sha256,
)


def test_hashes() -> None:
    exp = "9c1185a5c5e9fc54612808977ee8f548b2258d31"
    assert ripemd160(b"").hex() == exp
    exp = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert sha256(b"").hex() == exp
    assert sha256("").hex() == exp

    exp = "374708fff7719dd5979ec875d56cd2286f6d3cf7ec317a3b25632aab28ec37bb"
    assert sha256(b"\x00" * 16).hex() == exp
    assert sha256("00" * 16).hex() == exp

    pub_key = "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"
    exp = "3442193e1bb70916e914552172cd4e2dbc9df811"
    assert hash160(pub_key).hex() == exp
    assert hash160(bytes.fromhex(pub_key)) == ripemd160(sha256(pub_key))


def test_hmac() -> None:
    # RFC 4231 test case 2
    key = b"Jefe"
    data = b"what do ya want for nothing?"
    exp = "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    assert hmac_sha256(key, data).hex() == exp
    exp = "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
    exp += "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"
    assert hmac_sha512(key, data).hex() == exp
    assert hmac_sha512(key, data.hex()).hex() == exp

    # BIP32 master key generation
    seed = "000102030405060708090a0b0c0d0e0f"
    hmac_ = hmac_sha512(b"Bitcoin seed", seed)
    exp = "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"
    assert hmac_[:32].hex() == exp
    exp = "873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508"
    assert hmac_[32:].hex() == exp


def test_pbkdf2_hmac_sha512() -> None:
    password = ("abandon " * 11 + "about").encode()
    seed = pbkdf2_hmac_sha512(password, b"mnemonic", 2048)
    exp = "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    exp += "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
    assert seed.hex() == exp

    assert len(pbkdf2_hmac_sha512(password, b"mnemonic", 1, 32)) == 32
    assert pbkdf2_hmac_sha512(password, b"mnemonic", 1) != seed
