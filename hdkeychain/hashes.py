#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

All functions are pure: bytes (or hex-string Octets) in, bytes out.
"""

import hashlib
import hmac

from hdkeychain.alias import Octets
from hdkeychain.utils import bytes_from_octets

# see https://bugs.python.org/issue47101
# With OpenSSL 3.x, hashlib still includes ripemd160
# but it is not usable unless the legacy provider is loaded.
try:
    hashlib.new("ripemd160")
    _HASHLIB_RIPEMD160 = True
except ValueError:  # pragma: no cover
    from Crypto.Hash import RIPEMD160

    _HASHLIB_RIPEMD160 = False


def ripemd160(octets: Octets) -> bytes:
    """Return the RIPEMD160(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    if _HASHLIB_RIPEMD160:
        return hashlib.new("ripemd160", octets).digest()
    return RIPEMD160.new(octets).digest()  # pragma: no cover


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash160(octets: Octets) -> bytes:
    """Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."""
    return ripemd160(sha256(octets))


def hmac_sha256(key: bytes, octets: Octets) -> bytes:
    octets = bytes_from_octets(octets)
    return hmac.new(key, octets, "sha256").digest()


def hmac_sha512(key: bytes, octets: Octets) -> bytes:
    octets = bytes_from_octets(octets)
    return hmac.new(key, octets, "sha512").digest()


def pbkdf2_hmac_sha512(
    password: bytes, salt: bytes, iterations: int, dksize: int = 64
) -> bytes:
    """Return the PBKDF2 key stretching of password, with HMAC-SHA512 as PRF."""
    return hashlib.pbkdf2_hmac("sha512", password, salt, iterations, dksize)
