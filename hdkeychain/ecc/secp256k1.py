#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""secp256k1 helper functions, using the libsecp256k1 python bindings.

Point multiplication is delegated to libsecp256k1 (through coincurve):
there is no elliptic curve arithmetic in this package.
"""

from typing import Union

from coincurve import PublicKey

from hdkeychain.alias import Octets
from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.utils import bytes_from_octets

# group order
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def is_valid_prv_key(prv_key: Union[Octets, int]) -> bool:
    "Return True if the private key is a scalar in 1..n-1."

    if not isinstance(prv_key, int):
        prv_key = int.from_bytes(bytes_from_octets(prv_key, 32), "big")
    return 0 < prv_key < N


def pub_key_from_prv_key(prv_key: Union[Octets, int], compressed: bool = True) -> bytes:
    """Return the SEC 1 public key q*G of the private key q.

    The 33 bytes compressed encoding is returned by default,
    the 65 bytes uncompressed one upon request.
    """

    if not is_valid_prv_key(prv_key):
        raise HDKeychainValueError("private key not in 1..n-1")
    prv_key = (
        prv_key.to_bytes(32, "big")
        if isinstance(prv_key, int)
        else bytes_from_octets(prv_key, 32)
    )
    return PublicKey.from_valid_secret(prv_key).format(compressed=compressed)
