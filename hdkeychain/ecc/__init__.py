#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeychain.ecc."""

from hdkeychain.ecc.secp256k1 import N, is_valid_prv_key, pub_key_from_prv_key

__all__ = [
    "N",
    "is_valid_prv_key",
    "pub_key_from_prv_key",
]
