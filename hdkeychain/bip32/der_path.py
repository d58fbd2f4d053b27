#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A BIP32 derivation path can be represented as:

- "m/44'/0'/1h/0/10" string
- sequence of integer indexes

In the string representation the first step is a lowercase "m",
then each step is a decimal number in 0..2^31-1,
optionally followed by a hardening symbol ("'", "h", or "H");
hardened indexes are represented as integers with bit 31 set.
The string representation is blank and extra-slash insensitive
(e.g. "m / 44' / 0' /1H // 0/ 10 / ").
"""

from typing import List

from hdkeychain.alias import DerPath
from hdkeychain.exceptions import MalformedPath

HARDENED = 0x80000000
_MAX_INDEX = 0xFFFFFFFF

# default hardening symbol among the possible ones: "'", "h", "H"
_HARDENING = "'"


def int_from_index_str(s: str) -> int:
    "Return the integer index from its string representation (e.g. 44')."

    s = s.strip()
    hardened = False
    if s[-1:] in ("'", "h", "H"):
        s = s[:-1].strip()
        hardened = True

    # ascii decimal digits only: no sign, no underscore
    if not (s.isascii() and s.isdigit()):
        raise MalformedPath(f"invalid index: '{s}'")
    index = int(s)
    if index >= HARDENED:
        raise MalformedPath(f"invalid index: {index}")
    return index + (HARDENED if hardened else 0)


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in ("'", "h", "H"):
        raise MalformedPath(f"invalid hardening symbol: {hardening}")
    if not 0 <= i <= _MAX_INDEX:
        raise MalformedPath(f"invalid index: {i}")
    if i < HARDENED:
        return str(i)
    return str(i - HARDENED) + hardening


def _indexes_from_der_path_str(der_path: str) -> List[int]:

    steps = [x.strip() for x in der_path.split("/")]
    if steps[0] != "m":
        raise MalformedPath(f"path must start with 'm': '{der_path}'")

    return [int_from_index_str(s) for s in steps[1:] if s != ""]


def indexes_from_der_path(der_path: DerPath) -> List[int]:
    "Return the list of integer indexes of a derivation path."

    if isinstance(der_path, str):
        return _indexes_from_der_path_str(der_path)

    indexes = list(der_path)
    for i in indexes:
        if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i <= _MAX_INDEX:
            raise MalformedPath(f"invalid index: {i!r}")
    return indexes


def str_from_der_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    "Return the normalized string representation of a derivation path."

    indexes = indexes_from_der_path(der_path)
    result = "/".join(str_from_index_int(i, hardening) for i in indexes)
    return "m/" + result if result else "m"
