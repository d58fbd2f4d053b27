#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Assorted conversion utilities."

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from hdkeychain.alias import Octets
from hdkeychain.exceptions import HDKeychainValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it is converted to bytes;
    integers are rejected, as bytes(n) would be n zero bytes.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)
    elif isinstance(octets, int):
        raise HDKeychainValueError(f"invalid octets type: {type(octets).__name__}")
    else:
        octets = bytes(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise HDKeychainValueError(err_msg)

