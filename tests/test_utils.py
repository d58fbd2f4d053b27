#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.utils` module."

import pytest

from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.utils import bytes_from_octets


def test_bytes_from_octets() -> None:
    hex_string = "0a0B0c0D"
    assert bytes_from_octets(hex_string) == b"\x0a\x0b\x0c\x0d"
    assert bytes_from_octets(" " + hex_string + " ") == b"\x0a\x0b\x0c\x0d"
    assert bytes_from_octets(b"\x0a\x0b") == b"\x0a\x0b"
    assert bytes_from_octets(bytearray(b"\x0a\x0b")) == b"\x0a\x0b"
    assert bytes_from_octets("") == b""

    assert bytes_from_octets(hex_string, 4) == b"\x0a\x0b\x0c\x0d"
    assert bytes_from_octets(hex_string, (2, 4)) == b"\x0a\x0b\x0c\x0d"

    err_msg = "invalid size: 4 bytes instead of 3"
    with pytest.raises(HDKeychainValueError, match=err_msg):
        bytes_from_octets(hex_string, 3)
    err_msg = "invalid size: 4 bytes instead of "
    with pytest.raises(HDKeychainValueError, match=err_msg):
        bytes_from_octets(hex_string, (1, 2, 3))

    # not an hex-string
    with pytest.raises(ValueError):
        bytes_from_octets("0g")

    # integers are not octets: bytes(16) would be 16 zero bytes
    for integer in (0, 16, 64, True):
        with pytest.raises(HDKeychainValueError, match="invalid octets type: "):
            bytes_from_octets(integer)  # type: ignore
        with pytest.raises(HDKeychainValueError, match="invalid octets type: "):
            bytes_from_octets(integer, 16)  # type: ignore
