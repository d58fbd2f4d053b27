#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between exceptions raised by hdkeychain
and those raised by other codebase, and among the hdkeychain failure modes.

All of them derive from HDKeychainValueError, itself a ValueError:
users not interested in the failure details are usually better off
just dealing with the regular ValueError.
"""


class HDKeychainValueError(ValueError):
    pass


class InvalidEntropyLength(HDKeychainValueError):
    pass


class InvalidMnemonic(HDKeychainValueError):
    pass


class InvalidSeedLength(HDKeychainValueError):
    pass


class InvalidMasterKey(HDKeychainValueError):
    pass


class MalformedPath(HDKeychainValueError):
    pass


class UnknownNetwork(HDKeychainValueError):
    pass


class DepthOverflow(HDKeychainValueError):
    pass


class InvalidChildKey(HDKeychainValueError):
    """The derived child key is invalid (probability lower than 1 in 2^127).

    BIP32 prescribes to proceed with the next index:
    it is up to the caller, the offending one being available as *index*.
    """

    def __init__(self, msg: str, index: int) -> None:
        super().__init__(msg)
        self.index = index
