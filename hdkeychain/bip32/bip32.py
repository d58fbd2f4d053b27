#!/usr/bin/env python3

# Copyright (C) The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet functions.

A deterministic wallet is a hash-chain of private/public key pairs that
derives from a single root, which is the only element requiring backup.

A hierarchical deterministic wallet is a tree of multiple hash-chains,
derived from a single root, allowing for selective sharing of keypair
chains.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki.

Each tree node is an HDKey:

- private key (32 bytes)
- chain code (32 bytes)
- depth in the derivation path (0 for the master key, at most 255)
- index used to derive the key from its parent (0 for the master key)
- parent fingerprint (4 bytes, all zeros for the master key)

Derivation only goes forward: each step returns a new HDKey,
the parent being left untouched.
"""

import logging
from dataclasses import InitVar, dataclass, field
from functools import cached_property

from dataclasses_json import DataClassJsonMixin, config

from hdkeychain.alias import DerPath, Octets
from hdkeychain.bip32.der_path import HARDENED, indexes_from_der_path
from hdkeychain.ecc.secp256k1 import N, is_valid_prv_key, pub_key_from_prv_key
from hdkeychain.exceptions import (
    DepthOverflow,
    HDKeychainValueError,
    InvalidChildKey,
    InvalidMasterKey,
    InvalidSeedLength,
    MalformedPath,
)
from hdkeychain.hashes import hash160, hmac_sha512
from hdkeychain.utils import bytes_from_octets

logger = logging.getLogger(__name__)

MAX_DEPTH = 255
SEED_SIZE = 64
_MASTER_HMAC_KEY = b"Bitcoin seed"
_ZERO_FINGERPRINT = b"\x00" * 4


def _hex_field(**kwargs):
    return field(
        metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex),
        **kwargs,
    )


@dataclass(frozen=True)
class HDKey(DataClassJsonMixin):
    # private material stays out of repr
    private_key: bytes = _hex_field(repr=False)
    chain_code: bytes = _hex_field(repr=False)
    depth: int = 0
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int = 0
    parent_fingerprint: bytes = _hex_field(default=_ZERO_FINGERPRINT)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        for key in ("private_key", "chain_code", "parent_fingerprint"):
            object.__setattr__(self, key, bytes_from_octets(getattr(self, key)))
        if check_validity:
            self.assert_valid()

    @cached_property
    def public_key(self) -> bytes:
        "Return the 33 bytes compressed public key."
        return pub_key_from_prv_key(self.private_key)

    @property
    def fingerprint(self) -> bytes:
        "Return the first 4 bytes of hash160(public key)."
        return hash160(self.public_key)[:4]

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == _ZERO_FINGERPRINT
        )

    @property
    def private_key_hex(self) -> str:
        return self.private_key.hex()

    @property
    def chain_code_hex(self) -> str:
        return self.chain_code.hex()

    @property
    def public_key_hex(self) -> str:
        return self.public_key.hex()

    def assert_valid(self) -> None:

        for key, size in (
            ("private_key", 32),
            ("chain_code", 32),
            ("parent_fingerprint", 4),
        ):
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise HDKeychainValueError(err_msg)

        if not 0 <= self.index <= 0xFFFFFFFF:
            raise HDKeychainValueError(f"invalid index: {self.index}")

        if not 0 <= self.depth <= MAX_DEPTH:
            raise HDKeychainValueError(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != _ZERO_FINGERPRINT:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise HDKeychainValueError(err_msg)
            if self.index != 0:
                err_msg = f"zero depth with non-zero index: {self.index}"
                raise HDKeychainValueError(err_msg)

        if not is_valid_prv_key(self.private_key):
            raise HDKeychainValueError("invalid private key not in 1..n-1")


def master_key_from_seed(seed: Octets) -> HDKey:
    """Return the BIP32 master key from a 64 bytes seed.

    HMAC-SHA512 keyed with "Bitcoin seed":
    the left half is the private key, the right half is the chain code.
    """

    seed = bytes_from_octets(seed)
    if len(seed) != SEED_SIZE:
        err_msg = f"invalid seed length: {len(seed)} bytes"
        err_msg += f" instead of {SEED_SIZE}"
        raise InvalidSeedLength(err_msg)

    hmac_ = hmac_sha512(_MASTER_HMAC_KEY, seed)
    if not is_valid_prv_key(hmac_[:32]):
        raise InvalidMasterKey("invalid master key: the seed must be discarded")

    return HDKey(private_key=hmac_[:32], chain_code=hmac_[32:])


def derive_child(parent: HDKey, index: int) -> HDKey:
    """Child Key Derivation (CKD) from a private parent key.

    Indexes with bit 31 set (i.e. >= 0x80000000) use hardened derivation,
    i.e. the parent private key enters the HMAC;
    otherwise normal derivation uses the parent compressed public key.
    """

    if isinstance(index, bool) or not isinstance(index, int):
        raise MalformedPath(f"invalid index: {index!r}")
    if not 0 <= index <= 0xFFFFFFFF:
        raise MalformedPath(f"invalid index: {index!r}")
    if parent.depth >= MAX_DEPTH:
        raise DepthOverflow(f"depth greater than {MAX_DEPTH}: {parent.depth + 1}")

    index_bytes = index.to_bytes(4, byteorder="big", signed=False)
    if index >= HARDENED:  # hardened derivation
        data = b"\x00" + parent.private_key + index_bytes
    else:  # normal derivation
        data = parent.public_key + index_bytes
    hmac_ = hmac_sha512(parent.chain_code, data)

    offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    q = int.from_bytes(parent.private_key, byteorder="big", signed=False)
    q = (q + offset) % N
    if offset >= N or q == 0:
        logger.debug("invalid child key at index %d", index)
        err_msg = f"invalid child key at index {index}: use the next one"
        raise InvalidChildKey(err_msg, index)

    return HDKey(
        private_key=q.to_bytes(32, byteorder="big", signed=False),
        chain_code=hmac_[32:],
        depth=parent.depth + 1,
        index=index,
        parent_fingerprint=parent.fingerprint,
    )


def derive(key: HDKey, der_path: DerPath) -> HDKey:
    """Derive an HDKey across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/44'/0h/1H/0/10"
    - iterable integer indexes

    The path is relative to the input key.
    Any failure aborts the whole derivation.
    """

    indexes = indexes_from_der_path(der_path)

    final_depth = key.depth + len(indexes)
    if final_depth > MAX_DEPTH:
        raise DepthOverflow(f"final depth greater than {MAX_DEPTH}: {final_depth}")

    logger.debug("deriving %d levels from depth %d", len(indexes), key.depth)
    for index in indexes:
        key = derive_child(key, index)
    return key


def derive_path(seed: Octets, der_path: DerPath) -> HDKey:
    "Derive an HDKey from the master key of the seed, along the path."

    indexes = indexes_from_der_path(der_path)
    return derive(master_key_from_seed(seed), indexes)
