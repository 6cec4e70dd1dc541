#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

Including the *magic* message hash used by Bitcoin message signing:

    hash256(len(header) | header | len(msg) | msg)

where header is "Bitcoin Signed Message:\\n" and each length is a
single byte, i.e. only the short form of the Bitcoin var_int.
"""

from __future__ import annotations

import hashlib

from btcmsg.alias import Octets, String
from btcmsg.exceptions import UnsupportedLengthError
from btcmsg.utils import bytes_from_octets, bytes_from_text

MAGIC_HEADER = "Bitcoin Signed Message:\n"

# lengths from 0xfd on require the var_int long forms
_MAX_SHORT_LENGTH = 0xFC


def _ripemd160_available() -> bool:
    try:
        hashlib.new("ripemd160")
    except ValueError:  # pragma: no cover
        return False
    return True


def _load_legacy_openssl_provider() -> None:  # pragma: no cover
    # OpenSSL 3 moved ripemd160 to the legacy provider,
    # which is not loaded by default (https://bugs.python.org/issue47101)
    import ctypes
    import ctypes.util

    libssl = ctypes.CDLL(ctypes.util.find_library("ssl") or "libssl.so")
    for provider in (b"legacy", b"default"):
        libssl.OSSL_PROVIDER_load(None, provider)


if not _ripemd160_available():  # pragma: no cover
    _load_legacy_openssl_provider()


def ripemd160(octets: Octets) -> bytes:
    return hashlib.new("ripemd160", bytes_from_octets(octets)).digest()


def sha256(octets: Octets) -> bytes:
    return hashlib.sha256(bytes_from_octets(octets)).digest()


def hash160(octets: Octets) -> bytes:
    "Return RIPEMD160(SHA256(octets)), the hash of public keys in addresses."
    return ripemd160(sha256(octets))


def hash256(octets: Octets) -> bytes:
    "Return SHA256(SHA256(octets)), used for checksums and message hashes."
    return sha256(sha256(octets))


def _length_prefixed(data: bytes, what: str) -> bytes:
    if len(data) > _MAX_SHORT_LENGTH:
        err_msg = f"{what} too long: {len(data)} bytes"
        err_msg += f" instead of less than {_MAX_SHORT_LENGTH + 1}"
        raise UnsupportedLengthError(err_msg)
    return len(data).to_bytes(1, byteorder="big", signed=False) + data


def magic_message(msg: String, header: String = MAGIC_HEADER) -> bytes:
    "Return the 32-bytes hash256 digest of the length-prefixed message."

    # text is UTF-8 encoded, bytes are taken as they are
    payload = _length_prefixed(bytes_from_text(header), "header")
    payload += _length_prefixed(bytes_from_text(msg), "message")
    return hash256(payload)
