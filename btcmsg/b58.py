#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58 address functions.

Base58Check encoding of public key hashes as P2PKH addresses:

    base58(version | hash160(pub_key) | hash256(version | hash160)[:4])
"""

from __future__ import annotations

from btcmsg.alias import Octets, Point, String
from btcmsg.base58 import b58decode, b58encode
from btcmsg.ecc.sec_point import bytes_from_point
from btcmsg.exceptions import BTCMsgValueError, EncodingError
from btcmsg.hashes import hash160
from btcmsg.network import NETWORKS, network_from_key_value
from btcmsg.utils import bytes_from_octets

_SCRIPT_TYPES = ("p2pkh", "p2sh")


def address_from_payload(version: Octets, h160: Octets) -> str:
    "Return the base58 address of the 1-byte version and the 20-bytes hash."

    try:
        payload = bytes_from_octets(version, 1) + bytes_from_octets(h160, 20)
        return b58encode(payload, 21).decode("ascii")
    except BTCMsgValueError as e:
        raise EncodingError(f"invalid address payload: {e}") from e


def address_from_h160(script_type: str, h160: Octets, network: str = "mainnet") -> str:
    "Return a base58 address from the payload."

    if script_type not in _SCRIPT_TYPES:
        raise BTCMsgValueError(f"invalid script type: {script_type}")
    if network not in NETWORKS:
        raise BTCMsgValueError(f"unknown network: {network}")

    prefix = getattr(NETWORKS[network], script_type)
    return address_from_payload(prefix, h160)


def h160_from_address(b58addr: String) -> tuple[str, bytes, str]:
    "Return the (script type, payload, network) tuple from a base58 address."

    if isinstance(b58addr, str):
        b58addr = b58addr.strip()
    payload = b58decode(b58addr, 21)
    prefix = payload[:1]

    for script_type in _SCRIPT_TYPES:
        network = network_from_key_value(script_type, prefix)
        if network:
            return script_type, payload[1:], network

    raise BTCMsgValueError(f"invalid base58 address prefix: 0x{prefix.hex()}")


def p2pkh(
    pub_key: Point | Octets, network: str = "mainnet", compressed: bool = True
) -> str:
    """Return the p2pkh base58 address corresponding to a public key.

    The public key is either a curve point, serialized
    as compressed or uncompressed SEC octets,
    or an already serialized SEC public key
    (in this case compressed is ignored).
    """

    if network not in NETWORKS:
        raise BTCMsgValueError(f"unknown network: {network}")

    if isinstance(pub_key, tuple):
        pub_key = bytes_from_point(pub_key, NETWORKS[network].curve, compressed)
    else:
        pub_key = bytes_from_octets(pub_key, (33, 65))

    return address_from_h160("p2pkh", hash160(pub_key), network)
