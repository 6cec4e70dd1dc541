#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC 1 v.2 public key encoding (section 2.3.3) and decoding (2.3.4).

Compressed keys are 0x02 or 0x03 (even or odd y) followed by x;
uncompressed keys are 0x04 followed by x and y;
coordinates are p_size big-endian bytes.
"""

from btcmsg.alias import Octets, Point
from btcmsg.ecc.curve import Curve, secp256k1
from btcmsg.exceptions import BTCMsgValueError
from btcmsg.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: Point, ec: Curve = secp256k1, compressed: bool = True) -> bytes:
    "Return the SEC encoding of a curve point."

    ec.require_on_curve(Q)
    if Q[1] == 0:
        raise BTCMsgValueError("no bytes representation for infinity point")

    x, y = (c.to_bytes(ec.p_size, byteorder="big", signed=False) for c in Q)
    if compressed:
        return bytes([0x02 + (Q[1] & 1)]) + x
    return b"\x04" + x + y


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    "Return the curve point of a SEC encoded public key."

    compressed_size = ec.p_size + 1
    uncompressed_size = 2 * ec.p_size + 1
    pub_key = bytes_from_octets(pub_key, (compressed_size, uncompressed_size))
    prefix, data = pub_key[0], pub_key[1:]

    if prefix in (0x02, 0x03):
        if len(pub_key) != compressed_size:
            err_msg = "invalid size for compressed point: "
            err_msg += f"{len(pub_key)} instead of {compressed_size}"
            raise BTCMsgValueError(err_msg)
        x = int.from_bytes(data, byteorder="big", signed=False)
        try:
            y = ec.y_even(x)
        except BTCMsgValueError as e:
            raise BTCMsgValueError(f"invalid x-coordinate: '{hex_string(x)}'") from e
        return x, y if prefix == 0x02 else ec.p - y

    if prefix == 0x04:
        if len(pub_key) != uncompressed_size:
            err_msg = "invalid size for uncompressed point: "
            err_msg += f"{len(pub_key)} instead of {uncompressed_size}"
            raise BTCMsgValueError(err_msg)
        Q = (
            int.from_bytes(data[: ec.p_size], byteorder="big", signed=False),
            int.from_bytes(data[ec.p_size :], byteorder="big", signed=False),
        )
        if Q[1] == 0:
            raise BTCMsgValueError("no bytes representation for infinity point")
        if not ec.is_on_curve(Q):
            raise BTCMsgValueError(f"point not on curve: {Q}")
        return Q

    raise BTCMsgValueError(f"not a point: {pub_key!r}")
