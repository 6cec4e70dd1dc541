#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA) public key recovery.

Given the (r, s) signature of a message hash, the public key that
produced it can be recovered up to a small ambiguity:
r is the x-coordinate (mod n) of the ephemeral point K,
so K is one of the (at most four) curve points with
x-coordinate r or r + n and either y-parity.
The key_id in [0, 3] selects among them: bit 1 adds n to r,
bit 0 picks the odd y-coordinate.

Then, with e being the message hash as integer,
Q = r^-1 * (s*K - e*G).

Implementation according to SEC 1 v.2 section 4.1.6:

http://www.secg.org/sec1-v2.pdf

Signatures are not required to be in the bitcoin canonical 'lower-s'
form: both s and n - s are accepted, as they recover the same
public key with opposite key_id parity.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass

from btcmsg.alias import Octets, Point
from btcmsg.ecc.arithmetic import SECP256K1_ARITHMETIC, CurveArithmetic
from btcmsg.ecc.curve import Curve, secp256k1
from btcmsg.exceptions import BTCMsgValueError, RecoveryFailed
from btcmsg.utils import bytes_from_octets, hex_string


@dataclass(frozen=True)
class Sig:
    """ECDSA (r, s) signature.

    Both r and s must fit in the curve n_size bytes;
    no further range check is performed, as any out of range value
    is bound to fail public key recovery anyway.
    """

    # 32 bytes scalar
    r: int
    # 32 bytes scalar
    s: int
    ec: Curve = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        max_bit_length = self.ec.n_size * 8
        for name, scalar in (("r", self.r), ("s", self.s)):
            if scalar < 0 or scalar.bit_length() > max_bit_length:
                err_msg = f"{name} not in 0..2^{max_bit_length}-1: "
                err_msg += f"'{hex_string(scalar)}'" if scalar >= 0 else f"{scalar}"
                raise BTCMsgValueError(err_msg)


def recover_pub_key(
    key_id: int,
    msg_hash: Octets,
    sig: Sig,
    arithmetic: CurveArithmetic = SECP256K1_ARITHMETIC,
) -> Point:
    """ECDSA public key recovery (SEC 1 v.2 section 4.1.6).

    Return the public key identified by key_id in [0, 3].
    RecoveryFailed is raised if there is no such public key.

    See also:
    - https://crypto.stackexchange.com/questions/18105/how-does-recovering-the-public-key-from-an-ecdsa-signature-work/18106#18106
    """

    if not 0 <= key_id < 4:
        raise BTCMsgValueError(f"invalid key_id: {key_id}")
    sig.assert_valid()
    ec = arithmetic.ec

    # The message hash: a n_size array
    msg_hash = bytes_from_octets(msg_hash, ec.n_size)
    e = int.from_bytes(msg_hash, byteorder="big", signed=False)

    x_K = sig.r
    if key_id & 0b10:
        x_K += ec.n
        if x_K >= ec.p:
            raise RecoveryFailed(f"x-coordinate not in 0..p-1: '{hex_string(x_K)}'")

    try:
        K = arithmetic.point_from_x(x_K % ec.p, bool(key_id & 0b01))  # 1.1-1.4
        r_1 = arithmetic.mod_inverse(sig.r, ec.n)
    except BTCMsgValueError as err:
        raise RecoveryFailed(str(err)) from err

    u1 = ec.n - (r_1 * e % ec.n)  # 1.5
    u2 = r_1 * sig.s % ec.n
    Q = arithmetic.scalar_multiply_and_add(u1, ec.G, u2, K)  # 1.6.1
    if Q[1] == 0:
        raise RecoveryFailed("recovered infinity point")
    return Q


def recover_pub_keys(
    msg_hash: Octets,
    sig: Sig,
    arithmetic: CurveArithmetic = SECP256K1_ARITHMETIC,
) -> list[tuple[int, Point]]:
    "Return all the (key_id, public key) pairs recoverable from a signature."

    pub_keys = []
    for key_id in range(4):
        try:
            Q = recover_pub_key(key_id, msg_hash, sig, arithmetic)
        except RecoveryFailed:
            continue
        pub_keys.append((key_id, Q))
    return pub_keys
