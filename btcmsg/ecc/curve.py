#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and the secp256k1 Bitcoin curve.

The curve parameters are created once, at import time,
and they are never modified afterwards:
Curve instances can be safely shared among threads.
"""

from __future__ import annotations

from btcmsg.alias import Integer, Point
from btcmsg.ecc.curve_group import (
    HEX_THRESHOLD,
    CurveGroup,
    _double_mult,
    jac_from_aff,
    mult_jac,
)
from btcmsg.exceptions import BTCMsgValueError
from btcmsg.utils import hex_string, int_from_integer


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: tuple[Integer, Integer],
        n: Integer,
        name: str | None = None,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p-1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if len(G) != 2:
            raise BTCMsgValueError("generator must be a sequence[int, int]")
        self.G = int_from_integer(G[0]), int_from_integer(G[1])
        if self.G[1] == 0:
            raise BTCMsgValueError("INF point cannot be a generator")
        if not self.is_on_curve(self.G):
            raise BTCMsgValueError("generator is not on the curve")
        self.GJ = jac_from_aff(self.G)

        # 5. Check that n is prime
        n = int_from_integer(n)
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            n_str = f"'{hex_string(n)}'" if n > HEX_THRESHOLD else f"{n}"
            raise BTCMsgValueError(f"n is not prime: {n_str}")
        self.n = n
        self.n_size = (n.bit_length() + 7) // 8

        # 7. Check that nG = INF
        if mult_jac(n, self.GJ, self)[2] != 0:
            raise BTCMsgValueError("n is not the group order")

        self.name = name

    def __repr__(self) -> str:
        if self.name:
            return f"Curve({self.name})"
        return super().__repr__().replace("CurveGroup", "Curve", 1)


secp256k1 = Curve(
    "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
    0,
    7,
    (
        "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798",
        "483ADA77 26A3C465 5DA4FBFC 0E1108A8 FD17B448 A6855419 9C47D08F FB10D4B8",
    ),
    "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141",
    "secp256k1",
)

CURVES = {"secp256k1": secp256k1}


def mult(m: Integer, Q: Point | None = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication.

    The default point is the generator of the curve.
    """
    if Q is None:
        QJ = ec.GJ
    else:
        ec.require_on_curve(Q)
        QJ = jac_from_aff(Q)

    m = int_from_integer(m) % ec.n
    R = mult_jac(m, QJ, ec)
    return ec.aff_from_jac(R)


def double_mult(
    u: Integer, H: Point, v: Integer, Q: Point, ec: Curve = secp256k1
) -> Point:
    "Double scalar multiplication (u*H + v*Q)."

    ec.require_on_curve(H)
    HJ = jac_from_aff(H)

    ec.require_on_curve(Q)
    QJ = jac_from_aff(Q)

    u = int_from_integer(u) % ec.n
    v = int_from_integer(v) % ec.n
    R = _double_mult(u, HJ, v, QJ, ec)
    return ec.aff_from_jac(R)
