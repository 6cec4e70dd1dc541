#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve arithmetic capability used by public key recovery.

Public key recovery (see btcmsg.ecc.dsa) only needs a handful of
operations: modular inversion, the double scalar multiplication
u1*P1 + u2*P2, point decompression from the x-coordinate,
and SEC point serialization.
They are collected in the CurveArithmetic protocol, so that
the recovery algorithm does not depend on the backing implementation.

PurePythonArithmetic is the implementation provided by btcmsg,
backed by the btcmsg.ecc.curve module;
SECP256K1_ARITHMETIC is its (read-only) secp256k1 instance.
"""

from __future__ import annotations

from typing import Protocol

from btcmsg.alias import Point
from btcmsg.ecc.curve import Curve, secp256k1
from btcmsg.ecc.curve_group import _double_mult, jac_from_aff
from btcmsg.ecc.number_theory import mod_inv
from btcmsg.ecc.sec_point import bytes_from_point


class CurveArithmetic(Protocol):
    "Elliptic curve operations required by public key recovery."

    ec: Curve

    def mod_inverse(self, a: int, m: int) -> int:
        ...

    def scalar_multiply_and_add(self, u1: int, P1: Point, u2: int, P2: Point) -> Point:
        ...

    def point_from_x(self, x: int, odd: bool) -> Point:
        ...

    def serialize_point(self, Q: Point, compressed: bool) -> bytes:
        ...


class PurePythonArithmetic:
    """Curve arithmetic in pure python.

    Scalar multiplication uses Jacobian coordinates and
    always performs the 'add' step of the 'double & add' loop;
    it is not hardened against side-channel attacks,
    which is not an issue when only public data
    (signatures and public keys) are involved.

    Instances hold no mutable state.
    """

    def __init__(self, ec: Curve = secp256k1) -> None:
        self.ec = ec

    def __repr__(self) -> str:
        return f"PurePythonArithmetic({self.ec!r})"

    def mod_inverse(self, a: int, m: int) -> int:
        return mod_inv(a, m)

    def scalar_multiply_and_add(self, u1: int, P1: Point, u2: int, P2: Point) -> Point:
        "Return u1*P1 + u2*P2, possibly the infinity point."

        # reduction mod n is also required to handle negative coefficients
        R = _double_mult(
            u1 % self.ec.n, jac_from_aff(P1), u2 % self.ec.n, jac_from_aff(P2), self.ec
        )
        return self.ec.aff_from_jac(R)

    def point_from_x(self, x: int, odd: bool) -> Point:
        "Return the curve point with the given x-coordinate and y-parity."

        y_even = self.ec.y_even(x)
        return x, self.ec.p - y_even if odd else y_even

    def serialize_point(self, Q: Point, compressed: bool) -> bytes:
        return bytes_from_point(Q, self.ec, compressed)


SECP256K1_ARITHMETIC: CurveArithmetic = PurePythonArithmetic(secp256k1)
