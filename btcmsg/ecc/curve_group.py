#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Group of the points of a short Weierstrass curve over a prime field.

Point addition and doubling work in Jacobian coordinates,
where (X, Y, Z) stands for the affine point (X/Z^2, Y/Z^3):
no modular inversion is needed until the final conversion
back to affine coordinates.

The prime order subgroup used for signatures,
including the secp256k1 parameters, is in btcmsg.ecc.curve.
"""

from __future__ import annotations

from btcmsg.alias import INF, INFJ, Integer, JacPoint, Point
from btcmsg.ecc.number_theory import mod_inv, mod_sqrt
from btcmsg.exceptions import BTCMsgTypeError, BTCMsgValueError
from btcmsg.utils import hex_string, int_from_integer

# integers above it are printed as hex-strings in error messages
HEX_THRESHOLD = 0xFFFFFFFF


def _int_str(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def jac_from_aff(Q: Point) -> JacPoint:
    "Return the Jacobian coordinates (Z=1, or Z=0 for INF) of an affine point."
    return (Q[0], Q[1], 1) if Q[1] else INFJ


class CurveGroup:
    """Points (x, y) solving y^2 = x^3 + a*x + b over Fp, plus INF.

    p must be prime, a and b must be in [0, p-1],
    and the discriminant 4*a^3 + 27*b^2 must not vanish mod p.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # SEC 1 v.2, section 3.1.1.2.1

        p = int_from_integer(p)
        # Fermat test as probabilistic primality test
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise BTCMsgValueError(f"p is not prime: {_int_str(p)}")
        self.p = p
        self.p_size = (p.bit_length() + 7) // 8

        a = int_from_integer(a)
        b = int_from_integer(b)
        if not 0 <= a < p:
            raise BTCMsgValueError(f"a not in 0..p-1: {_int_str(a)}")
        if not 0 <= b < p:
            raise BTCMsgValueError(f"b not in 0..p-1: {_int_str(b)}")
        if (4 * pow(a, 3, p) + 27 * b * b) % p == 0:
            raise BTCMsgValueError("zero discriminant")
        self._a = a
        self._b = b

    def __repr__(self) -> str:
        return f"CurveGroup({_int_str(self.p)}, {self._a}, {self._b})"

    def negate(self, Q: Point) -> Point:
        "Return -Q; INF is its own opposite."

        if len(Q) != 2:
            raise BTCMsgTypeError("not a point")
        return Q[0], (self.p - Q[1]) % self.p

    def aff_from_jac(self, QJ: JacPoint) -> Point:
        X, Y, Z = QJ
        if Z == 0:
            return INF
        Z_inv = mod_inv(Z, self.p)
        Z2_inv = Z_inv * Z_inv
        return X * Z2_inv % self.p, Y * Z2_inv * Z_inv % self.p

    def double_jac(self, QJ: JacPoint) -> JacPoint:
        X, Y, Z = QJ
        if Z == 0:
            return INFJ
        p = self.p
        YY = Y * Y % p
        S = 4 * X * YY % p
        ZZ = Z * Z % p
        M = (3 * X * X + self._a * ZZ * ZZ) % p
        X3 = (M * M - 2 * S) % p
        Y3 = (M * (S - X3) - 8 * YY * YY) % p
        Z3 = 2 * Y * Z % p
        return X3, Y3, Z3

    def add_jac(self, QJ: JacPoint, RJ: JacPoint) -> JacPoint:
        if QJ[2] == 0:
            return RJ
        if RJ[2] == 0:
            return QJ

        p = self.p
        X1, Y1, Z1 = QJ
        X2, Y2, Z2 = RJ
        Z1Z1 = Z1 * Z1 % p
        Z2Z2 = Z2 * Z2 % p
        U1 = X1 * Z2Z2 % p
        U2 = X2 * Z1Z1 % p
        S1 = Y1 * Z2 * Z2Z2 % p
        S2 = Y2 * Z1 * Z1Z1 % p

        H = (U2 - U1) % p
        R = (S2 - S1) % p
        if H == 0:
            # same x: either Q == R or Q == -R
            return self.double_jac(QJ) if R == 0 else INFJ

        HH = H * H % p
        HHH = H * HH % p
        V = U1 * HH % p
        X3 = (R * R - HHH - 2 * V) % p
        Y3 = (R * (V - X3) - S1 * HHH) % p
        Z3 = H * Z1 * Z2 % p
        return X3, Y3, Z3

    def _y2(self, x: int) -> int:
        # x^3 + a*x + b, not necessarily a square
        return (pow(x, 3, self.p) + self._a * x + self._b) % self.p

    def y(self, x: int) -> int:
        "Return one of the two y-coordinates of the points with abscissa x."

        if not 0 <= x < self.p:
            raise BTCMsgValueError(f"x-coordinate not in 0..p-1: {_int_str(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except BTCMsgValueError as e:
            raise BTCMsgValueError(f"invalid x-coordinate: {_int_str(x)}") from e

    def y_even(self, x: int) -> int:
        "Return the even y-coordinate of the points with abscissa x."
        y = self.y(x)
        return y if y % 2 == 0 else self.p - y

    def is_on_curve(self, Q: Point) -> bool:
        if len(Q) != 2:
            raise BTCMsgValueError("point must be a tuple[int, int]")
        x, y = Q
        if y == 0:
            return True
        if not 0 < y < self.p:
            raise BTCMsgValueError(f"y-coordinate not in 1..p-1: {_int_str(y)}")
        if not 0 <= x < self.p:
            raise BTCMsgValueError(f"x-coordinate not in 0..p-1: {_int_str(x)}")
        return y * y % self.p == self._y2(x)

    def require_on_curve(self, Q: Point) -> None:
        if not self.is_on_curve(Q):
            raise BTCMsgValueError("point not on curve")


def mult_jac(m: int, QJ: JacPoint, ec: CurveGroup) -> JacPoint:
    """Return m*Q, using left-to-right 'double & add'.

    Q is assumed to be on the curve; if the group has order n,
    m should have been already reduced mod n.
    """

    if m < 0:
        raise BTCMsgValueError(f"negative m: {hex(m)}")

    R = INFJ
    for bit in bin(m)[2:]:
        R = ec.double_jac(R)
        if bit == "1":
            R = ec.add_jac(R, QJ)
    return R


def _double_mult(
    u: int, HJ: JacPoint, v: int, QJ: JacPoint, ec: CurveGroup
) -> JacPoint:
    """Return u*H + v*Q with the Shamir-Strauss trick.

    A single 'double & add' loop scans the bits of u and v together,
    adding H, Q, or the precomputed H+Q at each step:
    the doublings are shared between the two multiplications.

    H and Q are assumed to be on the curve; if the group has order n,
    u and v should have been already reduced mod n.
    """

    if u < 0:
        raise BTCMsgValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise BTCMsgValueError(f"negative second coefficient: {hex(v)}")

    # indexed by u_bit + 2 * v_bit
    addends = (INFJ, HJ, QJ, ec.add_jac(HJ, QJ))
    R = INFJ
    for i in reversed(range(max(u.bit_length(), v.bit_length()))):
        R = ec.double_jac(R)
        addend = addends[(u >> i & 1) + 2 * (v >> i & 1)]
        if addend[2]:
            R = ec.add_jac(R, addend)
    return R
