#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic: inverses and square roots.

The inverse comes from the extended Euclidean algorithm;
square roots use the closed formulas available
for primes p = 3 mod 4 (as secp256k1 p) and p = 5 mod 8.
"""

from __future__ import annotations

from btcmsg.exceptions import BTCMsgValueError
from btcmsg.utils import hex_string


def _int_str(i: int) -> str:
    return f"'{hex_string(i)}'" if i > 0xFFFFFFFF else f"{i}"


def xgcd(a: int, b: int) -> tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a mod m, with m not necessarily prime."

    a %= m
    g, x, _ = xgcd(a, m)
    if g != 1:
        raise BTCMsgValueError(f"no inverse for {_int_str(a)} mod {_int_str(m)}")
    return x % m


def mod_sqrt(a: int, p: int) -> int:
    """Return r such that r^2 = a mod p, p being prime.

    p - r is the other root.
    Only p = 3 mod 4 and p = 5 mod 8 are supported.
    """

    a %= p
    if p % 4 == 3:
        r = pow(a, (p + 1) // 4, p)
    elif p % 8 == 5:
        r = pow(a, (p + 3) // 8, p)
        if r * r % p != a:
            # r^2 = -a: multiply by a square root of -1
            r = r * pow(2, (p - 1) // 4, p) % p
    else:
        raise BTCMsgValueError(f"unsupported field prime: {_int_str(p)}")

    if r * r % p != a:
        raise BTCMsgValueError(f"no root for {_int_str(a)} mod {_int_str(p)}")
    return r
