#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcmsg.ecc.curve` module."

import pytest

from btcmsg.alias import INF
from btcmsg.ecc.curve import CURVES, Curve, double_mult, mult, secp256k1
from btcmsg.exceptions import BTCMsgValueError

# a small curve of prime order 7
ec23 = Curve(11, 2, 7, (6, 9), 7)


def test_exceptions() -> None:
    with pytest.raises(BTCMsgValueError, match="generator must be a sequence"):
        Curve(11, 2, 7, (6, 9, 1), 7)  # type: ignore
    with pytest.raises(BTCMsgValueError, match="INF point cannot be a generator"):
        Curve(11, 2, 7, INF, 7)
    with pytest.raises(BTCMsgValueError, match="generator is not on the curve"):
        Curve(11, 2, 7, (7, 9), 7)
    with pytest.raises(BTCMsgValueError, match="n is not prime: "):
        Curve(11, 2, 7, (6, 9), 8)
    with pytest.raises(BTCMsgValueError, match="n is not the group order"):
        Curve(11, 2, 7, (6, 9), 13)
    with pytest.raises(BTCMsgValueError, match="p is not prime: "):
        Curve(15, 2, 7, (6, 9), 7)


def test_secp256k1() -> None:
    ec = secp256k1
    assert CURVES["secp256k1"] is ec
    assert ec.name == "secp256k1"
    assert repr(ec) == "Curve(secp256k1)"
    assert ec.p == 2**256 - 2**32 - 977
    assert ec.n == 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    assert ec.G == (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    )
    assert ec.p_size == 32
    assert ec.n_size == 32

    assert repr(ec23) == "Curve(11, 2, 7)"


def test_mult() -> None:
    for ec in (secp256k1, ec23):
        assert mult(0, ec.G, ec) == INF
        assert mult(1, ec.G, ec) == ec.G
        assert mult(ec.n, ec.G, ec) == INF
        assert mult(ec.n - 1, ec.G, ec) == ec.negate(ec.G)
        assert mult(ec.n + 1, ec.G, ec) == ec.G

    # generator as default point
    assert mult(1) == secp256k1.G
    assert mult("01") == secp256k1.G

    Q = mult(2)
    assert Q[0] == 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5
    assert mult(3, Q) == mult(6)

    # the whole small group
    points = {mult(i, ec23.G, ec23) for i in range(ec23.n)}
    assert len(points) == ec23.n
    assert all(ec23.is_on_curve(P) for P in points)

    with pytest.raises(BTCMsgValueError, match="point not on curve"):
        mult(1, (secp256k1.G[0], secp256k1.G[1] + 1))


def test_double_mult() -> None:
    q = 0xD0E8D7C1
    Q = mult(q)
    for u, v in ((0, 0), (1, 0), (0, 1), (7, 11), (secp256k1.n - 1, 5)):
        assert double_mult(u, secp256k1.G, v, Q) == mult(u + v * q)

    # negative coefficients are reduced mod n
    assert double_mult(-1, secp256k1.G, 1, Q) == mult(q - 1)

    assert double_mult(1, ec23.G, 1, ec23.G, ec23) == mult(2, ec23.G, ec23)

    with pytest.raises(BTCMsgValueError, match="point not on curve"):
        double_mult(1, (secp256k1.G[0], secp256k1.G[1] + 1), 1, Q)
