#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module btcmsg.ecc."""

from btcmsg.ecc.arithmetic import (
    SECP256K1_ARITHMETIC,
    CurveArithmetic,
    PurePythonArithmetic,
)
from btcmsg.ecc.curve import Curve, double_mult, mult, secp256k1
from btcmsg.ecc.curve_group import CurveGroup, jac_from_aff, mult_jac
from btcmsg.ecc.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "SECP256K1_ARITHMETIC",
    "CurveArithmetic",
    "PurePythonArithmetic",
    "Curve",
    "double_mult",
    "mult",
    "secp256k1",
    "CurveGroup",
    "jac_from_aff",
    "mult_jac",
    "bytes_from_point",
    "point_from_octets",
]
