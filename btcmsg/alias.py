#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Type aliases for the input conventions of btcmsg.

Octets: bytes, or a hex-string such as "02 cc71eb30 d653c0c3";
whitespace between hex digits is ignored
(see btcmsg.utils.bytes_from_octets).
Hash digests and serialized public keys are Octets.

String: bytes, or a text string encoded with encode(),
e.g. a signed message, a base58 address, or a base64 signature.
Blanks around base64 signatures are stripped;
blanks in messages are significant and always kept.

Integer: int, 0x-prefixed hex-string, hex-string, or big-endian bytes
(see btcmsg.utils.int_from_integer).
"""

from typing import Tuple, Union

Octets = Union[bytes, str]
String = Union[bytes, str]
Integer = Union[bytes, str, int]

# affine coordinates
Point = Tuple[int, int]
# no point of a prime order group has y=0: INF is any (x, 0);
# test it with Q[1] == 0
INF = 5, 0

# Jacobian coordinates (X, Y, Z) for the affine point (X/Z^2, Y/Z^3)
JacPoint = Tuple[int, int, int]
# test it with QJ[2] == 0
INFJ = 7, 0, 0
