#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Conversions between the input conventions documented in btcmsg.alias."""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from btcmsg.alias import Integer, Octets, String
from btcmsg.exceptions import BTCMsgValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from bytes or from a hex-string.

    Whitespace in hex-strings is ignored.
    If out_size is given, either as a single size or
    as a collection of allowed sizes, the result must match it.
    """

    if isinstance(octets, str):
        octets = bytes.fromhex(octets)

    if out_size is None:
        return octets
    if isinstance(out_size, IterableCollection):
        if len(octets) in out_size:
            return octets
    elif len(octets) == out_size:
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise BTCMsgValueError(err_msg)


def bytes_from_text(text: String) -> bytes:
    """Return the UTF-8 encoding of a text string.

    Bytes go untouched; no stripping is performed,
    as blanks are significant in signed messages.
    """
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def int_from_integer(i: Integer) -> int:
    """Return an int from an int, a hex-string, or big-endian bytes.

    Hex-strings are either 0x-prefixed or made of whitespace
    separated byte pairs, e.g. "0xdeadbeef" or "DEAD BEEF".
    """

    if isinstance(i, int):
        return i
    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x"):
            return int(i, 16)
        i = bytes.fromhex(i)
    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the upper case hex-string of a non-negative integer.

    The hex-string has an even number of digits,
    grouped by eight (i.e. four bytes) from the right:
    e.g. 'DE ADBEEF01'.
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise BTCMsgValueError(f"negative integer: {int_}")
    digits = f"{int_:X}"
    if len(digits) % 2:
        digits = "0" + digits
    head = len(digits) % 8
    groups = [digits[:head]] if head else []
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)
