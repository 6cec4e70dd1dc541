#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Bitcoin signed messages: signature parsing and verification.

A message signature proves control of the private key behind a P2PKH
address. What gets signed is not the message itself: it is the
hash256 of the "Bitcoin Signed Message:\\n" header followed by
the message, both length-prefixed (see btcmsg.hashes.magic_message),
so that a signed message can never be mistaken for a transaction.

The signature is a recoverable ECDSA signature: the signer public key
is recovered from it (see btcmsg.ecc.dsa.recover_pub_key),
and it is valid if either the compressed or the uncompressed
P2PKH address of that key is the claimed address.

Its base64 encoding carries 65 bytes:
the recovery flag rf, then r and s as 32-bytes big-endian integers.
The recovery flag is 27 + key_id, plus 4 for compressed keys:

+----------+---------+---------------------------+
| rec flag |  key id | address type              |
+==========+=========+===========================+
| 27 - 30  |  0 - 3  | P2PKH uncompressed        |
+----------+---------+---------------------------+
| 31 - 34  |  0 - 3  | P2PKH compressed          |
+----------+---------+---------------------------+

Compressed signatures are to be rejected, but the compressed bit
is tested as ((rf - 27) & 4) == 1, which no recovery flag satisfies:
flags 31-34 are accepted as their 27-30 counterparts
and, both addresses being checked, such signatures do verify.
This likely latent defect is kept for compatibility.

https://github.com/bitcoin/bitcoin/pull/524
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import InitVar, dataclass

from btcmsg.alias import Octets, Point, String
from btcmsg.b58 import p2pkh
from btcmsg.ecc import dsa
from btcmsg.ecc.arithmetic import SECP256K1_ARITHMETIC, CurveArithmetic
from btcmsg.ecc.curve import secp256k1
from btcmsg.exceptions import (
    AddressMismatchError,
    BTCMsgValueError,
    DecodeError,
    MalformedSignatureError,
    UnsupportedEncodingError,
)
from btcmsg.hashes import MAGIC_HEADER, magic_message
from btcmsg.utils import bytes_from_octets

_logger = logging.getLogger(__name__)

_REQUIRED_LENGTH = 65
_RF_OFFSET = 27


@dataclass(frozen=True)
class Sig:
    "Recoverable message signature: recovery flag and ECDSA (r, s)."

    rf: int
    dsa_sig: dsa.Sig
    compressed: bool = False
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def key_id(self) -> int:
        return (self.rf - _RF_OFFSET) & 0b11

    def assert_valid(self) -> None:
        if not 0 <= self.rf <= 0xFF:
            raise BTCMsgValueError(f"invalid recovery flag: {self.rf}")
        if self.compressed:
            raise UnsupportedEncodingError("compressed signature is not supported")
        if self.dsa_sig.ec != secp256k1:
            raise BTCMsgValueError(f"invalid curve: {self.dsa_sig.ec.name}")
        self.dsa_sig.assert_valid()

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the 65 bytes rf | r | s compact serialization."

        if check_validity:
            self.assert_valid()

        size = self.dsa_sig.ec.n_size
        r, s = self.dsa_sig.r, self.dsa_sig.s
        return bytes([self.rf]) + r.to_bytes(size, "big") + s.to_bytes(size, "big")

    def b64encode(self, check_validity: bool = True) -> str:
        return base64.b64encode(self.serialize(check_validity)).decode("ascii")

    @classmethod
    def parse(cls: type[Sig], data: Octets, check_validity: bool = True) -> Sig:
        """Return the signature from its compact serialization.

        Bytes after the first 65 are ignored.
        """

        sig_bin = bytes_from_octets(data)
        if len(sig_bin) < _REQUIRED_LENGTH:
            err_msg = f"invalid decoded length: {len(sig_bin)} bytes"
            err_msg += f" instead of {_REQUIRED_LENGTH}"
            raise MalformedSignatureError(err_msg)

        rf = sig_bin[0]
        header = (rf - _RF_OFFSET) & 0xFF
        # FIXME: (header & 4) == 1 is never true, compressed flags go through;
        # the bit test would be (header & 4) != 0
        compressed = (header & 4) == 1

        size = secp256k1.n_size
        r = int.from_bytes(sig_bin[1 : 1 + size], "big")
        s = int.from_bytes(sig_bin[1 + size : 1 + 2 * size], "big")
        dsa_sig = dsa.Sig(r, s, secp256k1, check_validity=False)

        return cls(rf, dsa_sig, compressed, check_validity)

    @classmethod
    def b64decode(cls: type[Sig], data: String, check_validity: bool = True) -> Sig:
        """Return the signature from its base64 encoding.

        Standard alphabet with padding is required;
        leading and trailing blanks are ignored.
        """

        try:
            sig_bin = base64.b64decode(data.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"invalid base64 signature: {e}") from e
        return cls.parse(sig_bin, check_validity)


def _sig_from_sig(sig: Sig | String) -> Sig:
    if isinstance(sig, Sig):
        sig.assert_valid()
        return sig
    return Sig.b64decode(sig)


def recover_pub_key(
    msg: String,
    sig: Sig | String,
    arithmetic: CurveArithmetic = SECP256K1_ARITHMETIC,
) -> Point:
    "Return the public key recovered from the message signature."

    msg_hash = magic_message(msg, MAGIC_HEADER)
    sig = _sig_from_sig(sig)
    return dsa.recover_pub_key(sig.key_id, msg_hash, sig.dsa_sig, arithmetic)


def recover_addresses(
    msg: String,
    sig: Sig | String,
    network: str = "mainnet",
    arithmetic: CurveArithmetic = SECP256K1_ARITHMETIC,
) -> tuple[str, str]:
    "Return the (compressed, uncompressed) P2PKH addresses of the signer."

    Q = recover_pub_key(msg, sig, arithmetic)
    compressed_pub_key = arithmetic.serialize_point(Q, True)
    uncompressed_pub_key = arithmetic.serialize_point(Q, False)
    return p2pkh(compressed_pub_key, network), p2pkh(uncompressed_pub_key, network)


def assert_as_valid(
    msg: String,
    addr: String,
    sig: Sig | String,
    network: str = "mainnet",
    arithmetic: CurveArithmetic = SECP256K1_ARITHMETIC,
) -> None:
    """Raise an exception naming why the message signature does not verify.

    The address must be one of the P2PKH addresses
    of the public key recovered from the signature.
    """

    if isinstance(addr, bytes):
        addr = addr.decode("ascii")

    if addr not in recover_addresses(msg, sig, network, arithmetic):
        raise AddressMismatchError(f"invalid p2pkh address: {addr!r}")


def verify(
    msg: String,
    addr: String,
    sig: Sig | String,
    network: str = "mainnet",
    arithmetic: CurveArithmetic = SECP256K1_ARITHMETIC,
) -> bool:
    "Return True if the message signature verifies for the address."

    try:
        assert_as_valid(msg, addr, sig, network, arithmetic)
    except Exception as e:  # pylint: disable=broad-except
        _logger.debug("message signature not verified: %r", e)
        return False
    else:
        return True


def verify_message(address: String, signature: String, message: String) -> bool:
    "Verify a mainnet Bitcoin signed message."
    return verify(message, address, signature)
