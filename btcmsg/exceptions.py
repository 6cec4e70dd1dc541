#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes discriminate between Exceptions being raised
by btcmsg from those raised by other codebase;
they derive from the regular ValueError, TypeError, and RuntimeError.

The specialized classes name the reason a message signature
does not verify, so that callers of btcmsg.ecc.bms.assert_as_valid
can tell them apart; btcmsg.ecc.bms.verify folds all of them into False.
"""


class BTCMsgValueError(ValueError):
    pass


class BTCMsgTypeError(TypeError):
    pass


class BTCMsgRuntimeError(RuntimeError):
    pass


class UnsupportedLengthError(BTCMsgValueError):
    "Message or header too long for a one-byte length prefix."


class DecodeError(BTCMsgValueError):
    "Malformed base64 signature."


class MalformedSignatureError(BTCMsgValueError):
    "Decoded signature shorter than 65 bytes."


class UnsupportedEncodingError(BTCMsgValueError):
    "Compressed recoverable signature."


class RecoveryFailed(BTCMsgValueError):
    "No public key can be recovered from the signature."


class AddressMismatchError(BTCMsgValueError):
    "The recovered public key does not match the claimed address."


class EncodingError(BTCMsgRuntimeError):
    "Base58Check address encoding failure."
