#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the btcmsg package."

from btcmsg.ecc.bms import verify_message

name = "btcmsg"
__version__ = "2024.10.1"
__author__ = "The btcmsg developers"
__author_email__ = "devs@btcmsg.org"
__copyright__ = "Copyright (C) 2024 The btcmsg developers"
__license__ = "MIT License"

__all__ = ["verify_message"]
