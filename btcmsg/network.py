#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions.

Network parameters are loaded at import time from the
btcmsg/_data/<network>.json files.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import path
from typing import Any, Mapping

from btcmsg.alias import Octets
from btcmsg.ecc.curve import CURVES, Curve
from btcmsg.exceptions import BTCMsgValueError
from btcmsg.utils import bytes_from_octets

# base58 version prefixes are single bytes
_PREFIX_KEYS = ("p2pkh", "p2sh")
_PREFIX_SIZE = 1


@dataclass(frozen=True)
class Network:
    curve: Curve

    # base58 address starts with '1' on mainnet
    p2pkh: bytes
    # base58 address starts with '3' on mainnet
    p2sh: bytes

    def __init__(
        self,
        curve: Curve,
        p2pkh: Octets,
        p2sh: Octets,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "curve", curve)
        object.__setattr__(self, "p2pkh", bytes_from_octets(p2pkh))
        object.__setattr__(self, "p2sh", bytes_from_octets(p2sh))

        if check_validity:
            self.assert_valid()

    def to_dict(self, check_validity: bool = True) -> dict[str, str | None]:

        if check_validity:
            self.assert_valid()

        return {
            "curve": self.curve.name,
            "p2pkh": self.p2pkh.hex(),
            "p2sh": self.p2sh.hex(),
        }

    @classmethod
    def from_dict(
        cls: type[Network], dict_: Mapping[str, Any], check_validity: bool = True
    ) -> Network:

        try:
            curve = CURVES[dict_["curve"]]
        except KeyError as e:
            raise BTCMsgValueError(f"invalid network data: {e}") from e

        return cls(curve, dict_["p2pkh"], dict_["p2sh"], check_validity)

    def assert_valid(self) -> None:

        for key in _PREFIX_KEYS:
            size = len(getattr(self, key))
            if size != _PREFIX_SIZE:
                err_msg = f"invalid {key} length: {size} bytes instead of {_PREFIX_SIZE}"
                raise BTCMsgValueError(err_msg)


_DATADIR = path.join(path.dirname(__file__), "_data")


def _load_network(name: str) -> Network:
    with open(path.join(_DATADIR, f"{name}.json"), "r", encoding="ascii") as file_:
        return Network.from_dict(json.load(file_))


NETWORKS: dict[str, Network] = {
    name: _load_network(name) for name in ("mainnet", "testnet", "regtest")
}


def network_from_key_value(key: str, prefix: bytes | Curve) -> str | None:
    """Return the name of the first network whose key attribute equals prefix.

    regtest shares its prefixes with testnet, which comes first:
    a regtest prefix is reported as testnet.
    """
    for network, params in NETWORKS.items():
        if getattr(params, key) == prefix:
            return network
    return None
