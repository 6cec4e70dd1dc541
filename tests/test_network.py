#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcmsg.network` module."

import json
from os import path

import pytest

from btcmsg.ecc.curve import secp256k1
from btcmsg.exceptions import BTCMsgValueError
from btcmsg.network import NETWORKS, Network, network_from_key_value


def test_networks() -> None:
    assert set(NETWORKS) == {"mainnet", "testnet", "regtest"}
    for network in NETWORKS.values():
        assert network.curve == secp256k1
        network.assert_valid()

    assert NETWORKS["mainnet"].p2pkh == b"\x00"
    assert NETWORKS["mainnet"].p2sh == b"\x05"
    assert NETWORKS["testnet"].p2pkh == b"\x6f"
    assert NETWORKS["testnet"].p2sh == b"\xc4"
    assert NETWORKS["regtest"] == NETWORKS["testnet"]


def test_data_files() -> None:
    datadir = path.join(path.dirname(__file__), "..", "btcmsg", "_data")
    for net, network in NETWORKS.items():
        filename = path.join(datadir, net + ".json")
        with open(filename, "r", encoding="ascii") as file_:
            assert network.to_dict() == json.load(file_)


def test_dict_round_trip() -> None:
    mainnet = NETWORKS["mainnet"]
    dict_ = mainnet.to_dict()
    assert dict_ == {"curve": "secp256k1", "p2pkh": "00", "p2sh": "05"}
    assert Network.from_dict(dict_) == mainnet
    assert Network(secp256k1, b"\x00", "05") == mainnet


def test_network_from_key_value() -> None:
    assert network_from_key_value("p2pkh", b"\x00") == "mainnet"
    assert network_from_key_value("p2sh", b"\x05") == "mainnet"
    # regtest shares the testnet prefixes
    assert network_from_key_value("p2pkh", b"\x6f") == "testnet"
    assert network_from_key_value("p2sh", b"\xc4") == "testnet"
    assert network_from_key_value("p2pkh", b"\x05") is None
    assert network_from_key_value("curve", secp256k1) == "mainnet"


def test_exceptions() -> None:
    with pytest.raises(BTCMsgValueError, match="invalid p2pkh length: "):
        Network(secp256k1, "0000", "05")
    with pytest.raises(BTCMsgValueError, match="invalid p2sh length: "):
        Network(secp256k1, "00", "")

    network = Network(secp256k1, "0000", "05", check_validity=False)
    with pytest.raises(BTCMsgValueError, match="invalid p2pkh length: "):
        network.to_dict()
    assert network.to_dict(check_validity=False)["p2pkh"] == "0000"

    dict_ = {"curve": "secp256r1", "p2pkh": "00", "p2sh": "05"}
    with pytest.raises(BTCMsgValueError, match="invalid network data: "):
        Network.from_dict(dict_)
    with pytest.raises(BTCMsgValueError, match="invalid network data: "):
        Network.from_dict({"p2pkh": "00", "p2sh": "05"})
