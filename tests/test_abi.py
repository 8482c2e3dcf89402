"""Bundled ABI files."""

import json

from web3 import Web3

from eth_greeter.abi import get_abi_by_filename, get_contract


def test_greeter_abi():
    data = get_abi_by_filename("Greeter.json")
    assert data["contractName"] == "Greeter"
    assert data["bytecode"].startswith("0x")
    names = {entry.get("name") for entry in data["abi"]}
    assert "greet" in names


def test_get_contract(web3: Web3):
    Greeter = get_contract(web3, "Greeter.json")
    assert Greeter.bytecode
    assert get_contract(web3, "Greeter.json") is Greeter


def test_etherscan_style_abi(web3: Web3, tmp_path):
    """Plain ABI list without bytecode."""
    path = tmp_path / "IGreeter.json"
    path.write_text(json.dumps(get_abi_by_filename("Greeter.json")["abi"]))
    IGreeter = get_contract(web3, path)
    assert IGreeter.bytecode is None

