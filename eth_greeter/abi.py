"""ABI loading from the precompiled bundle.

Provides functions to load ABI files and construct :py:class:`web3.contract.Contract` types.
The results are cached for the speedup.

Bundled contract artifacts live in ``eth_greeter/abi/``.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional, Type

from web3 import Web3
from web3.contract.contract import Contract

# How big are our ABI and contract caches
_CACHE_SIZE = 64


@lru_cache(maxsize=_CACHE_SIZE)
def get_abi_by_filename(fname: str | Path) -> dict | list:
    """Reads a embedded ABI file and returns it.

    Example::

        abi = get_abi_by_filename("Greeter.json")

    You are most likely interested in the keys `abi` and `bytecode` of the JSON file.

    Any results are cached.

    :param fname:
        Filename relative to the bundled ``abi`` folder,
        or an absolute path to a compiler artifact on the filesystem.

    :return:
        Full contract interface, including `bytecode`.
    """
    path = Path(fname)
    if not path.is_absolute():
        here = Path(__file__).resolve().parent
        path = here / "abi" / path

    with open(path, "rt", encoding="utf-8") as f:
        abi = json.load(f)
    return abi


@lru_cache(maxsize=_CACHE_SIZE)
def get_contract(
    web3: Web3,
    fname: str | Path,
    bytecode: Optional[str] = None,
) -> Type[Contract]:
    """Get Contract proxy class from ABI JSON file.

    - ABI file can be a solc/Hardhat/Forge compiling artifact or Etherscan copy-pasted ABI.

    `See Web3.py documentation on Contract instances <https://web3py.readthedocs.io/en/stable/web3.contract.html>`_.

    Any results are cached. Web3 connection is part of the cache key.

    Example:

    .. code-block:: python

        Greeter = get_contract(web3, "Greeter.json")
        tx_hash = Greeter.constructor("Hello world!").transact({"from": deployer})

    :param web3:
        Web3 instance

    :param fname:
        Solidity compiler artifact.

    :param bytecode:
        Override bytecode payload for the contract

    :return:
        Contract proxy class
    """

    contract_interface = get_abi_by_filename(fname)

    if type(contract_interface) == list:
        # Etherscan
        abi = contract_interface
        bytecode = None
    else:
        abi = contract_interface["abi"]

        if bytecode is None:
            bytecode = contract_interface.get("bytecode")

        if type(bytecode) == dict:
            # Forge output
            # Contains keys object, sourceMap, linkReferences
            bytecode = bytecode["object"]

    Contract = web3.eth.contract(abi=abi, bytecode=bytecode)
    return Contract
