"""Shared fixtures: a fresh in-memory chain per test."""

import secrets

import pytest
from eth_account import Account
from web3 import EthereumTesterProvider, Web3

from eth_greeter.signer import Signer, get_signers


@pytest.fixture
def tester_provider():
    # https://web3py.readthedocs.io/en/stable/providers.html#ethereumtesterprovider
    return EthereumTesterProvider()


@pytest.fixture
def eth_tester(tester_provider):
    return tester_provider.ethereum_tester


@pytest.fixture
def web3(tester_provider):
    """Set up a local unit testing blockchain."""
    return Web3(tester_provider)


@pytest.fixture()
def signers(web3) -> list[Signer]:
    """Prefunded eth-tester accounts."""
    return get_signers(web3)


@pytest.fixture()
def deployer(signers) -> Signer:
    """Deploy account.

    Do some account allocation for tests.
    """
    return signers[0]


@pytest.fixture()
def hot_wallet(web3, deployer) -> Signer:
    """A locally signing account with some ETH on it."""
    account = Account.from_key(secrets.token_bytes(32))
    signer = Signer.from_account(account)
    web3.eth.send_transaction({"from": deployer.address, "to": signer.address, "value": 10**18})
    return signer
