"""Deployer account selection."""

import pytest
from eth_account import Account
from web3 import Web3

from eth_greeter.signer import Signer, SignerUnavailable, get_signers, select_signer


def test_get_signers(web3: Web3):
    signers = get_signers(web3)
    assert len(signers) == len(web3.eth.accounts)
    assert [s.address for s in signers] == list(web3.eth.accounts)
    assert not any(s.is_local() for s in signers)


def test_select_first_signer(signers: list[Signer]):
    assert select_signer(signers) == signers[0]


def test_select_signer_by_index(signers: list[Signer]):
    assert select_signer(signers, 3) == signers[3]


def test_select_signer_empty():
    with pytest.raises(SignerUnavailable):
        select_signer([])


@pytest.mark.parametrize("index", [-1, 10_000])
def test_select_signer_out_of_range(signers: list[Signer], index: int):
    with pytest.raises(SignerUnavailable):
        select_signer(signers, index)


def test_signer_balance(web3: Web3, deployer: Signer):
    assert deployer.get_balance(web3) == web3.eth.get_balance(deployer.address)
    assert deployer.get_balance(web3) > 0


def test_signer_from_private_key():
    key = "0x54c137e27d2930f7b3433249c5f07b37ddcfea70871c0a4ef9e0f65655faf957"
    signer = Signer.from_private_key(key)
    assert signer.is_local()
    assert signer.address == Account.from_key(key).address
    assert "local" in repr(signer)


def test_signer_from_private_key_needs_prefix():
    with pytest.raises(AssertionError):
        Signer.from_private_key("54c137e27d2930f7b3433249c5f07b37ddcfea70871c0a4ef9e0f65655faf957")
