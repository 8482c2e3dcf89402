"""Deployer accounts.

- Enumerate the accounts the connected node can sign for

- Wrap a private key into a locally signing account

- Pick the deployer explicitly by index instead of relying on a global default

"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_typing import HexAddress
from web3 import Web3

logger = logging.getLogger(__name__)


class SignerUnavailable(Exception):
    """There is no account to deploy from."""


@dataclass(slots=True, frozen=True)
class Signer:
    """An account capable of authorising transactions.

    - Node-managed account when :py:attr:`account` is ``None``.
      The node holds the key and signs ``eth_sendTransaction`` payloads,
      like eth-tester, Anvil or Hardhat dev nodes do.

    - Local account when :py:attr:`account` is set.
      Transactions are signed in the process memory and broadcasted
      with ``eth_sendRawTransaction``.
    """

    #: Checksummed address
    address: HexAddress

    #: Private key holder, if we sign locally
    account: Optional[LocalAccount] = None

    def __post_init__(self):
        assert type(self.address) == str, f"Got {type(self.address)}"
        assert self.address.startswith("0x"), f"Not an address: {self.address}"

    def __repr__(self):
        kind = "local" if self.is_local() else "node"
        return f"<Signer {self.address} {kind}>"

    def is_local(self) -> bool:
        """Do we sign transactions ourselves."""
        return self.account is not None

    def get_balance(self, web3: Web3) -> int:
        """Get the native currency balance of this account in wei."""
        return web3.eth.get_balance(self.address)

    @staticmethod
    def from_private_key(key: str) -> "Signer":
        """Create a locally signing account from a private key passed in as a hex string.

        Example:

        .. code-block::

            # Generated with  openssl rand -hex 32
            signer = Signer.from_private_key("0x54c137e27d2930f7b3433249c5f07b37ddcfea70871c0a4ef9e0f65655faf957")

        :param key:
            0x prefixed hex string
        """
        assert type(key) == str, f"Expected private key as string, got {type(key)}"
        assert key.startswith("0x"), f"This system assumes private keys are prefixed with 0x, your key starts with {key[0:8]}... Please add 0x prefix to your private key hex string"
        account = Account.from_key(key)
        return Signer.from_account(account)

    @staticmethod
    def from_account(account: LocalAccount) -> "Signer":
        """Wrap an existing :py:class:`LocalAccount`."""
        assert isinstance(account, LocalAccount), f"Got {type(account)}"
        return Signer(address=Web3.to_checksum_address(account.address), account=account)


def get_signers(web3: Web3) -> list[Signer]:
    """List the accounts the connected node can sign for.

    The order is the node's ``eth_accounts`` order.
    Public RPC providers return an empty list.
    """
    accounts = web3.eth.accounts
    logger.debug("Node reports %d accounts", len(accounts))
    return [Signer(address=Web3.to_checksum_address(a)) for a in accounts]


def select_signer(signers: Sequence[Signer], signer_index: int = 0) -> Signer:
    """Pick a deployer from an enumerated account list.

    :param signers:
        Candidate accounts, e.g. from :py:func:`get_signers`

    :param signer_index:
        Which account to use. Zero is the first enumerated account.

    :raise SignerUnavailable:
        The list is empty or the index is out of range.
    """
    assert type(signer_index) == int, f"Got {type(signer_index)}"

    if len(signers) == 0:
        raise SignerUnavailable("No signers available: the chain client did not return any accounts and no private key was given")

    if not (0 <= signer_index < len(signers)):
        raise SignerUnavailable(f"Signer index {signer_index} out of range, we have {len(signers)} signers")

    return signers[signer_index]
