"""Greeter contract deployment.

Deploy the bundled ``Greeter`` contract with a greeting and read the greeting back.

Example:

.. code-block:: python

    from web3 import Web3, EthereumTesterProvider

    from eth_greeter.greeter import deploy_greeter

    web3 = Web3(EthereumTesterProvider())
    deployment = deploy_greeter(web3, "Hello world!")
    assert deployment.greet() == "Hello world!"

"""

import datetime
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from eth_typing import HexAddress
from hexbytes import HexBytes
from web3 import Web3
from web3.contract import Contract
from web3.types import TxReceipt

from eth_greeter.abi import get_contract
from eth_greeter.deploy import confirm_deployment, deploy_contract
from eth_greeter.signer import Signer, get_signers, select_signer

logger = logging.getLogger(__name__)

#: Bundled Greeter artifact
GREETER_ABI_FILE = "Greeter.json"


@dataclass(frozen=True)
class GreeterDeployment:
    """A confirmed Greeter deployment.

    Only created after the deployment receipt has been received with a success status.
    """

    #: Contract proxy bound to the deployed address
    contract: Contract

    #: Deployment transaction hash
    tx_hash: HexBytes

    #: Deployment receipt
    receipt: TxReceipt

    #: Who deployed
    deployer: Signer

    #: Constructor argument
    greeting: str

    #: Deployer balance in wei, read before the deployment was broadcasted
    deployer_balance: int

    @property
    def address(self) -> HexAddress:
        """Checksummed contract address."""
        return self.contract.address

    def greet(self) -> str:
        """Read the stored greeting from the chain."""
        return fetch_greeting(self.contract)


def fetch_greeting(contract: Contract) -> str:
    """Call ``greet()`` on a deployed Greeter."""
    return contract.functions.greet().call()


def deploy_greeter(
    web3: Web3,
    greeting: str,
    signers: Optional[Sequence[Signer]] = None,
    signer_index: int = 0,
    deployer: Optional[Signer] = None,
    max_timeout=datetime.timedelta(minutes=2),
    poll_delay=datetime.timedelta(seconds=1),
    gas: Optional[int] = None,
) -> GreeterDeployment:
    """Deploy Greeter and wait until it is confirmed.

    The greeting is passed to the constructor as is.
    Any length and character limits are left for the contract to enforce.

    Nothing is retried. Errors from the node propagate to the caller.

    :param web3:
        Web3 connection

    :param greeting:
        Constructor argument

    :param signers:
        Candidate deployer accounts.

        If not given, use the accounts of the connected node.

    :param signer_index:
        Pick this account from ``signers``. The first one by default.

    :param deployer:
        Use this account and skip the signer enumeration.

    :param max_timeout:
        How long to wait for the deployment receipt

    :param poll_delay:
        Receipt poll interval

    :param gas:
        Gas limit. Estimated by web3.py if not given.

    :raise eth_greeter.signer.SignerUnavailable:
        No account to deploy from

    :raise eth_greeter.deploy.ContractDeploymentFailed:
        The constructor reverted

    :raise eth_greeter.confirmation.ConfirmationTimedOut:
        No receipt within ``max_timeout``

    :return:
        Confirmed deployment
    """
    assert type(greeting) == str, f"Greeting must be a string, got {type(greeting)}"

    if deployer is None:
        if signers is None:
            signers = get_signers(web3)
        deployer = select_signer(signers, signer_index)

    balance = deployer.get_balance(web3)
    logger.info("Deployer address: %s", deployer.address)
    logger.info("Deployer balance: %s", balance)

    Greeter = get_contract(web3, GREETER_ABI_FILE)

    tx_hash = deploy_contract(
        web3,
        Greeter,
        deployer,
        greeting,
        gas=gas,
        confirm=False,
        contract_name="Greeter",
    )

    contract, receipt = confirm_deployment(
        web3,
        Greeter,
        tx_hash,
        contract_name="Greeter",
        constructor_args=(greeting,),
        max_timeout=max_timeout,
        poll_delay=poll_delay,
    )

    logger.info("Greeter deployed to: %s", contract.address)

    return GreeterDeployment(
        contract=contract,
        tx_hash=HexBytes(tx_hash),
        receipt=receipt,
        deployer=deployer,
        greeting=greeting,
        deployer_balance=balance,
    )
