"""Deploy any bundled contract.

See ``eth_greeter/abi`` for available contracts.
"""

import datetime
import logging
from pathlib import Path
from typing import Type, Union

from hexbytes import HexBytes
from web3 import Web3
from web3.contract import Contract
from web3.types import TxReceipt

from eth_greeter.abi import get_contract
from eth_greeter.confirmation import wait_transaction_to_complete
from eth_greeter.signer import Signer

logger = logging.getLogger(__name__)


class ContractDeploymentFailed(Exception):
    """Did not get successful tx receipt from a deployment."""

    def __init__(self, tx_hash, msg):
        super().__init__(msg)
        self.tx_hash = tx_hash


def deploy_contract(
    web3: Web3,
    contract: Union[str, Path, Type[Contract]],
    deployer: Signer,
    *constructor_args,
    gas: int = None,
    confirm=True,
    contract_name: str = None,
    max_timeout=datetime.timedelta(minutes=2),
    poll_delay=datetime.timedelta(seconds=1),
) -> Contract | HexBytes:
    """Deploys a new contract from ABI file.

    A generic helper function to deploy any contract.

    Example:

    .. code-block:: python

        greeter = deploy_contract(web3, "Greeter.json", deployer, "Hello world!")
        print(f"Deployed Greeter at {greeter.address}")

    :param web3:
        Web3 instance

    :param contract:
        Contract file path as string or contract proxy class

    :param deployer:
        Deployer account.

        Node-managed accounts go through ``eth_sendTransaction``,
        local accounts are signed here and broadcasted as raw bytes.

    :param constructor_args:
        Other arguments to pass to the contract's constructor

    :param gas:
        Gas limit.

        If not set web3.py estimates it and probably hits reverts when doing so.

    :param confirm:
        Wait for the deployment receipt.

    :param contract_name:
        Name used in logs and errors.

        Defaults to the ABI filename stem when deploying by filename.

    :param max_timeout:
        How long to wait for the receipt

    :param poll_delay:
        Receipt poll interval

    :raise ContractDeploymentFailed:
        The deployment transaction was mined, but reverted.

    :raise eth_greeter.confirmation.ConfirmationTimedOut:
        No receipt within ``max_timeout``.

    :return:
        Contract proxy instance or tx_hash if confirm=false.
    """
    assert isinstance(deployer, Signer), f"Expected Signer, got {type(deployer)}"

    if isinstance(contract, (str, Path)):
        Contract = get_contract(web3, contract)
        if contract_name is None:
            contract_name = Path(contract).stem
    else:
        Contract = contract

    if deployer.is_local():
        # Sign locally
        nonce = web3.eth.get_transaction_count(deployer.address)
        tx_params = {
            "from": deployer.address,
            "nonce": nonce,
            "chainId": web3.eth.chain_id,
        }
        if gas:
            tx_params["gas"] = gas
        tx_data = Contract.constructor(*constructor_args).build_transaction(tx_params)

        signed_tx = deployer.account.sign_transaction(tx_data)
        tx_hash = web3.eth.send_raw_transaction(signed_tx.raw_transaction)
    else:
        # Delegate signing to the node
        tx_params = {"from": deployer.address}
        if gas:
            tx_params["gas"] = gas
        tx_hash = Contract.constructor(*constructor_args).transact(tx_params)

    logger.info("Broadcasted %s deployment from %s, tx hash %s", contract_name, deployer.address, tx_hash.hex())

    if not confirm:
        return tx_hash

    instance, tx_receipt = confirm_deployment(
        web3,
        Contract,
        tx_hash,
        contract_name=contract_name,
        constructor_args=constructor_args,
        max_timeout=max_timeout,
        poll_delay=poll_delay,
    )
    return instance


def confirm_deployment(
    web3: Web3,
    Contract: Type[Contract],
    tx_hash: HexBytes,
    contract_name: str = None,
    constructor_args: tuple = (),
    max_timeout=datetime.timedelta(minutes=2),
    poll_delay=datetime.timedelta(seconds=1),
) -> tuple[Contract, TxReceipt]:
    """Wait for a broadcasted deployment and bind the contract proxy to the new address.

    The contract proxy is only created after a successful receipt.

    :param Contract:
        Contract proxy class used in the deployment

    :param tx_hash:
        Deployment transaction hash, from :py:func:`deploy_contract` with ``confirm=False``

    :raise ContractDeploymentFailed:
        The deployment transaction reverted.

    :return:
        Tuple (contract instance, receipt)
    """
    tx_receipt = wait_transaction_to_complete(web3, tx_hash, max_timeout=max_timeout, poll_delay=poll_delay)
    if tx_receipt["status"] != 1:
        raise ContractDeploymentFailed(tx_hash, f"Contract {contract_name} deployment failed with args {constructor_args}, tx hash is {tx_hash.hex()}")

    instance = Contract(address=tx_receipt["contractAddress"])
    logger.info("Contract %s deployed at %s", contract_name, instance.address)
    return instance, tx_receipt
