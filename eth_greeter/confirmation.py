"""Transaction block confirmation and completion monitoring."""

import datetime
import logging
import time

from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import TransactionNotFound
from web3.types import TxReceipt

logger = logging.getLogger(__name__)


class ConfirmationTimedOut(Exception):
    """We exceeded the transaction confirmation timeout."""


def wait_transaction_to_complete(
    web3: Web3,
    tx_hash: HexBytes | str,
    max_timeout=datetime.timedelta(minutes=2),
    poll_delay=datetime.timedelta(seconds=1),
) -> TxReceipt:
    """Wait until a transaction has a receipt.

    Use simple poll loop. One confirmation, the block containing the transaction,
    is enough.

    The receipt is returned whatever its status is. Check ``receipt["status"]``
    to see if the transaction reverted.

    Example:

    .. code-block:: python

        tx_hash = web3.eth.send_raw_transaction(raw_bytes)
        receipt = wait_transaction_to_complete(web3, tx_hash, max_timeout=datetime.timedelta(seconds=30))
        assert receipt["status"] == 1

    :param tx_hash:
        Transaction hash

    :param max_timeout:
        How long we wait before giving up

    :param poll_delay:
        Sleep between receipt polls

    :raise ConfirmationTimedOut:
        No receipt within ``max_timeout``

    :return:
        Transaction receipt
    """

    assert isinstance(poll_delay, datetime.timedelta)
    assert isinstance(max_timeout, datetime.timedelta)

    tx_hash = HexBytes(tx_hash)

    logger.info("Waiting transaction %s to confirm, timeout is %s", tx_hash.hex(), max_timeout)

    started_at = time.monotonic()
    deadline = started_at + max_timeout.total_seconds()

    while True:
        try:
            receipt = web3.eth.get_transaction_receipt(tx_hash)
        except TransactionNotFound as e:
            logger.debug("Transaction not found yet: %s", e)
            receipt = None

        if receipt:
            logger.info("Confirmed tx %s in block %d", tx_hash.hex(), receipt["blockNumber"])
            return receipt

        if time.monotonic() >= deadline:
            raise ConfirmationTimedOut(f"Transaction confirmation failed. Timed out after {max_timeout} ({max_timeout.total_seconds()}s). Poll delay: {poll_delay.total_seconds()}s. Still unconfirmed: {tx_hash.hex()}")

        time.sleep(poll_delay.total_seconds())
