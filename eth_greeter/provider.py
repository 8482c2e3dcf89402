"""Web3 connection set up."""

import logging

from web3 import EthereumTesterProvider, HTTPProvider, Web3

logger = logging.getLogger(__name__)

#: JSON-RPC URL value that selects the in-process test chain
TESTER_URL = "tester"


def create_web3(json_rpc_url: str, request_timeout: float = 30.0) -> Web3:
    """Create a Web3 connection.

    - ``tester`` gives an in-process, throwaway eth-tester chain with ten funded accounts,
      like Hardhat's default network

    - Anything else is treated as a HTTP JSON-RPC endpoint

    :param json_rpc_url:
        Node URL or ``tester``

    :param request_timeout:
        HTTP request timeout in seconds
    """
    assert type(json_rpc_url) == str, f"Got {type(json_rpc_url)}"
    json_rpc_url = json_rpc_url.strip()
    assert json_rpc_url, "Empty JSON-RPC URL"

    if json_rpc_url == TESTER_URL:
        logger.info("Using in-memory eth-tester chain")
        return Web3(EthereumTesterProvider())

    assert json_rpc_url.startswith(("http://", "https://")), f"Only HTTP JSON-RPC supported, got {json_rpc_url}"
    web3 = Web3(HTTPProvider(json_rpc_url, request_kwargs={"timeout": request_timeout}))
    logger.info("Connected to %s, chain id %d, last block is %d", web3.provider, web3.eth.chain_id, web3.eth.block_number)
    return web3
