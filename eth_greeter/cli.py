"""Command line tasks.

Deploy Greeter to the in-memory test chain:

.. code-block:: shell

    eth-greeter deploy:Greeter --greeting "Hello world!"

Deploy Greeter to a live network with a private key:

.. code-block:: shell

    export JSON_RPC_URL=...
    export PRIVATE_KEY=...

    eth-greeter deploy:Greeter --greeting "Hello world!"

Errors are not caught: a failed deployment prints the traceback and exits with non-zero code.
"""

import datetime
import logging
from typing import Optional

import typer

from eth_greeter.greeter import deploy_greeter
from eth_greeter.provider import TESTER_URL, create_web3
from eth_greeter.signer import Signer
from eth_greeter.utils import setup_console_logging

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.callback()
def main():
    """Greeter contract tasks."""


@app.command("deploy:Greeter")
def deploy_greeter_task(
    greeting: str = typer.Option(..., help="Say hello, be nice."),
    json_rpc_url: str = typer.Option(TESTER_URL, envvar="JSON_RPC_URL", help="JSON-RPC URL, or 'tester' for an in-memory chain"),
    private_key: Optional[str] = typer.Option(None, envvar="PRIVATE_KEY", help="Deployer private key. If not given, use an account of the node."),
    signer_index: int = typer.Option(0, envvar="SIGNER_INDEX", help="Which node account deploys"),
    timeout: float = typer.Option(120.0, envvar="CONFIRMATION_TIMEOUT", help="Seconds to wait for the deployment to confirm"),
):
    """Deploy Greeter."""
    setup_console_logging(default_log_level="info")

    web3 = create_web3(json_rpc_url)

    deployer = Signer.from_private_key(private_key) if private_key else None

    deployment = deploy_greeter(
        web3,
        greeting,
        deployer=deployer,
        signer_index=signer_index,
        max_timeout=datetime.timedelta(seconds=timeout),
    )

    typer.echo(f"Deployer address:  {deployment.deployer.address}")
    typer.echo(f"Deployer balance:  {deployment.deployer_balance}")
    typer.echo(f"Greeter deployed to:  {deployment.address}")
