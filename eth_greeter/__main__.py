"""Allow ``python -m eth_greeter``."""

from eth_greeter.cli import app

app(prog_name="eth-greeter")
