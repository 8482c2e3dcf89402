"""Command line task."""

from typer.testing import CliRunner

from eth_greeter.cli import app
from eth_greeter.signer import Signer, SignerUnavailable

runner = CliRunner()

ENV = {"JSON_RPC_URL": "tester", "PRIVATE_KEY": "", "SIGNER_INDEX": "0", "LOG_LEVEL": "warning"}


def test_deploy_greeter_task():
    result = runner.invoke(app, ["deploy:Greeter", "--greeting", "Hello world!"], env=ENV)
    assert result.exit_code == 0, result.output
    assert "Deployer address:  0x" in result.output
    assert "Deployer balance:  " in result.output
    assert "Greeter deployed to:  0x" in result.output


def test_deploy_greeter_task_needs_greeting():
    result = runner.invoke(app, ["deploy:Greeter"], env=ENV)
    assert result.exit_code != 0


def test_deploy_greeter_task_bad_signer_index():
    result = runner.invoke(app, ["deploy:Greeter", "--greeting", "Hello world!", "--signer-index", "99"], env=ENV)
    assert result.exit_code != 0
    assert isinstance(result.exception, SignerUnavailable)


def test_deploy_greeter_task_reads_balance_once(monkeypatch):
    """The printed balance is the one the deployment read."""
    calls = []
    original_get_balance = Signer.get_balance

    def _counting_get_balance(self, web3):
        balance = original_get_balance(self, web3)
        calls.append(balance)
        return balance

    monkeypatch.setattr(Signer, "get_balance", _counting_get_balance)

    result = runner.invoke(app, ["deploy:Greeter", "--greeting", "Hello world!"], env=ENV)
    assert result.exit_code == 0, result.output
    assert len(calls) == 1
    assert f"Deployer balance:  {calls[0]}" in result.output
