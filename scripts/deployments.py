import os

from ape import accounts, networks
from ape.api.networks import LOCAL_NETWORK_NAME


class DeploymentError(Exception):
    pass


def get_deployer():
    # Account alias to sign with on live networks.
    alias = os.environ.get("DEPLOYER")

    if alias:
        return accounts.load(alias)

    if networks.provider.network.name == LOCAL_NETWORK_NAME:
        return accounts.test_accounts[0]

    raise DeploymentError(
        f"No deployer account for network '{networks.provider.network.name}', "
        "set DEPLOYER to an ape account alias"
    )


def deploy_contract(contract, deployer, *args):
    # Blocks until the creation receipt is confirmed.
    return deployer.deploy(contract, *args)
