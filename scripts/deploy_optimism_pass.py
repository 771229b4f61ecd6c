import sys
import traceback

from ape import project
from scripts.deployments import get_deployer, deploy_contract


def deploy_optimism_pass():
    optimism_pass = project.OptimismPass

    deployer = get_deployer()

    optimism_pass = deploy_contract(optimism_pass, deployer)

    print(f"OptimismPass deployed to: {optimism_pass.address}")

    return optimism_pass


def main():
    try:
        deploy_optimism_pass()
    except Exception:
        traceback.print_exc()
        sys.exit(1)
