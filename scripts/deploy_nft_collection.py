"""Deploy the guitar NFT collection.

Run with ``brownie run scripts/deploy_nft_collection.py --network <name>``.
The deployer account and source verification are read from the active
network's section of ``brownie-config.yaml`` (``deployer`` and ``verify``).
"""

import enum
import traceback
from typing import List, NamedTuple, Optional, Tuple

from brownie import config, network

from scripts.errors import ConfirmationError, DeploymentError, SubmissionError
from scripts.utils import abort, get_contract_factory, get_signer, is_live, warn

CONTRACT_NAME = "MyNFTCollection"


class DeploymentParameters(NamedTuple):
    name: str
    symbol: str
    metadata_uris: Tuple[str, ...]

    def constructor_args(self) -> Tuple[str, str, List[str]]:
        return self.name, self.symbol, list(self.metadata_uris)


# index i holds the metadata of token i + 1
DEFAULT_PARAMETERS = DeploymentParameters(
    name="Guitar NFT Collection",
    symbol="YSBGT",
    metadata_uris=(
        "ipfs://bafkreihfaimpkvpkxwxtg7qspifflmzslc2yat3q6tm57d3egoygullhqe",
        "ipfs://bafkreifv4d2jhhfw767ffskqaq3otu4virknudq2okbmzp4hky6wni7veu",
        "ipfs://bafkreib4npnzsmbwle24dorc3mcr73jrcxckb6dt4miue36fixcv5iseja",
        "ipfs://bafkreie3fariiezbistghudqbmjgtwtlsllbknbxe3rlkn7lzd2xmy6ivm",
    ),
)


class DeploymentResult(NamedTuple):
    address: str
    txid: str


class DeploymentConfig(NamedTuple):
    contract_name: str = CONTRACT_NAME
    account_id: Optional[str] = None
    required_confs: int = 1
    publish_source: bool = False

    @classmethod
    def from_network(cls) -> "DeploymentConfig":
        network_config = config["networks"].get(network.show_active(), {})
        return cls(
            account_id=network_config.get("deployer"),
            publish_source=bool(network_config.get("verify", False)) and is_live(),
        )


class DeploymentState(enum.Enum):
    NOT_STARTED = "not_started"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    DEPLOYED = "deployed"
    FAILED = "failed"


class Deployer:
    def __init__(
        self,
        config: DeploymentConfig,
        signer_provider=None,
        factory_provider=None,
    ):
        self.config = config
        self.state = DeploymentState.NOT_STARTED
        self._signer_provider = signer_provider or get_signer
        self._factory_provider = factory_provider or get_contract_factory

    def deploy(self, params: DeploymentParameters = DEFAULT_PARAMETERS):
        """Send the creation transaction and block until it is confirmed.

        There is no timeout on the wait: if the node never confirms the
        transaction, this never returns. Source verification runs after the
        deployment is confirmed and its failure only prints a warning.
        """
        try:
            factory, result = self._deploy(params)
        except Exception:
            self.state = DeploymentState.FAILED
            raise
        self.state = DeploymentState.DEPLOYED

        if self.config.publish_source:
            self._publish_source(factory, result.address)
        return result

    def _deploy(self, params: DeploymentParameters):
        signer = self._signer_provider(self.config.account_id)
        print(f"Deploying contracts with the account: {signer.address}")

        factory = self._factory_provider(self.config.contract_name)

        try:
            tx = factory.deploy(
                *params.constructor_args(), {"from": signer, "required_confs": 0}
            )
        except DeploymentError:
            raise
        except Exception as ex:
            raise SubmissionError(f"could not send deployment: {ex}") from ex
        self.state = DeploymentState.AWAITING_CONFIRMATION

        try:
            tx.wait(self.config.required_confs)
        except Exception as ex:
            raise ConfirmationError(f"{tx.txid} not confirmed: {ex}") from ex
        if tx.status != 1:
            raise ConfirmationError(f"{tx.txid} not successful (status {tx.status})")

        address = tx.contract_address
        print(f"{self.config.contract_name} deployed to: {address}")
        return factory, DeploymentResult(address=address, txid=tx.txid)

    def _publish_source(self, factory, address) -> bool:
        # the contract is already mined here, so this never fails the deployment
        try:
            published = factory.publish_source(factory.at(address))
        except Exception as ex:
            warn(f"source verification of {address} failed: {ex}")
            return False
        if not published:
            warn(f"source verification of {address} failed")
        return bool(published)


def main():
    try:
        Deployer(DeploymentConfig.from_network()).deploy()
    except Exception as ex:
        traceback.print_exc()
        abort(f"deployment failed: {ex}")
