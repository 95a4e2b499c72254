import itertools
import threading
from typing import List, Optional

import pytest

from scripts.deploy_nft_collection import DeploymentConfig

_addresses = itertools.count(1)


def next_address():
    return "0x" + next(_addresses).to_bytes(20, byteorder="big").hex()


class FakeAccount:
    def __init__(self, address=None):
        self.address = address or next_address()

    def __str__(self):
        return self.address


class PendingReceipt:
    """In-memory stand-in for a brownie TransactionReceipt sent with required_confs=0."""

    def __init__(self, contract_address, status=1, wait_error=None, release=None):
        self.txid = "0x" + contract_address[2:].rjust(64, "0")
        self.contract_address = contract_address
        self.status = -1
        self.waits: List[int] = []
        self._final_status = status
        self._wait_error = wait_error
        self._release = release

    def wait(self, required_confs):
        self.waits.append(required_confs)
        if self._release is not None:
            self._release.wait()
        if self._wait_error is not None:
            raise self._wait_error
        self.status = self._final_status


class FakeContractContainer:
    def __init__(
        self,
        name="MyNFTCollection",
        status=1,
        deploy_error: Optional[Exception] = None,
        wait_error: Optional[Exception] = None,
        release: Optional[threading.Event] = None,
        publish_error: Optional[Exception] = None,
        published_ok=True,
    ):
        self._name = name
        self.deployments = []
        self.receipts: List[PendingReceipt] = []
        self.published = []
        self._status = status
        self._deploy_error = deploy_error
        self._wait_error = wait_error
        self._release = release
        self._publish_error = publish_error
        self._published_ok = published_ok

    def deploy(self, *args):
        if self._deploy_error is not None:
            raise self._deploy_error
        self.deployments.append(args)
        receipt = PendingReceipt(
            next_address(),
            status=self._status,
            wait_error=self._wait_error,
            release=self._release,
        )
        self.receipts.append(receipt)
        return receipt

    def at(self, address):
        return (self._name, address)

    def publish_source(self, contract):
        if self._publish_error is not None:
            raise self._publish_error
        self.published.append(contract)
        return self._published_ok


def providers(signer, factory):
    def signer_provider(account_id=None):
        if isinstance(signer, Exception):
            raise signer
        return signer

    def factory_provider(name):
        if isinstance(factory, Exception):
            raise factory
        return factory

    return signer_provider, factory_provider


@pytest.fixture
def admin():
    return FakeAccount()


@pytest.fixture
def nft_collection_factory():
    return FakeContractContainer()


@pytest.fixture
def deploy_config():
    return DeploymentConfig()
