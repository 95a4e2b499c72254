import sys
from typing import Callable, Iterable, Optional, TypeVar, cast

from brownie import accounts, network, project
from brownie.network.account import LocalAccount

from scripts.errors import FactoryNotFoundError, NoSignerError

DEV_CHAIN_IDS = {1337}

T = TypeVar("T")


def is_live():
    return network.chain.id not in DEV_CHAIN_IDS


def find(
    predicate: Callable[[T], bool], iterable: Iterable[T], message: Optional[str] = None
) -> T:
    for item in iterable:
        if predicate(item):
            return item
    if message is None:
        message = f"not found in {iterable}"
    raise ValueError(message)


def get_signer(account_id: Optional[str] = None):
    if account_id is not None:
        try:
            return cast(LocalAccount, accounts.load(account_id))
        except FileNotFoundError as ex:
            raise NoSignerError(f"account {account_id} not found") from ex
    if len(accounts) == 0:
        raise NoSignerError(f"no account available on {network.show_active()}")
    return accounts[0]


def get_contract_factory(name: str):
    try:
        owner = find(lambda p: name in p, project.get_loaded_projects())
    except ValueError:
        raise FactoryNotFoundError(f"{name} not found in loaded projects") from None
    return owner[name]


def abort(reason, code=1):
    print(f"error: {reason}", file=sys.stderr)
    sys.exit(code)


def warn(reason):
    print(f"warning: {reason}", file=sys.stderr)
