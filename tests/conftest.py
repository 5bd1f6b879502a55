import pytest

from ens_client.client import EnsClient
from ens_client.memory import InMemoryLedger, make_account

FOO_CONTENT = "0x" + "ab" * 32


@pytest.fixture
def caller():
    """Fixture providing the account issuing calls under test"""
    return make_account(0)


@pytest.fixture
def deployer():
    """Fixture providing the account that set up the registry"""
    return make_account(1)


@pytest.fixture
def other_account():
    """Fixture providing an unrelated account"""
    return make_account(2)


@pytest.fixture
def ledger(caller, deployer, other_account):
    """Fixture providing an in-memory ledger seeded with a small name tree.

    foo.eth    owned by deployer, resolver with address and content set
    bar.eth    owned by caller, resolver set, no records
    foobar.eth owned by caller, no resolver
    """
    ledger = InMemoryLedger(
        accounts=[caller, deployer, other_account], root_owner=deployer
    )
    resolver = ledger.deploy_resolver()
    setup = EnsClient(ledger, ledger.registry_address, sender=deployer)

    setup.create_subdomain("eth", "")
    setup.create_subdomain("foo", "eth")
    setup.set_resolver("foo.eth", resolver)
    setup.set_addr("foo.eth", deployer)
    setup.set_content("foo.eth", FOO_CONTENT)

    setup.create_subdomain("bar", "eth")
    setup.set_resolver("bar.eth", resolver)
    setup.transfer_subdomain("bar", "eth", caller)

    setup.create_subdomain("foobar", "eth", owner=caller)
    return ledger


@pytest.fixture
def resolver_address(ledger):
    """Fixture providing the address of the seeded resolver"""
    return next(iter(ledger.resolvers))


@pytest.fixture
def client(ledger, caller):
    """Fixture providing a client that sends as the caller account"""
    return EnsClient(ledger, ledger.registry_address, sender=caller)
