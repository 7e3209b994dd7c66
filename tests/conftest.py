import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey


@pytest.fixture
def authority() -> Keypair:
    return Keypair.from_seed(bytes([7] * 32))


@pytest.fixture
def target() -> Pubkey:
    return Keypair.from_seed(bytes([9] * 32)).pubkey()
