import pytest

from arm_session.conf import ArmConfig
from arm_session.session import SessionAuthenticator
from arm_session.vault import VaultCipher

from .helpers import FakeClock


@pytest.fixture
def config():
    """Configuration with login enabled and fabricated secrets."""
    return ArmConfig(
        login_username="admin",
        login_password="secret123",
        session_secret="unit-test-session-secret",
        vault_secret="unit-test-vault-secret",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def authenticator(config, clock):
    return SessionAuthenticator(config, clock=clock)


@pytest.fixture
def cipher(config):
    return VaultCipher(config)
