"""ARM Session.

Signed-cookie login gate and encrypted credential vault for the
Agency Resource Management application.
"""
from .version import __version__
from .conf import ArmConfig, generate_secret
from .session import SessionAuthenticator, setup
from .vault import VaultCipher, rotate_vault_secret

__all__ = [
    "__version__",
    "ArmConfig",
    "generate_secret",
    "SessionAuthenticator",
    "setup",
    "VaultCipher",
    "rotate_vault_secret",
]
