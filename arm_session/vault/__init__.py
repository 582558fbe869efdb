"""Credential Vault — Encrypted storage of third-party passwords.

Security Note (Threat Model):
    Records protect passwords against disclosure through a database dump.
    Anyone holding VAULT_SECRET (or the process memory, where the derived
    key is cached) can decrypt every record of the deployment. The scrypt
    salt is static, so all records share one key and rely on per-record
    random nonces.
"""

from .cipher import (
    VaultCipher,
    UNAVAILABLE,
    encrypt_password,
    decrypt_password,
    reset_default_cipher,
)
from .key_rotation import rotate_vault_secret

__all__ = [
    "VaultCipher",
    "UNAVAILABLE",
    "encrypt_password",
    "decrypt_password",
    "reset_default_cipher",
    "rotate_vault_secret",
]
