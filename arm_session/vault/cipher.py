"""
VaultCipher — Encrypt and reveal stored third-party passwords.

Provides the public API for the credential vault:
- ``encrypt_password(plain)`` — seal a secret for storage, None for empty input
- ``decrypt_password(record)`` — open a stored record, None when unavailable
- ``reveal(record)`` — plaintext or a neutral placeholder for display

Every failure collapses to None: a record that cannot be decrypted is a
normal, displayable state for callers, never an exception.

Security Note:
    Never log plaintext or ciphertext values.
"""
import logging
import threading
from typing import Optional

from cryptography.exceptions import InvalidTag

from ..conf import ArmConfig
from .crypto import derive_key, seal, unseal

logger = logging.getLogger("arm.vault")

UNAVAILABLE = "—"


class VaultCipher:
    """AES-256-GCM cipher keyed from the configured vault secret.

    The scrypt key is derived on first use and cached for the lifetime
    of the instance; the secret never changes at runtime.
    """

    def __init__(self, config: ArmConfig):
        self._secret = config.effective_vault_secret
        self._key: Optional[bytes] = None
        self._lock = threading.Lock()

    @property
    def key(self) -> bytes:
        if self._key is None:
            with self._lock:
                if self._key is None:
                    self._key = derive_key(self._secret)
                    logger.debug("Vault key derived")
        return self._key

    def encrypt_password(self, plain: Optional[str]) -> Optional[str]:
        """Encrypt plain for storage.

        Args:
            plain: Secret to encrypt.

        Returns:
            ``nonce:tag:ciphertext`` record, or None for empty input.
        """
        if not isinstance(plain, str) or not plain:
            return None
        try:
            return seal(plain, self.key)
        except (ValueError, TypeError) as err:
            logger.error("Vault encryption failed: %s", type(err).__name__)
            return None

    def decrypt_password(self, record: Optional[str]) -> Optional[str]:
        """Decrypt a stored record.

        Args:
            record: ``nonce:tag:ciphertext`` string.

        Returns:
            Plaintext, or None if the record is empty, malformed,
            tampered with, or sealed under a different secret.
        """
        if not isinstance(record, str) or not record:
            return None
        try:
            return unseal(record, self.key)
        except (InvalidTag, ValueError, TypeError) as err:
            logger.debug("Vault record unavailable: %s", type(err).__name__)
            return None

    def reveal(self, record: Optional[str]) -> str:
        """Plaintext for display, or the neutral unavailable marker."""
        value = self.decrypt_password(record)
        return UNAVAILABLE if value is None else value


_default: Optional[VaultCipher] = None
_default_lock = threading.Lock()


def default_cipher() -> VaultCipher:
    """Process-wide cipher built from the environment on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = VaultCipher(ArmConfig.from_env())
    return _default


def reset_default_cipher() -> None:
    """Drop the cached default cipher so the next call re-reads the env."""
    global _default
    with _default_lock:
        _default = None


def encrypt_password(plain: Optional[str]) -> Optional[str]:
    return default_cipher().encrypt_password(plain)


def decrypt_password(record: Optional[str]) -> Optional[str]:
    return default_cipher().decrypt_password(record)
