"""
Vault Crypto Core — Key derivation and AES-256-GCM sealing of secrets.

Record format (all parts standard base64)::

    <nonce 12B>:<GCM tag 16B>:<ciphertext>

Security Note:
    Never log plaintext or ciphertext values.
    The scrypt salt is a fixed constant shared by every record of a
    deployment, so all records use one key; uniqueness comes solely from
    the random 96-bit nonce. Changing SALT or the scrypt cost parameters
    makes every stored record undecryptable.
"""
import os
import base64

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

SALT = b"growith-vault-iv"
NONCE_SIZE = 12  # 96-bit nonce
TAG_SIZE = 16  # GCM tag
KEY_LENGTH = 32  # AES-256

# scrypt cost: N=2**14, r=8, p=1 (16 MiB)
SCRYPT_N = 2 ** 14
SCRYPT_R = 8
SCRYPT_P = 1

_SEPARATOR = ":"


def derive_key(secret: str) -> bytes:
    """Derive the 32-byte vault key from secret with scrypt.

    This is deliberately slow; cache the result per process.

    Args:
        secret: Configured vault secret.

    Returns:
        32-byte AES key.
    """
    kdf = Scrypt(
        salt=SALT,
        length=KEY_LENGTH,
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
    )
    return kdf.derive(secret.encode("utf-8"))


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def seal(plaintext: str, key: bytes) -> str:
    """Encrypt plaintext under key with a fresh random nonce.

    Args:
        plaintext: Secret to encrypt.
        key: 32-byte key from ``derive_key``.

    Returns:
        ``nonce:tag:ciphertext`` record.
    """
    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(key).encrypt(nonce, plaintext.encode("utf-8"), None)
    ct, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
    return _SEPARATOR.join((_b64(nonce), _b64(tag), _b64(ct)))


def unseal(record: str, key: bytes) -> str:
    """Verify and decrypt a record produced by ``seal``.

    Args:
        record: ``nonce:tag:ciphertext`` string.
        key: 32-byte key from ``derive_key``.

    Returns:
        Decrypted plaintext.

    Raises:
        ValueError: If the record is malformed or not valid UTF-8.
        cryptography.exceptions.InvalidTag: If authentication fails.
    """
    parts = record.split(_SEPARATOR)
    if len(parts) != 3:
        raise ValueError(
            f"vault record must have 3 parts, got {len(parts)}"
        )
    nonce, tag, ct = (base64.b64decode(p, validate=True) for p in parts)
    if len(nonce) != NONCE_SIZE:
        raise ValueError(
            f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}"
        )
    if len(tag) != TAG_SIZE:
        raise ValueError(
            f"auth tag must be {TAG_SIZE} bytes, got {len(tag)}"
        )
    plaintext = AESGCM(key).decrypt(nonce, ct + tag, None)
    return plaintext.decode("utf-8")
