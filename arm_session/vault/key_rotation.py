"""
Vault Secret Rotation — Re-encryption of stored records under a new secret.

Decrypts each record with the old vault secret and re-seals it with the
new one. Records already readable under the new secret are skipped, so a
partially completed rotation can simply be run again.

Security Note:
    Plaintext exists in memory only during re-encryption of each record.
    Never log plaintext or ciphertext values.
"""
import logging
from collections.abc import Mapping

from .cipher import VaultCipher

logger = logging.getLogger("arm.vault")


def rotate_vault_secret(
    records: Mapping[str, str],
    old: VaultCipher,
    new: VaultCipher,
) -> tuple[dict[str, str], dict[str, int]]:
    """Re-encrypt records from the old cipher to the new one.

    Args:
        records: Mapping of record id to stored ``nonce:tag:ciphertext``.
        old: Cipher for the secret being retired.
        new: Cipher for the replacement secret.

    Returns:
        Tuple of (records after rotation, stats dict with keys:
        total, rotated, errors, skipped). Records that could not be
        rotated keep their original value.
    """
    rotated: dict[str, str] = {}
    stats = {"total": 0, "rotated": 0, "errors": 0, "skipped": 0}

    logger.info("Starting vault rotation of %d record(s)", len(records))

    for record_id, record in records.items():
        stats["total"] += 1
        if new.decrypt_password(record) is not None:
            rotated[record_id] = record
            stats["skipped"] += 1
            continue
        plaintext = old.decrypt_password(record)
        resealed = new.encrypt_password(plaintext) if plaintext else None
        if resealed is None:
            logger.error("Error rotating vault record id=%s", record_id)
            rotated[record_id] = record
            stats["errors"] += 1
            continue
        rotated[record_id] = resealed
        stats["rotated"] += 1

    logger.info("Vault rotation complete: %s", stats)
    return rotated, stats
