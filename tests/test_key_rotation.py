"""Tests for rotate_vault_secret."""
import logging

import pytest

from arm_session.conf import ArmConfig
from arm_session.vault import VaultCipher, rotate_vault_secret


@pytest.fixture
def old():
    return VaultCipher(ArmConfig(vault_secret="retiring-secret"))


@pytest.fixture
def new():
    return VaultCipher(ArmConfig(vault_secret="replacement-secret"))


def test_rotates_all_records(old, new):
    records = {
        "cred-1": old.encrypt_password("alpha"),
        "cred-2": old.encrypt_password("beta"),
    }
    rotated, stats = rotate_vault_secret(records, old, new)
    assert stats == {"total": 2, "rotated": 2, "errors": 0, "skipped": 0}
    assert new.decrypt_password(rotated["cred-1"]) == "alpha"
    assert new.decrypt_password(rotated["cred-2"]) == "beta"
    assert old.decrypt_password(rotated["cred-1"]) is None


def test_rerun_skips_rotated_records(old, new):
    records = {"cred-1": old.encrypt_password("alpha")}
    rotated, _ = rotate_vault_secret(records, old, new)
    again, stats = rotate_vault_secret(rotated, old, new)
    assert stats == {"total": 1, "rotated": 0, "errors": 0, "skipped": 1}
    assert again == rotated


def test_unreadable_record_kept_and_counted(old, new):
    records = {"good": old.encrypt_password("alpha"), "bad": "not:a:record"}
    rotated, stats = rotate_vault_secret(records, old, new)
    assert stats == {"total": 2, "rotated": 1, "errors": 1, "skipped": 0}
    assert rotated["bad"] == "not:a:record"


def test_plaintext_never_logged(old, new, caplog):
    records = {"cred-1": old.encrypt_password("super-secret-plaintext")}
    with caplog.at_level(logging.DEBUG, logger="arm.vault"):
        rotate_vault_secret(records, old, new)
    assert "super-secret-plaintext" not in caplog.text
    assert records["cred-1"] not in caplog.text
