"""
ARM Configuration — process-wide secrets and login settings.

Reads settings from environment variables:
    LOGIN_USERNAME / LOGIN_PASSWORD  = reference credentials (login disabled if unset)
    SESSION_SECRET                   = HMAC secret for session cookies
    VAULT_SECRET                     = scrypt secret for the credential vault
    ARM_ENV                          = "development" disables the secure cookie flag
    SESSION_MAX_AGE                  = session validity window in seconds

Security Note:
    The hardcoded fallbacks below are INSECURE and exist only for local
    development. Using one is logged as a warning, never silently.
    Never log secret values, only whether a fallback is in use.
"""
import os
import secrets
import logging
from typing import Optional
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("arm.conf")

DEFAULT_SESSION_SECRET = "arm-default-secret-change-in-production"
DEFAULT_VAULT_SECRET = "dev-vault-secret"
DEFAULT_MAX_AGE = 60 * 60 * 24 * 7  # 7 days
DEVELOPMENT = "development"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    """Return an env value, treating empty strings as unset."""
    value = environ.get(name)
    return value or None


def generate_secret() -> str:
    """Generate a random URL-safe secret for SESSION_SECRET or VAULT_SECRET.

    This is a utility for operators provisioning a deployment.

    Returns:
        URL-safe string carrying 32 random bytes.
    """
    return secrets.token_urlsafe(32)


class ArmConfig(BaseModel):
    """Validated process configuration, built once and injected."""

    login_username: Optional[str] = None
    login_password: Optional[str] = None
    session_secret: Optional[str] = Field(default=None, min_length=1)
    vault_secret: Optional[str] = None
    environment: str = Field(default=DEVELOPMENT)
    session_max_age: int = Field(default=DEFAULT_MAX_AGE, ge=60)

    model_config = {"frozen": True}

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """Lower-case the environment name."""
        return v.strip().lower() or DEVELOPMENT

    @property
    def credentials(self) -> Optional[tuple[str, str]]:
        """Configured (username, password), or None when login is disabled."""
        if not self.login_username or not self.login_password:
            return None
        return self.login_username, self.login_password

    @property
    def effective_session_secret(self) -> str:
        """SESSION_SECRET, else the development default."""
        return self.session_secret or DEFAULT_SESSION_SECRET

    @property
    def insecure_session_secret(self) -> bool:
        return self.session_secret is None

    @property
    def effective_vault_secret(self) -> str:
        """VAULT_SECRET, else SESSION_SECRET if set, else the dev default.

        The session default never feeds the vault: an unset SESSION_SECRET
        falls through to DEFAULT_VAULT_SECRET so existing ciphertexts decrypt,
        while an explicitly set one is used even if it equals the default.
        """
        if self.vault_secret:
            return self.vault_secret
        if self.session_secret:
            return self.session_secret
        return DEFAULT_VAULT_SECRET

    @property
    def insecure_vault_secret(self) -> bool:
        return self.effective_vault_secret == DEFAULT_VAULT_SECRET

    @property
    def cookie_secure(self) -> bool:
        return self.environment != DEVELOPMENT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ArmConfig":
        """Create ArmConfig by loading values from the environment.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Populated ArmConfig instance.
        """
        environ = os.environ if environ is None else environ
        values: dict = {
            "login_username": _env(environ, "LOGIN_USERNAME"),
            "login_password": _env(environ, "LOGIN_PASSWORD"),
            "session_secret": _env(environ, "SESSION_SECRET"),
            "vault_secret": _env(environ, "VAULT_SECRET"),
        }
        environment = _env(environ, "ARM_ENV")
        if environment:
            values["environment"] = environment
        max_age = _env(environ, "SESSION_MAX_AGE")
        if max_age:
            values["session_max_age"] = max_age
        config = cls(**values)
        if config.credentials is None:
            logger.warning(
                "LOGIN_USERNAME/LOGIN_PASSWORD not set: login is disabled"
            )
        if config.insecure_session_secret:
            logger.warning(
                "SESSION_SECRET not set: using the INSECURE development default"
            )
        if config.insecure_vault_secret:
            logger.warning(
                "VAULT_SECRET not set: vault key derives from an INSECURE "
                "development default"
            )
        return config
