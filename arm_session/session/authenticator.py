"""
SessionAuthenticator — login check and stateless cookie sessions.

Provides the public API used by the login flow and the route gate:
- ``verify_login_credentials(username, password)`` — check configured login
- ``create_session()`` / ``validate_session(token)`` — pure token issue/verify
- ``set_session(response)`` / ``get_session(request)`` — cookie bindings
- ``destroy_session(response)`` — remove the cookie (logout)

Malformed, tampered and expired tokens all validate as False; callers
cannot tell them apart.

Security Note:
    Never log passwords or token values.
"""
import hmac
import time
import logging
from typing import Optional
from collections.abc import Callable

from aiohttp import web

from ..conf import ArmConfig
from .token import SESSION_COOKIE, SessionPayload, encode_token, decode_token

logger = logging.getLogger("arm.session")


def _same(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


class SessionAuthenticator:
    """Issue and verify signed session cookies.

    Holds no mutable state: every call only reads the injected config,
    so one instance serves all concurrent requests.
    """

    def __init__(
        self,
        config: ArmConfig,
        clock: Callable[[], float] = time.time,
        cookie_name: str = SESSION_COOKIE,
    ):
        self._config = config
        self._clock = clock
        self.cookie_name = cookie_name

    @property
    def max_age(self) -> int:
        """Validity window in seconds."""
        return self._config.session_max_age

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def verify_login_credentials(self, username: str, password: str) -> bool:
        """Compare against LOGIN_USERNAME/LOGIN_PASSWORD in constant time.

        Returns:
            False when login is not configured, otherwise whether both match.
        """
        creds = self._config.credentials
        if creds is None:
            logger.warning("Login attempted but no credentials are configured")
            return False
        if username is None or password is None:
            return False
        user_ok = _same(username, creds[0])
        pass_ok = _same(password, creds[1])
        if not (user_ok and pass_ok):
            logger.info("Failed login for user=%s", username)
            return False
        return True

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def create_session(self) -> str:
        """Return a new signed token issued now."""
        payload = SessionPayload(ok=True, at=self._now_ms())
        return encode_token(payload, self._config.effective_session_secret)

    def validate_session(self, token: Optional[str]) -> bool:
        """Check signature, liveness flag and age of a token."""
        if not token:
            return False
        payload = decode_token(token, self._config.effective_session_secret)
        if payload is None:
            logger.debug("Rejected malformed or unsigned session token")
            return False
        if payload.ok is not True:
            return False
        age = self._now_ms() - payload.at
        if age >= self.max_age * 1000:
            logger.debug("Rejected session token outside validity window")
            return False
        return True

    # ------------------------------------------------------------------
    # Cookie bindings
    # ------------------------------------------------------------------

    def set_session(self, response: web.StreamResponse) -> str:
        """Issue a token and store it as the session cookie on response."""
        token = self.create_session()
        response.set_cookie(
            self.cookie_name,
            token,
            max_age=self.max_age,
            path="/",
            secure=self._config.cookie_secure,
            httponly=True,
            samesite="Lax",
        )
        logger.debug("Session issued")
        return token

    def get_session(self, request: web.Request) -> bool:
        """Whether the request carries a valid session cookie."""
        return self.validate_session(request.cookies.get(self.cookie_name))

    def destroy_session(self, response: web.StreamResponse) -> None:
        """Remove the session cookie."""
        response.del_cookie(self.cookie_name, path="/")
        logger.debug("Session destroyed")
