"""Stateless signed-cookie sessions for the ARM login gate."""

from .token import SESSION_COOKIE, SESSION_MAX_AGE, SessionPayload
from .authenticator import SessionAuthenticator
from .middleware import setup, session_middleware

__all__ = [
    "SESSION_COOKIE",
    "SESSION_MAX_AGE",
    "SessionPayload",
    "SessionAuthenticator",
    "setup",
    "session_middleware",
]
