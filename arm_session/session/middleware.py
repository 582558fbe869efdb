"""
aiohttp integration — route gate, login and logout endpoints.

Every request outside the exempt paths must carry a valid session cookie;
otherwise it is redirected to the login page.
"""
import logging
from collections.abc import Iterable

from aiohttp import web

from .authenticator import SessionAuthenticator

logger = logging.getLogger("arm.session")

AUTHENTICATOR_KEY = web.AppKey("arm_authenticator", SessionAuthenticator)
LOGIN_PATH = "/login"
LOGOUT_PATH = "/logout"
HOME_PATH = "/"
DEFAULT_EXEMPT = (LOGIN_PATH, "/static/")

MISSING_FIELDS = "Please enter username and password."
BAD_CREDENTIALS = "Invalid username or password."


def _see_other(location: str) -> web.Response:
    return web.Response(status=303, headers={"Location": location})


def session_middleware(
    authenticator: SessionAuthenticator,
    exempt: Iterable[str] = DEFAULT_EXEMPT,
):
    """Build a middleware redirecting unauthenticated requests to login.

    Exempt entries ending in '/' match every path below them; any other
    entry matches only that exact path.
    """
    exempt = tuple(exempt)
    prefixes = tuple(p for p in exempt if p.endswith("/"))
    exact = frozenset(p for p in exempt if not p.endswith("/"))

    @web.middleware
    async def middleware(request: web.Request, handler):
        path = request.path
        if path in exact or path.startswith(prefixes):
            return await handler(request)
        if not authenticator.get_session(request):
            logger.debug("Unauthenticated request to %s", request.path)
            return _see_other(LOGIN_PATH)
        request["authenticated"] = True
        return await handler(request)

    return middleware


async def login(request: web.Request) -> web.Response:
    """POST /login: verify the form and issue the session cookie."""
    authenticator = request.app[AUTHENTICATOR_KEY]
    form = await request.post()
    username = str(form.get("username", "")).strip()
    password = str(form.get("password", ""))
    if not username or not password:
        return web.json_response({"error": MISSING_FIELDS}, status=400)
    if not authenticator.verify_login_credentials(username, password):
        return web.json_response({"error": BAD_CREDENTIALS}, status=401)
    response = _see_other(HOME_PATH)
    authenticator.set_session(response)
    logger.info("User %s logged in", username)
    return response


async def logout(request: web.Request) -> web.Response:
    """POST /logout: drop the session cookie."""
    response = _see_other(LOGIN_PATH)
    request.app[AUTHENTICATOR_KEY].destroy_session(response)
    return response


def setup(
    app: web.Application,
    authenticator: SessionAuthenticator,
    exempt: Iterable[str] = DEFAULT_EXEMPT,
) -> None:
    """Install the session gate and the login/logout routes on app."""
    app[AUTHENTICATOR_KEY] = authenticator
    app.middlewares.append(session_middleware(authenticator, exempt))
    app.router.add_post(LOGIN_PATH, login)
    app.router.add_post(LOGOUT_PATH, logout)
