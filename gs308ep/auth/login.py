"""Login handshake against /login.cgi."""

from ..config import LOGIN_CGI, SESSION_COOKIE
from ..errors import AuthError
from ..extract.fields import extract_cookie_value, extract_quoted_attribute
from ..logging_setup import log
from .password import md5_hash, merge_hash
from .session import Credentials, Session


def fetch_login_digest(transport, credentials: Credentials, legacy_fallback: bool = True) -> str:
    """
    GET the login page and return the password digest to submit.

    The page embeds a hidden ``rand`` nonce that is appended to the password
    before hashing.  Old firmware has no nonce; there the bare password is
    hashed unless *legacy_fallback* is off.
    """
    resp = transport.send("GET", LOGIN_CGI)
    if resp.status != 200:
        raise AuthError(AuthError.Reason.BAD_STATUS, f"GET {LOGIN_CGI} → HTTP {resp.status}")

    rand = extract_quoted_attribute(resp.body, "rand")
    if rand:
        log.debug("Login rand token: %s", rand)
        return merge_hash(credentials.password, rand)

    if not legacy_fallback:
        raise AuthError(AuthError.Reason.NO_TOKEN)
    log.debug("No rand token on login page – using plain MD5 (legacy firmware)")
    return md5_hash(credentials.password)


def login(transport, credentials: Credentials, legacy_fallback: bool = True) -> Session:
    """
    Authenticate against the GS308EP web console.

      GET  /login.cgi  → hidden ``rand`` field
      POST /login.cgi  password=MD5(password + rand)
      ← Set-Cookie: SID=…

    The presence of the SID cookie is the only success criterion; some
    firmware answers the POST with odd status codes even when it succeeds.
    Raises TransportError or AuthError; nothing is retried.
    """
    digest = fetch_login_digest(transport, credentials, legacy_fallback)

    resp = transport.send("POST", LOGIN_CGI, body=f"password={digest}")
    sid = extract_cookie_value(resp.headers, SESSION_COOKIE)
    if not sid:
        raise AuthError(
            AuthError.Reason.NO_COOKIE,
            f"POST {LOGIN_CGI} → HTTP {resp.status}, check the password",
        )

    log.info("Login successful (HTTP %s)", resp.status)
    return Session(cookie_token=sid, authenticated=True)
