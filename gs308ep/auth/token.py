"""Mutation-token retrieval for PoEPortConfig.cgi."""

from ..config import POE_CONFIG_CGI
from ..errors import MutationError
from ..extract.fields import extract_quoted_attribute
from ..logging_setup import log
from .session import Session


def fetch_mutation_token(transport, session: Session) -> str:
    """
    GET /PoEPortConfig.cgi and return its hidden ``hash`` field.

    The switch only accepts the value on the next POST, so this has to be
    called right before every state change and the result never reused.
    """
    resp = transport.send("GET", POE_CONFIG_CGI, cookie=session.cookie_token)
    if resp.status != 200:
        raise MutationError(
            MutationError.Reason.BAD_STATUS, f"GET {POE_CONFIG_CGI} → HTTP {resp.status}"
        )

    token = extract_quoted_attribute(resp.body, "hash")
    if not token:
        raise MutationError(MutationError.Reason.NO_TOKEN)
    log.debug("PoE config hash: %s", token)
    return token
