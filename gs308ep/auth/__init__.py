"""Authentication submodule – login, password hashing, mutation token."""

from gs308ep.auth.login import fetch_login_digest, login
from gs308ep.auth.password import md5_hash, merge_hash
from gs308ep.auth.session import AuthState, Credentials, Session
from gs308ep.auth.token import fetch_mutation_token

__all__ = [
    "login",
    "fetch_login_digest",
    "md5_hash",
    "merge_hash",
    "AuthState",
    "Credentials",
    "Session",
    "fetch_mutation_token",
]
