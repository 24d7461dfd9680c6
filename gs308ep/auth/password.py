"""Password hashing helpers for the GS308EP login form."""

import hashlib


def md5_hash(text: str) -> str:
    """Lower-case hex MD5 of the UTF-8 bytes of *text*."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def merge_hash(password: str, rand: str) -> str:
    """
    Replicate the login page's merge-hash: ``MD5(password + rand)``.

    With an empty *rand* this degenerates to ``md5_hash(password)``, which is
    what pre-rand firmware expects.
    """
    return md5_hash(password + rand)
