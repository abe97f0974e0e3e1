"""Login helpers backed by one process-wide Hasher built from settings."""
import logging
from functools import lru_cache

from .config import load_settings
from .errors import PasswordMismatch
from .hasher import Hasher
from .keys import Password

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_hasher() -> Hasher:
    return Hasher(load_settings().to_profile())


def make_login_hash(password: Password) -> str:
    return default_hasher().hash(password)


def verify_login_hash(password: Password, stored: str) -> bool:
    """False on a wrong password; malformed `stored` still raises InvalidFormat."""
    try:
        return default_hasher().verify(password, stored)
    except PasswordMismatch:
        return False


def login_hash_needs_rehash(stored: str) -> bool:
    stale = default_hasher().needs_rehash(stored)
    if stale:
        logger.debug("stored login hash uses an outdated profile")
    return stale
