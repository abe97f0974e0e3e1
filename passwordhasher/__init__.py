"""Argon2id password hashing: hash, encode and verify credentials."""
from .errors import (ErrorKind, PasswordHasherError, EmptyInput, InvalidParameter,
                     InvalidFormat, PasswordMismatch, RandomUnavailable)
from .params import (ParameterProfile, DEFAULT_MEMORY_COST, DEFAULT_ITERATIONS,
                     DEFAULT_PARALLELISM, DEFAULT_SALT_LENGTH, DEFAULT_KEY_LENGTH)
from .encoding import EncodedHash, encode, decode
from .keys import derive_key, system_random
from .hasher import Hasher
from .config import HasherSettings, load_settings
from .login import make_login_hash, verify_login_hash, login_hash_needs_rehash

__version__ = "1.0.0"
