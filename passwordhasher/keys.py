from os import urandom
from typing import Callable

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .errors import RandomUnavailable
from .params import ParameterProfile

ALGORITHM = "argon2id"
VERSION = ARGON2_VERSION  # 19

Password = str | bytes
RandomSource = Callable[[int], bytes]


def system_random(n: int) -> bytes:
    """Read `n` bytes from the OS CSPRNG."""
    try:
        return urandom(n)
    except (NotImplementedError, OSError) as e:
        raise RandomUnavailable(f"secure random source unavailable: {e}") from e


def password_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, got {type(password).__name__}")


def derive_key(password: bytes, salt: bytes, profile: ParameterProfile) -> bytes:
    return hash_secret_raw(password, salt,
                           time_cost=profile.iterations,
                           memory_cost=profile.memory_cost,
                           parallelism=profile.parallelism,
                           hash_len=profile.key_length,
                           type=Type.ID, version=VERSION)
