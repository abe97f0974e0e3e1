from argon2.exceptions import HashingError
from cryptography.hazmat.primitives.constant_time import bytes_eq

from .encoding import EncodedHash, decode, encode
from .errors import EmptyInput, InvalidFormat, InvalidParameter, PasswordMismatch, RandomUnavailable
from .keys import Password, RandomSource, derive_key, password_bytes, system_random
from .params import ParameterProfile


class Hasher:
    """Argon2id hasher bound to one immutable ParameterProfile.

    Holds no mutable state, so one instance may be shared between threads.
    `verify` re-derives with the parameters embedded in the stored hash,
    which lets hashes made under an older profile keep verifying.
    """
    __slots__ = ("_profile", "_random")

    def __init__(self, profile: ParameterProfile | None = None,
                 random_source: RandomSource = system_random):
        self._profile = profile if profile is not None else ParameterProfile.default()
        self._random = random_source

    @classmethod
    def custom(cls, memory_cost: int, iterations: int, parallelism: int,
               key_length: int) -> "Hasher":
        return cls(ParameterProfile.custom(memory_cost, iterations, parallelism, key_length))

    @property
    def profile(self) -> ParameterProfile:
        return self._profile

    def hash(self, password: Password) -> str:
        pw = password_bytes(password)
        if not pw:
            raise EmptyInput()
        n = self._profile.salt_length
        salt = self._random(n)
        if not isinstance(salt, bytes) or len(salt) != n:
            raise RandomUnavailable(f"random source returned a short read for {n} bytes")
        return self._encode(pw, salt)

    def hash_with_salt(self, password: Password, salt: bytes) -> str:
        pw = password_bytes(password)
        if not pw:
            raise EmptyInput()
        if not isinstance(salt, (bytes, bytearray, memoryview)):
            raise TypeError(f"salt must be bytes, got {type(salt).__name__}")
        salt = bytes(salt)
        if len(salt) != self._profile.salt_length:
            raise InvalidParameter(
                f"salt must be {self._profile.salt_length} bytes, got {len(salt)}")
        return self._encode(pw, salt)

    def verify(self, password: Password, encoded: str) -> bool:
        """Return True if `password` matches, else raise PasswordMismatch.

        Raises EmptyInput before looking at `encoded`, and InvalidFormat if
        `encoded` does not parse.
        """
        pw = password_bytes(password)
        if not pw:
            raise EmptyInput()
        record = decode(encoded)
        try:
            candidate = derive_key(pw, record.salt, record.profile)
        except HashingError:
            # parameters came from the stored record, e.g. m too large to allocate
            raise InvalidFormat() from None
        if not bytes_eq(candidate, record.key):
            raise PasswordMismatch()
        return True

    def needs_rehash(self, encoded: str) -> bool:
        """True if `encoded` was made under a profile other than ours."""
        return decode(encoded).profile != self._profile

    def _encode(self, pw: bytes, salt: bytes) -> str:
        p = self._profile
        try:
            key = derive_key(pw, salt, p)
        except HashingError as e:
            raise InvalidParameter(f"argon2 rejected the profile: {e}") from e
        return encode(EncodedHash(memory_cost=p.memory_cost, iterations=p.iterations,
                                  parallelism=p.parallelism, salt=salt, key=key))

    def __repr__(self):
        return f"Hasher({self._profile!r})"
