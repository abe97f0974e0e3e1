"""Argon2id cost parameters."""
from dataclasses import dataclass

from .errors import InvalidParameter

DEFAULT_MEMORY_COST = 64 * 1024  # KiB
DEFAULT_ITERATIONS = 3
DEFAULT_PARALLELISM = 2
DEFAULT_SALT_LENGTH = 16
DEFAULT_KEY_LENGTH = 32

# Argon2 reference limits; hash_secret_raw rejects anything outside them.
MIN_SALT_LENGTH = 8
MIN_KEY_LENGTH = 4
MAX_PARALLELISM = 2**24 - 1
MAX_UINT32 = 2**32 - 1


@dataclass(frozen=True)
class ParameterProfile:
    """Immutable cost profile shared read-only by every call on a Hasher.

    Profiles compare by value, so a record's embedded profile can be checked
    against a configured one with ``==``.
    """
    memory_cost: int = DEFAULT_MEMORY_COST
    iterations: int = DEFAULT_ITERATIONS
    parallelism: int = DEFAULT_PARALLELISM
    salt_length: int = DEFAULT_SALT_LENGTH
    key_length: int = DEFAULT_KEY_LENGTH

    def __post_init__(self):
        for name in ("memory_cost", "iterations", "parallelism", "salt_length", "key_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameter(f"{name} must be an integer, got {type(value).__name__}")
            if value <= 0:
                raise InvalidParameter(f"{name} must be positive, got {value}")
        if self.memory_cost > MAX_UINT32 or self.iterations > MAX_UINT32:
            raise InvalidParameter("memory_cost and iterations must fit in 32 bits")
        if self.parallelism > MAX_PARALLELISM:
            raise InvalidParameter(f"parallelism must be at most {MAX_PARALLELISM}")
        if self.memory_cost < 8 * self.parallelism:
            raise InvalidParameter("memory_cost must be at least 8 KiB per lane")
        if self.salt_length < MIN_SALT_LENGTH:
            raise InvalidParameter(f"salt_length must be at least {MIN_SALT_LENGTH} bytes")
        if self.key_length < MIN_KEY_LENGTH:
            raise InvalidParameter(f"key_length must be at least {MIN_KEY_LENGTH} bytes")

    @classmethod
    def default(cls) -> "ParameterProfile":
        return cls()

    @classmethod
    def custom(cls, memory_cost: int, iterations: int, parallelism: int,
               key_length: int) -> "ParameterProfile":
        return cls(memory_cost=memory_cost, iterations=iterations,
                   parallelism=parallelism, salt_length=DEFAULT_SALT_LENGTH,
                   key_length=key_length)

    def weaker_than(self, other: "ParameterProfile") -> bool:
        """True if any cost knob is below `other`'s."""
        return (self.memory_cost < other.memory_cost
                or self.iterations < other.iterations
                or self.salt_length < other.salt_length
                or self.key_length < other.key_length)
