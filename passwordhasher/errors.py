"""Error taxonomy for hashing and verification."""
from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_FORMAT = "invalid_format"
    PASSWORD_MISMATCH = "password_mismatch"
    RANDOM_UNAVAILABLE = "random_unavailable"


class PasswordHasherError(Exception):
    """Base class; `kind` tells callers which branch they are on."""
    kind: ErrorKind


class EmptyInput(PasswordHasherError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "password must not be empty"):
        super().__init__(message)


class InvalidParameter(PasswordHasherError):
    kind = ErrorKind.INVALID_PARAMETER


class InvalidFormat(PasswordHasherError):
    """Raised for any malformed encoded hash.

    The message is always the same so a remote caller cannot learn which
    field was rejected.
    """
    kind = ErrorKind.INVALID_FORMAT

    def __init__(self):
        super().__init__("invalid encoded hash")


class PasswordMismatch(PasswordHasherError):
    kind = ErrorKind.PASSWORD_MISMATCH

    def __init__(self):
        super().__init__("password does not match")


class RandomUnavailable(PasswordHasherError):
    kind = ErrorKind.RANDOM_UNAVAILABLE
