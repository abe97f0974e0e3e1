"""PHC string format for Argon2id hashes.

    $argon2id$v=19$m=<memory>,t=<iterations>,p=<parallelism>$<salt>$<key>

Salt and key are standard base64 with the padding stripped.
"""
import base64
import binascii
import re
from dataclasses import dataclass

from .errors import InvalidFormat, InvalidParameter
from .keys import ALGORITHM, VERSION
from .params import ParameterProfile

SEPARATOR = "$"
VERSION_SEGMENT = f"v={VERSION}"

_PARAMS_RE = re.compile(r"m=([1-9][0-9]*),t=([1-9][0-9]*),p=([1-9][0-9]*)")
_B64_RE = re.compile(r"[A-Za-z0-9+/]+")


@dataclass(frozen=True)
class EncodedHash:
    memory_cost: int
    iterations: int
    parallelism: int
    salt: bytes
    key: bytes

    @property
    def profile(self) -> ParameterProfile:
        return ParameterProfile(memory_cost=self.memory_cost,
                                iterations=self.iterations,
                                parallelism=self.parallelism,
                                salt_length=len(self.salt),
                                key_length=len(self.key))


def b64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64_decode(text: str) -> bytes:
    if not _B64_RE.fullmatch(text):
        raise InvalidFormat()
    try:
        data = base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except binascii.Error:
        raise InvalidFormat() from None
    # one spelling per value: unused trailing bits must be zero
    if b64_encode(data) != text:
        raise InvalidFormat()
    return data


def encode(record: EncodedHash) -> str:
    params = f"m={record.memory_cost},t={record.iterations},p={record.parallelism}"
    return SEPARATOR.join(["", ALGORITHM, VERSION_SEGMENT, params,
                           b64_encode(record.salt), b64_encode(record.key)])


def decode(text) -> EncodedHash:
    """Parse an encoded hash, raising InvalidFormat on any structural fault."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError:
            raise InvalidFormat() from None
    if not isinstance(text, str):
        raise InvalidFormat()

    parts = text.split(SEPARATOR)
    if len(parts) != 6 or parts[0] != "":
        raise InvalidFormat()
    if parts[1] != ALGORITHM or parts[2] != VERSION_SEGMENT:
        raise InvalidFormat()
    m = _PARAMS_RE.fullmatch(parts[3])
    if m is None:
        raise InvalidFormat()

    record = EncodedHash(memory_cost=int(m.group(1)),
                         iterations=int(m.group(2)),
                         parallelism=int(m.group(3)),
                         salt=b64_decode(parts[4]),
                         key=b64_decode(parts[5]))
    try:
        record.profile  # enforces the bounds Argon2 accepts
    except InvalidParameter:
        raise InvalidFormat() from None
    return record
