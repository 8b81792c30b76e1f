"""Hash backends used to turn n-grams into fixed-width bit patterns."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from siphash24 import siphash24

from .errors import UnsupportedHashFunctionError

# Every siphash fingerprint depends on this key.
SIPHASH_KEY = b"0123456789ABCDEF"


class HashFunction(str, Enum):
    SIPHASH = "siphash"
    MD5 = "md5"
    SHA256 = "sha256"


def _siphash(data: bytes) -> bytes:
    value = siphash24(data, key=SIPHASH_KEY).intdigest()
    # intdigest() is signed; to_bytes keeps the same 64-bit pattern.
    return value.to_bytes(8, "big", signed=True)


def _md5(data: bytes) -> bytes:
    return hashlib.md5(data).digest()


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


@dataclass(frozen=True)
class HashFunctionSpec:
    """A hash backend together with the width of the values it produces.

    ``digest`` returns exactly ``bits // 8`` bytes, most significant byte first.
    """

    function: HashFunction
    bits: int
    digest: Callable[[bytes], bytes]

    @property
    def name(self) -> str:
        return self.function.value

    def hash(self, data: bytes) -> bytes:
        return self.digest(data)


HASH_FUNCTIONS: dict[HashFunction, HashFunctionSpec] = {
    HashFunction.SIPHASH: HashFunctionSpec(HashFunction.SIPHASH, 64, _siphash),
    HashFunction.MD5: HashFunctionSpec(HashFunction.MD5, 128, _md5),
    HashFunction.SHA256: HashFunctionSpec(HashFunction.SHA256, 256, _sha256),
}

SUPPORTED_HASH_FUNCTIONS: tuple[str, ...] = tuple(member.value for member in HashFunction)


def get_hash_function(name: str | HashFunction | HashFunctionSpec) -> HashFunctionSpec:
    if isinstance(name, HashFunctionSpec):
        return name
    if isinstance(name, HashFunction):
        return HASH_FUNCTIONS[name]
    if isinstance(name, str):
        try:
            return HASH_FUNCTIONS[HashFunction(name.strip().lower())]
        except ValueError:
            pass
    raise UnsupportedHashFunctionError(name, SUPPORTED_HASH_FUNCTIONS)


__all__ = [
    "SIPHASH_KEY",
    "HashFunction",
    "HashFunctionSpec",
    "HASH_FUNCTIONS",
    "SUPPORTED_HASH_FUNCTIONS",
    "get_hash_function",
]
