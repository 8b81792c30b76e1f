"""Alternative representations of a fingerprint.

Every encoding keeps the bit order of the fingerprint: the first element of the
bit sequence becomes the most significant bit of the integer encodings and the
high bit of the first byte of the ``binary`` encoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence, Union

from .errors import UnsupportedEncodingError
from .hashing import HashFunctionSpec

INT64_BITS = 64

EncodedFingerprint = Union[list[int], int, bytes]


class EncodingKind(str, Enum):
    LIST = "list"
    INT64_UNSIGNED = "int64_unsigned"
    INT64_SIGNED = "int64_signed"
    BINARY = "binary"


SUPPORTED_ENCODINGS: tuple[str, ...] = tuple(member.value for member in EncodingKind)


def pack_bits(bits: Sequence[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value


def unpack_bits(value: int, width: int) -> list[int]:
    return [(value >> (width - 1 - index)) & 1 for index in range(width)]


def _encode_list(bits: Sequence[int]) -> list[int]:
    return list(bits)


def _decode_list(value: Sequence[int]) -> list[int]:
    return list(value)


def _encode_unsigned(bits: Sequence[int]) -> int:
    return pack_bits(bits)


def _decode_unsigned(value: int) -> list[int]:
    if not 0 <= value < 1 << INT64_BITS:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    return unpack_bits(value, INT64_BITS)


def _encode_signed(bits: Sequence[int]) -> int:
    value = pack_bits(bits)
    if value & (1 << (INT64_BITS - 1)):
        value -= 1 << INT64_BITS
    return value


def _decode_signed(value: int) -> list[int]:
    if not -(1 << (INT64_BITS - 1)) <= value < 1 << (INT64_BITS - 1):
        raise ValueError(f"{value} does not fit in a signed 64-bit integer")
    return unpack_bits(value & ((1 << INT64_BITS) - 1), INT64_BITS)


def _encode_binary(bits: Sequence[int]) -> bytes:
    return pack_bits(bits).to_bytes(len(bits) // 8, "big")


def _decode_binary(value: bytes) -> list[int]:
    return unpack_bits(int.from_bytes(value, "big"), len(value) * 8)


@dataclass(frozen=True)
class Encoder:
    kind: EncodingKind
    supports: Callable[[int], bool]
    encode: Callable[[Sequence[int]], EncodedFingerprint]
    decode: Callable[..., list[int]]
    requirement: str


ENCODERS: dict[EncodingKind, Encoder] = {
    EncodingKind.LIST: Encoder(
        EncodingKind.LIST, lambda width: True, _encode_list, _decode_list, "any width"
    ),
    EncodingKind.INT64_UNSIGNED: Encoder(
        EncodingKind.INT64_UNSIGNED,
        lambda width: width == INT64_BITS,
        _encode_unsigned,
        _decode_unsigned,
        "a 64-bit fingerprint",
    ),
    EncodingKind.INT64_SIGNED: Encoder(
        EncodingKind.INT64_SIGNED,
        lambda width: width == INT64_BITS,
        _encode_signed,
        _decode_signed,
        "a 64-bit fingerprint",
    ),
    EncodingKind.BINARY: Encoder(
        EncodingKind.BINARY,
        lambda width: width > 0 and width % 8 == 0,
        _encode_binary,
        _decode_binary,
        "a width divisible by 8",
    ),
}


def get_encoding(kind: str | EncodingKind) -> EncodingKind:
    if isinstance(kind, EncodingKind):
        return kind
    if isinstance(kind, str):
        try:
            return EncodingKind(kind.strip().lower())
        except ValueError:
            pass
    raise UnsupportedEncodingError(
        f"Unsupported return type: {kind!r} (expected one of {', '.join(SUPPORTED_ENCODINGS)})"
    )


def check_encoding(width: int | HashFunctionSpec, kind: str | EncodingKind) -> Encoder:
    """Return the encoder for ``kind`` or fail if it cannot hold ``width`` bits."""

    resolved = get_encoding(kind)
    if isinstance(width, HashFunctionSpec):
        label = f"hash function {width.name!r} ({width.bits} bits)"
        width = width.bits
    else:
        label = f"a {width}-bit fingerprint"
    encoder = ENCODERS[resolved]
    if not encoder.supports(width):
        raise UnsupportedEncodingError(
            f"Return type {resolved.value!r} requires {encoder.requirement}, "
            f"not {label}"
        )
    return encoder


def encode(bits: Sequence[int], kind: str | EncodingKind = EncodingKind.LIST) -> EncodedFingerprint:
    return check_encoding(len(bits), kind).encode(bits)


def decode(value: EncodedFingerprint, kind: str | EncodingKind = EncodingKind.LIST) -> list[int]:
    """Turn an encoded fingerprint back into its bit sequence."""

    return ENCODERS[get_encoding(kind)].decode(value)


__all__ = [
    "EncodingKind",
    "EncodedFingerprint",
    "Encoder",
    "ENCODERS",
    "SUPPORTED_ENCODINGS",
    "pack_bits",
    "unpack_bits",
    "get_encoding",
    "check_encoding",
    "encode",
    "decode",
]
