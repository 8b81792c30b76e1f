"""Simhash fingerprints for strings.

A string is split into character n-grams, each n-gram is hashed, and every bit
of every hash casts a +1/-1 vote for its position. The fingerprint keeps a 1
wherever the votes add up to a positive total. Similar strings share most of
their n-grams and therefore end up with fingerprints a small Hamming distance
apart.

    >>> similarity("we spoke", "bespoke")
    0.703125
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .encoding import EncodedFingerprint, encode
from .errors import InputTooShortError, LengthMismatchError
from .hashing import HashFunctionSpec
from .ngrams import check_ngram_size, letter_ngrams
from .options import DEFAULT_NGRAM_SIZE, SimhashOptions


def expand_bits(digest: bytes) -> list[int]:
    """Map each bit of ``digest`` to +1 (set) or -1 (clear), MSB first."""

    polarity: list[int] = []
    for byte in digest:
        for shift in range(7, -1, -1):
            polarity.append(1 if (byte >> shift) & 1 else -1)
    return polarity


def accumulate(ngrams: Iterable[str], spec: HashFunctionSpec) -> list[int]:
    weights = [0] * spec.bits
    seen = 0
    for ngram in ngrams:
        polarity = expand_bits(spec.hash(ngram.encode("utf-8")))
        for index, vote in enumerate(polarity):
            weights[index] += vote
        seen += 1
    if not seen:
        raise ValueError("cannot build a fingerprint from an empty n-gram sequence")
    return weights


def normalize(weights: Sequence[int]) -> list[int]:
    return [1 if weight > 0 else 0 for weight in weights]


def _check_length(text: str, ngram_size: int) -> None:
    if len(text) < ngram_size:
        raise InputTooShortError(len(text), ngram_size)


def _requested_ngram_size(options: SimhashOptions | None, overrides: dict[str, Any]) -> int:
    ngram_size = overrides.get("ngram_size")
    if ngram_size is None:
        ngram_size = options.ngram_size if options is not None else DEFAULT_NGRAM_SIZE
    return check_ngram_size(ngram_size)


def fingerprint(text: str, options: SimhashOptions | None = None, **overrides: Any) -> list[int]:
    """Return the fingerprint of ``text`` as a list of 0/1 bits.

    The input length is checked before the hash function and return type are
    validated.
    """

    _check_length(text, _requested_ngram_size(options, overrides))
    resolved = SimhashOptions.resolve(options, **overrides)
    weights = accumulate(letter_ngrams(text, resolved.ngram_size), resolved.spec)
    return normalize(weights)


def hash(text: str, options: SimhashOptions | None = None, **overrides: Any) -> EncodedFingerprint:
    """Return the fingerprint of ``text`` in the configured ``return_type``.

    ``int64_unsigned`` and ``int64_signed`` are only available for the 64-bit
    ``siphash`` backend; ``binary`` packs the bits into ``width // 8`` bytes.
    """

    _check_length(text, _requested_ngram_size(options, overrides))
    resolved = SimhashOptions.resolve(options, **overrides)
    return encode(fingerprint(text, resolved), resolved.return_type)


def hamming_distance(left: Sequence[int], right: Sequence[int]) -> int:
    if len(left) != len(right):
        raise LengthMismatchError(len(left), len(right))
    return sum(1 for a, b in zip(left, right) if a != b)


def hash_similarity(left: Sequence[int], right: Sequence[int], width: int | None = None) -> float:
    if width is None:
        width = len(left)
    return 1 - hamming_distance(left, right) / width


def fingerprint_pair(
    left: str, right: str, options: SimhashOptions | None = None, **overrides: Any
) -> tuple[list[int], list[int]]:
    ngram_size = _requested_ngram_size(options, overrides)
    _check_length(left, ngram_size)
    _check_length(right, ngram_size)
    resolved = SimhashOptions.resolve(options, **overrides)
    return fingerprint(left, resolved), fingerprint(right, resolved)


def similarity(
    left: str, right: str, options: SimhashOptions | None = None, **overrides: Any
) -> float:
    """Compare two strings by the Hamming distance of their fingerprints.

    Returns a value in ``[0, 1]``; equal strings always score 1.0. Both input
    lengths are checked before the hash function is validated.
    """

    left_bits, right_bits = fingerprint_pair(left, right, options, **overrides)
    width = SimhashOptions.resolve(options, **overrides).bits
    return hash_similarity(left_bits, right_bits, width)


__all__ = [
    "expand_bits",
    "accumulate",
    "normalize",
    "fingerprint",
    "fingerprint_pair",
    "hash",
    "hamming_distance",
    "hash_similarity",
    "similarity",
]
