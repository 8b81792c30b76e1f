"""Sørensen-Dice coefficient over n-gram sets or arbitrary collections."""

from __future__ import annotations

from typing import AbstractSet, Hashable, Iterable, Union

from .errors import InputTooShortError
from .ngrams import check_ngram_size, letter_ngrams
from .options import DEFAULT_NGRAM_SIZE

Attributes = Union[str, AbstractSet[Hashable], Iterable[Hashable]]


def _as_set(value: Iterable[Hashable]) -> AbstractSet[Hashable]:
    if isinstance(value, (set, frozenset)):
        return value
    return set(value)


def sorensen_dice(
    left: Attributes, right: Attributes, *, ngram_size: int = DEFAULT_NGRAM_SIZE
) -> float:
    """Return ``2 |A & B| / (|A| + |B|)``.

    Strings are compared by their sets of character n-grams and must both be
    at least ``ngram_size`` characters long. Lists, sets and other iterables are
    compared as sets of their elements. A string cannot be compared with a
    collection.
    """

    if isinstance(left, str) != isinstance(right, str):
        raise TypeError(
            "sorensen_dice compares two strings or two collections, "
            f"not {type(left).__name__} and {type(right).__name__}"
        )
    if isinstance(left, str):
        check_ngram_size(ngram_size)
        if left == right:
            return 1.0
        for text in (left, right):
            if len(text) < ngram_size:
                raise InputTooShortError(len(text), ngram_size)
        left = letter_ngrams(left, ngram_size)
        right = letter_ngrams(right, ngram_size)

    left_set = _as_set(left)
    right_set = _as_set(right)
    shared = len(left_set & right_set)
    if shared == 0:
        return 0.0
    return 2 * shared / (len(left_set) + len(right_set))


__all__ = ["sorensen_dice"]
