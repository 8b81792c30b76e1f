from __future__ import annotations

from .errors import InvalidNgramSizeError


def check_ngram_size(ngram_size: object) -> int:
    if isinstance(ngram_size, bool) or not isinstance(ngram_size, int) or ngram_size <= 0:
        raise InvalidNgramSizeError(ngram_size)
    return ngram_size


def letter_ngrams(text: str, n: int) -> list[str]:
    """Return the overlapping character n-grams of ``text`` in order.

    Windows are taken over code points. A string shorter than ``n`` yields no
    n-grams at all.
    """

    check_ngram_size(n)
    if len(text) < n:
        return []
    return [text[index : index + n] for index in range(len(text) - n + 1)]


__all__ = ["check_ngram_size", "letter_ngrams"]
